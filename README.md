# sdkvm

A small SDK version manager. SDKs are kept in a repository directory laid out
as `<repository>/<sdk_name>/<sdk_version>/`. Selecting a version points a
directory symbolic link at it from `<link>/<sdk_name>`. It also sets
`JAVA_HOME` to that link in the user environment and adds `%JAVA_HOME%\bin`
to the user's `PATH`.

## Installation

```
pip install .
```

## Usage

```
sdkvm help
sdkvm show
sdkvm use <sdk_name> <sdk_version>
```

- `sdkvm help` prints the version and the usage lines.
- `sdkvm show` lists every SDK and version found in the repository, sorted by
  name. It prints one per line, with the name and the version separated by a
  tab. If the repository does not exist or holds no version directories, a
  message goes to standard error. If the configuration file cannot be read,
  the command exits with status 1.
- `sdkvm use jdk 21` replaces whatever is at `<link>/jdk` with a directory
  symbolic link to `<repository>/jdk/21`. It then sets `JAVA_HOME` to the link
  in the user environment. It appends `%JAVA_HOME%\bin` to the user `PATH`
  unless `PATH` already has that exact entry. The entry is added with a `;`
  separator only when `PATH` is not empty and does not already end in `;`.
  Errors, such as a missing version directory or a missing `PATH` variable,
  are printed to standard error.

Any other set of arguments prints an error banner followed by the usage.

## Configuration

Settings are read from `../config/application.properties`, relative to the
working directory. The file holds simple `key=value` lines. Each line is split
at its first `=`. Lines without one are ignored. When a key appears more than
once, the last value wins.

```
repositoryBasePath=D:\sdk\repository
linkBasePath=D:\sdk\link
```

When a key is missing or empty, these defaults apply:

- `sdkvm show` looks in `../repository`, relative to the working directory.
- `sdkvm use` uses the `repository` and `link` directories two levels above
  the running program.

## Platform notes

User environment variables are stored in the Windows registry, under the
current user's `Environment` key. On other systems `sdkvm use` still creates
the link. It then reports that the registry is not available and leaves the
environment unchanged. Creating directory symbolic links may require
developer mode or administrator rights on Windows.

## What it does not do

sdkvm does not download, install or remove SDKs. You place them in the
repository yourself. It manages only `JAVA_HOME` and the `%JAVA_HOME%\bin`
entry of `PATH`, whatever SDK is selected.

## Library use

The pieces can also be used from Python.

- `sdkvm.config.load_properties(path)` reads a properties file into a dict.
  It raises `ConfigError` when the file cannot be opened.
- `sdkvm.show.scan_directories(root)` returns the sorted `(sdk, version)`
  pairs found under a repository.
- `sdkvm.show.show(config_path, stream)` prints those pairs to `stream` and
  returns them. It raises `ShowError` when there is nothing to show.
- `sdkvm.use.use(sdk, version, config_path, store)` activates a version and
  returns the link path. It raises `UseError` on failure.
- `sdkvm.use.parse_path_environment(value)` splits a `;`-separated `PATH`
  value, keeping empty entries.
- `sdkvm.sysenv.EnvironmentStore(env_type, registry)` reads and writes user
  or system environment variables. Its methods are `items`, `get`, `set`,
  `contains`, `delete`, `rename`, `replace` and `append`. Any mutable mapping
  can be passed as `registry` in place of the Windows registry:

```python
from sdkvm.sysenv import EnvironmentStore, EnvType

store = EnvironmentStore(EnvType.USER, registry={"PATH": "C:\\tools"})
store.append("PATH", ";C:\\more")
print(store.get("PATH"))  # C:\tools;C:\more
```