"""Switching the active version of an SDK."""

from __future__ import annotations

import contextlib
import os
import sys
from os import PathLike
from pathlib import Path

from .config import ConfigError, load_properties
from .sysenv import EnvironmentStore, EnvType, RegistryError

DEFAULT_CONFIG_PATH = Path("..", "config", "application.properties")
JAVA_BIN_ENTRY = "%JAVA_HOME%\\bin"


class UseError(Exception):
    """Raised when a version cannot be activated."""


def module_root() -> Path:
    """Return the directory two levels above the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else "."
    return Path(program).resolve().parent.parent


def create_symbolic_link(
    link_path: str | PathLike[str], target_path: str | PathLike[str]
) -> None:
    """Point ``link_path`` at the directory ``target_path``, replacing what was there."""
    link = Path(link_path)
    try:
        if link.is_symlink() or link.is_file():
            link.unlink()
        elif link.exists():
            link.rmdir()
        os.symlink(target_path, link, target_is_directory=True)
    except OSError as exc:
        raise UseError(f"Failed to create symlink: {exc}") from exc


def is_path_in_environment(paths: list[str], target_path: str) -> bool:
    """Tell whether ``target_path`` is one of ``paths``."""
    return target_path in paths


def parse_path_environment(path_value: str) -> list[str]:
    """Split a PATH value at each ``;``, keeping empty entries."""
    return path_value.split(";")


def _base_path(properties: dict[str, str], key: str, default: Path) -> Path:
    configured = properties.get(key, "")
    return Path(configured) if configured else default


def use(
    sdk: str,
    version: str,
    config_path: str | PathLike[str] = DEFAULT_CONFIG_PATH,
    store: EnvironmentStore | None = None,
) -> Path:
    """Make ``version`` the active ``sdk`` and return the link that now points at it."""
    try:
        properties = load_properties(config_path)
    except ConfigError as exc:
        raise UseError(f"Config load failed: {exc}") from exc

    root = module_root()
    repository_path = (
        _base_path(properties, "repositoryBasePath", root / "repository") / sdk / version
    )
    link_path = _base_path(properties, "linkBasePath", root / "link") / sdk

    if not repository_path.exists():
        raise UseError("repositoryPath not exists")

    create_symbolic_link(link_path, repository_path)

    if store is None:
        try:
            store = EnvironmentStore(EnvType.USER)
        except RegistryError as exc:
            raise UseError(f"Config load failed: {exc}") from exc

    with contextlib.suppress(RegistryError):
        store.set("JAVA_HOME", str(link_path))

    path_value = store.get("PATH")
    if path_value is None:
        raise UseError("PATH environment variable not found.")

    if not is_path_in_environment(parse_path_environment(path_value), JAVA_BIN_ENTRY):
        addition = JAVA_BIN_ENTRY if not path_value or path_value.endswith(";") else ";" + JAVA_BIN_ENTRY
        try:
            store.append("PATH", addition)
        except RegistryError:
            print("Failed to append target path to PATH.", file=sys.stderr)

    return link_path