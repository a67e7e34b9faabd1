[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdkvm"
version = "0.0.1"
description = "Switch between installed SDK versions by relinking a directory and updating the user environment"
requires-python = ">=3.10"
dependencies = []
keywords = ["sdk", "version", "manager", "jdk", "symlink", "environment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sdkvm = "sdkvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sdkvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
