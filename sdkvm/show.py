"""Listing of the SDKs and versions held in the repository."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import TextIO

from .config import load_properties

DEFAULT_CONFIG_PATH = Path("..", "config", "application.properties")
DEFAULT_REPOSITORY_BASE_PATH = Path("..", "repository")


class ShowError(Exception):
    """Raised when there is nothing to show."""


def scan_directories(root_dir: str | PathLike[str]) -> list[tuple[str, str]]:
    """Return ``(sdk, version)`` for every directory two levels below ``root_dir``."""
    result = []
    for entry in sorted(Path(root_dir).iterdir()):
        if entry.is_dir():
            result.extend(
                (entry.name, sub.name) for sub in sorted(entry.iterdir()) if sub.is_dir()
            )
    return result


def display_directories(
    directories: list[tuple[str, str]], stream: TextIO | None = None
) -> None:
    """Write each pair as a tab-separated line."""
    out = stream if stream is not None else sys.stdout
    for first, second in directories:
        out.write(f"{first}\t{second}\n")


def show(
    config_path: str | PathLike[str] = DEFAULT_CONFIG_PATH, stream: TextIO | None = None
) -> list[tuple[str, str]]:
    """Print the installed SDK versions and return them."""
    properties = load_properties(config_path)
    configured = properties.get("repositoryBasePath", "")
    repository_path = Path(configured) if configured else DEFAULT_REPOSITORY_BASE_PATH

    if not repository_path.exists():
        raise ShowError("repositoryPath not exists")

    directories = scan_directories(repository_path)
    if not directories:
        raise ShowError("No directories found")

    display_directories(directories, stream)
    return directories