"""Loading of ``key=value`` property files."""

from __future__ import annotations

from os import PathLike
from pathlib import Path


class ConfigError(Exception):
    """Raised when a property file cannot be read."""


def load_properties(file_path: str | PathLike[str]) -> dict[str, str]:
    """Read a property file into a dictionary.

    Each line is split at its first ``=``; lines without one are ignored.
    A key given more than once keeps its last value.
    """
    try:
        with Path(file_path).open(encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise ConfigError(f"Failed to open file: {file_path}") from exc

    properties: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        if sep:
            properties[key] = value
    return properties