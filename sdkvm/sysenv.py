"""Persistent environment variables kept in a registry-like store."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from enum import Enum


class EnvType(Enum):
    """Which set of environment variables to work on."""

    SYSTEM = "system"
    USER = "user"


class RegistryError(Exception):
    """Raised when the variable store cannot be read or written."""


class _WindowsRegistry(MutableMapping):
    """The ``Environment`` key of the Windows registry as a mapping."""

    def __init__(self, env_type: EnvType) -> None:
        try:
            import winreg
        except ImportError as exc:
            raise RegistryError("the Windows registry is not available") from exc
        self._winreg = winreg
        self._root = (
            winreg.HKEY_LOCAL_MACHINE if env_type is EnvType.SYSTEM else winreg.HKEY_CURRENT_USER
        )

    @contextmanager
    def _open(self, access: int):
        try:
            key = self._winreg.OpenKey(self._root, "Environment", 0, access)
        except OSError as exc:
            raise RegistryError("Failed to open registry key.") from exc
        with key:
            yield key

    def __getitem__(self, name: str) -> str:
        with self._open(self._winreg.KEY_READ) as key:
            try:
                value, _ = self._winreg.QueryValueEx(key, name)
            except FileNotFoundError:
                raise KeyError(name) from None
            except OSError as exc:
                raise RegistryError(f"Failed to read {name!r}") from exc
        return str(value)

    def __setitem__(self, name: str, value: str) -> None:
        with self._open(self._winreg.KEY_SET_VALUE) as key:
            try:
                self._winreg.SetValueEx(key, name, 0, self._winreg.REG_SZ, value)
            except OSError as exc:
                raise RegistryError(f"Failed to write {name!r}") from exc

    def __delitem__(self, name: str) -> None:
        with self._open(self._winreg.KEY_SET_VALUE) as key:
            try:
                self._winreg.DeleteValue(key, name)
            except FileNotFoundError:
                raise KeyError(name) from None
            except OSError as exc:
                raise RegistryError(f"Failed to delete {name!r}") from exc

    def __contains__(self, name: object) -> bool:
        try:
            self[name]  # type: ignore[index]
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[str]:
        string_types = (self._winreg.REG_SZ, self._winreg.REG_EXPAND_SZ)
        names = []
        with self._open(self._winreg.KEY_READ) as key:
            for index in itertools.count():
                try:
                    name, _, value_type = self._winreg.EnumValue(key, index)
                except OSError:
                    break
                if value_type in string_types:
                    names.append(name)
        return iter(names)

    def __len__(self) -> int:
        return sum(1 for _ in self)


class EnvironmentStore:
    """Reads and writes persistent environment variables.

    ``registry`` is any mutable mapping of names to values; by default the
    Windows registry for the chosen ``env_type`` is used.
    """

    def __init__(
        self,
        env_type: EnvType = EnvType.USER,
        registry: MutableMapping[str, str] | None = None,
    ) -> None:
        self.env_type = env_type
        self._registry = registry if registry is not None else _WindowsRegistry(env_type)

    def items(self) -> list[tuple[str, str]]:
        """Return every variable as a ``(name, value)`` pair."""
        return list(self._registry.items())

    def delete(self, key: str) -> None:
        """Remove a variable; raise KeyError if it does not exist."""
        try:
            del self._registry[key]
        except KeyError:
            raise KeyError(key) from None

    def contains(self, key: str) -> bool:
        """Tell whether a variable exists."""
        try:
            return key in self._registry
        except RegistryError:
            return False

    def rename(self, old_key: str, new_key: str) -> None:
        """Give a variable a new name, keeping its value."""
        if not self.contains(old_key):
            raise KeyError(old_key)
        if self.contains(new_key):
            raise RegistryError(f"{new_key!r} already exists")
        value = self.get(old_key)
        if value is None:
            raise KeyError(old_key)
        self.set(new_key, value)
        self.delete(old_key)

    def set(self, key: str, value: str) -> None:
        """Store a value under a name."""
        self._registry[key] = value

    def get(self, key: str) -> str | None:
        """Return a variable's value, or None if it cannot be read."""
        try:
            return self._registry[key]
        except (KeyError, RegistryError):
            return None

    def replace(self, key: str, value: str) -> str | None:
        """Store a value and return the one it replaced."""
        old_value = self.get(key)
        self.set(key, value)
        return old_value

    def append(self, key: str, value: str) -> str | None:
        """Append text to a variable's value and return the previous value."""
        old_value = self.get(key)
        self.set(key, value if old_value is None else old_value + value)
        return old_value