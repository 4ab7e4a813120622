"""Installed toolchains inside the fuelup home."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fuelup.description import RESERVED_TOOLCHAIN_NAMES
from fuelup.path import settings_file, toolchain_bin_dir, toolchain_dir, toolchains_dir
from fuelup.settings import SettingsFile
from fuelup.target_triple import TargetTriple

_NO_DEFAULT = "No default toolchain detected. Please install or create a toolchain first."


@dataclass(frozen=True)
class Toolchain:
    name: str
    path: Path
    bin_path: Path

    @classmethod
    def new(cls, name: str) -> Toolchain:
        """Return the toolchain ``<name>-<host target>``."""
        full_name = f"{name}-{TargetTriple.from_host()}"
        return cls.from_path(full_name)

    @classmethod
    def all(cls) -> list[str]:
        """Return the names of every installed toolchain, sorted."""
        directory = toolchains_dir()
        if not directory.is_dir():
            return []
        return sorted(entry.name for entry in directory.iterdir() if entry.is_dir())

    @classmethod
    def from_path(cls, name: str) -> Toolchain:
        return cls(name=name, path=toolchain_dir(name), bin_path=toolchain_bin_dir(name))

    @classmethod
    def from_settings(cls) -> Toolchain:
        """Return the default toolchain recorded in the settings file.

        Raises LookupError when no default toolchain is set.
        """
        path = settings_file()
        if path.exists():
            default = SettingsFile(path).read().default_toolchain
            if default is not None:
                return cls.from_path(default)
        raise LookupError(_NO_DEFAULT)

    def is_distributed(self) -> bool:
        """Whether the toolchain's name starts with a reserved channel name."""
        return self.name.partition("-")[0] in RESERVED_TOOLCHAIN_NAMES

    def exists(self) -> bool:
        return self.path.is_dir()

    def has_executables(self, executables: Iterable[str]) -> bool:
        """Whether every one of ``executables`` is a file in the toolchain's bin directory."""
        return all((self.bin_path / name).is_file() for name in executables)

    def remove_executables(self, executables: Iterable[str]) -> None:
        for name in executables:
            try:
                (self.bin_path / name).unlink()
            except OSError as exc:
                raise OSError(f"failed to remove executable '{name}': {exc}") from exc