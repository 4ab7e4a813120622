"""The fuelup settings file."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError


@dataclass
class Settings:
    default_toolchain: str | None = None

    @classmethod
    def parse(cls, text: str) -> Settings:
        """Parse settings from TOML text; unknown keys are ignored."""
        try:
            document = tomlkit.parse(text)
        except TOMLKitError as exc:
            raise ValueError(f"invalid settings: {exc}") from exc
        value = document.get("default_toolchain")
        if value is not None and not isinstance(value, str):
            raise ValueError("invalid settings: 'default_toolchain' must be a string")
        return cls(default_toolchain=str(value) if value is not None else None)

    def to_toml(self) -> str:
        data = {}
        if self.default_toolchain is not None:
            data["default_toolchain"] = self.default_toolchain
        return tomlkit.dumps(data)


class SettingsFile:
    """Settings stored at ``path``, loaded once and written back after each edit.

    A missing file is created with default settings on first access.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._cache: Settings | None = None

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self._cache.to_toml(), encoding="utf-8")

    def _load(self) -> Settings:
        if self._cache is None:
            if self.path.is_file():
                self._cache = Settings.parse(self.path.read_text(encoding="utf-8"))
            else:
                self._cache = Settings()
                self._write()
        return self._cache

    def read(self) -> Settings:
        """Return a copy of the current settings."""
        return dataclasses.replace(self._load())

    @contextmanager
    def edit(self) -> Iterator[Settings]:
        """Yield the settings for modification and save them when the block succeeds."""
        settings = self._load()
        yield settings
        self._write()