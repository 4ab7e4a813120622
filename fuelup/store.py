"""The store holding every installed component version."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fuelup.path import ensure_dir_exists, store_dir


def component_dirname(component_name: str, version: object) -> str:
    """Return the store directory name for a component version, e.g. 'fuel-core-0.15.1'."""
    return f"{component_name}-{version}"


@dataclass(frozen=True)
class Store:
    path: Path

    @classmethod
    def from_env(cls) -> Store:
        """Open the store in the fuelup home, creating its directory if needed."""
        path = store_dir()
        ensure_dir_exists(path)
        return cls(path)

    def component_dir_path(self, component_name: str, version: object) -> Path:
        return self.path / component_dirname(component_name, version)

    def has_component(self, component_name: str, version: object) -> bool:
        return self.component_dir_path(component_name, version).exists()