"""Well-known locations inside the fuelup home and small filesystem helpers."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

FUELUP_DIR = ".fuelup"
FUELUP_HOME = "FUELUP_HOME"
FUEL_TOOLCHAIN_TOML_FILE = "fuel-toolchain.toml"

if os.name == "nt":
    CANONICAL_FUEL_HOME = r"%USERPROFILE%\.fuelup"
else:
    CANONICAL_FUEL_HOME = "$HOME/.fuelup"


def canonical_fuelup_dir() -> str:
    """Return the fuelup home for display, using the $HOME form when it is the default."""
    path = fuelup_dir()
    try:
        home = Path.home()
    except RuntimeError:
        home = Path(".")
    if home / FUELUP_DIR == path:
        return CANONICAL_FUEL_HOME
    return str(path)


def fuelup_dir() -> Path:
    return Path.home() / FUELUP_DIR


def fuelup_bin_dir() -> Path:
    return fuelup_dir() / "bin"


def fuelup_bin() -> Path:
    return fuelup_bin_dir() / "fuelup"


def fuelup_bin_or_current_bin() -> Path:
    """Return the installed fuelup binary, or the running program if it is missing."""
    binary = fuelup_bin()
    if binary.exists():
        return binary
    return Path(sys.argv[0]).resolve()


def fuelup_log_dir() -> Path:
    return fuelup_dir() / "log"


def settings_file() -> Path:
    return fuelup_dir() / "settings.toml"


def hashes_dir() -> Path:
    return fuelup_dir() / "hashes"


def toolchains_dir() -> Path:
    return fuelup_dir() / "toolchains"


def store_dir() -> Path:
    return fuelup_dir() / "store"


def fuelup_tmp_dir() -> Path:
    return fuelup_dir() / "tmp"


def toolchain_dir(toolchain: str) -> Path:
    return toolchains_dir() / toolchain


def toolchain_bin_dir(toolchain: str) -> Path:
    return toolchain_dir(toolchain) / "bin"


def ensure_dir_exists(path: str | os.PathLike) -> None:
    """Create ``path`` and its parents unless it is already a directory."""
    path = Path(path)
    if path.is_dir():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"Failed to create directory {path}: {exc}") from exc


def find_parent_dir_with_file(starter_path: str | os.PathLike, file_name: str) -> Path | None:
    """Walk up from ``starter_path`` and return the first directory holding ``file_name``.

    The filesystem root itself is not searched.
    """
    try:
        start = Path(starter_path).resolve(strict=True)
    except OSError:
        return None
    for directory in (start, *start.parents):
        if directory == Path(directory.anchor):
            break
        if (directory / file_name).exists():
            return directory
    return None


def get_fuel_toolchain_toml() -> Path | None:
    """Return the path of the nearest toolchain override file above the working directory."""
    parent = find_parent_dir_with_file(Path.cwd(), FUEL_TOOLCHAIN_TOML_FILE)
    return parent / FUEL_TOOLCHAIN_TOML_FILE if parent is not None else None


def is_executable(path: str | os.PathLike) -> bool:
    path = Path(path)
    if os.name == "nt":
        return path.is_file()
    try:
        info = path.stat()
    except OSError:
        return False
    return stat.S_ISREG(info.st_mode) and bool(info.st_mode & 0o111)