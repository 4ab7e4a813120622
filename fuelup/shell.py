"""Shells whose start-up files may carry the fuelup PATH entry."""

from __future__ import annotations

import enum
from pathlib import Path

_RC_FILES = {
    "posix": (".profile",),
    "bash": (".bash_profile", ".bash_login", ".bashrc"),
    "zsh": (".zshenv", ".zprofile", ".zshrc", ".zlogin"),
    "fish": (".config/fish/config.fish",),
}


class Shell(enum.Enum):
    POSIX = "posix"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"

    def rc_files(self, home: Path | None = None) -> list[Path]:
        """Return this shell's start-up files under ``home`` (the user's home by default)."""
        base = Path(home) if home is not None else Path.home()
        return [base / name for name in _RC_FILES[self.value]]