"""Creating custom toolchains."""

from __future__ import annotations

import logging

from fuelup.description import DistToolchainDescription
from fuelup.logs import LOGGER_NAME
from fuelup.path import ensure_dir_exists, settings_file, toolchain_bin_dir
from fuelup.settings import SettingsFile
from fuelup.toolchain import Toolchain

_logger = logging.getLogger(LOGGER_NAME)


def _is_distributable_name(name: str) -> bool:
    try:
        DistToolchainDescription.parse(name)
    except ValueError:
        return False
    return True


def new_toolchain(name: str) -> Toolchain:
    """Create an empty custom toolchain and make it the default."""
    if _is_distributable_name(name):
        raise ValueError(
            f"Cannot use distributable toolchain name '{name}' as a custom toolchain name"
        )
    if name in Toolchain.all():
        raise ValueError(f"Toolchain with name '{name}' already exists")

    with SettingsFile(settings_file()).edit() as settings:
        settings.default_toolchain = name

    ensure_dir_exists(toolchain_bin_dir(name))
    _logger.info(
        "New toolchain initialized: %s\nDefault toolchain set to '%s'", name, name
    )
    return Toolchain.from_path(name)