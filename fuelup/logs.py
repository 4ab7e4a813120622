"""Logging set-up and diagnostic log lines."""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from collections.abc import Sequence

from fuelup.path import FUELUP_DIR, FUELUP_HOME, fuelup_log_dir

LOGGER_NAME = "fuelup"
_logger = logging.getLogger(LOGGER_NAME)
_installed: list[logging.Handler] = []


def log_command(argv: Sequence[str] | None = None) -> None:
    args = sys.argv if argv is None else argv
    _logger.debug("Command: %s", " ".join(args))


def log_environment() -> None:
    path_value = os.environ.get("PATH")
    if path_value is not None:
        fuelup_path = next(
            (p for p in path_value.split(os.pathsep) if FUELUP_DIR in p), None
        )
        if fuelup_path is not None:
            _logger.debug("PATH includes %s", fuelup_path)
        else:
            _logger.debug("PATH does not include %s", FUELUP_DIR)
    home = os.environ.get(FUELUP_HOME)
    if home is not None:
        _logger.debug("FUELUP_HOME: %s", home)
    else:
        _logger.debug("FUELUP_HOME is not set")


class _QuietFileHandler(logging.handlers.TimedRotatingFileHandler):
    """File handler that counts write failures instead of reporting them."""

    dropped: int = 0

    def handleError(self, record: logging.LogRecord) -> None:
        self.dropped += 1


def init_tracing() -> logging.Logger:
    """Log debug output to an hourly rotated file and info output to stdout."""
    for handler in _installed:
        _logger.removeHandler(handler)
        handler.close()
    _installed.clear()

    log_dir = fuelup_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = _QuietFileHandler(log_dir / "fuelup.log", when="H", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.INFO)
    stdout_handler.setFormatter(logging.Formatter("%(message)s"))

    for handler in (file_handler, stdout_handler):
        _logger.addHandler(handler)
        _installed.append(handler)
    _logger.setLevel(logging.DEBUG)
    _logger.propagate = False
    return _logger