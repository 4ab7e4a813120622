"""The 'fuel-toolchain.toml' file that pins a project's toolchain."""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from pathlib import Path

import semver
import tomlkit
from tomlkit.exceptions import TOMLKitError

from fuelup.description import (
    LATEST,
    MAINNET,
    NIGHTLY,
    TESTNET,
    DistToolchainDescription,
)
from fuelup.logs import LOGGER_NAME
from fuelup.path import FUEL_TOOLCHAIN_TOML_FILE, get_fuel_toolchain_toml

_logger = logging.getLogger(LOGGER_NAME)

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_BARE_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")
_EXPECTED_CHANNEL = "one of <latest-YYYY-MM-DD|nightly-YYYY-MM-DD|testnet|mainnet>"


def _parse_date(text: str) -> datetime.date | None:
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return None
    try:
        return datetime.date(*(int(group) for group in match.groups()))
    except ValueError:
        return None


def _is_dateless_distributed_toolchain(s: str) -> bool:
    try:
        description = DistToolchainDescription.parse(s)
    except ValueError:
        return False
    return description.date is None and str(description.name) in (TESTNET, MAINNET)


def _toml_key(key: str) -> str:
    return key if _BARE_KEY_RE.fullmatch(key) else tomlkit.string(key).as_string()


def _toml_str(value: str) -> str:
    return tomlkit.string(value).as_string()


@dataclass(frozen=True)
class Channel:
    name: str
    date: datetime.date | None = None

    def __str__(self) -> str:
        if self.date is not None:
            return f"{self.name}-{self.date.isoformat()}"
        return self.name

    @classmethod
    def parse(cls, s: str) -> Channel:
        """Parse a channel; 'latest' and 'nightly' must carry a date."""
        if _is_dateless_distributed_toolchain(s):
            return cls(name=s)
        name, sep, rest = s.partition("-")
        if sep:
            return cls(name=name, date=_parse_date(rest))
        if s in (LATEST, NIGHTLY):
            raise ValueError(f"'{s}' without date specifier is forbidden")
        raise ValueError(f"Invalid str for channel: '{s}'")


@dataclass
class OverrideCfg:
    """The contents of a 'fuel-toolchain.toml' file."""

    channel: Channel
    components: dict[str, semver.Version] | None = None

    @classmethod
    def from_toml(cls, text: str) -> OverrideCfg:
        try:
            data = tomlkit.parse(text).unwrap()
        except TOMLKitError as exc:
            raise ValueError(f"invalid {FUEL_TOOLCHAIN_TOML_FILE}: {exc}") from exc

        toolchain = data.get("toolchain")
        if toolchain is None:
            raise ValueError("missing field `toolchain`")
        if not isinstance(toolchain, dict):
            raise ValueError("invalid type for `toolchain`: expected a table")
        raw_channel = toolchain.get("channel")
        if raw_channel is None:
            raise ValueError("missing field `channel`")
        if not isinstance(raw_channel, str):
            raise ValueError("invalid type for `channel`: expected a string")
        try:
            channel = Channel.parse(raw_channel)
        except ValueError:
            raise ValueError(
                f'invalid value: string "{raw_channel}", expected {_EXPECTED_CHANNEL}'
            ) from None

        components = None
        raw_components = data.get("components")
        if raw_components is not None:
            if not isinstance(raw_components, dict):
                raise ValueError("invalid type for `components`: expected a table")
            components = {}
            for name, version in raw_components.items():
                if not isinstance(version, str):
                    raise ValueError(f"invalid version for component '{name}'")
                try:
                    components[name] = semver.Version.parse(version)
                except ValueError as exc:
                    raise ValueError(
                        f"invalid version '{version}' for component '{name}': {exc}"
                    ) from exc

        try:
            DistToolchainDescription.parse(str(channel))
        except ValueError:
            raise ValueError(f"Invalid channel '{channel}'") from None

        if components is not None and not components:
            raise ValueError("'[components]' table is declared with no components")

        return cls(channel=channel, components=components)

    def to_string_pretty(self) -> str:
        lines = ["[toolchain]", f"channel = {_toml_str(str(self.channel))}"]
        if self.components is not None:
            lines += ["", "[components]"]
            lines += [
                f"{_toml_key(name)} = {_toml_str(str(version))}"
                for name, version in self.components.items()
            ]
        return "\n".join(lines) + "\n"


@dataclass
class ToolchainOverride:
    """An override configuration together with the file it was read from."""

    cfg: OverrideCfg
    path: Path

    @classmethod
    def from_path(cls, path: str | Path) -> ToolchainOverride:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise OSError(f"failed to read {FUEL_TOOLCHAIN_TOML_FILE} at {path}: {exc}") from exc
        return cls(cfg=OverrideCfg.from_toml(text), path=path)

    @classmethod
    def from_project_root(cls) -> ToolchainOverride | None:
        """Load the nearest override file above the working directory, if any is valid."""
        found = get_fuel_toolchain_toml()
        if found is None:
            return None
        try:
            return cls.from_path(found)
        except (OSError, ValueError) as exc:
            _logger.warning("warning: invalid 'fuel-toolchain.toml' in project root: %s", exc)
            return None

    def to_toml(self) -> tomlkit.TOMLDocument:
        document = tomlkit.document()
        toolchain = tomlkit.table()
        toolchain.add("channel", str(self.cfg.channel))
        document.add("toolchain", toolchain)
        if self.cfg.components is not None:
            components = tomlkit.table()
            for name, version in self.cfg.components.items():
                components.add(name, str(version))
            document.add("components", components)
        return document

    def get_component_version(self, component: str) -> semver.Version | None:
        if self.cfg.components is None:
            return None
        return self.cfg.components.get(component)