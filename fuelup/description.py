"""Names and descriptions of the distributed toolchains."""

from __future__ import annotations

import datetime
import enum
import re
from dataclasses import dataclass

from fuelup.target_triple import TargetTriple

LATEST = "latest"
NIGHTLY = "nightly"
TESTNET = "testnet"
MAINNET = "mainnet"
STABLE = "stable"
IGNITION = "ignition"

# Stable and ignition are reserved, although currently unused.
RESERVED_TOOLCHAIN_NAMES = (LATEST, NIGHTLY, TESTNET, MAINNET, STABLE, IGNITION)

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


class DistToolchainName(enum.Enum):
    LATEST = LATEST
    NIGHTLY = NIGHTLY
    TESTNET = TESTNET
    MAINNET = MAINNET

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, s: str) -> DistToolchainName:
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"Unknown name for toolchain: {s}") from None


def _parse_date(text: str) -> datetime.date | None:
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return None
    year, month, day = (int(group) for group in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


def _host_target() -> TargetTriple | None:
    try:
        return TargetTriple.from_host()
    except ValueError:
        return None


def extract_date(parts: list[str]) -> datetime.date | None:
    """Parse a ``YYYY-MM-DD`` date from the last three parts, removing them on success."""
    if len(parts) < 3:
        return None
    found = _parse_date("-".join(parts[-3:]))
    if found is not None:
        del parts[-3:]
    return found


def extract_target(parts: list[str]) -> TargetTriple | None:
    """Parse a target triple from the last three or four parts, removing them on success."""
    for count in (3, 4):
        if len(parts) < count:
            continue
        try:
            target = TargetTriple.parse("-".join(parts[-count:]))
        except ValueError:
            continue
        del parts[-count:]
        return target
    return None


@dataclass(frozen=True)
class DistToolchainDescription:
    name: DistToolchainName
    date: datetime.date | None = None
    target: TargetTriple | None = None

    def __str__(self) -> str:
        host = _host_target() or TargetTriple()
        if self.date is not None:
            return f"{self.name}-{self.date.isoformat()}-{host}"
        return f"{self.name}-{host}"

    @classmethod
    def parse(cls, s: str) -> DistToolchainDescription:
        """Parse a distributable toolchain description.

        Accepted forms, parsed from the end of the string::

            <channel>
            <channel>-<target>
            <channel>-<YYYY-MM-DD>
            <channel>-<YYYY-MM-DD>-<target>
            <channel>-<target>-<YYYY-MM-DD>
        """
        if s.endswith("-") and s.count("-") == 1:
            raise ValueError(f"Invalid distributable toolchain name '{s}'")

        parts = s.split("-")
        if len(parts) == 1:
            return cls(name=DistToolchainName.parse(parts[0]), target=_host_target())

        date = extract_date(parts)
        target = extract_target(parts)
        if date is None and target is not None:
            date = extract_date(parts)

        name = DistToolchainName.parse("-".join(parts))
        return cls(
            name=name,
            date=date,
            target=target if target is not None else _host_target(),
        )