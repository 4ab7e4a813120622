"""Target triples naming the platforms binaries are published for."""

from __future__ import annotations

import platform
from dataclasses import dataclass

_ARCHITECTURES = ("aarch64", "x86_64")
_VENDORS = ("apple", "unknown")
_OSES = ("darwin", "linux-gnu")

_MACHINE_ALIASES = {
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "x86_64": "x86_64",
    "amd64": "x86_64",
}


def _host_arch() -> str:
    machine = platform.machine()
    try:
        return _MACHINE_ALIASES[machine.lower()]
    except KeyError:
        raise ValueError(f"Unsupported architecture: {machine}") from None


def _host_os() -> str:
    system = platform.system()
    if system == "Darwin":
        return "macos"
    if system == "Linux":
        return "linux"
    raise ValueError(f"Unsupported os: {system.lower()}")


@dataclass(frozen=True, order=True)
class TargetTriple:
    value: str = ""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, s: str) -> TargetTriple:
        """Validate ``<arch>-<vendor>-<os>`` against the supported platforms."""
        architecture, sep, rest = s.partition("-")
        if not sep:
            raise ValueError("missing vendor-os specifier")
        vendor, sep, os_name = rest.partition("-")
        if not sep:
            raise ValueError("missing os specifier")
        if architecture not in _ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: '{architecture}'")
        if vendor not in _VENDORS:
            raise ValueError(f"Unsupported vendor: '{vendor}'")
        if os_name not in _OSES:
            raise ValueError(f"Unsupported os: '{os_name}'")
        return cls(s)

    @classmethod
    def from_host(cls) -> TargetTriple:
        architecture = _host_arch()
        os_name = _host_os()
        vendor = "apple" if os_name == "macos" else "unknown"
        os_part = "darwin" if os_name == "macos" else "linux-gnu"
        return cls(f"{architecture}-{vendor}-{os_part}")

    @classmethod
    def from_component(cls, distributed_by_forc: bool) -> TargetTriple:
        """Return the host triple in the form used by a component's releases.

        Components distributed with forc use ``<darwin|linux>_<arm64|amd64>``;
        all others use the ``<arch>-<vendor>-<os>`` form.
        """
        if not distributed_by_forc:
            return cls.from_host()
        os_name = _host_os()
        architecture = _host_arch()
        os_part = "darwin" if os_name == "macos" else "linux"
        arch_part = "arm64" if architecture == "aarch64" else "amd64"
        return cls(f"{os_part}_{arch_part}")