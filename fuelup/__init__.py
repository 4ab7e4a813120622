"""Fuel toolchain management: home paths, settings, toolchain names, overrides and the store."""

__version__ = "0.27.3"