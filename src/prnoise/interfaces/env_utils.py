"""Shared environment variable helpers for interfaces."""

from __future__ import annotations

import os

from prnoise.shared.exceptions import ConfigurationError


def require_env(name: str) -> str:
    """Read a required environment variable or raise.

    Raises:
        ConfigurationError: If the variable is missing or empty.
    """
    value = os.environ.get(name)
    if not value:
        msg = f"Missing required environment variable: {name}"
        raise ConfigurationError(msg)
    return value


def optional_env(name: str) -> str | None:
    """Read an environment variable, treating empty strings as unset."""
    value = os.environ.get(name, "").strip()
    return value or None


def parse_int(name: str, raw: str) -> int:
    """Parse a positive integer env var or raise with a clear message."""
    try:
        value = int(raw)
    except ValueError:
        msg = f"Invalid integer for {name}: {raw!r}"
        raise ConfigurationError(msg) from None
    if value < 1:
        msg = f"{name} must be a positive integer, got {value}"
        raise ConfigurationError(msg)
    return value


def parse_bool(name: str, raw: str) -> bool:
    """Parse a ``true``/``false`` env var (case-insensitive)."""
    lowered = raw.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    msg = f"Invalid boolean for {name}: {raw!r}"
    raise ConfigurationError(msg)


def parse_list(raw: str) -> list[str]:
    """Split a comma- or newline-separated input into stripped items."""
    items = raw.replace("\n", ",").split(",")
    return [item.strip() for item in items if item.strip()]
