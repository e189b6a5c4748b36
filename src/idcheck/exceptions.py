"""idcheck exception hierarchy.

Validators never raise; these cover the layers around them (catalogue lookups,
configuration loading).
"""

from __future__ import annotations


class IdcheckError(Exception):
    """Base exception for all idcheck errors."""


class UnknownSchemeError(IdcheckError, KeyError):
    """Scheme name not present in the catalogue."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown scheme: {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class ConfigError(IdcheckError):
    """Configuration file could not be read or failed validation."""
