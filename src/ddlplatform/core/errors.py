"""
Error hierarchy for ddlplatform.

Descriptor reads and writes never raise; these errors cover the layers around
the descriptor (settings parsing and the dialect registry).
"""

from __future__ import annotations


class PlatformError(Exception):
    """Base error for platform descriptor failures."""


class PlatformConfigurationError(PlatformError):
    """Raised when settings supplied for a descriptor cannot be applied."""


class PlatformRegistrationError(PlatformError):
    """Raised when a dialect name is registered twice."""


class UnknownPlatformError(PlatformError, KeyError):
    """Raised when looking up a dialect that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No platform registered under '{name}'")

    def __str__(self) -> str:
        return str(self.args[0])
