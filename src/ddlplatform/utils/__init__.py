"""
Utility helpers shared across ddlplatform packages.
"""

from .logging import (
    configure_logging,
    current_initialization_id,
    get_logger,
    initialization_scope,
)

__all__ = ["configure_logging", "current_initialization_id", "get_logger", "initialization_scope"]
