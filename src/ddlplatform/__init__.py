"""
ddlplatform public package initialization.

Database platform descriptors: how a dialect renders DDL and which native
types it uses for each abstract SQL type code.
"""

from .core import (  # noqa: F401
    FLAG_NAMES,
    PlatformConfigurationError,
    PlatformError,
    PlatformFlags,
    PlatformInfo,
    PlatformRegistrationError,
    PlatformSnapshot,
    TypeCode,
    UnknownPlatformError,
    apply_settings,
    resolve_type_code,
    settings_from_env,
)
from .dialects import (  # noqa: F401
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    available_platforms,
    get_platform,
    register_platform,
)

__all__ = [
    "FLAG_NAMES",
    "PlatformConfigurationError",
    "PlatformError",
    "PlatformFlags",
    "PlatformInfo",
    "PlatformRegistrationError",
    "PlatformSnapshot",
    "TypeCode",
    "UnknownPlatformError",
    "apply_settings",
    "resolve_type_code",
    "settings_from_env",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "available_platforms",
    "get_platform",
    "register_platform",
]
