"""
Platform descriptor core: type codes, capability flags and type registry.
"""

from .config import apply_settings, parse_settings, settings_from_env
from .errors import (
    PlatformConfigurationError,
    PlatformError,
    PlatformRegistrationError,
    UnknownPlatformError,
)
from .flags import FLAG_NAMES, PlatformFlags
from .info import PlatformInfo
from .snapshot import PlatformSnapshot
from .type_codes import (
    FULL_VOCABULARY,
    JDBC2_VOCABULARY,
    TypeCode,
    resolve_type_code,
    type_code_name,
)

__all__ = [
    "FLAG_NAMES",
    "FULL_VOCABULARY",
    "JDBC2_VOCABULARY",
    "PlatformConfigurationError",
    "PlatformError",
    "PlatformFlags",
    "PlatformInfo",
    "PlatformRegistrationError",
    "PlatformSnapshot",
    "TypeCode",
    "UnknownPlatformError",
    "apply_settings",
    "parse_settings",
    "resolve_type_code",
    "settings_from_env",
    "type_code_name",
]
