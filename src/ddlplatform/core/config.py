"""
Settings overrides for platform descriptors.

Settings are plain mappings of flag name to value, typically collected from
environment variables. String values are parsed according to the flag's
declared type.
"""

from __future__ import annotations

import os
from typing import Any, Mapping

from .errors import PlatformConfigurationError
from .flags import FLAG_NAMES, FLAG_TYPES
from .info import PlatformInfo

NATIVE_TYPES_KEY = "native_types"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise PlatformConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_int(value: str, *, key: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise PlatformConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


def _parse_flag(key: str, value: Any) -> Any:
    expected = FLAG_TYPES[key]
    if isinstance(value, str):
        if expected is bool:
            return _parse_bool(value, key=key)
        if expected is int:
            return _parse_int(value, key=key)
        return value
    if value is None and expected is str:
        return value
    if expected is int and isinstance(value, bool):
        raise PlatformConfigurationError(f"Invalid integer value for '{key}': {value!r}")
    if not isinstance(value, expected):
        raise PlatformConfigurationError(
            f"Invalid value for '{key}': expected {expected.__name__}, got {type(value).__name__}"
        )
    return value


def parse_settings(settings: Mapping[str, Any]) -> tuple[dict[str, Any], dict[Any, str]]:
    """
    Validate ``settings`` and split them into flag values and native types.
    """
    flags: dict[str, Any] = {}
    native_types: dict[Any, str] = {}
    for key, value in settings.items():
        if key == NATIVE_TYPES_KEY:
            if not isinstance(value, Mapping):
                raise PlatformConfigurationError(
                    f"'{NATIVE_TYPES_KEY}' must be a mapping, got {type(value).__name__}"
                )
            for type_key, native_type in value.items():
                if isinstance(type_key, bool) or not isinstance(type_key, (str, int)):
                    raise PlatformConfigurationError(
                        f"Native type keys must be type names or codes, got {type_key!r}"
                    )
                native_types[type_key] = native_type
            continue
        if key not in FLAG_NAMES:
            raise PlatformConfigurationError(f"Unknown platform setting '{key}'")
        flags[key] = _parse_flag(key, value)
    return flags, native_types


def apply_settings(info: PlatformInfo, settings: Mapping[str, Any]) -> PlatformInfo:
    """
    Apply ``settings`` to ``info``. Nothing is applied if any value is invalid.
    """
    flags, native_types = parse_settings(settings)
    if flags:
        info.configure(**flags)
    if native_types:
        info.add_native_type_mappings(native_types)
    return info


def settings_from_env(
    prefix: str = "DDLPLATFORM_", environ: Mapping[str, str] | None = None
) -> dict[str, str]:
    """
    Collect ``<PREFIX><FLAG>`` variables, e.g. ``DDLPLATFORM_MAX_IDENTIFIER_LENGTH``.
    """
    source = os.environ if environ is None else environ
    settings: dict[str, str] = {}
    for name in FLAG_NAMES:
        value = source.get(f"{prefix}{name.upper()}")
        if value is not None:
            settings[name] = value
    return settings
