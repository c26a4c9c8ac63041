"""
Process-wide registry of platform descriptors keyed by dialect name.
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, List, Mapping

from ..core.config import apply_settings
from ..core.errors import PlatformRegistrationError, UnknownPlatformError
from ..core.snapshot import PlatformSnapshot
from ..utils import get_logger, initialization_scope
from .base import PlatformFactory

_lock = RLock()
_factories: Dict[str, PlatformFactory] = {}
_built: Dict[str, PlatformSnapshot] = {}
logger = get_logger("dialects.registry")


def register_platform(name: str, factory: PlatformFactory, *, replace: bool = False) -> None:
    """
    Register the initialization function building the descriptor for ``name``.
    """
    with _lock:
        if name in _factories:
            if not replace:
                raise PlatformRegistrationError(f"Platform '{name}' is already registered")
            logger.warning("Replacing registered platform '%s'", name)
        _factories[name] = factory
        _built.pop(name, None)


def get_platform(name: str, overrides: Mapping[str, Any] | None = None) -> PlatformSnapshot:
    """
    Return the descriptor for ``name``, building it on first use.

    ``overrides`` are applied to a copy; the shared descriptor is unchanged.
    """
    with _lock:
        snapshot = _built.get(name)
        if snapshot is None:
            factory = _factories.get(name)
            if factory is None:
                raise UnknownPlatformError(name)
            with initialization_scope(name) as run_id:
                snapshot = factory()
                logger.debug("Built platform descriptor for '%s' (run %s)", name, run_id)
            _built[name] = snapshot
    if not overrides:
        return snapshot
    return apply_settings(snapshot.thaw(), overrides).freeze()


def available_platforms() -> List[str]:
    with _lock:
        return sorted(_factories)


def reset_platform_cache() -> None:
    with _lock:
        _built.clear()


def unregister_platform(name: str) -> None:
    with _lock:
        if _factories.pop(name, None) is None:
            raise UnknownPlatformError(name)
        _built.pop(name, None)
