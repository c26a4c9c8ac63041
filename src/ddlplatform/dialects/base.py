"""
Dialect interfaces exposing a platform descriptor by name.
"""

from __future__ import annotations

from typing import Callable, Protocol

from ..core.snapshot import PlatformSnapshot

PlatformFactory = Callable[[], PlatformSnapshot]


class Dialect(Protocol):
    """
    Strategy interface consumed by DDL generation and schema comparison.
    """

    @property
    def name(self) -> str: ...

    @property
    def platform_info(self) -> PlatformSnapshot: ...
