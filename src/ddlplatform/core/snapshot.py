"""
Immutable platform descriptor shared by readers once setup has finished.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping

from .flags import FLAG_NAMES, PlatformFlags
from .info import PlatformInfo
from .type_codes import FULL_VOCABULARY


@dataclass(frozen=True)
class PlatformSnapshot:
    """
    Frozen view of a :class:`PlatformInfo`.

    Flags are readable as attributes (``snapshot.delimiter_token``), exactly
    as on the mutable descriptor. There are no mutators; use :meth:`thaw` to
    derive a reconfigurable copy.
    """

    flags: PlatformFlags
    native_types: Mapping[int, str]
    types_with_null_default: FrozenSet[int]
    types_with_size: FrozenSet[int]
    types_with_precision_and_scale: FrozenSet[int]
    vocabulary: Mapping[str, int] = field(
        default_factory=lambda: FULL_VOCABULARY, compare=False, repr=False
    )

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found normally.
        if name in FLAG_NAMES:
            return getattr(self.flags, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def native_type(self, type_code: int) -> str | None:
        return self.native_types.get(int(type_code))

    def native_type_mappings(self) -> dict[int, str]:
        return dict(self.native_types)

    def has_null_default(self, type_code: int) -> bool:
        return int(type_code) in self.types_with_null_default

    def has_size(self, type_code: int) -> bool:
        return int(type_code) in self.types_with_size

    def has_precision_and_scale(self, type_code: int) -> bool:
        return int(type_code) in self.types_with_precision_and_scale

    def thaw(self) -> PlatformInfo:
        """
        Return a new mutable :class:`PlatformInfo` holding this state.
        """
        return PlatformInfo._from_state(
            flags=self.flags,
            native_types=self.native_types,
            types_with_null_default=self.types_with_null_default,
            types_with_size=self.types_with_size,
            types_with_precision_and_scale=self.types_with_precision_and_scale,
            vocabulary=self.vocabulary,
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # Mapping proxies cannot be pickled; rebuild from plain dicts.
        vocabulary = None if self.vocabulary is FULL_VOCABULARY else dict(self.vocabulary)
        return (
            _restore_snapshot,
            (
                self.flags,
                dict(self.native_types),
                self.types_with_null_default,
                self.types_with_size,
                self.types_with_precision_and_scale,
                vocabulary,
            ),
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.flags,
                frozenset(self.native_types.items()),
                self.types_with_null_default,
                self.types_with_size,
                self.types_with_precision_and_scale,
            )
        )


def _restore_snapshot(
    flags: PlatformFlags,
    native_types: Mapping[int, str],
    types_with_null_default: FrozenSet[int],
    types_with_size: FrozenSet[int],
    types_with_precision_and_scale: FrozenSet[int],
    vocabulary: Mapping[str, int] | None,
) -> PlatformSnapshot:
    return PlatformSnapshot(
        flags=flags,
        native_types=MappingProxyType(dict(native_types)),
        types_with_null_default=types_with_null_default,
        types_with_size=types_with_size,
        types_with_precision_and_scale=types_with_precision_and_scale,
        vocabulary=FULL_VOCABULARY if vocabulary is None else MappingProxyType(dict(vocabulary)),
    )
