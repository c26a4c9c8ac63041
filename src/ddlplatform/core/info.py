"""
Mutable platform descriptor used while a dialect is being set up.
"""

from __future__ import annotations

from dataclasses import replace
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Set

from ..utils import get_logger
from .flags import FLAG_COERCIONS, FLAG_NAMES, FlagProperty, PlatformFlags
from .type_codes import FULL_VOCABULARY, TypeCode, resolve_type_code

if TYPE_CHECKING:
    from .snapshot import PlatformSnapshot


DEFAULT_NULL_DEFAULT_TYPES: frozenset[int] = frozenset(
    {
        TypeCode.CHAR,
        TypeCode.VARCHAR,
        TypeCode.LONGVARCHAR,
        TypeCode.CLOB,
        TypeCode.BINARY,
        TypeCode.VARBINARY,
        TypeCode.LONGVARBINARY,
        TypeCode.BLOB,
    }
)

DEFAULT_SIZED_TYPES: frozenset[int] = frozenset(
    {TypeCode.CHAR, TypeCode.VARCHAR, TypeCode.BINARY, TypeCode.VARBINARY}
)

DEFAULT_PRECISION_AND_SCALE_TYPES: frozenset[int] = frozenset(
    {TypeCode.DECIMAL, TypeCode.NUMERIC}
)


def _toggle(members: Set[int], type_code: int, present: bool) -> None:
    if present:
        members.add(int(type_code))
    else:
        members.discard(int(type_code))


class PlatformInfo:
    """
    Capability flags and native type registry for one database dialect.

    Built once per dialect by its initialization code, then frozen with
    :meth:`freeze` for the read-mostly steady state. All mutations are
    serialized behind a single re-entrant lock.
    """

    requires_null_as_default_value = FlagProperty[bool](
        "Whether NULL must be written for columns without a default value."
    )
    primary_key_embedded = FlagProperty[bool](
        "Whether primary keys are embedded in the CREATE TABLE statement."
    )
    foreign_keys_embedded = FlagProperty[bool](
        "Whether foreign keys are embedded in the CREATE TABLE statement."
    )
    indices_embedded = FlagProperty[bool](
        "Whether indices are embedded in the CREATE TABLE statement."
    )
    embedded_foreign_keys_named = FlagProperty[bool](
        "Whether embedded foreign key constraints carry an explicit name."
    )
    use_alter_table_for_drop = FlagProperty[bool](
        "Whether ALTER TABLE is needed to drop indices or constraints."
    )
    max_identifier_length = FlagProperty[int](
        "Maximum identifier length, -1 if unlimited."
    )
    case_sensitive = FlagProperty[bool]("Whether identifiers are case sensitive.")
    use_delimited_identifiers = FlagProperty[bool](
        "Whether identifiers are wrapped in the delimiter token."
    )
    delimiter_token = FlagProperty[str]("Text delimiting identifiers.")
    value_quote_token = FlagProperty[str]("Text quoting literal values.")
    comments_supported = FlagProperty[bool]("Whether the database supports comments.")
    comment_prefix = FlagProperty[str]("Text starting a comment; None is stored as ''.")
    comment_suffix = FlagProperty[str]("Text ending a comment; None is stored as ''.")
    sql_command_delimiter = FlagProperty[str]("Text separating SQL statements.")

    def __init__(self, *, vocabulary: Mapping[str, int] | None = None) -> None:
        self.vocabulary: Mapping[str, int] = FULL_VOCABULARY if vocabulary is None else vocabulary
        self.logger = get_logger("core.info")
        self._lock = RLock()
        self._flags = PlatformFlags()
        self._native_types: Dict[int, str] = {}
        self._types_with_null_default: Set[int] = set(DEFAULT_NULL_DEFAULT_TYPES)
        self._types_with_size: Set[int] = set(DEFAULT_SIZED_TYPES)
        self._types_with_precision_and_scale: Set[int] = set(DEFAULT_PRECISION_AND_SCALE_TYPES)

    # Capability flags ----------------------------------------------------
    @property
    def flags(self) -> PlatformFlags:
        return self._flags

    def configure(self, **flags: Any) -> "PlatformInfo":
        """
        Set several flags in one step. Readers see either none or all of them.
        """
        unknown = [name for name in flags if name not in FLAG_NAMES]
        if unknown:
            raise TypeError(f"configure() got unexpected flag(s): {', '.join(sorted(unknown))}")
        self._replace_flags(flags)
        return self

    def _replace_flags(self, changes: Mapping[str, Any]) -> None:
        coerced = {
            name: FLAG_COERCIONS.get(name, lambda value: value)(value)
            for name, value in changes.items()
        }
        with self._lock:
            self._flags = replace(self._flags, **coerced)

    # Native type mappings ------------------------------------------------
    def add_native_type_mapping(self, type_code: int, native_type: str) -> None:
        """
        Map ``type_code`` to ``native_type``, replacing any earlier mapping.
        """
        with self._lock:
            self._native_types[int(type_code)] = native_type

    def add_native_type_mapping_by_name(self, type_name: str, native_type: str) -> None:
        """
        Map the type code named ``type_name`` to ``native_type``.

        Names missing from this descriptor's vocabulary are skipped with a
        warning, so setup code can list type names that only newer
        vocabularies define.
        """
        type_code = resolve_type_code(type_name, self.vocabulary)
        if type_code is None:
            self.logger.warning(
                "Cannot add native type mapping for undefined type %s",
                type_name,
                extra={"type_name": type_name, "native_type": native_type},
            )
            return
        self.add_native_type_mapping(type_code, native_type)

    def add_native_type_mappings(self, mappings: Mapping[Any, str]) -> None:
        """
        Add several mappings keyed by type code or by type name.
        """
        for key, native_type in mappings.items():
            if isinstance(key, str):
                self.add_native_type_mapping_by_name(key, native_type)
            else:
                self.add_native_type_mapping(key, native_type)

    def native_type(self, type_code: int) -> str | None:
        """
        Return the native type for ``type_code`` or ``None`` if none is defined.
        """
        with self._lock:
            return self._native_types.get(int(type_code))

    def native_type_mappings(self) -> dict[int, str]:
        with self._lock:
            return dict(self._native_types)

    # Classification sets -------------------------------------------------
    def set_has_null_default(self, type_code: int, has_null_default: bool) -> None:
        with self._lock:
            _toggle(self._types_with_null_default, type_code, has_null_default)

    def has_null_default(self, type_code: int) -> bool:
        with self._lock:
            return int(type_code) in self._types_with_null_default

    def set_has_size(self, type_code: int, has_size: bool) -> None:
        with self._lock:
            _toggle(self._types_with_size, type_code, has_size)

    def has_size(self, type_code: int) -> bool:
        with self._lock:
            return int(type_code) in self._types_with_size

    def set_has_precision_and_scale(self, type_code: int, has_precision_and_scale: bool) -> None:
        with self._lock:
            _toggle(self._types_with_precision_and_scale, type_code, has_precision_and_scale)

    def has_precision_and_scale(self, type_code: int) -> bool:
        with self._lock:
            return int(type_code) in self._types_with_precision_and_scale

    # Lifecycle -----------------------------------------------------------
    def freeze(self) -> "PlatformSnapshot":
        """
        Capture the current state as an immutable :class:`PlatformSnapshot`.
        """
        from .snapshot import PlatformSnapshot

        with self._lock:
            return PlatformSnapshot(
                flags=self._flags,
                native_types=MappingProxyType(dict(self._native_types)),
                types_with_null_default=frozenset(self._types_with_null_default),
                types_with_size=frozenset(self._types_with_size),
                types_with_precision_and_scale=frozenset(self._types_with_precision_and_scale),
                vocabulary=self.vocabulary,
            )

    def copy(self) -> "PlatformInfo":
        return self.freeze().thaw()

    @classmethod
    def _from_state(
        cls,
        *,
        flags: PlatformFlags,
        native_types: Mapping[int, str],
        types_with_null_default: Iterable[int],
        types_with_size: Iterable[int],
        types_with_precision_and_scale: Iterable[int],
        vocabulary: Mapping[str, int],
    ) -> "PlatformInfo":
        info = cls(vocabulary=vocabulary)
        info._flags = flags
        info._native_types = dict(native_types)
        info._types_with_null_default = set(types_with_null_default)
        info._types_with_size = set(types_with_size)
        info._types_with_precision_and_scale = set(types_with_precision_and_scale)
        return info

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlatformInfo):
            return NotImplemented
        return self.freeze() == other.freeze()

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self) -> tuple[Any, ...]:
        # The lock and logger are rebuilt; only the descriptor state travels.
        return (_thaw_snapshot, (self.freeze(),))

    def __repr__(self) -> str:
        return f"<PlatformInfo {len(self._native_types)} native types, {self._flags!r}>"


def _thaw_snapshot(snapshot: "PlatformSnapshot") -> PlatformInfo:
    return snapshot.thaw()
