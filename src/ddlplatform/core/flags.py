"""
Dialect-wide capability flags.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Generic, TypeVar, overload

T = TypeVar("T")


@dataclass(frozen=True)
class PlatformFlags:
    """
    Scalar DDL conventions of one dialect.

    The defaults describe a generic ANSI-like database; dialect setup code
    overrides only what differs.
    """

    requires_null_as_default_value: bool = False
    """Emit an explicit NULL default for columns without a declared default."""

    primary_key_embedded: bool = True
    """Primary keys go inside CREATE TABLE rather than a later ALTER TABLE."""

    foreign_keys_embedded: bool = False
    indices_embedded: bool = False
    embedded_foreign_keys_named: bool = False

    use_alter_table_for_drop: bool = False
    """Indices and constraints are dropped through ALTER TABLE."""

    max_identifier_length: int = -1
    """Longest legal identifier; -1 means unlimited."""

    case_sensitive: bool = False
    use_delimited_identifiers: bool = True
    delimiter_token: str = '"'
    value_quote_token: str = "'"
    comments_supported: bool = True
    comment_prefix: str = "--"
    comment_suffix: str = ""
    sql_command_delimiter: str = ";"

    def __post_init__(self) -> None:
        # Comment tokens are never stored as None.
        if self.comment_prefix is None:
            object.__setattr__(self, "comment_prefix", "")
        if self.comment_suffix is None:
            object.__setattr__(self, "comment_suffix", "")

    @property
    def has_identifier_limit(self) -> bool:
        return self.max_identifier_length != -1


FLAG_NAMES: tuple[str, ...] = tuple(f.name for f in fields(PlatformFlags))

FLAG_TYPES: dict[str, type] = {
    f.name: type(f.default) for f in fields(PlatformFlags)
}


def _empty_if_none(value: Any) -> Any:
    return "" if value is None else value


FLAG_COERCIONS: dict[str, Callable[[Any], Any]] = {
    "comment_prefix": _empty_if_none,
    "comment_suffix": _empty_if_none,
}


class FlagProperty(Generic[T]):
    """
    Descriptor exposing one ``PlatformFlags`` field as a read/write attribute.

    The owner must provide ``flags`` for reads and ``_replace_flags`` for
    writes; reading through the class returns the descriptor itself.
    """

    def __init__(self, doc: str | None = None) -> None:
        self.__doc__ = doc
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        if name not in FLAG_NAMES:
            raise TypeError(f"'{name}' is not a platform flag")
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> "FlagProperty[T]": ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> T: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return getattr(instance.flags, self.name)  # type: ignore[attr-defined,arg-type]

    def __set__(self, instance: object, value: T) -> None:
        instance._replace_flags({self.name: value})  # type: ignore[attr-defined]

