"""
Abstract SQL type codes keyed on by platform descriptors.

The numeric values follow the JDBC ``java.sql.Types`` constants so that codes
reported by drivers and introspection layers can be used directly.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class TypeCode(IntEnum):
    """
    Portable SQL data kinds independent of any dialect's spelling.
    """

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    NULL = 0
    OTHER = 1111
    JAVA_OBJECT = 2000
    DISTINCT = 2001
    STRUCT = 2002
    ARRAY = 2003
    BLOB = 2004
    CLOB = 2005
    REF = 2006
    DATALINK = 70
    BOOLEAN = 16
    ROWID = -8
    NCHAR = -15
    NVARCHAR = -9
    LONGNVARCHAR = -16
    NCLOB = 2011
    SQLXML = 2009
    REF_CURSOR = 2012
    TIME_WITH_TIMEZONE = 2013
    TIMESTAMP_WITH_TIMEZONE = 2014


FULL_VOCABULARY: Mapping[str, int] = MappingProxyType(
    {member.name: int(member) for member in TypeCode}
)

# Names introduced after the JDBC 2.0 type set.
_POST_JDBC2_NAMES = frozenset(
    {
        "BOOLEAN",
        "DATALINK",
        "ROWID",
        "NCHAR",
        "NVARCHAR",
        "LONGNVARCHAR",
        "NCLOB",
        "SQLXML",
        "REF_CURSOR",
        "TIME_WITH_TIMEZONE",
        "TIMESTAMP_WITH_TIMEZONE",
    }
)

JDBC2_VOCABULARY: Mapping[str, int] = MappingProxyType(
    {name: code for name, code in FULL_VOCABULARY.items() if name not in _POST_JDBC2_NAMES}
)


def resolve_type_code(name: str, vocabulary: Mapping[str, int] | None = None) -> int | None:
    """
    Resolve a symbolic type name such as ``"VARCHAR"`` to its numeric code.

    Returns ``None`` when the name is not part of ``vocabulary`` (the full
    vocabulary when omitted).
    """
    names = FULL_VOCABULARY if vocabulary is None else vocabulary
    return names.get(name)


def type_code_name(code: int) -> str | None:
    try:
        return TypeCode(code).name
    except ValueError:
        return None
