"""
SQLite dialect and platform descriptor.
"""

from __future__ import annotations

from typing import Final

from ..core.info import PlatformInfo
from ..core.snapshot import PlatformSnapshot
from ..core.type_codes import TypeCode
from ..utils import get_logger
from .registry import get_platform

logger = get_logger("dialects.sqlite")

# SQLite stores every value in one of five storage classes.
_STORAGE_CLASSES: Final[dict[TypeCode, str]] = {
    TypeCode.BIT: "INTEGER",
    TypeCode.TINYINT: "INTEGER",
    TypeCode.SMALLINT: "INTEGER",
    TypeCode.INTEGER: "INTEGER",
    TypeCode.BIGINT: "INTEGER",
    TypeCode.FLOAT: "REAL",
    TypeCode.REAL: "REAL",
    TypeCode.DOUBLE: "REAL",
    TypeCode.DECIMAL: "NUMERIC",
    TypeCode.NUMERIC: "NUMERIC",
    TypeCode.CHAR: "TEXT",
    TypeCode.VARCHAR: "TEXT",
    TypeCode.LONGVARCHAR: "TEXT",
    TypeCode.CLOB: "TEXT",
    TypeCode.DATE: "TEXT",
    TypeCode.TIME: "TEXT",
    TypeCode.TIMESTAMP: "TEXT",
    TypeCode.BINARY: "BLOB",
    TypeCode.VARBINARY: "BLOB",
    TypeCode.LONGVARBINARY: "BLOB",
    TypeCode.BLOB: "BLOB",
}

_LATER_TYPE_NAMES: Final[dict[str, str]] = {
    "BOOLEAN": "INTEGER",
    "NCHAR": "TEXT",
    "NVARCHAR": "TEXT",
    "LONGNVARCHAR": "TEXT",
    "NCLOB": "TEXT",
}


def build_sqlite_platform() -> PlatformSnapshot:
    info = PlatformInfo()
    # Foreign keys cannot be added to an existing SQLite table.
    info.configure(foreign_keys_embedded=True, embedded_foreign_keys_named=True)
    for type_code, native_type in _STORAGE_CLASSES.items():
        info.add_native_type_mapping(type_code, native_type)
    for type_name, native_type in _LATER_TYPE_NAMES.items():
        info.add_native_type_mapping_by_name(type_name, native_type)
    for type_code in (TypeCode.CHAR, TypeCode.VARCHAR, TypeCode.BINARY, TypeCode.VARBINARY):
        info.set_has_size(type_code, False)
    for type_code in (TypeCode.DECIMAL, TypeCode.NUMERIC):
        info.set_has_precision_and_scale(type_code, False)
    logger.debug("Initialized sqlite platform")
    return info.freeze()


class SQLiteDialect:
    """
    SQLite dialect backed by storage-class native types.
    """

    name: Final[str] = "sqlite"

    @property
    def platform_info(self) -> PlatformSnapshot:
        return get_platform(self.name)
