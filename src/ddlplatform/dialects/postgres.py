"""
PostgreSQL dialect and platform descriptor.
"""

from __future__ import annotations

from typing import Final

from ..core.info import PlatformInfo
from ..core.snapshot import PlatformSnapshot
from ..core.type_codes import TypeCode
from ..utils import get_logger
from .registry import get_platform

logger = get_logger("dialects.postgres")


def build_postgres_platform() -> PlatformSnapshot:
    info = PlatformInfo()
    info.max_identifier_length = 63

    info.add_native_type_mapping(TypeCode.ARRAY, "BYTEA")
    info.add_native_type_mapping(TypeCode.BINARY, "BYTEA")
    info.add_native_type_mapping(TypeCode.BIT, "BOOLEAN")
    info.add_native_type_mapping(TypeCode.BLOB, "BYTEA")
    info.add_native_type_mapping(TypeCode.CLOB, "TEXT")
    info.add_native_type_mapping(TypeCode.DECIMAL, "NUMERIC")
    info.add_native_type_mapping(TypeCode.DISTINCT, "BYTEA")
    info.add_native_type_mapping(TypeCode.DOUBLE, "DOUBLE PRECISION")
    info.add_native_type_mapping(TypeCode.FLOAT, "DOUBLE PRECISION")
    info.add_native_type_mapping(TypeCode.JAVA_OBJECT, "BYTEA")
    info.add_native_type_mapping(TypeCode.LONGVARBINARY, "BYTEA")
    info.add_native_type_mapping(TypeCode.LONGVARCHAR, "TEXT")
    info.add_native_type_mapping(TypeCode.NULL, "BYTEA")
    info.add_native_type_mapping(TypeCode.OTHER, "BYTEA")
    info.add_native_type_mapping(TypeCode.REF, "BYTEA")
    info.add_native_type_mapping(TypeCode.STRUCT, "BYTEA")
    info.add_native_type_mapping(TypeCode.TINYINT, "SMALLINT")
    info.add_native_type_mapping(TypeCode.VARBINARY, "BYTEA")
    info.add_native_type_mapping_by_name("BOOLEAN", "BOOLEAN")
    info.add_native_type_mapping_by_name("DATALINK", "BYTEA")
    info.add_native_type_mapping_by_name("TIMESTAMP_WITH_TIMEZONE", "TIMESTAMP WITH TIME ZONE")

    # BYTEA takes no length.
    info.set_has_size(TypeCode.BINARY, False)
    info.set_has_size(TypeCode.VARBINARY, False)
    logger.debug("Initialized postgres platform")
    return info.freeze()


class PostgresDialect:
    """
    PostgreSQL dialect.
    """

    name: Final[str] = "postgresql"

    @property
    def platform_info(self) -> PlatformSnapshot:
        return get_platform(self.name)
