"""
MySQL dialect and platform descriptor.
"""

from __future__ import annotations

from typing import Final

from ..core.info import PlatformInfo
from ..core.snapshot import PlatformSnapshot
from ..core.type_codes import TypeCode
from ..utils import get_logger
from .registry import get_platform

logger = get_logger("dialects.mysql")


def build_mysql_platform() -> PlatformSnapshot:
    info = PlatformInfo()
    info.configure(
        requires_null_as_default_value=True,
        use_alter_table_for_drop=True,
        max_identifier_length=64,
        delimiter_token="`",
        comment_prefix="#",
    )

    info.add_native_type_mappings(
        {
            TypeCode.ARRAY: "LONGBLOB",
            TypeCode.BIT: "TINYINT(1)",
            TypeCode.BLOB: "LONGBLOB",
            TypeCode.CLOB: "LONGTEXT",
            TypeCode.DISTINCT: "LONGBLOB",
            TypeCode.FLOAT: "DOUBLE",
            TypeCode.JAVA_OBJECT: "LONGBLOB",
            TypeCode.LONGVARBINARY: "MEDIUMBLOB",
            TypeCode.LONGVARCHAR: "MEDIUMTEXT",
            TypeCode.NULL: "MEDIUMBLOB",
            TypeCode.NUMERIC: "DECIMAL",
            TypeCode.OTHER: "LONGBLOB",
            TypeCode.REAL: "FLOAT",
            TypeCode.REF: "MEDIUMBLOB",
            TypeCode.STRUCT: "LONGBLOB",
            TypeCode.TIMESTAMP: "DATETIME",
            "BOOLEAN": "TINYINT(1)",
            "DATALINK": "MEDIUMBLOB",
        }
    )
    logger.debug("Initialized mysql platform")
    return info.freeze()


class MySQLDialect:
    """
    MySQL dialect with backtick-delimited identifiers.
    """

    name: Final[str] = "mysql"

    @property
    def platform_info(self) -> PlatformSnapshot:
        return get_platform(self.name)
