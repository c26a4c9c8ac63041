"""
Dialect strategy registry.
"""

from .base import Dialect, PlatformFactory
from .mysql import MySQLDialect, build_mysql_platform
from .postgres import PostgresDialect, build_postgres_platform
from .registry import (
    available_platforms,
    get_platform,
    register_platform,
    reset_platform_cache,
    unregister_platform,
)
from .sqlite import SQLiteDialect, build_sqlite_platform

register_platform(SQLiteDialect.name, build_sqlite_platform)
register_platform(PostgresDialect.name, build_postgres_platform)
register_platform(MySQLDialect.name, build_mysql_platform)

__all__ = [
    "Dialect",
    "MySQLDialect",
    "PlatformFactory",
    "PostgresDialect",
    "SQLiteDialect",
    "available_platforms",
    "build_mysql_platform",
    "build_postgres_platform",
    "build_sqlite_platform",
    "get_platform",
    "register_platform",
    "reset_platform_cache",
    "unregister_platform",
]
