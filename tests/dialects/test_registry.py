import logging

import pytest

from ddlplatform.core import PlatformInfo, PlatformRegistrationError, UnknownPlatformError
from ddlplatform.dialects import (
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    available_platforms,
    get_platform,
    register_platform,
    reset_platform_cache,
    unregister_platform,
)


def _counting_factory(calls: list[int]):
    def factory():
        calls.append(1)
        info = PlatformInfo()
        info.max_identifier_length = 18
        return info.freeze()

    return factory


def test_builtin_platforms_registered():
    assert {"mysql", "postgresql", "sqlite"} <= set(available_platforms())


def test_platform_built_once_and_cached():
    calls: list[int] = []
    register_platform("test-cached", _counting_factory(calls))
    try:
        first = get_platform("test-cached")
        second = get_platform("test-cached")
        assert first is second
        assert calls == [1]
        reset_platform_cache()
        third = get_platform("test-cached")
        assert third == first
        assert calls == [1, 1]
    finally:
        unregister_platform("test-cached")


def test_duplicate_registration_rejected():
    with pytest.raises(PlatformRegistrationError):
        register_platform("sqlite", lambda: PlatformInfo().freeze())


def test_replace_registration_logs_warning(caplog):
    caplog.set_level(logging.WARNING, logger="ddlplatform.dialects.registry")
    register_platform("test-replace", lambda: PlatformInfo().freeze())
    try:
        register_platform("test-replace", _counting_factory([]), replace=True)
        assert get_platform("test-replace").max_identifier_length == 18
        assert any("Replacing" in record.message for record in caplog.records)
    finally:
        unregister_platform("test-replace")


def test_unknown_platform():
    with pytest.raises(UnknownPlatformError) as excinfo:
        get_platform("db2")
    assert isinstance(excinfo.value, KeyError)
    assert "db2" in str(excinfo.value)
    with pytest.raises(UnknownPlatformError):
        unregister_platform("db2")


def test_overrides_do_not_touch_shared_descriptor():
    custom = get_platform("postgresql", overrides={"max_identifier_length": "31"})
    assert custom.max_identifier_length == 31
    assert get_platform("postgresql").max_identifier_length == 63


def test_build_logs_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="ddlplatform.dialects.registry")
    register_platform("test-debug", lambda: PlatformInfo().freeze())
    try:
        get_platform("test-debug")
        assert any("test-debug" in record.message for record in caplog.records)
    finally:
        unregister_platform("test-debug")


@pytest.mark.parametrize("dialect_cls", [SQLiteDialect, PostgresDialect, MySQLDialect])
def test_dialect_reads_shared_registry_descriptor(dialect_cls):
    dialect = dialect_cls()
    assert dialect.name in available_platforms()
    assert dialect.platform_info is get_platform(dialect.name)
