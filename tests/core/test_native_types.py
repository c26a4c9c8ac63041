import logging

from ddlplatform.core import JDBC2_VOCABULARY, PlatformInfo, TypeCode


def test_direct_mapping_round_trip():
    info = PlatformInfo()
    info.add_native_type_mapping(TypeCode.VARCHAR, "NVARCHAR2")
    assert info.native_type(TypeCode.VARCHAR) == "NVARCHAR2"
    assert info.native_type(12) == "NVARCHAR2"


def test_last_mapping_wins():
    info = PlatformInfo()
    info.add_native_type_mapping(TypeCode.CLOB, "TEXT")
    info.add_native_type_mapping(TypeCode.CLOB, "LONGTEXT")
    assert info.native_type(TypeCode.CLOB) == "LONGTEXT"
    assert info.native_type_mappings() == {int(TypeCode.CLOB): "LONGTEXT"}


def test_missing_mapping_returns_none():
    info = PlatformInfo()
    assert info.native_type(TypeCode.BLOB) is None
    assert info.native_type(424242) is None


def test_codes_outside_vocabulary_are_accepted():
    info = PlatformInfo()
    info.add_native_type_mapping(-100, "INTERVAL")
    assert info.native_type(-100) == "INTERVAL"


def test_mapping_by_name_matches_direct_mapping():
    by_name = PlatformInfo()
    direct = PlatformInfo()
    by_name.add_native_type_mapping_by_name("BOOLEAN", "BIT")
    direct.add_native_type_mapping(TypeCode.BOOLEAN, "BIT")
    assert by_name.native_type_mappings() == direct.native_type_mappings()
    assert by_name == direct


def test_unresolved_name_is_skipped_with_warning(caplog):
    caplog.set_level(logging.WARNING, logger="ddlplatform.core.info")
    info = PlatformInfo()
    info.add_native_type_mapping(TypeCode.INTEGER, "INT")
    before = info.native_type_mappings()

    result = info.add_native_type_mapping_by_name("GEOMETRY", "SDO_GEOMETRY")

    assert result is None
    assert info.native_type_mappings() == before
    records = [r for r in caplog.records if r.name == "ddlplatform.core.info"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert "GEOMETRY" in records[0].getMessage()
    assert records[0].type_name == "GEOMETRY"


def test_names_missing_from_older_vocabulary_are_skipped(caplog):
    caplog.set_level(logging.WARNING, logger="ddlplatform.core.info")
    info = PlatformInfo(vocabulary=JDBC2_VOCABULARY)
    info.add_native_type_mapping_by_name("VARCHAR", "VARCHAR2")
    info.add_native_type_mapping_by_name("BOOLEAN", "NUMBER(1)")
    assert info.native_type(TypeCode.VARCHAR) == "VARCHAR2"
    assert info.native_type(TypeCode.BOOLEAN) is None
    assert any("BOOLEAN" in r.getMessage() for r in caplog.records)


def test_add_native_type_mappings_accepts_codes_and_names():
    info = PlatformInfo()
    info.add_native_type_mappings({TypeCode.BLOB: "BYTEA", "CLOB": "TEXT", "NOPE": "X"})
    assert info.native_type_mappings() == {
        int(TypeCode.BLOB): "BYTEA",
        int(TypeCode.CLOB): "TEXT",
    }
