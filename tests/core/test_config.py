import pytest

from ddlplatform.core import (
    PlatformConfigurationError,
    PlatformInfo,
    TypeCode,
    apply_settings,
    settings_from_env,
)


def test_apply_settings_parses_string_values():
    info = apply_settings(
        PlatformInfo(),
        {
            "requires_null_as_default_value": "yes",
            "primary_key_embedded": "off",
            "max_identifier_length": "30",
            "delimiter_token": "[",
        },
    )
    assert info.requires_null_as_default_value is True
    assert info.primary_key_embedded is False
    assert info.max_identifier_length == 30
    assert info.delimiter_token == "["


def test_apply_settings_accepts_typed_values():
    info = apply_settings(PlatformInfo(), {"case_sensitive": True, "comment_suffix": None})
    assert info.case_sensitive is True
    assert info.comment_suffix == ""


def test_apply_settings_native_types():
    info = apply_settings(
        PlatformInfo(),
        {"native_types": {"VARCHAR": "VARCHAR2", int(TypeCode.BLOB): "IMAGE"}},
    )
    assert info.native_type(TypeCode.VARCHAR) == "VARCHAR2"
    assert info.native_type(TypeCode.BLOB) == "IMAGE"


@pytest.mark.parametrize(
    "settings",
    [
        {"case_sensitive": "maybe"},
        {"max_identifier_length": "many"},
        {"max_identifier_length": True},
        {"delimiter_token": 3},
        {"quoting": "ansi"},
        {"native_types": ["VARCHAR"]},
        {"native_types": {1.5: "REAL"}},
    ],
)
def test_invalid_settings_raise(settings):
    with pytest.raises(PlatformConfigurationError):
        apply_settings(PlatformInfo(), settings)


def test_invalid_settings_leave_descriptor_unchanged():
    info = PlatformInfo()
    with pytest.raises(PlatformConfigurationError):
        apply_settings(info, {"delimiter_token": "`", "indices_embedded": "sometimes"})
    assert info == PlatformInfo()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DDLPLATFORM_MAX_IDENTIFIER_LENGTH", "128")
    monkeypatch.setenv("DDLPLATFORM_USE_ALTER_TABLE_FOR_DROP", "true")
    monkeypatch.setenv("DDLPLATFORM_UNRELATED", "x")
    settings = settings_from_env()
    assert settings == {"max_identifier_length": "128", "use_alter_table_for_drop": "true"}
    info = apply_settings(PlatformInfo(), settings)
    assert info.max_identifier_length == 128
    assert info.use_alter_table_for_drop is True


def test_settings_from_explicit_environ_and_prefix():
    settings = settings_from_env("APP_DB_", {"APP_DB_COMMENT_PREFIX": "#"})
    assert settings == {"comment_prefix": "#"}
