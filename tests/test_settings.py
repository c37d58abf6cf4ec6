"""Tests for environment variable validation (settings.py)."""

import pytest

from teamdeck.config.settings import get_env_info, validate_all_env_vars, validate_env_var
from teamdeck.config.ui_config import get_clipboard_mode
from teamdeck.exceptions import ConfigurationError


class TestValidateEnvVar:
    """Single-variable checks against the known definitions."""

    def test_unset_is_valid(self):
        assert validate_env_var("TEAMDECK_CLIPBOARD", None) == (True, None)

    def test_unknown_variable_is_valid(self):
        assert validate_env_var("TEAMDECK_SOMETHING_ELSE", "whatever") == (True, None)

    def test_free_form_value_is_valid(self):
        assert validate_env_var("TEAMDECK_THEME", "nord") == (True, None)

    def test_case_insensitive(self):
        assert validate_env_var("TEAMDECK_LOG_LEVEL", "debug")[0] is True
        assert validate_env_var("TEAMDECK_CLIPBOARD", " System ")[0] is True

    def test_invalid_value(self):
        is_valid, error = validate_env_var("TEAMDECK_CLIPBOARD", "fax")
        assert is_valid is False
        assert "TEAMDECK_CLIPBOARD" in error
        assert "fax" in error


class TestEnvReport:
    """Whole-environment report used by `teamdeck env`."""

    def test_no_errors_by_default(self):
        assert validate_all_env_vars() == []

    def test_collects_errors(self, monkeypatch):
        monkeypatch.setenv("TEAMDECK_LOG_LEVEL", "chatty")
        monkeypatch.setenv("TEAMDECK_CLIPBOARD", "fax")
        errors = validate_all_env_vars()
        assert len(errors) == 2

    def test_env_info(self, monkeypatch):
        monkeypatch.setenv("TEAMDECK_CLIPBOARD", "fax")
        info = get_env_info()
        assert info["TEAMDECK_CLIPBOARD"]["is_set"]
        assert not info["TEAMDECK_CLIPBOARD"]["valid"]
        assert info["TEAMDECK_LOG_LEVEL"] == {
            "description": "Log level for teamdeck loggers",
            "value": None,
            "is_set": False,
            "valid": True,
            "default": "WARNING",
        }


def test_clipboard_env_is_validated(monkeypatch):
    monkeypatch.setenv("TEAMDECK_CLIPBOARD", "fax")
    with pytest.raises(ConfigurationError) as excinfo:
        get_clipboard_mode()
    assert excinfo.value.context["setting"] == "TEAMDECK_CLIPBOARD"
