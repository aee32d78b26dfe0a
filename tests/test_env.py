import pytest
from indicator_js.env import (
	ENV_INDICATOR_JS_FIELD_DELIMITER,
	ENV_INDICATOR_JS_LOG_LEVEL,
	env,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.delenv(ENV_INDICATOR_JS_FIELD_DELIMITER, raising=False)
	monkeypatch.delenv(ENV_INDICATOR_JS_LOG_LEVEL, raising=False)
	assert env.field_delimiter == "**"
	assert env.log_level == "WARNING"


def test_overrides(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_INDICATOR_JS_FIELD_DELIMITER, "%%")
	monkeypatch.setenv(ENV_INDICATOR_JS_LOG_LEVEL, "debug")
	assert env.field_delimiter == "%%"
	assert env.log_level == "DEBUG"


def test_invalid_log_level_falls_back(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_INDICATOR_JS_LOG_LEVEL, "chatty")
	assert env.log_level == "WARNING"
