import pytest
from indicator_js.env import ENV_INDICATOR_JS_FIELD_DELIMITER, ENV_INDICATOR_JS_LOG_LEVEL


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	monkeypatch.delenv(ENV_INDICATOR_JS_FIELD_DELIMITER, raising=False)
	monkeypatch.delenv(ENV_INDICATOR_JS_LOG_LEVEL, raising=False)
