"""Environment-driven defaults.

Values are read from os.environ on every access, so changes made after import
still apply.
"""

from __future__ import annotations

import logging
import os

ENV_INDICATOR_JS_FIELD_DELIMITER = "INDICATOR_JS_FIELD_DELIMITER"
ENV_INDICATOR_JS_LOG_LEVEL = "INDICATOR_JS_LOG_LEVEL"

DEFAULT_FIELD_DELIMITER = "**"
DEFAULT_LOG_LEVEL = "WARNING"


class IndicatorEnv:
	__slots__: tuple[str, ...] = ()

	@property
	def field_delimiter(self) -> str:
		value = os.environ.get(ENV_INDICATOR_JS_FIELD_DELIMITER)
		return value or DEFAULT_FIELD_DELIMITER

	@property
	def log_level(self) -> str:
		level = os.environ.get(ENV_INDICATOR_JS_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
		if level not in logging.getLevelNamesMapping():
			return DEFAULT_LOG_LEVEL
		return level


env = IndicatorEnv()
