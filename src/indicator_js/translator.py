"""
Indicator formula -> JavaScript translator.

Ties together the tokenizer, the parser and the emitter. Translation is a
pure function of the formula and the configuration: the same input always
produces the same output, and malformed formulas raise a TranslationError.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from indicator_js.env import env
from indicator_js.errors import TranslationError
from indicator_js.functions import FUNCTIONS, FunctionRule, Rename
from indicator_js.nodes import Node, emit
from indicator_js.parser import Parser
from indicator_js.tokens import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
	"""
	Configuration for formula translation.

	Attributes:
	    field_delimiter (str): Wrapper around field names in the output.
	    functions (Mapping[str, FunctionRule]): Allow-listed functions.
	"""

	field_delimiter: str = field(default_factory=lambda: env.field_delimiter)
	"""Wrapper around field names: $age -> **age** with the default "**"."""

	functions: Mapping[str, FunctionRule] = field(default_factory=lambda: FUNCTIONS)
	"""Dispatch table used for function calls. Names not in it are rejected."""

	def with_renames(self, **renames: str) -> TranslatorConfig:
		"""Return a copy whose table also maps each name to a renamed call.

		The process-wide FUNCTIONS table is left untouched.
		"""
		table = dict(self.functions)
		for name, target in renames.items():
			table[name] = Rename(name, target)
		return replace(self, functions=MappingProxyType(table))


class Translator:
	config: TranslatorConfig

	def __init__(self, config: TranslatorConfig | None = None) -> None:
		self.config = config if config is not None else TranslatorConfig()

	def parse(self, formula: str) -> Node:
		"""Tokenize and parse `formula` into a node tree."""
		parser = Parser(
			tokenize(formula),
			functions=self.config.functions,
			field_delimiter=self.config.field_delimiter,
		)
		return parser.parse()

	def translate(self, formula: str) -> str:
		try:
			node = self.parse(formula)
		except TranslationError as exc:
			exc.formula = formula
			logger.debug("Rejected formula %r (code=%s): %s", formula, exc.code, exc)
			raise
		js = emit(node)
		logger.debug("Translated %r -> %r", formula, js)
		return js


def translate(formula: str) -> str:
	"""Translate an indicator formula into a JavaScript expression."""
	return Translator().translate(formula)
