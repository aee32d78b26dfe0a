"""Allow-listed formula functions and their JavaScript translations.

Every function a formula may call has one entry in FUNCTIONS. An entry parses
its own argument list (starting at the opening parenthesis) and returns the
node to emit, so new functions never require changes to the parser.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, override

from indicator_js.nodes import (
	Array,
	Call,
	Group,
	Identifier,
	Member,
	Node,
	Template,
)
from indicator_js.tokens import TokenType

if TYPE_CHECKING:
	from indicator_js.parser import Parser

RuleFn = Callable[["Parser"], Node]


class FunctionRule(ABC):
	"""Translation rule for one allow-listed function name."""

	__slots__: tuple[str, ...] = ()

	name: str

	@abstractmethod
	def parse_call(self, parser: Parser) -> Node:
		"""Parse `(args)` from the parser's stream and return the call node."""

	@abstractmethod
	def describe(self) -> str:
		"""Short human-readable form of the translation."""


@dataclass(slots=True)
class Rename(FunctionRule):
	"""Generic function: the name is substituted, arguments pass through.

	SUM(a, b) -> sumConditionalOccurrences(a,b)
	"""

	name: str
	target: str

	@override
	def parse_call(self, parser: Parser) -> Node:
		parser.consume(TokenType.LParen)
		args = parser.parse_list(TokenType.Comma)
		parser.consume(TokenType.RParen)
		return Call(Identifier(self.target), args)

	@override
	def describe(self) -> str:
		return f"{self.target}(...)"


@dataclass(slots=True)
class CustomRule(FunctionRule):
	"""Function with its own argument grammar, implemented by `fn`."""

	name: str
	fn: RuleFn
	signature: str = ""

	@override
	def parse_call(self, parser: Parser) -> Node:
		return self.fn(parser)

	@override
	def describe(self) -> str:
		return self.signature or f"{self.name}(...)"


def function_rule(name: str, signature: str = "") -> Callable[[RuleFn], CustomRule]:
	"""Decorator turning a parse function into a CustomRule.

	Usage:
		@function_rule("PERCENT", "calculateTrendPercentage(a,b)")
		def PERCENT_RULE(parser): ...
	"""

	def decorator(fn: RuleFn) -> CustomRule:
		return CustomRule(name, fn, signature)

	return decorator


def _parse_fixed_args(parser: Parser, count: int) -> list[Node]:
	parser.consume(TokenType.LParen)
	args: list[Node] = []
	for i in range(count):
		if i > 0:
			parser.consume(TokenType.Comma)
		args.append(parser.parse_expression(TokenType.Comma))
	parser.consume(TokenType.RParen)
	return args


# =============================================================================
# Bespoke functions
# =============================================================================


@function_rule("INCLUDES", "(list).includes(item)")
def INCLUDES_RULE(parser: Parser) -> Node:
	"""INCLUDES(list, item) -> (list).includes(item)"""
	collection, item = _parse_fixed_args(parser, 2)
	return Call(Member(Group(collection), "includes"), [item])


@function_rule("PERCENT", "calculateTrendPercentage(a,b)")
def PERCENT_RULE(parser: Parser) -> Node:
	"""PERCENT(a, b) -> calculateTrendPercentage(a,b)"""
	return Call(Identifier("calculateTrendPercentage"), _parse_fixed_args(parser, 2))


@function_rule(
	"COUNTFORMS",
	"countOccurrences(form,[]) | countConditionalOccurrences(form,`condition`)",
)
def COUNTFORMS_RULE(parser: Parser) -> Node:
	"""COUNTFORMS(Form[, condition])

	The form is a bare name. The condition is not evaluated in place: it is
	handed to the helper as JavaScript source in a template literal.
	"""
	parser.consume(TokenType.LParen)
	form = Identifier(parser.consume(TokenType.Name).text)
	if parser.peek().type == TokenType.RParen:
		parser.consume(TokenType.RParen)
		return Call(Identifier("countOccurrences"), [form, Array([])])
	parser.consume(TokenType.Comma)
	condition = parser.parse_expression(TokenType.Comma)
	parser.consume(TokenType.RParen)
	return Call(Identifier("countConditionalOccurrences"), [form, Template(condition)])


# =============================================================================
# Registry
# =============================================================================

RENAMES: Mapping[str, str] = MappingProxyType(
	{
		"SUM": "sumConditionalOccurrences",
	}
)


def build_function_table(
	renames: Mapping[str, str] | None = None,
) -> Mapping[str, FunctionRule]:
	"""Build a read-only dispatch table: bespoke rules plus generic renames."""
	table: dict[str, FunctionRule] = {
		rule.name: rule for rule in (INCLUDES_RULE, PERCENT_RULE, COUNTFORMS_RULE)
	}
	for name, target in (renames if renames is not None else RENAMES).items():
		table[name] = Rename(name, target)
	return MappingProxyType(table)


FUNCTIONS: Mapping[str, FunctionRule] = build_function_table()
