import pytest
from indicator_js.errors import UnexpectedTokenError
from indicator_js.functions import (
	COUNTFORMS_RULE,
	FUNCTIONS,
	INCLUDES_RULE,
	PERCENT_RULE,
	RENAMES,
	CustomRule,
	Rename,
	build_function_table,
	function_rule,
)
from indicator_js.nodes import Call, Identifier, Literal, Node, emit
from indicator_js.parser import Parser
from indicator_js.tokens import TokenType, tokenize


def test_table_entries():
	assert isinstance(FUNCTIONS["SUM"], Rename)
	assert FUNCTIONS["SUM"].target == "sumConditionalOccurrences"  # pyright: ignore[reportAttributeAccessIssue]
	for name in ("INCLUDES", "PERCENT", "COUNTFORMS"):
		assert isinstance(FUNCTIONS[name], CustomRule)
		assert FUNCTIONS[name].name == name


def test_describe():
	assert FUNCTIONS["SUM"].describe() == "sumConditionalOccurrences(...)"
	assert FUNCTIONS["INCLUDES"].describe() == "(list).includes(item)"
	assert CustomRule("X", lambda parser: Literal("1")).describe() == "X(...)"


def test_build_function_table_defaults_to_renames():
	table = build_function_table()
	assert set(RENAMES) <= set(table)
	assert dict(table) == dict(FUNCTIONS)


def test_custom_rule_plugs_into_parser():
	@function_rule("TODAY", "today()")
	def TODAY_RULE(parser: Parser) -> Node:
		parser.consume(TokenType.LParen)
		parser.consume(TokenType.RParen)
		return Call(Identifier("today"), [])

	assert isinstance(TODAY_RULE, CustomRule)
	table = {**FUNCTIONS, "TODAY": TODAY_RULE}
	node = Parser(tokenize("TODAY() > $start"), functions=table).parse()
	assert emit(node) == "today()>**start**"

	with pytest.raises(UnexpectedTokenError):
		Parser(tokenize("TODAY(1)"), functions=table).parse()


def test_bespoke_rules_are_table_entries():
	assert FUNCTIONS["INCLUDES"] is INCLUDES_RULE
	assert FUNCTIONS["PERCENT"] is PERCENT_RULE
	assert FUNCTIONS["COUNTFORMS"] is COUNTFORMS_RULE
