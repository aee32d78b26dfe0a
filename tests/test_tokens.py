import time

import pytest
from indicator_js.errors import LexicalError
from indicator_js.tokens import (
	Token,
	TokenType,
	first_token,
	is_transparent_operator,
	tokenize,
)


def types(formula: str) -> list[TokenType]:
	return [t.type for t in tokenize(formula)]


def texts(formula: str) -> list[str]:
	return [t.text for t in tokenize(formula)]


# =============================================================================
# Punctuation and operators
# =============================================================================


class TestOperators:
	def test_single_char_tokens(self):
		assert types("( ) [ ] , + - * /") == [
			TokenType.LParen,
			TokenType.RParen,
			TokenType.LBracket,
			TokenType.RBracket,
			TokenType.Comma,
			TokenType.Plus,
			TokenType.Minus,
			TokenType.Mul,
			TokenType.Div,
			TokenType.END,
		]

	def test_comparisons_extend_with_equal(self):
		assert texts("< <= > >= = != !") == ["<", "<=", ">", ">=", "=", "!=", "!", ""]
		assert types("<= >= !=")[:3] == [
			TokenType.LessOrEq,
			TokenType.GreaterOrEq,
			TokenType.NotEqual,
		]

	def test_double_equal_is_two_equal_tokens(self):
		assert types("==") == [TokenType.Equal, TokenType.Equal, TokenType.END]

	def test_no_whitespace_needed(self):
		assert texts("a>=1") == ["a", ">=", "1", ""]

	def test_transparent_operator_range(self):
		transparent = {t for t in TokenType if is_transparent_operator(t)}
		assert transparent == {
			TokenType.Plus,
			TokenType.Minus,
			TokenType.Mul,
			TokenType.Div,
			TokenType.Less,
			TokenType.LessOrEq,
			TokenType.Greater,
			TokenType.GreaterOrEq,
		}
		assert not is_transparent_operator(TokenType.Equal)
		assert not is_transparent_operator(TokenType.NotEqual)


# =============================================================================
# Literals, names and fields
# =============================================================================


class TestLiterals:
	@pytest.mark.parametrize("number", ["0", "42", "3.14", "1e10", "2.5E-3", "7e+2"])
	def test_numbers(self, number: str):
		assert tokenize(number)[0] == Token(TokenType.Number, number)

	def test_number_stops_at_trailing_dot(self):
		with pytest.raises(LexicalError, match=r"unrecognized token in: \."):
			tokenize("1.")

	def test_leading_dot_is_not_a_number(self):
		with pytest.raises(LexicalError):
			tokenize(".5")

	def test_string(self):
		assert tokenize('"hello world"')[0] == Token(TokenType.String, '"hello world"')

	def test_string_with_escaped_quote(self):
		tok = tokenize(r'"say \"hi\"" + 1')[0]
		assert tok == Token(TokenType.String, r'"say \"hi\""')

	def test_string_with_escaped_backslash(self):
		toks = tokenize(r'"a\\" b')
		assert toks[0] == Token(TokenType.String, r'"a\\"')
		assert toks[1] == Token(TokenType.Name, "b")

	def test_string_ending_in_lone_backslash_is_unterminated(self):
		with pytest.raises(LexicalError, match="unterminated string literal") as e:
			tokenize(r'"a\"')
		assert e.value.code == "lex.string"

	def test_string_with_escaped_newline(self):
		assert tokenize('"a\\\nb"')[0] == Token(TokenType.String, '"a\\\nb"')

	def test_unterminated_backslashes_fail_fast(self):
		start = time.perf_counter()
		with pytest.raises(LexicalError, match="unterminated string literal"):
			tokenize('"' + "\\" * 200)
		assert time.perf_counter() - start < 1.0

	def test_unterminated_string(self):
		with pytest.raises(LexicalError, match='unterminated string literal in: "abc') as e:
			tokenize('1 + "abc')
		assert e.value.code == "lex.string"
		assert e.value.remainder == '"abc'

	def test_names(self):
		assert tokenize("_foo1")[0] == Token(TokenType.Name, "_foo1")
		assert types("AND OR x") == [
			TokenType.Name,
			TokenType.Name,
			TokenType.Name,
			TokenType.END,
		]

	def test_field(self):
		assert tokenize("$age_2")[0] == Token(TokenType.Field, "$age_2")

	@pytest.mark.parametrize("formula", ["$", "$ age", "$1x", "1 + $"])
	def test_invalid_field(self, formula: str):
		with pytest.raises(LexicalError, match="invalid field name") as e:
			tokenize(formula)
		assert e.value.code == "lex.field"

	@pytest.mark.parametrize("formula", ["a # b", "1 & 2", "x ? y", "é"])
	def test_unrecognized(self, formula: str):
		with pytest.raises(LexicalError, match="unrecognized token") as e:
			tokenize(formula)
		assert e.value.code == "lex.token"


# =============================================================================
# Sequence shape
# =============================================================================


class TestSequence:
	def test_empty_input(self):
		assert tokenize("") == [Token(TokenType.END, "")]
		assert tokenize("   \t\n") == [Token(TokenType.END, "")]

	def test_surrounding_whitespace_is_skipped(self):
		assert texts("  a  +\tb \n") == ["a", "+", "b", ""]

	def test_only_end_token_is_empty(self):
		toks = tokenize('SUM($a, [1, "x"]) >= 2 AND !b')
		assert toks[-1].type == TokenType.END
		assert all(t.text for t in toks[:-1])
		assert sum(1 for t in toks if t.type == TokenType.END) == 1

	def test_first_token_rejects_leading_whitespace(self):
		with pytest.raises(ValueError, match="leading whitespace"):
			first_token(" a")

	def test_tokens_are_immutable(self):
		tok = tokenize("a")[0]
		with pytest.raises(AttributeError):
			tok.text = "b"  # pyright: ignore[reportAttributeAccessIssue]
