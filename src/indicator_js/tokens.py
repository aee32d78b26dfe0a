"""Formula tokenizer.

Splits an indicator formula into typed tokens. The sequence always ends with
a single END token whose text is empty.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from indicator_js.errors import LexicalError


class TokenType(IntEnum):
	END = 0
	LParen = 1
	RParen = 2
	LBracket = 3
	RBracket = 4
	Comma = 5

	# Plus..GreaterOrEq are spelled the same in formulas and JavaScript and
	# are copied to the output unchanged. Keep them contiguous.
	Plus = 6
	Minus = 7
	Mul = 8
	Div = 9
	Less = 10
	LessOrEq = 11
	Greater = 12
	GreaterOrEq = 13

	Equal = 14
	NotEqual = 15
	Not = 16
	String = 17
	Number = 18
	Field = 19
	Name = 20


@dataclass(frozen=True, slots=True)
class Token:
	type: TokenType
	text: str


END = Token(TokenType.END, "")

_SINGLE_CHARS: dict[str, TokenType] = {
	"(": TokenType.LParen,
	")": TokenType.RParen,
	"[": TokenType.LBracket,
	"]": TokenType.RBracket,
	",": TokenType.Comma,
	"+": TokenType.Plus,
	"-": TokenType.Minus,
	"*": TokenType.Mul,
	"/": TokenType.Div,
}

# First char -> (type alone, type when followed by "=")
_EQ_EXTENSIBLE: dict[str, tuple[TokenType, TokenType | None]] = {
	"<": (TokenType.Less, TokenType.LessOrEq),
	">": (TokenType.Greater, TokenType.GreaterOrEq),
	"!": (TokenType.Not, TokenType.NotEqual),
	"=": (TokenType.Equal, None),
}

_STRING_RE = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_NUMBER_RE = re.compile(r"\d+(\.\d+)?([eE][+\-]?\d+)?", re.ASCII)
_NAME_RE = re.compile(r"[a-zA-Z_]\w*", re.ASCII)
_FIELD_RE = re.compile(r"\$[a-zA-Z_]\w*", re.ASCII)


def is_transparent_operator(tok_type: TokenType) -> bool:
	"""Whether a binary operator token is emitted as-is."""
	return TokenType.Plus <= tok_type <= TokenType.GreaterOrEq


def first_token(s: str) -> Token:
	"""Return the first token in `s`, which must not start with whitespace."""
	if not s:
		return END
	c = s[0]

	if (tok_type := _SINGLE_CHARS.get(c)) is not None:
		return Token(tok_type, c)

	if c in _EQ_EXTENSIBLE:
		alone, extended = _EQ_EXTENSIBLE[c]
		if extended is not None and s[1:2] == "=":
			return Token(extended, s[:2])
		return Token(alone, c)

	if c == '"':
		m = _STRING_RE.match(s)
		if m is None:
			raise LexicalError("unterminated string literal", s, code="lex.string")
		return Token(TokenType.String, m.group(0))

	if c == "$":
		m = _FIELD_RE.match(s)
		if m is None:
			raise LexicalError("invalid field name", s, code="lex.field")
		return Token(TokenType.Field, m.group(0))

	if "0" <= c <= "9":
		m = _NUMBER_RE.match(s)
		assert m is not None
		return Token(TokenType.Number, m.group(0))

	if (m := _NAME_RE.match(s)) is not None:
		return Token(TokenType.Name, m.group(0))

	if c.isspace():
		raise ValueError("first_token() called on a string with leading whitespace")
	raise LexicalError("unrecognized token", s, code="lex.token")


def tokenize(s: str) -> list[Token]:
	toks: list[Token] = []
	while True:
		s = s.strip()
		tok = first_token(s)
		toks.append(tok)
		if tok.type == TokenType.END:
			return toks
		s = s[len(tok.text) :]
