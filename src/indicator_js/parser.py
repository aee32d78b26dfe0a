"""Recursive-descent parser for indicator formulas.

Builds a small node tree (see nodes.py) from the token sequence. The grammar
needs a single token of lookahead everywhere.

	expression := primary (operator primary)*
	primary    := NAME | NAME "(" ... ")" | FIELD | STRING | NUMBER
	            | ("+" | "-") primary | "!" primary
	            | "(" expression ")" | "[" list "]"
	list       := [expression ("," expression)*]

Operators have no precedence levels: `a + b * c` is read as `(a + b) * c` in
the tree, and emitted unchanged as `a+b*c`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from indicator_js.errors import (
	ErrorCode,
	FormulaSyntaxError,
	UnexpectedEndError,
	UnexpectedTokenError,
	UnsupportedFunctionError,
)
from indicator_js.functions import FUNCTIONS, FunctionRule
from indicator_js.nodes import (
	Array,
	Binary,
	FieldRef,
	Group,
	Identifier,
	Literal,
	Node,
	Unary,
)
from indicator_js.tokens import END, Token, TokenType, is_transparent_operator

KEYWORD_OPERATORS: dict[str, str] = {
	"AND": "&&",
	"OR": "||",
}

TRANSLATED_OPERATORS: dict[TokenType, str] = {
	TokenType.Equal: "===",
	TokenType.NotEqual: "!==",
}

_EXPRESSION_ENDS = {
	TokenType.END,
	TokenType.RParen,
	TokenType.Comma,
	TokenType.RBracket,
}
_LIST_ENDS = {TokenType.Comma, TokenType.RBracket}
_CLOSERS = {TokenType.RParen, TokenType.RBracket}
_SIGNS = {TokenType.Plus, TokenType.Minus}


class TokenStream:
	"""Read cursor over an immutable token sequence.

	Reading past the last token keeps returning END.
	"""

	__slots__: tuple[str, ...] = ("_tokens", "_pos")
	_tokens: tuple[Token, ...]
	_pos: int

	def __init__(self, tokens: Sequence[Token]) -> None:
		self._tokens = tuple(tokens)
		self._pos = 0

	def peek(self) -> Token:
		if self._pos < len(self._tokens):
			return self._tokens[self._pos]
		return END

	def pop(self) -> Token:
		tok = self.peek()
		if self._pos < len(self._tokens):
			self._pos += 1
		return tok

	def remainder(self) -> str:
		"""Text of the tokens not consumed yet, separated by spaces."""
		return " ".join(
			t.text for t in self._tokens[self._pos :] if t.type != TokenType.END
		)


class Parser:
	stream: TokenStream
	functions: Mapping[str, FunctionRule]
	field_delimiter: str

	def __init__(
		self,
		tokens: Sequence[Token],
		*,
		functions: Mapping[str, FunctionRule] | None = None,
		field_delimiter: str = "**",
	) -> None:
		self.stream = TokenStream(tokens)
		self.functions = functions if functions is not None else FUNCTIONS
		self.field_delimiter = field_delimiter

	# --- Entrypoint ---------------------------------------------------------

	def parse(self) -> Node:
		"""Parse the whole token sequence as one expression."""
		return self.parse_expression(TokenType.END)

	# --- Token helpers ------------------------------------------------------

	def peek(self) -> Token:
		return self.stream.peek()

	def consume(self, expected: TokenType) -> Token:
		"""Pop the next token, which must be of type `expected`."""
		tok = self.stream.pop()
		if tok.type != expected:
			raise self.unexpected(tok)
		return tok

	def unexpected(
		self, tok: Token, code: ErrorCode = "syntax.token"
	) -> FormulaSyntaxError:
		if tok.type == TokenType.END:
			return UnexpectedEndError()
		return UnexpectedTokenError(tok, self.stream.remainder(), code=code)

	# --- Expressions --------------------------------------------------------

	def parse_expression(self, expected_end: TokenType) -> Node:
		"""Parse an expression followed by `expected_end`, left unconsumed.

		expected_end can be:
		- END for the whole formula,
		- RParen for expressions between parentheses,
		- Comma for function arguments, in which case RParen also ends it,
		- RBracket for array elements, in which case Comma also ends it.
		"""
		if expected_end not in _EXPRESSION_ENDS:
			raise ValueError(f"invalid expression terminator: {expected_end.name}")

		expr = self.parse_primary()
		while not self._at_end(expected_end):
			op = self.parse_operator()
			expr = Binary(expr, op, self.parse_primary())
		return expr

	def _at_end(self, expected_end: TokenType) -> bool:
		tok_type = self.peek().type
		return (
			tok_type == expected_end
			or (expected_end == TokenType.Comma and tok_type == TokenType.RParen)
			or (expected_end == TokenType.RBracket and tok_type == TokenType.Comma)
		)

	def parse_primary(self) -> Node:
		tok = self.stream.pop()
		tok_type = tok.type

		if tok_type == TokenType.Name:
			if self.peek().type == TokenType.LParen:
				return self.parse_function_call(tok.text)
			return Identifier(tok.text)

		if tok_type == TokenType.Field:
			return FieldRef(tok.text[1:], self.field_delimiter)

		if tok_type == TokenType.String or tok_type == TokenType.Number:
			return Literal(tok.text)

		if tok_type in _SIGNS:
			following = self.peek()
			if following.type in _SIGNS:
				raise self.unexpected(following, code="syntax.sign")
			return Unary(tok.text, self.parse_primary())

		if tok_type == TokenType.Not:
			return Unary("!", self.parse_primary())

		if tok_type == TokenType.LParen:
			expr = self.parse_expression(TokenType.RParen)
			self.consume(TokenType.RParen)
			return Group(expr)

		if tok_type == TokenType.LBracket:
			elements = self.parse_list(TokenType.RBracket)
			self.consume(TokenType.RBracket)
			return Array(elements)

		raise self.unexpected(tok)

	def parse_operator(self) -> str:
		"""Consume a binary operator and return its JavaScript spelling."""
		tok = self.stream.pop()
		if is_transparent_operator(tok.type):
			return tok.text
		if tok.type == TokenType.Name and tok.text in KEYWORD_OPERATORS:
			return KEYWORD_OPERATORS[tok.text]
		if tok.type in TRANSLATED_OPERATORS:
			return TRANSLATED_OPERATORS[tok.type]
		raise self.unexpected(tok)

	# --- Lists and calls ----------------------------------------------------

	def parse_list(self, expected_end: TokenType) -> list[Node]:
		"""Parse comma-separated expressions up to a closing ) or ].

		expected_end is Comma for function arguments and RBracket for arrays.
		The closing token is left unconsumed.
		"""
		if expected_end not in _LIST_ENDS:
			raise ValueError(f"invalid list terminator: {expected_end.name}")

		items: list[Node] = []
		if self.peek().type in _CLOSERS:
			return items
		while True:
			items.append(self.parse_expression(expected_end))
			if self.peek().type in _CLOSERS:
				return items
			self.consume(TokenType.Comma)

	def parse_function_call(self, name: str) -> Node:
		"""Parse a call to `name`; the name itself has already been consumed."""
		rule = self.functions.get(name)
		if rule is None:
			raise UnsupportedFunctionError(name)
		return rule.parse_call(self)
