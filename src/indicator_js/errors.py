from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
	from indicator_js.tokens import Token

ErrorCode = Literal[
	"lex.string",
	"lex.field",
	"lex.token",
	"syntax.token",
	"syntax.sign",
	"syntax.end",
	"syntax.function",
]


class TranslationError(Exception):
	"""Base class for every error raised while translating a formula.

	`formula` is filled in by the translator once the failing input is known.
	"""

	code: ErrorCode
	message: str
	formula: str | None

	def __init__(self, message: str, *, code: ErrorCode) -> None:
		super().__init__(message)
		self.message = message
		self.code = code
		self.formula = None


class LexicalError(TranslationError):
	"""The formula contains text that is not a valid token."""

	remainder: str

	def __init__(self, message: str, remainder: str, *, code: ErrorCode) -> None:
		super().__init__(f"{message} in: {remainder}", code=code)
		self.remainder = remainder


class FormulaSyntaxError(TranslationError):
	"""The token sequence does not match the formula grammar."""


class UnexpectedTokenError(FormulaSyntaxError):
	token: Token
	context: str

	def __init__(
		self,
		token: Token,
		context: str = "",
		*,
		code: ErrorCode = "syntax.token",
	) -> None:
		message = f"unexpected token: {token.text}"
		if context:
			message += f" (near: {context})"
		super().__init__(message, code=code)
		self.token = token
		self.context = context


class UnexpectedEndError(FormulaSyntaxError):
	def __init__(self) -> None:
		super().__init__("unexpected end of token stream", code="syntax.end")


class UnsupportedFunctionError(FormulaSyntaxError):
	name: str

	def __init__(self, name: str) -> None:
		super().__init__(f"Unsupported function: {name}", code="syntax.function")
		self.name = name
