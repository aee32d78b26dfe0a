from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import override


# =============================================================================
# Base classes
# =============================================================================
class Node(ABC):
	"""Base class for formula expression nodes."""

	__slots__: tuple[str, ...] = ()

	@abstractmethod
	def emit(self, out: list[str]) -> None:
		"""Emit this node as JavaScript code into the output buffer."""


# =============================================================================
# Leaves
# =============================================================================


@dataclass(slots=True)
class Identifier(Node):
	"""Bare name copied through: x, true, MyForm"""

	name: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)


@dataclass(slots=True)
class Literal(Node):
	"""String or number literal, kept exactly as written in the formula."""

	text: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.text)


@dataclass(slots=True)
class FieldRef(Node):
	"""Reference to a form field: $age -> **age**

	The evaluator replaces the delimited name with the field value.
	"""

	name: str
	delimiter: str = "**"

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.delimiter)
		out.append(self.name)
		out.append(self.delimiter)


# =============================================================================
# Operators
# =============================================================================


@dataclass(slots=True)
class Unary(Node):
	"""Prefix operator: -x, +x, !x"""

	op: str
	operand: Node

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.op)
		self.operand.emit(out)


@dataclass(slots=True)
class Binary(Node):
	"""Infix operator: x + y, a && b

	Formulas have no precedence levels; chains are left-nested and emitted
	in source order without added parentheses.
	"""

	left: Node
	op: str
	right: Node

	@override
	def emit(self, out: list[str]) -> None:
		# Long chains nest deeply on the left; walk them without recursion.
		chain: list[Binary] = []
		node: Node = self
		while isinstance(node, Binary):
			chain.append(node)
			node = node.left
		node.emit(out)
		for link in reversed(chain):
			out.append(link.op)
			# 1 - -2 must not become the decrement token 1--2
			right = link.right
			if (
				isinstance(right, Unary)
				and right.op in {"+", "-"}
				and link.op.endswith(right.op)
			):
				out.append(" ")
			right.emit(out)


@dataclass(slots=True)
class Group(Node):
	"""Explicit parentheses from the formula: (expr)"""

	expr: Node

	@override
	def emit(self, out: list[str]) -> None:
		out.append("(")
		self.expr.emit(out)
		out.append(")")


# =============================================================================
# Calls and collections
# =============================================================================


@dataclass(slots=True)
class Member(Node):
	"""JS member access: obj.prop"""

	obj: Node
	prop: str

	@override
	def emit(self, out: list[str]) -> None:
		self.obj.emit(out)
		out.append(".")
		out.append(self.prop)


@dataclass(slots=True)
class Call(Node):
	"""JS function call: fn(args)"""

	callee: Node
	args: Sequence[Node]

	@override
	def emit(self, out: list[str]) -> None:
		self.callee.emit(out)
		out.append("(")
		_emit_list(self.args, out)
		out.append(")")


@dataclass(slots=True)
class Array(Node):
	"""JS array: [a,b,c]"""

	elements: Sequence[Node]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("[")
		_emit_list(self.elements, out)
		out.append("]")


@dataclass(slots=True)
class Template(Node):
	"""JS template literal holding the JavaScript text of `expr`.

	Used to pass a condition to a helper that evaluates it later, once per
	form: `**age**>18`
	"""

	expr: Node

	@override
	def emit(self, out: list[str]) -> None:
		out.append("`")
		out.append(_escape_template(emit(self.expr)))
		out.append("`")


# =============================================================================
# Emit logic
# =============================================================================


def emit(node: Node) -> str:
	"""Emit a node as JavaScript code."""
	out: list[str] = []
	node.emit(out)
	return "".join(out)


def _emit_list(nodes: Sequence[Node], out: list[str]) -> None:
	for i, n in enumerate(nodes):
		if i > 0:
			out.append(",")
		n.emit(out)


def _escape_template(s: str) -> str:
	"""Escape for template literal strings."""
	return s.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
