"""Nodes of the abstract syntax tree of symbolic expressions."""

from __future__ import annotations

import abc
import enum
import math
import re


class MathNodeType(enum.IntEnum):
    """Kind of an expression node."""

    OPERATOR = 0
    SYMBOLIC = 1
    NUMERIC = 2
    PARENTHESES = 3
    FUNCTIONAL = 4
    DEFAULT_SYMBOL = 5
    ANY = 6
    OPERATOR_OR_PARENTHESES = 7


class NodeConnectionType(enum.IntEnum):
    """Which children a node may be connected to."""

    DUAL = 0
    LEFT = 2
    RIGHT = 3
    NONE = 4
    UNKNOWN = 5


class MathNode(abc.ABC):
    """Base node holding a textual value and optional left and right children."""

    type: MathNodeType | None = None

    def __init__(self, value: str) -> None:
        real_value = value.strip()
        self.is_negative = "-" in real_value and len(real_value) > 1
        self.has_parentheses = False
        self.connection_type = NodeConnectionType.DUAL
        self.left: MathNode | None = None
        self.right: MathNode | None = None
        self.value = real_value

    @abc.abstractmethod
    def evaluate(self) -> float:
        """Compute the numeric value of the node."""

    def get_string(self) -> str:
        """Text of the subtree; the node's own sign is not shown, its children's are."""
        parens = self.type == MathNodeType.PARENTHESES or self.has_parentheses
        parts = []
        if parens:
            parts.append("(")
        if self.left is not None:
            parts.append(str(self.left))
        parts.append(self.value)
        if self.right is not None:
            parts.append(str(self.right))
        if parens:
            parts.append(")")
        return "".join(parts)

    def __str__(self) -> str:
        parts = []
        if self.has_parentheses:
            parts.append("(")
        if self.left is not None:
            parts.append(str(self.left))
        parts.append(("-" if self.is_negative else "") + self.value)
        if self.right is not None:
            parts.append(str(self.right))
        if self.has_parentheses:
            parts.append(")")
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MathNode):
            return NotImplemented
        return self.value == other.value and self.is_negative == other.is_negative


class Operand(MathNode):
    """A leaf node: a number or a symbol."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.connection_type = NodeConnectionType.NONE


class Symbolic(Operand):
    """A variable; ``evaluation_value`` is substituted when evaluating."""

    type = MathNodeType.SYMBOLIC

    def __init__(self, name: str, default_value: float = 0.0) -> None:
        super().__init__(name)
        self.evaluation_value = default_value

    def evaluate(self) -> float:
        return -self.evaluation_value if self.is_negative else self.evaluation_value


DEFAULT_SYMBOLS: dict[str, Symbolic] = {
    "pi": Symbolic("pi", math.pi),
    "e": Symbolic("e", math.e),
}

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


def _leading_float(text: str) -> float:
    """Parse the longest number at the start of ``text``; ``0.0`` if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


class Number(Operand):
    """A numeric constant; the sign is kept in ``is_negative`` and the value is its magnitude."""

    type = MathNodeType.NUMERIC

    def __init__(self, value: str) -> None:
        super().__init__(value)
        numeric = _leading_float(self.value)
        self.is_negative = numeric < 0
        self.numeric_value = abs(numeric)
        self.value = f"{self.numeric_value:f}"

    def evaluate(self) -> float:
        return -self.numeric_value if self.is_negative else self.numeric_value