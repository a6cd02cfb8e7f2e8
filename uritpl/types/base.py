"""Expression operators and their fixed expansion rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional


class Operator(IntEnum):
    """Expression operator selected by the first character inside ``{...}``."""

    SIMPLE = 1  # {var}
    RESERVED = 2  # {+var}
    FRAGMENT = 3  # {#var}
    LABEL = 4  # {.var}
    PATH = 5  # {/var}
    PATH_STYLE = 6  # {;var}
    QUERY = 7  # {?var}
    QUERY_CONTINUATION = 8  # {&var}

    @property
    def spec(self) -> "OperatorSpec":
        """Expansion rules for this operator."""
        return OPERATOR_TABLE[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Operator"]:
        """Return the operator introduced by ``symbol``.

        Args:
            symbol: Leading character of an expression body.

        Returns:
            The matching operator, or None when ``symbol`` is not an operator
            character (the expression is then a simple one).
        """
        return _BY_SYMBOL.get(symbol)


@dataclass(frozen=True)
class OperatorSpec:
    """Fixed expansion behaviour of one operator.

    Attributes:
        symbol: Operator character in template syntax ("" for simple).
        prefix: Emitted once before a non-empty expansion.
        separator: Joins the fragments of the expression's variables.
        allow_reserved: Leave RFC 3986 reserved characters unescaped.
        named: Render values as ``name=value`` pairs.
        if_empty: Suffix after the name when a named value is empty.
    """

    symbol: str
    prefix: str
    separator: str
    allow_reserved: bool = False
    named: bool = False
    if_empty: str = ""

    def format_variable(self, name: str, value: str) -> str:
        """Render one encoded value of variable ``name``."""
        if not self.named:
            return value
        if not value:
            return name + self.if_empty
        return f"{name}={value}"

    def format_pair(self, key: str, value: str) -> str:
        """Render one encoded key/value pair of an exploded associative array."""
        return f"{key}={value}"

    def join(self, fragments: list[str]) -> str:
        """Prefix and join the fragments of one expression."""
        if not fragments:
            return ""
        return self.prefix + self.separator.join(fragments)


OPERATOR_TABLE: Dict[Operator, OperatorSpec] = {
    Operator.SIMPLE: OperatorSpec(symbol="", prefix="", separator=","),
    Operator.RESERVED: OperatorSpec(
        symbol="+", prefix="", separator=",", allow_reserved=True
    ),
    Operator.FRAGMENT: OperatorSpec(
        symbol="#", prefix="#", separator=",", allow_reserved=True
    ),
    Operator.LABEL: OperatorSpec(symbol=".", prefix=".", separator="."),
    Operator.PATH: OperatorSpec(symbol="/", prefix="/", separator="/"),
    Operator.PATH_STYLE: OperatorSpec(
        symbol=";", prefix=";", separator=";", named=True, if_empty=""
    ),
    Operator.QUERY: OperatorSpec(
        symbol="?", prefix="?", separator="&", named=True, if_empty="="
    ),
    Operator.QUERY_CONTINUATION: OperatorSpec(
        symbol="&", prefix="&", separator="&", named=True, if_empty="="
    ),
}

_BY_SYMBOL: Dict[str, Operator] = {
    spec.symbol: op for op, spec in OPERATOR_TABLE.items() if spec.symbol
}
