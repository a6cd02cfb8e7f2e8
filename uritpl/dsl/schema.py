"""Parsed template structure.

A template parses into an ordered tuple of components, each either a
``Literal`` copied verbatim on expansion or an ``Expression`` expanded against
the caller's bindings. All structures are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from uritpl.types.base import Operator

__all__ = [
    "Prefix",
    "Explode",
    "EXPLODE",
    "Modifier",
    "VariableSpec",
    "Expression",
    "Literal",
    "Component",
]


@dataclass(frozen=True)
class Prefix:
    """``name:N`` modifier: keep the first ``max_length`` encoded characters."""

    max_length: int


@dataclass(frozen=True)
class Explode:
    """``name*`` modifier: expand each list item or pair separately."""


EXPLODE = Explode()

Modifier = Union[Prefix, Explode]


@dataclass(frozen=True)
class VariableSpec:
    """One variable reference inside an expression.

    Attributes:
        name: Variable name as written (percent-encoded sequences kept as-is).
        modifier: Optional prefix or explode modifier.
    """

    name: str
    modifier: Optional[Modifier] = None

    @property
    def explode(self) -> bool:
        return isinstance(self.modifier, Explode)

    @property
    def prefix_length(self) -> Optional[int]:
        if isinstance(self.modifier, Prefix):
            return self.modifier.max_length
        return None


@dataclass(frozen=True)
class Expression:
    """A ``{...}`` block: an operator and one or more variable specs."""

    operator: Operator
    variables: Tuple[VariableSpec, ...]


@dataclass(frozen=True)
class Literal:
    """Template text outside any expression."""

    text: str


Component = Union[Literal, Expression]
