"""Template syntax: parsed structure, parser, expansion and bindings loading.

Parse template text with `uritpl.dsl.parser.parse_template` and expand the
resulting expressions with `uritpl.dsl.expansion.expand_expression`.
"""

from .parser import parse_template
from .schema import EXPLODE, Explode, Expression, Literal, Prefix, VariableSpec

__all__ = [
    "parse_template",
    "Literal",
    "Expression",
    "VariableSpec",
    "Prefix",
    "Explode",
    "EXPLODE",
]
