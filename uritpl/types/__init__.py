"""Core value types shared by the parser and the expander."""

from .base import OPERATOR_TABLE, Operator, OperatorSpec
from .values import AssociativeArray, VariableValue, coerce_value

__all__ = [
    "Operator",
    "OperatorSpec",
    "OPERATOR_TABLE",
    "AssociativeArray",
    "VariableValue",
    "coerce_value",
]
