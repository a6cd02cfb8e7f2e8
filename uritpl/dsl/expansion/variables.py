"""Expansion of parsed expressions against variable bindings.

Each variable of an expression is looked up and formatted according to its
value shape (string, list, associative array), its modifier and the
expression's operator. Undefined variables contribute nothing; an expression
whose variables all contribute nothing expands to the empty string.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from uritpl.dsl.expansion.encoding import percent_encode
from uritpl.dsl.schema import Expression, VariableSpec
from uritpl.types.base import OperatorSpec
from uritpl.types.values import AssociativeArray, VariableValue, coerce_value

__all__ = [
    "expand_expression",
    "expand_value",
]


def expand_expression(expression: Expression, bindings: Mapping[str, Any]) -> str:
    """Expand one expression.

    Args:
        expression: Parsed expression.
        bindings: Variable name to value mapping; read only.

    Returns:
        The operator prefix followed by the separator-joined fragments, or ""
        when no variable produced a fragment.

    Example:
        >>> from uritpl.dsl.parser import parse_expression_content
        >>> expand_expression(parse_expression_content(";x,y,empty"),
        ...                   {"x": "1024", "y": "768", "empty": ""})
        ';x=1024;y=768;empty'
    """
    spec = expression.operator.spec
    fragments: List[str] = []
    for variable in expression.variables:
        if variable.name not in bindings:
            continue
        value = coerce_value(bindings[variable.name])
        if value is None:
            continue
        fragment = expand_value(variable, value, spec)
        if fragment is not None:
            fragments.append(fragment)
    return spec.join(fragments)


def expand_value(
    variable: VariableSpec, value: VariableValue, spec: OperatorSpec
) -> Optional[str]:
    """Format a single defined variable.

    Returns:
        The formatted fragment, or None when the value contributes nothing
        (empty list or empty associative array).
    """
    if isinstance(value, str):
        return _expand_string(variable, value, spec)
    if isinstance(value, AssociativeArray):
        return _expand_pairs(variable, value, spec)
    return _expand_list(variable, value, spec)


def _expand_string(variable: VariableSpec, value: str, spec: OperatorSpec) -> str:
    # An empty string still yields a fragment: "" for unnamed operators,
    # "name" or "name=" for named ones.
    encoded = percent_encode(value, spec.allow_reserved)
    max_length = variable.prefix_length
    if max_length is not None:
        encoded = encoded[:max_length]
    return spec.format_variable(variable.name, encoded)


def _expand_list(
    variable: VariableSpec, items: List[str], spec: OperatorSpec
) -> Optional[str]:
    if not items:
        return None

    encoded = [percent_encode(item, spec.allow_reserved) for item in items]
    if variable.explode:
        return spec.separator.join(
            spec.format_variable(variable.name, item) for item in encoded
        )
    return spec.format_variable(variable.name, ",".join(encoded))


def _expand_pairs(
    variable: VariableSpec, pairs: AssociativeArray, spec: OperatorSpec
) -> Optional[str]:
    if not pairs:
        return None

    encoded = [
        (percent_encode(key, spec.allow_reserved), percent_encode(val, spec.allow_reserved))
        for key, val in pairs
    ]
    if variable.explode:
        return spec.separator.join(spec.format_pair(key, val) for key, val in encoded)
    flattened = ",".join(f"{key},{val}" for key, val in encoded)
    return spec.format_variable(variable.name, flattened)
