"""Template parser.

Turns template text into the component tuple described in
``uritpl.dsl.schema``. Parsing is a single left-to-right pass; the first
syntax problem aborts it with a ``URITemplateError`` subclass.
"""

from __future__ import annotations

import unicodedata
from string import hexdigits
from typing import List, Optional, Tuple

from uritpl.config import PARSER_CONFIG, ParserConfig
from uritpl.dsl.schema import (
    EXPLODE,
    Component,
    Expression,
    Literal,
    Prefix,
    VariableSpec,
)
from uritpl.exceptions import (
    InvalidModifierError,
    InvalidVariableNameError,
    MalformedExpressionError,
    UnexpectedCharacterError,
)
from uritpl.logging import get_logger
from uritpl.types.base import Operator

__all__ = [
    "parse_template",
    "parse_expression_content",
    "parse_variable_spec",
    "is_valid_variable_name",
    "is_valid_percent_encoded",
]

logger = get_logger(__name__)

_HEX_DIGITS = frozenset(hexdigits)


def _is_blank(char: str) -> bool:
    return char == "\t" or unicodedata.category(char) == "Zs"


def _trim(text: str) -> str:
    """Strip tabs and space separators; newlines and controls are kept."""
    start, end = 0, len(text)
    while start < end and _is_blank(text[start]):
        start += 1
    while end > start and _is_blank(text[end - 1]):
        end -= 1
    return text[start:end]


def parse_template(
    text: str, config: Optional[ParserConfig] = None
) -> Tuple[Component, ...]:
    """Parse template text into literal and expression components.

    A backslash directly before ``{`` or ``}`` turns the brace into literal
    text; the backslash itself is kept.

    Args:
        text: Template text.
        config: Parser limits; defaults to ``PARSER_CONFIG``.

    Returns:
        Components in source order.

    Raises:
        MalformedExpressionError: Unclosed, empty or nested expression, or an
            invalid operator.
        InvalidVariableNameError: A variable name fails validation.
        InvalidModifierError: A prefix modifier is not a valid length.
        UnexpectedCharacterError: Unmatched ``}`` in literal text.

    Examples:
        >>> parse_template("/users{/id}")
        (Literal(text='/users'), Expression(operator=<Operator.PATH: 5>, variables=(VariableSpec(name='id', modifier=None),)))
    """
    cfg = config or PARSER_CONFIG
    components: List[Component] = []
    literal: List[str] = []
    index = 0

    while index < len(text):
        char = text[index]

        if char in "{}" and literal and literal[-1] == "\\":
            literal.append(char)
            index += 1
        elif char == "{":
            if literal:
                components.append(Literal("".join(literal)))
                literal = []
            expression, index = _parse_expression(text, index, cfg)
            components.append(expression)
        elif char == "}":
            raise UnexpectedCharacterError(char, index)
        else:
            literal.append(char)
            index += 1

    if literal:
        components.append(Literal("".join(literal)))

    logger.debug(
        f"Parsed template {text!r} into {len(components)} component(s)"
    )
    return tuple(components)


def _parse_expression(
    text: str, start: int, config: ParserConfig
) -> Tuple[Expression, int]:
    """Parse the expression opening at ``text[start]``.

    Returns:
        The expression and the index just past its closing brace.
    """
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "}":
            content = text[start + 1 : index]
            return parse_expression_content(content, config), index + 1
        if char == "{":
            raise MalformedExpressionError(f"nested '{{' at position {index}")
        index += 1
    raise MalformedExpressionError(f"unclosed expression starting at position {start}")


def parse_expression_content(
    content: str, config: Optional[ParserConfig] = None
) -> Expression:
    """Parse the text between an expression's braces.

    Args:
        content: Expression body, e.g. ``"?x,y*"``.
        config: Parser limits; defaults to ``PARSER_CONFIG``.

    Returns:
        The parsed expression.
    """
    if not content:
        raise MalformedExpressionError("empty expression")

    operator, variable_list = _parse_operator(content)
    variables = _parse_variable_list(variable_list, config or PARSER_CONFIG)
    return Expression(operator=operator, variables=variables)


def _parse_operator(content: str) -> Tuple[Operator, str]:
    first = content[0]
    if first == "@":
        raise MalformedExpressionError("invalid operator '@'")

    operator = Operator.from_symbol(first)
    if operator is None:
        return Operator.SIMPLE, content

    remaining = content[1:]
    if operator is Operator.RESERVED and remaining.startswith("+"):
        raise MalformedExpressionError("invalid operator sequence '++'")
    return operator, remaining


def _parse_variable_list(
    variable_list: str, config: ParserConfig
) -> Tuple[VariableSpec, ...]:
    if not _trim(variable_list):
        raise MalformedExpressionError("empty variable list")

    # Keep empty entries so stray commas are reported
    parts = variable_list.split(",")
    if any(not _trim(part) for part in parts):
        raise MalformedExpressionError(f"empty variable name in '{variable_list}'")

    return tuple(parse_variable_spec(part, config) for part in parts)


def parse_variable_spec(
    spec: str, config: Optional[ParserConfig] = None
) -> VariableSpec:
    """Parse one ``name``, ``name*`` or ``name:N`` entry.

    Surrounding spaces and tabs are ignored; other whitespace such as a
    newline is part of the name and fails validation.

    Raises:
        InvalidVariableNameError: The name part fails validation.
        InvalidModifierError: ``N`` is not a positive integer within
            ``config.max_prefix_length``.
    """
    cfg = config or PARSER_CONFIG
    trimmed = _trim(spec)

    if trimmed.endswith("*"):
        name = trimmed[:-1]
        _check_name(name)
        return VariableSpec(name=name, modifier=EXPLODE)

    if ":" in trimmed:
        # Last colon, so a name may carry ':' in percent-encoded form only
        name, _, raw_length = trimmed.rpartition(":")
        _check_name(name)
        return VariableSpec(name=name, modifier=Prefix(_parse_prefix(raw_length, cfg)))

    _check_name(trimmed)
    return VariableSpec(name=trimmed)


def _parse_prefix(raw: str, config: ParserConfig) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidModifierError(raw)
    length = int(raw)
    if not config.accepts_prefix_length(length):
        raise InvalidModifierError(raw)
    return length


def _check_name(name: str) -> None:
    if not is_valid_variable_name(name):
        raise InvalidVariableNameError(name)


def is_valid_variable_name(name: str) -> bool:
    """Return True if ``name`` may be used as a variable name.

    Names with ``%`` must use well-formed ``%XX`` sequences and otherwise only
    letters, digits, ``_`` and ``.``. Names without ``%`` may also use any
    non-ASCII character.

    Examples:
        >>> is_valid_variable_name("user.name")
        True
        >>> is_valid_variable_name("user%20name")
        True
        >>> is_valid_variable_name("var-name")
        False
    """
    if not name:
        return False
    if "%" in name:
        return is_valid_percent_encoded(name)
    return all(
        char.isalnum() or char in "_." or ord(char) > 0x7F for char in name
    )


def is_valid_percent_encoded(name: str) -> bool:
    """Return True if every ``%`` in ``name`` starts a two-hex-digit escape.

    Characters outside escapes must be letters, digits, ``_`` or ``.``.
    """
    index = 0
    while index < len(name):
        char = name[index]
        if char == "%":
            hex_pair = name[index + 1 : index + 3]
            if len(hex_pair) != 2 or not all(c in _HEX_DIGITS for c in hex_pair):
                return False
            index += 3
        elif char.isalnum() or char in "_.":
            index += 1
        else:
            return False
    return True
