"""URI template objects and module-level helpers.

A ``Template`` is parsed once at construction and can then be expanded any
number of times, from any thread, with different bindings.

Example:
    >>> from uritpl import Template
    >>> t = Template("https://api.example.com{/resource*}{?page}")
    >>> t.expand(resource=["users", "42"], page=2)
    'https://api.example.com/users/42?page=2'
    >>> t.variables()
    ['resource', 'page']
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from uritpl.config import ParserConfig
from uritpl.dsl.expansion import expand_expression
from uritpl.dsl.parser import parse_template
from uritpl.dsl.schema import Component, Expression, Literal
from uritpl.exceptions import URITemplateError

__all__ = [
    "Template",
    "expand",
    "validate",
    "variables",
]


class Template:
    """Parsed URI template.

    Args:
        text: Template text.
        config: Optional parser limits.

    Raises:
        URITemplateError: The text is not a valid template. No partially
            parsed template is ever returned.
    """

    __slots__ = ("_text", "_components")

    def __init__(self, text: str, config: Optional[ParserConfig] = None) -> None:
        self._text = text
        self._components: Tuple[Component, ...] = parse_template(text, config)

    @classmethod
    def parse(cls, text: str, config: Optional[ParserConfig] = None) -> "Template":
        """Alternate constructor, same as ``Template(text)``."""
        return cls(text, config)

    @property
    def text(self) -> str:
        return self._text

    @property
    def components(self) -> Tuple[Component, ...]:
        return self._components

    def expand(
        self, var_dict: Optional[Mapping[str, Any]] = None, /, **kwargs: Any
    ) -> str:
        """Expand the template.

        Args:
            var_dict: Mapping of variable names to values.
            **kwargs: Further bindings; these win over ``var_dict`` entries
                with the same name.

        Returns:
            The expanded string. Undefined variables expand to nothing.
        """
        bindings: Mapping[str, Any]
        if kwargs:
            merged: Dict[str, Any] = dict(var_dict or {})
            merged.update(kwargs)
            bindings = merged
        else:
            bindings = var_dict or {}

        return "".join(
            component.text
            if isinstance(component, Literal)
            else expand_expression(component, bindings)
            for component in self._components
        )

    def variables(self) -> List[str]:
        """Names of all referenced variables in source order, duplicates kept."""
        return [
            variable.name
            for component in self._components
            if isinstance(component, Expression)
            for variable in component.variables
        ]

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Template({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)


def expand(
    text: str, var_dict: Optional[Mapping[str, Any]] = None, /, **kwargs: Any
) -> str:
    """Parse ``text`` and expand it in one call.

    Raises:
        URITemplateError: ``text`` is not a valid template.

    Example:
        >>> expand("{+path}/here", path="/foo/bar")
        '/foo/bar/here'
    """
    return Template(text).expand(var_dict, **kwargs)


def validate(text: str) -> bool:
    """Return True if ``text`` parses as a template."""
    try:
        Template(text)
    except URITemplateError:
        return False
    return True


def variables(text: str) -> List[str]:
    """Return the variable names referenced by ``text`` in source order."""
    return Template(text).variables()
