"""Parse errors raised while building a URI template.

Every error is a ``ValueError`` so callers validating configuration can catch
template problems alongside other invalid values. Expansion never raises.
"""

from __future__ import annotations

__all__ = [
    "URITemplateError",
    "MalformedExpressionError",
    "InvalidVariableNameError",
    "InvalidModifierError",
    "UnexpectedCharacterError",
]


class URITemplateError(ValueError):
    """Base class for template syntax errors.

    Attributes:
        detail: The offending text or a short description of the problem.
    """

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.detail = detail


class MalformedExpressionError(URITemplateError):
    """Expression braces, operator or variable list are structurally invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed expression: {detail}", detail)


class InvalidVariableNameError(URITemplateError):
    """Variable name contains characters outside the allowed set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid variable name: '{name}'", name)
        self.name = name


class InvalidModifierError(URITemplateError):
    """Prefix modifier is not a positive integer within the configured bound."""

    def __init__(self, modifier: str) -> None:
        super().__init__(f"Invalid prefix modifier: '{modifier}'", modifier)
        self.modifier = modifier


class UnexpectedCharacterError(URITemplateError):
    """Character that cannot appear at this point of the template.

    Attributes:
        character: The offending character.
        position: 0-based character offset into the template text.
    """

    def __init__(self, character: str, position: int) -> None:
        super().__init__(
            f"Unexpected character '{character}' at position {position}", character
        )
        self.character = character
        self.position = position
