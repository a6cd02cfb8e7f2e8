"""Expansion of parsed templates.

Usage:
    from uritpl.dsl.expansion import expand_expression, percent_encode

    percent_encode("a b")  # "a%20b"
"""

from .encoding import RESERVED, UNRESERVED, percent_encode
from .variables import expand_expression, expand_value

__all__ = [
    # Encoding
    "percent_encode",
    "UNRESERVED",
    "RESERVED",
    # Expression expansion
    "expand_expression",
    "expand_value",
]
