"""uritpl: RFC 6570 URI Templates.

Templates are parsed once and expanded many times against variable bindings.
All four levels of the RFC are supported: simple and reserved expansion,
fragment/label/path/path-style/query operators, and the ``:N`` prefix and
``*`` explode modifiers.

Primary API:
    Template - Parsed template with expand() and variables()
    expand() - Parse and expand in one call
    validate() - Check template syntax without raising
    AssociativeArray - Ordered key/value pairs with duplicate keys

Example:
    from uritpl import Template, AssociativeArray

    t = Template("https://api.example.com/search{?q,lang,params*}")
    t.expand(q="uri templates", lang="en",
             params=AssociativeArray([("tag", "a"), ("tag", "b")]))
    # 'https://api.example.com/search?q=uri%20templates&lang=en&tag=a&tag=b'
"""

from __future__ import annotations

from uritpl import cli, logging
from uritpl._version import __version__
from uritpl.config import PARSER_CONFIG, ParserConfig
from uritpl.dsl.loader import load_bindings_file, load_bindings_yaml
from uritpl.dsl.schema import EXPLODE, Explode, Expression, Literal, Prefix, VariableSpec
from uritpl.exceptions import (
    InvalidModifierError,
    InvalidVariableNameError,
    MalformedExpressionError,
    UnexpectedCharacterError,
    URITemplateError,
)
from uritpl.template import Template, expand, validate, variables
from uritpl.types.base import Operator
from uritpl.types.values import AssociativeArray, VariableValue

__all__ = [
    # Version
    "__version__",
    # Templates (primary API)
    "Template",
    "expand",
    "validate",
    "variables",
    # Values
    "AssociativeArray",
    "VariableValue",
    # Parsed structure
    "Operator",
    "Literal",
    "Expression",
    "VariableSpec",
    "Prefix",
    "Explode",
    "EXPLODE",
    # Errors
    "URITemplateError",
    "MalformedExpressionError",
    "InvalidVariableNameError",
    "InvalidModifierError",
    "UnexpectedCharacterError",
    # Configuration
    "ParserConfig",
    "PARSER_CONFIG",
    # Bindings files
    "load_bindings_file",
    "load_bindings_yaml",
    # Utilities
    "cli",
    "logging",
]
