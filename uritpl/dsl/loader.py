"""YAML/JSON loader + schema validation for variable bindings.

Bindings files map variable names to values:

    q: search terms
    page: 2
    resource: [users, "42"]
    params: {lang: en, sort: desc}

JSON files are accepted as well since JSON is a YAML subset. Keys are always
strings, so YAML 1.1 spellings such as `yes:` or `1:` name distinct variables.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema

from uritpl.logging import get_logger
from uritpl.utils.yaml_utils import safe_load_string_keys

__all__ = [
    "load_bindings_yaml",
    "load_bindings_file",
]

logger = get_logger(__name__)


def _bindings_schema() -> Dict[str, Any]:
    with (
        resources.files("uritpl.schemas")
        .joinpath("bindings.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_bindings_yaml(yaml_str: str) -> Dict[str, Any]:
    """Parse, normalize and validate a bindings document.

    Args:
        yaml_str: YAML or JSON text.

    Returns:
        Mapping of variable names to raw values, ready for
        ``Template.expand``.

    Raises:
        ValueError: The document is not a mapping at top level.
        jsonschema.ValidationError: A value has an unsupported shape.
    """
    data = safe_load_string_keys(yaml_str)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("The provided bindings must map to a dictionary at top-level.")

    jsonschema.validate(data, _bindings_schema())

    logger.debug(f"Loaded {len(data)} binding(s)")
    return data


def load_bindings_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read ``path`` and delegate to ``load_bindings_yaml``."""
    return load_bindings_yaml(Path(path).read_text(encoding="utf-8"))
