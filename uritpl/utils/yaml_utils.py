"""Helpers for YAML-sourced binding files."""

from typing import Any, Dict

import yaml


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


class StringKeySafeLoader(yaml.SafeLoader):
    """``SafeLoader`` that turns every mapping key into a string.

    YAML 1.1 reads keys such as ``yes``/``on``/``true`` as booleans and ``1``
    as an integer. Since ``True == 1`` in Python, a plain ``safe_load`` would
    merge ``yes:`` and ``1:`` into one entry before any later normalization
    could run. Converting keys while the mapping is built keeps both:
    booleans become ``"true"``/``"false"`` (the spelling templates expect) and
    everything else goes through ``str``.
    """


def _construct_string_key_mapping(
    loader: StringKeySafeLoader, node: yaml.MappingNode
) -> Dict[str, Any]:
    loader.flatten_mapping(node)
    mapping: Dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=True)
        mapping[_key_text(key)] = loader.construct_object(value_node, deep=True)
    return mapping


StringKeySafeLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_string_key_mapping
)


def safe_load_string_keys(yaml_str: str) -> Any:
    """Load YAML like ``yaml.safe_load`` but with string keys at every level.

    Examples:
        >>> safe_load_string_keys("yes: a\\n1: {false: b}")
        {'true': 'a', '1': {'false': 'b'}}
    """
    return yaml.load(yaml_str, Loader=StringKeySafeLoader)
