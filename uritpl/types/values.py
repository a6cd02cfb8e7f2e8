"""Variable values accepted at expansion time.

A binding is one of three shapes:

- ``str``: a single string value.
- ``list`` of ``str``: an ordered list value.
- ``AssociativeArray``: ordered ``(key, value)`` pairs; duplicate keys allowed.

``coerce_value`` maps the Python objects callers usually have at hand (numbers,
tuples, dicts) onto these shapes and returns None for anything that cannot be
expanded, which the expander treats as an undefined variable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from uritpl.logging import get_logger

__all__ = [
    "AssociativeArray",
    "VariableValue",
    "coerce_value",
]

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssociativeArray:
    """Ordered sequence of string key/value pairs.

    Unlike a ``dict``, duplicate keys are kept and expanded in order. A
    mapping may be passed instead of pairs; its items are used in order.

    Example:
        >>> AssociativeArray([("semi", ";"), ("dot", ".")])
        AssociativeArray(pairs=(('semi', ';'), ('dot', '.')))
    """

    pairs: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        entries: Iterable[Any] = self.pairs
        if isinstance(entries, Mapping):
            entries = entries.items()

        pairs: List[Tuple[str, str]] = []
        for entry in entries:
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise TypeError(
                    f"AssociativeArray entries must be (key, value) pairs, got {entry!r}"
                )
            pairs.append((entry[0], entry[1]))
        object.__setattr__(self, "pairs", tuple(pairs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "AssociativeArray":
        """Build from a mapping, keeping its iteration order."""
        return cls(tuple(mapping.items()))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


VariableValue = Union[str, List[str], AssociativeArray]


def _scalar(value: Any) -> Optional[str]:
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _coerce_items(items: Iterable[Any]) -> Optional[List[str]]:
    result: List[str] = []
    for item in items:
        text = _scalar(item)
        if text is None:
            return None
        result.append(text)
    return result


def _coerce_pairs(pairs: Iterable[Tuple[Any, Any]]) -> Optional[AssociativeArray]:
    result: List[Tuple[str, str]] = []
    for key, value in pairs:
        key_text = _scalar(key)
        value_text = _scalar(value)
        if key_text is None or value_text is None:
            return None
        result.append((key_text, value_text))
    return AssociativeArray(tuple(result))


def coerce_value(value: Any) -> Optional[VariableValue]:
    """Normalize a caller-supplied binding into a ``VariableValue``.

    Args:
        value: Binding as supplied by the caller.

    Returns:
        The normalized value, or None when the binding cannot be expanded
        (``None``, nested containers, arbitrary objects).

    Examples:
        >>> coerce_value(1024)
        '1024'
        >>> coerce_value(("a", "b"))
        ['a', 'b']
        >>> coerce_value({"k": "v"})
        AssociativeArray(pairs=(('k', 'v'),))
        >>> coerce_value(None) is None
        True
    """
    text = _scalar(value)
    if text is not None:
        return text

    coerced: Optional[VariableValue] = None
    if isinstance(value, AssociativeArray):
        coerced = _coerce_pairs(value.pairs)
    elif isinstance(value, Mapping):
        coerced = _coerce_pairs(value.items())
    elif isinstance(value, (list, tuple)):
        coerced = _coerce_items(value)

    if coerced is None and value is not None:
        logger.debug(
            f"Ignoring binding of unsupported shape {type(value).__name__}; "
            "treating it as undefined"
        )
    return coerced
