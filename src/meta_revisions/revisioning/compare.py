"""Sequence equality for metadata values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from meta_revisions.config import ComparisonMode

if TYPE_CHECKING:
    from collections.abc import Sequence


def _canonical(value: Any) -> tuple[Any, ...]:
    """Type-tagged form of a value: 1, 1.0, "1" and True stay apart, dict and set order is ignored."""
    if isinstance(value, dict):
        items = ((_canonical(key), _canonical(item)) for key, item in value.items())
        return ("dict", tuple(sorted(items, key=repr)))
    if isinstance(value, list | tuple):
        return ("list", tuple(_canonical(item) for item in value))
    if isinstance(value, set | frozenset):
        return ("set", tuple(sorted((_canonical(item) for item in value), key=repr)))
    if isinstance(value, float):
        # repr keeps NaN equal to itself
        return ("float", repr(value))
    return (type(value).__name__, value)


def _coerce(value: Any) -> Any:
    """Reduce a value to the string form a type-coercing comparison would see."""
    if isinstance(value, dict):
        return {str(key): _coerce(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_coerce(item) for item in value]
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def sequences_equal(
    left: Sequence[Any],
    right: Sequence[Any],
    mode: ComparisonMode = ComparisonMode.STRICT,
) -> bool:
    """Compare two value sequences element by element, order and duplicates included."""
    if len(left) != len(right):
        return False
    if mode == ComparisonMode.LOOSE:
        return all(_coerce(a) == _coerce(b) for a, b in zip(left, right, strict=True))
    return all(_canonical(a) == _canonical(b) for a, b in zip(left, right, strict=True))


def is_empty_value(value: Any) -> bool:
    """Empty candidates are never written to a draft: None, "" and empty collections."""
    if value is None:
        return True
    if isinstance(value, str | bytes | list | tuple | dict | set):
        return len(value) == 0
    return False
