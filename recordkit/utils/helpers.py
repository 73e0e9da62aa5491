"""
Helper Functions
================

Comparison and string helpers for plain serializable data.
"""

from collections.abc import Mapping
from typing import Any


def _kind(value: Any) -> str:
    # JSON-style classification; bool must be checked before int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def deep_equal(a: Any, b: Any) -> bool:
    """
    Simple deep comparison of serializable values (dicts, lists, tuples,
    strings, numbers, booleans and ``None``).

    Self-referencing structures are not supported and will recurse until
    ``RecursionError``.
    """
    if a is b:
        return True

    kind = _kind(a)
    if kind != _kind(b):
        return False
    if kind != "object":
        return a == b

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        return all(key in b and deep_equal(a[key], b[key]) for key in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if a is None or b is None:
        return False
    if isinstance(a, (Mapping, list, tuple)) or isinstance(b, (Mapping, list, tuple)):
        return False

    return a == b


def quote(text: str) -> str:
    """Wrap a string in double quotes."""
    return f'"{text}"'


def unquote(text: str) -> str:
    """Remove surrounding double quotes, if any."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text
