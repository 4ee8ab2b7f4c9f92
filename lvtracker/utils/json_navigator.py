"""
One-level-at-a-time lookups over decoded JSON of unknown shape.

The catalog API nests the fields we need (``_links.self.href`` and friends) at
depths that change between SKUs, so lookups never assume a schema. Each call
descends a single level and answers ``MISSING`` instead of raising when the
level is not there. ``MISSING`` is distinct from a legitimate ``null``, ``0``
or ``""`` in the payload.
"""

from collections.abc import Mapping
from typing import Any, Union


class _Missing:
    """Sentinel type for an absent JSON value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def is_missing(value: Any) -> bool:
    return value is MISSING


def find_value(node: Any, key: str) -> Any:
    """Value stored under key in node, or MISSING if node is not a mapping or lacks key."""
    if isinstance(node, Mapping) and key in node:
        return node[key]
    return MISSING


def find_index(node: Any, index: int) -> Any:
    """Element at index in node, or MISSING if node is not a list or index is out of range."""
    if isinstance(node, list) and -len(node) <= index < len(node):
        return node[index]
    return MISSING


def walk(node: Any, *path: Union[str, int]) -> Any:
    """
    Chain single-level lookups along path.

    String steps are mapping keys, integer steps are list indices. The walk
    stops at the first absent level and returns MISSING.

    >>> walk({"_links": {"self": {"href": "/p/1"}}}, "_links", "self", "href")
    '/p/1'
    >>> walk({"_links": None}, "_links", "self", "href")
    MISSING
    """
    for step in path:
        if node is MISSING:
            return MISSING
        if isinstance(step, int) and not isinstance(step, bool):
            node = find_index(node, step)
        else:
            node = find_value(node, step)
    return node
