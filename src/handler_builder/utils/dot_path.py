"""
Dotted path helpers used by declarative input mappings.

Paths such as ``body.user.name`` are resolved against mappings (by key) and
against plain objects (by attribute), so the same mapping works for dict
events and for request objects exposed by a web framework.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, List

SEPARATOR = '.'

_MISSING = object()


def split_path(path: str) -> List[str]:
    """Split ``path`` into its segments, rejecting empty segments."""
    segments = path.split(SEPARATOR)
    if not path or any(not segment for segment in segments):
        raise ValueError(f"Invalid dotted path: '{path}'")
    return segments


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(segment, _MISSING)
    if isinstance(node, (list, tuple)) and segment.isdigit():
        index = int(segment)
        return node[index] if index < len(node) else _MISSING
    return getattr(node, segment, _MISSING)


def get_path(source: Any, path: str, default: Any = None) -> Any:
    """Return the value at ``path`` in ``source``, or ``default`` when any segment is missing."""
    node = source
    for segment in split_path(path):
        if node is None:
            return default
        node = _child(node, segment)
        if node is _MISSING:
            return default
    return node


def set_path(target: MutableMapping, path: str, value: Any) -> MutableMapping:
    """Write ``value`` at ``path`` in ``target``, creating intermediate dicts as needed."""
    segments = split_path(path)
    node = target
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = value
    return target
