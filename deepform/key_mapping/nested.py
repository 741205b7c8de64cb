"""Nested structure assignment from dotted key paths."""

from __future__ import annotations

import logging
from typing import Any

from deepform.errors import InvalidPathError


logger = logging.getLogger(__name__)

SEP = "."

# Furthest a list index may reach past the current end; the gap is padded with None.
MAX_LIST_GAP = 20

_MISSING = object()


def is_index(segment: str) -> bool:
    """Return True when a path segment addresses a list position."""
    return segment.isascii() and segment.isdigit()


def _list_index(container: list[Any], segment: str) -> int | None:
    """Return the position ``segment`` addresses in ``container``, or None when it cannot be written."""
    if not is_index(segment) or len(segment) > len(str(len(container) + MAX_LIST_GAP)):
        return None
    index = int(segment)
    if index > len(container) + MAX_LIST_GAP:
        return None
    return index


def _child(container: dict[str, Any] | list[Any], segment: str) -> Any:
    if isinstance(container, dict):
        return container.get(segment, _MISSING)
    index = _list_index(container, segment)
    if index is not None and index < len(container):
        return container[index]
    return _MISSING


def _assign(container: dict[str, Any] | list[Any], segment: str, value: Any) -> bool:
    if isinstance(container, dict):
        container[segment] = value
        return True
    index = _list_index(container, segment)
    if index is None:
        return False
    if index >= len(container):
        container.extend([None] * (index + 1 - len(container)))
    container[index] = value
    return True


def deep_set(tree: dict[str, Any], path: str, value: Any) -> None:
    """Set ``value`` at a dotted ``path`` inside ``tree``.

    Missing intermediate containers are created on demand: a list when the
    following segment is a decimal index, a dict otherwise. Existing dicts and
    lists are reused so sibling keys are kept; any other value in the way is
    replaced. Lists are padded with ``None`` up to the assigned index.

    A write a list cannot hold, either a non-index key or an index more than
    ``MAX_LIST_GAP`` past the end, is dropped and leaves the tree unchanged.
    """
    if not path:
        msg = "path must not be empty"
        raise InvalidPathError(msg)

    segments = path.split(SEP)
    node: dict[str, Any] | list[Any] = tree
    for position, segment in enumerate(segments):
        if position == len(segments) - 1:
            if not _assign(node, segment, value):
                logger.debug("dropped write to %r: %r is not a usable list index", path, segment)
            return

        child = _child(node, segment)
        if not isinstance(child, (dict, list)):
            child = [] if is_index(segments[position + 1]) else {}
            if not _assign(node, segment, child):
                logger.debug("dropped write to %r: %r is not a usable list index", path, segment)
                return
        node = child
