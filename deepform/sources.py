"""Normalization of the input shapes accepted as form data."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import parse_qsl

from deepform.errors import UnsupportedSourceError


def _query_string_entries(query: str | bytes) -> list[tuple[str, str]]:
    if isinstance(query, bytes):
        query = query.decode(errors="replace")
    return parse_qsl(query.removeprefix("?"), keep_blank_values=True)


def _mapping_entries(mapping: Mapping[str, Any]) -> Iterable[tuple[str, Any]]:
    for key, value in mapping.items():
        if isinstance(value, (list, tuple)):
            for item in value:
                yield key, item
        else:
            yield key, value


def _pair(entry: Any) -> tuple[str, Any]:
    try:
        key, value = entry
    except (TypeError, ValueError) as error:
        msg = f"form entries must be (key, value) pairs, got {entry!r}"
        raise UnsupportedSourceError(msg) from error
    if not isinstance(key, str):
        msg = f"form keys must be strings, got {type(key).__name__}"
        raise UnsupportedSourceError(msg)
    return key, value


def iter_entries(data: Any) -> Iterable[tuple[str, Any]]:
    """Yield ``(key, value)`` pairs from any supported form data shape.

    Accepted shapes, in the order they are checked:

    - a query string, ``str`` or ``bytes``, with or without a leading ``?``
    - multi-dicts exposing ``multi_items()`` (Starlette ``FormData`` and
      ``QueryParams``, ``multidict``)
    - multi-dicts exposing ``items(multi=True)`` (Werkzeug ``MultiDict``)
    - plain mappings; list or tuple values give one entry per item, matching
      what ``urllib.parse.parse_qs`` returns
    - any other iterable of ``(key, value)`` pairs

    Order is preserved and the source is consumed lazily.
    """
    if isinstance(data, (str, bytes)):
        yield from _query_string_entries(data)
        return

    multi_items = getattr(data, "multi_items", None)
    if callable(multi_items):
        entries: Iterable[Any] = multi_items()
    elif isinstance(data, Mapping):
        try:
            entries = data.items(multi=True)  # type: ignore[call-arg]
        except TypeError:
            entries = _mapping_entries(data)
    elif isinstance(data, Iterable):
        entries = data
    else:
        msg = f"cannot read form entries from {type(data).__name__}"
        raise UnsupportedSourceError(msg)

    for entry in entries:
        yield _pair(entry)
