"""Incremental tree builder for flat form entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from deepform.casting import to_boolean, to_number
from deepform.key_mapping import Cast, deep_set, parse_key
from deepform.sources import iter_entries


if TYPE_CHECKING:
    from collections.abc import Callable


logger = logging.getLogger(__name__)

_CASTS: dict[Cast, Callable[[Any], Any]] = {
    Cast.NUMBER: to_number,
    Cast.BOOLEAN: to_boolean,
}


@dataclass(frozen=True)
class ParseOptions:
    """Per-call parsing options.

    With ``omit_empty_strings`` set, entries whose value is exactly ``""`` are
    skipped before any key processing.
    """

    omit_empty_strings: bool = False


def parse_form_data(
    data: Any,
    *,
    omit_empty_strings: bool | None = None,
    options: ParseOptions | None = None,
) -> dict[str, Any]:
    """Parse flat form entries into a nested dict.

    Keys use ``.`` for nesting, a trailing ``[]`` to collect repeated entries
    into a list, and a leading ``+`` or ``&`` to cast the value to a number or
    a boolean::

        >>> parse_form_data([("a", "0"), ("b.c[]", "1"), ("+b.c[]", "2"), ("&b.d", "on")])
        {'a': '0', 'b': {'c': ['1', 2], 'd': True}}

    ``data`` may be anything :func:`deepform.sources.iter_entries` accepts.
    Repeated keys without ``[]`` overwrite each other, last one wins.
    """
    if options is None:
        options = ParseOptions()
    if omit_empty_strings is None:
        omit_empty_strings = options.omit_empty_strings

    result: dict[str, Any] = {}
    arrays: dict[str, list[Any]] = {}
    skipped = 0

    for key, value in iter_entries(data):
        if omit_empty_strings and isinstance(value, str) and value == "":
            skipped += 1
            continue

        form_key = parse_key(key)
        cast = _CASTS.get(form_key.cast)
        parsed_value = cast(value) if cast is not None else value

        if form_key.is_array:
            array = arrays.setdefault(form_key.path, [])
            array.append(parsed_value)
            deep_set(result, form_key.path, array)
        else:
            deep_set(result, form_key.path, parsed_value)

    logger.debug(
        "parsed form data: %d top-level keys, %d arrays, %d empty entries skipped",
        len(result),
        len(arrays),
        skipped,
    )
    return result
