"""Key marker parsing for compact form field names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


ARRAY_SUFFIX = "[]"


class Cast(Enum):
    """Primitive cast requested by a key prefix."""

    NONE = ""
    NUMBER = "+"
    BOOLEAN = "&"


@dataclass(frozen=True)
class FormKey:
    """A form field name split into its destination path and markers."""

    path: str
    cast: Cast = Cast.NONE
    is_array: bool = False


def parse_key(raw_key: str) -> FormKey:
    """Split a raw form key into path, cast and array markers.

    The ``[]`` suffix is examined first, so ``+a[]`` is an array of numbers.
    Only one cast prefix is stripped: ``+&a`` casts to a number at path ``&a``.
    """
    path = raw_key
    is_array = path.endswith(ARRAY_SUFFIX)
    if is_array:
        path = path.removesuffix(ARRAY_SUFFIX)

    cast = Cast.NONE
    if path.startswith(Cast.NUMBER.value):
        cast = Cast.NUMBER
        path = path[1:]
    elif path.startswith(Cast.BOOLEAN.value):
        cast = Cast.BOOLEAN
        path = path[1:]

    return FormKey(path=path, cast=cast, is_array=is_array)
