"""Exception types raised by deepform."""

from __future__ import annotations


class DeepFormError(Exception):
    """Base class for all deepform errors."""


class InvalidPathError(DeepFormError, ValueError):
    """Raised when a destination path cannot address any location."""


class UnsupportedSourceError(DeepFormError, TypeError):
    """Raised when form data is given in a shape that cannot yield key/value pairs."""
