"""Key marker parsing and nested assignment utilities."""

from .markers import Cast, FormKey, parse_key
from .nested import deep_set


__all__ = ["Cast", "FormKey", "deep_set", "parse_key"]
