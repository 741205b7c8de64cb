"""deepform - parse flat form data into nested, typed structures"""

from ._version import version as __version__
from .casting import to_boolean, to_number
from .errors import DeepFormError, InvalidPathError, UnsupportedSourceError
from .key_mapping import Cast, FormKey, deep_set, parse_key
from .parser import ParseOptions, parse_form_data
from .sources import iter_entries


__all__ = [
    "Cast",
    "DeepFormError",
    "FormKey",
    "InvalidPathError",
    "ParseOptions",
    "UnsupportedSourceError",
    "__version__",
    "deep_set",
    "iter_entries",
    "parse_form_data",
    "parse_key",
    "to_boolean",
    "to_number",
]
