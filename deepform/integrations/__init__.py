"""Framework integrations."""

from .starlette import FormParser, parse_request_form, parse_request_query


__all__ = ["FormParser", "parse_request_form", "parse_request_query"]
