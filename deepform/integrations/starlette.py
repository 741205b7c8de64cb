"""Starlette and FastAPI request helpers."""

import logging
from typing import Any, Literal

from starlette.requests import Request

from deepform.parser import parse_form_data


logger = logging.getLogger(__name__)


async def parse_request_form(request: Request, *, omit_empty_strings: bool = False) -> dict[str, Any]:
    """Parse a urlencoded or multipart request body into a nested dict.

    Uploaded files are kept as ``UploadFile`` leaves. Multipart parsing needs
    ``python-multipart`` installed, as for any Starlette form.
    """
    form = await request.form()
    return parse_form_data(form.multi_items(), omit_empty_strings=omit_empty_strings)


def parse_request_query(request: Request, *, omit_empty_strings: bool = False) -> dict[str, Any]:
    """Parse the request query string into a nested dict."""
    return parse_form_data(request.query_params.multi_items(), omit_empty_strings=omit_empty_strings)


class FormParser:
    """FastAPI dependency that parses the request form or query string::

        @app.post("/items")
        async def create_item(data: dict = Depends(FormParser(omit_empty_strings=True))):
            ...
    """

    def __init__(self, *, omit_empty_strings: bool = False, source: Literal["form", "query"] = "form") -> None:
        super().__init__()
        if source not in {"form", "query"}:
            msg = f"source must be 'form' or 'query', got {source!r}"
            raise ValueError(msg)
        self.omit_empty_strings = omit_empty_strings
        self.source = source

    async def __call__(self, request: Request) -> dict[str, Any]:
        logger.debug("parsing %s of %s %s", self.source, request.method, request.url.path)
        if self.source == "query":
            return parse_request_query(request, omit_empty_strings=self.omit_empty_strings)
        return await parse_request_form(request, omit_empty_strings=self.omit_empty_strings)
