"""Response decoding -- turns an :class:`httpx.Response` into Python values.

The Cuentica API answers with JSON for almost everything, raw PDF bytes for
invoice downloads, and the occasional plain-text or HTML page when a
gateway in front of it fails.  :func:`parse_response_body` picks a decoder
from the ``Content-Type`` header so that a message is always extractable,
and :func:`parse_pagination_headers` reads the pagination state the server
reports in response headers.

See Also:
    :mod:`cuentica.client.async_client` -- the request engine that calls
    these helpers for both success and error responses.
"""

from __future__ import annotations

import base64
from typing import Any, Mapping

import httpx

from cuentica.constants import (
    DEFAULT_CURRENT_PAGE,
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_TOTAL_ITEMS,
    DEFAULT_TOTAL_PAGES,
    HEADER_PAGE,
    HEADER_PER_PAGE,
    HEADER_TOTAL_COUNT,
    HEADER_TOTAL_PAGES,
)
from cuentica.models import PaginationInfo


def parse_response_body(response: httpx.Response) -> Any:
    """Decode the body of *response* according to its content type.

    * ``application/json`` -- decoded JSON value.
    * ``application/pdf`` -- ``{"pdf": "<base64>"}``.  Callers that need the
      raw bytes use :meth:`~cuentica.client.CuenticaClient.download`.
    * anything else -- ``{"message": "<text>"}``.

    Args:
        response: A fully read response.

    Returns:
        The decoded body.

    Raises:
        ValueError: If the body is declared as JSON but is not valid JSON.
    """
    content_type = response.headers.get("content-type", "")

    if "application/json" in content_type:
        return response.json()

    if "application/pdf" in content_type:
        return {"pdf": base64.b64encode(response.content).decode("ascii")}

    return {"message": response.text}


def parse_error_body(response: httpx.Response) -> Any:
    """Decode an error body, degrading to ``{"message": text}`` on bad JSON.

    Error pages must never fail to decode, otherwise the status code would
    be lost behind a parsing error.
    """
    try:
        return parse_response_body(response)
    except ValueError:
        return {"message": response.text}


def parse_pagination_headers(headers: Mapping[str, str]) -> PaginationInfo:
    """Extract :class:`~cuentica.models.PaginationInfo` from response headers.

    Each of ``X-Page``, ``X-Total-Pages``, ``X-Total-Count`` and
    ``X-Per-Page`` falls back to its default (``1``, ``1``, ``0``, ``25``)
    independently when missing or not an integer.
    """
    return PaginationInfo(
        current_page=_int_header(headers, HEADER_PAGE, DEFAULT_CURRENT_PAGE),
        total_pages=_int_header(headers, HEADER_TOTAL_PAGES, DEFAULT_TOTAL_PAGES),
        total_items=_int_header(headers, HEADER_TOTAL_COUNT, DEFAULT_TOTAL_ITEMS),
        items_per_page=_int_header(headers, HEADER_PER_PAGE, DEFAULT_ITEMS_PER_PAGE),
    )


def _int_header(headers: Mapping[str, str], name: str, default: int) -> int:
    value = headers.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default
