"""HTTP client layer for the Cuentica API.

:class:`CuenticaClient` owns the transport, the auth header, the timeout,
error mapping and the response cache.  The helpers in
:mod:`cuentica.client.response` decode bodies and pagination headers.
"""

from cuentica.client.async_client import CuenticaClient
from cuentica.client.response import (
    parse_error_body,
    parse_pagination_headers,
    parse_response_body,
)

__all__ = [
    "CuenticaClient",
    "parse_error_body",
    "parse_pagination_headers",
    "parse_response_body",
]
