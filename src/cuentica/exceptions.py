"""Exception hierarchy for the cuentica client.

All exceptions inherit from :class:`CuenticaError` so callers can catch
every client failure in one place.  The client never retries or swallows a
failure; each one reaches the caller as exactly one of these kinds.

Subclass hierarchy::

    CuenticaError
    +-- ApiError            (4xx/5xx with a decoded message)
    |   +-- RateLimitError  (429, carries retry_after)
    +-- ConfigError         (missing credential, raised at construction)
    +-- NetworkError        (timeout or transport failure)

Distinguishing "not found" from "validation failed" is done by inspecting
:attr:`ApiError.status_code`.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CuenticaError(Exception):
    """Base exception for all cuentica client errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ApiError(CuenticaError):
    """Raised when the API answers with a non-2xx status.

    Args:
        message: Decoded error message (see :meth:`from_response`).
        status_code: HTTP status of the response.
        code: Machine-readable error code, when the API supplied one.
        details: Extra diagnostic payload (validation errors, ids, ...).
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.details = details

    @classmethod
    def from_response(cls, status: int, body: Any) -> ApiError:
        """Build an :class:`ApiError` from a status code and a decoded body.

        The body is untrusted structured data.  Shapes are tried in order,
        falling back at each stage:

        1. ``{"error": {"message", "code", "details"}}``
        2. ``{"message": ..., "errors": [{"field", "message"}, ...]}``
        3. ``"HTTP <status>"``

        Args:
            status: HTTP status code.
            body: Parsed response body; any JSON value or ``None``.

        Returns:
            The constructed error (not raised).
        """
        fallback = f"HTTP {status}"
        if not isinstance(body, Mapping):
            return cls(fallback, status)

        error = body.get("error")
        if isinstance(error, Mapping):
            message = error.get("message")
            return cls(
                message if isinstance(message, str) and message else fallback,
                status,
                error.get("code"),
                error.get("details"),
            )

        message = body.get("message")
        if isinstance(message, str):
            errors = body.get("errors")
            if isinstance(errors, list) and errors:
                detail_messages = "; ".join(
                    f"{item.get('field')}: {item.get('message')}"
                    for item in errors
                    if isinstance(item, Mapping)
                )
                if detail_messages:
                    message = f"{message} - {detail_messages}"
            return cls(message, status, None, errors)

        return cls(fallback, status)


class RateLimitError(ApiError):
    """Raised for HTTP 429.

    Args:
        message: Error description.
        retry_after: Seconds to wait before retrying, from ``Retry-After``,
            or ``None`` when the header was missing or not numeric.
        details: Decoded response body, if any.
    """

    CODE = "RATE_LIMIT_EXCEEDED"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message, 429, self.CODE, details)
        self.retry_after = retry_after

    @staticmethod
    def retry_after_from_header(value: Optional[str]) -> Optional[int]:
        """Parse a ``Retry-After`` header value given in seconds.

        Only the leading integer counts, so ``"1.5"`` gives ``1``.  Values
        that do not start with a number (such as an HTTP date) give ``None``.
        """
        if value is None:
            return None
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None


class ConfigError(CuenticaError):
    """Raised at construction time for configuration problems (missing API token)."""


class NetworkError(CuenticaError):
    """Raised on transport failures: timeouts, DNS errors, refused connections.

    Args:
        message: Error description.  Timeouts always use ``"Request timeout"``.
        cause: The underlying exception, when there is one.
    """

    TIMEOUT_MESSAGE = "Request timeout"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
