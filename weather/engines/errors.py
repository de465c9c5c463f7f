from __future__ import annotations

from .types import ErrorKind


class FetchError(Exception):
    """Base error for a failed weather lookup."""

    kind: ErrorKind = "transport"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class TransportError(FetchError):
    """DNS, connect, TLS or connection-reset failure."""

    kind: ErrorKind = "transport"


class FetchTimeoutError(FetchError):
    """No response within the request timeout."""

    kind: ErrorKind = "timeout"

    def __init__(self, message: str = "Request timeout") -> None:
        super().__init__(message)


class HttpStatusError(FetchError):
    """The provider answered with anything other than 200."""

    kind: ErrorKind = "http_status"

    def __init__(self, status_code: int, reason: str = "") -> None:
        message = f"HTTP {status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ParseError(FetchError):
    """Malformed JSON or a missing/mistyped field in the payload."""

    kind: ErrorKind = "parse"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
