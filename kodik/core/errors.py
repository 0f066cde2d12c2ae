"""Exceptions raised by the Kodik client."""


class KodikError(Exception):
    """Base class for every failure surfaced by the client."""

    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception


class HttpError(KodikError):
    """The HTTP call itself failed (connection, TLS, timeout)."""


class SerializeError(KodikError):
    """A query configuration could not be turned into query parameters."""


class MalformedResponseError(KodikError):
    """The response body matched neither the success nor the error shape."""

    def __init__(
        self,
        message: str,
        original_exception: Exception = None,
        status_code: int | None = None,
    ):
        super().__init__(message, original_exception)
        self.status_code = status_code


class KodikApiError(KodikError):
    """Kodik answered with an ``{"error": ...}`` payload."""

    def __init__(self, message: str):
        super().__init__(f"Kodik error: {message}")
        self.message = message
