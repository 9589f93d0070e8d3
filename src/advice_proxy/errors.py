"""Error taxonomy for the advice proxy.

Every error carries the HTTP status it is surfaced as. The app's
exception handlers turn these into ``{"detail": ...}`` responses, so no
failure ever escapes to the server loop.
"""

from fastapi import status


class AdviceProxyError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UpstreamError(AdviceProxyError):
    """Raised when the advice provider is unreachable, slow, or returns a bad payload."""

    status_code = status.HTTP_502_BAD_GATEWAY


class InvalidIdentifierError(AdviceProxyError):
    """Raised when a path identifier is not a valid integer."""

    status_code = status.HTTP_400_BAD_REQUEST


class AdviceNotFoundError(AdviceProxyError):
    """Raised when an advice id is not in the store."""

    status_code = status.HTTP_404_NOT_FOUND


class RequestTimeoutError(AdviceProxyError):
    """Raised when a request exceeds its time budget."""

    status_code = status.HTTP_408_REQUEST_TIMEOUT


class InternalError(AdviceProxyError):
    """Raised for any other failure inside a handler."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
