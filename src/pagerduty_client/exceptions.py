"""
Exception hierarchy for the PagerDuty client library.

Every error raised by the client derives from PagerDutyClientError, so callers
that only care whether an operation completed can catch that single class.
Status errors preserve the PagerDuty error code and the ``errors`` list from
the response body.
"""

from typing import Any, Dict, Optional


class PagerDutyClientError(Exception):
    """
    Base exception for all PagerDuty client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: PagerDuty error code (e.g., 2001)
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code is not None:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# HTTP Status Errors
# =============================================================================


class ValidationError(PagerDutyClientError):
    """The API rejected the request payload or query (400)."""

    def __init__(
        self,
        message: str = "Invalid request",
        *,
        status_code: int = 400,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )

    @property
    def errors(self) -> list:
        """Field level messages reported by the API."""
        return self.details.get("errors", [])


class AuthenticationError(PagerDutyClientError):
    """
    Authentication failed.

    Raised when no API key was configured or the key was rejected.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class AuthorizationError(PagerDutyClientError):
    """The API key lacks permission for the requested operation (403)."""

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class NotFoundError(PagerDutyClientError):
    """The requested resource does not exist (404)."""

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class ConflictError(PagerDutyClientError):
    """The request conflicts with the current state of the resource (409)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class RateLimitError(PagerDutyClientError):
    """
    Too many requests (429).

    The client never waits or retries; ``retry_after`` is exposed so the
    caller can decide.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.retry_after = retry_after


class ServerError(PagerDutyClientError):
    """PagerDuty failed to process the request (5xx)."""

    def __init__(
        self,
        message: str = "Internal server error",
        *,
        status_code: int = 500,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class ServiceUnavailableError(ServerError):
    """PagerDuty is temporarily unavailable (503)."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(PagerDutyClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport issue before a response was received.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=None,
            error_code=None,
            details=details,
        )


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Response Errors
# =============================================================================


class ResponseDecodeError(PagerDutyClientError):
    """The response body was not JSON or did not match the expected shape."""

    def __init__(
        self,
        message: str = "Could not decode JSON response",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class MissingRootFieldError(PagerDutyClientError):
    """
    A singular response was not wrapped in the expected root field.

    PagerDuty wraps single resources as ``{"extension": {...}}``; anything
    else is a protocol violation by the server.
    """

    def __init__(
        self,
        root_node: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            f"JSON response does not have {root_node} field",
            details=details,
        )
        self.root_node = root_node


# =============================================================================
# Exception Mapping
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[int] = None,
    details: Optional[Dict[str, Any]] = None,
) -> PagerDutyClientError:
    """
    Create an appropriate exception from an HTTP response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: PagerDuty error code
        details: Additional error details

    Returns:
        Appropriate PagerDutyClientError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else PagerDutyClientError
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        details=details,
    )
