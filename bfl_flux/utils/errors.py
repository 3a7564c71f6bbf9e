"""Custom exception classes for the FLUX client."""

from typing import Optional

FRIENDLY_MESSAGES = {
    400: "Bad request - please check your parameters",
    401: "Authentication failed - please check your API key",
    403: "Access forbidden - insufficient permissions",
    404: "Resource not found",
    429: "Rate limit exceeded - please try again later",
    500: "Internal server error - please try again later",
    502: "Bad gateway - service temporarily unavailable",
    503: "Service unavailable - please try again later",
}


class FluxError(Exception):
    """Base exception for all client errors."""

    pass


class InvalidArgumentError(FluxError, ValueError):
    """A caller-supplied parameter violates a precondition."""

    pass


class InvalidStatusError(FluxError):
    """The API returned a task status outside the known set."""

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(f"Unknown task status: {status!r}")


class FluxAPIError(FluxError):
    """FLUX API rejected a request."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"FLUX API error {status_code}: {message}")

    def is_client_error(self) -> bool:
        """Check if the error is a 4xx response."""
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        """Check if the error is a 5xx response."""
        return self.status_code >= 500

    def friendly_message(self) -> str:
        """Human-readable explanation of the status code."""
        return FRIENDLY_MESSAGES.get(self.status_code, "An unknown error occurred")


class AuthenticationError(FluxAPIError):
    """API key missing or rejected (HTTP 401)."""

    def __init__(self, message: str = "Authentication failed", status_code: int = 401) -> None:
        super().__init__(status_code, message)


class ResponseParseError(FluxError):
    """Response body could not be decoded."""

    pass


class RemoteCallError(FluxError):
    """Transport-level failure talking to the API."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


class PollTimeoutError(FluxError):
    """Polling gave up before the task reached a terminal status."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Task polling timed out after {attempts} attempts")
