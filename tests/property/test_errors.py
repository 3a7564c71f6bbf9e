"""Tests for the exception hierarchy."""

import pytest
from hypothesis import given, settings, strategies as st

from bfl_flux.utils.errors import (
    AuthenticationError,
    FluxAPIError,
    FluxError,
    InvalidArgumentError,
    InvalidStatusError,
    PollTimeoutError,
    RemoteCallError,
    ResponseParseError,
)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            InvalidArgumentError("bad"),
            InvalidStatusError("Done"),
            FluxAPIError(500, "boom"),
            AuthenticationError(),
            ResponseParseError("bad json"),
            RemoteCallError("down"),
            PollTimeoutError(3),
        ],
    )
    def test_all_errors_share_base(self, error: Exception) -> None:
        assert isinstance(error, FluxError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert isinstance(InvalidArgumentError("bad"), ValueError)

    def test_authentication_error_defaults(self) -> None:
        error = AuthenticationError()
        assert isinstance(error, FluxAPIError)
        assert error.status_code == 401
        assert error.message == "Authentication failed"
        assert error.friendly_message() == "Authentication failed - please check your API key"

    def test_poll_timeout_carries_attempts(self) -> None:
        error = PollTimeoutError(120)
        assert error.attempts == 120
        assert str(error) == "Task polling timed out after 120 attempts"

    def test_invalid_status_carries_value(self) -> None:
        error = InvalidStatusError("Done")
        assert error.status == "Done"
        assert "Done" in str(error)


class TestFluxAPIError:
    @settings(max_examples=50)
    @given(status=st.integers(min_value=400, max_value=499))
    def test_client_errors(self, status: int) -> None:
        error = FluxAPIError(status, "x")
        assert error.is_client_error()
        assert not error.is_server_error()

    @settings(max_examples=50)
    @given(status=st.integers(min_value=500, max_value=599))
    def test_server_errors(self, status: int) -> None:
        error = FluxAPIError(status, "x")
        assert error.is_server_error()
        assert not error.is_client_error()

    @pytest.mark.parametrize(
        "status,expected",
        [
            (400, "Bad request - please check your parameters"),
            (401, "Authentication failed - please check your API key"),
            (403, "Access forbidden - insufficient permissions"),
            (404, "Resource not found"),
            (429, "Rate limit exceeded - please try again later"),
            (500, "Internal server error - please try again later"),
            (502, "Bad gateway - service temporarily unavailable"),
            (503, "Service unavailable - please try again later"),
            (418, "An unknown error occurred"),
        ],
    )
    def test_friendly_message(self, status: int, expected: str) -> None:
        assert FluxAPIError(status, "x").friendly_message() == expected

    def test_message_format(self) -> None:
        error = FluxAPIError(429, "Too many requests")
        assert error.status_code == 429
        assert str(error) == "FLUX API error 429: Too many requests"
