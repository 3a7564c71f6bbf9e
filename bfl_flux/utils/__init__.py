"""Utility modules for the FLUX client."""

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
from bfl_flux.utils.polling import poll_until

__all__ = [
    "FluxError",
    "InvalidArgumentError",
    "InvalidStatusError",
    "FluxAPIError",
    "AuthenticationError",
    "ResponseParseError",
    "RemoteCallError",
    "PollTimeoutError",
    "poll_until",
]
