"""Async client for Black Forest Labs' FLUX image generation API."""

from bfl_flux.builders import ImageRequestBuilder
from bfl_flux.client import FluxClient, create_flux_client
from bfl_flux.models import (
    FinetuneMode,
    Flux1ProRequest,
    GetResultResponse,
    ImageGenerationResponse,
    OutputFormat,
    ResultStatus,
)
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

__all__ = [
    "FluxClient",
    "create_flux_client",
    "ImageRequestBuilder",
    "Flux1ProRequest",
    "GetResultResponse",
    "ImageGenerationResponse",
    "ResultStatus",
    "OutputFormat",
    "FinetuneMode",
    "FluxError",
    "InvalidArgumentError",
    "InvalidStatusError",
    "FluxAPIError",
    "AuthenticationError",
    "ResponseParseError",
    "RemoteCallError",
    "PollTimeoutError",
]
