"""Pydantic data models for the FLUX API."""

from bfl_flux.models.enums import FinetuneMode, OutputFormat, ResultStatus, classify
from bfl_flux.models.requests import Flux1ProRequest
from bfl_flux.models.responses import GetResultResponse, ImageGenerationResponse

__all__ = [
    "ResultStatus",
    "OutputFormat",
    "FinetuneMode",
    "classify",
    "Flux1ProRequest",
    "GetResultResponse",
    "ImageGenerationResponse",
]
