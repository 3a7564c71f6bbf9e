"""Service layer for the FLUX client."""

from bfl_flux.services.finetune import FinetuneService
from bfl_flux.services.image_generation import ImageGenerationService
from bfl_flux.services.utility import UtilityService

__all__ = [
    "FinetuneService",
    "ImageGenerationService",
    "UtilityService",
]
