"""Fine-tuning service for the FLUX API."""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from bfl_flux.models.responses import ImageGenerationResponse
from bfl_flux.services.params import require_fields, require_id

if TYPE_CHECKING:
    from bfl_flux.client import FluxClient

logger = logging.getLogger(__name__)

CREATE_REQUIRED_FIELDS = ("file_data", "finetune_comment", "mode", "trigger_word", "iterations")
CONTROL_REQUIRED_FIELDS = ("finetune_id", "prompt", "control_image")


class FinetuneService:
    """Service for creating, inspecting and generating with fine-tunes."""

    def __init__(self, client: "FluxClient") -> None:
        self.client = client

    async def get_details(self, finetune_id: str) -> dict[str, Any]:
        require_id(finetune_id, "Finetune ID")
        return await self.client.get("/finetune_details", {"finetune_id": finetune_id})

    async def list_my_finetunes(self) -> dict[str, Any]:
        return await self.client.get("/my_finetunes")

    async def delete(self, finetune_id: str) -> dict[str, Any]:
        require_id(finetune_id, "Finetune ID")
        response = await self.client.post("/delete_finetune", {"finetune_id": finetune_id})
        logger.info(f"Deleted finetune {finetune_id}")
        return response

    async def create(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Create a fine-tuned model from a set of training images.

        Args:
            params: Fine-tune parameters; ``mode`` may be a FinetuneMode

        Returns:
            Raw API response (contains the new finetune_id)

        Raises:
            InvalidArgumentError: If a required field is missing
        """
        require_fields(params, CREATE_REQUIRED_FIELDS)
        body = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in params.items()
        }
        response = await self.client.post("/finetune", body)
        logger.info(f"Requested finetune '{body['finetune_comment']}' ({body['mode']})")
        return response

    async def _generate(
        self, endpoint: str, params: dict[str, Any], required: tuple[str, ...]
    ) -> ImageGenerationResponse:
        require_fields(params, required)
        response = await self.client.post(endpoint, params)
        return ImageGenerationResponse.from_dict(response)

    async def generate_with_finetuned_pro(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._generate("/flux-pro-finetuned", params, ("finetune_id",))

    async def generate_with_finetuned_ultra(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._generate("/flux-pro-1.1-ultra-finetune", params, ("finetune_id",))

    async def generate_with_finetuned_depth(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._generate(
            "/flux-pro-1.0-depth-finetune", params, CONTROL_REQUIRED_FIELDS
        )

    async def generate_with_finetuned_canny(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._generate(
            "/flux-pro-1.0-canny-finetune", params, CONTROL_REQUIRED_FIELDS
        )

    async def generate_with_finetuned_fill(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._generate(
            "/flux-pro-1.0-fill-finetune", params, ("finetune_id", "image")
        )
