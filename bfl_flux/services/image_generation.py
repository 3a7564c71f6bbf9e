"""Image generation service for submitting FLUX tasks."""

import logging
from typing import TYPE_CHECKING, Any

from bfl_flux.models.requests import Flux1ProRequest
from bfl_flux.models.responses import ImageGenerationResponse
from bfl_flux.utils.errors import InvalidArgumentError

if TYPE_CHECKING:
    from bfl_flux.client import FluxClient

logger = logging.getLogger(__name__)


class ImageGenerationService:
    """Service for submitting image generation tasks.

    Every method returns the submitted task's id and polling URL; use
    UtilityService to wait for the image itself.
    """

    def __init__(self, client: "FluxClient") -> None:
        self.client = client

    async def _submit(self, endpoint: str, params: dict[str, Any]) -> ImageGenerationResponse:
        response = await self.client.post(endpoint, params)
        submitted = ImageGenerationResponse.from_dict(response)
        logger.info(f"Submitted {endpoint} task {submitted.id}")
        return submitted

    async def flux1_pro(self, request: Flux1ProRequest) -> ImageGenerationResponse:
        """
        Generate an image with the FLUX1 Pro model.

        Args:
            request: Validated request parameters

        Returns:
            ImageGenerationResponse with the task id

        Raises:
            InvalidArgumentError: If the request fails validation
        """
        errors = request.validation_errors()
        if errors:
            raise InvalidArgumentError(f"Invalid request parameters: {', '.join(errors)}")
        return await self._submit("/flux-pro", request.to_dict())

    async def flux1_dev(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._submit("/flux-dev", params)

    async def flux11_pro(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._submit("/flux-pro-1.1", params)

    async def flux11_pro_ultra(self, params: dict[str, Any]) -> ImageGenerationResponse:
        return await self._submit("/flux-pro-1.1-ultra", params)

    async def flux_kontext_pro(self, params: dict[str, Any]) -> ImageGenerationResponse:
        """Edit or create an image with Flux Kontext Pro."""
        return await self._submit("/flux-kontext-pro", params)

    async def flux_kontext_max(self, params: dict[str, Any]) -> ImageGenerationResponse:
        """Edit or create an image with Flux Kontext Max."""
        return await self._submit("/flux-kontext-max", params)

    async def flux1_fill(self, params: dict[str, Any]) -> ImageGenerationResponse:
        """Inpaint with FLUX1 Fill Pro; requires ``image`` and takes an optional ``mask``."""
        if params.get("image") is None:
            raise InvalidArgumentError("Image parameter is required for fill operations")
        return await self._submit("/flux-pro-1.0-fill", params)

    async def flux1_expand(self, params: dict[str, Any]) -> ImageGenerationResponse:
        """Outpaint an image by adding pixels on any side."""
        if params.get("image") is None:
            raise InvalidArgumentError("Image parameter is required for expand operations")
        return await self._submit("/flux-pro-1.0-expand", params)

    async def flux1_canny(self, params: dict[str, Any]) -> ImageGenerationResponse:
        if params.get("prompt") is None:
            raise InvalidArgumentError("Prompt parameter is required for Canny operations")
        return await self._submit("/flux-pro-1.0-canny", params)

    async def flux1_depth(self, params: dict[str, Any]) -> ImageGenerationResponse:
        if params.get("prompt") is None:
            raise InvalidArgumentError("Prompt parameter is required for Depth operations")
        return await self._submit("/flux-pro-1.0-depth", params)
