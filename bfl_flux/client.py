"""Async HTTP client for Black Forest Labs' FLUX API."""

import logging
from typing import Any, Optional

import httpx

from bfl_flux.services.finetune import FinetuneService
from bfl_flux.services.image_generation import ImageGenerationService
from bfl_flux.services.utility import UtilityService
from bfl_flux.utils.errors import (
    AuthenticationError,
    FluxAPIError,
    RemoteCallError,
    ResponseParseError,
)

logger = logging.getLogger(__name__)

# FLUX API endpoint
BFL_API_URL = "https://api.bfl.ai/v1"
DEFAULT_TIMEOUT = 30.0


class FluxClient:
    """Client owning the HTTP connection and the service accessors."""

    def __init__(
        self,
        api_key: str,
        base_url: str = BFL_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        options: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the FluxClient.

        Args:
            api_key: API key sent in the x-key header
            base_url: API root URL
            timeout: Request timeout in seconds
            options: Extra httpx.AsyncClient keyword arguments, merged over the defaults

        Raises:
            AuthenticationError: If api_key is empty
        """
        if not api_key:
            raise AuthenticationError("API key cannot be empty")

        self.api_key = api_key
        client_options: dict[str, Any] = {
            "base_url": base_url,
            "timeout": timeout,
            "headers": {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "x-key": api_key,
            },
        }
        client_options.update(options or {})
        self._http = httpx.AsyncClient(**client_options)

        self._image_generation: Optional[ImageGenerationService] = None
        self._finetune: Optional[FinetuneService] = None
        self._utility: Optional[UtilityService] = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    @property
    def image_generation(self) -> ImageGenerationService:
        """Image generation endpoints."""
        if self._image_generation is None:
            self._image_generation = ImageGenerationService(self)
        return self._image_generation

    @property
    def finetune(self) -> FinetuneService:
        """Fine-tuning endpoints."""
        if self._finetune is None:
            self._finetune = FinetuneService(self)
        return self._finetune

    @property
    def utility(self) -> UtilityService:
        """Result retrieval and polling."""
        if self._utility is None:
            self._utility = UtilityService(self)
        return self._utility

    async def get(
        self, endpoint: str, query_params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Make a GET request to the API.

        Args:
            endpoint: Path relative to the base URL
            query_params: Query string parameters

        Returns:
            Decoded JSON object (empty dict for an empty body)

        Raises:
            AuthenticationError: If the API answers 401
            FluxAPIError: If the API answers with another error status
            ResponseParseError: If the body is not valid JSON
            RemoteCallError: If the request could not be completed
        """
        logger.debug(f"GET {endpoint} {query_params or {}}")
        try:
            response = await self._http.get(endpoint, params=query_params or {})
        except httpx.HTTPError as e:
            raise RemoteCallError(f"GET request failed: {e}", cause=e) from e
        return self._handle_response(response)

    async def post(
        self, endpoint: str, data: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Make a POST request to the API with a JSON body.

        Args:
            endpoint: Path relative to the base URL
            data: JSON body

        Returns:
            Decoded JSON object (empty dict for an empty body)

        Raises:
            AuthenticationError: If the API answers 401
            FluxAPIError: If the API answers with another error status
            ResponseParseError: If the body is not valid JSON
            RemoteCallError: If the request could not be completed
        """
        logger.debug(f"POST {endpoint}")
        try:
            response = await self._http.post(endpoint, json=data or {})
        except httpx.HTTPError as e:
            raise RemoteCallError(f"POST request failed: {e}", cause=e) from e
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> dict[str, Any]:
        """Map error statuses to exceptions and decode the JSON body."""
        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error(
                f"FLUX API rejected {response.request.method} {response.request.url.path}: "
                f"{response.status_code} {message}"
            )
            if response.status_code == 401:
                raise AuthenticationError(message)
            raise FluxAPIError(response.status_code, message)

        if not response.content:
            return {}

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseParseError(f"Invalid JSON response: {e}") from e

        return body if isinstance(body, dict) else {}

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        default = "Authentication failed" if response.status_code == 401 else "Unknown API error"
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("message") is not None:
            return str(body["message"])
        return default

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "FluxClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_flux_client(options: Optional[dict[str, Any]] = None) -> FluxClient:
    """
    Create a FluxClient instance using client settings.

    Args:
        options: Optional extra httpx.AsyncClient keyword arguments

    Returns:
        Configured FluxClient instance
    """
    from bfl_flux.config import get_settings

    settings = get_settings()
    return FluxClient(
        api_key=settings.bfl_api_key,
        base_url=settings.bfl_base_url,
        timeout=settings.request_timeout_seconds,
        options=options,
    )
