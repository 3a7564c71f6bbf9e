"""Utility service for retrieving and polling task results."""

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from bfl_flux.models.responses import GetResultResponse
from bfl_flux.services.params import require_id
from bfl_flux.utils.polling import poll_until

if TYPE_CHECKING:
    from bfl_flux.client import FluxClient

logger = logging.getLogger(__name__)

DEFAULT_POLL_ATTEMPTS = 60
DEFAULT_POLL_DELAY_SECONDS = 5

# 120 x 3s, about 6 minutes
WAIT_MAX_ATTEMPTS = 120
WAIT_DELAY_SECONDS = 3


class UtilityService:
    """Service for fetching task status and waiting for results."""

    def __init__(
        self,
        client: "FluxClient",
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        """
        Initialize the UtilityService.

        Args:
            client: FluxClient used for requests
            sleep: Awaitable sleep used between polls (default: asyncio.sleep)
        """
        self.client = client
        self.sleep = sleep

    async def get_result(self, task_id: str) -> GetResultResponse:
        """
        Retrieve the status or final result of a submitted task.

        Args:
            task_id: Task identifier returned when the task was submitted

        Returns:
            Fresh GetResultResponse snapshot

        Raises:
            InvalidArgumentError: If task_id is empty
            InvalidStatusError: If the API reports an unknown status
            FluxAPIError: If the API rejects the request
            RemoteCallError: If the request could not be completed
        """
        require_id(task_id, "Task ID")
        response = await self.client.get("/get_result", {"id": task_id})
        return GetResultResponse.from_dict(response)

    async def poll_result(
        self,
        task_id: str,
        max_attempts: int = DEFAULT_POLL_ATTEMPTS,
        delay_seconds: int = DEFAULT_POLL_DELAY_SECONDS,
    ) -> GetResultResponse:
        """
        Poll get_result until the task reaches a terminal status.

        Errors from get_result are not retried and abort polling.

        Args:
            task_id: Task identifier
            max_attempts: Maximum number of get_result calls
            delay_seconds: Pause between calls (at least 1)

        Returns:
            The first terminal GetResultResponse (Ready, Error, moderated or not found)

        Raises:
            InvalidArgumentError: If any argument is out of range
            PollTimeoutError: If the task is still running after max_attempts
        """
        require_id(task_id, "Task ID")
        logger.debug(
            f"Polling task {task_id}: up to {max_attempts} attempts, {delay_seconds}s apart"
        )

        result = await poll_until(
            lambda: self.get_result(task_id),
            GetResultResponse.is_complete,
            max_attempts=max_attempts,
            delay_seconds=delay_seconds,
            sleep=self.sleep,
        )

        logger.info(f"Task {task_id} finished with status '{result.status.value}'")
        return result

    async def wait_for_completion(self, task_id: str) -> GetResultResponse:
        """Poll with the default wait budget (120 attempts, 3s apart)."""
        return await self.poll_result(task_id, WAIT_MAX_ATTEMPTS, WAIT_DELAY_SECONDS)

    async def is_task_complete(self, task_id: str) -> bool:
        """Check completion with a single fetch."""
        result = await self.get_result(task_id)
        return result.is_complete()

    async def get_progress(self, task_id: str) -> Optional[float]:
        """Progress percentage, or None if the API did not report one."""
        result = await self.get_result(task_id)
        return result.progress_percentage()
