"""Bounded polling loop with a fixed delay between attempts."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from bfl_flux.utils.errors import InvalidArgumentError, PollTimeoutError

logger = logging.getLogger(__name__)
T = TypeVar("T")

MIN_DELAY_SECONDS = 1


async def poll_until(
    fetch: Callable[[], Awaitable[T]],
    is_done: Callable[[T], bool],
    max_attempts: int,
    delay_seconds: float,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> T:
    """
    Call ``fetch`` until ``is_done`` accepts its value or attempts run out.

    Exceptions raised by ``fetch`` are not retried; they abort polling.

    Args:
        fetch: Coroutine function performing one attempt
        is_done: Predicate deciding whether a fetched value is final
        max_attempts: Maximum number of fetch calls (must be > 0)
        delay_seconds: Pause between attempts (at least MIN_DELAY_SECONDS)
        sleep: Awaitable sleep primitive (default: asyncio.sleep)

    Returns:
        The first fetched value accepted by ``is_done``

    Raises:
        InvalidArgumentError: If max_attempts or delay_seconds are out of range
        PollTimeoutError: If no accepted value was fetched within max_attempts
    """
    if max_attempts <= 0:
        raise InvalidArgumentError("Max attempts must be greater than 0")
    if delay_seconds < MIN_DELAY_SECONDS:
        raise InvalidArgumentError(f"Delay seconds must be at least {MIN_DELAY_SECONDS}")

    if sleep is None:
        sleep = asyncio.sleep

    for attempt in range(max_attempts):
        value = await fetch()
        if is_done(value):
            logger.debug(f"Polling finished on attempt {attempt + 1}/{max_attempts}")
            return value

        # No delay after the final attempt
        if attempt < max_attempts - 1:
            logger.debug(
                f"Attempt {attempt + 1}/{max_attempts} not finished. "
                f"Polling again in {delay_seconds}s..."
            )
            await sleep(delay_seconds)

    logger.warning(f"Polling gave up after {max_attempts} attempts")
    raise PollTimeoutError(max_attempts)
