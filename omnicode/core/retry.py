"""Exponential backoff for flaky async calls."""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExhaustedError(Exception):
    """Raised once every permitted attempt has failed."""

    def __init__(self, attempts: int, last_error: BaseException | None):
        self.attempts = attempts
        self.last_error = last_error
        reason = str(last_error) if last_error is not None and str(last_error) else "Unknown error"
        super().__init__(f"Critical API failure after {attempts} attempts: {reason}")


async def with_exponential_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay: float = 1.0,
) -> T:
    """Await ``operation()`` until it succeeds, at most ``max_retries`` times.

    Between failed attempts the wait is ``2**attempt * base_delay`` seconds,
    with ``attempt`` counted from zero (1s, 2s, 4s, ... for the default delay).
    Every exception is treated as retryable. When the last attempt fails a
    ``RetryExhaustedError`` is raised, chained to the last underlying error.
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    last_error: Exception | None = None

    for attempt in range(max_retries):
        try:
            return await operation()
        except Exception as e:
            last_error = e
            logger.warning(f"Attempt {attempt + 1} failed. Retrying... Error: {e}")

            if attempt == max_retries - 1:
                break

            delay = (2 ** attempt) * base_delay
            logger.info(f"Waiting for {delay} seconds before next retry.")
            await asyncio.sleep(delay)

    logger.error("All API retry attempts failed.")
    raise RetryExhaustedError(max_retries, last_error) from last_error
