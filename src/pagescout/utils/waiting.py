# ABOUTME: Generic "wait for a condition on a queryable handle" primitive built on tenacity
# ABOUTME: Fixed-interval polling with an overall timeout, independent of the automation protocol

from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import AsyncRetrying, RetryError, retry_if_exception_type, retry_if_result, stop_after_delay, wait_fixed

from pagescout.extraction.base import ElementNotFoundError, WaitTimeoutError
from pagescout.utils.logging import get_logger

H = TypeVar("H")

logger = get_logger(__name__)


def _not_satisfied(result: bool) -> bool:
    return not result


async def wait_until(
    handle: H,
    condition: Callable[[H], Awaitable[bool]],
    *,
    timeout: float,
    interval: float,
    description: str,
) -> H:
    """Poll ``condition(handle)`` every ``interval`` seconds until it returns True.

    A condition that raises ``ElementNotFoundError`` counts as not yet satisfied,
    any other exception propagates immediately.

    Returns:
        The handle, so waits can be chained inline

    Raises:
        WaitTimeoutError: If the condition is still false after ``timeout`` seconds
    """
    retrying = AsyncRetrying(
        stop=stop_after_delay(timeout),
        wait=wait_fixed(interval),
        retry=retry_if_result(_not_satisfied) | retry_if_exception_type(ElementNotFoundError),
    )

    logger.debug("Waiting for condition", condition=description, timeout=timeout, interval=interval)
    try:
        await retrying(condition, handle)
    except RetryError as e:
        attempts = e.last_attempt.attempt_number
        logger.error("Condition timed out", condition=description, timeout=timeout, attempts=attempts)
        raise WaitTimeoutError(f"Timed out after {timeout}s waiting for {description}") from e

    logger.debug("Condition satisfied", condition=description)
    return handle
