# ABOUTME: Logger utilities with context binding and operation tracking decorators
# ABOUTME: Provides get_logger function and decorators for consistent structured logging

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with automatic module detection.

    Args:
        name: Logger name, auto-detected from caller if None

    Returns:
        Configured structlog logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            # Get the module name of the caller
            caller_module = frame.f_back.f_globals.get("__name__", "unknown")
            name = caller_module

    return structlog.get_logger(name or "pagescout")


def generate_operation_id() -> str:
    """Generate a unique operation ID for tracking requests."""
    return str(uuid.uuid4())[:8]


def _find_url(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str | None:
    for value in (*args, *kwargs.values()):
        if isinstance(value, str) and (value.startswith("http://") or value.startswith("https://")):
            return value
    return None


def log_api_call(api_name: str, **context) -> Callable[[F], F]:
    """Decorator to log synchronous calls to a remote site.

    Args:
        api_name: Name of the remote API or site being called
        **context: Additional context for the call

    Returns:
        Decorated function with call logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            call_id = generate_operation_id()

            bound_logger = logger.bind(api_name=api_name, call_id=call_id, url=_find_url(args, kwargs), **context)

            bound_logger.debug(f"API call to {api_name}")
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
                duration = time.time() - start_time

                bound_logger.info(
                    f"API call to {api_name} succeeded", duration_seconds=round(duration, 3), success=True
                )
                return result

            except Exception as e:
                duration = time.time() - start_time
                bound_logger.error(
                    f"API call to {api_name} failed",
                    duration_seconds=round(duration, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


def log_extraction_step(step_name: str) -> Callable[[F], F]:
    """Decorator to log async extraction pipeline steps.

    Args:
        step_name: Name of the extraction step

    Returns:
        Decorated coroutine function with extraction step logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            bound_logger = logger.bind(step=step_name, pipeline="potd")

            bound_logger.info(f"Starting extraction step: {step_name}")
            start_time = time.time()

            try:
                result = await func(*args, **kwargs)
                duration = time.time() - start_time

                result_info = {}
                if hasattr(result, "number"):
                    result_info["problem_number"] = result.number

                bound_logger.info(
                    f"Completed extraction step: {step_name}",
                    duration_seconds=round(duration, 3),
                    success=True,
                    **result_info,
                )
                return result

            except Exception as e:
                duration = time.time() - start_time
                bound_logger.error(
                    f"Failed extraction step: {step_name}",
                    duration_seconds=round(duration, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


class LogContext:
    """Context manager for binding logger context."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound_logger = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound_logger is not None:
            self.bound_logger.error("Context operation failed", error=str(exc_val), error_type=exc_type.__name__)


def with_scrape_context(tool: str, **context) -> LogContext:
    """Create a logging context for one scraper run.

    Args:
        tool: Name of the scraper (``potd`` or ``wiki-links``)
        **context: Additional context to bind

    Returns:
        LogContext manager with run context
    """
    logger = get_logger()
    operation_id = generate_operation_id()
    return LogContext(logger, tool=tool, operation_id=operation_id, **context)
