# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: Provides loguru-backed sinks and structlog loggers for both scrapers

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .utils import get_logger, log_api_call, log_extraction_step, with_scrape_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "get_logger",
    "log_api_call",
    "log_extraction_step",
    "with_scrape_context",
]
