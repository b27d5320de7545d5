# ABOUTME: Browser session layer for the problem-of-the-day scraper
# ABOUTME: Pipeline Stage 1: a controlled Chromium page exposed through the Queryable protocol

from .session import PlaywrightElement, PlaywrightPage, browser_session

__all__ = [
    "PlaywrightElement",
    "PlaywrightPage",
    "browser_session",
]
