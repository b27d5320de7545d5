# ABOUTME: Playwright browser session with guaranteed release and Queryable element adapters
# ABOUTME: Connects to a running Chromium over CDP, or launches a headless one when no endpoint is set

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from playwright.async_api import Browser, ElementHandle, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pagescout.config import Config
from pagescout.extraction.base import ElementNotFoundError, TransportError
from pagescout.utils.logging import get_logger

logger = get_logger(__name__)


class _PlaywrightQueryable:
    """Shared find/exists logic; subclasses supply the raw selector queries.

    `find` waits up to the page default timeout for the element to attach;
    `find_optional` and `exists` answer immediately.
    """

    async def _query_selector(self, selector: str) -> ElementHandle | None:
        raise NotImplementedError

    async def _wait_for_selector(self, selector: str) -> ElementHandle | None:
        raise NotImplementedError

    async def find(self, selector: str) -> "PlaywrightElement":
        try:
            handle = await self._wait_for_selector(selector)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(f"No element matches {selector!r}") from e
        except PlaywrightError as e:
            raise TransportError(f"Query {selector!r} failed: {e.message}") from e
        if handle is None:
            raise ElementNotFoundError(f"No element matches {selector!r}")
        return PlaywrightElement(handle)

    async def find_optional(self, selector: str) -> "PlaywrightElement | None":
        try:
            handle = await self._query_selector(selector)
        except PlaywrightError as e:
            raise TransportError(f"Query {selector!r} failed: {e.message}") from e
        return PlaywrightElement(handle) if handle is not None else None

    async def exists(self, selector: str) -> bool:
        return await self.find_optional(selector) is not None


class PlaywrightElement(_PlaywrightQueryable):
    """Queryable adapter over a Playwright element handle."""

    def __init__(self, handle: ElementHandle):
        self._handle = handle

    async def _query_selector(self, selector: str) -> ElementHandle | None:
        return await self._handle.query_selector(selector)

    async def _wait_for_selector(self, selector: str) -> ElementHandle | None:
        return await self._handle.wait_for_selector(selector, state="attached")

    async def attribute(self, name: str) -> str | None:
        try:
            return await self._handle.get_attribute(name)
        except PlaywrightError as e:
            raise TransportError(f"Reading attribute {name!r} failed: {e.message}") from e

    async def class_name(self) -> str:
        return await self.attribute("class") or ""

    async def inner_html(self) -> str:
        try:
            return await self._handle.inner_html()
        except PlaywrightError as e:
            raise TransportError(f"Reading element content failed: {e.message}") from e


class PlaywrightPage(_PlaywrightQueryable):
    """A browser tab; queries run against the whole document."""

    def __init__(self, page: Page):
        self.page = page

    async def _query_selector(self, selector: str) -> ElementHandle | None:
        return await self.page.query_selector(selector)

    async def _wait_for_selector(self, selector: str) -> ElementHandle | None:
        return await self.page.wait_for_selector(selector, state="attached")

    async def goto(self, url: str) -> None:
        logger.info("Navigating", url=url)
        try:
            await self.page.goto(url)
        except PlaywrightError as e:
            raise TransportError(f"Navigation to {url} failed: {e.message}") from e

    async def attribute(self, name: str) -> str | None:
        root = await self.find("html")
        return await root.attribute(name)

    async def class_name(self) -> str:
        return await self.attribute("class") or ""

    async def inner_html(self) -> str:
        try:
            return await self.page.content()
        except PlaywrightError as e:
            raise TransportError(f"Reading page content failed: {e.message}") from e


async def _open_browser(playwright: Playwright, config: Config) -> Browser:
    if config.browser_endpoint:
        logger.info("Connecting to browser", endpoint=config.browser_endpoint)
        return await playwright.chromium.connect_over_cdp(config.browser_endpoint)

    logger.info("Launching local browser", headless=config.headless)
    return await playwright.chromium.launch(headless=config.headless)


@asynccontextmanager
async def browser_session(config: Config) -> AsyncIterator[PlaywrightPage]:
    """Open a browser session and yield a fresh page.

    The page and browser are released on every exit path, including errors
    and cancellation.

    Raises:
        TransportError: If the browser cannot be started or reached
    """
    try:
        playwright = await async_playwright().start()
    except Exception as e:
        # Driver failures surface as plain exceptions, not PlaywrightError
        raise TransportError(f"Could not start Playwright: {e}") from e

    try:
        try:
            browser = await _open_browser(playwright, config)
        except PlaywrightError as e:
            raise TransportError(f"Could not start browser session: {e.message}") from e

        try:
            context = await browser.new_context()
            page = await context.new_page()
            page.set_default_timeout(config.wait_timeout * 1000)
            yield PlaywrightPage(page)
        except PlaywrightError as e:
            raise TransportError(f"Browser session failed: {e.message}") from e
        finally:
            # Disconnects instead of quitting when attached over CDP
            try:
                await browser.close()
                logger.info("Browser session closed")
            except PlaywrightError as e:
                logger.warning("Browser close failed", error=e.message)
    finally:
        await playwright.stop()
