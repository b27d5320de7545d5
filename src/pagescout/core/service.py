# ABOUTME: High-level services wiring transport, extraction and output for both scrapers
# ABOUTME: ProblemOfDayService drives the browser session; WikiLinksService drives the HTTP extractor

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from datetime import date
from pathlib import Path

import httpx

from pagescout.browser.session import PlaywrightPage, browser_session
from pagescout.config import Config, get_config
from pagescout.core.models import ProblemOfDayRecord
from pagescout.extraction.potd import locate_potd_row, scrape_potd
from pagescout.extraction.wiki import WikiLinkExtractor
from pagescout.persistence import require_existing_path, write_potd_file
from pagescout.utils.logging import get_logger

SessionFactory = Callable[[Config], AbstractAsyncContextManager[PlaywrightPage]]


class ProblemOfDayService:
    """Scrapes the problem of the day and writes it to a TOML file."""

    def __init__(self, config: Config | None = None, session_factory: SessionFactory = browser_session):
        self.config = config or get_config()
        self.session_factory = session_factory
        self.logger = get_logger(__name__)

    async def fetch(self) -> ProblemOfDayRecord:
        """Open a browser session and scrape the featured row."""
        async with self.session_factory(self.config) as page:
            await page.goto(self.config.problemset_url)
            row = await locate_potd_row(
                page, timeout=self.config.wait_timeout, interval=self.config.poll_interval
            )
            record = await scrape_potd(row, self.config.leetcode_domain)

        self.logger.info("Found problem of the day", number=record.number, name=record.name)
        return record

    async def run(self, output_path: str | Path, today: date | None = None) -> ProblemOfDayRecord:
        """Scrape and write the record; the output path is checked before the browser starts."""
        path = require_existing_path(output_path)
        record = await self.fetch()
        write_potd_file(path, record, today)
        return record


class WikiLinksService:
    """Lists the article links referenced in a wiki page's body paragraphs."""

    def __init__(self, config: Config | None = None, client: httpx.Client | None = None):
        self.config = config or get_config()
        self.client = client
        self.logger = get_logger(__name__)

    def links(self, reference: str) -> list[str]:
        with WikiLinkExtractor(
            self.config.wiki_base_url,
            client=self.client,
            timeout=self.config.http_timeout,
            user_agent=self.config.user_agent,
        ) as extractor:
            return extractor.fetch_wiki_links(reference)
