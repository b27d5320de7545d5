# ABOUTME: Wikipedia article link extraction over a blocking httpx client
# ABOUTME: Collects relative /wiki/ links from body paragraphs in document order, repeats included

import re
from collections.abc import Iterable

import httpx
from bs4 import BeautifulSoup

from pagescout.extraction.base import (
    InvalidInputError,
    MissingAttributeError,
    MissingContentRegionError,
    TransportError,
)
from pagescout.utils.logging import get_logger, log_api_call

WIKI_PATH_PATTERN = re.compile(r'^/wiki/(?P<name>[^"]+)$')

CONTENT_REGION_SELECTOR = "div#bodyContent"
PARAGRAPH_LINK_SELECTOR = "p a[href]"

logger = get_logger(__name__)


def is_wiki_path(path: str) -> bool:
    """Return True if ``path`` is a bare relative wiki article path."""
    return WIKI_PATH_PATTERN.fullmatch(path) is not None


def filter_wiki_paths(hrefs: Iterable[str]) -> list[str]:
    return [href for href in hrefs if is_wiki_path(href)]


def extract_wiki_links(html: str) -> list[str]:
    """Return the wiki paths linked from paragraphs of the article body.

    Links in tables, infoboxes and navigation boxes are ignored because they
    are not inside ``<p>`` elements.

    Raises:
        MissingContentRegionError: If the page has no ``div#bodyContent``
    """
    soup = BeautifulSoup(html, "html.parser")

    content_region = soup.select_one(CONTENT_REGION_SELECTOR)
    if content_region is None:
        raise MissingContentRegionError("Page has no body-content container; not a regular article?")

    hrefs = []
    for anchor in content_region.select(PARAGRAPH_LINK_SELECTOR):
        href = anchor.get("href")
        if not isinstance(href, str):
            raise MissingAttributeError("Paragraph anchor is missing its 'href' attribute")
        hrefs.append(href)

    return filter_wiki_paths(hrefs)


def format_links(links: list[str]) -> str:
    return repr(links)


class WikiLinkExtractor:
    """Fetches wiki articles and extracts their internal links.

    Accepts an ``httpx.Client`` for dependency injection; otherwise creates and
    owns one.
    """

    def __init__(self, base_url: str, client: httpx.Client | None = None, timeout: float = 30.0, user_agent: str = ""):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        headers = {"User-Agent": user_agent} if user_agent else None
        self.http_client = client or httpx.Client(headers=headers, timeout=timeout, follow_redirects=True)
        self.logger = get_logger(__name__)

    def fetch_wiki_links(self, reference: str) -> list[str]:
        """Fetch the article at ``reference`` and return its paragraph wiki links.

        Raises:
            InvalidInputError: If ``reference`` is not a relative wiki path; no request is made
            TransportError: If the request fails or returns a non-success status
            MissingContentRegionError: If the page is not a regular article
        """
        if not is_wiki_path(reference):
            raise InvalidInputError(f"{reference!r} is not a relative wiki path like '/wiki/Article_name'")

        html = self._get_page(f"{self.base_url}{reference}")
        links = extract_wiki_links(html)

        self.logger.info("Extracted wiki links", reference=reference, link_count=len(links))
        return links

    @log_api_call("wikipedia")
    def _get_page(self, url: str) -> str:
        try:
            response = self.http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to fetch {url}: {e}") from e
        return response.text

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "WikiLinkExtractor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
