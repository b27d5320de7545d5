# ABOUTME: Shared fixtures for the test suite
# ABOUTME: Provides a BeautifulSoup-backed Queryable fake standing in for live browser elements

import pytest
from bs4 import BeautifulSoup, Tag
from loguru import logger

from pagescout.extraction.base import ElementNotFoundError


class SoupElement:
    """Queryable over a parsed HTML tree, mirroring the Playwright adapter's contract."""

    def __init__(self, tag: Tag):
        self.tag = tag

    async def find(self, selector: str) -> "SoupElement":
        element = await self.find_optional(selector)
        if element is None:
            raise ElementNotFoundError(f"No element matches {selector!r}")
        return element

    async def find_optional(self, selector: str) -> "SoupElement | None":
        found = self.tag.select_one(selector)
        return type(self)(found) if found is not None else None

    async def exists(self, selector: str) -> bool:
        return self.tag.select_one(selector) is not None

    async def attribute(self, name: str) -> str | None:
        value = self.tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    async def class_name(self) -> str:
        return await self.attribute("class") or ""

    async def inner_html(self) -> str:
        return self.tag.decode_contents()


POTD_ROW = """
<div role="row">
  <div role="cell"><a href="/problems/maximum-number-of-tasks-you-can-assign/?envType=daily-question"><svg></svg></a></div>
  <div role="cell"><a href="/problems/maximum-number-of-tasks-you-can-assign/">2071. Maximum Number of Tasks You Can Assign</a></div>
  <div role="cell"><a aria-label="solution" href="/problems/maximum-number-of-tasks-you-can-assign/solution/"><svg></svg></a></div>
</div>
"""

PLAIN_ROW = """
<div role="row">
  <div role="cell"><a href="/problems/two-sum/"></a></div>
  <div role="cell"><a href="/problems/two-sum/">1. Two Sum</a></div>
  <div role="cell"></div>
</div>
"""


def _problem_page(rows: str, body_class: str = "dark", table_class: str = "") -> str:
    return f"""
    <html>
      <body class="{body_class}">
        <div id="app">
          <div class="{table_class}">
            <div role="table">
              <div role="rowgroup">{rows}</div>
            </div>
          </div>
        </div>
      </body>
    </html>
    """


@pytest.fixture
def soup_element():
    """Factory turning an HTML string into a Queryable for the document."""

    def _make(html: str, element_class: type[SoupElement] = SoupElement) -> SoupElement:
        return element_class(BeautifulSoup(html, "html.parser"))

    return _make


@pytest.fixture
def soup_row():
    """Factory returning the first ``div[role='row']`` of an HTML snippet."""

    def _make(html: str) -> SoupElement:
        row = BeautifulSoup(html, "html.parser").select_one("div[role='row']")
        assert row is not None
        return SoupElement(row)

    return _make


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop loguru sinks added by a test so they never outlive captured streams."""
    yield
    logger.remove()


@pytest.fixture
def problem_page():
    """Factory rendering a problem set page around the given rows."""
    return _problem_page


@pytest.fixture
def potd_row_html() -> str:
    return POTD_ROW


@pytest.fixture
def plain_row_html() -> str:
    return PLAIN_ROW


@pytest.fixture
def soup_element_class() -> type[SoupElement]:
    return SoupElement
