# ABOUTME: Problem-of-the-day extraction from the LeetCode problem set table
# ABOUTME: Finds the featured row once the table hydrates and reads number, name and links from its cells

from pagescout.core.models import ProblemOfDayRecord
from pagescout.extraction.base import (
    FormatMismatchError,
    MissingAttributeError,
    Queryable,
    StructureMismatchError,
)
from pagescout.utils.logging import get_logger, log_extraction_step
from pagescout.utils.waiting import wait_until

# Cell 2 holds the "<number>. <name>" anchor, cell 3 the solution link
PROBLEM_ANCHOR_SELECTOR = "div[role='cell']:nth-child(2) a"
SOLUTION_CELL_SELECTOR = "div[role='cell']:nth-child(3)"
SOLUTION_ANCHOR_SELECTOR = "a[aria-label='solution']"

LOADING_CLASS = "pointer-events-none"
LOADING_TABLE_SELECTOR = f"div:has(div[role='table']).{LOADING_CLASS}"
TABLE_SELECTOR = "div:has(div[role='table'])"
ROWGROUP_SELECTOR = "div[role='rowgroup']"
ROW_SELECTOR = "div[role='row']"

# Only the featured row carries an icon inside a cell's anchor
POTD_MARKER_SELECTOR = "div[role='cell'] > a > svg"

TITLE_SEPARATOR = ". "

logger = get_logger(__name__)


def parse_problem_title(text: str) -> tuple[int, str]:
    """Split a rendered problem title such as ``"2071. Maximum Number of Tasks"``.

    Raises:
        FormatMismatchError: If there is no ``". "`` separator, the prefix is not
            a non-negative integer or the title part is empty
    """
    number_text, separator, name = text.strip().partition(TITLE_SEPARATOR)
    if not separator:
        raise FormatMismatchError(f"Problem title {text!r} is not of the form '<number>. <name>'")
    if not number_text.isascii() or not number_text.isdigit():
        raise FormatMismatchError(f"Problem title {text!r} does not start with a problem number")
    if not name:
        raise FormatMismatchError(f"Problem title {text!r} has an empty name")
    return int(number_text), name


def class_list_contains(class_name: str, marker: str) -> bool:
    return marker in class_name.split()


async def _absolute_href(anchor: Queryable, domain: str) -> str:
    href = await anchor.attribute("href")
    if href is None:
        raise MissingAttributeError("Anchor is missing its 'href' attribute")
    return f"{domain}{href}"


async def scrape_potd(row: Queryable, domain: str) -> ProblemOfDayRecord:
    """Build the record from the featured table row."""
    problem_anchor = await row.find(PROBLEM_ANCHOR_SELECTOR)

    number, name = parse_problem_title(await problem_anchor.inner_html())
    url = await _absolute_href(problem_anchor, domain)

    solution_cell = await row.find(SOLUTION_CELL_SELECTOR)

    # No solution anchor means no published solution
    solution_anchor = await solution_cell.find_optional(SOLUTION_ANCHOR_SELECTOR)
    solution_url = await _absolute_href(solution_anchor, domain) if solution_anchor is not None else None

    logger.debug("Scraped problem of the day", number=number, name=name, has_solution=solution_url is not None)
    return ProblemOfDayRecord(number=number, name=name, url=url, solution_url=solution_url)


async def _body_hydrated(body: Queryable) -> bool:
    return bool(await body.class_name())


async def _table_enabled(table: Queryable) -> bool:
    return not class_list_contains(await table.class_name(), LOADING_CLASS)


async def _first_row_is_potd(rowgroup: Queryable) -> bool:
    first_row = await rowgroup.find(ROW_SELECTOR)
    return await first_row.exists(POTD_MARKER_SELECTOR)


@log_extraction_step("locate_potd_row")
async def locate_potd_row(page: Queryable, *, timeout: float, interval: float) -> Queryable:
    """Wait for the problem table to hydrate and return the featured row.

    Raises:
        WaitTimeoutError: If any hydration stage does not finish in time
        StructureMismatchError: If the table is still disabled or the first row
            lacks the featured marker after the waits
    """
    body = await page.find("body")
    await wait_until(body, _body_hydrated, timeout=timeout, interval=interval, description="body hydration")

    table = await page.find_optional(LOADING_TABLE_SELECTOR)
    if table is not None:
        await wait_until(table, _table_enabled, timeout=timeout, interval=interval, description="problem table")
    else:
        # Table finished loading before the query
        table = await page.find(TABLE_SELECTOR)

    if not await _table_enabled(table):
        raise StructureMismatchError("Problem table is still disabled")

    rowgroup = await table.find(ROWGROUP_SELECTOR)
    await wait_until(
        rowgroup, _first_row_is_potd, timeout=timeout, interval=interval, description="problem of the day row"
    )

    first_row = await rowgroup.find(ROW_SELECTOR)
    if not await first_row.exists(POTD_MARKER_SELECTOR):
        raise StructureMismatchError("First problem row is not the problem of the day")

    return first_row
