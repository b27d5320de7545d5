# ABOUTME: Error taxonomy shared by both scrapers and the element query protocol
# ABOUTME: Extractors depend on Queryable, never on a concrete browser automation library

from typing import Protocol


class ScrapeError(Exception):
    """Base class for every failure that aborts a scraper run."""


class InvalidInputError(ScrapeError):
    """Raised when a CLI argument or wiki reference is malformed."""


class TransportError(ScrapeError):
    """Raised when the network or the browser session fails."""


class WaitTimeoutError(TransportError):
    """Raised when a page-load condition does not hold before its timeout."""


class StructureMismatchError(ScrapeError):
    """Raised when the page does not have the expected elements or attributes."""


class ElementNotFoundError(StructureMismatchError):
    """Raised when a required selector matches nothing."""


class MissingAttributeError(StructureMismatchError):
    """Raised when an element lacks a required attribute."""


class MissingContentRegionError(StructureMismatchError):
    """Raised when a wiki page has no body-content container."""


class FormatMismatchError(ScrapeError):
    """Raised when extracted text does not match the expected composite format."""


class SerializationError(ScrapeError):
    """Raised when the output record cannot be encoded."""


class OutputWriteError(ScrapeError):
    """Raised when the output file cannot be written."""


class Queryable(Protocol):
    """A remotely queryable element handle.

    ``find`` raises when nothing matches, ``find_optional`` returns ``None``
    instead. Attribute reads return ``None`` for absent attributes.
    """

    async def find(self, selector: str) -> "Queryable": ...

    async def find_optional(self, selector: str) -> "Queryable | None": ...

    async def exists(self, selector: str) -> bool: ...

    async def attribute(self, name: str) -> str | None: ...

    async def class_name(self) -> str: ...

    async def inner_html(self) -> str: ...
