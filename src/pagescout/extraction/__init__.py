# ABOUTME: Page extraction logic for the problem-of-the-day table and wiki articles
# ABOUTME: Pipeline Stage 2: loaded page → typed record or list of links

"""
Extraction Layer: Turn loaded pages into typed results

This layer handles:
- Locating the problem-of-the-day row and reading its cells
- Locating the wiki body-content region and filtering its paragraph links
- The error taxonomy shared by both scrapers

Data Flow: Session/transport → Extractors → Sinks
"""

from .base import (
    ElementNotFoundError,
    FormatMismatchError,
    InvalidInputError,
    MissingAttributeError,
    MissingContentRegionError,
    OutputWriteError,
    Queryable,
    ScrapeError,
    SerializationError,
    StructureMismatchError,
    TransportError,
    WaitTimeoutError,
)

__all__ = [
    "ElementNotFoundError",
    "FormatMismatchError",
    "InvalidInputError",
    "MissingAttributeError",
    "MissingContentRegionError",
    "OutputWriteError",
    "Queryable",
    "ScrapeError",
    "SerializationError",
    "StructureMismatchError",
    "TransportError",
    "WaitTimeoutError",
]
