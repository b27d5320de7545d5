# ABOUTME: TOML sink for the problem-of-the-day record
# ABOUTME: Wraps the record under a [potd] table with the current UTC date and overwrites the target file

from datetime import UTC, date, datetime
from pathlib import Path

import tomli_w

from pagescout.core.models import ProblemOfDayRecord
from pagescout.extraction.base import InvalidInputError, OutputWriteError, SerializationError
from pagescout.utils.logging import get_logger

DATE_FORMAT = "%Y%m%d"

logger = get_logger(__name__)


def require_existing_path(path: str | Path) -> Path:
    """Return ``path`` as a Path, failing if nothing exists there yet."""
    output_path = Path(path)
    if not output_path.exists():
        raise InvalidInputError(f"Output path {str(path)!r} does not exist")
    return output_path


def render_potd_document(record: ProblemOfDayRecord, today: date | None = None) -> str:
    """Render the TOML document for ``record``.

    Args:
        record: Scraped problem of the day
        today: Date to stamp, defaults to the current UTC date
    """
    stamp = (today or datetime.now(UTC).date()).strftime(DATE_FORMAT)
    try:
        return tomli_w.dumps({"potd": record.to_toml_table(stamp)})
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not encode problem of the day as TOML: {e}") from e


def write_potd_file(path: str | Path, record: ProblemOfDayRecord, today: date | None = None) -> Path:
    """Overwrite ``path`` with the TOML document for ``record``."""
    output_path = Path(path)
    document = render_potd_document(record, today)
    try:
        output_path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Could not write {output_path}: {e}") from e

    logger.info("Wrote problem of the day", path=str(output_path), number=record.number)
    return output_path
