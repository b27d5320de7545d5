# ABOUTME: Domain models produced by the scrapers
# ABOUTME: ProblemOfDayRecord is built once per run from the featured table row and written as TOML

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProblemOfDayRecord(BaseModel):
    """The featured "problem of the day" entry of the problem set table."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=0, description="Problem ordinal shown before the title")
    name: str = Field(min_length=1, description="Problem title")
    url: str = Field(description="Absolute problem URL")
    solution_url: str | None = Field(default=None, description="Absolute solution URL, None when no solution exists")

    def to_toml_table(self, date: str) -> dict[str, Any]:
        """Return the ``potd`` table, leaving out ``solution_url`` when there is none."""
        table = self.model_dump(exclude_none=True)
        table["date"] = date
        return table
