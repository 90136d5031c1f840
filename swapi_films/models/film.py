"""Film model for SWAPI film resources."""

import re
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants.config import RELEASE_DATE_FORMAT

RELEASE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Film(BaseModel):
    """Pydantic model for a film returned by the Star Wars API.

    Films are immutable values. Two films are the same entity when their
    episode IDs match, whatever the rest of their content.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(..., strict=True, description="Film title")
    episode_id: int = Field(..., strict=True, description="Episode number, also the identity key")
    opening_crawl: str = Field(..., strict=True, description="Opening crawl text, line endings as received")
    release_date: Optional[date] = Field(
        default=None,
        description="Release date, parsed from a YYYY-MM-DD string"
    )

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date(cls, value: Any) -> Optional[date]:
        """Accept only calendar dates in YYYY-MM-DD form (no time, no offset)."""
        if value is None or (isinstance(value, date) and not isinstance(value, datetime)):
            return value
        if not isinstance(value, str) or not RELEASE_DATE_PATTERN.match(value):
            raise ValueError(f"release_date must be a YYYY-MM-DD string, got {value!r}")
        return datetime.strptime(value, RELEASE_DATE_FORMAT).date()

    @property
    def id(self) -> str:
        """Identity key: the episode number as text."""
        return str(self.episode_id)

    def is_same_entity(self, other: "Film") -> bool:
        return self.id == other.id
