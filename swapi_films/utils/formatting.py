"""Display formatting helpers."""

from datetime import date
from typing import Optional

from ..constants.config import DISPLAY_DATE_FORMAT


def format_release_date(release_date: Optional[date]) -> Optional[str]:
    """Format a date abbreviated, e.g. 'May 25, 1977'. None stays None."""
    if release_date is None:
        return None
    return release_date.strftime(DISPLAY_DATE_FORMAT).format(day=release_date.day)


def format_episode(episode_id: int) -> str:
    return f"Episode {episode_id}"
