"""List view of the films, driven by an injected FilmLoader."""

import logging
from typing import Optional

from ..constants.config import EPISODE_IDS
from ..errors import FilmsError
from ..loaders.base import FilmLoader
from ..loaders.network import NetworkFilmLoader
from ..models.film import Film
from ..utils.formatting import format_episode, format_release_date
from .film_opening_crawl import FilmOpeningCrawlView
from .load_state import Failed, Loaded, Loading, LoadState

logger = logging.getLogger(__name__)


class FilmsListView:
    """
    Load the six films once per activation and present them as rows.

    The loader is injected so tests and previews can pass a MockFilmLoader;
    without one, films come from the network. Load errors are kept in the
    state for display and are never retried.
    """

    title = "Films"

    def __init__(self, film_loader: Optional[FilmLoader] = None):
        self.film_loader = film_loader if film_loader is not None else NetworkFilmLoader()
        self.state: LoadState = Loading()

    async def load(self) -> LoadState:
        """Run one activation: load EPISODE_IDS and record the outcome."""
        self.state = Loading()
        try:
            films = await self.film_loader.load_films(list(EPISODE_IDS))
        except FilmsError as e:
            logger.info("Loading films failed: %s", e)
            self.state = Failed(e)
        else:
            self.state = Loaded(tuple(films))
        return self.state

    @property
    def films(self) -> list[Film]:
        return list(self.state.films) if isinstance(self.state, Loaded) else []

    def rows(self) -> list[tuple[str, str, Optional[str]]]:
        """(title, episode label, formatted release date or None) per loaded film."""
        return [
            (film.title, format_episode(film.episode_id), format_release_date(film.release_date))
            for film in self.films
        ]

    def select(self, episode_id: str) -> FilmOpeningCrawlView:
        """
        Navigate to a loaded film's detail view.

        Raises:
            KeyError: If no loaded film has this episode key
        """
        for film in self.films:
            if film.id == episode_id:
                return FilmOpeningCrawlView(film)
        raise KeyError(episode_id)

    def render(self) -> str:
        if isinstance(self.state, Loading):
            return "Loading..."
        if isinstance(self.state, Failed):
            return f"An error occurred: {self.state.description}"

        lines = [self.title, ""]
        for title, episode, release_date in self.rows():
            lines.append(title)
            lines.append(f"  {episode}")
            if release_date:
                lines.append(f"  {release_date}")
        return "\n".join(lines)
