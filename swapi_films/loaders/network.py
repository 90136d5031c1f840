"""Film loader backed by the Star Wars API."""

import asyncio
import logging
from typing import Iterable, Optional

import aiohttp

from ..constants.config import FILMS_PATH, SWAPI_BASE_URL
from ..models.film import Film
from ..network.resource_loader import NetworkResourceLoader
from .base import FilmLoader

logger = logging.getLogger(__name__)


async def cancel_pending(tasks: list[asyncio.Future]) -> None:
    """Cancel unfinished tasks and wait until every task has settled."""
    for task in tasks:
        if not task.done():
            task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


class NetworkFilmLoader(FilmLoader):
    """Load films from SWAPI, fetching batches concurrently."""

    def __init__(self, base_url: str = SWAPI_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def film_url(self, episode_id: str) -> str:
        return f"{self.base_url}/{FILMS_PATH}/{episode_id}"

    async def load_film(
        self,
        episode_id: str,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> Film:
        """
        Fetch a single film.

        Args:
            episode_id: Episode key, interpolated into the resource URL
            session: Optional shared session (a new one is opened otherwise)

        Returns:
            The decoded Film
        """
        loader = NetworkResourceLoader(Film, session=session)
        return await loader.load_resource(self.film_url(episode_id))

    async def load_films(self, episode_ids: Iterable[str]) -> list[Film]:
        """
        Fetch films in parallel, one task per key.

        The first failing fetch fails the whole batch: the remaining tasks
        are cancelled and its error is re-raised unchanged. Completion order
        is not deterministic, so results are sorted by episode_id.

        Args:
            episode_ids: Episode keys to fetch (duplicates are fetched twice)

        Returns:
            Films sorted ascending by episode_id
        """
        episode_ids = list(episode_ids)
        if not episode_ids:
            return []

        logger.debug("Fetching %d films", len(episode_ids))
        async with aiohttp.ClientSession() as session:
            tasks = [
                asyncio.ensure_future(self.load_film(episode_id, session=session))
                for episode_id in episode_ids
            ]
            try:
                films = await asyncio.gather(*tasks)
            except asyncio.CancelledError:
                await cancel_pending(tasks)
                raise
            except Exception as e:
                logger.warning("Film batch failed (%s), cancelling pending fetches", e)
                await cancel_pending(tasks)
                raise

        return sorted(films, key=lambda film: film.episode_id)
