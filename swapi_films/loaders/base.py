"""Film loader contract shared by the network and mock loaders."""

from typing import Iterable, Protocol, runtime_checkable

from ..models.film import Film


@runtime_checkable
class FilmLoader(Protocol):
    """
    Capability to resolve films by episode key.

    How `load_films` orders its result and treats unknown keys is up to each
    implementation; callers must not assume one behaviour across loaders.
    """

    async def load_film(self, episode_id: str) -> Film:
        """
        Resolve exactly one film.

        Raises:
            MissingDataError: When the key cannot be resolved
        """
        ...

    async def load_films(self, episode_ids: Iterable[str]) -> list[Film]:
        """Resolve many films."""
        ...
