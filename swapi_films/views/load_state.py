"""Load states of the films list."""

from dataclasses import dataclass
from typing import Union

from ..models.film import Film


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Loaded:
    films: tuple[Film, ...]


@dataclass(frozen=True)
class Failed:
    error: Exception

    @property
    def description(self) -> str:
        return str(self.error) or type(self.error).__name__


LoadState = Union[Loading, Loaded, Failed]
