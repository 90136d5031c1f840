"""Detail view showing a film's opening crawl."""

from ..models.film import Film
from ..utils.formatting import format_episode
from ..utils.normalization import crawl_paragraphs, normalize_line_endings


class FilmOpeningCrawlView:
    """Render one film. The film is handed over by the list; nothing is loaded here."""

    def __init__(self, film: Film):
        self.film = film

    @property
    def heading(self) -> str:
        return format_episode(self.film.episode_id)

    @property
    def crawl(self) -> str:
        return normalize_line_endings(self.film.opening_crawl)

    @property
    def paragraphs(self) -> list[str]:
        return crawl_paragraphs(self.film.opening_crawl)

    def render(self) -> str:
        return f"{self.heading}\n{self.film.title}\n\n{self.crawl}\n"
