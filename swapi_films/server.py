"""Simple Flask server presenting the films list and opening crawls."""

import asyncio
from typing import Optional

from flask import Flask, current_app, render_template_string

from .loaders.base import FilmLoader
from .loaders.network import NetworkFilmLoader
from .views.films_list import FilmsListView
from .views.load_state import Failed


LIST_TEMPLATE = """<!doctype html>
<title>{{ view.title }}</title>
<h1>{{ view.title }}</h1>
<ul>
{% for film in view.films %}
  <li>
    <a href="{{ url_for('film_detail', episode_id=film.id) }}"><strong>{{ film.title }}</strong></a><br>
    {{ rows[loop.index0][1] }}{% if rows[loop.index0][2] %} &middot; {{ rows[loop.index0][2] }}{% endif %}
  </li>
{% endfor %}
</ul>
"""

DETAIL_TEMPLATE = """<!doctype html>
<title>{{ detail.film.title }}</title>
<div style="text-align: center">
  <h2>{{ detail.heading }}</h2>
  <h1>{{ detail.film.title }}</h1>
  {% for paragraph in detail.paragraphs %}<p>{{ paragraph }}</p>{% endfor %}
  <a href="{{ url_for('films_list') }}">Films</a>
</div>
"""

ERROR_TEMPLATE = """<!doctype html>
<title>Error</title>
<p>{{ message }}</p>
"""


def activate_list(film_loader: FilmLoader) -> FilmsListView:
    """Run one activation of the films list."""
    view = FilmsListView(film_loader)
    asyncio.run(view.load())
    return view


def create_app(film_loader: Optional[FilmLoader] = None) -> Flask:
    """
    Build the Flask app around an injected loader.

    Args:
        film_loader: Loader used by every request (NetworkFilmLoader if None)

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    app.config["FILM_LOADER"] = film_loader if film_loader is not None else NetworkFilmLoader()

    @app.route("/")
    @app.route("/films")
    def films_list() -> str | tuple[str, int]:
        """Serve the films list, or the load error."""
        view = activate_list(current_app.config["FILM_LOADER"])
        if isinstance(view.state, Failed):
            return render_template_string(ERROR_TEMPLATE, message=view.render()), 502
        return render_template_string(LIST_TEMPLATE, view=view, rows=view.rows())

    @app.route("/films/<episode_id>")
    def film_detail(episode_id: str) -> str | tuple[str, int]:
        """Serve the opening crawl of a film from the list."""
        view = activate_list(current_app.config["FILM_LOADER"])
        if isinstance(view.state, Failed):
            return render_template_string(ERROR_TEMPLATE, message=view.render()), 502
        try:
            detail = view.select(episode_id)
        except KeyError:
            return render_template_string(
                ERROR_TEMPLATE, message=f"Episode {episode_id} not found"
            ), 404
        return render_template_string(DETAIL_TEMPLATE, detail=detail)

    return app


def run_server(
    host: str = "127.0.0.1",
    port: int = 3000,
    film_loader: Optional[FilmLoader] = None,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    print(f"\nFilms viewer running at http://localhost:{port}/films\n")
    create_app(film_loader).run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    run_server()
