"""API and formatting constants."""

# SWAPI
SWAPI_BASE_URL = "https://swapi.dev/api"
FILMS_PATH = "films"

# The API only has episodes 1-6
EPISODE_IDS = tuple(str(episode_id) for episode_id in range(1, 7))

# Date formats
RELEASE_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%b {day}, %Y"
