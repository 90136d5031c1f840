import json
from datetime import date

import pytest
from pydantic import ValidationError

from swapi_films.models.film import Film


def payload(**overrides):
    data = {
        "title": "A New Hope",
        "episode_id": 4,
        "opening_crawl": "It is a period of civil war.\r\nRebel spaceships, striking\n\rfrom a hidden base",
        "release_date": "1977-05-25",
        "director": "George Lucas",
    }
    data.update(overrides)
    return data


def test_decodes_snake_case_payload():
    film = Film.model_validate(payload())

    assert film.title == "A New Hope"
    assert film.episode_id == 4
    assert film.opening_crawl.startswith("It is a period of civil war.\r\n")
    assert film.release_date == date(1977, 5, 25)


def test_identity_is_episode_id_as_text():
    film = Film.model_validate(payload())
    retitled = Film.model_validate(payload(title="Star Wars"))
    other = Film.model_validate(payload(episode_id=5))

    assert film.id == "4"
    assert film.is_same_entity(retitled)
    assert not film.is_same_entity(other)


@pytest.mark.parametrize("data", [payload(release_date=None), {k: v for k, v in payload().items() if k != "release_date"}])
def test_release_date_absent_is_none(data):
    assert Film.model_validate(data).release_date is None


@pytest.mark.parametrize("release_date", ["25/05/1977", "1977-5-25", "1977-05-25T00:00:00Z", "1977-02-30", "", 233366400])
def test_release_date_requires_calendar_date_string(release_date):
    with pytest.raises(ValidationError):
        Film.model_validate(payload(release_date=release_date))


def test_missing_required_field_is_rejected():
    data = payload()
    del data["opening_crawl"]

    with pytest.raises(ValidationError):
        Film.model_validate(data)


def test_camel_case_keys_are_not_accepted():
    data = payload()
    data["episodeId"] = data.pop("episode_id")

    with pytest.raises(ValidationError):
        Film.model_validate(data)


def test_film_is_immutable():
    film = Film.model_validate(payload())

    with pytest.raises(ValidationError):
        film.title = "Changed"


def test_json_round_trip_preserves_fields():
    film = Film.model_validate_json(
        '{"title": "The Empire Strikes Back", "episode_id": 5, '
        '"opening_crawl": "It is a dark time for the\\r\\nRebellion.\\n\\r", '
        '"release_date": "1980-05-17", "url": "https://swapi.dev/api/films/2/"}'
    )

    dumped = film.model_dump(mode="json")
    again = Film.model_validate_json(film.model_dump_json())

    assert dumped == {
        "title": "The Empire Strikes Back",
        "episode_id": 5,
        "opening_crawl": "It is a dark time for the\r\nRebellion.\n\r",
        "release_date": "1980-05-17",
    }
    assert again == film


@pytest.mark.parametrize("overrides", [
    {"episode_id": "4"},
    {"episode_id": 4.0},
    {"title": 4},
    {"opening_crawl": None},
])
def test_fields_are_not_coerced_from_other_json_types(overrides):
    with pytest.raises(ValidationError):
        Film.model_validate_json(json.dumps(payload(**overrides)))
