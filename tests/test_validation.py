"""Tests for per-record provider schema validation."""

from typing import Any

import pytest

from anime_quotes.domain.validation import AnimeData, QuoteData, validate_anime, validate_quote


def _jikan_record(**overrides: Any) -> dict[str, Any]:
    """A trimmed-down record as Jikan returns it from /anime."""
    record: dict[str, Any] = {
        "mal_id": 1,
        "url": "https://myanimelist.net/anime/1/Cowboy_Bebop",
        "images": {"jpg": {"image_url": "https://cdn.myanimelist.net/images/anime/4/19644.jpg"}},
        "title": "Cowboy Bebop",
        "title_japanese": "カウボーイビバップ",
        "episodes": 26,
        "status": "Finished Airing",
        "score": 8.75,
        "synopsis": "Crime is timeless.",
        "year": 1998,
        "genres": [
            {"mal_id": 1, "type": "anime", "name": "Action"},
            {"mal_id": 24, "type": "anime", "name": "Sci-Fi"},
        ],
    }
    record.update(overrides)
    return record


class TestValidateQuote:
    """Quote records are renamed to the canonical shape or rejected."""

    def test_renames_provider_fields(self) -> None:
        parsed = validate_quote({"anime": "A", "character": "X", "quote": "hi"})

        assert isinstance(parsed, QuoteData)
        assert parsed.model_dump() == {"title": "A", "character": "X", "text": "hi"}

    def test_ignores_unknown_fields(self) -> None:
        parsed = validate_quote({"anime": "A", "character": "X", "quote": "hi", "id": 99})

        assert parsed is not None
        assert parsed.text == "hi"

    @pytest.mark.parametrize(
        "raw",
        [
            {"anime": "A"},
            {"anime": "A", "character": "X"},
            {"anime": "A", "character": "X", "quote": None},
            {"anime": "A", "character": 7, "quote": "hi"},
            {"title": "A", "character": "X", "text": "hi"},
            None,
            "A: hi",
            ["A", "X", "hi"],
        ],
    )
    def test_rejects_malformed_records(self, raw: Any) -> None:
        assert validate_quote(raw) is None


class TestValidateAnime:
    """Anime records keep the fields the domain uses, under domain names."""

    def test_full_record(self) -> None:
        parsed = validate_anime(_jikan_record())

        assert isinstance(parsed, AnimeData)
        assert parsed.id == 1
        assert parsed.title == "Cowboy Bebop"
        assert parsed.image_url == "https://cdn.myanimelist.net/images/anime/4/19644.jpg"
        assert parsed.episodes == 26
        assert parsed.score == 8.75
        assert parsed.year == 1998
        assert parsed.genres == ["Action", "Sci-Fi"]

    def test_minimal_record_defaults_optional_fields(self) -> None:
        parsed = validate_anime({"mal_id": 5, "title": "Mushishi"})

        assert parsed is not None
        assert parsed.url is None
        assert parsed.image_url is None
        assert parsed.synopsis is None
        assert parsed.episodes is None
        assert parsed.genres == []

    def test_null_optional_fields(self) -> None:
        parsed = validate_anime(_jikan_record(episodes=None, score=None, year=None, genres=None, images=None))

        assert parsed is not None
        assert parsed.episodes is None
        assert parsed.score is None
        assert parsed.image_url is None
        assert parsed.genres == []

    def test_drops_non_http_links(self) -> None:
        parsed = validate_anime(_jikan_record(url="javascript:alert(1)"))

        assert parsed is not None
        assert parsed.url is None

    def test_skips_genres_without_name(self) -> None:
        parsed = validate_anime(_jikan_record(genres=[{"mal_id": 1}, {"name": "Drama"}, "Comedy"]))

        assert parsed is not None
        assert parsed.genres == ["Drama"]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"mal_id": None},
            {"mal_id": "1"},
            {"mal_id": True},
            {"title": None},
            {"title": 123},
            {"episodes": "many"},
            {"score": "high"},
        ],
    )
    def test_rejects_bad_types(self, overrides: dict[str, Any]) -> None:
        assert validate_anime(_jikan_record(**overrides)) is None

    def test_rejects_missing_title(self) -> None:
        record = _jikan_record()
        del record["title"]

        assert validate_anime(record) is None

    def test_rejects_non_mapping(self) -> None:
        assert validate_anime(["Cowboy Bebop"]) is None
        assert validate_anime(None) is None
