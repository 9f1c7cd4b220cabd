import pytest

from tasteapp.errors import GenreNotFoundError, ValidationError
from tasteapp.models import Artist
from tasteapp.utils.genres import filter_by_genre, known_genres

ARTISTS = [
    Artist(id="1", name="Robyn", genres=["dance pop", "pop", "swedish pop"]),
    Artist(id="2", name="Radiohead", genres=["alternative rock", "art rock"]),
    Artist(id="3", name="Kendrick Lamar", genres=["hip hop", "rap"]),
    Artist(id="4", name="Unknown", genres=[]),
]


def test_filter_keeps_exact_matches_only():
    assert [a.name for a in filter_by_genre(ARTISTS, "pop")] == ["Robyn"]
    assert [a.name for a in filter_by_genre(ARTISTS, "Art Rock")] == ["Radiohead"]


def test_unknown_genre_lists_known_ones():
    with pytest.raises(GenreNotFoundError) as excinfo:
        filter_by_genre(ARTISTS, "polka")
    err = excinfo.value
    assert err.status_code == 404
    assert err.known_genres == known_genres(ARTISTS)
    assert err.to_dict()["genre"] == "polka"


def test_empty_genre_is_invalid():
    with pytest.raises(ValidationError):
        filter_by_genre(ARTISTS, "  ")


def test_known_genres_sorted_and_unique():
    genres = known_genres(ARTISTS + ARTISTS)
    assert genres == sorted(set(genres))
    assert len(genres) == 7
