from __future__ import annotations

from typing import Iterable

from tasteapp.errors import GenreNotFoundError, ValidationError
from tasteapp.models.artist import Artist
from tasteapp.utils.text import normalize_genre


def known_genres(artists: Iterable[Artist]) -> list[str]:
    genres = {genre for artist in artists for genre in artist.genres if genre}
    return sorted(genres)


def filter_by_genre(artists: Iterable[Artist], genre: str) -> list[Artist]:
    """
    Keep only artists tagged with `genre`.

    Matching is exact on the normalized genre name, so "pop" does not match
    "dance pop" and "hip-hop" matches "hip hop".
    """
    wanted = normalize_genre(genre or "")
    if not wanted:
        raise ValidationError("genre must not be empty")

    artists = list(artists)
    matches = [artist for artist in artists if artist.has_genre(wanted)]
    if not matches:
        raise GenreNotFoundError(genre, known_genres(artists))
    return matches
