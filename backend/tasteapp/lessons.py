"""
Debugging exercises for the workshop.

Every function below is deliberately broken. None of them is imported by the
server; they exist to be fixed by hand. Each docstring names the concept, the
symptom you will see, and where to look. The matching tests in
tests/test_lessons.py describe the correct behaviour and are marked xfail;
once you fix a lesson its test starts passing and pytest reports XPASS as a
failure, which is your cue to delete the marker.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator

from tasteapp.models.track import Track

_DEFAULT_SETTINGS = {"time_range": "medium_term", "limit": 50}


# Lesson 1: ownership. Who owns the data you hand out?
def get_default_settings() -> dict[str, object]:
    """
    Return the default request settings for the caller to tweak.

    Symptom: after one caller does ``settings["limit"] = 5``, every later
    caller also gets a limit of 5. The function hands out the module's own
    dict rather than a copy the caller owns.
    """
    return _DEFAULT_SETTINGS


# Lesson 2: lifetimes. How long does the name a closure looks up stay bound?
def make_track_formatters(tracks: Iterable[Track]) -> list[Callable[[], str]]:
    """
    Build one zero-argument formatter per track.

    Symptom: every formatter prints the *last* track. Each lambda looks up
    ``track`` when it is called, long after the loop has moved on.
    """
    formatters = []
    for track in tracks:
        formatters.append(lambda: track.format())
    return formatters


# Lesson 3: exclusive access. Don't change what you're walking over.
def drop_unpopular(tracks: list[Track], threshold: int = 50) -> list[Track]:
    """
    Remove tracks whose popularity is below `threshold`, in place.

    Symptom: two unpopular tracks in a row, and the second one survives.
    The list is mutated while the loop is still iterating it.
    """
    for track in tracks:
        if (track.popularity or 0) < threshold:
            tracks.remove(track)
    return tracks


# Lesson 4: interface conformance. Implementations must match the contract.
class Formattable(ABC):
    @abstractmethod
    def format(self) -> str:
        """Return a one-line, human-readable description."""


class ArtistSummary(Formattable):
    """
    Symptom: ``describe_all([ArtistSummary(...)])`` raises TypeError.
    ``format`` here asks for an argument the interface never passes.
    """

    def __init__(self, name: str, genres: list[str]) -> None:
        self.name = name
        self.genres = genres

    def format(self, separator: str) -> str:
        return f"{self.name} ({separator.join(self.genres)})"


def describe_all(items: Iterable[Formattable]) -> list[str]:
    return [item.format() for item in items]


# Lesson 5: use after move. An iterator can only be consumed once.
def summarize_tracks(tracks: Iterable[Track]) -> tuple[int, list[str]]:
    """
    Return ``(count, names)`` for the given tracks.

    Symptom: when called with a generator, the count is right but the name
    list is empty. The first pass used up the iterator.
    """
    track_iter: Iterator[Track] = iter(tracks)
    count = sum(1 for _ in track_iter)
    names = [track.name for track in track_iter]
    return count, names
