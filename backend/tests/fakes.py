from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import requests

from tasteapp.services.spotify_service import API_BASE_URL


def make_artist(i: int, genres: list[str], popularity: int = 50) -> dict[str, Any]:
    return {
        "id": f"artist{i}",
        "name": f"Artist {i}",
        "genres": genres,
        "popularity": popularity,
        "external_urls": {"spotify": f"https://open.spotify.com/artist/artist{i}"},
        "images": [{"url": f"https://i.scdn.co/image/artist{i}"}],
    }


def make_track(i: int, artists: list[str], popularity: int = 50) -> dict[str, Any]:
    return {
        "id": f"track{i}",
        "name": f"Track {i}",
        "artists": [{"id": name.lower(), "name": name} for name in artists],
        "popularity": popularity,
        "album": {"name": f"Album {i}"},
        "external_urls": {"spotify": f"https://open.spotify.com/track/track{i}"},
    }


GENRE_CYCLE = [
    ["pop", "dance pop"],
    ["indie rock", "modern rock"],
    ["hip hop", "rap"],
    ["dance pop"],
    [],
]

TOP_ARTISTS = [make_artist(i, GENRE_CYCLE[i % len(GENRE_CYCLE)]) for i in range(60)]
TOP_TRACKS = [make_track(i, [f"Artist {i}", f"Artist {i + 1}"]) for i in range(60)]


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._text is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self._text, 0)
        return self._payload

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSpotifySession:
    """Stands in for `requests.get`; answers by API path."""

    def __init__(self) -> None:
        self.calls: list[SimpleNamespace] = []
        self.overrides: dict[str, FakeResponse] = {}

    def get(self, url, params=None, headers=None, timeout=None):
        path = url.removeprefix(API_BASE_URL)
        self.calls.append(SimpleNamespace(path=path, params=params or {}, headers=headers or {}))
        if path in self.overrides:
            return self.overrides[path]

        limit = int((params or {}).get("limit", 20))
        if path == "/me/top/artists":
            return FakeResponse(200, {"items": TOP_ARTISTS[:limit]})
        if path == "/me/top/tracks":
            return FakeResponse(200, {"items": TOP_TRACKS[:limit]})
        if path.startswith("/artists/") and path.endswith("/top-tracks"):
            return FakeResponse(200, {"tracks": TOP_TRACKS[:10]})
        return FakeResponse(404, {"error": {"status": 404, "message": "Not found"}})


