from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import requests
from flask import current_app

from tasteapp.errors import DecodeError, UpstreamError, ValidationError
from tasteapp.models.artist import Artist
from tasteapp.models.track import Track
from tasteapp.utils.validation import parse_limit, parse_time_range

API_BASE_URL = "https://api.spotify.com/v1"

SPOTIFY_ID_RE = re.compile(r"[0-9A-Za-z]+")


class SpotifyService:
    """Thin wrapper over the Spotify Web API endpoints the workshop uses."""

    def __init__(self, access_token: str, timeout: float = 10, http: Any = None) -> None:
        self._access_token = access_token
        self._timeout = timeout
        # the requests module itself by default: one request per call, nothing pooled
        self._http = http or requests

    @classmethod
    def from_app(cls, access_token: str) -> "SpotifyService":
        return cls(access_token, timeout=current_app.config.get("HTTP_TIMEOUT", 10))

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{API_BASE_URL}{path}"
        try:
            resp = self._http.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {self._access_token}"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamError(f"Could not reach Spotify: {exc}", upstream_status=None) from exc

        if not resp.ok:
            raise UpstreamError(
                f"Spotify returned HTTP {resp.status_code} for {path}",
                upstream_status=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise DecodeError(f"Spotify returned invalid JSON for {path}") from exc
        if not isinstance(data, dict):
            raise DecodeError(f"Spotify returned an unexpected payload for {path}")
        return data

    def _items(self, data: dict[str, Any], key: str, path: str) -> list[dict[str, Any]]:
        items = data.get(key)
        if not isinstance(items, list):
            raise DecodeError(f"Spotify response for {path} has no `{key}` list")
        return items

    def get_top_artists(self, limit: int = 50, time_range: str = "medium_term") -> list[Artist]:
        path = "/me/top/artists"
        data = self._get(path, params={"limit": parse_limit(limit), "time_range": parse_time_range(time_range)})
        return [Artist.from_mapping(item) for item in self._items(data, "items", path)]

    def get_top_tracks(self, limit: int = 50, time_range: str = "medium_term") -> list[Track]:
        path = "/me/top/tracks"
        data = self._get(path, params={"limit": parse_limit(limit), "time_range": parse_time_range(time_range)})
        return [Track.from_mapping(item) for item in self._items(data, "items", path)]

    def get_artist_top_tracks(self, artist_id: str, market: str = "US") -> list[Track]:
        if not SPOTIFY_ID_RE.fullmatch(artist_id or ""):
            raise ValidationError("`artist_id` must be a base62 Spotify ID")
        path = f"/artists/{artist_id}/top-tracks"
        data = self._get(path, params={"market": market})
        return [Track.from_mapping(item) for item in self._items(data, "tracks", path)]

    def get_top_items_concurrently(
        self, limit: int = 50, time_range: str = "medium_term"
    ) -> tuple[list[Artist], list[Track]]:
        """
        Fetch top artists and top tracks in parallel and wait for both.

        An error from either call is re-raised once both have finished.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            artists_future = executor.submit(self.get_top_artists, limit, time_range)
            tracks_future = executor.submit(self.get_top_tracks, limit, time_range)
            return artists_future.result(), tracks_future.result()
