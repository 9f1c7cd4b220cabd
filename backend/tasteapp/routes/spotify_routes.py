from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask.typing import ResponseReturnValue

from tasteapp.services.auth_service import get_token_store
from tasteapp.services.spotify_service import SpotifyService
from tasteapp.utils.genres import filter_by_genre
from tasteapp.utils.validation import parse_limit, parse_time_range

spotify_bp = Blueprint("spotify", __name__, url_prefix="/api")


def _service() -> SpotifyService:
    token = get_token_store().require()
    return SpotifyService.from_app(token.access_token)


def _collection(items) -> dict:
    return {"count": len(items), "items": [item.to_dict() for item in items]}


@spotify_bp.get("/top-artists")
def top_artists() -> ResponseReturnValue:
    """
    GET /api/top-artists?time_range=medium_term

    Returns the user's top 50 artists:
    { "count": int, "items": [ Artist, ... ] }
    """
    time_range = parse_time_range(request.args.get("time_range"))
    artists = _service().get_top_artists(limit=50, time_range=time_range)
    return jsonify(_collection(artists)), 200


@spotify_bp.get("/top-artists/<genre>")
def top_artists_by_genre(genre: str) -> ResponseReturnValue:
    """
    GET /api/top-artists/<genre>

    Same as /api/top-artists but only artists tagged with <genre>.
    Unknown genres give a 404 listing the genres that are present.
    """
    time_range = parse_time_range(request.args.get("time_range"))
    artists = _service().get_top_artists(limit=50, time_range=time_range)
    matches = filter_by_genre(artists, genre)
    payload = _collection(matches)
    payload["genre"] = genre
    return jsonify(payload), 200


@spotify_bp.get("/top-tracks")
def top_tracks() -> ResponseReturnValue:
    limit = parse_limit(request.args.get("limit"))
    time_range = parse_time_range(request.args.get("time_range"))
    tracks = _service().get_top_tracks(limit=limit, time_range=time_range)
    return jsonify(_collection(tracks)), 200


@spotify_bp.get("/artists/<artist_id>/top-tracks")
def artist_top_tracks(artist_id: str) -> ResponseReturnValue:
    market = (request.args.get("market") or "US").strip().upper()
    tracks = _service().get_artist_top_tracks(artist_id, market=market)
    payload = _collection(tracks)
    payload["artist_id"] = artist_id
    return jsonify(payload), 200
