from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask.typing import ResponseReturnValue

from tasteapp.errors import CommentaryDisabledError, ValidationError
from tasteapp.services.auth_service import get_token_store
from tasteapp.services.commentary_service import DEFAULT_CELEBRITY, CommentaryService
from tasteapp.services.spotify_service import SpotifyService

commentary_bp = Blueprint("commentary", __name__, url_prefix="/api")

MODES = ("roast", "toast")


def parse_mode(raw: str | None) -> str:
    mode = (raw or "roast").strip().lower()
    if mode not in MODES:
        raise ValidationError("`mode` must be `roast` or `toast`")
    return mode


@commentary_bp.get("/commentary")
def commentary() -> ResponseReturnValue:
    """
    GET /api/commentary?mode=roast|toast&celebrity=NAME

    One-sentence take on the user's top tracks, returned verbatim from the
    text-generation API.
    """
    mode = parse_mode(request.args.get("mode"))
    celebrity = (request.args.get("celebrity") or "").strip() or DEFAULT_CELEBRITY

    token = get_token_store().require()
    service = CommentaryService.from_app()
    if not service.enabled:
        raise CommentaryDisabledError()

    tracks = SpotifyService.from_app(token.access_token).get_top_tracks(limit=30)
    text = service.generate(tracks, roast=mode == "roast", celebrity=celebrity)
    return jsonify({"mode": mode, "celebrity": celebrity, "commentary": text}), 200
