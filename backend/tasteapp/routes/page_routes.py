from __future__ import annotations

from flask import Blueprint, current_app, render_template, request
from flask.typing import ResponseReturnValue

from tasteapp.errors import NotAuthenticatedError, WorkshopError
from tasteapp.routes.commentary_routes import parse_mode
from tasteapp.services.auth_service import get_token_store
from tasteapp.services.commentary_service import DEFAULT_CELEBRITY, CommentaryService
from tasteapp.services.spotify_service import SpotifyService
from tasteapp.utils.genres import known_genres

pages_bp = Blueprint("pages", __name__)


@pages_bp.get("/")
def index() -> ResponseReturnValue:
    try:
        token = get_token_store().require()
    except NotAuthenticatedError as err:
        return render_template("index.html", logged_in=False, notice=err.message)

    try:
        artists, tracks = SpotifyService.from_app(token.access_token).get_top_items_concurrently()
    except WorkshopError as err:
        current_app.logger.warning("Could not load top items: %s", err)
        return render_template("index.html", logged_in=True, error=err.message), err.status_code

    commentary = None
    commentary_warning = None
    mode = request.args.get("commentary")
    celebrity = (request.args.get("celebrity") or "").strip() or DEFAULT_CELEBRITY
    if mode:
        service = CommentaryService.from_app()
        if not service.enabled:
            commentary_warning = "Commentary is disabled because OPENAI_API_KEY is not set."
        else:
            try:
                commentary = service.generate(tracks, roast=parse_mode(mode) == "roast", celebrity=celebrity)
            except WorkshopError as err:
                commentary_warning = err.message

    return render_template(
        "index.html",
        logged_in=True,
        artists=artists,
        tracks=tracks,
        genres=known_genres(artists),
        commentary=commentary,
        commentary_warning=commentary_warning,
        celebrity=celebrity,
    )
