from __future__ import annotations

from flask import Blueprint, current_app, redirect, request, url_for
from flask.typing import ResponseReturnValue

from tasteapp.errors import AuthorizationError, ValidationError
from tasteapp.services.auth_service import build_authorize_url, exchange_code, get_token_store

auth_bp = Blueprint("auth", __name__)


@auth_bp.get("/login")
def login() -> ResponseReturnValue:
    """Send the browser to Spotify's consent page."""
    return redirect(build_authorize_url(current_app.config))


@auth_bp.get("/callback")
def callback() -> ResponseReturnValue:
    """
    GET /callback?code=AUTH_CODE

    Spotify redirects here after consent. The code is exchanged for a token
    which is kept in memory until it expires or /logout is called.
    """
    if error := request.args.get("error"):
        current_app.logger.info("Spotify login declined: %s", error)
        raise AuthorizationError(f"authorization failed: {error}")

    code = (request.args.get("code") or "").strip()
    if not code:
        raise ValidationError("Missing query parameter `code`")

    token = exchange_code(current_app.config, code)
    get_token_store().set(token)
    return redirect(url_for("pages.index"))


@auth_bp.get("/logout")
def logout() -> ResponseReturnValue:
    get_token_store().clear()
    return redirect(url_for("pages.index"))
