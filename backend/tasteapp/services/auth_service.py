from __future__ import annotations

import threading
from typing import Any, Mapping
from urllib.parse import urlencode

import requests
from flask import Flask, current_app

from tasteapp.config import require_spotify_credentials
from tasteapp.errors import AuthorizationError, DecodeError, NotAuthenticatedError
from tasteapp.models.token import Token

AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
TOKEN_URL = "https://accounts.spotify.com/api/token"

# Key under which the token store lives on Flask's extensions
_TOKEN_STORE_KEY = "tasteapp.token_store"


class TokenStore:
    """
    Holds the single access token for this process.

    Written once per successful login, read by every handler.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._token: Token | None = None

    def set(self, token: Token) -> None:
        with self._lock:
            self._token = token

    def get(self) -> Token | None:
        with self._lock:
            return self._token

    def clear(self) -> None:
        with self._lock:
            self._token = None

    def require(self, now: float | None = None) -> Token:
        token = self.get()
        if token is None:
            raise NotAuthenticatedError()
        if token.is_expired(now):
            raise NotAuthenticatedError("Spotify session expired. Visit /login to sign in again.")
        return token


def init_token_store(app: Flask) -> TokenStore:
    store = TokenStore()
    app.extensions[_TOKEN_STORE_KEY] = store
    return store


def get_token_store(app: Flask | None = None) -> TokenStore:
    app = app or current_app
    store = app.extensions.get(_TOKEN_STORE_KEY)
    if store is None:
        raise RuntimeError("Token store is not configured. Did you call init_token_store() in create_app()?")
    return store


def build_authorize_url(config: Mapping[str, Any], state: str | None = None) -> str:
    require_spotify_credentials(config)
    params = {
        "client_id": config["SPOTIFY_CLIENT_ID"],
        "response_type": "code",
        "redirect_uri": config["SPOTIFY_REDIRECT_URI"],
        "scope": config.get("SPOTIFY_SCOPE") or "user-top-read",
    }
    if state:
        params["state"] = state
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


def exchange_code(config: Mapping[str, Any], code: str, now: float | None = None) -> Token:
    """
    Trade an authorization code for an access token.

    Every failure (HTTP error, network error, unexpected JSON) is reported as
    the same AuthorizationError; the cause is logged but not returned.
    """
    require_spotify_credentials(config)
    if not code:
        raise AuthorizationError("authorization failed: no code supplied")

    try:
        resp = requests.post(
            TOKEN_URL,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": config["SPOTIFY_REDIRECT_URI"],
            },
            auth=(config["SPOTIFY_CLIENT_ID"], config["SPOTIFY_CLIENT_SECRET"]),
            timeout=config.get("HTTP_TIMEOUT", 10),
        )
        resp.raise_for_status()
        token = Token.from_token_response(resp.json(), now=now)
    except requests.HTTPError as exc:
        current_app.logger.warning(
            "Spotify token exchange rejected: status=%s", exc.response.status_code if exc.response is not None else None
        )
        raise AuthorizationError() from exc
    except (requests.RequestException, ValueError, DecodeError) as exc:
        # requests' JSONDecodeError is a ValueError
        current_app.logger.warning("Spotify token exchange failed: %s", exc)
        raise AuthorizationError() from exc

    current_app.logger.info("Spotify token obtained, expires in %ss", token.expires_in())
    return token
