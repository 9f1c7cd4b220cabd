from __future__ import annotations

import time

import pytest

from tasteapp import create_app
from tasteapp.config import TestingConfig
from tasteapp.models.token import Token
from tasteapp.services import spotify_service
from tasteapp.services.auth_service import get_token_store

from fakes import FakeSpotifySession


@pytest.fixture
def config() -> TestingConfig:
    return TestingConfig(
        SPOTIFY_CLIENT_ID="client-id",
        SPOTIFY_CLIENT_SECRET="client-secret",
        SPOTIFY_REDIRECT_URI="http://localhost:3000/callback",
    )


@pytest.fixture
def app(config):
    app = create_app(config=config)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_spotify(monkeypatch) -> FakeSpotifySession:
    session = FakeSpotifySession()
    monkeypatch.setattr(spotify_service.requests, "get", session.get)
    return session


@pytest.fixture
def logged_in(app) -> Token:
    token = Token(access_token="test-access-token", expires_at=time.time() + 3600)
    get_token_store(app).set(token)
    return token
