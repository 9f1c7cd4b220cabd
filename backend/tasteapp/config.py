from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()


def _env(name: str, default: str | None = None) -> Any:
    # read at construction time so tests can patch the environment
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass(frozen=True, slots=True)
class BaseConfig:
    SECRET_KEY: str = _env("SECRET_KEY", "change-me")
    FLASK_ENV: str = _env("FLASK_ENV", "development")
    DEBUG: bool = field(default_factory=lambda: os.getenv("FLASK_DEBUG", "0") == "1")
    TESTING: bool = False

    HOST: str = _env("HOST", "127.0.0.1")
    PORT: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    HTTP_TIMEOUT: float = field(default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10")))

    # Spotify
    SPOTIFY_CLIENT_ID: str | None = _env("SPOTIFY_CLIENT_ID")
    SPOTIFY_CLIENT_SECRET: str | None = _env("SPOTIFY_CLIENT_SECRET")
    SPOTIFY_REDIRECT_URI: str = _env("SPOTIFY_REDIRECT_URI", "http://localhost:3000/callback")
    SPOTIFY_SCOPE: str = _env("SPOTIFY_SCOPE", "user-top-read")

    # OpenAI
    OPENAI_API_KEY: str | None = _env("OPENAI_API_KEY")
    OPENAI_MODEL: str = _env("OPENAI_MODEL", "gpt-3.5-turbo")


@dataclass(frozen=True, slots=True)
class DevelopmentConfig(BaseConfig):
    DEBUG: bool = True


@dataclass(frozen=True, slots=True)
class ProductionConfig(BaseConfig):
    DEBUG: bool = False


@dataclass(frozen=True, slots=True)
class TestingConfig(BaseConfig):
    __test__ = False  # not a pytest test class

    TESTING: bool = True
    DEBUG: bool = False
    HOST: str = "127.0.0.1"
    SECRET_KEY: str = "test"
    SPOTIFY_CLIENT_ID: str | None = None
    SPOTIFY_CLIENT_SECRET: str | None = None
    SPOTIFY_REDIRECT_URI: str = "http://localhost:3000/callback"
    OPENAI_API_KEY: str | None = None


_CONFIG_MAP = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}

SPOTIFY_REQUIRED_KEYS = (
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "SPOTIFY_REDIRECT_URI",
)


def get_config(name: str | None) -> type[BaseConfig]:
    env_name = name or os.getenv("FLASK_ENV", "development").lower()
    return _CONFIG_MAP.get(env_name, DevelopmentConfig)


def require_spotify_credentials(config: Mapping[str, Any]) -> None:
    """Raise ConfigurationError listing every Spotify setting that is unset."""
    missing = [key for key in SPOTIFY_REQUIRED_KEYS if not config.get(key)]
    if missing:
        raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")
