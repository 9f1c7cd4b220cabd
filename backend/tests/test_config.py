from dataclasses import fields

import pytest

from tasteapp.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
    require_spotify_credentials,
)
from tasteapp.errors import ConfigurationError


def test_get_config_by_name_and_env(monkeypatch):
    assert get_config("production") is ProductionConfig
    assert get_config("testing") is TestingConfig
    monkeypatch.setenv("FLASK_ENV", "production")
    assert get_config(None) is ProductionConfig
    assert get_config("nonsense") is DevelopmentConfig


def test_config_reads_environment_when_built(monkeypatch):
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "from-env")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.delenv("SPOTIFY_REDIRECT_URI", raising=False)
    config = DevelopmentConfig()
    assert config.SPOTIFY_CLIENT_ID == "from-env"
    assert config.PORT == 8080
    assert config.SPOTIFY_REDIRECT_URI == "http://localhost:3000/callback"
    assert config.SPOTIFY_SCOPE == "user-top-read"
    assert config.DEBUG is True


def test_config_is_immutable():
    config = TestingConfig()
    with pytest.raises(AttributeError):
        config.SPOTIFY_CLIENT_ID = "changed"


def test_missing_credentials_are_named():
    with pytest.raises(ConfigurationError) as excinfo:
        require_spotify_credentials({"SPOTIFY_CLIENT_ID": "id", "SPOTIFY_REDIRECT_URI": "http://x"})
    assert "SPOTIFY_CLIENT_SECRET" in excinfo.value.message
    assert "SPOTIFY_CLIENT_ID" not in excinfo.value.message


def test_testing_config_is_not_collected_as_tests():
    assert TestingConfig.__test__ is False
    assert "__test__" not in {f.name for f in fields(TestingConfig)}
    assert TestingConfig().TESTING is True
