import pytest

from tasteapp import __main__ as cli
from tasteapp import create_app
from tasteapp.config import TestingConfig


def test_print_auth_url(monkeypatch, capsys, config):
    monkeypatch.setattr(cli, "create_app", lambda name: create_app(config=config))
    cli.main(["--print-auth-url"])
    out = capsys.readouterr().out.strip()
    assert out.startswith("https://accounts.spotify.com/authorize?client_id=client-id")


def test_print_auth_url_without_credentials(monkeypatch, capsys):
    monkeypatch.setattr(cli, "create_app", lambda name: create_app(config=TestingConfig()))
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--print-auth-url"])
    assert excinfo.value.code == 1
    assert "SPOTIFY_CLIENT_ID" in capsys.readouterr().err


def test_serves_on_configured_host_and_port(monkeypatch, config):
    app = create_app(config=config)
    calls = {}
    monkeypatch.setattr(cli, "create_app", lambda name: app)
    monkeypatch.setattr(app, "run", lambda **kwargs: calls.update(kwargs))

    cli.main(["--port", "5050"])

    assert calls == {"host": "127.0.0.1", "port": 5050, "debug": False}
