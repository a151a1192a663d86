from __future__ import annotations

import pytest

from edevrest_cli import config
from edevrest_cli.http import make_client
from edevrest_client.errors import ConfigError


class _FakeClient:
    def __init__(self, client_cfg):
        self.cfg = client_cfg


def test_make_client_uses_profile_config(_isolated_config, monkeypatch) -> None:
    _isolated_config.joinpath("config.toml").write_text(
        '\n'.join(
            [
                'base_url = "http://default.test"',
                "",
                "[profiles.prod]",
                'base_url = "https://prod.test:8443/api"',
                'user = "prod-user"',
                'password = "prod-pass"',
                "",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setattr("edevrest_cli.http.RestClient", _FakeClient)

    client = make_client(config.load_config(), profile="prod", base_url_override=None)

    assert client.cfg.base_target == "https://prod.test:8443/api"
    assert client.cfg.user == "prod-user"
    assert client.cfg.password == "prod-pass"


def test_make_client_normalizes_base_url_override(monkeypatch) -> None:
    monkeypatch.setattr("edevrest_cli.http.RestClient", _FakeClient)

    client = make_client(config.default_config(), profile=None, base_url_override="example.com/")

    assert client.cfg.base_target == "https://example.com"
    assert not client.cfg.has_credentials


def test_make_client_explicit_credentials_win(monkeypatch) -> None:
    monkeypatch.setattr("edevrest_cli.http.RestClient", _FakeClient)
    monkeypatch.setenv(config.ENV_USER, "env-user")
    monkeypatch.setenv(config.ENV_PASSWORD, "env-pass")
    cfg = config.default_config()

    client = make_client(cfg, profile=None, base_url_override="https://a.test", user="cli-user")

    assert client.cfg.user == "cli-user"
    assert client.cfg.password == "env-pass"


def test_make_client_requires_base_url() -> None:
    with pytest.raises(ConfigError):
        make_client(config.default_config(), profile=None, base_url_override=None)
