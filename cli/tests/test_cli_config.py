from __future__ import annotations

import os

from edevrest_cli import config


def _write(tmp_path, *lines: str) -> None:
    tmp_path.joinpath("config.toml").write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_config_defaults_when_missing() -> None:
    cfg = config.load_config()
    assert cfg.base_url == ""
    assert cfg.auth.user == ""
    assert cfg.timeout_s == config.DEFAULT_TIMEOUT_S


def test_save_and_load_roundtrip_keeps_profiles(_isolated_config) -> None:
    tmp_path = _isolated_config
    _write(tmp_path, "[profiles.dev]", 'base_url = "http://dev.test"')
    cfg = config.default_config()
    cfg.base_url = "https://api.example.test/v1"
    cfg.auth = config.AuthConfig(user="u", password="p")
    path = config.save_config(cfg)

    assert path.endswith("config.toml")
    assert oct(os.stat(path).st_mode & 0o777) == oct(0o600)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")
    assert "[profiles.dev]" in contents

    loaded = config.load_config()
    assert loaded.base_url == "https://api.example.test/v1"
    assert (loaded.auth.user, loaded.auth.password) == ("u", "p")


def test_save_config_omits_empty_credentials(_isolated_config) -> None:
    cfg = config.default_config()
    cfg.base_url = "https://api.example.test"
    config.save_config(cfg)
    contents = _isolated_config.joinpath("config.toml").read_text(encoding="utf-8")
    assert "[auth]" not in contents


def test_apply_profile_overrides_base_url_and_credentials(_isolated_config) -> None:
    _write(
        _isolated_config,
        'base_url = "http://default.test"',
        "",
        "[auth]",
        'user = "default-user"',
        'password = "default-pass"',
        "",
        "[profiles.prod]",
        'base_url = "prod.example.test/api"',
        'user = "prod-user"',
        "timeout_s = 3",
    )
    cfg = config.load_config()
    prod = config.apply_profile(cfg, "prod")
    assert prod.base_url == "https://prod.example.test/api"
    assert prod.auth.user == "prod-user"
    assert prod.auth.password == "default-pass"
    assert prod.timeout_s == 3.0

    assert config.apply_profile(cfg, "missing") is cfg
    assert config.apply_profile(cfg, None) is cfg


def test_apply_env_overrides(monkeypatch) -> None:
    cfg = config.default_config()
    monkeypatch.setenv(config.ENV_BASE_URL, "http://127.0.0.1:8080/")
    monkeypatch.setenv(config.ENV_USER, "env-user")
    effective = config.apply_env(cfg)
    assert effective.base_url == "http://127.0.0.1:8080"
    assert effective.auth.user == "env-user"
    assert effective.auth.password == ""
    assert cfg.base_url == ""


def test_invalid_timeout_falls_back_to_default(_isolated_config) -> None:
    _write(_isolated_config, 'base_url = "https://a.test"', 'timeout_s = "soon"')
    assert config.load_config().timeout_s == config.DEFAULT_TIMEOUT_S


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("example.com") == "https://example.com"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("localhost:8010/api") == "http://localhost:8010/api"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://example.com/") == "https://example.com"
