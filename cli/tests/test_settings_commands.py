from __future__ import annotations

import pytest
from typer.testing import CliRunner

from edevrest_cli import config, main
from edevrest_cli.params import parse_params


def test_settings_set_and_show() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main.app,
        ["settings", "set", "--base-url", "api.example.test/v1", "--user", "bob", "--password", "pw"],
    )
    assert result.exit_code == 0, result.output

    cfg = config.load_config()
    assert cfg.base_url == "https://api.example.test/v1"
    assert cfg.auth.user == "bob"

    shown = runner.invoke(main.app, ["settings", "show"])
    assert shown.exit_code == 0
    assert "user=bob" in shown.output
    assert "password=(set)" in shown.output
    assert "=pw" not in shown.output


def test_settings_set_rejects_non_positive_timeout() -> None:
    result = CliRunner().invoke(main.app, ["settings", "set", "--timeout", "0"])
    assert result.exit_code == 2


def test_settings_reset() -> None:
    runner = CliRunner()
    runner.invoke(main.app, ["settings", "set", "--base-url", "https://a.test"])
    result = runner.invoke(main.app, ["settings", "reset", "--yes"])
    assert result.exit_code == 0
    assert config.load_config().base_url == ""


def test_parse_params() -> None:
    assert parse_params(["a=1", "b=x=y", "c=", "a=2"]) == {"a": "2", "b": "x=y", "c": ""}
    assert parse_params(None) == {}
    with pytest.raises(ValueError):
        parse_params(["novalue"])
    with pytest.raises(ValueError):
        parse_params(["=1"])
