from __future__ import annotations

import pytest

from edevrest_cli import config


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (config.ENV_BASE_URL, config.ENV_USER, config.ENV_PASSWORD):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
