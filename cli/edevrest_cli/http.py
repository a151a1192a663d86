from __future__ import annotations

from edevrest_client import RestClient
from edevrest_client.config_types import ClientConfig
from edevrest_client.errors import ConfigError

from .config import AppConfig, apply_env, apply_profile, normalize_base_url


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    base_url_override: str | None,
    user: str | None = None,
    password: str | None = None,
) -> RestClient:
    effective_cfg = apply_env(apply_profile(cfg, profile))
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url, warn=True)
    if not base_url:
        raise ConfigError("base_url is not configured. Run `edevrest settings set --base-url ...` first.")

    user = user if user is not None else (effective_cfg.auth.user or None)
    password = password if password is not None else (effective_cfg.auth.password or None)
    return RestClient(
        ClientConfig.from_url(
            base_url,
            user=user,
            password=password,
            timeout_s=effective_cfg.timeout_s,
        )
    )
