from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "edevrest"
CONFIG_FILENAME = "config.toml"
DEFAULT_TIMEOUT_S = 15.0

ENV_BASE_URL = "EDEVREST_BASE_URL"
ENV_USER = "EDEVREST_USER"
ENV_PASSWORD = "EDEVREST_PASSWORD"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    user: str = ""
    password: str = ""


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        base_url="",
        auth=AuthConfig(),
        timeout_s=DEFAULT_TIMEOUT_S,
    )


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def _parse_timeout(value: Any, fallback: float) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return fallback
    return timeout if timeout > 0 else fallback


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "base_url": cfg.base_url,
        "timeout_s": cfg.timeout_s,
    }
    auth = {k: v for k, v in (("user", cfg.auth.user), ("password", cfg.auth.password)) if v}
    if auth:
        data["auth"] = auth
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    auth_raw = data.get("auth") or {}
    user = ""
    password = ""
    if isinstance(auth_raw, dict):
        user = str(auth_raw.get("user") or "")
        password = str(auth_raw.get("password") or "")
    return AppConfig(
        base_url=normalize_base_url(str(data.get("base_url") or ""), warn=True),
        auth=AuthConfig(user=user, password=password),
        timeout_s=_parse_timeout(data.get("timeout_s"), DEFAULT_TIMEOUT_S),
    )


def _read_toml() -> dict[str, Any] | None:
    try:
        with open(config_path(), "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None


def load_config() -> AppConfig:
    data = _read_toml()
    if data is None:
        return default_config()
    return from_toml(data)


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    data = _read_toml()
    if data is None:
        return cfg

    profiles_raw = data.get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        return cfg
    prof = profiles_raw.get(profile)
    if not isinstance(prof, dict):
        return cfg

    base_url = normalize_base_url(str(prof.get("base_url") or cfg.base_url), warn=True)
    auth_raw = prof.get("auth") if isinstance(prof.get("auth"), dict) else {}
    user = str(prof.get("user") or auth_raw.get("user") or cfg.auth.user)
    password = str(prof.get("password") or auth_raw.get("password") or cfg.auth.password)
    return AppConfig(
        base_url=base_url or cfg.base_url,
        auth=AuthConfig(user=user, password=password),
        timeout_s=_parse_timeout(prof.get("timeout_s"), cfg.timeout_s),
    )


def apply_env(cfg: AppConfig) -> AppConfig:
    base_url = os.getenv(ENV_BASE_URL, "").strip()
    user = os.getenv(ENV_USER)
    password = os.getenv(ENV_PASSWORD)
    return replace(
        cfg,
        base_url=normalize_base_url(base_url, warn=True) if base_url else cfg.base_url,
        auth=AuthConfig(
            user=user if user is not None else cfg.auth.user,
            password=password if password is not None else cfg.auth.password,
        ),
    )


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    # keep profiles written by hand
    existing = _read_toml() or {}
    data = to_toml(cfg)
    if isinstance(existing.get("profiles"), dict):
        data["profiles"] = existing["profiles"]
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(data).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
