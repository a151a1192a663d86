from __future__ import annotations

import logging
from typing import Mapping

import httpx

from .config_types import ClientConfig
from .errors import ConfigError, NetworkError, error_for_status

logger = logging.getLogger(__name__)

WILDCARD = "*/*"


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": cfg.user_agent,
            "Accept": WILDCARD,
            "Content-Type": WILDCARD,
        }
        auth = httpx.BasicAuth(cfg.user, cfg.password) if cfg.has_credentials else None

        self._client = httpx.Client(
            auth=auth,
            timeout=cfg.timeout_s,
            headers=headers,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, url: str, *, params: Mapping[str, str] | None = None) -> httpx.Response:
        query = {str(k): str(v) for k, v in params.items()} if params else None
        try:
            r = self._client.request(method, url, params=query)
        except httpx.InvalidURL as e:
            raise ConfigError(f"invalid request url {url!r}: {e}", e) from e
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {url} failed: {e}", e) from e

        logger.debug("%s %s -> %s", method, r.request.url, r.status_code)

        if r.status_code >= 400:
            raise error_for_status(r.status_code, details=r.text[:1000] or None)
        return r
