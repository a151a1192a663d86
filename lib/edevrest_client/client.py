from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar, overload

import httpx

from .config_types import ClientConfig, ClientConfigBuilder
from .decoding import decode
from .transport import Transport

T = TypeVar("T")

Params = Mapping[str, str]


class RestClient:
    """Thin JSON REST client bound to one base target.

    Configuration is fixed at construction; build a new client to change it.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._t = Transport(cfg, transport=transport)

    @staticmethod
    def builder() -> RestClientBuilder:
        return RestClientBuilder()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def base_target(self) -> str:
        return self._cfg.base_target

    def url_for(self, path: str) -> str:
        return self._cfg.base_target + (path or "")

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @overload
    def get(self, target: type[T], path: str, params: Params | None = None) -> T: ...

    @overload
    def get(self, target: Callable[[Any], T], path: str, params: Params | None = None) -> T: ...

    def get(self, target, path, params=None):
        return self._request_object("GET", target, path, params)

    @overload
    def post(self, target: type[T], path: str, params: Params | None = None) -> T: ...

    @overload
    def post(self, target: Callable[[Any], T], path: str, params: Params | None = None) -> T: ...

    def post(self, target, path, params=None):
        return self._request_object("POST", target, path, params)

    def _request_object(self, method: str, target, path: str, params: Params | None):
        r = self._t.request(method, self.url_for(path), params=params)
        return decode(target, r.text)


class RestClientBuilder(ClientConfigBuilder):
    def build_client(self, *, transport: httpx.BaseTransport | None = None) -> RestClient:
        return RestClient(self.build(), transport=transport)
