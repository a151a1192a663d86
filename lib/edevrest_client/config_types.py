from __future__ import annotations

import dataclasses
import urllib.parse
from dataclasses import dataclass, field
from enum import Enum

from .errors import ConfigError

DEFAULT_USER_AGENT = "edevrest-client/0.1.0"


class UriScheme(str, Enum):
    http = "http"
    https = "https"

    @property
    def default_port(self) -> int:
        return 443 if self is UriScheme.https else 80

    @classmethod
    def parse(cls, value: UriScheme | str) -> UriScheme:
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unsupported scheme: {value!r}") from None


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a RestClient.

    ``port`` of None (or any negative value) means the scheme's default port,
    in which case it is left out of the URL.
    """

    scheme: UriScheme
    host: str
    port: int | None = None
    base_path: str = ""
    user: str | None = None
    password: str | None = field(default=None, repr=False)
    timeout_s: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        try:
            scheme = UriScheme.parse(self.scheme)
        except ValueError as e:
            raise ConfigError(str(e)) from e
        object.__setattr__(self, "scheme", scheme)

        host = (self.host or "").strip()
        if not host:
            raise ConfigError("host is required")
        object.__setattr__(self, "host", host)

        port = self.port
        if port is not None:
            if isinstance(port, bool) or not isinstance(port, int):
                raise ConfigError(f"port must be an integer, got {port!r}")
            if port < 0:
                port = None
            elif port > 65535:
                raise ConfigError(f"port out of range: {port}")
        object.__setattr__(self, "port", port)

        object.__setattr__(self, "base_path", self.base_path or "")

        try:
            timeout_s = float(self.timeout_s)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"timeout_s must be a number, got {self.timeout_s!r}") from e
        if timeout_s <= 0:
            raise ConfigError(f"timeout_s must be positive, got {self.timeout_s!r}")
        object.__setattr__(self, "timeout_s", timeout_s)

    @property
    def has_credentials(self) -> bool:
        return self.user is not None and self.password is not None

    @property
    def base_target(self) -> str:
        host = self.host
        # IPv6 literals
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        target = f"{self.scheme.value}://{host}"
        if self.port is not None:
            target += f":{self.port}"
        return target + self.base_path

    def replace(self, **changes) -> ClientConfig:
        """Return a copy with ``changes`` applied; the copy is validated again."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_url(
            cls,
            url: str,
            *,
            user: str | None = None,
            password: str | None = None,
            **kwargs,
    ) -> ClientConfig:
        text = (url or "").strip()
        if "://" not in text:
            raise ConfigError(f"url must include a scheme: {url!r}")
        parsed = urllib.parse.urlsplit(text)
        try:
            port = parsed.port
        except ValueError as e:
            raise ConfigError(f"invalid port in url: {url!r}") from e
        if user is None and parsed.username is not None:
            user = urllib.parse.unquote(parsed.username)
        if password is None and parsed.password is not None:
            password = urllib.parse.unquote(parsed.password)
        return cls(
            scheme=parsed.scheme,
            host=parsed.hostname or "",
            port=port,
            base_path=parsed.path.rstrip("/"),
            user=user,
            password=password,
            **kwargs,
        )


class ClientConfigBuilder:
    def __init__(self) -> None:
        self._scheme: UriScheme | str | None = None
        self._host: str | None = None
        self._port: int = -1
        self._base_path: str = ""
        self._user: str | None = None
        self._password: str | None = None
        self._timeout_s: float = 15.0

    def set_scheme(self, scheme: UriScheme | str) -> ClientConfigBuilder:
        self._scheme = scheme
        return self

    def set_host(self, host: str) -> ClientConfigBuilder:
        self._host = host
        return self

    def set_port(self, port: int) -> ClientConfigBuilder:
        self._port = port
        return self

    def set_base_path(self, base_path: str) -> ClientConfigBuilder:
        self._base_path = base_path
        return self

    def set_user(self, user: str | None) -> ClientConfigBuilder:
        self._user = user
        return self

    def set_password(self, password: str | None) -> ClientConfigBuilder:
        self._password = password
        return self

    def set_timeout(self, timeout_s: float) -> ClientConfigBuilder:
        self._timeout_s = timeout_s
        return self

    def build(self) -> ClientConfig:
        if self._scheme is None:
            raise ConfigError("scheme is required")
        return ClientConfig(
            scheme=self._scheme,
            host=self._host or "",
            port=self._port,
            base_path=self._base_path,
            user=self._user,
            password=self._password,
            timeout_s=self._timeout_s,
        )
