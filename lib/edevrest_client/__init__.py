from .client import RestClient, RestClientBuilder
from .config_types import ClientConfig, ClientConfigBuilder, UriScheme
from .decoding import decode
from .errors import (
    ConfigError,
    DecodeError,
    NetworkError,
    NotFoundError,
    ResponseError,
    ResponseErrorKind,
    RestClientError,
    UnauthorizedError,
    UnknownResponseError,
)

__all__ = [
    "RestClient",
    "RestClientBuilder",
    "ClientConfig",
    "ClientConfigBuilder",
    "UriScheme",
    "decode",
    "RestClientError",
    "ConfigError",
    "NetworkError",
    "DecodeError",
    "ResponseError",
    "ResponseErrorKind",
    "UnauthorizedError",
    "NotFoundError",
    "UnknownResponseError",
]
