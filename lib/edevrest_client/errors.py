from __future__ import annotations

from enum import Enum


class RestClientError(Exception):
    """Base client error."""

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        super().__init__(*([message] if message is not None else []))
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ConfigError(RestClientError, ValueError):
    """Invalid client configuration."""


class NetworkError(RestClientError):
    """Transport/network layer error."""


class DecodeError(RestClientError, ValueError):
    """Response body could not be decoded into the requested type."""


class ResponseErrorKind(Enum):
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"

    @classmethod
    def for_status(cls, status_code: int) -> ResponseErrorKind:
        if status_code == 401:
            return cls.UNAUTHORIZED
        if status_code == 404:
            return cls.NOT_FOUND
        return cls.UNKNOWN


class ResponseError(RestClientError):
    kind: ResponseErrorKind = ResponseErrorKind.UNKNOWN
    default_message = "Unknown error."

    def __init__(
            self,
            message: str | None = None,
            cause: BaseException | None = None,
            *,
            status_code: int | None = None,
            details: str | None = None,
    ):
        super().__init__(message if message is not None else self.default_message, cause)
        self.status_code = status_code
        self.details = details


class UnauthorizedError(ResponseError):
    kind = ResponseErrorKind.UNAUTHORIZED
    default_message = "Invalid user name or password"


class NotFoundError(ResponseError):
    kind = ResponseErrorKind.NOT_FOUND
    default_message = "Resource is not found."


class UnknownResponseError(ResponseError):
    kind = ResponseErrorKind.UNKNOWN


_ERROR_BY_KIND: dict[ResponseErrorKind, type[ResponseError]] = {
    ResponseErrorKind.UNAUTHORIZED: UnauthorizedError,
    ResponseErrorKind.NOT_FOUND: NotFoundError,
    ResponseErrorKind.UNKNOWN: UnknownResponseError,
}


def error_for_status(
        status_code: int,
        message: str | None = None,
        *,
        details: str | None = None,
        cause: BaseException | None = None,
) -> ResponseError:
    cls = _ERROR_BY_KIND[ResponseErrorKind.for_status(status_code)]
    return cls(message, cause, status_code=status_code, details=details)
