from __future__ import annotations

from typing import Any

import typer

from edevrest_client.errors import (
    ConfigError,
    DecodeError,
    NetworkError,
    NotFoundError,
    ResponseError,
    RestClientError,
    UnauthorizedError,
)

from .. import console
from ..config import load_config
from ..http import make_client
from ..params import parse_params

EXIT_USAGE = 2
EXIT_UNAUTHORIZED = 3
EXIT_NOT_FOUND = 4
EXIT_HTTP_ERROR = 5
EXIT_NETWORK = 6
EXIT_DECODE = 7


def exit_code_for(exc: RestClientError) -> int:
    if isinstance(exc, ConfigError):
        return EXIT_USAGE
    if isinstance(exc, UnauthorizedError):
        return EXIT_UNAUTHORIZED
    if isinstance(exc, NotFoundError):
        return EXIT_NOT_FOUND
    if isinstance(exc, ResponseError):
        return EXIT_HTTP_ERROR
    if isinstance(exc, NetworkError):
        return EXIT_NETWORK
    if isinstance(exc, DecodeError):
        return EXIT_DECODE
    return 1


def _describe(exc: RestClientError) -> str:
    msg = str(exc) or type(exc).__name__
    if isinstance(exc, ResponseError) and exc.status_code is not None:
        msg = f"{msg} (HTTP {exc.status_code})"
    return msg


def _run(
        method: str,
        path: str,
        params: list[str] | None,
        profile: str | None,
        base_url: str | None,
        user: str | None,
        password: str | None,
) -> None:
    try:
        query = parse_params(params)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=EXIT_USAGE)

    try:
        client = make_client(
            load_config(),
            profile=profile,
            base_url_override=base_url,
            user=user,
            password=password,
        )
    except ConfigError as e:
        console.err(str(e))
        raise typer.Exit(code=EXIT_USAGE)

    try:
        if method == "POST":
            data = client.post(Any, path, query)
        else:
            data = client.get(Any, path, query)
    except RestClientError as e:
        console.err(_describe(e))
        raise typer.Exit(code=exit_code_for(e))
    finally:
        client.close()

    console.print_json(data)


_PARAM_HELP = "Query parameter as key=value (repeatable)."


def get(
        path: str = typer.Argument(..., help="Request path appended to the base URL, e.g. /posts/1."),
        params: list[str] | None = typer.Option(None, "-p", "--param", help=_PARAM_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Profile from config.toml."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        user: str | None = typer.Option(None, "--user", help="Basic auth user."),
        password: str | None = typer.Option(None, "--password", help="Basic auth password."),
) -> None:
    """Send a GET request and print the JSON response."""
    _run("GET", path, params, profile, base_url, user, password)


def post(
        path: str = typer.Argument(..., help="Request path appended to the base URL."),
        params: list[str] | None = typer.Option(None, "-p", "--param", help=_PARAM_HELP),
        profile: str | None = typer.Option(None, "--profile", help="Profile from config.toml."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        user: str | None = typer.Option(None, "--user", help="Basic auth user."),
        password: str | None = typer.Option(None, "--password", help="Basic auth password."),
) -> None:
    """Send a POST request (no body) and print the JSON response."""
    _run("POST", path, params, profile, base_url, user, password)
