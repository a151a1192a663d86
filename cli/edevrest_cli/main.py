from __future__ import annotations

import typer

from .commands import request_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="edevrest",
        help="edevrest: call JSON REST endpoints from the command line.",
        no_args_is_help=True,
    )

    app.command("get")(request_cmd.get)
    app.command("post")(request_cmd.post)
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
