from __future__ import annotations

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (config.toml in the user config dir).")


@app.command("show")
def show_settings():
    cfg = load_config()
    password_state = "(set)" if cfg.auth.password else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url or '(empty)'} user={cfg.auth.user or '(empty)'} "
        f"password={password_state} timeout_s={cfg.timeout_s}",
        markup=False,
    )


@app.command("path")
def show_path():
    console.console.print(config_path(), markup=False)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set base URL like https://api.example.com/v1."),
        user: str | None = typer.Option(None, "--user", help="Set Basic auth user (empty string clears it)."),
        password: str | None = typer.Option(None, "--password", help="Set Basic auth password (empty string clears it)."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if user is not None:
        cfg.auth.user = user.strip()
    if password is not None:
        cfg.auth.password = password
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")


@app.command("reset")
def reset_settings(
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
):
    if not yes and not typer.confirm("Reset settings to defaults?"):
        raise typer.Exit(code=1)
    saved = save_config(default_config())
    console.ok(f"Settings reset: {saved}")
