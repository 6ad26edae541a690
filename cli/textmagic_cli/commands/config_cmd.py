from __future__ import annotations

import typer

from .. import console
from ..config import AppConfig, AuthConfig, config_path, load_config, normalize_base_url, save_config

app = typer.Typer(help="Local CLI configuration.")


@app.command("set")
def set_config(
        username: str = typer.Option(..., "--username", "-u", prompt=True, help="TextMagic username."),
        token: str = typer.Option(..., "--token", "-t", prompt=True, hide_input=True, help="API key."),
        base_url: str | None = typer.Option(None, "--base-url", help="API base URL."),
):
    cfg = load_config()
    new_cfg = AppConfig(
        base_url=normalize_base_url(base_url) or cfg.base_url,
        auth=AuthConfig(username=username.strip(), token=token.strip()),
    )
    path = save_config(new_cfg)
    console.ok(f"Saved credentials to {path}")


@app.command("show")
def show_config(json_out: bool = typer.Option(False, "--json", help="Print raw JSON.")):
    cfg = load_config()
    masked = "*" * 8 if cfg.auth.token else "-"
    data = {"path": config_path(), "base_url": cfg.base_url, "username": cfg.auth.username or "-", "token": masked}
    if json_out:
        console.print_json(data)
        return
    for key, value in data.items():
        console.console.print(f"  {key}: {value}")
