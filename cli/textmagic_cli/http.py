from __future__ import annotations

import typer
from textmagic_client import ClientConfig, ConfigurationError, TextmagicClient

from . import console
from .config import AppConfig, normalize_base_url


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> TextmagicClient:
    base_url = normalize_base_url(base_url_override or cfg.base_url, warn=True)
    try:
        return TextmagicClient(
            ClientConfig(
                username=cfg.auth.username,
                token=cfg.auth.token,
                base_url=base_url,
            )
        )
    except ConfigurationError as e:
        console.err(f"{e}. Run 'textmagic config set' or export TEXTMAGIC_USERNAME / TEXTMAGIC_TOKEN.")
        raise typer.Exit(code=2)
