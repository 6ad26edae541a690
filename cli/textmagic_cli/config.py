from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from textmagic_client.config_types import DEFAULT_BASE_URL

from . import console

APP_NAME = "textmagic"
CONFIG_FILENAME = "config.toml"
ENV_USERNAME = "TEXTMAGIC_USERNAME"
ENV_TOKEN = "TEXTMAGIC_TOKEN"
ENV_BASE_URL = "TEXTMAGIC_BASE_URL"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    username: str = ""
    token: str = ""


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url=DEFAULT_BASE_URL, auth=AuthConfig())


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "auth": {
            "username": cfg.auth.username,
            "token": cfg.auth.token,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    auth_raw = data.get("auth") or {}
    username = ""
    token = ""
    if isinstance(auth_raw, dict):
        username = str(auth_raw.get("username") or "")
        token = str(auth_raw.get("token") or "")
    return AppConfig(
        base_url=base_url or DEFAULT_BASE_URL,
        auth=AuthConfig(username=username, token=token),
    )


def apply_env(cfg: AppConfig) -> AppConfig:
    """Environment variables win over the config file."""
    username = os.getenv(ENV_USERNAME, "").strip()
    token = os.getenv(ENV_TOKEN, "").strip()
    base_url = normalize_base_url(os.getenv(ENV_BASE_URL, ""))
    return AppConfig(
        base_url=base_url or cfg.base_url,
        auth=AuthConfig(
            username=username or cfg.auth.username,
            token=token or cfg.auth.token,
        ),
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    return apply_env(cfg)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
