from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from .args import convert_args
from .config_types import DEFAULT_USER_AGENT, ClientConfig
from .errors import ArgumentError, ConfigurationError, NetworkError
from .throttle import Throttle

logger = logging.getLogger(__name__)

# Verbs whose arguments travel in the query string vs. a form body.
_QUERY_VERBS = frozenset({"GET", "DELETE"})
_BODY_VERBS = frozenset({"POST", "PUT"})


@dataclass(frozen=True)
class ResponseEnvelope:
    status_code: int
    text: str


def identity_headers(cfg: ClientConfig) -> dict[str, str]:
    return {
        "X-TM-Username": cfg.username or "",
        "X-TM-Key": cfg.token or "",
        "User-Agent": cfg.user_agent or DEFAULT_USER_AGENT,
        "Content-Type": "application/x-www-form-urlencoded",
    }


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self.throttle = Throttle(cfg.min_interval_s)
        self._client = httpx.Client(
            base_url=(cfg.base_url or "").rstrip("/"),
            timeout=cfg.timeout_s,
            headers=identity_headers(cfg),
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def reconfigure(self, cfg: ClientConfig) -> None:
        """Swap in new settings; validity is only checked on the next dispatch."""
        self._cfg = cfg
        self.throttle.min_interval_s = cfg.min_interval_s
        self._apply_config()

    def _apply_config(self) -> None:
        cfg = self._cfg
        self._client.base_url = (cfg.base_url or "").rstrip("/")
        self._client.headers.update(identity_headers(cfg))
        self._client.timeout = httpx.Timeout(cfg.timeout_s)

    def close(self) -> None:
        self._client.close()

    def dispatch(self, method: str, path: str, args: Mapping[str, Any] | None = None) -> ResponseEnvelope:
        verb = method.upper()
        if verb not in _QUERY_VERBS and verb not in _BODY_VERBS:
            raise ArgumentError(f"Unsupported HTTP method: {method}")
        if not path:
            raise ArgumentError("No resource specified")

        wire = convert_args(args) if args else {}

        cfg = self._cfg
        if not cfg.username or not cfg.token or not cfg.base_url:
            raise ConfigurationError("No username/token supplied")
        self._apply_config()
        self.throttle.wait()

        logger.debug("%s %s args=%s", verb, path, sorted(wire))
        try:
            if wire and verb in _BODY_VERBS:
                r = self._client.request(verb, path, data=wire)
            elif wire:
                r = self._client.request(verb, f"{path}?{urlencode(wire)}")
            else:
                r = self._client.request(verb, path)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        logger.debug("%s %s -> %s", verb, path, r.status_code)
        return ResponseEnvelope(status_code=r.status_code, text=r.text)
