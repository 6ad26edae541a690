from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from textmagic_client import ClientConfig, TextmagicClient

API_PREFIX = "/api/v2"


class RecordingApi:
    """Queue of canned responses served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[tuple[int, str]] = []

    def reply(self, status_code: int, payload=None, *, text: str | None = None) -> None:
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self._responses.append((status_code, text))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, text = self._responses.pop(0) if self._responses else (200, "{}")
        return httpx.Response(status_code, text=text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return self.last.url.path.removeprefix(API_PREFIX)

    @property
    def last_query(self) -> dict[str, str]:
        return dict(self.last.url.params)

    @property
    def last_form(self) -> dict[str, str]:
        parsed = parse_qs(self.last.content.decode("utf-8"), keep_blank_values=True)
        return {key: values[-1] for key, values in parsed.items()}


@pytest.fixture
def api() -> RecordingApi:
    return RecordingApi()


@pytest.fixture
def client(api: RecordingApi):
    cfg = ClientConfig(username="demo", token="secret-token", min_interval_s=0)
    c = TextmagicClient(cfg, transport=httpx.MockTransport(api.handler))
    yield c
    c.close()
