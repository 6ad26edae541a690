from __future__ import annotations
from dataclasses import dataclass

from .version import __version__

DEFAULT_BASE_URL = "https://rest.textmagic.com/api/v2"
DEFAULT_USER_AGENT = f"textmagic-rest-python/{__version__}"


@dataclass(frozen=True)
class ClientConfig:
    username: str
    token: str
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_s: float = 30.0
    min_interval_s: float = 0.5
