# core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

from . import __version__

DEFAULT_BASE_URL = "https://lrclib.net"
DEFAULT_USER_AGENT = f"tlyrics/{__version__}"
DEFAULT_TIMEOUT = 15.0


def _parse_timeout(raw: str | None, default: float) -> float:
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT  # seconds, per request; no retries

    def __post_init__(self):
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))

    def request_headers(self) -> dict:
        return {"User-Agent": self.user_agent}

    @staticmethod
    def from_env() -> "ClientConfig":
        """
        Build a config from the environment.

        Env vars:
        - TLYRICS_BASE_URL: LRCLIB instance (default: https://lrclib.net)
        - TLYRICS_USER_AGENT: User-Agent header sent with every request
        - TLYRICS_TIMEOUT: request timeout in seconds (default: 15)
        """
        return ClientConfig(
            base_url=os.getenv("TLYRICS_BASE_URL") or DEFAULT_BASE_URL,
            user_agent=os.getenv("TLYRICS_USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=_parse_timeout(os.getenv("TLYRICS_TIMEOUT"), DEFAULT_TIMEOUT),
        )
