"""Connection settings shared by every command."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HOST = "http://localhost:8000"
DEFAULT_WALLET_ID = "default"

CONNECT_TIMEOUT = 10.0
USER_AGENT = "headless cli"
WALLET_ID_HEADER = "X-Wallet-Id"

HOST_ENV_VAR = "HEADLESS_HOST"
DEBUG_ENV_VAR = "HEADLESS_DEBUG"


@dataclass(frozen=True)
class HeadlessConfig:
    """Where the headless wallet service lives and whether to trace the traffic."""

    host: str = DEFAULT_HOST
    debug: bool = False
