"""Top-level headless wallet client."""

from __future__ import annotations

from headless_cli.config import HeadlessConfig
from headless_cli.custom import CustomApi
from headless_cli.http import AsyncHttpClient
from headless_cli.p2sh import P2shApi
from headless_cli.service import ServiceApi
from headless_cli.wallet import WalletApi


class HeadlessClient:
    """Asynchronous client for the headless wallet HTTP API.

    Usage::

        async with HeadlessClient(HeadlessConfig(host="http://localhost:8000")) as client:
            print(await client.wallet.balance("default"))
    """

    def __init__(self, config: HeadlessConfig | None = None) -> None:
        self.config = config or HeadlessConfig()
        self.http = AsyncHttpClient(self.config)
        self.service = ServiceApi(self.http)
        self.wallet = WalletApi(self.http)
        self.p2sh = P2shApi(self.http)
        self.custom = CustomApi(self.http)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "HeadlessClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
