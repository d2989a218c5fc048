"""Service API — start wallets, multisig pubkey, configuration string."""

from __future__ import annotations

from headless_cli.config import DEFAULT_WALLET_ID
from headless_cli.http import AsyncHttpClient
from headless_cli.values import Payload


class ServiceApi:
    """Calls that are not scoped to an already started wallet."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def start(
        self,
        *,
        wallet_id: str = DEFAULT_WALLET_ID,
        seed_key: str = "default",
        passphrase: str | None = None,
        scan_policy: str | None = None,
        gap_limit: int | None = None,
        policy_start_index: int | None = None,
        policy_end_index: int | None = None,
        history_sync_mode: str | None = None,
    ) -> str:
        """Start a wallet from one of the seeds configured on the service."""
        body = Payload()
        body.put("seedKey", seed_key)
        body.put("wallet-id", wallet_id)
        body.put_optional("passphrase", passphrase)
        body.put_optional("scanPolicy", scan_policy)
        body.put_optional("gapLimit", gap_limit)
        body.put_optional("policyStartIndex", policy_start_index)
        body.put_optional("policyEndIndex", policy_end_index)
        body.put_optional("historySyncMode", history_sync_mode)
        return await self._http.post("/start", body)

    async def hsm_start(self, hsm_key: str, *, wallet_id: str = DEFAULT_WALLET_ID) -> str:
        """Start a wallet whose keys live in an HSM."""
        body = Payload().put("hsm-key", hsm_key).put("wallet-id", wallet_id)
        return await self._http.post("/hsm/start", body)

    async def fireblocks_start(self, xpub: str, *, wallet_id: str = DEFAULT_WALLET_ID) -> str:
        """Start a Fireblocks-backed wallet from its xpub."""
        body = Payload().put("xpub", xpub).put("wallet-id", wallet_id)
        return await self._http.post("/fireblocks/start", body)

    async def multisig_pubkey(self, seed_key: str, *, passphrase: str | None = None) -> str:
        """Get the multisig xpubkey of a configured seed."""
        body = Payload().put("seedKey", seed_key).put_optional("passphrase", passphrase)
        return await self._http.post("/multisig-pubkey", body)

    async def configuration_string(self, token: str) -> str:
        """Get the configuration string of a token."""
        return await self._http.get("/configuration-string", {"token": token})
