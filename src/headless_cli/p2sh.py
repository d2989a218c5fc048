"""P2SH API — multisig transaction proposals and signature collection.

A multisig wallet cannot push a transaction alone: one participant builds a
proposal (``txHex``), every signer extracts its signatures from it with
``get_my_signatures``, and those signatures are handed back to ``sign`` or
``sign_and_push``. This module only forwards the proposal and signatures.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from headless_cli.http import AsyncHttpClient
from headless_cli.values import Payload

TX_PROPOSAL = "/wallet/p2sh/tx-proposal"


class P2shApi:
    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def tx_proposal(
        self,
        wallet_id: str,
        outputs: Sequence[Mapping[str, Any]],
        *,
        inputs: Sequence[Mapping[str, Any]] | None = None,
        change_address: str | None = None,
    ) -> str:
        """Build an unsigned transaction.

        *outputs* are ``{"address", "value"[, "token"]}`` mappings, *inputs*
        ``{"hash", "index"}`` mappings.
        """
        body = Payload()
        body.put("outputs", list(outputs))
        body.put_optional("inputs", list(inputs) if inputs is not None else None)
        body.put_optional("change_address", change_address)
        return await self._http.post(TX_PROPOSAL, body, wallet_id=wallet_id)

    async def create_token(
        self,
        wallet_id: str,
        name: str,
        symbol: str,
        amount: int,
        *,
        address: str | None = None,
        change_address: str | None = None,
        create_mint: bool | None = None,
        mint_authority_address: str | None = None,
        allow_external_mint_authority_address: bool | None = None,
        create_melt: bool | None = None,
        melt_authority_address: str | None = None,
        allow_external_melt_authority_address: bool | None = None,
    ) -> str:
        body = Payload()
        body.put("name", name)
        body.put("symbol", symbol)
        body.put("amount", amount)
        body.put_optional("address", address)
        body.put_optional("change_address", change_address)
        body.put_optional("create_mint", create_mint)
        body.put_optional("mint_authority_address", mint_authority_address)
        body.put_optional("allow_external_mint_authority_address", allow_external_mint_authority_address)
        body.put_optional("create_melt", create_melt)
        body.put_optional("melt_authority_address", melt_authority_address)
        body.put_optional("allow_external_melt_authority_address", allow_external_melt_authority_address)
        return await self._http.post(f"{TX_PROPOSAL}/create-token", body, wallet_id=wallet_id)

    async def mint_tokens(
        self,
        wallet_id: str,
        token: str,
        amount: int,
        *,
        address: str | None = None,
        change_address: str | None = None,
        create_mint: bool | None = None,
        mint_authority_address: str | None = None,
        allow_external_mint_authority_address: bool | None = None,
    ) -> str:
        body = Payload()
        body.put("token", token)
        body.put("amount", amount)
        body.put_optional("address", address)
        body.put_optional("change_address", change_address)
        body.put_optional("create_mint", create_mint)
        body.put_optional("mint_authority_address", mint_authority_address)
        body.put_optional("allow_external_mint_authority_address", allow_external_mint_authority_address)
        return await self._http.post(f"{TX_PROPOSAL}/mint-tokens", body, wallet_id=wallet_id)

    async def melt_tokens(
        self,
        wallet_id: str,
        token: str,
        amount: int,
        *,
        change_address: str | None = None,
        deposit_address: str | None = None,
        create_melt: bool | None = None,
        melt_authority_address: str | None = None,
        allow_external_melt_authority_address: bool | None = None,
    ) -> str:
        body = Payload()
        body.put("token", token)
        body.put("amount", amount)
        body.put_optional("change_address", change_address)
        body.put_optional("deposit_address", deposit_address)
        body.put_optional("create_melt", create_melt)
        body.put_optional("melt_authority_address", melt_authority_address)
        body.put_optional("allow_external_melt_authority_address", allow_external_melt_authority_address)
        return await self._http.post(f"{TX_PROPOSAL}/melt-tokens", body, wallet_id=wallet_id)

    async def get_my_signatures(self, wallet_id: str, tx_hex: str) -> str:
        """Signatures this wallet contributes to the proposal."""
        body = Payload().put("txHex", tx_hex)
        return await self._http.post(f"{TX_PROPOSAL}/get-my-signatures", body, wallet_id=wallet_id)

    async def sign(self, wallet_id: str, tx_hex: str, signatures: Sequence[str]) -> str:
        """Assemble the signed transaction without pushing it."""
        body = Payload().put("txHex", tx_hex).put("signatures", list(signatures))
        return await self._http.post(f"{TX_PROPOSAL}/sign", body, wallet_id=wallet_id)

    async def sign_and_push(self, wallet_id: str, tx_hex: str, signatures: Sequence[str]) -> str:
        body = Payload().put("txHex", tx_hex).put("signatures", list(signatures))
        return await self._http.post(f"{TX_PROPOSAL}/sign-and-push", body, wallet_id=wallet_id)
