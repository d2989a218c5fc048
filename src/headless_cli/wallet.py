"""Wallet API — status, addresses, history, sends, custom tokens, utxos."""

from __future__ import annotations

from collections.abc import Sequence

from headless_cli.http import AsyncHttpClient
from headless_cli.values import Payload


class WalletApi:
    """Calls on a started wallet, scoped by the ``X-Wallet-Id`` header."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    # -- Status & Balance ----------------------------------------------------

    async def status(self, wallet_id: str) -> str:
        return await self._http.get("/wallet/status", wallet_id=wallet_id)

    async def balance(self, wallet_id: str, *, token: str | None = None) -> str:
        """Get the balance of *token* (the native token by default)."""
        return await self._http.get("/wallet/balance", {"token": token}, wallet_id=wallet_id)

    async def stop(self, wallet_id: str) -> str:
        return await self._http.post("/wallet/stop", wallet_id=wallet_id)

    # -- Addresses -----------------------------------------------------------

    async def address(
        self,
        wallet_id: str,
        *,
        index: int | None = None,
        mark_as_used: bool | None = None,
    ) -> str:
        """Get the current address, or the one at *index*."""
        params = {"index": index, "mark_as_used": mark_as_used}
        return await self._http.get("/wallet/address", params, wallet_id=wallet_id)

    async def address_info(self, wallet_id: str, address: str, *, token: str | None = None) -> str:
        params = {"address": address, "token": token}
        return await self._http.get("/wallet/address-info", params, wallet_id=wallet_id)

    async def address_index(self, wallet_id: str, address: str) -> str:
        return await self._http.get("/wallet/address-index", {"address": address}, wallet_id=wallet_id)

    async def addresses(self, wallet_id: str) -> str:
        return await self._http.get("/wallet/addresses", wallet_id=wallet_id)

    # -- Transactions --------------------------------------------------------

    async def tx_history(self, wallet_id: str, *, limit: int | None = None) -> str:
        return await self._http.get("/wallet/tx-history", {"limit": limit}, wallet_id=wallet_id)

    async def transaction(self, wallet_id: str, tx_id: str) -> str:
        """Get a transaction, if it belongs to the wallet."""
        return await self._http.get("/wallet/transaction", {"id": tx_id}, wallet_id=wallet_id)

    async def tx_confirmation_blocks(self, wallet_id: str, tx_id: str) -> str:
        """Number of blocks confirming a transaction."""
        return await self._http.get("/wallet/tx-confirmation-blocks", {"id": tx_id}, wallet_id=wallet_id)

    async def decode(
        self,
        wallet_id: str,
        *,
        tx_hex: str | None = None,
        partial_tx: str | None = None,
    ) -> str:
        body = Payload().put_optional("txHex", tx_hex).put_optional("partial_tx", partial_tx)
        return await self._http.post("/wallet/decode", body, wallet_id=wallet_id)

    async def simple_send(
        self,
        wallet_id: str,
        address: str,
        value: int,
        *,
        change_address: str | None = None,
        token: str | None = None,
    ) -> str:
        """Send *value* of a single token to one address."""
        body = Payload()
        body.put("address", address)
        body.put("value", value)
        body.put_optional("change_address", change_address)
        body.put_optional("token", token)
        return await self._http.post("/wallet/simple-send-tx", body, wallet_id=wallet_id)

    async def send(self, wallet_id: str, body: str) -> str:
        """Send a transaction described by an already serialized JSON *body*.

        The body is forwarded as is; the service validates it.
        """
        return await self._http.post_raw("/wallet/send-tx", body, wallet_id=wallet_id)

    # -- Custom tokens -------------------------------------------------------

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
        data: Sequence[str] | None = None,
    ) -> str:
        body = Payload()
        body.put("name", name)
        body.put("symbol", symbol)
        body.put("amount", amount)
        _put_token_options(
            body,
            address=address,
            change_address=change_address,
            create_mint=create_mint,
            mint_authority_address=mint_authority_address,
            allow_external_mint_authority_address=allow_external_mint_authority_address,
            create_melt=create_melt,
            melt_authority_address=melt_authority_address,
            allow_external_melt_authority_address=allow_external_melt_authority_address,
        )
        body.put_optional("data", data)
        return await self._http.post("/wallet/create-token", body, wallet_id=wallet_id)

    async def create_nft(
        self,
        wallet_id: str,
        name: str,
        symbol: str,
        amount: int,
        data: str,
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
        """Create an NFT; *data* is the text stored in its data output."""
        body = Payload()
        body.put("name", name)
        body.put("symbol", symbol)
        body.put("data", data)
        body.put("amount", amount)
        _put_token_options(
            body,
            address=address,
            change_address=change_address,
            create_mint=create_mint,
            mint_authority_address=mint_authority_address,
            allow_external_mint_authority_address=allow_external_mint_authority_address,
            create_melt=create_melt,
            melt_authority_address=melt_authority_address,
            allow_external_melt_authority_address=allow_external_melt_authority_address,
        )
        return await self._http.post("/wallet/create-nft", body, wallet_id=wallet_id)

    async def mint_tokens(
        self,
        wallet_id: str,
        token: str,
        amount: int,
        *,
        address: str | None = None,
        change_address: str | None = None,
        mint_authority_address: str | None = None,
        allow_external_mint_authority_address: bool | None = None,
        unshift_data: bool | None = None,
        data: Sequence[str] | None = None,
    ) -> str:
        body = Payload()
        body.put("token", token)
        body.put("amount", amount)
        body.put_optional("address", address)
        body.put_optional("change_address", change_address)
        body.put_optional("mint_authority_address", mint_authority_address)
        body.put_optional("allow_external_mint_authority_address", allow_external_mint_authority_address)
        body.put_optional("unshift_data", unshift_data)
        body.put_optional("data", data)
        return await self._http.post("/wallet/mint-tokens", body, wallet_id=wallet_id)

    async def melt_tokens(
        self,
        wallet_id: str,
        token: str,
        amount: int,
        *,
        address: str | None = None,
        deposit_address: str | None = None,
        change_address: str | None = None,
        melt_authority_address: str | None = None,
        allow_external_melt_authority_address: bool | None = None,
        unshift_data: bool | None = None,
        data: Sequence[str] | None = None,
    ) -> str:
        body = Payload()
        body.put("token", token)
        body.put("amount", amount)
        body.put_optional("address", address)
        body.put_optional("deposit_address", deposit_address)
        body.put_optional("change_address", change_address)
        body.put_optional("melt_authority_address", melt_authority_address)
        body.put_optional("allow_external_melt_authority_address", allow_external_melt_authority_address)
        # the service reads this one in camelCase on melt, unlike mint
        body.put_optional("unshiftData", unshift_data)
        body.put_optional("data", data)
        return await self._http.post("/wallet/melt-tokens", body, wallet_id=wallet_id)

    # -- UTXOs ---------------------------------------------------------------

    async def utxo_filter(
        self,
        wallet_id: str,
        *,
        max_utxos: int | None = None,
        token: str | None = None,
        filter_address: str | None = None,
        amount_smaller_than: int | None = None,
        amount_bigger_than: int | None = None,
        maximum_amount: int | None = None,
        only_available_utxos: bool | None = None,
    ) -> str:
        """List the utxos matching every given filter."""
        body = _utxo_filters(
            max_utxos=max_utxos,
            token=token,
            filter_address=filter_address,
            amount_smaller_than=amount_smaller_than,
            amount_bigger_than=amount_bigger_than,
            maximum_amount=maximum_amount,
        )
        body.put_optional("only_available_utxos", only_available_utxos)
        return await self._http.post("/wallet/utxo-filter", body, wallet_id=wallet_id)

    async def utxo_consolidation(
        self,
        wallet_id: str,
        *,
        destination_address: str | None = None,
        max_utxos: int | None = None,
        token: str | None = None,
        filter_address: str | None = None,
        amount_smaller_than: int | None = None,
        amount_bigger_than: int | None = None,
        maximum_amount: int | None = None,
    ) -> str:
        """Merge the utxos matching every given filter into one output."""
        body = Payload().put_optional("destination_address", destination_address)
        body.update(
            _utxo_filters(
                max_utxos=max_utxos,
                token=token,
                filter_address=filter_address,
                amount_smaller_than=amount_smaller_than,
                amount_bigger_than=amount_bigger_than,
                maximum_amount=maximum_amount,
            )
        )
        return await self._http.post("/wallet/utxo-consolidation", body, wallet_id=wallet_id)


def _put_token_options(
    body: Payload,
    *,
    address: str | None,
    change_address: str | None,
    create_mint: bool | None,
    mint_authority_address: str | None,
    allow_external_mint_authority_address: bool | None,
    create_melt: bool | None,
    melt_authority_address: str | None,
    allow_external_melt_authority_address: bool | None,
) -> None:
    body.put_optional("address", address)
    body.put_optional("change_address", change_address)
    body.put_optional("create_mint", create_mint)
    body.put_optional("mint_authority_address", mint_authority_address)
    body.put_optional("allow_external_mint_authority_address", allow_external_mint_authority_address)
    body.put_optional("create_melt", create_melt)
    body.put_optional("melt_authority_address", melt_authority_address)
    body.put_optional("allow_external_melt_authority_address", allow_external_melt_authority_address)


def _utxo_filters(
    *,
    max_utxos: int | None,
    token: str | None,
    filter_address: str | None,
    amount_smaller_than: int | None,
    amount_bigger_than: int | None,
    maximum_amount: int | None,
) -> Payload:
    body = Payload()
    body.put_optional("max_utxos", max_utxos)
    body.put_optional("token", token)
    body.put_optional("filter_address", filter_address)
    body.put_optional("amount_smaller_than", amount_smaller_than)
    body.put_optional("amount_bigger_than", amount_bigger_than)
    body.put_optional("maximum_amount", maximum_amount)
    return body
