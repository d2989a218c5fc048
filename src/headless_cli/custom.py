"""Custom commands — built on top of the service API instead of mapping to one call."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from headless_cli.config import WALLET_ID_HEADER
from headless_cli.exceptions import HeadlessDecodeError
from headless_cli.http import AsyncHttpClient, build_headless_url
from headless_cli.types import AddressesResponse, AddressInfoResponse, HistoryTx

log = logging.getLogger(__name__)

_history_adapter = TypeAdapter(list[HistoryTx])


def _decode(adapter: TypeAdapter[Any], data: Any, what: str) -> Any:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise HeadlessDecodeError(f"unexpected {what} response: {exc}", details=data) from exc


def reconcile_tokens(history: Iterable[HistoryTx], addresses: Iterable[str]) -> set[str]:
    """Tokens seen on any input or output paying to, or spending from, one of *addresses*.

    Entries whose script the service could not decode carry no address and
    never count as ours.
    """
    owned = set(addresses)
    tokens: set[str] = set()
    if not owned:
        return tokens
    for tx in history:
        for entry in [*tx.outputs, *tx.inputs]:
            address = entry.decoded.address
            if address is not None and address in owned:
                tokens.add(entry.token)
    return tokens


def curl_command(
    host: str,
    path: str,
    *,
    wallet_id: str,
    post: bool = False,
    data: bool = False,
) -> str:
    """The curl invocation equivalent to calling *path* on the service.

    Nothing is sent; this only formats text. With *post* and *data* an empty
    JSON body placeholder and its content type are added.
    """
    url = build_headless_url(host, path)
    method = ""
    if post:
        method = " -X POST -d '{}'" if data else " -X POST"
    headers = [(WALLET_ID_HEADER, wallet_id)]
    if post and data:
        headers.append(("Content-Type", "application/json"))
    rendered = " ".join(f'-H "{name}: {value}"' for name, value in headers)
    return f"curl{method} {rendered} {url}"


class CustomApi:
    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_history(self, wallet_id: str) -> list[HistoryTx]:
        """The whole transaction history of the wallet, decoded."""
        data = await self._http.get_json("/wallet/tx-history", wallet_id=wallet_id)
        return _decode(_history_adapter, data, "tx-history")

    async def get_addresses(self, wallet_id: str) -> list[str]:
        data = await self._http.get_json("/wallet/addresses", wallet_id=wallet_id)
        response = _decode(TypeAdapter(AddressesResponse), data, "addresses")
        return response.addresses

    async def list_tokens(self, wallet_id: str) -> set[str]:
        """Every token the wallet has ever received or spent.

        Fetches the history, then the addresses. Both must decode before
        anything is reconciled.
        """
        history = await self.get_history(wallet_id)
        addresses = await self.get_addresses(wallet_id)
        tokens = reconcile_tokens(history, addresses)
        log.debug("Found %d tokens.", len(tokens))
        return tokens

    async def is_address_mine(self, wallet_id: str, address: str) -> bool:
        """Whether *address* belongs to the wallet, according to ``/wallet/address-info``."""
        data = await self._http.get_json(
            "/wallet/address-info", {"address": address}, wallet_id=wallet_id
        )
        response = _decode(TypeAdapter(AddressInfoResponse), data, "address-info")
        return response.success
