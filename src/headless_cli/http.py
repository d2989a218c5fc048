"""Low-level HTTP plumbing for talking to the headless wallet service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from headless_cli.config import CONNECT_TIMEOUT, USER_AGENT, WALLET_ID_HEADER, HeadlessConfig
from headless_cli.exceptions import HeadlessDecodeError, HeadlessUrlError
from headless_cli.values import Payload

log = logging.getLogger(__name__)


def build_headless_url(host: str, path: str) -> httpx.URL:
    """Resolve *path* against the base URL *host*.

    ``build_headless_url("http://localhost:8000", "/wallet/balance")`` gives
    ``http://localhost:8000/wallet/balance``.

    Raises ``HeadlessUrlError`` when *host* is not an absolute URL or when
    *path* cannot be joined to it.
    """
    try:
        base = httpx.URL(host)
    except httpx.InvalidURL as exc:
        raise HeadlessUrlError(f"invalid host {host!r}: {exc}") from exc
    if not base.scheme or not base.host:
        raise HeadlessUrlError(f"invalid host {host!r}: expected an absolute URL")
    try:
        return base.join(path)
    except httpx.InvalidURL as exc:
        raise HeadlessUrlError(f"invalid path {path!r}: {exc}") from exc


async def _log_request(request: httpx.Request) -> None:
    log.debug("--> %s %s %s", request.method, request.url, dict(request.headers))


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    log.debug(
        "<-- %s %s %s %s",
        response.status_code,
        request.method,
        request.url,
        dict(response.headers),
    )


def build_client(config: HeadlessConfig) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` used for one invocation.

    Only connecting is bounded in time; once connected we wait for the
    service as long as it takes. With ``config.debug`` set every request and
    response is traced through the ``headless_cli.http`` logger.
    """
    event_hooks: dict[str, list[Any]] = {}
    if config.debug:
        event_hooks = {"request": [_log_request], "response": [_log_response]}
    return httpx.AsyncClient(
        timeout=httpx.Timeout(None, connect=CONNECT_TIMEOUT),
        headers={"User-Agent": USER_AGENT},
        event_hooks=event_hooks,
    )


def _wallet_headers(wallet_id: str | None) -> dict[str, str]:
    if wallet_id is None:
        return {}
    return {WALLET_ID_HEADER: wallet_id}


def _query(params: dict[str, Any] | None) -> list[tuple[str, Any]] | None:
    if not params:
        return None
    filtered = [(k, v) for k, v in params.items() if v is not None]
    return filtered or None


# ---------------------------------------------------------------------------
# Asynchronous client
# ---------------------------------------------------------------------------

class AsyncHttpClient:
    """Asynchronous HTTP client wrapping ``httpx.AsyncClient``.

    Every verb returns the raw response text: status codes are not
    interpreted, the headless service reports failures in the body. Transport
    failures (connection refused, timeouts, TLS) propagate as
    ``httpx.TransportError``.
    """

    def __init__(self, config: HeadlessConfig | None = None) -> None:
        self.config = config or HeadlessConfig()
        self._client = build_client(self.config)

    def url(self, path: str) -> httpx.URL:
        return build_headless_url(self.config.host, path)

    # -- HTTP verbs ----------------------------------------------------------

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        wallet_id: str | None = None,
    ) -> str:
        resp = await self._get(path, params, wallet_id=wallet_id)
        return resp.text

    async def get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        wallet_id: str | None = None,
    ) -> Any:
        """GET *path* and decode the body as JSON.

        Raises ``HeadlessDecodeError`` if the body is not valid UTF-8 JSON.
        """
        resp = await self._get(path, params, wallet_id=wallet_id)
        try:
            return resp.json()
        except ValueError as exc:
            raise HeadlessDecodeError(
                f"invalid JSON from {path}: {exc}",
                status=resp.status_code,
                details=resp.text,
            ) from exc

    async def post(
        self,
        path: str,
        body: Payload | None = None,
        *,
        wallet_id: str | None = None,
    ) -> str:
        url = self.url(path)
        log.debug("POST %s", url)
        resp = await self._client.post(url, json=body, headers=_wallet_headers(wallet_id))
        return resp.text

    async def post_raw(
        self,
        path: str,
        content: str,
        *,
        wallet_id: str | None = None,
    ) -> str:
        """POST an already serialized JSON document, byte for byte."""
        url = self.url(path)
        log.debug("POST %s (raw body, %d chars)", url, len(content))
        headers = _wallet_headers(wallet_id)
        headers["Content-Type"] = "application/json"
        resp = await self._client.post(url, content=content.encode("utf-8"), headers=headers)
        return resp.text

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None,
        *,
        wallet_id: str | None,
    ) -> httpx.Response:
        url = self.url(path)
        log.debug("GET %s", url)
        return await self._client.get(url, params=_query(params), headers=_wallet_headers(wallet_id))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
