"""Shared test helpers for driving the client against pytest-httpserver."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable

from pytest_httpserver import HTTPServer
from werkzeug import Request, Response

from headless_cli.client import HeadlessClient
from headless_cli.config import HeadlessConfig


def json_response(data: Any, status: int = 200) -> Response:
    """Build a Werkzeug JSON response."""
    return Response(
        json.dumps(data),
        status=status,
        content_type="application/json",
    )


def call_api(server: HTTPServer, call: Callable[[HeadlessClient], Awaitable[Any]]) -> Any:
    """Run one client call against *server* and return its result."""

    async def runner() -> Any:
        async with HeadlessClient(HeadlessConfig(host=server.url_for(""))) as client:
            return await call(client)

    return asyncio.run(runner())


def request_body(request: Request) -> Any:
    return json.loads(request.get_data(as_text=True))
