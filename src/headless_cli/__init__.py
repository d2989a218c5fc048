"""Command-line client for the headless wallet service."""

from headless_cli.client import HeadlessClient
from headless_cli.config import HeadlessConfig
from headless_cli.exceptions import HeadlessDecodeError, HeadlessError, HeadlessUrlError
from headless_cli.http import AsyncHttpClient, build_client, build_headless_url

__all__ = [
    "HeadlessClient",
    "HeadlessConfig",
    "AsyncHttpClient",
    "build_client",
    "build_headless_url",
    "HeadlessError",
    "HeadlessUrlError",
    "HeadlessDecodeError",
]

__version__ = "0.1.0"
