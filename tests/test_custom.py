"""Tests for the custom commands: token discovery, ownership check and curl echo."""

import pytest
from pytest_httpserver import HTTPServer
from werkzeug import Request

from headless_cli.custom import curl_command, reconcile_tokens
from headless_cli.exceptions import HeadlessDecodeError, HeadlessUrlError
from headless_cli.types import HistoryTx
from tests.conftest import call_api, json_response

WALLET = {"X-Wallet-Id": "w1"}


def entry(token: str, address: str | None) -> dict:
    return {
        "value": 1,
        "token_data": 0,
        "script": "dqkU",
        "decoded": {"type": "P2PKH", "address": address, "timelock": None},
        "token": token,
    }


def tx(tx_id: str, *, inputs=(), outputs=()) -> dict:
    return {
        "tx_id": tx_id,
        "version": 1,
        "weight": 8.0,
        "timestamp": 1700000000,
        "is_voided": False,
        "inputs": [dict(i, tx_id="prev", index=0) for i in inputs],
        "outputs": list(outputs),
        "parents": [],
    }


HISTORY = [
    tx("tx-1", outputs=[entry("T1", "H-mine")]),
    tx("tx-2", inputs=[entry("T2", "H-other")]),
]


class TestReconcileTokens:
    def test_owned_output_only(self) -> None:
        history = [HistoryTx.model_validate(t) for t in HISTORY]
        assert reconcile_tokens(history, ["H-mine"]) == {"T1"}

    def test_owned_input(self) -> None:
        history = [HistoryTx.model_validate(tx("tx-3", inputs=[entry("T3", "H-mine")]))]
        assert reconcile_tokens(history, ["H-mine"]) == {"T3"}

    def test_no_addresses(self) -> None:
        history = [HistoryTx.model_validate(t) for t in HISTORY]
        assert reconcile_tokens(history, []) == set()

    def test_undecoded_address_is_not_owned(self) -> None:
        history = [HistoryTx.model_validate(tx("tx-4", outputs=[entry("T4", None), entry("T5", "H-mine")]))]
        assert reconcile_tokens(history, ["H-mine"]) == {"T5"}

    def test_empty_transaction(self) -> None:
        history = [HistoryTx.model_validate(tx("tx-5"))]
        assert reconcile_tokens(history, ["H-mine"]) == set()

    def test_duplicates_collapse(self) -> None:
        history = [
            HistoryTx.model_validate(tx("a", outputs=[entry("00", "H-mine"), entry("00", "H-mine")])),
            HistoryTx.model_validate(tx("b", inputs=[entry("00", "H-mine")])),
        ]
        assert reconcile_tokens(history, ["H-mine"]) == {"00"}


class TestListTokens:
    def test_list_tokens(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request("/wallet/tx-history", headers=WALLET).respond_with_json(HISTORY)
        httpserver.expect_request("/wallet/addresses", headers=WALLET).respond_with_json({
            "addresses": ["H-mine", "H-unused"],
        })
        tokens = call_api(httpserver, lambda c: c.custom.list_tokens("w1"))
        assert tokens == {"T1"}

    def test_history_is_fetched_without_limit(self, httpserver: HTTPServer) -> None:
        def history(request: Request):
            assert request.query_string == b""
            return json_response([])

        httpserver.expect_request("/wallet/tx-history").respond_with_handler(history)
        httpserver.expect_request("/wallet/addresses").respond_with_json({"addresses": []})
        assert call_api(httpserver, lambda c: c.custom.list_tokens("w1")) == set()
        httpserver.check_assertions()

    def test_malformed_history(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request("/wallet/tx-history").respond_with_data("not json")
        httpserver.expect_request("/wallet/addresses").respond_with_json({"addresses": ["H-mine"]})
        with pytest.raises(HeadlessDecodeError):
            call_api(httpserver, lambda c: c.custom.list_tokens("w1"))

    def test_history_with_wrong_shape(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request("/wallet/tx-history").respond_with_json({"success": False, "message": "not ready"})
        with pytest.raises(HeadlessDecodeError):
            call_api(httpserver, lambda c: c.custom.list_tokens("w1"))

    def test_malformed_addresses(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request("/wallet/tx-history").respond_with_json(HISTORY)
        httpserver.expect_request("/wallet/addresses").respond_with_json({"success": False})
        with pytest.raises(HeadlessDecodeError):
            call_api(httpserver, lambda c: c.custom.list_tokens("w1"))


class TestIsAddressMine:
    def test_mine(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/address-info", query_string="address=H-mine", headers=WALLET
        ).respond_with_json({"success": True, "index": 0, "total_amount_received": 10})
        assert call_api(httpserver, lambda c: c.custom.is_address_mine("w1", "H-mine")) is True

    def test_not_mine(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request("/wallet/address-info").respond_with_json({
            "success": False, "error": "Address does not belong to this wallet.",
        })
        assert call_api(httpserver, lambda c: c.custom.is_address_mine("w1", "H-other")) is False


class TestCurl:
    def test_get(self) -> None:
        command = curl_command("http://localhost:8000", "/wallet/balance", wallet_id="w1")
        assert command == 'curl -H "X-Wallet-Id: w1" http://localhost:8000/wallet/balance'

    def test_post(self) -> None:
        command = curl_command("http://localhost:8000", "/wallet/stop", wallet_id="w1", post=True)
        assert command == 'curl -X POST -H "X-Wallet-Id: w1" http://localhost:8000/wallet/stop'

    def test_post_with_data(self) -> None:
        command = curl_command("http://localhost:8000", "/wallet/decode", wallet_id="w1", post=True, data=True)
        assert command == (
            "curl -X POST -d '{}' "
            '-H "X-Wallet-Id: w1" -H "Content-Type: application/json" '
            "http://localhost:8000/wallet/decode"
        )

    def test_data_without_post_is_ignored(self) -> None:
        command = curl_command("http://localhost:8000", "/wallet/status", wallet_id="w1", data=True)
        assert command == 'curl -H "X-Wallet-Id: w1" http://localhost:8000/wallet/status'

    def test_deterministic(self) -> None:
        args = ("http://localhost:8000", "/wallet/decode")
        first = curl_command(*args, wallet_id="w1", post=True, data=True)
        assert all(curl_command(*args, wallet_id="w1", post=True, data=True) == first for _ in range(5))

    def test_invalid_host(self) -> None:
        with pytest.raises(HeadlessUrlError):
            curl_command("not-a-url", "/wallet/status", wallet_id="w1")

