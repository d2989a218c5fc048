"""Tests for P2shApi."""

from pytest_httpserver import HTTPServer

from tests.conftest import call_api

WALLET = {"X-Wallet-Id": "ms"}


class TestP2shApi:
    def test_tx_proposal(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal",
            method="POST",
            json={
                "outputs": [{"address": "wA", "value": 100}, {"address": "wB", "value": 5, "token": "00ff"}],
                "inputs": [{"hash": "abcd", "index": 0}],
                "change_address": "wC",
            },
            headers=WALLET,
        ).respond_with_json({"success": True, "txHex": "0001"})
        result = call_api(
            httpserver,
            lambda c: c.p2sh.tx_proposal(
                "ms",
                [{"address": "wA", "value": 100}, {"address": "wB", "value": 5, "token": "00ff"}],
                inputs=[{"hash": "abcd", "index": 0}],
                change_address="wC",
            ),
        )
        httpserver.check_assertions()
        assert '"txHex": "0001"' in result

    def test_tx_proposal_outputs_only(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal", method="POST", json={"outputs": [{"address": "wA", "value": 1}]}
        ).respond_with_json({"success": True})
        call_api(httpserver, lambda c: c.p2sh.tx_proposal("ms", [{"address": "wA", "value": 1}]))
        httpserver.check_assertions()

    def test_create_token(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal/create-token",
            method="POST",
            json={"name": "Coin", "symbol": "CN", "amount": 10, "create_mint": True},
            headers=WALLET,
        ).respond_with_json({"success": True})
        call_api(httpserver, lambda c: c.p2sh.create_token("ms", "Coin", "CN", 10, create_mint=True))
        httpserver.check_assertions()

    def test_mint_tokens(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal/mint-tokens",
            method="POST",
            json={"token": "00ff", "amount": 10, "address": "wA"},
        ).respond_with_json({"success": True})
        call_api(httpserver, lambda c: c.p2sh.mint_tokens("ms", "00ff", 10, address="wA"))
        httpserver.check_assertions()

    def test_melt_tokens(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal/melt-tokens",
            method="POST",
            json={"token": "00ff", "amount": 10, "create_melt": False},
        ).respond_with_json({"success": True})
        call_api(httpserver, lambda c: c.p2sh.melt_tokens("ms", "00ff", 10, create_melt=False))
        httpserver.check_assertions()

    def test_get_my_signatures(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal/get-my-signatures", method="POST", json={"txHex": "0001"}, headers=WALLET
        ).respond_with_json({"success": True, "signatures": "sig-a"})
        result = call_api(httpserver, lambda c: c.p2sh.get_my_signatures("ms", "0001"))
        assert "sig-a" in result

    def test_sign(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal/sign",
            method="POST",
            json={"txHex": "0001", "signatures": ["sig-a", "sig-b"]},
        ).respond_with_json({"success": True, "txHex": "0002"})
        result = call_api(httpserver, lambda c: c.p2sh.sign("ms", "0001", ["sig-a", "sig-b"]))
        assert "0002" in result

    def test_sign_and_push(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(
            "/wallet/p2sh/tx-proposal/sign-and-push",
            method="POST",
            json={"txHex": "0001", "signatures": ["sig-a"]},
            headers=WALLET,
        ).respond_with_json({"success": True, "hash": "tx-ms"})
        result = call_api(httpserver, lambda c: c.p2sh.sign_and_push("ms", "0001", ("sig-a",)))
        assert "tx-ms" in result
