"""Tests for HeliusClient.get_token_balances.

All HTTP calls are mocked via httpx.AsyncClient patching.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from airdrop_checker.exceptions import ConfigurationError
from airdrop_checker.parsers.helius.client import HeliusClient
from airdrop_checker.parsers.helius.models import TokenHolding

ADDRESS = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
JUP = "JUPyiwrYJFskUPiHa7hkeR8VUtAAXxEDBtS1nHLApPf"
ORCA = "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE"


def _response(status_code: int = 200, body: object = None) -> MagicMock:
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


@pytest.fixture
def client() -> HeliusClient:
    c = HeliusClient("test-key")
    c._client = AsyncMock(spec=httpx.AsyncClient)
    return c


class TestInit:

    def test_empty_api_key_raises(self):
        with pytest.raises(ConfigurationError, match="HELIUS_API_KEY"):
            HeliusClient("")


class TestGetTokenBalances:

    async def test_parses_tokens_in_order(self, client: HeliusClient):
        client._client.get = AsyncMock(
            return_value=_response(
                body={
                    "tokens": [
                        {"mint": JUP, "amount": 1_500_000_000, "decimals": 6, "tokenAccount": "x"},
                        {"mint": ORCA, "amount": "42", "decimals": 6},
                    ],
                    "nativeBalance": 1000,
                }
            )
        )

        holdings = await client.get_token_balances(ADDRESS)

        assert holdings == [
            TokenHolding(mint=JUP, amount="1500000000", decimals=6),
            TokenHolding(mint=ORCA, amount="42", decimals=6),
        ]

    async def test_large_amount_kept_exact(self, client: HeliusClient):
        big = 123456789012345678901234567890
        client._client.get = AsyncMock(
            return_value=_response(body={"tokens": [{"mint": JUP, "amount": big, "decimals": 9}]})
        )

        holdings = await client.get_token_balances(ADDRESS)
        assert holdings[0].amount == str(big)

    async def test_requests_address_balances_with_key(self, client: HeliusClient):
        client._client.get = AsyncMock(return_value=_response(body={"tokens": []}))

        await client.get_token_balances(ADDRESS)

        args, kwargs = client._client.get.call_args
        assert args[0] == f"https://api.helius.xyz/v0/addresses/{ADDRESS}/balances"
        assert kwargs["params"] == {"api-key": "test-key"}

    async def test_missing_tokens_key_returns_empty(self, client: HeliusClient):
        client._client.get = AsyncMock(return_value=_response(body={"nativeBalance": 5}))
        assert await client.get_token_balances(ADDRESS) == []

    async def test_http_error_status_returns_empty(self, client: HeliusClient):
        client._client.get = AsyncMock(return_value=_response(status_code=401))
        assert await client.get_token_balances(ADDRESS) == []

    async def test_timeout_returns_empty(self, client: HeliusClient):
        client._client.get = AsyncMock(side_effect=httpx.TimeoutException("timeout"))
        assert await client.get_token_balances(ADDRESS) == []

    async def test_connect_error_returns_empty(self, client: HeliusClient):
        client._client.get = AsyncMock(side_effect=httpx.ConnectError("refused"))
        assert await client.get_token_balances(ADDRESS) == []

    async def test_invalid_json_returns_empty(self, client: HeliusClient):
        resp = _response()
        resp.json.side_effect = ValueError("Expecting value")
        client._client.get = AsyncMock(return_value=resp)
        assert await client.get_token_balances(ADDRESS) == []

    async def test_malformed_token_entry_returns_empty(self, client: HeliusClient):
        client._client.get = AsyncMock(
            return_value=_response(body={"tokens": [{"amount": "5", "decimals": 2}]})
        )
        assert await client.get_token_balances(ADDRESS) == []

    async def test_non_object_body_returns_empty(self, client: HeliusClient):
        client._client.get = AsyncMock(return_value=_response(body=["unexpected"]))
        assert await client.get_token_balances(ADDRESS) == []

    @pytest.mark.parametrize(
        "error",
        [RuntimeError("client closed"), httpx.InvalidURL("bad url"), KeyError("tokens")],
    )
    async def test_unexpected_error_returns_empty(self, client: HeliusClient, error: Exception):
        client._client.get = AsyncMock(side_effect=error)
        assert await client.get_token_balances(ADDRESS) == []
