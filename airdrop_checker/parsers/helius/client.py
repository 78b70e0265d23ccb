"""Helius API client — token balances for a wallet address."""

import httpx
from loguru import logger

from airdrop_checker.exceptions import ConfigurationError
from airdrop_checker.parsers.helius.models import BalancesResponse, TokenHolding

DEFAULT_API_URL = "https://api.helius.xyz/v0"


class HeliusClient:
    """Async HTTP client for the Helius balances index."""

    def __init__(
        self,
        api_key: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("HELIUS_API_KEY is not set")
        self._api_key = api_key
        self._api_url = api_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def get_token_balances(self, address: str) -> list[TokenHolding]:
        """Fetch fungible-token holdings for an address.

        The address is not validated here. Any failure (HTTP status,
        transport, bad JSON, unexpected shape) is logged and yields an
        empty list so the caller degrades to "no holdings".
        """
        url = f"{self._api_url}/addresses/{address}/balances"
        try:
            resp = await self._client.get(url, params={"api-key": self._api_key})
            if resp.status_code != 200:
                logger.warning(f"[HELIUS] balances HTTP {resp.status_code} for {address[:12]}")
                return []

            data = resp.json()
            if not isinstance(data, dict):
                logger.warning(f"[HELIUS] unexpected balances payload for {address[:12]}")
                return []

            return list(BalancesResponse.model_validate(data).tokens)

        except httpx.HTTPError as e:
            logger.warning(f"[HELIUS] get_token_balances failed: {e}")
            return []
        except ValueError as e:  # JSONDecodeError, pydantic ValidationError
            logger.warning(f"[HELIUS] malformed balances response: {e}")
            return []
        except Exception as e:
            logger.warning(f"[HELIUS] balances lookup error for {address[:12]}: {type(e).__name__}: {e}")
            return []
