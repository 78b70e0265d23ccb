"""Solana JSON-RPC client — signatures, transactions and blockhash lookups."""

from typing import Any

import httpx
from loguru import logger

from airdrop_checker.exceptions import RpcError
from airdrop_checker.parsers.solana_rpc.models import SignatureInfo, TransactionRecord

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"


class SolanaRpcClient:
    """Async HTTP client for a Solana RPC endpoint.

    Lookups used by the eligibility pipeline raise ``RpcError`` on any
    failure; the pipeline decides how to absorb it.
    """

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        *,
        commitment: str = "confirmed",
        timeout: float | None = None,
    ) -> None:
        if not rpc_url:
            raise ValueError("RPC URL is empty")
        self._rpc_url = rpc_url
        self._commitment = commitment
        self._client = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        try:
            resp = await self._client.post(self._rpc_url, json=payload)
        except httpx.HTTPError as e:
            raise RpcError(f"{method} request failed: {e}") from e

        if resp.status_code != 200:
            raise RpcError(f"{method} HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise RpcError(f"{method} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise RpcError(f"{method} returned unexpected payload")
        if "error" in data:
            error = data["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise RpcError(f"{method} error: {message}")

        return data.get("result")

    async def get_signatures_for_address(
        self, address: str, *, limit: int = 50
    ) -> list[SignatureInfo]:
        """Most-recent-first signatures for an address."""
        result = await self._call(
            "getSignaturesForAddress",
            [address, {"limit": min(limit, 1000), "commitment": self._commitment}],
        )
        if not isinstance(result, list):
            raise RpcError("getSignaturesForAddress returned no list")

        return [
            SignatureInfo(
                signature=sig.get("signature", ""),
                slot=sig.get("slot", 0),
                block_time=sig.get("blockTime"),
                err=sig.get("err"),
            )
            for sig in result
        ]

    async def get_transaction(self, signature: str) -> TransactionRecord | None:
        """Resolve a signature. Returns None when the node has no record of it."""
        result = await self._call(
            "getTransaction",
            [
                signature,
                {
                    "commitment": self._commitment,
                    "encoding": "json",
                    "maxSupportedTransactionVersion": 0,
                },
            ],
        )
        if result is None:
            return None

        try:
            message = result["transaction"]["message"]
            account_keys = [str(key) for key in message.get("accountKeys", [])]
        except (KeyError, TypeError) as e:
            raise RpcError(f"getTransaction malformed result for {signature[:12]}") from e

        meta = result.get("meta") or {}
        # v0 transactions reference lookup-table accounts outside the message
        loaded = meta.get("loadedAddresses") or {}
        for group in ("writable", "readonly"):
            account_keys.extend(str(key) for key in loaded.get(group) or [])

        return TransactionRecord(
            signature=signature,
            slot=result.get("slot", 0),
            block_time=result.get("blockTime"),
            account_keys=account_keys,
            err=meta.get("err"),
        )

    async def get_latest_blockhash(self, *, commitment: str = "finalized") -> str:
        """Fetch a fresh blockhash (base58)."""
        result = await self._call("getLatestBlockhash", [{"commitment": commitment}])
        try:
            blockhash = result["value"]["blockhash"]
        except (KeyError, TypeError) as e:
            raise RpcError("getLatestBlockhash malformed result") from e

        logger.debug(f"[RPC] latest blockhash {blockhash}")
        return blockhash
