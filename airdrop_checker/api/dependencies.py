"""Per-request upstream clients.

Clients are opened for one request and closed afterwards; nothing is
shared between requests except the criterion table.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass

from airdrop_checker.parsers.helius.client import HeliusClient
from airdrop_checker.parsers.solana_rpc.client import SolanaRpcClient
from config.settings import Settings


@dataclass
class UpstreamClients:
    helius: HeliusClient
    rpc: SolanaRpcClient


ClientsFactory = Callable[[Settings], AbstractAsyncContextManager[UpstreamClients]]


@asynccontextmanager
async def open_upstream_clients(cfg: Settings) -> AsyncIterator[UpstreamClients]:
    """Open Helius + RPC clients. Raises ConfigurationError without an API key."""
    helius = HeliusClient(
        cfg.helius_api_key, api_url=cfg.helius_api_url, timeout=cfg.http_timeout_sec
    )
    try:
        rpc = SolanaRpcClient(
            cfg.solana_rpc_url, commitment=cfg.rpc_commitment, timeout=cfg.http_timeout_sec
        )
    except Exception:
        await helius.close()
        raise

    try:
        yield UpstreamClients(helius=helius, rpc=rpc)
    finally:
        await rpc.close()
        await helius.close()
