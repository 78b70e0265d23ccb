"""Shared test fixtures — in-memory stand-ins for Helius and the Solana RPC."""

from __future__ import annotations

import pytest
from solders.hash import Hash  # type: ignore[import-untyped]
from solders.keypair import Keypair  # type: ignore[import-untyped]

from airdrop_checker.parsers.helius.models import TokenHolding
from airdrop_checker.parsers.solana_rpc.models import SignatureInfo, TransactionRecord

BLOCKHASH = str(Hash(bytes(range(1, 33))))


class FakeHelius:
    """Helius client stub returning canned holdings."""

    def __init__(self, holdings: list[TokenHolding] | None = None) -> None:
        self.holdings = holdings or []
        self.calls: list[str] = []

    async def get_token_balances(self, address: str) -> list[TokenHolding]:
        self.calls.append(address)
        return list(self.holdings)


class FakeRpc:
    """Solana RPC stub.

    ``transactions`` maps signature -> account keys. Signatures listed in
    ``failing`` raise on lookup; signatures missing from ``transactions``
    resolve to None.
    """

    def __init__(self) -> None:
        self.signatures: list[str] = []
        self.transactions: dict[str, list[str]] = {}
        self.failing: set[str] = set()
        self.signatures_error: Exception | None = None
        self.blockhash_error: Exception | None = None
        self.signature_calls: list[tuple[str, int]] = []
        self.transaction_calls: list[str] = []

    def add_tx(self, signature: str, account_keys: list[str]) -> None:
        self.signatures.append(signature)
        self.transactions[signature] = account_keys

    async def get_signatures_for_address(self, address: str, *, limit: int = 50) -> list[SignatureInfo]:
        self.signature_calls.append((address, limit))
        if self.signatures_error is not None:
            raise self.signatures_error
        return [SignatureInfo(signature=s) for s in self.signatures]

    async def get_transaction(self, signature: str) -> TransactionRecord | None:
        self.transaction_calls.append(signature)
        if signature in self.failing:
            raise RuntimeError(f"lookup failed for {signature}")
        keys = self.transactions.get(signature)
        if keys is None:
            return None
        return TransactionRecord(signature=signature, account_keys=keys)

    async def get_latest_blockhash(self, *, commitment: str = "finalized") -> str:
        if self.blockhash_error is not None:
            raise self.blockhash_error
        return BLOCKHASH


@pytest.fixture
def fake_helius() -> FakeHelius:
    return FakeHelius()


@pytest.fixture
def fake_rpc() -> FakeRpc:
    return FakeRpc()


@pytest.fixture
def wallet_address() -> str:
    """Random on-curve wallet address."""
    return str(Keypair().pubkey())
