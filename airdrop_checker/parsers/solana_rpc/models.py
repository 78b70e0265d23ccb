"""Pydantic models for Solana JSON-RPC results."""

from typing import Any

from pydantic import BaseModel


class SignatureInfo(BaseModel):
    """Entry returned by getSignaturesForAddress."""

    signature: str
    slot: int = 0
    block_time: int | None = None
    err: Any | None = None  # non-None means the tx failed on-chain


class TransactionRecord(BaseModel):
    """Resolved transaction, reduced to what interaction counting needs."""

    signature: str
    slot: int = 0
    block_time: int | None = None
    account_keys: list[str] = []
    err: Any | None = None
