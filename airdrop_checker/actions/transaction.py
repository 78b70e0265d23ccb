"""Unsigned transaction returned to the wallet when an airdrop matches.

The transaction is a system-program transfer from the wallet to itself
with the wallet as fee payer, so signing it proves control of the address
without moving funds anywhere else.
"""

from __future__ import annotations

import base64

from loguru import logger
from solders.hash import Hash  # type: ignore[import-untyped]
from solders.message import Message  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]
from solders.system_program import TransferParams, transfer  # type: ignore[import-untyped]
from solders.transaction import Transaction  # type: ignore[import-untyped]

from airdrop_checker.parsers.solana_rpc.client import SolanaRpcClient


def build_self_transfer(payer: Pubkey, lamports: int, blockhash: str) -> Transaction:
    if lamports < 0:
        raise ValueError("lamports must be >= 0")
    ix = transfer(TransferParams(from_pubkey=payer, to_pubkey=payer, lamports=lamports))
    message = Message.new_with_blockhash([ix], payer, Hash.from_string(blockhash))
    return Transaction.new_unsigned(message)


def serialize_unsigned(tx: Transaction) -> str:
    """Wire-format bytes, base64. Signature slots are left zeroed."""
    return base64.b64encode(bytes(tx)).decode("ascii")


async def create_self_transfer_transaction(
    rpc: SolanaRpcClient, payer: Pubkey, *, lamports: int
) -> str:
    """Build the self-transfer with a fresh blockhash. Raises RpcError on lookup failure."""
    blockhash = await rpc.get_latest_blockhash()
    tx = build_self_transfer(payer, lamports, blockhash)
    logger.debug(f"[ACTION] built self-transfer for {str(payer)[:12]} ({lamports} lamports)")
    return serialize_unsigned(tx)
