"""Count how many recent transactions of a wallet touch watched addresses."""

import asyncio
from collections import Counter
from collections.abc import Iterable

from loguru import logger

from airdrop_checker.eligibility.models import InteractionTally
from airdrop_checker.parsers.solana_rpc.client import SolanaRpcClient
from airdrop_checker.parsers.solana_rpc.models import TransactionRecord

SIGNATURE_WINDOW = 50


async def count_protocol_interactions(
    rpc: SolanaRpcClient,
    address: str,
    targets: Iterable[str],
) -> InteractionTally:
    """Tally transactions among the last ``SIGNATURE_WINDOW`` that reference each target.

    A transaction counts at most once per target. Signatures that fail to
    resolve are skipped. Any other failure is logged and yields an empty
    tally, which reads as zero for every target.
    """
    watched = list(dict.fromkeys(targets))
    tally: InteractionTally = Counter()
    if not watched:
        return tally

    try:
        signatures = await rpc.get_signatures_for_address(address, limit=SIGNATURE_WINDOW)
        signatures = signatures[:SIGNATURE_WINDOW]

        results = await asyncio.gather(
            *[rpc.get_transaction(sig.signature) for sig in signatures],
            return_exceptions=True,
        )

        resolved = 0
        for tx in results:
            if not isinstance(tx, TransactionRecord):
                if isinstance(tx, BaseException):
                    logger.debug(f"[INTERACTIONS] skipped unresolved tx: {tx}")
                continue
            resolved += 1
            accounts = set(tx.account_keys)
            for target in watched:
                if target in accounts:
                    tally[target] += 1

        logger.debug(
            f"[INTERACTIONS] {address[:12]}: {resolved}/{len(signatures)} txs resolved, "
            f"hits={dict(tally)}"
        )
        return tally

    except Exception as e:
        logger.warning(f"[INTERACTIONS] Error checking {address[:12]}: {e}")
        return Counter()
