"""Eligibility evaluation — holdings + interaction history against the criterion table.

Pipeline per request:
  1. Fetch token holdings once (Helius balances)
  2. For each criterion, count recent transactions referencing its
     required tokens (Solana RPC)
  3. Apply the rule: holds a required token AND interactions >= threshold

Both upstream steps already absorb their own failures, so evaluation
itself has no error path: a failed lookup reads as "no evidence found".
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from loguru import logger

from airdrop_checker.eligibility.interactions import count_protocol_interactions
from airdrop_checker.eligibility.models import AirdropCriterion, EligibilityResult
from airdrop_checker.parsers.helius.client import HeliusClient
from airdrop_checker.parsers.helius.models import TokenHolding
from airdrop_checker.parsers.solana_rpc.client import SolanaRpcClient


def holds_required_token(criterion: AirdropCriterion, holdings: Sequence[TokenHolding]) -> bool:
    required = set(criterion.required_tokens)
    return any(holding.mint in required for holding in holdings)


def decide(
    criterion: AirdropCriterion,
    holdings: Sequence[TokenHolding],
    total_interactions: int,
) -> EligibilityResult:
    """Apply a criterion's rule to already-fetched evidence.

    ``minimum_balance`` is intentionally not consulted.
    """
    eligible = (
        holds_required_token(criterion, holdings)
        and total_interactions >= criterion.minimum_transactions
    )
    if eligible:
        reason = (
            f"Eligible for {criterion.protocol} airdrop! "
            f"Found {total_interactions} interactions."
        )
    else:
        reason = (
            f"Not eligible for {criterion.protocol}. "
            f"Need {criterion.minimum_transactions} interactions, found {total_interactions}."
        )
    return EligibilityResult(eligible=eligible, protocol=criterion.protocol, reason=reason)


class EligibilityEvaluator:
    """Produces one verdict per criterion, in table order."""

    def __init__(
        self,
        criteria: Sequence[AirdropCriterion],
        *,
        holdings_source: HeliusClient,
        rpc: SolanaRpcClient,
        concurrent: bool = False,
    ) -> None:
        self._criteria = tuple(criteria)
        self._holdings_source = holdings_source
        self._rpc = rpc
        self._concurrent = concurrent

    @property
    def criteria(self) -> tuple[AirdropCriterion, ...]:
        return self._criteria

    async def evaluate(self, address: str) -> list[EligibilityResult]:
        holdings = await self._holdings_source.get_token_balances(address)
        logger.info(f"[ELIGIBILITY] {address[:12]}: {len(holdings)} token holdings")

        if self._concurrent:
            totals = await asyncio.gather(
                *[self._total_interactions(address, c) for c in self._criteria]
            )
        else:
            totals = [await self._total_interactions(address, c) for c in self._criteria]

        results = [
            decide(criterion, holdings, total)
            for criterion, total in zip(self._criteria, totals)
        ]

        eligible = [r.protocol for r in results if r.eligible]
        logger.info(
            f"[ELIGIBILITY] {address[:12]}: {len(eligible)}/{len(results)} eligible {eligible}"
        )
        return results

    async def _total_interactions(self, address: str, criterion: AirdropCriterion) -> int:
        # Required-token mints double as the watched addresses
        tally = await count_protocol_interactions(self._rpc, address, criterion.required_tokens)
        return sum(tally.values())
