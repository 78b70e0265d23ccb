"""Eligibility rule and verdict types."""

from collections import Counter
from dataclasses import dataclass
from typing import TypeAlias

# Watched address -> number of transactions that referenced it
InteractionTally: TypeAlias = Counter[str]


@dataclass(frozen=True)
class AirdropCriterion:
    """One airdrop program's qualification rule."""

    protocol: str
    required_tokens: tuple[str, ...]
    minimum_balance: int = 0  # not consulted by the decision rule
    minimum_transactions: int = 0

    def __post_init__(self) -> None:
        if not self.protocol:
            raise ValueError("Criterion protocol is empty")
        if self.minimum_transactions < 0:
            raise ValueError("minimum_transactions must be >= 0")
        # ordered set: keep first occurrence of each mint
        object.__setattr__(self, "required_tokens", tuple(dict.fromkeys(self.required_tokens)))


@dataclass(frozen=True)
class EligibilityResult:
    """Verdict for one criterion."""

    eligible: bool
    protocol: str
    reason: str
