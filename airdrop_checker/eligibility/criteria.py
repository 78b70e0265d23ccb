"""Configured airdrop programs.

Order matters: verdicts are reported in the order listed here.
"""

from airdrop_checker.eligibility.models import AirdropCriterion

JUPITER_MINT = "JUPyiwrYJFskUPiHa7hkeR8VUtAAXxEDBtS1nHLApPf"
ORCA_MINT = "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE"

AIRDROP_CRITERIA: tuple[AirdropCriterion, ...] = (
    AirdropCriterion(
        protocol="JupiterV2",
        required_tokens=(JUPITER_MINT,),
        minimum_balance=0,
        minimum_transactions=5,
    ),
    AirdropCriterion(
        protocol="Orca",
        required_tokens=(ORCA_MINT,),
        minimum_balance=0,
        minimum_transactions=3,
    ),
)
