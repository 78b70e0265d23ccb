"""Tests for the criterion table and AirdropCriterion."""

from dataclasses import FrozenInstanceError

import pytest

from airdrop_checker.eligibility.criteria import AIRDROP_CRITERIA, JUPITER_MINT, ORCA_MINT
from airdrop_checker.eligibility.models import AirdropCriterion


def test_table_order_and_thresholds():
    assert [(c.protocol, c.minimum_transactions) for c in AIRDROP_CRITERIA] == [
        ("JupiterV2", 5),
        ("Orca", 3),
    ]
    assert AIRDROP_CRITERIA[0].required_tokens == (JUPITER_MINT,)
    assert AIRDROP_CRITERIA[1].required_tokens == (ORCA_MINT,)


def test_table_is_immutable():
    assert isinstance(AIRDROP_CRITERIA, tuple)
    with pytest.raises(FrozenInstanceError):
        AIRDROP_CRITERIA[0].minimum_transactions = 0  # type: ignore[misc]


def test_required_tokens_deduplicated_in_order():
    c = AirdropCriterion(protocol="X", required_tokens=("b", "a", "b", "c", "a"))
    assert c.required_tokens == ("b", "a", "c")


def test_required_tokens_accepts_list():
    c = AirdropCriterion(protocol="X", required_tokens=["a", "b"])  # type: ignore[arg-type]
    assert c.required_tokens == ("a", "b")


def test_empty_protocol_rejected():
    with pytest.raises(ValueError, match="protocol is empty"):
        AirdropCriterion(protocol="", required_tokens=("a",))


def test_negative_threshold_rejected():
    with pytest.raises(ValueError, match="minimum_transactions"):
        AirdropCriterion(protocol="X", required_tokens=("a",), minimum_transactions=-1)
