"""Wallet address validation."""

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from airdrop_checker.exceptions import InvalidAddressError


def parse_wallet_address(address: str) -> Pubkey:
    """Parse a base58 address that can hold funds directly.

    Raises InvalidAddressError for malformed input and for off-curve
    (program-derived) addresses.
    """
    if not isinstance(address, str) or not address:
        raise InvalidAddressError("Invalid Solana address")
    try:
        pubkey = Pubkey.from_string(address)
    except ValueError as e:
        raise InvalidAddressError("Invalid Solana address") from e

    if not pubkey.is_on_curve():
        raise InvalidAddressError("Invalid Solana address")
    return pubkey
