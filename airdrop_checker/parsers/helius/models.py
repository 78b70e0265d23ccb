"""Pydantic models for the Helius balances API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class TokenHolding(BaseModel):
    """Fungible-token balance owned by a wallet."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    mint: str
    amount: str = "0"  # raw base units, string to avoid float precision loss
    decimals: int = 0

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_string(cls, value: Any) -> str:
        if value is None:
            return "0"
        if isinstance(value, bool):
            raise ValueError("amount must be numeric")
        # Helius returns raw units as JSON numbers
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)


class BalancesResponse(BaseModel):
    """Body of GET /v0/addresses/{address}/balances."""

    model_config = ConfigDict(extra="ignore")

    tokens: list[TokenHolding] = []
