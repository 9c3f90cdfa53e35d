from __future__ import annotations

from dataclasses import dataclass


MAX_TOKEN_DECIMALS = 18


@dataclass(frozen=True)
class TokenDescriptor:
    """Registry entry for one token on one chain.

    ``decimals`` is the exponent used to turn a base-unit integer into a human
    amount (``human = integer / 10**decimals``). It has to match the on-chain
    token or every amount computed from it is silently wrong.
    """

    symbol: str
    name: str
    address: str
    decimals: int
    price_feed_id: str | None = None

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("symbol is required.")
        if not 0 <= self.decimals <= MAX_TOKEN_DECIMALS:
            raise ValueError(
                f"decimals for {self.symbol} must be within [0, {MAX_TOKEN_DECIMALS}], got {self.decimals}."
            )
