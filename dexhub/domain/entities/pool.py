from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolListingToken:
    symbol: str
    icon: str


@dataclass(frozen=True)
class PoolListing:
    id: str
    token0: PoolListingToken
    token1: PoolListingToken
    tvl: float
    apr: float
    volume_24h: float
    fees_24h: float
    fee_tier: float
