from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class PositionToken:
    address: str
    symbol: str
    icon: str


@dataclass(frozen=True)
class Position:
    token_id: str
    token0: PositionToken
    token1: PositionToken
    fee: float
    tick_lower: int
    tick_upper: int
    liquidity: str
    tokens_owed0: str
    tokens_owed1: str
    in_range: bool
    dex_name: str
    chain_type: str
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PoolToken:
    address: str
    symbol: str
    decimals: int
    icon: str


@dataclass(frozen=True)
class LpPool:
    """Simple-LP pool the caller reconciles against the wallet's LP-token holdings."""

    pool_hash: str
    lp_token: str
    token0: PoolToken
    token1: PoolToken
    fee: float
    tvl: str
    volume_24h: str


@dataclass(frozen=True)
class PositionManager:
    address: str
    manager_type: str
    dex_name: str
