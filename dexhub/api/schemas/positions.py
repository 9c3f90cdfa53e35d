from __future__ import annotations

from pydantic import Field

from dexhub.api.schemas.base import CamelModel


class PositionsRequest(CamelModel):
    chain: str | None = None
    address: str | None = None


class PositionTokenResponse(CamelModel):
    address: str
    symbol: str
    icon: str


class PositionResponse(CamelModel):
    token_id: str
    token0: PositionTokenResponse
    token1: PositionTokenResponse
    fee: float
    tick_lower: int
    tick_upper: int
    liquidity: str
    tokens_owed0: str
    tokens_owed1: str
    in_range: bool
    dex_name: str
    chain_type: str
    pair_address: str | None = None
    bin_step: int | None = None


class PoolTokenResponse(CamelModel):
    address: str
    symbol: str
    decimals: int
    icon: str


class LpPoolResponse(CamelModel):
    pool_hash: str
    lp_token: str
    token0: PoolTokenResponse
    token1: PoolTokenResponse
    fee: float
    tvl: str
    volume_24h: str = Field(..., alias="volume24h")


class PositionsResponse(CamelModel):
    positions: list[PositionResponse] | None = None
    pools: list[LpPoolResponse] | None = None
    error: str | None = None
