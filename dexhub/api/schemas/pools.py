from __future__ import annotations

from pydantic import Field

from dexhub.api.schemas.base import CamelModel


class PoolListingTokenResponse(CamelModel):
    symbol: str
    icon: str


class PoolListingResponse(CamelModel):
    id: str
    token0: PoolListingTokenResponse
    token1: PoolListingTokenResponse
    tvl: float
    apr: float
    volume_24h: float = Field(..., alias="volume24h")
    fees_24h: float = Field(..., alias="fees24h")
    fee_tier: float = Field(..., description="Fee tier in percent (0.3 = 0.30%).")


class PoolsResponse(CamelModel):
    pools: list[PoolListingResponse]
    error: str | None = None
    details: str | None = None
