from __future__ import annotations

from fastapi import APIRouter, Depends

from dexhub.api.deps import get_list_pools_use_case
from dexhub.api.schemas.pools import PoolListingResponse, PoolListingTokenResponse, PoolsResponse
from dexhub.application.use_cases.list_pools import ListPoolsUseCase

router = APIRouter()


@router.get("/v1/pools", response_model=PoolsResponse, response_model_exclude_none=True)
def list_pools(use_case: ListPoolsUseCase = Depends(get_list_pools_use_case)):
    result = use_case.execute()
    return PoolsResponse(
        pools=[
            PoolListingResponse(
                id=row.id,
                token0=PoolListingTokenResponse(symbol=row.token0.symbol, icon=row.token0.icon),
                token1=PoolListingTokenResponse(symbol=row.token1.symbol, icon=row.token1.icon),
                tvl=row.tvl,
                apr=row.apr,
                volume_24h=row.volume_24h,
                fees_24h=row.fees_24h,
                fee_tier=row.fee_tier,
            )
            for row in result.pools
        ],
        error=result.error,
        details=result.details,
    )
