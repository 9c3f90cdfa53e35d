from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from dexhub.api.deps import get_positions_use_case
from dexhub.api.schemas.positions import (
    LpPoolResponse,
    PoolTokenResponse,
    PositionResponse,
    PositionsRequest,
    PositionsResponse,
    PositionTokenResponse,
)
from dexhub.application.dto.positions import GetPositionsInput
from dexhub.application.use_cases.get_positions import GetPositionsUseCase
from dexhub.domain.entities.position import LpPool, Position, PoolToken, PositionToken
from dexhub.domain.exceptions import ClientError

router = APIRouter()


def _position_token(token: PositionToken) -> PositionTokenResponse:
    return PositionTokenResponse(address=token.address, symbol=token.symbol, icon=token.icon)


def _pool_token(token: PoolToken) -> PoolTokenResponse:
    return PoolTokenResponse(
        address=token.address,
        symbol=token.symbol,
        decimals=token.decimals,
        icon=token.icon,
    )


def _position(row: Position) -> PositionResponse:
    return PositionResponse(
        token_id=row.token_id,
        token0=_position_token(row.token0),
        token1=_position_token(row.token1),
        fee=row.fee,
        tick_lower=row.tick_lower,
        tick_upper=row.tick_upper,
        liquidity=row.liquidity,
        tokens_owed0=row.tokens_owed0,
        tokens_owed1=row.tokens_owed1,
        in_range=row.in_range,
        dex_name=row.dex_name,
        chain_type=row.chain_type,
        pair_address=row.extra.get("pairAddress"),
        bin_step=row.extra.get("binStep"),
    )


def _lp_pool(row: LpPool) -> LpPoolResponse:
    return LpPoolResponse(
        pool_hash=row.pool_hash,
        lp_token=row.lp_token,
        token0=_pool_token(row.token0),
        token1=_pool_token(row.token1),
        fee=row.fee,
        tvl=row.tvl,
        volume_24h=row.volume_24h,
    )


@router.post("/v1/positions", response_model=PositionsResponse, response_model_exclude_none=True)
def post_positions(
    payload: PositionsRequest,
    use_case: GetPositionsUseCase = Depends(get_positions_use_case),
):
    try:
        result = use_case.execute(
            GetPositionsInput(chain_id=payload.chain or "", address=payload.address or "")
        )
    except ClientError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return PositionsResponse(
        positions=[_position(row) for row in result.positions] if result.positions is not None else None,
        pools=[_lp_pool(row) for row in result.pools] if result.pools is not None else None,
        error=result.error,
    )
