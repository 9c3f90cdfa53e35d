from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from dexhub.api.deps import get_pair_price_use_case
from dexhub.api.schemas.quote import TokenPriceRequest, TokenPriceResponse
from dexhub.application.dto.quote import GetPairPriceInput
from dexhub.application.use_cases.get_pair_price import GetPairPriceUseCase
from dexhub.domain.exceptions import ClientError, PriceUnavailableError

router = APIRouter()


@router.post("/v1/token-price", response_model=TokenPriceResponse)
def post_token_price(
    payload: TokenPriceRequest,
    use_case: GetPairPriceUseCase = Depends(get_pair_price_use_case),
):
    try:
        result = use_case.execute(
            GetPairPriceInput(chain_id=payload.chain, token0=payload.token0, token1=payload.token1)
        )
    except ClientError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except PriceUnavailableError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return TokenPriceResponse(
        price=float(result.price),
        price0_usd=float(result.price0_usd),
        price1_usd=float(result.price1_usd),
    )
