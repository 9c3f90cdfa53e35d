from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from dexhub.api.deps import get_list_tokens_use_case, get_prices_use_case, get_quote_use_case
from dexhub.api.schemas.quote import (
    PricesResponse,
    QuoteRequest,
    QuoteResponse,
    QuoteTokenResponse,
    TokenListingResponse,
    TokensResponse,
)
from dexhub.application.dto.quote import GetPricesInput, GetQuoteInput, ListTokensInput
from dexhub.application.use_cases.get_prices import GetPricesUseCase
from dexhub.application.use_cases.get_quote import GetQuoteUseCase
from dexhub.application.use_cases.list_tokens import ListTokensUseCase
from dexhub.domain.exceptions import ClientError, PriceUnavailableError

router = APIRouter()

# Per-DEX function paths, each pinned to one chain.
QUOTE_FUNCTION_ALIASES = {
    "get-swap-quote": "base",
    "get-pancakeswap-quote": "bsc",
    "get-traderjoe-quote": "avalanche",
    "get-sunswap-quote": "tron",
    "get-neo-quote": "neo",
}


def _handle_quote_request(
    chain: str,
    payload: QuoteRequest,
    prices_use_case: GetPricesUseCase,
    quote_use_case: GetQuoteUseCase,
    tokens_use_case: ListTokensUseCase,
):
    try:
        if payload.action == "prices":
            prices = prices_use_case.execute(GetPricesInput(chain_id=chain))
            return PricesResponse(
                prices={symbol: float(price) for symbol, price in prices.snapshot.prices.items()},
                tokens={
                    symbol: QuoteTokenResponse(address=token.address, decimals=token.decimals)
                    for symbol, token in prices.tokens.items()
                },
                source=prices.snapshot.source,
            )

        if payload.action == "tokens":
            listing = tokens_use_case.execute(ListTokensInput(chain_id=chain))
            return TokensResponse(
                tokens={
                    symbol: TokenListingResponse(
                        address=token.address,
                        decimals=token.decimals,
                        symbol=symbol,
                    )
                    for symbol, token in listing.tokens.items()
                }
            )

        result = quote_use_case.execute(
            GetQuoteInput(
                chain_id=chain,
                token_in=payload.token_in or "",
                token_out=payload.token_out or "",
                amount_in="" if payload.amount_in is None else str(payload.amount_in),
            )
        )
    except ClientError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except PriceUnavailableError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return QuoteResponse(
        amount_out=result.amount_out,
        fee=result.fee,
        fee_basis_points=float(result.fee_basis_points),
        route=result.route,
        decimals_out=result.decimals_out,
        source=result.source,
    )


@router.post("/v1/quote/{chain}", response_model=None)
def post_quote(
    chain: str,
    payload: QuoteRequest,
    prices_use_case: GetPricesUseCase = Depends(get_prices_use_case),
    quote_use_case: GetQuoteUseCase = Depends(get_quote_use_case),
    tokens_use_case: ListTokensUseCase = Depends(get_list_tokens_use_case),
):
    return _handle_quote_request(chain, payload, prices_use_case, quote_use_case, tokens_use_case)


def _chain_quote_endpoint(chain: str):
    def endpoint(
        payload: QuoteRequest,
        prices_use_case: GetPricesUseCase = Depends(get_prices_use_case),
        quote_use_case: GetQuoteUseCase = Depends(get_quote_use_case),
        tokens_use_case: ListTokensUseCase = Depends(get_list_tokens_use_case),
    ):
        return _handle_quote_request(chain, payload, prices_use_case, quote_use_case, tokens_use_case)

    return endpoint


for _function_name, _chain in QUOTE_FUNCTION_ALIASES.items():
    router.add_api_route(
        f"/functions/{_function_name}",
        _chain_quote_endpoint(_chain),
        methods=["POST"],
        response_model=None,
        name=_function_name,
    )
