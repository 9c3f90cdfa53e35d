from __future__ import annotations

from typing import Literal

from pydantic import Field

from dexhub.api.schemas.base import CamelModel


class QuoteRequest(CamelModel):
    action: Literal["prices", "quote", "tokens"] = Field(..., description="prices | quote | tokens")
    token_in: str | None = Field(None, description="Input token symbol.")
    token_out: str | None = Field(None, description="Output token symbol.")
    amount_in: str | int | None = Field(None, description="Input amount in base units.")


class QuoteTokenResponse(CamelModel):
    address: str
    decimals: int


class PricesResponse(CamelModel):
    prices: dict[str, float]
    tokens: dict[str, QuoteTokenResponse]
    source: str


class QuoteResponse(CamelModel):
    amount_out: str = Field(..., description="Output amount in base units of tokenOut.")
    fee: int = Field(..., description="Fee in hundredths of a basis point (3000 = 0.30%).")
    fee_basis_points: float
    route: str
    decimals_out: int
    source: str


class TokenListingResponse(CamelModel):
    address: str
    decimals: int
    symbol: str


class TokensResponse(CamelModel):
    tokens: dict[str, TokenListingResponse]


class TokenPriceRequest(CamelModel):
    chain: str = Field("base", description="Chain id the symbols belong to.")
    token0: str
    token1: str


class TokenPriceResponse(CamelModel):
    price: float = Field(..., description="Price of token0 in units of token1.")
    price0_usd: float
    price1_usd: float
