from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

from dexhub.domain.entities.quote import PriceSnapshot
from dexhub.domain.entities.token import TokenDescriptor


@dataclass(frozen=True)
class GetPricesInput:
    chain_id: str


@dataclass(frozen=True)
class GetPricesOutput:
    chain_id: str
    snapshot: PriceSnapshot
    tokens: Mapping[str, TokenDescriptor]


@dataclass(frozen=True)
class GetQuoteInput:
    chain_id: str
    token_in: str
    token_out: str
    amount_in: str
    fee_rate: Decimal | None = None


@dataclass(frozen=True)
class ListTokensInput:
    chain_id: str


@dataclass(frozen=True)
class ListTokensOutput:
    chain_id: str
    tokens: Mapping[str, TokenDescriptor]


@dataclass(frozen=True)
class GetPairPriceInput:
    chain_id: str
    token0: str
    token1: str


@dataclass(frozen=True)
class GetPairPriceOutput:
    token0: str
    token1: str
    price: Decimal
    price0_usd: Decimal
    price1_usd: Decimal
