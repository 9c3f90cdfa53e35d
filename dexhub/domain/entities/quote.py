from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


PRICE_SOURCE_FEED = "feed"
PRICE_SOURCE_DEFAULTS = "defaults"

SOURCE_PRICE_ESTIMATE = "price-estimate"


@dataclass(frozen=True)
class PriceSnapshot:
    """USD price per token symbol for one chain, fetched for a single request."""

    prices: Mapping[str, Decimal]
    source: str = PRICE_SOURCE_FEED

    def __post_init__(self) -> None:
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def price_of(self, symbol: str) -> Decimal:
        return self.prices.get(symbol, Decimal("0"))


@dataclass(frozen=True)
class DexQuoteProfile:
    """Fee and source tag a DEX applies to price-estimated quotes.

    ``fee_pips`` is expressed in hundredths of a basis point (3000 = 0.30%).
    """

    dex_name: str
    source: str
    fee_pips: int

    @property
    def fee_rate(self) -> Decimal:
        return Decimal(self.fee_pips) / Decimal("1000000")

    @property
    def fee_basis_points(self) -> Decimal:
        return Decimal(self.fee_pips) / Decimal("100")


@dataclass(frozen=True)
class QuoteResult:
    amount_out: str
    fee: int
    fee_basis_points: Decimal
    route: str
    decimals_out: int
    source: str


@dataclass(frozen=True)
class RoutedQuote:
    """Output of a DEX-native quote source (router API or on-chain read)."""

    amount_out: int
    route_symbols: tuple[str, ...] = field(default_factory=tuple)
    route_label: str | None = None
    fee_pips: int | None = None
