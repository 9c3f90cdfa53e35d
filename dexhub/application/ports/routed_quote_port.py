from __future__ import annotations

from typing import Mapping, Protocol

from dexhub.domain.entities.quote import RoutedQuote
from dexhub.domain.entities.token import TokenDescriptor


class RoutedQuotePort(Protocol):
    source: str

    def fetch_quote(
        self,
        *,
        token_in: TokenDescriptor,
        token_out: TokenDescriptor,
        amount_in: int,
        tokens: Mapping[str, TokenDescriptor],
    ) -> RoutedQuote | None:
        ...
