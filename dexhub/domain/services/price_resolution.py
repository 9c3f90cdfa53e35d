from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from dexhub.domain.entities.token import TokenDescriptor


ZERO = Decimal("0")


def resolve_symbol_prices(
    *,
    tokens: Mapping[str, TokenDescriptor],
    feed_prices: Mapping[str, Decimal] | None,
    default_prices: Mapping[str, Decimal],
) -> dict[str, Decimal]:
    """Map every registered symbol to a USD price.

    Order per symbol: live feed price for its feed id, then the static default
    for that feed id, then zero. ``feed_prices=None`` means the feed request
    failed and only defaults apply.
    """
    resolved: dict[str, Decimal] = {}
    for symbol, token in tokens.items():
        feed_id = token.price_feed_id
        if not feed_id:
            resolved[symbol] = ZERO
            continue
        live = feed_prices.get(feed_id) if feed_prices is not None else None
        if live is not None and live > 0:
            resolved[symbol] = live
            continue
        default = default_prices.get(feed_id)
        resolved[symbol] = default if default is not None and default > 0 else ZERO
    return resolved
