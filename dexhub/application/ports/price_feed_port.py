from __future__ import annotations

from decimal import Decimal
from typing import Protocol


class PriceFeedPort(Protocol):
    def fetch_usd_prices(self, *, feed_ids: list[str]) -> dict[str, Decimal]:
        """Raises ``UpstreamUnavailableError`` when the feed cannot be read."""
        ...
