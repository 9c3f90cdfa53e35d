from __future__ import annotations

from decimal import Decimal, InvalidOperation
import logging

import httpx

from dexhub.domain.exceptions import UpstreamUnavailableError


logger = logging.getLogger(__name__)


class CoingeckoPriceFeed:
    """Batched ``/simple/price`` lookups keyed by CoinGecko coin id."""

    def __init__(self, api_base: str, timeout_seconds: float, api_key: str = ""):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout_seconds
        self.api_key = api_key

    def fetch_usd_prices(self, *, feed_ids: list[str]) -> dict[str, Decimal]:
        if not feed_ids:
            return {}
        payload = self._get_json(
            f"{self.api_base}/simple/price",
            params={"ids": ",".join(feed_ids), "vs_currencies": "usd"},
        )
        if not isinstance(payload, dict):
            raise UpstreamUnavailableError("coingecko: unexpected payload shape")

        prices: dict[str, Decimal] = {}
        for feed_id in feed_ids:
            row = payload.get(feed_id)
            if not isinstance(row, dict) or row.get("usd") is None:
                continue
            try:
                prices[feed_id] = Decimal(str(row["usd"]))
            except InvalidOperation:
                logger.warning("coingecko_client: invalid_price feed_id=%s value=%s", feed_id, row["usd"])
        logger.info("coingecko_client: fetched requested=%s priced=%s", len(feed_ids), len(prices))
        return prices

    def _get_json(self, url: str, *, params: dict) -> object:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-cg-demo-api-key"] = self.api_key
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, params=params, headers=headers)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"coingecko: {exc}") from exc
