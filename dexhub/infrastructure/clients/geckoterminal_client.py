from __future__ import annotations

import logging

import httpx

from dexhub.domain.entities.pool import PoolListing
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.pool_normalizer import normalize_geckoterminal_pools


logger = logging.getLogger(__name__)


class GeckoTerminalPoolsClient:
    source = "geckoterminal"

    def __init__(
        self,
        api_base: str,
        timeout_seconds: float,
        min_tvl_usd: float,
        network: str = "base",
        dex: str = "uniswap-v3-base",
    ):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout_seconds
        self.min_tvl_usd = min_tvl_usd
        self.network = network
        self.dex = dex

    def fetch_pools(self) -> list[PoolListing]:
        url = f"{self.api_base}/networks/{self.network}/dexes/{self.dex}/pools"
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, params={"page": 1}, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"geckoterminal: {exc}") from exc

        rows = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(rows, list):
            raise UpstreamUnavailableError("geckoterminal: missing data list")
        pools = normalize_geckoterminal_pools(rows, min_tvl_usd=self.min_tvl_usd)
        logger.info("geckoterminal_client: fetched rows=%s listed=%s", len(rows), len(pools))
        return pools
