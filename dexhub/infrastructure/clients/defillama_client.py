from __future__ import annotations

import logging

import httpx

from dexhub.domain.entities.pool import PoolListing
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.pool_normalizer import normalize_defillama_pools


logger = logging.getLogger(__name__)


class DefiLlamaPoolsClient:
    source = "defillama"

    def __init__(
        self,
        yields_url: str,
        timeout_seconds: float,
        min_tvl_usd: float,
        chain: str = "Base",
        project: str = "uniswap-v3",
    ):
        self.yields_url = yields_url
        self.timeout = timeout_seconds
        self.min_tvl_usd = min_tvl_usd
        self.chain = chain
        self.project = project

    def fetch_pools(self) -> list[PoolListing]:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(self.yields_url, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"defillama: {exc}") from exc

        rows = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(rows, list):
            raise UpstreamUnavailableError("defillama: missing data list")
        pools = normalize_defillama_pools(
            rows,
            chain=self.chain,
            project=self.project,
            min_tvl_usd=self.min_tvl_usd,
        )
        logger.info("defillama_client: fetched rows=%s listed=%s", len(rows), len(pools))
        return pools
