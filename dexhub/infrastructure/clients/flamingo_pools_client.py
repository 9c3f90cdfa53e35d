from __future__ import annotations

import logging

import httpx

from dexhub.domain.entities.position import LpPool
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.position_normalizer import normalize_flamingo_pools


logger = logging.getLogger(__name__)


class FlamingoPoolsClient:
    source = "flamingo-api"

    def __init__(self, pools_url: str, timeout_seconds: float):
        self.pools_url = pools_url
        self.timeout = timeout_seconds

    def fetch_pools(self) -> list[LpPool]:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(self.pools_url, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"flamingo: {exc}") from exc

        if not isinstance(payload, list):
            raise UpstreamUnavailableError("flamingo: expected a list of pools")
        pools = normalize_flamingo_pools(payload)
        logger.info("flamingo_pools_client: fetched rows=%s pools=%s", len(payload), len(pools))
        return pools
