from __future__ import annotations

import logging

import httpx

from dexhub.domain.entities.position import Position
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.position_normalizer import normalize_barn_positions


logger = logging.getLogger(__name__)

AVALANCHE_CHAIN_ID = 43114


class TraderJoeBarnClient:
    source = "traderjoe-barn"

    def __init__(self, api_base: str, timeout_seconds: float):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout_seconds

    def fetch_positions(self, *, address: str) -> list[Position]:
        payload = self._get_json(
            f"{self.api_base}/v1/user/{address.lower()}/pool",
            params={"chainId": AVALANCHE_CHAIN_ID},
        )
        if not isinstance(payload, list):
            raise UpstreamUnavailableError("barn: expected a list of pools")
        positions = normalize_barn_positions(payload)
        logger.info("traderjoe_barn_client: fetched rows=%s positions=%s", len(payload), len(positions))
        return positions

    def _get_json(self, url: str, *, params: dict) -> object:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, params=params, headers={"Accept": "application/json"})
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"barn: {exc}") from exc
