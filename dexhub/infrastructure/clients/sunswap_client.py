from __future__ import annotations

import logging
from typing import Mapping

import httpx

from dexhub.domain.entities.quote import RoutedQuote
from dexhub.domain.entities.token import TokenDescriptor
from dexhub.domain.exceptions import UpstreamUnavailableError


logger = logging.getLogger(__name__)


class SunSwapQuoteClient:
    source = "sunswap"

    def __init__(self, api_base: str, timeout_seconds: float):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout_seconds

    def fetch_quote(
        self,
        *,
        token_in: TokenDescriptor,
        token_out: TokenDescriptor,
        amount_in: int,
        tokens: Mapping[str, TokenDescriptor],
    ) -> RoutedQuote | None:
        payload = self._post_json(
            f"{self.api_base}/v2/router/getSwapInfo",
            body={
                "tokenIn": token_in.address,
                "tokenOut": token_out.address,
                "amountIn": str(amount_in),
            },
        )
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict) or not data.get("amountOut"):
            return None
        try:
            amount_out = int(str(data["amountOut"]))
        except ValueError:
            logger.warning("sunswap_client: invalid_amount_out value=%s", data["amountOut"])
            return None

        route = data.get("route")
        return RoutedQuote(
            amount_out=amount_out,
            route_label=route if isinstance(route, str) and route else None,
        )

    def _post_json(self, url: str, *, body: dict) -> object:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, json=body)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"sunswap: {exc}") from exc
