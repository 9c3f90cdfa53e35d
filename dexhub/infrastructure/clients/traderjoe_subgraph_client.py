from __future__ import annotations

import logging

import httpx

from dexhub.domain.entities.position import Position
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.position_normalizer import normalize_subgraph_positions


logger = logging.getLogger(__name__)


USER_POSITIONS_QUERY = """
query UserPositions($user: ID!) {
  user(id: $user) {
    liquidityPositions(first: 50, where: { liquidityTokenBalance_gt: "0" }) {
      id
      liquidityTokenBalance
      pair {
        id
        token0 { id symbol name decimals }
        token1 { id symbol name decimals }
      }
    }
  }
}
"""


class TraderJoeSubgraphClient:
    source = "traderjoe-subgraph"

    def __init__(self, subgraph_url: str, timeout_seconds: float):
        self.subgraph_url = subgraph_url
        self.timeout = timeout_seconds

    def fetch_positions(self, *, address: str) -> list[Position]:
        payload = self._post_graphql(query=USER_POSITIONS_QUERY, variables={"user": address.lower()})
        data = payload.get("data")
        if not isinstance(data, dict):
            raise UpstreamUnavailableError("subgraph: missing data object")
        user = data.get("user")
        if not isinstance(user, dict):
            return []
        rows = user.get("liquidityPositions") or []
        if not isinstance(rows, list):
            raise UpstreamUnavailableError("subgraph: liquidityPositions is not a list")
        positions = normalize_subgraph_positions(rows)
        logger.info("traderjoe_subgraph_client: fetched positions=%s", len(positions))
        return positions

    def _post_graphql(self, *, query: str, variables: dict) -> dict:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(
                    self.subgraph_url,
                    json={"query": query, "variables": variables},
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"subgraph: {exc}") from exc

        if not isinstance(payload, dict):
            raise UpstreamUnavailableError("subgraph: unexpected payload shape")
        errors = payload.get("errors") or []
        if errors:
            message = " | ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors
            )
            raise UpstreamUnavailableError(f"subgraph: {message}")
        return payload
