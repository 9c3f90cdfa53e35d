from __future__ import annotations

import logging
from typing import Mapping, Sequence

import httpx

from dexhub.domain.entities.quote import RoutedQuote
from dexhub.domain.entities.token import TokenDescriptor
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.flamingo_route import (
    build_get_amounts_out_params,
    build_swap_path,
    decode_amounts_out,
    route_symbols,
    router_amount_in,
    router_amount_out,
)


logger = logging.getLogger(__name__)


class FlamingoRouterClient:
    """``getAmountsOut`` on the Flamingo router, read through NEO N3 RPC nodes."""

    source = "flamingo-dex"

    def __init__(self, rpc_nodes: Sequence[str], timeout_seconds: float):
        self.rpc_nodes = tuple(rpc_nodes)
        self.timeout = timeout_seconds

    def fetch_quote(
        self,
        *,
        token_in: TokenDescriptor,
        token_out: TokenDescriptor,
        amount_in: int,
        tokens: Mapping[str, TokenDescriptor],
    ) -> RoutedQuote | None:
        path = build_swap_path(token_in, token_out)
        body = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "invokefunction",
            "params": build_get_amounts_out_params(router_amount_in(token_in, amount_in), path),
        }

        errors: list[str] = []
        for node in self.rpc_nodes:
            try:
                payload = self._post_rpc(node, body)
            except UpstreamUnavailableError as exc:
                logger.warning("flamingo_router_client: node_failed node=%s error=%s", node, exc)
                errors.append(f"{node}: {exc}")
                continue

            result = payload.get("result") if isinstance(payload, dict) else None
            amount = decode_amounts_out(result) if isinstance(result, dict) else None
            if amount is None:
                state = result.get("state") if isinstance(result, dict) else None
                logger.warning("flamingo_router_client: unexpected_result node=%s state=%s", node, state)
                errors.append(f"{node}: unexpected result state={state}")
                continue

            amount_out = router_amount_out(token_out, amount)
            logger.info(
                "flamingo_router_client: quoted node=%s path_len=%s amount_out=%s",
                node,
                len(path),
                amount_out,
            )
            return RoutedQuote(amount_out=amount_out, route_symbols=route_symbols(path, tokens))

        raise UpstreamUnavailableError("; ".join(errors) or "no NEO RPC node configured")

    def _post_rpc(self, url: str, body: dict) -> object:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, json=body)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(str(exc)) from exc
