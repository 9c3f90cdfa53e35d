from __future__ import annotations

import logging
from typing import Mapping, Sequence

import httpx

from dexhub.domain.entities.quote import RoutedQuote
from dexhub.domain.entities.token import TokenDescriptor
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.uniswap_quoter import (
    BASE_QUOTER_V2_ADDRESS,
    QUOTER_FEE_TIERS,
    decode_amount_out,
    encode_quote_exact_input_single,
    quoter_address_for,
)


logger = logging.getLogger(__name__)


class UniswapQuoterClient:
    """Best ``quoteExactInputSingle`` output across the configured fee tiers."""

    source = "uniswap-v3"

    def __init__(
        self,
        rpc_url: str,
        timeout_seconds: float,
        quoter_address: str = BASE_QUOTER_V2_ADDRESS,
        fee_tiers: Sequence[int] = QUOTER_FEE_TIERS,
    ):
        self.rpc_url = rpc_url
        self.timeout = timeout_seconds
        self.quoter_address = quoter_address
        self.fee_tiers = tuple(fee_tiers)

    def fetch_quote(
        self,
        *,
        token_in: TokenDescriptor,
        token_out: TokenDescriptor,
        amount_in: int,
        tokens: Mapping[str, TokenDescriptor],
    ) -> RoutedQuote | None:
        address_in = quoter_address_for(token_in)
        address_out = quoter_address_for(token_out)
        if address_in.lower() == address_out.lower() or amount_in <= 0:
            return None

        best_amount: int | None = None
        best_fee: int | None = None
        errors: list[str] = []
        for fee in self.fee_tiers:
            call_data = encode_quote_exact_input_single(
                token_in=address_in,
                token_out=address_out,
                amount_in=amount_in,
                fee=fee,
            )
            try:
                payload = self._eth_call(call_data)
            except UpstreamUnavailableError as exc:
                errors.append(f"fee={fee}: {exc}")
                continue
            if not isinstance(payload, dict) or payload.get("error"):
                # Reverts when no pool exists for this tier.
                continue
            amount = decode_amount_out(payload.get("result"))
            if amount and (best_amount is None or amount > best_amount):
                best_amount = amount
                best_fee = fee

        if best_amount is None:
            if errors:
                raise UpstreamUnavailableError("; ".join(errors))
            return None
        logger.info("uniswap_quoter_client: quoted fee=%s amount_out=%s", best_fee, best_amount)
        return RoutedQuote(amount_out=best_amount, fee_pips=best_fee)

    def _eth_call(self, call_data: str) -> object:
        body = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "eth_call",
            "params": [{"to": self.quoter_address, "data": call_data}, "latest"],
        }
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.rpc_url, json=body)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"rpc: {exc}") from exc
