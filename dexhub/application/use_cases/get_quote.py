from __future__ import annotations

from decimal import Decimal
import logging
from typing import Mapping, Sequence

from dexhub.application.dto.quote import GetPricesInput, GetQuoteInput
from dexhub.application.ports.routed_quote_port import RoutedQuotePort
from dexhub.application.use_cases.get_prices import GetPricesUseCase
from dexhub.domain.entities.quote import SOURCE_PRICE_ESTIMATE, QuoteResult, RoutedQuote
from dexhub.domain.entities.token import TokenDescriptor
from dexhub.domain.exceptions import PriceUnavailableError, QuoteInputError
from dexhub.domain.registry.chains import get_chain
from dexhub.domain.registry.dex_profiles import get_quote_profile
from dexhub.domain.registry.tokens import get_all_tokens, get_token
from dexhub.domain.services.fallback import guarded_attempt, run_fallback_chain
from dexhub.domain.services.quote_math import parse_base_units, price_ratio_amount_out


logger = logging.getLogger(__name__)

ROUTE_SEPARATOR = " → "
PIPS_PER_UNIT = Decimal("1000000")


def _route(*symbols: str) -> str:
    return ROUTE_SEPARATOR.join(symbols)


class GetQuoteUseCase:
    def __init__(
        self,
        *,
        get_prices_use_case: GetPricesUseCase,
        routed_quote_ports: Mapping[str, Sequence[RoutedQuotePort]] | None = None,
    ):
        self._get_prices_use_case = get_prices_use_case
        self._routed_quote_ports = dict(routed_quote_ports or {})

    def execute(self, command: GetQuoteInput) -> QuoteResult:
        if not command.token_in or not command.token_out or command.amount_in in (None, ""):
            raise QuoteInputError("Missing required parameters: tokenIn, tokenOut, amountIn.")

        chain = get_chain(command.chain_id)
        profile = get_quote_profile(chain.id)
        try:
            amount_in = parse_base_units(command.amount_in)
        except ValueError as exc:
            raise QuoteInputError(str(exc)) from exc

        token_in = get_token(chain.id, command.token_in)
        token_out = get_token(chain.id, command.token_out)

        source = profile.source
        ports = self._routed_quote_ports.get(chain.id, ())
        if ports:
            routed = self._try_routed_quote(chain.id, ports, token_in, token_out, amount_in)
            if routed is not None:
                return routed
            source = SOURCE_PRICE_ESTIMATE

        fee_rate = command.fee_rate if command.fee_rate is not None else profile.fee_rate
        snapshot = self._get_prices_use_case.execute(GetPricesInput(chain_id=chain.id)).snapshot
        price_in = snapshot.price_of(token_in.symbol)
        price_out = snapshot.price_of(token_out.symbol)
        for symbol, price in ((token_in.symbol, price_in), (token_out.symbol, price_out)):
            if price <= 0:
                raise PriceUnavailableError(f"Price not available for token: {symbol}")

        try:
            amount_out = price_ratio_amount_out(
                amount_in=amount_in,
                decimals_in=token_in.decimals,
                decimals_out=token_out.decimals,
                price_in=price_in,
                price_out=price_out,
                fee_rate=fee_rate,
            )
        except ValueError as exc:
            raise QuoteInputError(str(exc)) from exc

        fee_pips = int(fee_rate * PIPS_PER_UNIT)
        logger.info(
            "get_quote: price_estimate chain=%s route=%s/%s amount_in=%s amount_out=%s price_source=%s",
            chain.id,
            token_in.symbol,
            token_out.symbol,
            amount_in,
            amount_out,
            snapshot.source,
        )
        return QuoteResult(
            amount_out=str(amount_out),
            fee=fee_pips,
            fee_basis_points=Decimal(fee_pips) / Decimal("100"),
            route=_route(token_in.symbol, token_out.symbol),
            decimals_out=token_out.decimals,
            source=source,
        )

    def _try_routed_quote(
        self,
        chain_id: str,
        ports: Sequence[RoutedQuotePort],
        token_in: TokenDescriptor,
        token_out: TokenDescriptor,
        amount_in: int,
    ) -> QuoteResult | None:
        tokens = get_all_tokens(chain_id)

        def _fetch(port: RoutedQuotePort):
            def _call() -> RoutedQuote | None:
                quote = port.fetch_quote(
                    token_in=token_in,
                    token_out=token_out,
                    amount_in=amount_in,
                    tokens=tokens,
                )
                if quote is None or quote.amount_out <= 0:
                    return None
                return quote

            return _call

        outcome = run_fallback_chain(
            [guarded_attempt(port.source, _fetch(port)) for port in ports],
            label=f"quote chain={chain_id}",
        )
        if not outcome.ok:
            logger.info(
                "get_quote: routed_unavailable chain=%s fallback=%s error=%s",
                chain_id,
                SOURCE_PRICE_ESTIMATE,
                outcome.error,
            )
            return None

        quote = outcome.value
        fee_pips = quote.fee_pips if quote.fee_pips is not None else get_quote_profile(chain_id).fee_pips
        if quote.route_label:
            route = quote.route_label
        elif quote.route_symbols:
            route = _route(*quote.route_symbols)
        else:
            route = _route(token_in.symbol, token_out.symbol)
        return QuoteResult(
            amount_out=str(quote.amount_out),
            fee=fee_pips,
            fee_basis_points=Decimal(fee_pips) / Decimal("100"),
            route=route,
            decimals_out=token_out.decimals,
            source=outcome.source,
        )
