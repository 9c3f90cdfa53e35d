from __future__ import annotations

import logging

from dexhub.application.dto.quote import GetPairPriceInput, GetPairPriceOutput
from dexhub.application.ports.price_feed_port import PriceFeedPort
from dexhub.domain.exceptions import InvalidTokenError, PriceUnavailableError, UpstreamUnavailableError
from dexhub.domain.registry.chains import get_chain
from dexhub.domain.registry.tokens import get_token


logger = logging.getLogger(__name__)


class GetPairPriceUseCase:
    """Price of token0 in units of token1, from live feed prices only."""

    def __init__(self, *, price_feed_port: PriceFeedPort):
        self._price_feed_port = price_feed_port

    def execute(self, command: GetPairPriceInput) -> GetPairPriceOutput:
        chain = get_chain(command.chain_id)
        token0 = get_token(chain.id, command.token0)
        token1 = get_token(chain.id, command.token1)
        for token in (token0, token1):
            if not token.price_feed_id:
                raise InvalidTokenError(f"Token has no price feed on {chain.id}: {token.symbol}")

        ids = list(dict.fromkeys([token0.price_feed_id, token1.price_feed_id]))
        try:
            feed_prices = self._price_feed_port.fetch_usd_prices(feed_ids=ids)
        except UpstreamUnavailableError as exc:
            logger.warning("get_pair_price: feed_unavailable chain=%s error=%s", chain.id, exc)
            raise PriceUnavailableError("Price not available") from exc

        price0 = feed_prices.get(token0.price_feed_id)
        price1 = feed_prices.get(token1.price_feed_id)
        if not price0 or not price1 or price0 <= 0 or price1 <= 0:
            raise PriceUnavailableError("Price not available")

        return GetPairPriceOutput(
            token0=token0.symbol,
            token1=token1.symbol,
            price=price0 / price1,
            price0_usd=price0,
            price1_usd=price1,
        )
