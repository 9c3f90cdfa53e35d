from __future__ import annotations

import logging

from dexhub.application.dto.quote import GetPricesInput, GetPricesOutput
from dexhub.application.ports.price_feed_port import PriceFeedPort
from dexhub.domain.entities.quote import PRICE_SOURCE_DEFAULTS, PRICE_SOURCE_FEED, PriceSnapshot
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.registry.chains import get_chain
from dexhub.domain.registry.default_prices import get_default_prices
from dexhub.domain.registry.tokens import feed_ids, get_all_tokens
from dexhub.domain.services.price_resolution import resolve_symbol_prices


logger = logging.getLogger(__name__)


class GetPricesUseCase:
    """USD price for every registered token of a chain.

    The feed is queried once per call with every distinct feed id. When it
    fails, the static defaults table answers instead; nothing is cached.
    """

    def __init__(self, *, price_feed_port: PriceFeedPort):
        self._price_feed_port = price_feed_port

    def execute(self, command: GetPricesInput) -> GetPricesOutput:
        chain = get_chain(command.chain_id)
        tokens = get_all_tokens(chain.id)
        ids = feed_ids(chain.id)

        feed_prices = None
        if ids:
            try:
                feed_prices = self._price_feed_port.fetch_usd_prices(feed_ids=ids)
            except UpstreamUnavailableError as exc:
                logger.warning(
                    "get_prices: feed_unavailable chain=%s using=defaults error=%s",
                    chain.id,
                    exc,
                )

        prices = resolve_symbol_prices(
            tokens=tokens,
            feed_prices=feed_prices,
            default_prices=get_default_prices(chain.id),
        )
        return GetPricesOutput(
            chain_id=chain.id,
            snapshot=PriceSnapshot(
                prices=prices,
                source=PRICE_SOURCE_FEED if feed_prices is not None else PRICE_SOURCE_DEFAULTS,
            ),
            tokens=tokens,
        )
