from __future__ import annotations

from decimal import Decimal
import unittest

from dexhub.application.dto.quote import GetQuoteInput
from dexhub.application.use_cases.get_prices import GetPricesUseCase
from dexhub.application.use_cases.get_quote import GetQuoteUseCase
from dexhub.domain.entities.quote import RoutedQuote
from dexhub.domain.exceptions import (
    InvalidTokenError,
    PriceUnavailableError,
    QuoteInputError,
    UnsupportedChainError,
)
from tests.fakes import FakePriceFeed, FakeRoutedQuotePort


def _use_case(feed=None, routed=None) -> GetQuoteUseCase:
    return GetQuoteUseCase(
        get_prices_use_case=GetPricesUseCase(price_feed_port=feed or FakePriceFeed(fail=True)),
        routed_quote_ports=routed or {},
    )


class PriceEstimateQuoteTests(unittest.TestCase):
    def test_bnb_to_usdt_on_bsc(self):
        result = _use_case().execute(
            GetQuoteInput(chain_id="bsc", token_in="BNB", token_out="USDT", amount_in="1000000000000000000")
        )

        self.assertEqual(result.amount_out, "598500000000000000000")
        self.assertEqual(result.fee, 2500)
        self.assertEqual(result.fee_basis_points, Decimal("25"))
        self.assertEqual(result.route, "BNB → USDT")
        self.assertEqual(result.decimals_out, 18)
        self.assertEqual(result.source, "pancakeswap-v2")

    def test_avax_to_usdc_rescales_decimals(self):
        result = _use_case().execute(
            GetQuoteInput(chain_id="avalanche", token_in="AVAX", token_out="USDC", amount_in=str(10**18))
        )

        self.assertEqual(result.amount_out, "29910000")
        self.assertEqual(result.fee, 3000)
        self.assertEqual(result.source, "traderjoe-v1")

    def test_zero_amount_quotes_zero(self):
        result = _use_case().execute(
            GetQuoteInput(chain_id="bsc", token_in="BNB", token_out="USDT", amount_in="0")
        )
        self.assertEqual(result.amount_out, "0")

    def test_fee_override_zero_on_same_token(self):
        result = _use_case().execute(
            GetQuoteInput(
                chain_id="bsc",
                token_in="BNB",
                token_out="BNB",
                amount_in="123456789",
                fee_rate=Decimal("0"),
            )
        )
        self.assertEqual(result.amount_out, "123456789")
        self.assertEqual(result.fee, 0)

    def test_unknown_symbol_is_invalid_token(self):
        with self.assertRaises(InvalidTokenError):
            _use_case().execute(GetQuoteInput(chain_id="bsc", token_in="BNB", token_out="NOPE", amount_in="1"))

    def test_unknown_chain(self):
        with self.assertRaises(UnsupportedChainError):
            _use_case().execute(GetQuoteInput(chain_id="solana", token_in="SOL", token_out="USDC", amount_in="1"))

    def test_malformed_amount(self):
        for amount in ("1.5", "-3", "ten"):
            with self.assertRaises(QuoteInputError):
                _use_case().execute(
                    GetQuoteInput(chain_id="bsc", token_in="BNB", token_out="USDT", amount_in=amount)
                )

    def test_missing_parameters(self):
        with self.assertRaises(QuoteInputError):
            _use_case().execute(GetQuoteInput(chain_id="bsc", token_in="BNB", token_out="", amount_in="1"))

    def test_unpriced_token_fails_even_for_zero_amount(self):
        with self.assertRaises(PriceUnavailableError):
            _use_case().execute(
                GetQuoteInput(chain_id="base", token_in="BRETT", token_out="USDC", amount_in="0")
            )


class RoutedQuoteTests(unittest.TestCase):
    def test_routed_quote_wins_when_available(self):
        port = FakeRoutedQuotePort("sunswap", RoutedQuote(amount_out=119000, route_label="TRX -> USDT"))
        feed = FakePriceFeed()
        result = _use_case(feed=feed, routed={"tron": (port,)}).execute(
            GetQuoteInput(chain_id="tron", token_in="TRX", token_out="USDT", amount_in="1000000")
        )

        self.assertEqual(result.amount_out, "119000")
        self.assertEqual(result.source, "sunswap")
        self.assertEqual(result.route, "TRX -> USDT")
        self.assertEqual(result.fee, 3000)
        self.assertEqual(feed.calls, [])

    def test_route_symbols_build_the_label(self):
        port = FakeRoutedQuotePort(
            "flamingo-dex",
            RoutedQuote(amount_out=4200000000, route_symbols=("GAS", "bNEO", "FLM")),
        )
        result = _use_case(routed={"neo": (port,)}).execute(
            GetQuoteInput(chain_id="neo", token_in="GAS", token_out="FLM", amount_in="100000000")
        )
        self.assertEqual(result.route, "GAS → bNEO → FLM")
        self.assertEqual(result.decimals_out, 8)

    def test_routed_fee_tier_is_reported(self):
        port = FakeRoutedQuotePort("uniswap-v3", RoutedQuote(amount_out=2400000000, fee_pips=500))
        result = _use_case(routed={"base": (port,)}).execute(
            GetQuoteInput(chain_id="base", token_in="WETH", token_out="USDC", amount_in=str(10**18))
        )
        self.assertEqual(result.fee, 500)
        self.assertEqual(result.fee_basis_points, Decimal("5"))

    def test_routed_failure_degrades_to_price_estimate(self):
        port = FakeRoutedQuotePort("sunswap", fail=True)
        result = _use_case(routed={"tron": (port,)}).execute(
            GetQuoteInput(chain_id="tron", token_in="TRX", token_out="USDT", amount_in="1000000")
        )

        self.assertEqual(port.calls, 1)
        self.assertEqual(result.source, "price-estimate")
        self.assertEqual(result.amount_out, "119640")
        self.assertEqual(result.route, "TRX → USDT")

    def test_zero_routed_amount_is_treated_as_unavailable(self):
        port = FakeRoutedQuotePort("flamingo-dex", RoutedQuote(amount_out=0))
        result = _use_case(routed={"neo": (port,)}).execute(
            GetQuoteInput(chain_id="neo", token_in="GAS", token_out="fUSDT", amount_in="100000000")
        )
        # 1 GAS @ 4.5 USD -> 4.4865 fUSDT
        self.assertEqual(result.source, "price-estimate")
        self.assertEqual(result.amount_out, "4486500")

    def test_routed_sources_are_tried_in_order(self):
        first = FakeRoutedQuotePort("primary", fail=True)
        second = FakeRoutedQuotePort("secondary", RoutedQuote(amount_out=5))
        result = _use_case(routed={"tron": (first, second)}).execute(
            GetQuoteInput(chain_id="tron", token_in="TRX", token_out="USDT", amount_in="1")
        )
        self.assertEqual((first.calls, second.calls), (1, 1))
        self.assertEqual(result.source, "secondary")
