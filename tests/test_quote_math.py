from __future__ import annotations

from decimal import Decimal
import unittest

from dexhub.domain.services.quote_math import parse_base_units, price_ratio_amount_out, to_human


def _quote(amount_in: int, *, fee_rate: str = "0.003", decimals_in: int = 18, decimals_out: int = 18,
           price_in: str = "600", price_out: str = "1") -> int:
    return price_ratio_amount_out(
        amount_in=amount_in,
        decimals_in=decimals_in,
        decimals_out=decimals_out,
        price_in=Decimal(price_in),
        price_out=Decimal(price_out),
        fee_rate=Decimal(fee_rate),
    )


class PriceRatioAmountOutTests(unittest.TestCase):
    def test_bnb_to_usdt_with_pancakeswap_fee(self):
        self.assertEqual(_quote(10**18, fee_rate="0.0025"), 598500000000000000000)

    def test_higher_fee_returns_strictly_less(self):
        amount = 123456789012345678
        outputs = [_quote(amount, fee_rate=fee) for fee in ("0", "0.0005", "0.0025", "0.003", "0.01")]
        for lower_fee_out, higher_fee_out in zip(outputs, outputs[1:]):
            self.assertGreater(lower_fee_out, higher_fee_out)

    def test_doubling_input_doubles_output_within_one_unit(self):
        for amount in (1, 7, 10**6 + 3, 987654321987654321):
            single = _quote(amount, price_in="0.12", price_out="1", decimals_in=6, decimals_out=6)
            double = _quote(2 * amount, price_in="0.12", price_out="1", decimals_in=6, decimals_out=6)
            self.assertLessEqual(abs(double - 2 * single), 1)

    def test_same_token_without_fee_is_identity(self):
        self.assertEqual(_quote(10**18 + 1, fee_rate="0", price_in="600", price_out="600"), 10**18 + 1)

    def test_same_price_rescales_by_decimals_only(self):
        self.assertEqual(
            _quote(5 * 10**6, fee_rate="0", decimals_in=6, decimals_out=18, price_in="1", price_out="1"),
            5 * 10**18,
        )

    def test_zero_amount_returns_zero(self):
        self.assertEqual(_quote(0), 0)

    def test_result_is_floored(self):
        # 1 base unit at 6 decimals worth 0.12 USD -> 0.11964 out units
        self.assertEqual(_quote(1, decimals_in=6, decimals_out=6, price_in="0.12"), 0)

    def test_rejects_non_positive_prices(self):
        with self.assertRaises(ValueError):
            _quote(1, price_out="0")

    def test_rejects_fee_outside_unit_interval(self):
        with self.assertRaises(ValueError):
            _quote(1, fee_rate="1")


class ParseBaseUnitsTests(unittest.TestCase):
    def test_accepts_large_integer_strings(self):
        raw = "1" + "0" * 40
        self.assertEqual(parse_base_units(raw), 10**40)

    def test_rejects_decimals_and_negatives(self):
        for raw in ("1.5", "-1", "", "abc", "1e18"):
            with self.assertRaises(ValueError):
                parse_base_units(raw)

    def test_rejects_bool(self):
        with self.assertRaises(ValueError):
            parse_base_units(True)

    def test_to_human(self):
        self.assertEqual(to_human(1500000, 6), Decimal("1.5"))
