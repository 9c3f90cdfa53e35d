from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal, localcontext


# Wide enough for 78-digit uint256 amounts scaled by 10**18.
QUOTE_PRECISION = 120


def parse_base_units(value: str | int) -> int:
    """Parse a non-negative integer amount expressed in base units."""
    if isinstance(value, bool):
        raise ValueError("amount must be an integer string.")
    if isinstance(value, int):
        amount = value
    else:
        raw = str(value).strip()
        if not raw.isdigit():
            raise ValueError("amount must be a non-negative integer string in base units.")
        amount = int(raw)
    if amount < 0:
        raise ValueError("amount must be non-negative.")
    return amount


def to_human(amount_base_units: int, decimals: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = QUOTE_PRECISION
        return Decimal(amount_base_units) / (Decimal(10) ** decimals)


def price_ratio_amount_out(
    *,
    amount_in: int,
    decimals_in: int,
    decimals_out: int,
    price_in: Decimal,
    price_out: Decimal,
    fee_rate: Decimal,
) -> int:
    """Approximate a swap output from independent USD prices.

    No pool curve is simulated, so the result carries no slippage. The output
    is floored to base units so a quote never promises more than the inputs
    are worth.
    """
    if price_in <= 0 or price_out <= 0:
        raise ValueError("prices must be positive.")
    if not Decimal("0") <= fee_rate < Decimal("1"):
        raise ValueError("fee_rate must be within [0, 1).")

    with localcontext() as ctx:
        ctx.prec = QUOTE_PRECISION
        amount_in_human = Decimal(amount_in) / (Decimal(10) ** decimals_in)
        usd_value = amount_in_human * price_in
        amount_out_human = usd_value / price_out
        amount_out_human *= Decimal("1") - fee_rate
        scaled = amount_out_human * (Decimal(10) ** decimals_out)
        return int(scaled.to_integral_value(rounding=ROUND_FLOOR))
