from __future__ import annotations

from dexhub.domain.entities.token import TokenDescriptor
from dexhub.domain.registry.tokens import EVM_NATIVE_ADDRESS


# QuoterV2 on Base.
BASE_QUOTER_V2_ADDRESS = "0x3d4e44Eb1374240CE5F1B871ab261CD16335B76a"
BASE_WETH_ADDRESS = "0x4200000000000000000000000000000000000006"
QUOTE_EXACT_INPUT_SINGLE_SELECTOR = "0xc6a5026a"
QUOTER_FEE_TIERS = (500, 3000, 10000)

_WORD_HEX_CHARS = 64


def _word(value: int) -> str:
    if value < 0 or value >= 2**256:
        raise ValueError("value does not fit in a uint256 word.")
    return format(value, "x").rjust(_WORD_HEX_CHARS, "0")


def _address_word(address: str) -> str:
    raw = address.lower().removeprefix("0x")
    if len(raw) != 40:
        raise ValueError(f"invalid EVM address: {address}")
    return raw.rjust(_WORD_HEX_CHARS, "0")


def quoter_address_for(token: TokenDescriptor, *, wrapped_native: str = BASE_WETH_ADDRESS) -> str:
    if token.address.lower() == EVM_NATIVE_ADDRESS:
        return wrapped_native
    return token.address


def encode_quote_exact_input_single(
    *,
    token_in: str,
    token_out: str,
    amount_in: int,
    fee: int,
) -> str:
    """Calldata for ``quoteExactInputSingle((tokenIn, tokenOut, amountIn, fee, sqrtPriceLimitX96))``."""
    return QUOTE_EXACT_INPUT_SINGLE_SELECTOR + "".join(
        (
            _address_word(token_in),
            _address_word(token_out),
            _word(amount_in),
            _word(fee),
            _word(0),
        )
    )


def decode_amount_out(result: str | None) -> int | None:
    """First return word (``amountOut``) of the quoter call."""
    raw = (result or "").removeprefix("0x")
    if len(raw) < _WORD_HEX_CHARS:
        return None
    try:
        return int(raw[:_WORD_HEX_CHARS], 16)
    except ValueError:
        return None
