"""Flamingo router helpers for NEO N3 quotes.

NEO itself is indivisible and trades on Flamingo as bNEO (8 decimals), so
paths are routed through the bNEO contract and NEO amounts are rescaled on
the way in and out.
"""

from __future__ import annotations

import base64
from typing import Any, Mapping

from dexhub.domain.entities.token import TokenDescriptor


FLAMINGO_SWAP_ROUTER = "0xde3a4b093abbd07e9a69cdec88a54d9a1fe14975"
BNEO_CONTRACT = "0x48c40d4666f93408be1bef038b6722404d9a4c2a"
NEO_SYMBOL = "NEO"
BNEO_UNITS_PER_NEO = 10**8
VM_STATE_HALT = "HALT"


def _effective_address(token: TokenDescriptor) -> str:
    return BNEO_CONTRACT if token.symbol == NEO_SYMBOL else token.address


def build_swap_path(token_in: TokenDescriptor, token_out: TokenDescriptor) -> list[str]:
    effective_in = _effective_address(token_in)
    effective_out = _effective_address(token_out)
    if BNEO_CONTRACT in (effective_in, effective_out):
        return [effective_in, effective_out]
    return [effective_in, BNEO_CONTRACT, effective_out]


def router_amount_in(token_in: TokenDescriptor, amount_in: int) -> int:
    if token_in.symbol == NEO_SYMBOL:
        return amount_in * BNEO_UNITS_PER_NEO
    return amount_in


def router_amount_out(token_out: TokenDescriptor, amount_out: int) -> int:
    if token_out.symbol == NEO_SYMBOL:
        return amount_out // BNEO_UNITS_PER_NEO
    return amount_out


def build_get_amounts_out_params(amount_in: int, path: list[str]) -> list[Any]:
    return [
        FLAMINGO_SWAP_ROUTER,
        "getAmountsOut",
        [
            {"type": "Integer", "value": str(amount_in)},
            {"type": "Array", "value": [{"type": "Hash160", "value": item} for item in path]},
        ],
    ]


def decode_stack_integer(item: Mapping[str, Any]) -> int | None:
    """Decode an ``Integer`` or little-endian base64 ``ByteString`` stack item."""
    item_type = item.get("type")
    value = item.get("value")
    if item_type == "Integer":
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
    if item_type == "ByteString":
        try:
            raw = base64.b64decode(str(value or ""), validate=True)
        except ValueError:
            return None
        return int.from_bytes(raw, "little") if raw else 0
    return None


def decode_amounts_out(result: Mapping[str, Any]) -> int | None:
    """Last amount of a HALTed ``getAmountsOut`` invocation, if any."""
    if result.get("state") != VM_STATE_HALT:
        return None
    stack = result.get("stack") or []
    if not stack or not isinstance(stack[0], Mapping):
        return None
    top = stack[0]
    amounts = top.get("value") or []
    if top.get("type") != "Array" or not amounts or not isinstance(amounts[-1], Mapping):
        return None
    return decode_stack_integer(amounts[-1])


def route_symbols(path: list[str], tokens: Mapping[str, TokenDescriptor]) -> tuple[str, ...]:
    by_address = {token.address.lower(): symbol for symbol, token in tokens.items()}
    return tuple(by_address.get(address.lower(), address[:8]) for address in path)
