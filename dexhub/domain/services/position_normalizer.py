from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from dexhub.domain.entities.position import LpPool, PoolToken, Position, PositionToken
from dexhub.domain.entities.token import MAX_TOKEN_DECIMALS
from dexhub.domain.registry.icons import get_icon


TRADER_JOE_DEX_NAME = "Trader Joe"
TRADER_JOE_CHAIN_TYPE = "trader-joe-lb"
TRADER_JOE_DEFAULT_FEE = 0.003
TRADER_JOE_DEFAULT_BIN_STEP = 20
FLAMINGO_DEFAULT_FEE = 0.003
FLAMINGO_DEFAULT_DECIMALS = 8


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _text(value: Any, default: str = "") -> str:
    if value is None or value == "":
        return default
    return str(value)


def _positive_number(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if number > 0 else default


def _decimals(value: Any, default: int) -> int:
    """Token decimals: 0 is kept, missing or invalid values take ``default``."""
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if number < 0:
        return default
    return min(number, MAX_TOKEN_DECIMALS)


def _decimal_or_zero(value: Any) -> Decimal:
    try:
        number = Decimal(str(value if value not in (None, "") else "0"))
    except InvalidOperation:
        return Decimal("0")
    return number if number.is_finite() else Decimal("0")


def _position_token(raw: Any, *, address_key: str, fallback_symbol: str) -> PositionToken:
    data = _mapping(raw)
    symbol = _text(data.get("symbol"), fallback_symbol)
    return PositionToken(
        address=_text(data.get(address_key)),
        symbol=symbol,
        icon=get_icon(_text(data.get("symbol"))),
    )


def normalize_subgraph_positions(rows: list[Any]) -> list[Position]:
    """Trader Joe subgraph ``user.liquidityPositions`` rows."""
    positions: list[Position] = []
    for index, raw in enumerate(rows):
        row = _mapping(raw)
        pair = _mapping(row.get("pair"))
        positions.append(
            Position(
                token_id=f"joe-{index}",
                token0=_position_token(pair.get("token0"), address_key="id", fallback_symbol="Token0"),
                token1=_position_token(pair.get("token1"), address_key="id", fallback_symbol="Token1"),
                fee=TRADER_JOE_DEFAULT_FEE,
                tick_lower=0,
                tick_upper=0,
                liquidity=_text(row.get("liquidityTokenBalance"), "0"),
                tokens_owed0="0",
                tokens_owed1="0",
                in_range=True,
                dex_name=TRADER_JOE_DEX_NAME,
                chain_type=TRADER_JOE_CHAIN_TYPE,
                extra={"pairAddress": _text(pair.get("id"))},
            )
        )
    return positions


def normalize_barn_positions(rows: list[Any]) -> list[Position]:
    """Trader Joe backend ``/v1/user/{address}/pool`` entries, zero balances dropped."""
    funded = [
        _mapping(raw)
        for raw in rows
        if _decimal_or_zero(_mapping(raw).get("balance")) > 0
    ]
    positions: list[Position] = []
    for index, row in enumerate(funded):
        bin_step = _positive_int(row.get("binStep"), TRADER_JOE_DEFAULT_BIN_STEP)
        positions.append(
            Position(
                token_id=f"joe-{index}",
                token0=_position_token(row.get("tokenX"), address_key="address", fallback_symbol="Token0"),
                token1=_position_token(row.get("tokenY"), address_key="address", fallback_symbol="Token1"),
                fee=bin_step / 10000,
                tick_lower=0,
                tick_upper=0,
                liquidity=_text(row.get("balance"), "0"),
                tokens_owed0="0",
                tokens_owed1="0",
                in_range=True,
                dex_name=TRADER_JOE_DEX_NAME,
                chain_type=TRADER_JOE_CHAIN_TYPE,
                extra={"pairAddress": _text(row.get("pairAddress")), "binStep": bin_step},
            )
        )
    return positions


def _pool_token(raw: Any, *, fallback_symbol: str) -> PoolToken:
    data = _mapping(raw)
    symbol = _text(data.get("symbol"), fallback_symbol)
    return PoolToken(
        address=_text(data.get("hash") or data.get("contractHash")),
        symbol=symbol,
        decimals=_decimals(data.get("decimals"), FLAMINGO_DEFAULT_DECIMALS),
        icon=get_icon(_text(data.get("symbol"))),
    )


def normalize_flamingo_pools(rows: list[Any]) -> list[LpPool]:
    pools: list[LpPool] = []
    for raw in rows:
        row = _mapping(raw)
        if not row.get("token0") or not row.get("token1"):
            continue
        pool_hash = _text(row.get("poolHash") or row.get("hash"))
        pools.append(
            LpPool(
                pool_hash=pool_hash,
                lp_token=_text(row.get("lpToken") or pool_hash),
                token0=_pool_token(row.get("token0"), fallback_symbol="Token0"),
                token1=_pool_token(row.get("token1"), fallback_symbol="Token1"),
                fee=_positive_number(row.get("fee"), FLAMINGO_DEFAULT_FEE),
                tvl=_text(row.get("tvl"), "0"),
                volume_24h=_text(row.get("volume24h"), "0"),
            )
        )
    return pools
