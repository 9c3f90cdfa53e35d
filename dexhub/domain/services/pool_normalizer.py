from __future__ import annotations

import math
import re
from typing import Any, Mapping

from dexhub.domain.entities.pool import PoolListing, PoolListingToken
from dexhub.domain.registry.icons import get_icon


MAX_LISTED_POOLS = 20
MAX_DISPLAY_APR = 999.0
DEFAULT_FEE_TIER_PERCENT = 0.3
UNKNOWN_SYMBOL = "???"

_NAME_FEE_PATTERN = re.compile(r"(\d+\.\d+)%")
_POOL_ID_FEE_PATTERN = re.compile(r"(\d+)$")


def _float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _token(symbol: str | None) -> PoolListingToken:
    label = (symbol or "").strip() or UNKNOWN_SYMBOL
    return PoolListingToken(symbol=label, icon=get_icon(label))


def normalize_geckoterminal_pools(rows: list[Any], *, min_tvl_usd: float) -> list[PoolListing]:
    listings: list[PoolListing] = []
    for index, raw in enumerate(rows):
        if not isinstance(raw, Mapping):
            continue
        attrs = _mapping(raw.get("attributes"))
        tvl = _float(attrs.get("reserve_in_usd"))
        if tvl <= min_tvl_usd:
            continue
        name = str(attrs.get("name") or f"{UNKNOWN_SYMBOL}/{UNKNOWN_SYMBOL}")
        parts = [part.strip() for part in name.split(" / ")]
        symbol0 = parts[0] if parts else None
        # trailing "0.3%" belongs to the fee, not the quote token
        symbol1 = parts[1].split(" ")[0] if len(parts) > 1 else None

        volume_24h = _float(_mapping(attrs.get("volume_usd")).get("h24"))
        fee_match = _NAME_FEE_PATTERN.search(name)
        fee_tier = float(fee_match.group(1)) if fee_match else DEFAULT_FEE_TIER_PERCENT
        fees_24h = volume_24h * (fee_tier / 100)
        apr = (fees_24h * 365 / tvl) * 100 if tvl > 0 else 0.0

        listings.append(
            PoolListing(
                id=str(raw.get("id") or f"pool-{index}"),
                token0=_token(symbol0),
                token1=_token(symbol1),
                tvl=tvl,
                apr=min(apr, MAX_DISPLAY_APR),
                volume_24h=volume_24h,
                fees_24h=fees_24h,
                fee_tier=fee_tier,
            )
        )
        if len(listings) == MAX_LISTED_POOLS:
            break
    return listings


def normalize_defillama_pools(
    rows: list[Any],
    *,
    chain: str,
    project: str,
    min_tvl_usd: float,
) -> list[PoolListing]:
    candidates = [
        row
        for row in rows
        if isinstance(row, Mapping)
        and row.get("chain") == chain
        and row.get("project") == project
        and _float(row.get("tvlUsd")) > min_tvl_usd
    ]
    candidates.sort(key=lambda row: _float(row.get("tvlUsd")), reverse=True)

    listings: list[PoolListing] = []
    for index, row in enumerate(candidates[:MAX_LISTED_POOLS]):
        symbols = str(row.get("symbol") or "").split("-")
        fee_match = _POOL_ID_FEE_PATTERN.search(str(row.get("pool") or ""))
        fee_tier = int(fee_match.group(1)) / 10000 if fee_match else DEFAULT_FEE_TIER_PERCENT
        volume_24h = _float(row.get("volumeUsd1d"))
        listings.append(
            PoolListing(
                id=str(row.get("pool") or f"pool-{index}"),
                token0=_token(symbols[0] if symbols else None),
                token1=_token(symbols[1] if len(symbols) > 1 else None),
                tvl=_float(row.get("tvlUsd")),
                apr=_float(row.get("apy")),
                volume_24h=volume_24h,
                fees_24h=volume_24h * (fee_tier / 100),
                fee_tier=fee_tier,
            )
        )
    return listings
