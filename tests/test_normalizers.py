from __future__ import annotations

import pytest

from dexhub.domain.registry.icons import generic_icon, get_icon
from dexhub.domain.services.pool_normalizer import (
    normalize_defillama_pools,
    normalize_geckoterminal_pools,
)
from dexhub.domain.services.position_normalizer import (
    normalize_barn_positions,
    normalize_flamingo_pools,
    normalize_subgraph_positions,
)


def test_subgraph_rows_map_to_positions():
    rows = [
        {
            "id": "lp-1",
            "liquidityTokenBalance": "12.5",
            "pair": {
                "id": "0xpair",
                "token0": {"id": "0xa", "symbol": "WAVAX"},
                "token1": {"id": "0xb", "symbol": "USDC"},
            },
        }
    ]

    (position,) = normalize_subgraph_positions(rows)

    assert position.token_id == "joe-0"
    assert position.token0.address == "0xa"
    assert position.token0.icon == get_icon("WAVAX")
    assert position.liquidity == "12.5"
    assert position.fee == 0.003
    assert position.in_range is True
    assert position.chain_type == "trader-joe-lb"
    assert position.extra["pairAddress"] == "0xpair"


def test_subgraph_rows_with_missing_fields_get_typed_defaults():
    (position,) = normalize_subgraph_positions([{"pair": None}])

    assert position.token0.symbol == "Token0"
    assert position.token1.symbol == "Token1"
    assert position.token0.address == ""
    assert position.liquidity == "0"


def test_barn_rows_drop_zero_balances_and_use_bin_step_fee():
    rows = [
        {"balance": "0", "tokenX": {"symbol": "JOE"}},
        {
            "balance": "5",
            "binStep": 25,
            "pairAddress": "0xpair",
            "tokenX": {"address": "0xx", "symbol": "JOE"},
            "tokenY": {"address": "0xy", "symbol": "WAVAX"},
        },
        {"balance": "1"},
    ]

    positions = normalize_barn_positions(rows)

    assert [row.token_id for row in positions] == ["joe-0", "joe-1"]
    assert positions[0].fee == pytest.approx(0.0025)
    assert positions[0].extra == {"pairAddress": "0xpair", "binStep": 25}
    assert positions[1].fee == pytest.approx(0.002)
    assert positions[1].token0.icon == generic_icon("")


def test_flamingo_pools_skip_incomplete_entries():
    rows = [
        {"poolHash": "0xp1", "token0": {"hash": "0xa", "symbol": "FLM", "decimals": 8}, "token1": {"contractHash": "0xb", "symbol": "GAS"}, "tvl": "1000"},
        {"poolHash": "0xp2", "token0": {"symbol": "FLM"}},
    ]

    (pool,) = normalize_flamingo_pools(rows)

    assert pool.pool_hash == "0xp1"
    assert pool.lp_token == "0xp1"
    assert pool.token1.address == "0xb"
    assert pool.token1.decimals == 8
    assert pool.fee == 0.003
    assert pool.tvl == "1000"
    assert pool.volume_24h == "0"


def _gecko_row(name: str, tvl: str, volume: str) -> dict:
    return {
        "id": f"base_{name}",
        "attributes": {"name": name, "reserve_in_usd": tvl, "volume_usd": {"h24": volume}},
    }


def test_geckoterminal_rows_filter_tvl_and_parse_fee_tier():
    rows = [
        _gecko_row("WETH / USDC 0.05%", "5000000", "2000000"),
        _gecko_row("TINY / WETH 1%", "5000", "10"),
        _gecko_row("AERO / WETH", "200000", "100000"),
    ]

    pools = normalize_geckoterminal_pools(rows, min_tvl_usd=100000)

    assert [pool.id for pool in pools] == ["base_WETH / USDC 0.05%", "base_AERO / WETH"]
    first, second = pools
    assert first.token0.symbol == "WETH"
    assert first.token1.symbol == "USDC"
    assert first.fee_tier == 0.05
    assert first.fees_24h == pytest.approx(1000.0)
    assert first.apr == pytest.approx(1000.0 * 365 / 5000000 * 100)
    assert second.fee_tier == 0.3


def test_geckoterminal_apr_is_capped():
    (pool,) = normalize_geckoterminal_pools(
        [_gecko_row("MEME / WETH 1%", "100001", "1000000000")],
        min_tvl_usd=100000,
    )
    assert pool.apr == 999.0


def test_geckoterminal_keeps_top_twenty():
    rows = [_gecko_row(f"T{i} / WETH", "200000", "1") for i in range(30)]
    assert len(normalize_geckoterminal_pools(rows, min_tvl_usd=100000)) == 20


def test_defillama_rows_filter_sort_and_map():
    rows = [
        {"chain": "Base", "project": "uniswap-v3", "symbol": "WETH-USDC", "pool": "abc-500", "tvlUsd": 300000, "apy": 12.5, "volumeUsd1d": 10000},
        {"chain": "Base", "project": "uniswap-v3", "symbol": "VIRTUAL-WETH", "pool": "xyz", "tvlUsd": 900000, "apy": 40},
        {"chain": "Ethereum", "project": "uniswap-v3", "symbol": "WETH-USDC", "pool": "eth", "tvlUsd": 10**9},
        {"chain": "Base", "project": "aerodrome", "symbol": "AERO-WETH", "pool": "aero", "tvlUsd": 10**9},
        {"chain": "Base", "project": "uniswap-v3", "symbol": "LOW-WETH", "pool": "low", "tvlUsd": 50},
    ]

    pools = normalize_defillama_pools(rows, chain="Base", project="uniswap-v3", min_tvl_usd=100000)

    assert [pool.id for pool in pools] == ["xyz", "abc-500"]
    assert pools[0].fee_tier == 0.3
    assert pools[0].volume_24h == 0.0
    assert pools[1].token0.symbol == "WETH"
    assert pools[1].token1.symbol == "USDC"
    assert pools[1].fee_tier == pytest.approx(0.05)
    assert pools[1].apr == 12.5
    assert pools[1].fees_24h == pytest.approx(5.0)


def test_flamingo_pool_keeps_zero_decimals_and_caps_large_ones():
    rows = [
        {
            "poolHash": "0xp",
            "token0": {"hash": "0xneo", "symbol": "NEO", "decimals": 0},
            "token1": {"hash": "0xgas", "symbol": "GAS", "decimals": 40},
        },
        {
            "poolHash": "0xq",
            "token0": {"hash": "0xa", "symbol": "FLM", "decimals": -1},
            "token1": {"hash": "0xb", "symbol": "GAS", "decimals": "eight"},
        },
    ]

    first, second = normalize_flamingo_pools(rows)

    assert first.token0.decimals == 0
    assert first.token1.decimals == 18
    assert second.token0.decimals == 8
    assert second.token1.decimals == 8


def test_geckoterminal_rows_with_non_object_attributes_are_skipped():
    rows = [
        {"id": "broken", "attributes": ["not", "a", "dict"]},
        {"id": "ok", "attributes": {"name": "WETH / USDC 0.05%", "reserve_in_usd": "200000", "volume_usd": None}},
    ]

    (pool,) = normalize_geckoterminal_pools(rows, min_tvl_usd=100000)

    assert pool.id == "ok"
    assert pool.volume_24h == 0.0
