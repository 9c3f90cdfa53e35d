from __future__ import annotations

import pytest

from dexhub.domain.entities.chain import ChainType, LiquidityModel
from dexhub.domain.entities.token import TokenDescriptor
from dexhub.domain.exceptions import InvalidTokenError, UnsupportedChainError
from dexhub.domain.registry.chains import (
    DEFAULT_CHAIN_ID,
    chain_hex_id,
    find_chain,
    get_chain,
    get_chain_by_chain_id,
    list_chains,
    list_chains_by_type,
)
from dexhub.domain.registry.tokens import (
    feed_ids,
    find_token_by_address,
    get_all_tokens,
    get_native_token,
    get_stablecoins,
    get_token,
)


# Decimals must match the deployed contracts; amounts are off by 10**k otherwise.
PINNED_DECIMALS = [
    ("bsc", "BNB", 18),
    ("bsc", "USDT", 18),
    ("bsc", "USDC", 18),
    ("bsc", "DOGE", 8),
    ("avalanche", "USDC", 6),
    ("avalanche", "USDT.e", 6),
    ("avalanche", "WBTC.e", 8),
    ("avalanche", "WAVAX", 18),
    ("tron", "TRX", 6),
    ("tron", "USDT", 6),
    ("tron", "TUSD", 18),
    ("tron", "WBTC", 8),
    ("neo", "NEO", 0),
    ("neo", "GAS", 8),
    ("neo", "fUSDT", 6),
    ("base", "USDC", 6),
    ("base", "WETH", 18),
]


@pytest.mark.parametrize(("chain_id", "symbol", "decimals"), PINNED_DECIMALS)
def test_token_decimals_are_pinned(chain_id, symbol, decimals):
    assert get_token(chain_id, symbol).decimals == decimals


def test_get_token_rejects_unknown_symbol():
    with pytest.raises(InvalidTokenError):
        get_token("bsc", "NOPE")


def test_symbols_are_scoped_per_chain():
    assert get_token("bsc", "USDT").address != get_token("tron", "USDT").address
    assert get_token("bsc", "USDT").decimals != get_token("tron", "USDT").decimals


def test_all_registered_decimals_are_within_bounds():
    for chain in list_chains():
        for token in get_all_tokens(chain.id).values():
            assert 0 <= token.decimals <= 18


def test_token_descriptor_rejects_out_of_range_decimals():
    with pytest.raises(ValueError):
        TokenDescriptor(symbol="BAD", name="Bad", address="0x0", decimals=19)


def test_unknown_chain_has_no_tokens():
    assert dict(get_all_tokens("solana")) == {}


def test_feed_ids_are_distinct_and_ordered():
    ids = feed_ids("bsc")
    assert len(ids) == len(set(ids))
    assert ids[0] == "binancecoin"
    assert ids.count("binancecoin") == 1


def test_find_token_by_address_is_case_insensitive():
    token = find_token_by_address("bsc", "0x55D398326F99059FF775485246999027B3197955")
    assert token is not None
    assert token.symbol == "USDT"


def test_native_tokens():
    assert get_native_token("bsc").symbol == "BNB"
    assert get_native_token("tron").symbol == "TRX"
    assert get_native_token("neo").symbol == "NEO"


def test_stablecoins_for_avalanche():
    symbols = {token.symbol for token in get_stablecoins("avalanche")}
    assert {"USDC", "USDT", "USDC.e", "USDT.e", "DAI.e"} <= symbols


def test_every_chain_has_one_model_and_one_dex():
    chains = list_chains()
    assert {chain.id for chain in chains} == {
        "base", "ethereum", "arbitrum", "polygon", "optimism", "bsc", "avalanche", "tron", "neo",
    }
    for chain in chains:
        assert isinstance(chain.liquidity_model, LiquidityModel)
        assert chain.dex.name


def test_chain_lookups():
    assert DEFAULT_CHAIN_ID == "base"
    assert get_chain("AVALANCHE").liquidity_model is LiquidityModel.BIN_BASED
    assert get_chain_by_chain_id(56).id == "bsc"
    assert get_chain_by_chain_id("0x38").id == "bsc"
    assert get_chain_by_chain_id("tron-mainnet").id == "tron"
    assert find_chain("solana") is None
    with pytest.raises(UnsupportedChainError):
        get_chain("solana")


def test_chain_hex_id_only_for_evm():
    assert chain_hex_id(get_chain("bsc")) == "0x38"
    assert chain_hex_id(get_chain("neo")) is None
    assert {chain.id for chain in list_chains_by_type(ChainType.NEO)} == {"neo"}
