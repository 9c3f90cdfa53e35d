from __future__ import annotations

import pytest

from dexhub.application.dto.liquidity_config import GetLiquidityConfigInput
from dexhub.application.use_cases.get_liquidity_config import GetLiquidityConfigUseCase
from dexhub.domain.entities.liquidity_config import FeeTierOption, TickBasedConfig
from dexhub.domain.registry.liquidity_configs import (
    TICK_BASED_CONFIG,
    get_liquidity_config,
    is_bin_based,
    is_simple_lp,
    is_tick_based,
    tick_spacing_for_fee,
)


def test_unknown_chain_gets_tick_based_default():
    assert get_liquidity_config("solana") is TICK_BASED_CONFIG
    assert get_liquidity_config(None) is TICK_BASED_CONFIG


def test_models_per_chain():
    assert is_tick_based(get_liquidity_config("base"))
    assert is_bin_based(get_liquidity_config("avalanche"))
    assert is_simple_lp(get_liquidity_config("neo"))


def test_uniswap_tick_config():
    config = get_liquidity_config("ethereum")
    assert [tier.value for tier in config.fee_tiers] == [100, 500, 3000, 10000]
    assert config.default_fee_tier == 3000
    assert config.default_range_percent == 30
    assert tick_spacing_for_fee(config, 500) == 10


def test_pancakeswap_uses_2500_tier():
    config = get_liquidity_config("bsc")
    assert config.default_fee_tier == 2500
    assert tick_spacing_for_fee(config, 2500) == 50
    with pytest.raises(ValueError):
        tick_spacing_for_fee(config, 3000)


def test_trader_joe_bin_config():
    config = get_liquidity_config("avalanche")
    assert [step.value for step in config.bin_steps] == [1, 5, 10, 15, 20, 25]
    assert config.default_bin_step == 15
    assert config.default_bin_range == 10
    assert config.default_shape == "uniform"
    assert {shape.value for shape in config.shapes} == {"uniform", "curve", "bid-ask"}


def test_tick_config_rejects_default_outside_tiers():
    with pytest.raises(ValueError):
        TickBasedConfig(
            dex_name="X",
            fee_tiers=(FeeTierOption(500, "0.05%", ""),),
            tick_spacing={500: 10},
            default_fee_tier=3000,
            default_range_percent=30,
            range_options=(10,),
        )


def test_use_case_passes_chain_through():
    output = GetLiquidityConfigUseCase().execute(GetLiquidityConfigInput(chain_id="tron"))
    assert output.config.model == "tick-based"
    assert output.config.dex_name == "SunSwap V3"
