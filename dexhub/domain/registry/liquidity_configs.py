from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Mapping

from dexhub.domain.entities.liquidity_config import (
    BinBasedConfig,
    BinStepOption,
    FeeTierOption,
    LiquidityConfig,
    ShapeOption,
    SimpleLpConfig,
    TickBasedConfig,
)


TICK_BASED_CONFIG = TickBasedConfig(
    dex_name="Uniswap V3",
    fee_tiers=(
        FeeTierOption(100, "0.01%", "Best for stable pairs"),
        FeeTierOption(500, "0.05%", "Best for stable pairs"),
        FeeTierOption(3000, "0.3%", "Best for most pairs"),
        FeeTierOption(10000, "1%", "Best for exotic pairs"),
    ),
    tick_spacing={100: 1, 500: 10, 3000: 60, 10000: 200},
    default_fee_tier=3000,
    default_range_percent=30,
    range_options=(10, 20, 30, 50),
)

PANCAKESWAP_TICK_CONFIG = replace(
    TICK_BASED_CONFIG,
    dex_name="PancakeSwap V3",
    fee_tiers=(
        FeeTierOption(100, "0.01%", "Best for stable pairs"),
        FeeTierOption(500, "0.05%", "Best for stable pairs"),
        FeeTierOption(2500, "0.25%", "Best for most pairs"),
        FeeTierOption(10000, "1%", "Best for exotic pairs"),
    ),
    tick_spacing={100: 1, 500: 10, 2500: 50, 10000: 200},
    default_fee_tier=2500,
)

SUNSWAP_TICK_CONFIG = replace(TICK_BASED_CONFIG, dex_name="SunSwap V3")

BIN_BASED_CONFIG = BinBasedConfig(
    dex_name="Trader Joe",
    bin_steps=(
        BinStepOption(1, "1 bp", "Ultra-tight (stable pairs)"),
        BinStepOption(5, "5 bp", "Tight range pairs"),
        BinStepOption(10, "10 bp", "Standard pairs"),
        BinStepOption(15, "15 bp", "Medium volatility"),
        BinStepOption(20, "20 bp", "High volatility"),
        BinStepOption(25, "25 bp", "Very high volatility"),
    ),
    default_bin_step=15,
    default_bin_range=10,
    bin_range_options=(5, 10, 20, 50),
    shapes=(
        ShapeOption("uniform", "Uniform", "Equal distribution across all bins"),
        ShapeOption("curve", "Curve", "Concentrated around active price"),
        ShapeOption("bid-ask", "Bid-Ask", "Heavier on edges for range trading"),
    ),
    default_shape="uniform",
)

SIMPLE_LP_CONFIG = SimpleLpConfig(
    dex_name="Flamingo",
    description="Provide liquidity to earn swap fees. Tokens are deposited in equal value.",
)

LIQUIDITY_CONFIGS: Mapping[str, LiquidityConfig] = MappingProxyType({
    "base": TICK_BASED_CONFIG,
    "ethereum": TICK_BASED_CONFIG,
    "arbitrum": TICK_BASED_CONFIG,
    "polygon": TICK_BASED_CONFIG,
    "optimism": TICK_BASED_CONFIG,
    "bsc": PANCAKESWAP_TICK_CONFIG,
    "avalanche": BIN_BASED_CONFIG,
    "tron": SUNSWAP_TICK_CONFIG,
    "neo": SIMPLE_LP_CONFIG,
})


def get_liquidity_config(chain_id: str | None) -> LiquidityConfig:
    """Config for a chain; unknown or missing ids get the tick-based default."""
    if not chain_id:
        return TICK_BASED_CONFIG
    return LIQUIDITY_CONFIGS.get(chain_id.strip().lower(), TICK_BASED_CONFIG)


def is_tick_based(config: LiquidityConfig) -> bool:
    return isinstance(config, TickBasedConfig)


def is_bin_based(config: LiquidityConfig) -> bool:
    return isinstance(config, BinBasedConfig)


def is_simple_lp(config: LiquidityConfig) -> bool:
    return isinstance(config, SimpleLpConfig)


def tick_spacing_for_fee(config: TickBasedConfig, fee_tier: int) -> int:
    spacing = config.tick_spacing.get(fee_tier)
    if spacing is None:
        raise ValueError(f"fee tier {fee_tier} is not offered by {config.dex_name}.")
    return spacing
