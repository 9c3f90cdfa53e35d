from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Union


@dataclass(frozen=True)
class FeeTierOption:
    value: int
    label: str
    description: str


@dataclass(frozen=True)
class BinStepOption:
    value: int
    label: str
    description: str


@dataclass(frozen=True)
class ShapeOption:
    value: str
    label: str
    description: str


@dataclass(frozen=True)
class TickBasedConfig:
    dex_name: str
    fee_tiers: tuple[FeeTierOption, ...]
    tick_spacing: Mapping[int, int]
    default_fee_tier: int
    default_range_percent: int
    range_options: tuple[int, ...]
    model: Literal["tick-based"] = "tick-based"

    def __post_init__(self) -> None:
        object.__setattr__(self, "tick_spacing", MappingProxyType(dict(self.tick_spacing)))
        tiers = {tier.value for tier in self.fee_tiers}
        if self.default_fee_tier not in tiers:
            raise ValueError("default_fee_tier must be one of fee_tiers.")
        if tiers != set(self.tick_spacing):
            raise ValueError("tick_spacing must cover every fee tier.")


@dataclass(frozen=True)
class BinBasedConfig:
    dex_name: str
    bin_steps: tuple[BinStepOption, ...]
    default_bin_step: int
    default_bin_range: int
    bin_range_options: tuple[int, ...]
    shapes: tuple[ShapeOption, ...]
    default_shape: str
    model: Literal["bin-based"] = "bin-based"

    def __post_init__(self) -> None:
        if self.default_bin_step not in {step.value for step in self.bin_steps}:
            raise ValueError("default_bin_step must be one of bin_steps.")
        if self.default_shape not in {shape.value for shape in self.shapes}:
            raise ValueError("default_shape must be one of shapes.")


@dataclass(frozen=True)
class SimpleLpConfig:
    dex_name: str
    description: str
    model: Literal["simple-lp"] = "simple-lp"


LiquidityConfig = Union[TickBasedConfig, BinBasedConfig, SimpleLpConfig]
