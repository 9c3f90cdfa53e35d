from __future__ import annotations

from typing import Literal

from dexhub.api.schemas.base import CamelModel


class OptionResponse(CamelModel):
    value: int | str
    label: str
    description: str


class TickBasedConfigResponse(CamelModel):
    model: Literal["tick-based"] = "tick-based"
    dex_name: str
    fee_tiers: list[OptionResponse]
    tick_spacing: dict[str, int]
    default_fee_tier: int
    default_range_percent: int
    range_options: list[int]


class BinBasedConfigResponse(CamelModel):
    model: Literal["bin-based"] = "bin-based"
    dex_name: str
    bin_steps: list[OptionResponse]
    default_bin_step: int
    default_bin_range: int
    bin_range_options: list[int]
    shapes: list[OptionResponse]
    default_shape: str


class SimpleLpConfigResponse(CamelModel):
    model: Literal["simple-lp"] = "simple-lp"
    dex_name: str
    description: str
