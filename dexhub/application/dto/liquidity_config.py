from __future__ import annotations

from dataclasses import dataclass

from dexhub.domain.entities.liquidity_config import LiquidityConfig


@dataclass(frozen=True)
class GetLiquidityConfigInput:
    chain_id: str | None


@dataclass(frozen=True)
class GetLiquidityConfigOutput:
    chain_id: str | None
    config: LiquidityConfig
