from __future__ import annotations

from dexhub.application.dto.liquidity_config import GetLiquidityConfigInput, GetLiquidityConfigOutput
from dexhub.domain.registry.liquidity_configs import get_liquidity_config


class GetLiquidityConfigUseCase:
    def execute(self, command: GetLiquidityConfigInput) -> GetLiquidityConfigOutput:
        return GetLiquidityConfigOutput(
            chain_id=command.chain_id,
            config=get_liquidity_config(command.chain_id),
        )
