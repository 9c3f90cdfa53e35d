from __future__ import annotations

from fastapi import APIRouter, Depends

from dexhub.api.deps import get_liquidity_config_use_case
from dexhub.api.schemas.liquidity_config import (
    BinBasedConfigResponse,
    OptionResponse,
    SimpleLpConfigResponse,
    TickBasedConfigResponse,
)
from dexhub.application.dto.liquidity_config import GetLiquidityConfigInput
from dexhub.application.use_cases.get_liquidity_config import GetLiquidityConfigUseCase
from dexhub.domain.entities.liquidity_config import BinBasedConfig, LiquidityConfig, TickBasedConfig

router = APIRouter()


def _options(rows) -> list[OptionResponse]:
    return [OptionResponse(value=row.value, label=row.label, description=row.description) for row in rows]


def _config_response(config: LiquidityConfig):
    if isinstance(config, TickBasedConfig):
        return TickBasedConfigResponse(
            dex_name=config.dex_name,
            fee_tiers=_options(config.fee_tiers),
            tick_spacing={str(fee): spacing for fee, spacing in config.tick_spacing.items()},
            default_fee_tier=config.default_fee_tier,
            default_range_percent=config.default_range_percent,
            range_options=list(config.range_options),
        )
    if isinstance(config, BinBasedConfig):
        return BinBasedConfigResponse(
            dex_name=config.dex_name,
            bin_steps=_options(config.bin_steps),
            default_bin_step=config.default_bin_step,
            default_bin_range=config.default_bin_range,
            bin_range_options=list(config.bin_range_options),
            shapes=_options(config.shapes),
            default_shape=config.default_shape,
        )
    return SimpleLpConfigResponse(dex_name=config.dex_name, description=config.description)


@router.get("/v1/liquidity-config", response_model=None)
def get_default_liquidity_config(
    use_case: GetLiquidityConfigUseCase = Depends(get_liquidity_config_use_case),
):
    return _config_response(use_case.execute(GetLiquidityConfigInput(chain_id=None)).config)


@router.get("/v1/liquidity-config/{chain}", response_model=None)
def get_liquidity_config(
    chain: str,
    use_case: GetLiquidityConfigUseCase = Depends(get_liquidity_config_use_case),
):
    return _config_response(use_case.execute(GetLiquidityConfigInput(chain_id=chain)).config)
