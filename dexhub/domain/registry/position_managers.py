from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from dexhub.domain.entities.position import PositionManager


_UNISWAP_V3_NPM = "0xC36442b4a4522E871399CD717aBDD847Ab11FE88"

POSITION_MANAGERS: Mapping[str, PositionManager] = MappingProxyType({
    "base": PositionManager("0x03a520b32C04BF3bEEf7BEb72E919cf822Ed34f1", "uniswap-v3", "Uniswap V3"),
    "ethereum": PositionManager(_UNISWAP_V3_NPM, "uniswap-v3", "Uniswap V3"),
    "arbitrum": PositionManager(_UNISWAP_V3_NPM, "uniswap-v3", "Uniswap V3"),
    "polygon": PositionManager(_UNISWAP_V3_NPM, "uniswap-v3", "Uniswap V3"),
    "optimism": PositionManager(_UNISWAP_V3_NPM, "uniswap-v3", "Uniswap V3"),
    "bsc": PositionManager("0x46A15B0b27311cedF172AB29E4f4766fbE7F4364", "pancakeswap-v3", "PancakeSwap V3"),
    "avalanche": PositionManager("0xb4315e873dBcf96Ffd0acd8EA43f689D8c20fB30", "trader-joe-lb", "Trader Joe"),
    "tron": PositionManager("TLSWrv7eC1AZCXkRjpqMZUmvgd99cj7pPF", "sunswap-v3", "SunSwap V3"),
    "neo": PositionManager("0xde3a4b093abbd07e9a69cdec88a54d9a1fe14975", "flamingo", "Flamingo"),
})

NFT_POSITION_MANAGER_TYPES = frozenset({"uniswap-v3", "pancakeswap-v3"})


def get_position_manager(chain_id: str) -> PositionManager | None:
    return POSITION_MANAGERS.get(chain_id.strip().lower())


def is_evm_nft_position_chain(chain_id: str) -> bool:
    manager = get_position_manager(chain_id)
    return manager is not None and manager.manager_type in NFT_POSITION_MANAGER_TYPES
