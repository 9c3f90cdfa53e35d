from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LiquidityModel(str, Enum):
    TICK_BASED = "tick-based"
    BIN_BASED = "bin-based"
    SIMPLE_LP = "simple-lp"


class ChainType(str, Enum):
    EVM = "evm"
    TRON = "tron"
    NEO = "neo"


@dataclass(frozen=True)
class NativeCurrency:
    name: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class DexInfo:
    name: str
    router_address: str | None = None
    factory_address: str | None = None


@dataclass(frozen=True)
class ChainDescriptor:
    id: str
    name: str
    short_name: str
    chain_type: ChainType
    chain_id: int | str
    liquidity_model: LiquidityModel
    native_currency: NativeCurrency
    rpc_url: str
    block_explorer: str
    dex: DexInfo
    wallet_type: str
    is_testnet: bool = False
