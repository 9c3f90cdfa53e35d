from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from dexhub.domain.entities.chain import (
    ChainDescriptor,
    ChainType,
    DexInfo,
    LiquidityModel,
    NativeCurrency,
)
from dexhub.domain.exceptions import UnsupportedChainError


ETHER = NativeCurrency(name="Ethereum", symbol="ETH", decimals=18)

UNISWAP_V3_ROUTER = "0xE592427A0AEce92De3Edee1F18E0157C05861564"
UNISWAP_V3_FACTORY = "0x1F98431c8aD98523631AE4a59f267346ea31F984"


def _uniswap_v3() -> DexInfo:
    return DexInfo(
        name="Uniswap V3",
        router_address=UNISWAP_V3_ROUTER,
        factory_address=UNISWAP_V3_FACTORY,
    )


_CHAINS = (
    ChainDescriptor(
        id="base",
        name="Base",
        short_name="Base",
        chain_type=ChainType.EVM,
        chain_id=8453,
        liquidity_model=LiquidityModel.TICK_BASED,
        native_currency=ETHER,
        rpc_url="https://mainnet.base.org",
        block_explorer="https://basescan.org",
        dex=DexInfo(
            name="Uniswap V3",
            router_address="0x2626664c2603336E57B271c5C0b26F421741e481",
            factory_address="0x33128a8fC17869897dcE68Ed026d694621f6FDfD",
        ),
        wallet_type="walletconnect",
    ),
    ChainDescriptor(
        id="ethereum",
        name="Ethereum",
        short_name="ETH",
        chain_type=ChainType.EVM,
        chain_id=1,
        liquidity_model=LiquidityModel.TICK_BASED,
        native_currency=ETHER,
        rpc_url="https://eth.llamarpc.com",
        block_explorer="https://etherscan.io",
        dex=_uniswap_v3(),
        wallet_type="walletconnect",
    ),
    ChainDescriptor(
        id="arbitrum",
        name="Arbitrum One",
        short_name="ARB",
        chain_type=ChainType.EVM,
        chain_id=42161,
        liquidity_model=LiquidityModel.TICK_BASED,
        native_currency=ETHER,
        rpc_url="https://arb1.arbitrum.io/rpc",
        block_explorer="https://arbiscan.io",
        dex=_uniswap_v3(),
        wallet_type="walletconnect",
    ),
    ChainDescriptor(
        id="polygon",
        name="Polygon",
        short_name="MATIC",
        chain_type=ChainType.EVM,
        chain_id=137,
        liquidity_model=LiquidityModel.TICK_BASED,
        native_currency=NativeCurrency(name="MATIC", symbol="MATIC", decimals=18),
        rpc_url="https://polygon-rpc.com",
        block_explorer="https://polygonscan.com",
        dex=_uniswap_v3(),
        wallet_type="walletconnect",
    ),
    ChainDescriptor(
        id="optimism",
        name="Optimism",
        short_name="OP",
        chain_type=ChainType.EVM,
        chain_id=10,
        liquidity_model=LiquidityModel.TICK_BASED,
        native_currency=ETHER,
        rpc_url="https://mainnet.optimism.io",
        block_explorer="https://optimistic.etherscan.io",
        dex=_uniswap_v3(),
        wallet_type="walletconnect",
    ),
    ChainDescriptor(
        id="bsc",
        name="BNB Smart Chain",
        short_name="BSC",
        chain_type=ChainType.EVM,
        chain_id=56,
        liquidity_model=LiquidityModel.TICK_BASED,
        native_currency=NativeCurrency(name="BNB", symbol="BNB", decimals=18),
        rpc_url="https://bsc-dataseed.binance.org",
        block_explorer="https://bscscan.com",
        dex=DexInfo(
            name="PancakeSwap",
            router_address="0x10ED43C718714eb63d5aA57B78B54704E256024E",
            factory_address="0xcA143Ce32Fe78f1f7019d7d551a6402fC5350c73",
        ),
        wallet_type="walletconnect",
    ),
    ChainDescriptor(
        id="avalanche",
        name="Avalanche",
        short_name="AVAX",
        chain_type=ChainType.EVM,
        chain_id=43114,
        liquidity_model=LiquidityModel.BIN_BASED,
        native_currency=NativeCurrency(name="Avalanche", symbol="AVAX", decimals=18),
        rpc_url="https://api.avax.network/ext/bc/C/rpc",
        block_explorer="https://snowtrace.io",
        dex=DexInfo(
            name="Trader Joe",
            router_address="0x60aE616a2155Ee3d9A68541Ba4544862310933d4",
            factory_address="0x9Ad6C38BE94206cA50bb0d90783181662f0Cfa10",
        ),
        wallet_type="walletconnect",
    ),
    ChainDescriptor(
        id="tron",
        name="TRON",
        short_name="TRX",
        chain_type=ChainType.TRON,
        chain_id="tron-mainnet",
        liquidity_model=LiquidityModel.TICK_BASED,
        native_currency=NativeCurrency(name="TRON", symbol="TRX", decimals=6),
        rpc_url="https://api.trongrid.io",
        block_explorer="https://tronscan.org",
        dex=DexInfo(name="SunSwap", router_address="TKzxdSv2FZKQrEqkKVgp5DcwEXBEKMg2Ax"),
        wallet_type="tronlink",
    ),
    ChainDescriptor(
        id="neo",
        name="NEO N3",
        short_name="NEO",
        chain_type=ChainType.NEO,
        chain_id="neo-mainnet",
        liquidity_model=LiquidityModel.SIMPLE_LP,
        native_currency=NativeCurrency(name="NEO", symbol="NEO", decimals=0),
        rpc_url="https://mainnet1.neo.coz.io:443",
        block_explorer="https://explorer.onegate.space",
        dex=DexInfo(name="Flamingo"),
        wallet_type="neon",
    ),
)

CHAINS: Mapping[str, ChainDescriptor] = MappingProxyType({chain.id: chain for chain in _CHAINS})

DEFAULT_CHAIN_ID = "base"


def _normalize_chain_key(value: str) -> str:
    return value.strip().lower()


def find_chain(chain_id: str) -> ChainDescriptor | None:
    return CHAINS.get(_normalize_chain_key(chain_id))


def get_chain(chain_id: str) -> ChainDescriptor:
    chain = find_chain(chain_id)
    if chain is None:
        raise UnsupportedChainError(f"Unsupported chain: {chain_id}")
    return chain


def get_chain_by_chain_id(chain_id: int | str) -> ChainDescriptor:
    """Resolve by numeric EVM id (``56``, ``"56"``, ``"0x38"``) or string id (``"tron-mainnet"``)."""
    candidates: list[int | str] = [chain_id]
    if isinstance(chain_id, str):
        raw = chain_id.strip()
        candidates.append(raw)
        if raw.lower().startswith("0x"):
            try:
                candidates.append(int(raw, 16))
            except ValueError:
                pass
        elif raw.isdigit():
            candidates.append(int(raw))

    for chain in _CHAINS:
        if chain.chain_id in candidates:
            return chain
    raise UnsupportedChainError(f"Unsupported chain id: {chain_id}")


def list_chains() -> list[ChainDescriptor]:
    return list(_CHAINS)


def list_chains_by_type(chain_type: ChainType) -> list[ChainDescriptor]:
    return [chain for chain in _CHAINS if chain.chain_type == chain_type]


def chain_hex_id(chain: ChainDescriptor) -> str | None:
    if chain.chain_type != ChainType.EVM or not isinstance(chain.chain_id, int):
        return None
    return hex(chain.chain_id)
