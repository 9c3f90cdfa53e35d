from __future__ import annotations

from dexhub.api.schemas.base import CamelModel


class NativeCurrencyResponse(CamelModel):
    name: str
    symbol: str
    decimals: int


class DexResponse(CamelModel):
    name: str
    router_address: str | None = None
    factory_address: str | None = None


class ChainResponse(CamelModel):
    id: str
    name: str
    short_name: str
    chain_type: str
    chain_id: int | str
    chain_id_hex: str | None = None
    liquidity_model: str
    native_currency: NativeCurrencyResponse
    rpc_url: str
    block_explorer: str
    dex: DexResponse
    wallet_type: str
    is_testnet: bool


class ChainsResponse(CamelModel):
    chains: list[ChainResponse]
    default_chain: str
