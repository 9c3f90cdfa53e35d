from __future__ import annotations

from fastapi import APIRouter, HTTPException

from dexhub.api.schemas.chains import ChainResponse, ChainsResponse, DexResponse, NativeCurrencyResponse
from dexhub.domain.entities.chain import ChainDescriptor
from dexhub.domain.exceptions import UnsupportedChainError
from dexhub.domain.registry.chains import DEFAULT_CHAIN_ID, chain_hex_id, get_chain, list_chains

router = APIRouter()


def _chain_response(chain: ChainDescriptor) -> ChainResponse:
    return ChainResponse(
        id=chain.id,
        name=chain.name,
        short_name=chain.short_name,
        chain_type=chain.chain_type.value,
        chain_id=chain.chain_id,
        chain_id_hex=chain_hex_id(chain),
        liquidity_model=chain.liquidity_model.value,
        native_currency=NativeCurrencyResponse(
            name=chain.native_currency.name,
            symbol=chain.native_currency.symbol,
            decimals=chain.native_currency.decimals,
        ),
        rpc_url=chain.rpc_url,
        block_explorer=chain.block_explorer,
        dex=DexResponse(
            name=chain.dex.name,
            router_address=chain.dex.router_address,
            factory_address=chain.dex.factory_address,
        ),
        wallet_type=chain.wallet_type,
        is_testnet=chain.is_testnet,
    )


@router.get("/v1/chains", response_model=ChainsResponse)
def get_chains():
    return ChainsResponse(
        chains=[_chain_response(chain) for chain in list_chains()],
        default_chain=DEFAULT_CHAIN_ID,
    )


@router.get("/v1/chains/{chain}", response_model=ChainResponse)
def get_chain_by_id(chain: str):
    try:
        descriptor = get_chain(chain)
    except UnsupportedChainError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _chain_response(descriptor)
