from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from dexhub.domain.entities.quote import DexQuoteProfile
from dexhub.domain.exceptions import UnsupportedChainError


UNISWAP_V3 = DexQuoteProfile(dex_name="Uniswap V3", source="uniswap-v3", fee_pips=3000)
PANCAKESWAP_V2 = DexQuoteProfile(dex_name="PancakeSwap V2", source="pancakeswap-v2", fee_pips=2500)
TRADERJOE_V1 = DexQuoteProfile(dex_name="Trader Joe V1", source="traderjoe-v1", fee_pips=3000)
SUNSWAP = DexQuoteProfile(dex_name="SunSwap", source="sunswap", fee_pips=3000)
FLAMINGO = DexQuoteProfile(dex_name="Flamingo", source="flamingo-dex", fee_pips=3000)

QUOTE_PROFILES: Mapping[str, DexQuoteProfile] = MappingProxyType({
    "base": UNISWAP_V3,
    "ethereum": UNISWAP_V3,
    "arbitrum": UNISWAP_V3,
    "polygon": UNISWAP_V3,
    "optimism": UNISWAP_V3,
    "bsc": PANCAKESWAP_V2,
    "avalanche": TRADERJOE_V1,
    "tron": SUNSWAP,
    "neo": FLAMINGO,
})

# Chains whose DEX exposes a native quote before the price estimate is used.
ROUTED_QUOTE_CHAINS = frozenset({"base", "tron", "neo"})


def get_quote_profile(chain_id: str) -> DexQuoteProfile:
    profile = QUOTE_PROFILES.get(chain_id.strip().lower())
    if profile is None:
        raise UnsupportedChainError(f"Unsupported chain for quotes: {chain_id}")
    return profile
