from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


def _prices(values: dict[str, str]) -> Mapping[str, Decimal]:
    return MappingProxyType({feed_id: Decimal(price) for feed_id, price in values.items()})


# Uniswap V3 chains share one table; values mirror the Base quote fallback.
EVM_DEFAULT_PRICES = _prices({
    "ethereum": "2400",
    "usd-coin": "1",
    "tether": "1",
    "dai": "1",
    "coinbase-wrapped-staked-eth": "2500",
    "aerodrome-finance": "1.5",
    "wrapped-bitcoin": "60000",
    "matic-network": "0.7",
    "chainlink": "15",
    "uniswap": "10",
    "aave": "90",
})

BSC_DEFAULT_PRICES = _prices({
    "binancecoin": "600",
    "tether": "1",
    "usd-coin": "1",
    "binance-usd": "1",
    "pancakeswap-token": "2.5",
    "ethereum": "2500",
    "binance-bitcoin": "60000",
    "ripple": "0.5",
    "cardano": "0.4",
    "polkadot": "6",
    "chainlink": "15",
    "uniswap": "10",
    "dogecoin": "0.08",
    "shiba-inu": "0.00001",
    "matic-network": "0.7",
    "avalanche-2": "30",
    "filecoin": "5",
    "cosmos": "8",
    "litecoin": "70",
    "dai": "1",
    "venus": "5",
    "alpaca-finance": "0.2",
    "bakerytoken": "0.15",
    "trust-wallet-token": "1",
})

AVALANCHE_DEFAULT_PRICES = _prices({
    "avalanche-2": "30",
    "usd-coin": "1",
    "tether": "1",
    "joe": "0.4",
    "ethereum": "2500",
    "wrapped-bitcoin": "60000",
    "dai": "1",
    "chainlink": "15",
    "aave": "90",
    "benqi-liquid-staked-avax": "32",
    "benqi": "0.015",
    "pangolin": "0.05",
    "gmx": "30",
})

TRON_DEFAULT_PRICES = _prices({
    "tron": "0.12",
    "tether": "1",
    "usd-coin": "1",
    "true-usd": "1",
    "usdj": "1",
    "usdd": "1",
    "bittorrent": "0.000001",
    "winklink": "0.0001",
    "just": "0.03",
    "sun-token": "0.02",
    "apenft": "0.0000005",
    "wrapped-bitcoin": "100000",
    "ethereum": "3500",
})

NEO_DEFAULT_PRICES = _prices({
    "neo": "12",
    "gas": "4.5",
    "flamingo-finance": "0.05",
    "tether": "1",
    "switcheo": "0.01",
})

DEFAULT_PRICES_BY_CHAIN: Mapping[str, Mapping[str, Decimal]] = MappingProxyType({
    "base": EVM_DEFAULT_PRICES,
    "ethereum": EVM_DEFAULT_PRICES,
    "arbitrum": EVM_DEFAULT_PRICES,
    "polygon": EVM_DEFAULT_PRICES,
    "optimism": EVM_DEFAULT_PRICES,
    "bsc": BSC_DEFAULT_PRICES,
    "avalanche": AVALANCHE_DEFAULT_PRICES,
    "tron": TRON_DEFAULT_PRICES,
    "neo": NEO_DEFAULT_PRICES,
})

_EMPTY: Mapping[str, Decimal] = MappingProxyType({})


def get_default_prices(chain_id: str) -> Mapping[str, Decimal]:
    return DEFAULT_PRICES_BY_CHAIN.get(chain_id.strip().lower(), _EMPTY)
