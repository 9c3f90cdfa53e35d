from __future__ import annotations

from types import MappingProxyType
from typing import Mapping
from urllib.parse import quote


_CRYPTOLOGOS = "https://cryptologos.cc/logos"
_COINGECKO_IMAGES = "https://assets.coingecko.com/coins/images"

TOKEN_ICONS: Mapping[str, str] = MappingProxyType({
    "WAVAX": f"{_CRYPTOLOGOS}/avalanche-avax-logo.png",
    "AVAX": f"{_CRYPTOLOGOS}/avalanche-avax-logo.png",
    "sAVAX": f"{_CRYPTOLOGOS}/avalanche-avax-logo.png",
    "ETH": f"{_CRYPTOLOGOS}/ethereum-eth-logo.png",
    "WETH": f"{_CRYPTOLOGOS}/ethereum-eth-logo.png",
    "WETH.e": f"{_CRYPTOLOGOS}/ethereum-eth-logo.png",
    "USDC": f"{_CRYPTOLOGOS}/usd-coin-usdc-logo.png",
    "USDC.e": f"{_CRYPTOLOGOS}/usd-coin-usdc-logo.png",
    "USDbC": f"{_CRYPTOLOGOS}/usd-coin-usdc-logo.png",
    "USDT": f"{_CRYPTOLOGOS}/tether-usdt-logo.png",
    "USDT.e": f"{_CRYPTOLOGOS}/tether-usdt-logo.png",
    "fUSDT": f"{_CRYPTOLOGOS}/tether-usdt-logo.png",
    "DAI": f"{_CRYPTOLOGOS}/multi-collateral-dai-dai-logo.png",
    "DAI.e": f"{_CRYPTOLOGOS}/multi-collateral-dai-dai-logo.png",
    "WBTC": f"{_CRYPTOLOGOS}/wrapped-bitcoin-wbtc-logo.png",
    "WBTC.e": f"{_CRYPTOLOGOS}/wrapped-bitcoin-wbtc-logo.png",
    "JOE": f"{_CRYPTOLOGOS}/joe-joe-logo.png",
    "NEO": f"{_CRYPTOLOGOS}/neo-neo-logo.png",
    "bNEO": f"{_CRYPTOLOGOS}/neo-neo-logo.png",
    "GAS": f"{_CRYPTOLOGOS}/gas-gas-logo.png",
    "FLM": "https://flamingo.finance/assets/tokens/FLM.png",
    "cbETH": f"{_COINGECKO_IMAGES}/27008/small/cbeth.png",
    "rETH": f"{_COINGECKO_IMAGES}/20764/small/reth.png",
    "AERO": f"{_COINGECKO_IMAGES}/31745/small/token.png",
    "BRETT": f"{_COINGECKO_IMAGES}/35529/small/1000050750.png",
    "DEGEN": f"{_COINGECKO_IMAGES}/34515/small/android-chrome-512x512.png",
    "TOSHI": f"{_COINGECKO_IMAGES}/31126/small/toshi.png",
    "VIRTUAL": f"{_COINGECKO_IMAGES}/36382/small/VIRTUAL.png",
})


def generic_icon(symbol: str) -> str:
    name = quote(symbol[:2] or "?")
    return f"https://ui-avatars.com/api/?name={name}&background=6366f1&color=fff&size=64"


def get_icon(symbol: str) -> str:
    return TOKEN_ICONS.get(symbol) or generic_icon(symbol)
