from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from dotenv import load_dotenv


load_dotenv()


DEFAULT_NEO_RPC_NODES = (
    "https://mainnet1.neo.coz.io:443",
    "https://mainnet2.neo.coz.io:443",
    "https://neo3-mainnet.neoline.vip",
)


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = _env(name)
    if not value:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    coingecko_api_base: str
    coingecko_api_key: str
    coingecko_timeout_seconds: float
    sunswap_api_base: str
    neo_rpc_nodes: tuple[str, ...]
    neo_rpc_timeout_seconds: float
    traderjoe_subgraph_url: str
    traderjoe_barn_api_base: str
    flamingo_pools_api_url: str
    geckoterminal_api_base: str
    defillama_yields_url: str
    ip_api_base: str
    http_timeout_seconds: float
    pool_min_tvl_usd: Decimal
    wallet_lookback_blocks: int
    cors_allow_origins: tuple[str, ...]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        coingecko_api_base=_env("COINGECKO_API_BASE", "https://api.coingecko.com/api/v3"),
        coingecko_api_key=_env("COINGECKO_API_KEY", ""),
        coingecko_timeout_seconds=float(_env("COINGECKO_TIMEOUT_SECONDS", "5")),
        sunswap_api_base=_env("SUNSWAP_API_BASE", "https://openapi.sun.io"),
        neo_rpc_nodes=_csv("NEO_RPC_NODES", DEFAULT_NEO_RPC_NODES),
        neo_rpc_timeout_seconds=float(_env("NEO_RPC_TIMEOUT_SECONDS", "5")),
        traderjoe_subgraph_url=_env(
            "TRADERJOE_SUBGRAPH_URL",
            "https://api.goldsky.com/api/public/project_clnbo3e3c16lj33xva5r23iu6"
            "/subgraphs/joe-v2-avax/prod/gn",
        ),
        traderjoe_barn_api_base=_env("TRADERJOE_BARN_API_BASE", "https://barn.traderjoexyz.com"),
        flamingo_pools_api_url=_env(
            "FLAMINGO_POOLS_API_URL",
            "https://neo-api.b-cdn.net/flamingo/live-data/pools",
        ),
        geckoterminal_api_base=_env("GECKOTERMINAL_API_BASE", "https://api.geckoterminal.com/api/v2"),
        defillama_yields_url=_env("DEFILLAMA_YIELDS_URL", "https://yields.llama.fi/pools"),
        ip_api_base=_env("IP_API_BASE", "http://ip-api.com"),
        http_timeout_seconds=float(_env("HTTP_TIMEOUT_SECONDS", "10")),
        pool_min_tvl_usd=Decimal(_env("POOL_MIN_TVL_USD", "100000")),
        wallet_lookback_blocks=int(_env("WALLET_LOOKBACK_BLOCKS", "300000")),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", ("*",)),
        log_level=_env("LOG_LEVEL", "INFO"),
    )
