from __future__ import annotations

from functools import lru_cache

from dexhub.application.use_cases.get_liquidity_config import GetLiquidityConfigUseCase
from dexhub.application.use_cases.get_pair_price import GetPairPriceUseCase
from dexhub.application.use_cases.get_positions import GetPositionsUseCase
from dexhub.application.use_cases.get_prices import GetPricesUseCase
from dexhub.application.use_cases.get_quote import GetQuoteUseCase
from dexhub.application.use_cases.get_wallet_transactions import GetWalletTransactionsUseCase
from dexhub.application.use_cases.list_pools import ListPoolsUseCase
from dexhub.application.use_cases.list_tokens import ListTokensUseCase
from dexhub.application.use_cases.resolve_geo import ResolveGeoUseCase
from dexhub.domain.registry.chains import get_chain
from dexhub.infrastructure.clients.coingecko_client import CoingeckoPriceFeed
from dexhub.infrastructure.clients.defillama_client import DefiLlamaPoolsClient
from dexhub.infrastructure.clients.evm_rpc_client import EvmRpcClient
from dexhub.infrastructure.clients.flamingo_pools_client import FlamingoPoolsClient
from dexhub.infrastructure.clients.flamingo_router_client import FlamingoRouterClient
from dexhub.infrastructure.clients.geckoterminal_client import GeckoTerminalPoolsClient
from dexhub.infrastructure.clients.ip_api_client import IpApiGeoClient
from dexhub.infrastructure.clients.sunswap_client import SunSwapQuoteClient
from dexhub.infrastructure.clients.traderjoe_barn_client import TraderJoeBarnClient
from dexhub.infrastructure.clients.traderjoe_subgraph_client import TraderJoeSubgraphClient
from dexhub.infrastructure.clients.uniswap_quoter_client import UniswapQuoterClient
from dexhub.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_price_feed() -> CoingeckoPriceFeed:
    settings = get_settings()
    return CoingeckoPriceFeed(
        api_base=settings.coingecko_api_base,
        timeout_seconds=settings.coingecko_timeout_seconds,
        api_key=settings.coingecko_api_key,
    )


@lru_cache(maxsize=1)
def _get_routed_quote_ports() -> dict:
    settings = get_settings()
    return {
        "base": (
            UniswapQuoterClient(
                rpc_url=get_chain("base").rpc_url,
                timeout_seconds=settings.http_timeout_seconds,
            ),
        ),
        "tron": (
            SunSwapQuoteClient(
                api_base=settings.sunswap_api_base,
                timeout_seconds=settings.http_timeout_seconds,
            ),
        ),
        "neo": (
            FlamingoRouterClient(
                rpc_nodes=settings.neo_rpc_nodes,
                timeout_seconds=settings.neo_rpc_timeout_seconds,
            ),
        ),
    }


def get_prices_use_case() -> GetPricesUseCase:
    return GetPricesUseCase(price_feed_port=_get_price_feed())


def get_quote_use_case() -> GetQuoteUseCase:
    return GetQuoteUseCase(
        get_prices_use_case=get_prices_use_case(),
        routed_quote_ports=_get_routed_quote_ports(),
    )


def get_list_tokens_use_case() -> ListTokensUseCase:
    return ListTokensUseCase()


def get_pair_price_use_case() -> GetPairPriceUseCase:
    return GetPairPriceUseCase(price_feed_port=_get_price_feed())


def get_positions_use_case() -> GetPositionsUseCase:
    settings = get_settings()
    return GetPositionsUseCase(
        bin_position_sources=(
            TraderJoeSubgraphClient(
                subgraph_url=settings.traderjoe_subgraph_url,
                timeout_seconds=settings.http_timeout_seconds,
            ),
            TraderJoeBarnClient(
                api_base=settings.traderjoe_barn_api_base,
                timeout_seconds=settings.http_timeout_seconds,
            ),
        ),
        lp_pool_sources=(
            FlamingoPoolsClient(
                pools_url=settings.flamingo_pools_api_url,
                timeout_seconds=settings.http_timeout_seconds,
            ),
        ),
    )


def get_list_pools_use_case() -> ListPoolsUseCase:
    settings = get_settings()
    min_tvl_usd = float(settings.pool_min_tvl_usd)
    return ListPoolsUseCase(
        sources=(
            GeckoTerminalPoolsClient(
                api_base=settings.geckoterminal_api_base,
                timeout_seconds=settings.http_timeout_seconds,
                min_tvl_usd=min_tvl_usd,
            ),
            DefiLlamaPoolsClient(
                yields_url=settings.defillama_yields_url,
                timeout_seconds=settings.http_timeout_seconds,
                min_tvl_usd=min_tvl_usd,
            ),
        )
    )


def get_liquidity_config_use_case() -> GetLiquidityConfigUseCase:
    return GetLiquidityConfigUseCase()


def get_resolve_geo_use_case() -> ResolveGeoUseCase:
    settings = get_settings()
    return ResolveGeoUseCase(
        geo_lookup_port=IpApiGeoClient(
            api_base=settings.ip_api_base,
            timeout_seconds=settings.http_timeout_seconds,
        )
    )


def get_wallet_transactions_use_case() -> GetWalletTransactionsUseCase:
    settings = get_settings()
    return GetWalletTransactionsUseCase(
        wallet_logs_port=EvmRpcClient(
            rpc_url=get_chain("base").rpc_url,
            timeout_seconds=settings.http_timeout_seconds,
        ),
        lookback_blocks=settings.wallet_lookback_blocks,
    )
