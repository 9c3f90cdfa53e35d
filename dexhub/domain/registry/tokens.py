from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from dexhub.domain.entities.token import TokenDescriptor
from dexhub.domain.exceptions import InvalidTokenError


EVM_NATIVE_ADDRESS = "0x0000000000000000000000000000000000000000"

STABLECOIN_SYMBOLS = frozenset({"USDC", "USDT", "DAI", "BUSD", "USDD", "fUSDT", "USDC.e", "USDT.e", "DAI.e", "USDbC"})


def _table(tokens: Iterable[TokenDescriptor]) -> Mapping[str, TokenDescriptor]:
    table: dict[str, TokenDescriptor] = {}
    for token in tokens:
        if token.symbol in table:
            raise ValueError(f"duplicate token symbol in registry: {token.symbol}")
        table[token.symbol] = token
    return MappingProxyType(table)


T = TokenDescriptor

BASE_TOKENS = _table([
    T("ETH", "Ethereum", EVM_NATIVE_ADDRESS, 18, "ethereum"),
    T("WETH", "Wrapped Ether", "0x4200000000000000000000000000000000000006", 18, "ethereum"),
    T("USDC", "USD Coin", "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913", 6, "usd-coin"),
    T("USDbC", "USD Base Coin", "0xd9aAEc86B65D86f6A7B5B1b0c42FFA531710b6CA", 6, "usd-coin"),
    T("DAI", "Dai Stablecoin", "0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb", 18, "dai"),
    T("USDT", "Tether USD", "0xfde4C96c8593536E31F229EA8f37b2ADa2699bb2", 6, "tether"),
    T("cbETH", "Coinbase Wrapped Staked ETH", "0x2Ae3F1Ec7F1F5012CFEab0185bfc7aa3cf0DEc22", 18, "coinbase-wrapped-staked-eth"),
    T("wstETH", "Wrapped stETH", "0xc1CBa3fCea344f92D9239c08C0568f6F2F0ee452", 18, "wrapped-steth"),
    T("rETH", "Rocket Pool ETH", "0xB6fe221Fe9EeF5aBa221c348bA20A1Bf5e73624c", 18, "rocket-pool-eth"),
    T("AERO", "Aerodrome", "0x940181a94A35A4569E4529A3CDfB74e38FD98631", 18, "aerodrome-finance"),
    T("BRETT", "Brett", "0x532f27101965dd16442E59d40670FaF5eBB142E4", 18, "brett"),
    T("DEGEN", "Degen", "0x4ed4E862860beD51a9570b96d89aF5E1B0Efefed", 18, "degen-base"),
    T("VIRTUAL", "Virtual Protocol", "0x0b3e328455c4059EEb9e3f84b5543F74E24e7E1b", 18, "virtual-protocol"),
    T("UNI", "Uniswap", "0xc3De830EA07524a0761646a6a4e4be0e114a3C83", 18, "uniswap"),
    T("LINK", "Chainlink", "0x88Fb150BDc53A65fe94Dea0c9BA0a6dAf8C6e196", 18, "chainlink"),
    T("WBTC", "Wrapped Bitcoin", "0x0555E30da8f98308EdB960aa94C0Db47230d2B9c", 8, "wrapped-bitcoin"),
    T("TOSHI", "Toshi", "0xAC1Bd2486aAf3B5C0fc3Fd868558b082a531B2B4", 18, "toshi"),
])

ETHEREUM_TOKENS = _table([
    T("ETH", "Ethereum", EVM_NATIVE_ADDRESS, 18, "ethereum"),
    T("WETH", "Wrapped Ether", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 18, "ethereum"),
    T("USDC", "USD Coin", "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6, "usd-coin"),
    T("USDT", "Tether USD", "0xdAC17F958D2ee523a2206206994597C13D831ec7", 6, "tether"),
    T("DAI", "Dai Stablecoin", "0x6B175474E89094C44Da98b954EedeAC495271d0F", 18, "dai"),
    T("WBTC", "Wrapped Bitcoin", "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", 8, "wrapped-bitcoin"),
    T("UNI", "Uniswap", "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984", 18, "uniswap"),
    T("LINK", "Chainlink", "0x514910771AF9Ca656af840dff83E8264EcF986CA", 18, "chainlink"),
    T("AAVE", "Aave", "0x7Fc66500c84A76Ad7e9c93437bFc5Ac33E2DDaE9", 18, "aave"),
    T("MKR", "Maker", "0x9f8F72aA9304c8B593d555F12eF6589cC3A579A2", 18, "maker"),
])

ARBITRUM_TOKENS = _table([
    T("ETH", "Ethereum", EVM_NATIVE_ADDRESS, 18, "ethereum"),
    T("WETH", "Wrapped Ether", "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1", 18, "ethereum"),
    T("USDC", "USD Coin", "0xaf88d065e77c8cC2239327C5EDb3A432268e5831", 6, "usd-coin"),
    T("USDT", "Tether USD", "0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", 6, "tether"),
    T("ARB", "Arbitrum", "0x912CE59144191C1204E64559FE8253a0e49E6548", 18, "arbitrum"),
    T("GMX", "GMX", "0xfc5A1A6EB076a2C7aD06eD22C90d7E710E35ad0a", 18, "gmx"),
    T("MAGIC", "Magic", "0x539bdE0d7Dbd336b79148AA742883198BBF60342", 18, "magic"),
])

POLYGON_TOKENS = _table([
    T("MATIC", "Polygon", EVM_NATIVE_ADDRESS, 18, "matic-network"),
    T("WMATIC", "Wrapped MATIC", "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", 18, "matic-network"),
    T("USDC", "USD Coin", "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359", 6, "usd-coin"),
    T("USDT", "Tether USD", "0xc2132D05D31c914a87C6611C10748AEb04B58e8F", 6, "tether"),
    T("WETH", "Wrapped Ether", "0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619", 18, "ethereum"),
    T("WBTC", "Wrapped Bitcoin", "0x1BFD67037B42Cf73acF2047067bd4F2C47D9BfD6", 8, "wrapped-bitcoin"),
])

OPTIMISM_TOKENS = _table([
    T("ETH", "Ethereum", EVM_NATIVE_ADDRESS, 18, "ethereum"),
    T("WETH", "Wrapped Ether", "0x4200000000000000000000000000000000000006", 18, "ethereum"),
    T("USDC", "USD Coin", "0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85", 6, "usd-coin"),
    T("USDT", "Tether USD", "0x94b008aA00579c1307B0EF2c499aD98a8ce58e58", 6, "tether"),
    T("OP", "Optimism", "0x4200000000000000000000000000000000000042", 18, "optimism"),
    T("SNX", "Synthetix", "0x8700dAec35aF8Ff88c16BdF0418774CB3D7599B4", 18, "havven"),
])

BSC_TOKENS = _table([
    T("BNB", "BNB", EVM_NATIVE_ADDRESS, 18, "binancecoin"),
    T("WBNB", "Wrapped BNB", "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c", 18, "binancecoin"),
    T("USDT", "Tether USD", "0x55d398326f99059fF775485246999027B3197955", 18, "tether"),
    T("USDC", "USD Coin", "0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d", 18, "usd-coin"),
    T("BUSD", "Binance USD", "0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56", 18, "binance-usd"),
    T("CAKE", "PancakeSwap", "0x0E09FaBB73Bd3Ade0a17ECC321fD13a19e81cE82", 18, "pancakeswap-token"),
    T("ETH", "Ethereum", "0x2170Ed0880ac9A755fd29B2688956BD959F933F8", 18, "ethereum"),
    T("BTCB", "Bitcoin BEP2", "0x7130d2A12B9BCbFAe4f2634d864A1Ee1Ce3Ead9c", 18, "binance-bitcoin"),
    T("XRP", "XRP", "0x1D2F0da169ceB9fC7B3144628dB156f3F6c60dBE", 18, "ripple"),
    T("ADA", "Cardano", "0x3EE2200Efb3400fAbB9AacF31297cBdD1d435D47", 18, "cardano"),
    T("DOT", "Polkadot", "0x7083609fCE4d1d8Dc0C979AAb8c869Ea2C873402", 18, "polkadot"),
    T("LINK", "Chainlink", "0xF8A0BF9cF54Bb92F17374d9e9A321E6a111a51bD", 18, "chainlink"),
    T("UNI", "Uniswap", "0xBf5140A22578168FD562DCcF235E5D43A02ce9B1", 18, "uniswap"),
    T("DOGE", "Dogecoin", "0xbA2aE424d960c26247Dd6c32edC70B295c744C43", 8, "dogecoin"),
    T("SHIB", "Shiba Inu", "0x2859e4544C4bB03966803b044A93563Bd2D0DD4D", 18, "shiba-inu"),
    T("MATIC", "Polygon", "0xCC42724C6683B7E57334c4E856f4c9965ED682bD", 18, "matic-network"),
    T("AVAX", "Avalanche", "0x1CE0c2827e2eF14D5C4f29a091d735A204794041", 18, "avalanche-2"),
    T("FIL", "Filecoin", "0x0D8Ce2A99Bb6e3B7Db580eD848240e4a0F9aE153", 18, "filecoin"),
    T("ATOM", "Cosmos", "0x0Eb3a705fc54725037CC9e008bDede697f62F335", 18, "cosmos"),
    T("LTC", "Litecoin", "0x4338665CBB7B2485A8855A139b75D5e34AB0DB94", 18, "litecoin"),
    T("DAI", "Dai Stablecoin", "0x1AF3F329e8BE154074D8769D1FFa4eE058B1DBc3", 18, "dai"),
    T("XVS", "Venus", "0xcF6BB5389c92Bdda8a3747Ddb454cB7a64626C63", 18, "venus"),
    T("ALPACA", "Alpaca Finance", "0x8F0528cE5eF7B51152A59745bEfDD91D97091d2F", 18, "alpaca-finance"),
    T("BAKE", "BakeryToken", "0xE02dF9e3e622DeBdD69fb838bB799E3F168902c5", 18, "bakerytoken"),
    T("TWT", "Trust Wallet", "0x4B0F1812e5Df2A09796481Ff14017e6005508003", 18, "trust-wallet-token"),
])

AVALANCHE_TOKENS = _table([
    T("AVAX", "Avalanche", EVM_NATIVE_ADDRESS, 18, "avalanche-2"),
    T("WAVAX", "Wrapped AVAX", "0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7", 18, "avalanche-2"),
    T("USDC", "USD Coin", "0xB97EF9Ef8734C71904D8002F8b6Bc66Dd9c48a6E", 6, "usd-coin"),
    T("USDC.e", "Bridged USD Coin", "0xA7D7079b0FEaD91F3e65f86E8915Cb59c1a4C664", 6, "usd-coin"),
    T("USDT", "Tether USD", "0x9702230A8Ea53601f5cD2dc00fDBc13d4dF4A8c7", 6, "tether"),
    T("USDT.e", "Bridged Tether USD", "0xc7198437980c041c805A1EDcbA50c1Ce5db95118", 6, "tether"),
    T("JOE", "Trader Joe", "0x6e84a6216eA6dACC71eE8E6b0a5B7322EEbC0fDd", 18, "joe"),
    T("WETH.e", "Wrapped Ether", "0x49D5c2BdFfac6CE2BFdB6640F4F80f226bc10bAB", 18, "ethereum"),
    T("WBTC.e", "Wrapped Bitcoin", "0x50b7545627a5162F82A992c33b87aDc75187B218", 8, "wrapped-bitcoin"),
    T("DAI.e", "Dai Stablecoin", "0xd586E7F844cEa2F87f50152665BCbc2C279D8d70", 18, "dai"),
    T("LINK.e", "Chainlink", "0x5947BB275c521040051D82396e4B9d3f7694cB02", 18, "chainlink"),
    T("AAVE.e", "Aave", "0x63a72806098Bd3D9520cC43356dD78afe5D386D9", 18, "aave"),
    T("sAVAX", "BENQI Liquid Staked AVAX", "0x2b2C81e08f1Af8835a78Bb2A90AE924ACE0eA4bE", 18, "benqi-liquid-staked-avax"),
    T("QI", "BENQI", "0x8729438EB15e2C8B576fCc6AeCdA6A148776C0F5", 18, "benqi"),
    T("PNG", "Pangolin", "0x60781C2586D68229fde47564546784ab3fACA982", 18, "pangolin"),
    T("GMX", "GMX", "0x62edc0692BD897D2295872a9FFCac5425011c661", 18, "gmx"),
])

TRON_TOKENS = _table([
    T("TRX", "TRON", "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb", 6, "tron"),
    T("WTRX", "Wrapped TRX", "TNUC9Qb1rRpS5CbWLmNMxXBjyFoydXjWFR", 6, "tron"),
    T("USDT", "Tether USD", "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t", 6, "tether"),
    T("USDC", "USD Coin", "TEkxiTehnzSmSe2XqrBj4w32RUN966rdz8", 6, "usd-coin"),
    T("TUSD", "TrueUSD", "TUpMhErZL2fhh4sVNULAbNKLokS4GjC1F4", 18, "true-usd"),
    T("USDJ", "JUST Stablecoin", "TMwFHYXLJaRUPeW6421aqXL4ZEzPRFGkGT", 18, "usdj"),
    T("USDD", "USDD", "TPYmHEhy5n8TCEfYGqW2rPxsghSfzghPDn", 18, "usdd"),
    T("BTT", "BitTorrent", "TAFjULxiVgT4qWk6UZwjqwZXTSaGaqnVp4", 18, "bittorrent"),
    T("WIN", "WINkLink", "TLa2f6VPqDgRE67v1736s7bJ8Ray5wYjU7", 6, "winklink"),
    T("JST", "JUST", "TCFLL5dx5ZJdKnWuesXxi1VPwjLVmWZZy9", 18, "just"),
    T("SUN", "SUN", "TKkeiboTkxXKJpbmVFbv4a8ov5rAfRDMf9", 18, "sun-token"),
    T("NFT", "APENFT", "TFczxzPhnThNSqr5by8tvxsdCFRRz6cPNq", 6, "apenft"),
    T("WBTC", "Wrapped Bitcoin", "TXpw8XeWYeTUd4quDskoUqeQPowRh4jY65", 8, "wrapped-bitcoin"),
    T("WETH", "Wrapped Ether", "TXWkP3jLBqRGojUih1ShzNyDaN5Csnebok", 18, "ethereum"),
])

NEO_TOKENS = _table([
    T("NEO", "NEO", "0xef4073a0f2b305a38ec4050e4d3d28bc40ea63f5", 0, "neo"),
    T("GAS", "GAS", "0xd2a4cff31913016155e38e474a2c06d08be276cf", 8, "gas"),
    T("FLM", "Flamingo", "0xf0151f528127558851b39c2cd8aa47da7418ab28", 8, "flamingo-finance"),
    T("fUSDT", "fUSDT", "0xcd48b160c1bbc9d74997b803b9a7ad50a4bef020", 6, "tether"),
    T("bNEO", "Burger NEO", "0x48c40d4666f93408be1bef038b6722404d9a4c2a", 8, "neo"),
    T("SWTH", "Switcheo", "0x78e1330db47634afdb5ea455302ba2d12b8d549d", 8, "switcheo"),
])

TOKENS_BY_CHAIN: Mapping[str, Mapping[str, TokenDescriptor]] = MappingProxyType({
    "base": BASE_TOKENS,
    "ethereum": ETHEREUM_TOKENS,
    "arbitrum": ARBITRUM_TOKENS,
    "polygon": POLYGON_TOKENS,
    "optimism": OPTIMISM_TOKENS,
    "bsc": BSC_TOKENS,
    "avalanche": AVALANCHE_TOKENS,
    "tron": TRON_TOKENS,
    "neo": NEO_TOKENS,
})

_EMPTY: Mapping[str, TokenDescriptor] = MappingProxyType({})


def get_all_tokens(chain_id: str) -> Mapping[str, TokenDescriptor]:
    return TOKENS_BY_CHAIN.get(chain_id.strip().lower(), _EMPTY)


def get_token(chain_id: str, symbol: str) -> TokenDescriptor:
    token = get_all_tokens(chain_id).get(symbol)
    if token is None:
        raise InvalidTokenError(f"Invalid token symbol for {chain_id}: {symbol}")
    return token


def find_token_by_address(chain_id: str, address: str) -> TokenDescriptor | None:
    needle = address.strip().lower()
    for token in get_all_tokens(chain_id).values():
        if token.address.lower() == needle:
            return token
    return None


def get_native_token(chain_id: str) -> TokenDescriptor | None:
    # TRON and NEO natives are first in their tables and carry real contract hashes
    tokens = list(get_all_tokens(chain_id).values())
    for token in tokens:
        if token.address == EVM_NATIVE_ADDRESS:
            return token
    if chain_id.strip().lower() in ("tron", "neo") and tokens:
        return tokens[0]
    return None


def get_stablecoins(chain_id: str) -> list[TokenDescriptor]:
    return [token for token in get_all_tokens(chain_id).values() if token.symbol in STABLECOIN_SYMBOLS]


def feed_ids(chain_id: str) -> list[str]:
    """Distinct price-feed ids referenced by a chain's registry, first-seen order."""
    seen: dict[str, None] = {}
    for token in get_all_tokens(chain_id).values():
        if token.price_feed_id:
            seen.setdefault(token.price_feed_id, None)
    return list(seen)
