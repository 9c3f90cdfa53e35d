from __future__ import annotations

from decimal import Decimal

from dexhub.domain.entities.quote import RoutedQuote
from dexhub.domain.exceptions import UpstreamUnavailableError


class FakePriceFeed:
    def __init__(self, prices: dict[str, str] | None = None, *, fail: bool = False):
        self._prices = {key: Decimal(value) for key, value in (prices or {}).items()}
        self._fail = fail
        self.calls: list[list[str]] = []

    def fetch_usd_prices(self, *, feed_ids: list[str]) -> dict[str, Decimal]:
        self.calls.append(list(feed_ids))
        if self._fail:
            raise UpstreamUnavailableError("coingecko: 429 Too Many Requests")
        return {key: value for key, value in self._prices.items() if key in feed_ids}


class FakeRoutedQuotePort:
    def __init__(self, source: str, quote: RoutedQuote | None = None, *, fail: bool = False):
        self.source = source
        self._quote = quote
        self._fail = fail
        self.calls = 0

    def fetch_quote(self, *, token_in, token_out, amount_in, tokens):
        _ = (token_in, token_out, amount_in, tokens)
        self.calls += 1
        if self._fail:
            raise UpstreamUnavailableError(f"{self.source}: unreachable")
        return self._quote


class FakeSource:
    """Position, LP-pool or pool-listing source returning canned rows."""

    def __init__(self, source: str, rows=None, *, fail: bool = False):
        self.source = source
        self._rows = rows if rows is not None else []
        self._fail = fail
        self.calls = 0

    def _result(self):
        self.calls += 1
        if self._fail:
            raise UpstreamUnavailableError(f"{self.source}: HTTP 500")
        return list(self._rows)

    def fetch_positions(self, *, address: str):
        _ = address
        return self._result()

    def fetch_pools(self):
        return self._result()


class FakeWalletLogs:
    """Transfer logs split by the topic slot that carries the wallet."""

    source = "evm-rpc"

    def __init__(
        self,
        *,
        outgoing=None,
        incoming=None,
        latest: int = 1_000_000,
        timestamps: dict[int, int] | None = None,
        fail_logs: bool = False,
    ):
        self._outgoing = list(outgoing or [])
        self._incoming = list(incoming or [])
        self._latest = latest
        self._timestamps = timestamps or {}
        self._fail_logs = fail_logs
        self.log_queries: list[tuple[int, list]] = []

    def latest_block(self) -> int:
        return self._latest

    def transfer_logs(self, *, from_block, topics):
        self.log_queries.append((from_block, list(topics)))
        if self._fail_logs:
            raise UpstreamUnavailableError("rpc: query returned more than 10000 results")
        return list(self._outgoing) if topics[1] is not None else list(self._incoming)

    def block_timestamp(self, *, block_number):
        if block_number not in self._timestamps:
            raise UpstreamUnavailableError(f"rpc: block {block_number} not found")
        return self._timestamps[block_number]
