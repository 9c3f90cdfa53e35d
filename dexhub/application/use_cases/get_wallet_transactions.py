from __future__ import annotations

from datetime import datetime, timezone
import logging

from dexhub.application.dto.wallet_transactions import GetWalletTransactionsInput, GetWalletTransactionsOutput
from dexhub.application.ports.wallet_logs_port import WalletLogsPort
from dexhub.domain.entities.wallet_transaction import SwapTransfers, TransferLog, WalletTransaction
from dexhub.domain.exceptions import UpstreamUnavailableError, WalletTransactionsInputError
from dexhub.domain.registry.tokens import find_token_by_address
from dexhub.domain.services.transfer_logs import (
    TRANSFER_TOPIC,
    UNKNOWN_TOKEN_DECIMALS,
    format_transfer_amount,
    is_evm_address,
    pad_address_topic,
    pair_swap_transfers,
    shorten_address,
)


logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_BLOCKS = 300_000
DEFAULT_CANDIDATE_LIMIT = 20
DEFAULT_RESULT_LIMIT = 10


class GetWalletTransactionsUseCase:
    """Recent swaps of a wallet on Base, read from ERC-20 ``Transfer`` logs.

    A swap is a transaction in which the wallet both sent and received a token.
    Failing to read the logs raises ``UpstreamUnavailableError``; failing to
    enrich a single transaction only drops that transaction.
    """

    chain_id = "base"

    def __init__(
        self,
        *,
        wallet_logs_port: WalletLogsPort,
        lookback_blocks: int = DEFAULT_LOOKBACK_BLOCKS,
        candidate_limit: int = DEFAULT_CANDIDATE_LIMIT,
        result_limit: int = DEFAULT_RESULT_LIMIT,
    ):
        self._wallet_logs_port = wallet_logs_port
        self._lookback_blocks = lookback_blocks
        self._candidate_limit = candidate_limit
        self._result_limit = result_limit

    def execute(self, command: GetWalletTransactionsInput) -> GetWalletTransactionsOutput:
        wallet = (command.wallet_address or "").strip()
        if not wallet:
            raise WalletTransactionsInputError("Wallet address required")
        if not is_evm_address(wallet):
            raise WalletTransactionsInputError(f"Invalid wallet address: {wallet}")

        latest = self._wallet_logs_port.latest_block()
        from_block = max(0, latest - self._lookback_blocks)
        topic = pad_address_topic(wallet)
        outgoing = self._wallet_logs_port.transfer_logs(from_block=from_block, topics=[TRANSFER_TOPIC, topic, None])
        incoming = self._wallet_logs_port.transfer_logs(from_block=from_block, topics=[TRANSFER_TOPIC, None, topic])
        logger.info(
            "get_wallet_transactions: logs wallet=%s from_block=%s outgoing=%s incoming=%s",
            wallet,
            from_block,
            len(outgoing),
            len(incoming),
        )

        transactions: list[WalletTransaction] = []
        for candidate in pair_swap_transfers(outgoing, incoming, limit=self._candidate_limit):
            if candidate.sent.token_address.lower() == candidate.received.token_address.lower():
                continue
            try:
                transactions.append(self._transaction(candidate))
            except UpstreamUnavailableError as exc:
                logger.warning(
                    "get_wallet_transactions: skipped tx=%s error=%s",
                    candidate.transaction_hash,
                    exc,
                )
                continue
            if len(transactions) >= self._result_limit:
                break
        return GetWalletTransactionsOutput(transactions=transactions)

    def _transaction(self, candidate: SwapTransfers) -> WalletTransaction:
        from_symbol, from_amount = self._describe(candidate.sent)
        to_symbol, to_amount = self._describe(candidate.received)
        seconds = self._wallet_logs_port.block_timestamp(block_number=candidate.block_number)
        return WalletTransaction(
            hash=candidate.transaction_hash,
            from_token=from_symbol,
            to_token=to_symbol,
            from_amount=from_amount,
            to_amount=to_amount,
            timestamp=datetime.fromtimestamp(seconds, tz=timezone.utc),
            block_number=candidate.block_number,
        )

    def _describe(self, log: TransferLog) -> tuple[str, str]:
        token = find_token_by_address(self.chain_id, log.token_address)
        if token is None:
            return shorten_address(log.token_address), format_transfer_amount(log.data, UNKNOWN_TOKEN_DECIMALS)
        return token.symbol, format_transfer_amount(log.data, token.decimals)
