from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TransferLog:
    """One ERC-20 ``Transfer`` event as returned by ``eth_getLogs``."""

    transaction_hash: str
    token_address: str
    data: str
    block_number: int


@dataclass(frozen=True)
class SwapTransfers:
    """First outgoing and first incoming transfer of one wallet transaction."""

    transaction_hash: str
    block_number: int
    sent: TransferLog
    received: TransferLog


@dataclass(frozen=True)
class WalletTransaction:
    hash: str
    from_token: str
    to_token: str
    from_amount: str
    to_amount: str
    timestamp: datetime
    block_number: int
    status: str = "completed"
