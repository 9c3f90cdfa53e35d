from __future__ import annotations

from dataclasses import dataclass

from dexhub.domain.entities.wallet_transaction import WalletTransaction


@dataclass(frozen=True)
class GetWalletTransactionsInput:
    wallet_address: str


@dataclass(frozen=True)
class GetWalletTransactionsOutput:
    transactions: list[WalletTransaction]
