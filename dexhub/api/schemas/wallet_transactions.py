from __future__ import annotations

from datetime import datetime

from dexhub.api.schemas.base import CamelModel


class WalletTransactionsRequest(CamelModel):
    wallet_address: str | None = None


class WalletTransactionResponse(CamelModel):
    id: str
    hash: str
    from_token: str
    to_token: str
    from_amount: str
    to_amount: str
    status: str
    timestamp: datetime
    block_number: int


class WalletTransactionsResponse(CamelModel):
    transactions: list[WalletTransactionResponse]
