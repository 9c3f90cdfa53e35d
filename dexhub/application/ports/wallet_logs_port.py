from __future__ import annotations

from typing import Protocol, Sequence

from dexhub.domain.entities.wallet_transaction import TransferLog


class WalletLogsPort(Protocol):
    source: str

    def latest_block(self) -> int:
        ...

    def transfer_logs(self, *, from_block: int, topics: Sequence[str | None]) -> list[TransferLog]:
        ...

    def block_timestamp(self, *, block_number: int) -> int:
        ...
