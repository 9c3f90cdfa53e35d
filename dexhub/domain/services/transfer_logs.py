from __future__ import annotations

from decimal import Decimal
import re
from typing import Iterable

from dexhub.domain.entities.wallet_transaction import SwapTransfers, TransferLog


# keccak256("Transfer(address,address,uint256)")
TRANSFER_TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"

UNKNOWN_TOKEN_DECIMALS = 18

_EVM_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_evm_address(value: str) -> bool:
    return bool(_EVM_ADDRESS.match(value or ""))


def pad_address_topic(address: str) -> str:
    """Left-pad a 20-byte address to the 32-byte form used in indexed topics."""
    return "0x" + address.lower()[2:].rjust(64, "0")


def shorten_address(address: str) -> str:
    return f"{address[:6]}...{address[-4:]}"


def pair_swap_transfers(
    outgoing: Iterable[TransferLog],
    incoming: Iterable[TransferLog],
    *,
    limit: int,
) -> list[SwapTransfers]:
    """Transactions where the wallet both sent and received a token, newest block first.

    A transaction keeps the block number of the first log seen for it.
    """
    grouped: dict[str, tuple[int, list[TransferLog], list[TransferLog]]] = {}
    for log in outgoing:
        grouped.setdefault(log.transaction_hash, (log.block_number, [], []))[1].append(log)
    for log in incoming:
        grouped.setdefault(log.transaction_hash, (log.block_number, [], []))[2].append(log)

    candidates = [
        SwapTransfers(transaction_hash=tx_hash, block_number=block, sent=sent[0], received=received[0])
        for tx_hash, (block, sent, received) in grouped.items()
        if sent and received
    ]
    candidates.sort(key=lambda item: item.block_number, reverse=True)
    return candidates[:limit]


def format_transfer_amount(raw: str, decimals: int) -> str:
    """Human amount truncated to four decimals, shown with 2-4 fraction digits and grouped thousands.

    Undecodable data renders as ``"0"``.
    """
    try:
        value = int(raw, 16)
    except (TypeError, ValueError):
        return "0"
    if value < 0:
        return "0"

    scale = 10 ** decimals
    whole, fraction = divmod(value, scale)
    digits = str(fraction).rjust(decimals, "0")[:4] if decimals else ""
    amount = Decimal(f"{whole}.{digits}") if digits else Decimal(whole)

    text = f"{amount:,.4f}"
    while text.endswith("0") and len(text.rsplit(".", 1)[1]) > 2:
        text = text[:-1]
    return text
