from __future__ import annotations

from dexhub.domain.entities.wallet_transaction import TransferLog
from dexhub.domain.services.transfer_logs import (
    format_transfer_amount,
    is_evm_address,
    pad_address_topic,
    pair_swap_transfers,
    shorten_address,
)


def _log(tx_hash: str, block: int, token: str = "0xtoken") -> TransferLog:
    return TransferLog(transaction_hash=tx_hash, token_address=token, data="0x1", block_number=block)


def test_address_topic_is_left_padded_lowercase():
    topic = pad_address_topic("0xAbC0000000000000000000000000000000000001")

    assert topic == "0x" + "0" * 24 + "abc0000000000000000000000000000000000001"
    assert len(topic) == 66


def test_address_validation_and_shortening():
    assert is_evm_address("0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913")
    assert not is_evm_address("0x1234")
    assert not is_evm_address("")
    assert shorten_address("0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913") == "0x8335...2913"


def test_amount_is_truncated_to_four_decimals():
    assert format_transfer_amount(hex(1_234_560_000_000_000_000), 18) == "1.2345"
    assert format_transfer_amount(hex(1_999_990_000_000_000_000), 18) == "1.9999"


def test_amount_keeps_two_fraction_digits_and_groups_thousands():
    assert format_transfer_amount(hex(2_500 * 10**6), 6) == "2,500.00"
    assert format_transfer_amount(hex(1_234_567 * 10**18 + 5 * 10**17), 18) == "1,234,567.50"
    assert format_transfer_amount(hex(42), 0) == "42.00"
    assert format_transfer_amount("0x0", 18) == "0.00"


def test_undecodable_amount_is_zero():
    assert format_transfer_amount("0x", 18) == "0"
    assert format_transfer_amount("not-hex", 6) == "0"


def test_only_transactions_with_both_directions_are_paired_newest_first():
    outgoing = [_log("0xa", 5), _log("0xb", 9), _log("0xc", 7)]
    incoming = [_log("0xa", 5), _log("0xb", 9), _log("0xd", 8)]

    pairs = pair_swap_transfers(outgoing, incoming, limit=20)

    assert [pair.transaction_hash for pair in pairs] == ["0xb", "0xa"]
    assert pairs[0].block_number == 9


def test_pairing_keeps_first_transfer_of_each_direction():
    outgoing = [_log("0xa", 5, "0xfirst"), _log("0xa", 5, "0xsecond")]
    incoming = [_log("0xa", 5, "0xin")]

    (pair,) = pair_swap_transfers(outgoing, incoming, limit=20)

    assert pair.sent.token_address == "0xfirst"
    assert pair.received.token_address == "0xin"


def test_pairing_respects_limit():
    outgoing = [_log(f"0x{index}", index) for index in range(30)]
    incoming = [_log(f"0x{index}", index) for index in range(30)]

    pairs = pair_swap_transfers(outgoing, incoming, limit=20)

    assert len(pairs) == 20
    assert pairs[0].block_number == 29
