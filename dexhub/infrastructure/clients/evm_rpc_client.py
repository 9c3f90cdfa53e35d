from __future__ import annotations

import logging
from typing import Sequence

import httpx

from dexhub.domain.entities.wallet_transaction import TransferLog
from dexhub.domain.exceptions import UpstreamUnavailableError


logger = logging.getLogger(__name__)


def _hex_int(value: object) -> int:
    try:
        return int(value, 16)
    except (TypeError, ValueError) as exc:
        raise UpstreamUnavailableError(f"rpc: not a hex quantity: {value!r}") from exc


class EvmRpcClient:
    """Plain JSON-RPC reads against an EVM node."""

    source = "evm-rpc"

    def __init__(self, rpc_url: str, timeout_seconds: float):
        self.rpc_url = rpc_url
        self.timeout = timeout_seconds

    def latest_block(self) -> int:
        return _hex_int(self._rpc("eth_blockNumber", []))

    def transfer_logs(self, *, from_block: int, topics: Sequence[str | None]) -> list[TransferLog]:
        result = self._rpc(
            "eth_getLogs",
            [{"fromBlock": hex(from_block), "toBlock": "latest", "topics": list(topics)}],
        )
        if not isinstance(result, list):
            raise UpstreamUnavailableError("rpc: eth_getLogs result is not a list")

        logs: list[TransferLog] = []
        for row in result:
            if not isinstance(row, dict):
                continue
            tx_hash = row.get("transactionHash")
            address = row.get("address")
            if not isinstance(tx_hash, str) or not isinstance(address, str):
                continue
            try:
                block_number = int(row.get("blockNumber"), 16)
            except (TypeError, ValueError):
                continue
            logs.append(
                TransferLog(
                    transaction_hash=tx_hash,
                    token_address=address,
                    data=row.get("data") if isinstance(row.get("data"), str) else "",
                    block_number=block_number,
                )
            )
        return logs

    def block_timestamp(self, *, block_number: int) -> int:
        block = self._rpc("eth_getBlockByNumber", [hex(block_number), False])
        if not isinstance(block, dict):
            raise UpstreamUnavailableError(f"rpc: block {block_number} not found")
        return _hex_int(block.get("timestamp"))

    def _rpc(self, method: str, params: list) -> object:
        body = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.rpc_url, json=body)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"rpc: {exc}") from exc

        if not isinstance(payload, dict):
            raise UpstreamUnavailableError(f"rpc: unexpected {method} payload")
        error = payload.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else error
            logger.warning("evm_rpc_client: rpc_error method=%s error=%s", method, message)
            raise UpstreamUnavailableError(f"rpc: {message}")
        return payload.get("result")
