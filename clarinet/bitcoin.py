"""Standardize Bitcoin burn blocks using a bitcoind JSON-RPC endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from clarinet.models import BitcoinBlockData, BlockIdentifier


class BitcoinRpcError(RuntimeError):
    """Raised when the Bitcoin node reports an error."""


class BitcoinRpcClient:
    """Minimal JSON-RPC client for a Bitcoin node."""

    def __init__(self, url: str, username: str, password: str, timeout: float = 30.0) -> None:
        self.url = url
        self._auth = (username, password)
        self.timeout = timeout

    def _call(self, method: str, *params: Any) -> Any:
        response = requests.post(
            self.url,
            json={"jsonrpc": "1.0", "id": "clarinet", "method": method, "params": list(params)},
            auth=self._auth,
            timeout=self.timeout,
        )
        try:
            body = response.json()
        except ValueError:
            response.raise_for_status()
            raise BitcoinRpcError(f"invalid response to {method}") from None
        if body.get("error"):
            raise BitcoinRpcError(str(body["error"]))
        return body.get("result")

    def get_block(self, block_hash: str) -> dict[str, Any]:
        """Header fields of the block with the given hash."""
        return self._call("getblock", block_hash, 1)


def standardize_bitcoin_block(rpc, marshalled_block) -> BitcoinBlockData:
    """Turn a burn block notification into a standardized Bitcoin block."""
    if not isinstance(marshalled_block, Mapping):
        raise ValueError("burn block must be an object")
    raw_hash = marshalled_block.get("burn_block_hash")
    height = marshalled_block.get("burn_block_height")
    if not isinstance(raw_hash, str) or not raw_hash.startswith("0x"):
        raise ValueError("burn_block_hash must be a 0x-prefixed hex string")
    if not isinstance(height, int) or isinstance(height, bool) or height < 1:
        raise ValueError("burn_block_height must be a positive integer")
    block_hash = bytes.fromhex(raw_hash[2:])[::-1].hex()

    block = rpc.get_block(block_hash)
    return BitcoinBlockData(
        block_identifier=BlockIdentifier(hash=block["hash"], index=height),
        parent_block_identifier=BlockIdentifier(
            hash=block.get("previousblockhash", "0" * 64), index=height - 1
        ),
        timestamp=block["time"],
    )