"""Track recent Stacks and Bitcoin blocks and standardize incoming ones."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

import requests

from clarinet.bitcoin import BitcoinRpcClient, standardize_bitcoin_block
from clarinet.events import AssetClassCache
from clarinet.models import BitcoinBlockData, BlockIdentifier, PoxInfo, StacksBlockData
from clarinet.stacks import AssetClassResolver, standardize_stacks_block

_RECENT_BLOCKS = 7

B = TypeVar("B")


@dataclass
class IndexerConfig:
    """Endpoints the indexer talks to."""

    stacks_node_rpc_url: str
    bitcoin_node_rpc_url: str
    bitcoin_node_rpc_username: str
    bitcoin_node_rpc_password: str


@dataclass
class ChainUpdatedWithBlock(Generic[B]):
    """The chain grew by one block."""

    block: B


@dataclass
class ChainUpdatedWithReorg(Generic[B]):
    """The chain was reorganised onto the given blocks."""

    blocks: list[B]


@dataclass
class StacksChainContext:
    """State kept across Stacks blocks."""

    asset_class_map: dict[str, AssetClassCache] = field(default_factory=dict)
    pox_info: PoxInfo = field(default_factory=PoxInfo)


def _track(recent: deque, identifier: BlockIdentifier, entry: Any) -> None:
    if not recent:
        recent.append(entry)
        return
    tip = recent[-1][0] if isinstance(recent[-1], tuple) else recent[-1]
    if identifier.index == tip.index + 1:
        recent.append(entry)
    # Gaps and reorgs leave the tracked tail unchanged.


class Indexer:
    """Standardizes blocks and remembers the last few of each chain."""

    def __init__(
        self,
        config: IndexerConfig,
        bitcoin_rpc: Any = None,
        resolve_asset_class: AssetClassResolver | None = None,
    ) -> None:
        self.config = config
        self.bitcoin_rpc = bitcoin_rpc or BitcoinRpcClient(
            config.bitcoin_node_rpc_url,
            config.bitcoin_node_rpc_username,
            config.bitcoin_node_rpc_password,
        )
        self.resolve_asset_class = resolve_asset_class
        self.stacks_context = StacksChainContext()
        self._stacks_recent: deque = deque(maxlen=_RECENT_BLOCKS)
        self._bitcoin_recent: deque = deque(maxlen=_RECENT_BLOCKS)

    @property
    def recent_bitcoin_blocks(self) -> tuple[BlockIdentifier, ...]:
        return tuple(self._bitcoin_recent)

    @property
    def recent_stacks_blocks(self) -> tuple[BlockIdentifier, ...]:
        return tuple(identifier for identifier, _ in self._stacks_recent)

    def handle_bitcoin_block(self, marshalled_block) -> ChainUpdatedWithBlock[BitcoinBlockData]:
        block = standardize_bitcoin_block(self.bitcoin_rpc, marshalled_block)
        _track(self._bitcoin_recent, block.block_identifier, block.block_identifier)
        return ChainUpdatedWithBlock(block)

    def handle_stacks_block(self, marshalled_block) -> ChainUpdatedWithBlock[StacksBlockData]:
        block = standardize_stacks_block(
            marshalled_block,
            self.stacks_context.pox_info,
            self.stacks_context.asset_class_map,
            self.resolve_asset_class,
        )
        _track(
            self._stacks_recent,
            block.block_identifier,
            (block.block_identifier, block.metadata),
        )
        return ChainUpdatedWithBlock(block)

    def get_pox_info(self) -> PoxInfo:
        current = self.stacks_context.pox_info
        return PoxInfo(**{f.name: getattr(current, f.name) for f in fields(PoxInfo)})

    def update_pox_info(self) -> None:
        """Fetch PoX parameters from the node; malformed replies are ignored."""
        response = requests.get(f"{self.config.stacks_node_rpc_url}/v2/pox", timeout=30)
        try:
            body = response.json()
        except ValueError:
            return
        if not isinstance(body, dict):
            return
        known = {f.name: f.type for f in fields(PoxInfo)}
        values = {key: body[key] for key in known if key in body}
        if set(values) != set(known):
            return
        self.stacks_context.pox_info = PoxInfo(**values)