"""Standardized block, transaction and operation records produced by the indexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class BlockIdentifier:
    """Identifies a block by hash and height."""

    hash: str
    index: int


class CurrencyStandard(Enum):
    """Token standard that a currency follows."""

    SIP09 = "sip09"
    SIP10 = "sip10"


@dataclass(frozen=True)
class CurrencyMetadata:
    """Where a token currency is defined."""

    asset_class_identifier: str
    standard: CurrencyStandard
    asset_identifier: str | None = None


@dataclass(frozen=True)
class Currency:
    """A currency with its symbol and number of decimals."""

    symbol: str
    decimals: int
    metadata: CurrencyMetadata | None = None


@dataclass(frozen=True)
class Amount:
    """A quantity of some currency, in its smallest unit."""

    value: int
    currency: Currency


@dataclass(frozen=True)
class AccountIdentifier:
    """An account touched by an operation."""

    address: str
    sub_account: str | None = None


@dataclass(frozen=True)
class OperationIdentifier:
    """Position of an operation within its transaction."""

    index: int
    network_index: int | None = None


class OperationType(Enum):
    """What an operation does to an account balance."""

    CREDIT = "credit"
    DEBIT = "debit"
    LOCK = "lock"


class OperationStatusKind(Enum):
    """Outcome of an operation."""

    SUCCESS = "success"


@dataclass
class Operation:
    """A single balance change caused by a transaction."""

    operation_identifier: OperationIdentifier
    type: OperationType
    account: AccountIdentifier
    status: OperationStatusKind | None = None
    amount: Amount | None = None
    related_operations: list[OperationIdentifier] | None = None
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True)
class TransactionIdentifier:
    """Identifies a transaction by its hash."""

    hash: str


@dataclass
class StacksTransactionMetadata:
    """Outcome and human readable summary of a Stacks transaction."""

    success: bool
    result: str
    description: str
    events: list[Any] = field(default_factory=list)


@dataclass
class StacksTransactionData:
    """A Stacks transaction with the operations it produced."""

    transaction_identifier: TransactionIdentifier
    operations: list[Operation]
    metadata: StacksTransactionMetadata


@dataclass
class StacksBlockMetadata:
    """Anchoring and PoX cycle position of a Stacks block."""

    bitcoin_anchor_block_identifier: BlockIdentifier
    pox_cycle_index: int
    pox_cycle_position: int
    pox_cycle_length: int


@dataclass
class StacksBlockData:
    """A standardized Stacks block."""

    block_identifier: BlockIdentifier
    parent_block_identifier: BlockIdentifier
    timestamp: int
    metadata: StacksBlockMetadata
    transactions: list[StacksTransactionData] = field(default_factory=list)


@dataclass
class BitcoinBlockData:
    """A standardized Bitcoin block."""

    block_identifier: BlockIdentifier
    parent_block_identifier: BlockIdentifier
    timestamp: int
    metadata: dict[str, Any] = field(default_factory=dict)
    transactions: list[Any] = field(default_factory=list)


@dataclass
class PoxInfo:
    """Proof-of-transfer parameters; defaults match a local devnet."""

    contract_id: str = "ST000000000000000000002AMW42H.pox"
    pox_activation_threshold_ustx: int = 0
    first_burnchain_block_height: int = 100
    prepare_phase_block_length: int = 1
    reward_phase_block_length: int = 4
    reward_slots: int = 8
    total_liquid_supply_ustx: int = 1000000000000000


def get_stacks_currency() -> Currency:
    """The native STX currency."""
    return Currency(symbol="STX", decimals=6, metadata=None)