"""Standardize Stacks blocks and their events into operations."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from clarinet.events import (
    AssetClassCache,
    FTBurnEventData,
    FTMintEventData,
    FTTransferEventData,
    NewEvent,
    NewTransaction,
    NFTBurnEventData,
    NFTMintEventData,
    NFTTransferEventData,
    STXBurnEventData,
    STXLockEventData,
    STXMintEventData,
    STXTransferEventData,
    parse_event,
    parse_event_payload,
    parse_transaction,
)
from clarinet.models import (
    AccountIdentifier,
    Amount,
    BlockIdentifier,
    Currency,
    CurrencyMetadata,
    CurrencyStandard,
    Operation,
    OperationIdentifier,
    OperationStatusKind,
    OperationType,
    PoxInfo,
    StacksBlockData,
    StacksBlockMetadata,
    StacksTransactionData,
    StacksTransactionMetadata,
    TransactionIdentifier,
    get_stacks_currency,
)

AssetClassResolver = Callable[[str, str], AssetClassCache]

_U64_MAX = 2**64 - 1


def _parse_u64(text: str) -> int:
    if not text.isdigit():
        raise ValueError(f"Unable to parse u64: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"Unable to parse u64: {text!r}")
    return value


def _describe_raw(raw: str) -> str:
    """Strip the hex prefix from a raw encoded value when it is valid hex."""
    if not raw.startswith("0x"):
        return raw
    stripped = raw[2:]
    try:
        bytes.fromhex(stripped)
    except ValueError:
        return raw
    return stripped


def get_standardized_non_fungible_currency(asset_class_id, asset_id) -> Currency:
    """Currency describing one token of a non-fungible asset class."""
    return Currency(
        symbol=asset_class_id,
        decimals=0,
        metadata=CurrencyMetadata(
            asset_class_identifier=asset_class_id,
            asset_identifier=asset_id,
            standard=CurrencyStandard.SIP09,
        ),
    )


def get_standardized_fungible_currency(
    asset_class_id, asset_class_cache, resolve_asset_class
) -> Currency:
    """Currency of a fungible asset class, resolving and caching its symbol and decimals."""
    entry = asset_class_cache.get(asset_class_id)
    if entry is None:
        if resolve_asset_class is None:
            raise LookupError(f"Unable to resolve asset class {asset_class_id}")
        principal = asset_class_id.split("::")[0].split(".")
        if len(principal) < 2:
            raise ValueError(f"Malformed asset class identifier: {asset_class_id}")
        entry = resolve_asset_class(principal[0], principal[1])
        asset_class_cache[asset_class_id] = entry
    return Currency(
        symbol=entry.symbol,
        decimals=entry.decimals,
        metadata=CurrencyMetadata(
            asset_class_identifier=asset_class_id,
            standard=CurrencyStandard.SIP10,
        ),
    )


class _OperationBuilder:
    def __init__(self) -> None:
        self.operations: list[Operation] = []

    def single(self, kind: OperationType, address: str, amount: Amount) -> None:
        self.operations.append(
            Operation(
                operation_identifier=OperationIdentifier(index=len(self.operations)),
                type=kind,
                status=OperationStatusKind.SUCCESS,
                account=AccountIdentifier(address=address),
                amount=amount,
            )
        )

    def transfer(self, sender: str, recipient: str, amount: Amount) -> None:
        debit_id = len(self.operations)
        credit_id = debit_id + 1
        for index, related, kind, address in (
            (debit_id, credit_id, OperationType.DEBIT, sender),
            (credit_id, debit_id, OperationType.CREDIT, recipient),
        ):
            self.operations.append(
                Operation(
                    operation_identifier=OperationIdentifier(index=index),
                    related_operations=[OperationIdentifier(index=related)],
                    type=kind,
                    status=OperationStatusKind.SUCCESS,
                    account=AccountIdentifier(address=address),
                    amount=amount,
                )
            )


def get_standardized_stacks_operations(
    transaction, events, asset_class_cache, resolve_asset_class
) -> list[Operation]:
    """Operations of a transaction; its events are removed from the events list."""
    own = [event for event in events if event.txid == transaction.txid]
    events[:] = [event for event in events if event.txid != transaction.txid]

    builder = _OperationBuilder()
    stx = get_stacks_currency

    def fungible(asset_class_id: str) -> Currency:
        return get_standardized_fungible_currency(
            asset_class_id, asset_class_cache, resolve_asset_class
        )

    for event in own:
        data = parse_event_payload(event)
        match data:
            case STXMintEventData():
                builder.single(OperationType.CREDIT, data.recipient, Amount(_parse_u64(data.amount), stx()))
            case STXLockEventData():
                builder.single(
                    OperationType.LOCK, data.locked_address, Amount(_parse_u64(data.locked_amount), stx())
                )
            case STXBurnEventData():
                builder.single(OperationType.DEBIT, data.sender, Amount(_parse_u64(data.amount), stx()))
            case STXTransferEventData():
                builder.transfer(data.sender, data.recipient, Amount(_parse_u64(data.amount), stx()))
            case NFTMintEventData():
                currency = get_standardized_non_fungible_currency(
                    data.asset_class_identifier, data.asset_identifier
                )
                builder.single(OperationType.CREDIT, data.recipient, Amount(1, currency))
            case NFTBurnEventData():
                currency = get_standardized_non_fungible_currency(
                    data.asset_class_identifier, data.asset_identifier
                )
                builder.single(OperationType.DEBIT, data.sender, Amount(1, currency))
            case NFTTransferEventData():
                currency = get_standardized_non_fungible_currency(
                    data.asset_class_identifier, data.asset_identifier
                )
                builder.transfer(data.sender, data.recipient, Amount(1, currency))
            case FTMintEventData():
                currency = fungible(data.asset_class_identifier)
                builder.single(OperationType.CREDIT, data.recipient, Amount(_parse_u64(data.amount), currency))
            case FTBurnEventData():
                currency = fungible(data.asset_class_identifier)
                builder.single(OperationType.DEBIT, data.sender, Amount(_parse_u64(data.amount), currency))
            case FTTransferEventData():
                currency = fungible(data.asset_class_identifier)
                builder.transfer(data.sender, data.recipient, Amount(_parse_u64(data.amount), currency))
            case None:
                pass
    return builder.operations


def _field(block: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in block:
        raise ValueError(f"block: missing field '{key}'")
    value = block[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"block: field '{key}' must be of type {kind.__name__}")
    return value


def standardize_stacks_block(
    marshalled_block, pox_info: PoxInfo, asset_class_cache: MutableMapping, resolve_asset_class
) -> StacksBlockData:
    """Turn a block sent by a Stacks node into a standardized block."""
    if not isinstance(marshalled_block, Mapping):
        raise ValueError("block must be an object")
    block_height = _field(marshalled_block, "block_height", int)
    burn_block_height = _field(marshalled_block, "burn_block_height", int)
    burn_block_hash = _field(marshalled_block, "burn_block_hash", str)
    index_block_hash = _field(marshalled_block, "index_block_hash", str)
    parent_index_block_hash = _field(marshalled_block, "parent_index_block_hash", str)
    transactions: list[NewTransaction] = [
        parse_transaction(t) for t in _field(marshalled_block, "transactions", list)
    ]
    events: list[NewEvent] = [parse_event(e) for e in _field(marshalled_block, "events", list)]

    cycle_length = pox_info.prepare_phase_block_length + pox_info.reward_phase_block_length
    current_len = burn_block_height - pox_info.first_burnchain_block_height
    if current_len < 0:
        raise ValueError("burn block height precedes the first burnchain block")

    standardized = [
        StacksTransactionData(
            transaction_identifier=TransactionIdentifier(hash=t.txid),
            operations=get_standardized_stacks_operations(
                t, events, asset_class_cache, resolve_asset_class
            ),
            metadata=StacksTransactionMetadata(
                success=t.status == "success",
                result=_describe_raw(t.raw_result),
                description=_describe_raw(t.raw_tx),
            ),
        )
        for t in transactions
    ]

    return StacksBlockData(
        block_identifier=BlockIdentifier(hash=index_block_hash, index=block_height),
        parent_block_identifier=BlockIdentifier(hash=parent_index_block_hash, index=block_height),
        timestamp=0,
        metadata=StacksBlockMetadata(
            bitcoin_anchor_block_identifier=BlockIdentifier(
                hash=burn_block_hash, index=burn_block_height
            ),
            pox_cycle_index=current_len // cycle_length,
            pox_cycle_position=current_len % cycle_length,
            pox_cycle_length=cycle_length,
        ),
        transactions=standardized,
    )