import dataclasses

import pytest

from clarinet.models import (
    AccountIdentifier,
    Amount,
    BitcoinBlockData,
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


def test_stacks_currency_is_stx_with_six_decimals():
    currency = get_stacks_currency()
    assert currency.symbol == "STX"
    assert currency.decimals == 6
    assert currency.metadata is None


def test_stacks_currency_equals_explicit_value():
    assert get_stacks_currency() == Currency(symbol="STX", decimals=6, metadata=None)


def test_pox_info_defaults_match_devnet():
    info = PoxInfo()
    assert info.contract_id == "ST000000000000000000002AMW42H.pox"
    assert info.pox_activation_threshold_ustx == 0
    assert info.first_burnchain_block_height == 100
    assert info.prepare_phase_block_length == 1
    assert info.reward_phase_block_length == 4
    assert info.reward_slots == 8
    assert info.total_liquid_supply_ustx == 1000000000000000


def test_pox_info_override_keeps_other_defaults():
    info = PoxInfo(reward_slots=20)
    assert info.reward_slots == 20
    assert info.first_burnchain_block_height == PoxInfo().first_burnchain_block_height


def test_block_identifier_is_immutable():
    block = BlockIdentifier(hash="0xabc", index=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        block.index = 4
    assert block.index == 3


def test_block_identifier_equality_and_hash():
    first = BlockIdentifier(hash="0xabc", index=3)
    second = BlockIdentifier(hash="0xabc", index=3)
    assert first == second
    assert len({first, second}) == 1


def test_currency_metadata_defaults_to_no_asset_identifier():
    metadata = CurrencyMetadata(
        asset_class_identifier="ST1.token::tok", standard=CurrencyStandard.SIP10
    )
    assert metadata.asset_identifier is None
    currency = Currency(symbol="TOK", decimals=2, metadata=metadata)
    assert currency.metadata.standard is CurrencyStandard.SIP10


def test_operation_optional_fields_default_to_none():
    operation = Operation(
        operation_identifier=OperationIdentifier(index=0),
        type=OperationType.CREDIT,
        account=AccountIdentifier(address="ST1"),
    )
    assert operation.status is None
    assert operation.amount is None
    assert operation.related_operations is None
    assert operation.metadata is None
    assert operation.operation_identifier.network_index is None
    assert operation.account.sub_account is None


def test_operation_types_are_distinct():
    kinds = {OperationType.CREDIT, OperationType.DEBIT, OperationType.LOCK}
    assert len(kinds) == 3
    assert OperationStatusKind("success") is OperationStatusKind.SUCCESS


def test_stacks_block_holds_transactions():
    amount = Amount(value=10, currency=get_stacks_currency())
    operation = Operation(
        operation_identifier=OperationIdentifier(index=0),
        type=OperationType.DEBIT,
        account=AccountIdentifier(address="ST1"),
        status=OperationStatusKind.SUCCESS,
        amount=amount,
    )
    tx = StacksTransactionData(
        transaction_identifier=TransactionIdentifier(hash="0x01"),
        operations=[operation],
        metadata=StacksTransactionMetadata(success=True, result="(ok true)", description="coinbase"),
    )
    block = StacksBlockData(
        block_identifier=BlockIdentifier("0x02", 5),
        parent_block_identifier=BlockIdentifier("0x01", 5),
        timestamp=0,
        metadata=StacksBlockMetadata(
            bitcoin_anchor_block_identifier=BlockIdentifier("0x03", 105),
            pox_cycle_index=1,
            pox_cycle_position=0,
            pox_cycle_length=5,
        ),
        transactions=[tx],
    )
    assert block.transactions[0].operations[0].amount.value == 10
    assert tx.metadata.events == []


def test_bitcoin_block_defaults_are_independent():
    first = BitcoinBlockData(BlockIdentifier("a", 1), BlockIdentifier("b", 0), 0)
    second = BitcoinBlockData(BlockIdentifier("a", 1), BlockIdentifier("b", 0), 0)
    first.transactions.append("tx")
    assert second.transactions == []
    assert first.metadata == {}