"""Decoding of the block, transaction and event payloads sent by a Stacks node."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Union


@dataclass
class AssetClassCache:
    """Cached symbol and decimals of a fungible token class."""

    symbol: str = ""
    decimals: int = 0


@dataclass
class NewTransaction:
    """A transaction as reported by the node's block observer."""

    txid: str
    status: str
    raw_result: str
    raw_tx: str


@dataclass
class NewEvent:
    """An event as reported by the node; at most a few payload fields are set."""

    txid: str
    committed: bool
    event_index: int
    event_type: str
    stx_transfer_event: Any = None
    stx_mint_event: Any = None
    stx_burn_event: Any = None
    stx_lock_event: Any = None
    nft_transfer_event: Any = None
    nft_mint_event: Any = None
    nft_burn_event: Any = None
    ft_transfer_event: Any = None
    ft_mint_event: Any = None
    ft_burn_event: Any = None


def _renamed(json_key: str):
    return field(metadata={"json": json_key})


@dataclass(frozen=True)
class STXTransferEventData:
    sender: str
    recipient: str
    amount: str


@dataclass(frozen=True)
class STXMintEventData:
    recipient: str
    amount: str


@dataclass(frozen=True)
class STXLockEventData:
    locked_amount: str
    unlock_height: str
    locked_address: str


@dataclass(frozen=True)
class STXBurnEventData:
    sender: str
    amount: str


@dataclass(frozen=True)
class NFTTransferEventData:
    asset_class_identifier: str = _renamed("asset_identifier")
    asset_identifier: str = _renamed("value")
    sender: str = field(default="")
    recipient: str = field(default="")


@dataclass(frozen=True)
class NFTMintEventData:
    asset_class_identifier: str = _renamed("asset_identifier")
    asset_identifier: str = _renamed("value")
    recipient: str = field(default="")


@dataclass(frozen=True)
class NFTBurnEventData:
    asset_class_identifier: str = _renamed("asset_identifier")
    asset_identifier: str = _renamed("value")
    sender: str = field(default="")


@dataclass(frozen=True)
class FTTransferEventData:
    asset_class_identifier: str = _renamed("asset_identifier")
    sender: str = field(default="")
    recipient: str = field(default="")
    amount: str = field(default="")


@dataclass(frozen=True)
class FTMintEventData:
    asset_class_identifier: str = _renamed("asset_identifier")
    recipient: str = field(default="")
    amount: str = field(default="")


@dataclass(frozen=True)
class FTBurnEventData:
    asset_class_identifier: str = _renamed("asset_identifier")
    sender: str = field(default="")
    amount: str = field(default="")


EventPayload = Union[
    STXTransferEventData,
    STXMintEventData,
    STXLockEventData,
    STXBurnEventData,
    NFTTransferEventData,
    NFTMintEventData,
    NFTBurnEventData,
    FTTransferEventData,
    FTMintEventData,
    FTBurnEventData,
]

# Order in which payloads are looked up when an event carries several.
_PAYLOAD_KINDS: tuple[tuple[str, type], ...] = (
    ("stx_mint_event", STXMintEventData),
    ("stx_lock_event", STXLockEventData),
    ("stx_burn_event", STXBurnEventData),
    ("stx_transfer_event", STXTransferEventData),
    ("nft_mint_event", NFTMintEventData),
    ("nft_burn_event", NFTBurnEventData),
    ("nft_transfer_event", NFTTransferEventData),
    ("ft_mint_event", FTMintEventData),
    ("ft_burn_event", FTBurnEventData),
    ("ft_transfer_event", FTTransferEventData),
)


def _expect_mapping(data: Any, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _get(data: Mapping, key: str, kind: type, what: str) -> Any:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"{what}: missing field '{key}'") from None
    wrong_bool = kind is int and isinstance(value, bool)
    if not isinstance(value, kind) or wrong_bool:
        raise ValueError(
            f"{what}: field '{key}' must be of type {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _decode_payload(cls: type, data: Any) -> EventPayload:
    what = cls.__name__
    mapping = _expect_mapping(data, what)
    values = {
        f.name: _get(mapping, f.metadata.get("json", f.name), str, what) for f in fields(cls)
    }
    return cls(**values)


def parse_transaction(data: Any) -> NewTransaction:
    """Decode a transaction object; raises ValueError on malformed input."""
    mapping = _expect_mapping(data, "transaction")
    return NewTransaction(
        txid=_get(mapping, "txid", str, "transaction"),
        status=_get(mapping, "status", str, "transaction"),
        raw_result=_get(mapping, "raw_result", str, "transaction"),
        raw_tx=_get(mapping, "raw_tx", str, "transaction"),
    )


def parse_event(data: Any) -> NewEvent:
    """Decode an event object; raises ValueError on malformed input."""
    mapping = _expect_mapping(data, "event")
    event_index = _get(mapping, "event_index", int, "event")
    if not 0 <= event_index < 2**32:
        raise ValueError(f"event: field 'event_index' out of range: {event_index}")
    payloads = {key: mapping.get(key) for key, _ in _PAYLOAD_KINDS}
    return NewEvent(
        txid=_get(mapping, "txid", str, "event"),
        committed=_get(mapping, "committed", bool, "event"),
        event_index=event_index,
        event_type=_get(mapping, "type", str, "event"),
        **payloads,
    )


def parse_event_payload(event: NewEvent) -> EventPayload | None:
    """Decode the first payload the event carries, or None when it carries none."""
    for key, cls in _PAYLOAD_KINDS:
        raw = getattr(event, key)
        if raw is not None:
            return _decode_payload(cls, raw)
    return None