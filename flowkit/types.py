"""Value types for blockchain entities exchanged with a gateway."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

_ID_LENGTH = 32
_ADDRESS_LENGTH = 8


def _decode_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise ValueError(f"invalid hex string: {value!r}") from exc


@dataclass(frozen=True)
class Identifier:
    """A 32-byte identifier of a block, transaction or collection."""

    value: bytes = bytes(_ID_LENGTH)

    def __post_init__(self) -> None:
        if len(self.value) != _ID_LENGTH:
            raise ValueError(f"identifier must be {_ID_LENGTH} bytes, got {len(self.value)}")

    @classmethod
    def from_hex(cls, value: str) -> Identifier:
        """Decode hex; shorter input fills from the left, longer is truncated."""
        raw = _decode_hex(value)[:_ID_LENGTH]
        return cls(raw.ljust(_ID_LENGTH, b"\x00"))

    def __bool__(self) -> bool:
        return any(self.value)

    def __str__(self) -> str:
        return self.value.hex()


@dataclass(frozen=True)
class Address:
    """An 8-byte account address."""

    value: bytes = bytes(_ADDRESS_LENGTH)

    def __post_init__(self) -> None:
        if len(self.value) != _ADDRESS_LENGTH:
            raise ValueError(f"address must be {_ADDRESS_LENGTH} bytes, got {len(self.value)}")

    @classmethod
    def from_hex(cls, value: str) -> Address:
        """Decode hex with optional ``0x``; shorter input is left padded, longer keeps the last bytes."""
        digits = value.removeprefix("0x")
        if len(digits) % 2:
            digits = "0" + digits
        raw = _decode_hex(digits)[-_ADDRESS_LENGTH:]
        return cls(raw.rjust(_ADDRESS_LENGTH, b"\x00"))

    def __bool__(self) -> bool:
        return any(self.value)

    def __str__(self) -> str:
        return self.value.hex()


EMPTY_ID = Identifier()
EMPTY_ADDRESS = Address()


@dataclass
class Account:
    address: Address
    balance: int = 0
    keys: list[Any] = field(default_factory=list)
    contracts: dict[str, bytes] = field(default_factory=dict)


@dataclass
class Block:
    id: Identifier
    parent_id: Identifier = EMPTY_ID
    height: int = 0
    timestamp: datetime | None = None
    collection_guarantees: list[Identifier] = field(default_factory=list)


@dataclass
class Event:
    type: str
    transaction_id: Identifier = EMPTY_ID
    transaction_index: int = 0
    event_index: int = 0
    value: Any = None
    payload: bytes = b""


@dataclass
class BlockEvents:
    block_id: Identifier
    height: int = 0
    block_timestamp: datetime | None = None
    events: list[Event] = field(default_factory=list)


class TransactionStatus(Enum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    FINALIZED = "finalized"
    EXECUTED = "executed"
    SEALED = "sealed"
    EXPIRED = "expired"


@dataclass
class Transaction:
    id: Identifier
    script: bytes = b""
    arguments: list[Any] = field(default_factory=list)
    reference_block_id: Identifier = EMPTY_ID
    gas_limit: int = 0
    payer: Address = EMPTY_ADDRESS
    authorizers: list[Address] = field(default_factory=list)


@dataclass
class TransactionResult:
    status: TransactionStatus = TransactionStatus.UNKNOWN
    error: Exception | None = None
    events: list[Event] = field(default_factory=list)
    block_id: Identifier = EMPTY_ID
    block_height: int = 0
    transaction_id: Identifier = EMPTY_ID


@dataclass
class Collection:
    id: Identifier
    transaction_ids: list[Identifier] = field(default_factory=list)


@dataclass(frozen=True)
class EventRangeQuery:
    type: str
    start_height: int
    end_height: int