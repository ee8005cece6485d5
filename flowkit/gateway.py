"""Abstract access interface to a blockchain node."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from .types import (
    Account,
    Address,
    Block,
    BlockEvents,
    Collection,
    Identifier,
    Transaction,
    TransactionResult,
)


class Gateway(ABC):
    """Operations a blockchain access backend must provide."""

    @abstractmethod
    def get_account(self, address: Address) -> Account: ...

    @abstractmethod
    def send_signed_transaction(self, tx: Transaction) -> Transaction: ...

    @abstractmethod
    def get_transaction(self, tx_id: Identifier) -> Transaction: ...

    @abstractmethod
    def get_transaction_results_by_block_id(
        self, block_id: Identifier
    ) -> list[TransactionResult]: ...

    @abstractmethod
    def get_transaction_result(
        self, tx_id: Identifier, wait_seal: bool
    ) -> TransactionResult: ...

    @abstractmethod
    def get_transactions_by_block_id(self, block_id: Identifier) -> list[Transaction]: ...

    @abstractmethod
    def get_system_transaction(self, block_id: Identifier) -> Transaction: ...

    @abstractmethod
    def get_system_transaction_result(self, block_id: Identifier) -> TransactionResult: ...

    @abstractmethod
    def execute_script(self, script: bytes, arguments: Sequence[Any]) -> Any: ...

    @abstractmethod
    def execute_script_at_height(
        self, script: bytes, arguments: Sequence[Any], height: int
    ) -> Any: ...

    @abstractmethod
    def execute_script_at_id(
        self, script: bytes, arguments: Sequence[Any], block_id: Identifier
    ) -> Any: ...

    @abstractmethod
    def get_latest_block(self) -> Block: ...

    @abstractmethod
    def get_block_by_height(self, height: int) -> Block: ...

    @abstractmethod
    def get_block_by_id(self, block_id: Identifier) -> Block: ...

    @abstractmethod
    def get_events(
        self, event_type: str, start_height: int, end_height: int
    ) -> list[BlockEvents]: ...

    @abstractmethod
    def get_collection(self, collection_id: Identifier) -> Collection: ...

    @abstractmethod
    def get_latest_protocol_state_snapshot(self) -> bytes: ...

    @abstractmethod
    def ping(self) -> None: ...

    @abstractmethod
    def wait_server(self) -> None: ...

    @abstractmethod
    def secure_connection(self) -> bool: ...