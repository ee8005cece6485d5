"""High-level operations against a blockchain gateway."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

from .gateway import Gateway
from .logger import Logger, LogLevel, StdoutLogger
from .queries import (
    LATEST_SCRIPT_QUERY,
    BlockQuery,
    EventWorker,
    ScriptQuery,
    make_event_queries,
)
from .types import (
    Account,
    Address,
    Block,
    BlockEvents,
    Collection,
    EventRangeQuery,
    Identifier,
    Transaction,
    TransactionResult,
)

_DEFAULT_WORKER = EventWorker(count=1, blocks_per_worker=250)


class ProjectDeploymentError(Exception):
    """Collects per-contract failures from a project deployment."""

    def __init__(self) -> None:
        super().__init__()
        self._contracts: dict[str, Exception] = {}

    def add(self, contract_name: str, error: BaseException, message: str) -> None:
        """Record that deploying ``contract_name`` failed with ``error``."""
        wrapped = RuntimeError(f"{message}: {error}")
        wrapped.__cause__ = error
        self._contracts[contract_name] = wrapped

    def contracts(self) -> dict[str, Exception]:
        """Return the recorded failures keyed by contract name."""
        return dict(self._contracts)

    def __str__(self) -> str:
        return "".join(f" {name}: {err}," for name, err in self._contracts.items())


class Flowkit:
    """Reads and writes blockchain data through a gateway, reporting progress to a logger."""

    def __init__(self, gateway: Gateway, logger: Logger | None = None):
        self.gateway = gateway
        self.logger: Logger = logger if logger is not None else StdoutLogger(LogLevel.NONE)

    def ping(self) -> None:
        self.gateway.ping()

    def wait_server(self) -> None:
        self.gateway.wait_server()

    def get_account(self, address: Address) -> Account:
        """Fetch an account by address."""
        return self.gateway.get_account(address)

    def get_block(self, query: BlockQuery) -> Block:
        """Fetch the latest block, or a block by ID or height, as ``query`` selects."""
        try:
            if query.latest:
                block = self.gateway.get_latest_block()
            elif query.id is not None:
                block = self.gateway.get_block_by_id(query.id)
            else:
                block = self.gateway.get_block_by_height(query.height)
        except Exception as exc:
            raise RuntimeError(f"error fetching block: {exc}") from exc
        if block is None:
            raise LookupError("block not found")
        return block

    def get_collection(self, collection_id: Identifier) -> Collection:
        return self.gateway.get_collection(collection_id)

    def get_events(
        self,
        names: Sequence[str],
        start_height: int,
        end_height: int,
        worker: EventWorker | None = None,
    ) -> list[BlockEvents]:
        """Fetch events by name over an inclusive height range, optionally with several workers."""
        if end_height < start_height:
            raise ValueError(
                f"cannot have end height ({end_height}) of block range less that "
                f"start height ({start_height})"
            )
        worker = worker if worker is not None else _DEFAULT_WORKER
        queries = make_event_queries(names, start_height, end_height, worker.blocks_per_worker)
        if not queries:
            return []

        def fetch(query: EventRangeQuery) -> list[BlockEvents]:
            return self.gateway.get_events(query.type, query.start_height, query.end_height)

        with ThreadPoolExecutor(max_workers=max(worker.count, 1)) as pool:
            chunks = list(pool.map(fetch, queries))
        return [events for chunk in chunks for events in chunk]

    def execute_script(
        self,
        code: bytes,
        arguments: Sequence[Any] = (),
        query: ScriptQuery = LATEST_SCRIPT_QUERY,
    ) -> Any:
        """Run a script at the block selected by ``query`` and return its value."""
        if query.latest:
            return self.gateway.execute_script(code, arguments)
        if query.id:
            return self.gateway.execute_script_at_id(code, arguments, query.id)
        return self.gateway.execute_script_at_height(code, arguments, query.height)

    def get_transaction_by_id(
        self, tx_id: Identifier, wait_seal: bool = False
    ) -> tuple[Transaction, TransactionResult]:
        """Fetch a transaction and its result, optionally waiting for it to be sealed."""
        self.logger.start_progress("Fetching Transaction...")
        try:
            tx = self.gateway.get_transaction(tx_id)
            if wait_seal:
                self.logger.start_progress("Waiting for transaction to be sealed...")
            result = self.gateway.get_transaction_result(tx_id, wait_seal)
        finally:
            self.logger.stop_progress()
        return tx, result

    def get_transactions_by_block_id(
        self, block_id: Identifier
    ) -> tuple[list[Transaction], list[TransactionResult]]:
        txs = self.gateway.get_transactions_by_block_id(block_id)
        results = self.gateway.get_transaction_results_by_block_id(block_id)
        return txs, results

    def get_system_transaction(
        self, block_id: Identifier
    ) -> tuple[Transaction, TransactionResult]:
        self.logger.start_progress("Fetching System Transaction...")
        try:
            tx = self.gateway.get_system_transaction(block_id)
            result = self.gateway.get_system_transaction_result(block_id)
        finally:
            self.logger.stop_progress()
        return tx, result

    def send_signed_transaction(
        self, tx: Transaction
    ) -> tuple[Transaction, TransactionResult]:
        """Submit a signed transaction and wait for its sealed result."""
        sent = self.gateway.send_signed_transaction(tx)
        result = self.gateway.get_transaction_result(sent.id, True)
        return sent, result