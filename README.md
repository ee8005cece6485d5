# flowkit

A small library for reading from and submitting to a Flow blockchain through
an access gateway. It provides value types for blocks, accounts, events and
transactions, an abstract `Gateway` interface that a backend implements, and
a `Flowkit` service that uses a gateway to fetch blocks, run scripts, gather
events over height ranges with several workers, and send signed transactions.

The package has no third-party dependencies.

## Installation

```
pip install .
```

## Modules

- `flowkit.types` — `Identifier` (32 bytes), `Address` (8 bytes), `Account`,
  `Block`, `Event`, `BlockEvents`, `Transaction`, `TransactionResult`,
  `TransactionStatus`, `Collection` and `EventRangeQuery`.
  `Identifier.from_hex` pads short input with zero bytes on the right and
  truncates long input; `Address.from_hex` accepts an optional `0x`, pads on
  the left and keeps the last 8 bytes of long input. Both raise `ValueError`
  on non-hex text. An all-zero identifier or address is falsy.
- `flowkit.gateway` — the abstract `Gateway` class listing every operation a
  backend must provide (accounts, transactions and results, scripts, blocks,
  events, collections, protocol snapshot, `ping`, `wait_server`,
  `secure_connection`).
- `flowkit.queries` — `BlockQuery`, `ScriptQuery`, `EventWorker`
  (defaults: one worker, 250 blocks per query), `new_block_query`,
  `make_event_queries` and `update_existing_contract`.
- `flowkit.services` — the `Flowkit` service and `ProjectDeploymentError`,
  an exception that collects per-contract failures by name.
- `flowkit.logger` — `LogLevel` (`NONE`, `ERROR`, `DEBUG`, `INFO`), the
  abstract `Logger`, a threaded terminal `Spinner`, and `StdoutLogger`, which
  writes messages at or below its level and shows a spinner for progress.
- `flowkit.terminal` — ANSI colour helpers (`red`, `green`, `magenta`,
  `bold`, `italic`) and status emoji (`ok_emoji`, `error_emoji`,
  `warning_emoji`, ...). On Windows colours are dropped and emoji are empty.

## Example

```python
from flowkit.logger import LogLevel, StdoutLogger
from flowkit.queries import EventWorker, new_block_query
from flowkit.services import Flowkit

gateway = MyGateway()  # your subclass of flowkit.gateway.Gateway
kit = Flowkit(gateway=gateway, logger=StdoutLogger(LogLevel.INFO))

block = kit.get_block(new_block_query("latest"))
print(block.height)

events = kit.get_events(
    ["A.0000000000000001.Example.Deposited"],
    start_height=100,
    end_height=1_000,
    worker=EventWorker(count=4, blocks_per_worker=250),
)
```

Without a logger, `Flowkit` uses a silent `StdoutLogger(LogLevel.NONE)`.

`new_block_query` accepts `"latest"`, a decimal block height, or a hex block
ID, and raises `ValueError` for anything else.

`Flowkit.get_block` raises `RuntimeError` ("error fetching block: ...") when
the gateway fails and `LookupError` when it returns no block.

`Flowkit.get_events` raises `ValueError` if the end height is below the start
height. Otherwise it splits the inclusive range into chunks of
`blocks_per_worker` blocks, makes one query per event name per chunk, fetches
them on a thread pool of `count` workers and returns the results in query
order.

`Flowkit.execute_script` runs at the latest block by default; with a
`ScriptQuery` it runs at the given block ID or, failing that, the given height.

`Flowkit.send_signed_transaction` submits a transaction and asks the gateway
for its result with sealing awaited, returning both.

## What this package does not do

- It contains no concrete gateway: there is no network client and no local
  emulator. You supply a `Gateway` subclass.
- It does not create accounts, generate or derive keys, build or sign
  transactions, resolve imports in script code, or deploy and remove
  contracts. `ProjectDeploymentError` and `update_existing_contract` are
  provided as building blocks, but no deployment routine uses them.
- It has no command-line interface and no project configuration storage.