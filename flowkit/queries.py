"""Query values for selecting blocks, script execution points and event ranges."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Callable, Iterable

from .types import EMPTY_ID, EventRangeQuery, Identifier

_MAX_UINT64 = 2**64 - 1
_DECIMAL = re.compile(r"[0-9]+")
_HEX_DIGITS = frozenset(string.hexdigits)
_ID_LENGTH = len(EMPTY_ID.value)

UpdateContract = Callable[[bytes, bytes], bool]


@dataclass(frozen=True)
class BlockQuery:
    """Selects a block by ID, by height or as the latest one."""

    id: Identifier | None = None
    height: int = 0
    latest: bool = False


LATEST_BLOCK_QUERY = BlockQuery(latest=True)


@dataclass(frozen=True)
class ScriptQuery:
    """Selects the block at which a script is executed."""

    latest: bool = False
    id: Identifier = EMPTY_ID
    height: int = 0


LATEST_SCRIPT_QUERY = ScriptQuery(latest=True)


@dataclass(frozen=True)
class EventWorker:
    """How many concurrent workers fetch events and how many blocks each request spans."""

    count: int = 1
    blocks_per_worker: int = 250


def _parse_uint64(text: str) -> int | None:
    if not _DECIMAL.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_UINT64 else None


def _lenient_id(text: str) -> Identifier:
    """Decode the leading complete hex pairs of ``text`` into an identifier."""
    decoded = bytearray()
    for pos in range(0, len(text) - 1, 2):
        pair = text[pos : pos + 2]
        if not set(pair) <= _HEX_DIGITS:
            break
        decoded.append(int(pair, 16))
    return Identifier(bytes(decoded[:_ID_LENGTH]).ljust(_ID_LENGTH, b"\x00"))


def new_block_query(query: str) -> BlockQuery:
    """Build a block query from ``"latest"``, a decimal height or a hex block ID."""
    if query == "latest":
        return LATEST_BLOCK_QUERY
    height = _parse_uint64(query)
    if height is not None:
        return BlockQuery(height=height)
    block_id = _lenient_id(query)
    if block_id:
        return BlockQuery(id=block_id)
    raise ValueError(
        f'invalid query: {query}, valid are: "latest", block height or block ID'
    )


def make_event_queries(
    names: Iterable[str], start_height: int, end_height: int, block_count: int
) -> list[EventRangeQuery]:
    """Split an inclusive height range into chunks of ``block_count`` blocks, one query per name."""
    if block_count < 1:
        raise ValueError("block count must be at least 1")
    names = list(names)
    queries: list[EventRangeQuery] = []
    start = start_height
    while start <= end_height:
        end = min(start + block_count - 1, end_height)
        queries.extend(EventRangeQuery(name, start, end) for name in names)
        start += block_count
    return queries


@dataclass(frozen=True)
class _FixedUpdatePolicy:
    """Contract update policy that gives the same answer for every contract."""

    update_existing: bool

    def __call__(self, existing: bytes, new: bytes) -> bool:
        return bool(self.update_existing)


def update_existing_contract(update_existing: bool) -> UpdateContract:
    """Return a contract update policy that ignores the code and answers ``update_existing``."""
    return _FixedUpdatePolicy(update_existing)