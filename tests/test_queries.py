import pytest

from flowkit.queries import (
    LATEST_BLOCK_QUERY,
    LATEST_SCRIPT_QUERY,
    BlockQuery,
    EventWorker,
    ScriptQuery,
    make_event_queries,
    new_block_query,
    update_existing_contract,
)
from flowkit.types import EMPTY_ID, EventRangeQuery, Identifier

FULL_ID = "a1" * 32


def test_latest_keyword():
    assert new_block_query("latest") == BlockQuery(latest=True)
    assert new_block_query("latest") == LATEST_BLOCK_QUERY


def test_height_query():
    query = new_block_query("123456789")
    assert query.height == 123456789
    assert query.id is None
    assert not query.latest


def test_zero_height_query():
    assert new_block_query("0") == BlockQuery(height=0)


def test_max_uint64_is_height():
    assert new_block_query("18446744073709551615").height == 2**64 - 1


def test_overflowing_height_falls_back_to_id():
    query = new_block_query("18446744073709551616")
    assert query.id is not None
    assert bool(query.id)
    assert query.height == 0


def test_id_query():
    query = new_block_query(FULL_ID)
    assert query.id == Identifier.from_hex(FULL_ID)
    assert not query.latest


def test_partial_hex_uses_leading_pairs():
    query = new_block_query("abzz")
    assert query.id == Identifier.from_hex("ab")


@pytest.mark.parametrize("bad", ["", "-1", "xyz", "latest!", "z1"])
def test_invalid_query(bad):
    with pytest.raises(ValueError, match="invalid query"):
        new_block_query(bad)


def test_signed_number_is_not_height():
    with pytest.raises(ValueError):
        new_block_query("+")


def test_script_query_defaults():
    assert ScriptQuery().id == EMPTY_ID
    assert LATEST_SCRIPT_QUERY.latest
    assert not ScriptQuery(height=5).latest


def test_event_worker_defaults():
    worker = EventWorker()
    assert worker.count == 1
    assert worker.blocks_per_worker == 250


def test_event_queries_worked_example():
    queries = make_event_queries(["A", "B"], 0, 4, 2)
    assert queries == [
        EventRangeQuery("A", 0, 1),
        EventRangeQuery("B", 0, 1),
        EventRangeQuery("A", 2, 3),
        EventRangeQuery("B", 2, 3),
        EventRangeQuery("A", 4, 4),
        EventRangeQuery("B", 4, 4),
    ]


@pytest.mark.parametrize(
    "start,end,count", [(0, 0, 1), (10, 999, 250), (5, 7, 100), (1, 100, 7)]
)
def test_event_queries_cover_range(start, end, count):
    queries = make_event_queries(["E"], start, end, count)
    covered = [h for q in queries for h in range(q.start_height, q.end_height + 1)]
    assert covered == list(range(start, end + 1))
    assert all(q.end_height - q.start_height + 1 <= count for q in queries)


def test_event_queries_empty_range():
    assert make_event_queries(["E"], 5, 4, 10) == []


def test_event_queries_no_names():
    assert make_event_queries([], 0, 100, 10) == []


def test_event_queries_rejects_zero_block_count():
    with pytest.raises(ValueError):
        make_event_queries(["E"], 0, 10, 0)


@pytest.mark.parametrize("flag", [True, False])
def test_update_existing_contract(flag):
    decide = update_existing_contract(flag)
    assert decide(b"old", b"new") is flag
    assert decide(b"", b"") is flag