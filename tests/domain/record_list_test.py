from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from domain.bid import Bid
from domain.record_list import RecordList, RemoveOutcome
from tests.constants import BID_A, BID_B, BID_C


def _bid(bid_id: str, title: str = "Item") -> Bid:
    return Bid(bid_id=bid_id, title=title, fund="General Fund", amount=Decimal("1"))


def _assert_consistent(bid_list: RecordList) -> None:
    reachable = 0
    node = bid_list._head
    last = None
    while node is not None:
        reachable += 1
        last = node
        node = node.next
    assert reachable == len(bid_list) == bid_list.size
    assert (bid_list._head is None) == (bid_list.size == 0)
    assert bid_list._tail is last
    if bid_list._tail is not None:
        assert bid_list._tail.next is None


def _ids(bid_list: RecordList) -> list[str]:
    return [bid.bid_id for bid in bid_list]


def test_new_list_is_empty(bid_list: RecordList) -> None:
    assert bid_list.size == 0
    assert bid_list.is_empty
    assert list(bid_list) == []
    assert bid_list.find("A") is None
    _assert_consistent(bid_list)


def test_append_keeps_insertion_order(bid_list: RecordList) -> None:
    for bid in (BID_A, BID_B, BID_C):
        bid_list.append(bid)
        _assert_consistent(bid_list)

    assert _ids(bid_list) == ["A", "B", "C"]
    assert len(bid_list) == 3


def test_prepend_on_empty_list_sets_head_and_tail(bid_list: RecordList) -> None:
    bid_list.prepend(BID_A)

    assert _ids(bid_list) == ["A"]
    assert bid_list._head is bid_list._tail
    _assert_consistent(bid_list)


def test_append_after_prepend_goes_to_the_end(bid_list: RecordList) -> None:
    bid_list.prepend(BID_A)
    bid_list.prepend(BID_B)
    bid_list.append(BID_C)

    assert _ids(bid_list) == ["B", "A", "C"]
    _assert_consistent(bid_list)


def test_scenario_prepend_then_remove_middle(populated_list: RecordList) -> None:
    assert _ids(populated_list) == ["C", "A", "B"]

    outcome = populated_list.remove("A")

    assert outcome is RemoveOutcome.REMOVED
    assert outcome.removed
    assert _ids(populated_list) == ["C", "B"]
    assert populated_list.size == 2
    assert populated_list.find("A") is None
    _assert_consistent(populated_list)


def test_find_returns_matching_bid(populated_list: RecordList) -> None:
    assert populated_list.find("B") == BID_B
    assert populated_list.find("missing") is None
    assert "C" in populated_list
    assert "missing" not in populated_list


def test_find_and_remove_use_first_match_for_duplicate_ids(bid_list: RecordList) -> None:
    first = _bid("X", title="first")
    second = _bid("X", title="second")
    bid_list.append(first)
    bid_list.append(_bid("Y"))
    bid_list.append(second)

    assert bid_list.find("X") == first

    assert bid_list.remove("X") is RemoveOutcome.REMOVED
    assert bid_list.size == 2
    assert bid_list.find("X") == second
    _assert_consistent(bid_list)


def test_remove_from_empty_list_reports_empty(bid_list: RecordList) -> None:
    outcome = bid_list.remove("A")

    assert outcome is RemoveOutcome.EMPTY
    assert not outcome.removed
    assert bid_list.size == 0
    _assert_consistent(bid_list)


def test_remove_missing_key_leaves_list_unchanged(populated_list: RecordList) -> None:
    outcome = populated_list.remove("missing")

    assert outcome is RemoveOutcome.NOT_FOUND
    assert not outcome.removed
    assert _ids(populated_list) == ["C", "A", "B"]
    _assert_consistent(populated_list)


def test_remove_head(populated_list: RecordList) -> None:
    assert populated_list.remove("C") is RemoveOutcome.REMOVED

    assert _ids(populated_list) == ["A", "B"]
    _assert_consistent(populated_list)


def test_remove_tail_moves_tail_back(populated_list: RecordList) -> None:
    assert populated_list.remove("B") is RemoveOutcome.REMOVED

    assert _ids(populated_list) == ["C", "A"]
    _assert_consistent(populated_list)

    populated_list.append(BID_B)
    assert _ids(populated_list) == ["C", "A", "B"]
    _assert_consistent(populated_list)


def test_removing_only_bid_empties_list(bid_list: RecordList) -> None:
    bid_list.append(BID_A)

    assert bid_list.remove("A") is RemoveOutcome.REMOVED
    assert bid_list.is_empty
    assert bid_list._head is None
    assert bid_list._tail is None
    _assert_consistent(bid_list)

    bid_list.append(BID_B)
    assert _ids(bid_list) == ["B"]
    assert bid_list._head is bid_list._tail
    _assert_consistent(bid_list)


def test_iteration_is_restartable_and_read_only(populated_list: RecordList) -> None:
    first_pass = list(populated_list)
    second_pass = list(populated_list.bids())

    assert first_pass == second_pass == [BID_C, BID_A, BID_B]
    assert populated_list.size == 3


def test_returned_bids_are_read_only(populated_list: RecordList) -> None:
    bid = populated_list.find("A")
    assert bid is not None

    with pytest.raises(ValidationError):
        bid.title = "changed"  # type: ignore[misc]

    assert populated_list.find("A") == BID_A


def test_size_tracks_appends_prepends_and_removes(bid_list: RecordList) -> None:
    operations = 0
    for index in range(10):
        if index % 3 == 0:
            bid_list.prepend(_bid(str(index)))
        else:
            bid_list.append(_bid(str(index)))
        operations += 1

    removed = 0
    for key in ("0", "5", "9", "missing", "5"):
        if bid_list.remove(key).removed:
            removed += 1

    assert removed == 3
    assert bid_list.size == operations - removed
    _assert_consistent(bid_list)


def test_extend_and_clear() -> None:
    bid_list = RecordList([BID_A, BID_B])

    assert bid_list.extend(iter([BID_C])) == 1
    assert _ids(bid_list) == ["A", "B", "C"]

    bid_list.clear()
    assert bid_list.is_empty
    assert list(bid_list) == []
    _assert_consistent(bid_list)
