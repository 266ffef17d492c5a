from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Iterator

from domain.bid import Bid

logger = logging.getLogger(__name__)


class RemoveOutcome(StrEnum):
    REMOVED = "REMOVED"
    NOT_FOUND = "NOT_FOUND"
    # Not-found on a list with no nodes at all.
    EMPTY = "EMPTY"

    @property
    def removed(self) -> bool:
        return self is RemoveOutcome.REMOVED


@dataclass(slots=True, eq=False)
class _Node:
    bid: Bid
    next: _Node | None = None


class RecordList:
    """Singly linked list of bids with key lookup by ``bid_id``.

    ``head`` owns the chain; ``tail`` is only a shortcut to the last node so
    that appends stay O(1). Key operations match the first node only when
    several bids share an id.
    """

    def __init__(self, bids: Iterable[Bid] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        if bids is not None:
            self.extend(bids)

    def append(self, bid: Bid) -> None:
        node = _Node(bid)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, bid: Bid) -> None:
        node = _Node(bid, next=self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def extend(self, bids: Iterable[Bid]) -> int:
        appended = 0
        for bid in bids:
            self.append(bid)
            appended += 1
        return appended

    def find(self, bid_id: str) -> Bid | None:
        for bid in self.bids():
            if bid.bid_id == bid_id:
                return bid
        return None

    def remove(self, bid_id: str) -> RemoveOutcome:
        if self._head is None:
            logger.debug("Remove %s skipped: list is empty", bid_id)
            return RemoveOutcome.EMPTY

        if self._head.bid.bid_id == bid_id:
            removed = self._head
            self._head = removed.next
            if self._tail is removed:
                self._tail = None
            self._size -= 1
            logger.debug("Removed head bid %s", bid_id)
            return RemoveOutcome.REMOVED

        previous = self._head
        current = previous.next
        while current is not None:
            if current.bid.bid_id == bid_id:
                previous.next = current.next
                if self._tail is current:
                    self._tail = previous
                self._size -= 1
                logger.debug("Removed bid %s", bid_id)
                return RemoveOutcome.REMOVED
            previous = current
            current = current.next

        logger.debug("Remove %s skipped: no matching bid", bid_id)
        return RemoveOutcome.NOT_FOUND

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def bids(self) -> Iterator[Bid]:
        current = self._head
        while current is not None:
            yield current.bid
            current = current.next

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Bid]:
        return self.bids()

    def __contains__(self, bid_id: object) -> bool:
        return isinstance(bid_id, str) and self.find(bid_id) is not None


__all__ = ["RecordList", "RemoveOutcome"]
