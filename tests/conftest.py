import pytest

from domain.record_list import RecordList
from tests.constants import BID_A, BID_B, BID_C


@pytest.fixture(scope="function")
def bid_list() -> RecordList:
    return RecordList()


@pytest.fixture(scope="function")
def populated_list() -> RecordList:
    # [C, A, B]
    bid_list = RecordList()
    bid_list.append(BID_A)
    bid_list.append(BID_B)
    bid_list.prepend(BID_C)
    return bid_list
