from __future__ import annotations

from decimal import Decimal
from typing import NewType

from pydantic import BaseModel, ConfigDict, model_validator

BidId = NewType("BidId", str)


class Bid(BaseModel):
    """A single auction bid.

    Instances are frozen so that lookups can hand them out without exposing the
    container that stores them.
    """

    model_config = ConfigDict(frozen=True)

    bid_id: BidId
    title: str
    fund: str
    amount: Decimal = Decimal("0")

    @model_validator(mode="after")
    def _validate_amount(self) -> Bid:
        if self.amount < 0:
            raise ValueError("Bid.amount must be >= 0")
        return self
