from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, ValidationError, field_validator

from domain.bid import Bid
from utils.formatting import parse_amount

logger = logging.getLogger(__name__)

# Positional layout of the eBid monthly sales export.
TITLE_COLUMN = 0
BID_ID_COLUMN = 1
AMOUNT_COLUMN = 4
FUND_COLUMN = 8
MIN_COLUMNS = FUND_COLUMN + 1


class BidImportError(Exception):
    def __init__(self, *, path: Path, line_number: int, reason: str) -> None:
        self.path = path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Cannot import bid from {path} line {line_number}: {reason}")


class BidCsvRow(BaseModel):
    title: str
    bid_id: str
    amount: str
    fund: str

    @field_validator("title", "bid_id", "fund", mode="before")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        return value.strip()

    def to_bid(self) -> Bid:
        return Bid(
            bid_id=self.bid_id,
            title=self.title,
            fund=self.fund,
            amount=parse_amount(self.amount),
        )


class BidCsvImporter:
    """Reads bids from a sales export CSV, skipping the header row."""

    def __init__(self, source_path: str | Path) -> None:
        self._source_path = Path(source_path)

    @property
    def source_path(self) -> Path:
        return self._source_path

    def iter_bids(self) -> Iterator[Bid]:
        with self._source_path.open(encoding="utf-8-sig", newline="") as handle:
            reader = csv.reader(handle)
            count = 0
            try:
                header = next(reader, None)
                if header is None:
                    logger.info("Bid CSV %s is empty", self._source_path)
                    return
                for row in reader:
                    if not any(cell.strip() for cell in row):
                        continue
                    yield self._row_to_bid(row, reader.line_num)
                    count += 1
            except UnicodeDecodeError as exc:
                logger.warning("Undecodable bytes in %s after line %d", self._source_path, reader.line_num)
                raise BidImportError(
                    path=self._source_path,
                    line_number=reader.line_num + 1,
                    reason=f"file is not valid UTF-8 ({exc.reason})",
                ) from exc
        logger.info("Read %d bids from %s", count, self._source_path)

    def load_bids(self) -> list[Bid]:
        return list(self.iter_bids())

    def _row_to_bid(self, row: list[str], line_number: int) -> Bid:
        if len(row) < MIN_COLUMNS:
            logger.warning("Short row at %s:%d (%d columns)", self._source_path, line_number, len(row))
            raise BidImportError(
                path=self._source_path,
                line_number=line_number,
                reason=f"expected at least {MIN_COLUMNS} columns, got {len(row)}",
            )
        try:
            return BidCsvRow(
                title=row[TITLE_COLUMN],
                bid_id=row[BID_ID_COLUMN],
                amount=row[AMOUNT_COLUMN],
                fund=row[FUND_COLUMN],
            ).to_bid()
        except ValidationError as exc:
            logger.warning("Invalid bid at %s:%d", self._source_path, line_number)
            reason = "; ".join(error["msg"] for error in exc.errors())
            raise BidImportError(path=self._source_path, line_number=line_number, reason=reason) from exc


__all__ = ["BidCsvImporter", "BidCsvRow", "BidImportError"]
