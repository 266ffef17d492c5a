# flake8: noqa E402
# Run via: uv run scripts/bid_search_probe.py --csv data/eBid_Monthly_Sales_sample.csv --bid-id 98109
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Iterable

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.record_list import RecordList
from importers.bid_csv_importer import BidCsvImporter
from utils.formatting import format_bid


def run(csv_path: Path, bid_id: str, *, repeat: int) -> None:
    started = time.perf_counter()
    bid_list = RecordList(BidCsvImporter(csv_path).iter_bids())
    load_seconds = time.perf_counter() - started
    print(f"Loaded {bid_list.size} bids from {csv_path} in {load_seconds * 1000:.3f} ms")

    started = time.perf_counter()
    bid = None
    for _ in range(repeat):
        bid = bid_list.find(bid_id)
    search_seconds = (time.perf_counter() - started) / repeat

    if bid is None:
        print(f"Bid Id {bid_id} not found.")
    else:
        print(format_bid(bid))
    print(f"Average search over {repeat} runs: {search_seconds * 1000:.4f} ms")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Time linear bid lookups on a loaded CSV.")
    parser.add_argument("--csv", type=Path, default=PROJECT_ROOT / "data" / "eBid_Monthly_Sales_sample.csv")
    parser.add_argument("--bid-id", default="98109")
    parser.add_argument("--repeat", type=int, default=100)
    args = parser.parse_args(argv)
    run(args.csv, args.bid_id, repeat=max(args.repeat, 1))


if __name__ == "__main__":
    main()
