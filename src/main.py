from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Callable, Sequence

from pydantic import ValidationError

from config import LOG_LEVELS, config
from domain.bid import Bid
from domain.record_list import RecordList, RemoveOutcome
from importers.bid_csv_importer import BidCsvImporter, BidImportError
from utils.formatting import format_bid, parse_amount

logger = logging.getLogger(__name__)

EXIT_CHOICE = 9
MENU_LINES = (
    "Menu:",
    "  1. Enter a Bid",
    "  2. Load Bids",
    "  3. Display All Bids",
    "  4. Find Bid",
    "  5. Remove Bid",
    "  9. Exit",
)


class BidMenu:
    """Interactive text menu over a RecordList.

    Input and output go through the injected callables so a session can be
    scripted.
    """

    def __init__(
        self,
        bid_list: RecordList,
        *,
        csv_path: Path,
        bid_key: str,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.bid_list = bid_list
        self.csv_path = csv_path
        self.bid_key = bid_key
        self._input = input_fn
        self._output = output
        self._clock = clock
        self._actions: dict[int, Callable[[], None]] = {
            1: self.enter_bid,
            2: self.load_bids,
            3: self.display_bids,
            4: self.find_bid,
            5: self.remove_bid,
        }

    def run(self) -> None:
        while True:
            self._output("\n".join(MENU_LINES))
            try:
                raw_choice = self._input("Enter choice: ")
            except EOFError:
                break
            choice = self._parse_choice(raw_choice)
            if choice == EXIT_CHOICE:
                break
            action = self._actions.get(choice) if choice is not None else None
            if action is None:
                self._output(f"Unknown choice: {raw_choice.strip()}")
                continue
            try:
                action()
            except EOFError:
                break
        self._output("Goodbye.")

    def enter_bid(self) -> None:
        bid_id = self._input("Enter Id: ").strip()
        title = self._input("Enter title: ").strip()
        fund = self._input("Enter fund: ").strip()
        amount = parse_amount(self._input("Enter amount: "))
        try:
            bid = Bid(bid_id=bid_id, title=title, fund=fund, amount=amount)
        except ValidationError as exc:
            logger.warning("Rejected bid %s: %s", bid_id, exc)
            self._output(f"Invalid bid: {exc.errors()[0]['msg']}")
            return
        self.bid_list.append(bid)
        self._output(format_bid(bid))

    def load_bids(self) -> None:
        self._output(f"Loading CSV file {self.csv_path}")
        started = self._clock()
        importer = BidCsvImporter(self.csv_path)
        try:
            self.bid_list.extend(importer.iter_bids())
        except FileNotFoundError:
            logger.error("Bid CSV %s does not exist", self.csv_path)
            self._output(f"File not found: {self.csv_path}")
        except OSError as exc:
            logger.error("Cannot read bid CSV %s: %s", self.csv_path, exc)
            self._output(f"Cannot read {self.csv_path}: {exc.strerror or exc}")
        except BidImportError as exc:
            logger.error("%s", exc)
            self._output(str(exc))
        elapsed = self._clock() - started
        self._output(f"{self.bid_list.size} bids read")
        self._print_elapsed(elapsed)

    def display_bids(self) -> None:
        for bid in self.bid_list:
            self._output(format_bid(bid))

    def find_bid(self) -> None:
        started = self._clock()
        bid = self.bid_list.find(self.bid_key)
        elapsed = self._clock() - started
        if bid is not None:
            self._output(format_bid(bid))
        else:
            self._output(f"Bid Id {self.bid_key} not found.")
        self._print_elapsed(elapsed)

    def remove_bid(self) -> None:
        outcome = self.bid_list.remove(self.bid_key)
        if outcome is RemoveOutcome.REMOVED:
            self._output(f"Bid {self.bid_key} removed successfully.")
        elif outcome is RemoveOutcome.EMPTY:
            self._output("List is empty. No bids to remove.")
        else:
            self._output(f"Bid {self.bid_key} not found.")

    def _print_elapsed(self, seconds: float) -> None:
        self._output(f"time: {seconds * 1000:.3f} milliseconds")
        self._output(f"time: {seconds:.6f} seconds")

    @staticmethod
    def _parse_choice(raw: str) -> int | None:
        try:
            return int(raw.strip())
        except ValueError:
            return None


def main(argv: Sequence[str] | None = None) -> None:
    settings = config()
    parser = argparse.ArgumentParser(description="Load bids into a linked list and explore them from a menu.")
    parser.add_argument("csv_path", nargs="?", type=Path, default=settings.csv_path)
    parser.add_argument("bid_key", nargs="?", default=settings.bid_key)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    menu = BidMenu(RecordList(), csv_path=args.csv_path, bid_key=args.bid_key)
    menu.run()


if __name__ == "__main__":
    main()
