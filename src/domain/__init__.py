"""Domain models and containers for the bid list.

``bid`` holds the validated Pydantic model for a single bid; ``record_list``
holds the linked list that stores bids in memory. Neither depends on how bids
are loaded or displayed.
"""

__all__ = [
    "bid",
    "record_list",
]
