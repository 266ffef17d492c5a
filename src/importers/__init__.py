"""Importers that turn external bid exports into domain bids."""

from importers.bid_csv_importer import BidCsvImporter, BidImportError

__all__ = ["BidCsvImporter", "BidImportError"]
