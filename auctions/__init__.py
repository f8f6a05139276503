"""Domain model for timed ascending and sealed-bid auctions, with JSON-ready views."""

__version__ = "0.1.0"