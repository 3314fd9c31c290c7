"""Auction player board: merge roster and stats, rank, paginate and serve."""

__version__ = "0.1.0"
