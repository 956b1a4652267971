"""Coffee-shop point of sale: drink menu, orders, receipts and daily summaries."""

__version__ = "1.0.0"