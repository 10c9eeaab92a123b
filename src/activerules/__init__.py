"""Paginated loader for quality profile active rules."""

__version__ = "0.1.0"
