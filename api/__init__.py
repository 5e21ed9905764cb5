"""
REST API for product transaction statistics.

Seeds a SQLite table from the remote product transaction dataset and
exposes monthly statistics, price-range and category breakdowns over HTTP.
"""

__version__ = "1.0.0"
