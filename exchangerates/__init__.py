"""HTTP service for fiat cross rates and fixed-table crypto conversions."""

__version__ = "0.1.0"