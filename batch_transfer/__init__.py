"""Batch transfer ingestion: CSV upload validation and batch aggregation."""

__version__ = "0.1.0"
