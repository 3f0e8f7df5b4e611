"""Data files, meta and expiry persistence, skip list index and in-memory structures for a key-value store."""

__version__ = "0.1.0"