"""Ingestion layer.

This package turns raw tab-delimited observation lines into typed
records (see :mod:`climatestats.ingestion.parser`).
"""

__all__: list[str] = []
