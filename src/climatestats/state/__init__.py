"""State/store layer.

This package is the single source of truth for how parsed observations
are folded into per-state running statistics.
"""
