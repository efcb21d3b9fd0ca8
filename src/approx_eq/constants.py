"""Default tolerance factors applied when no evaluator is supplied."""

from __future__ import annotations

DEFAULT_MARGIN = 0.0001
"""Absolute margin used for zero-adjacent comparisons."""

DEFAULT_MULTIPLIER = 0.000001
"""Relative multiplier used for all other comparisons."""
