"""Projection of numeric-like comparands onto ``float``."""

from __future__ import annotations

import math
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsTestableAsFloat(Protocol):
    """Opt-in hook for types that know how to present themselves as a float."""

    def testable_as_float(self) -> float: ...


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # Out of double range: round to the infinity of the same sign.
        return math.inf if value > 0 else -math.inf


def testable_as_float(value: Any) -> float:
    """Return ``value`` as a float suitable for tolerance evaluation.

    Objects providing ``testable_as_float()`` are asked directly; anything else
    must support ``__float__`` or ``__index__`` (ints, floats, ``Decimal``,
    ``Fraction``, numpy scalars). Booleans and text are rejected. Values too
    large for a double project to ``inf`` or ``-inf``.
    """

    if isinstance(value, bool):
        raise TypeError("bool values cannot be evaluated for approximate equality")
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError(
            f"{type(value).__name__} values cannot be evaluated for approximate equality"
        )
    if isinstance(value, SupportsTestableAsFloat):
        return _to_float(value.testable_as_float())
    if isinstance(value, float):
        return value
    if hasattr(value, "__float__") or hasattr(value, "__index__"):
        return _to_float(value)
    raise TypeError(
        f"{type(value).__name__} values cannot be evaluated for approximate equality; "
        "define __float__ or testable_as_float()"
    )
