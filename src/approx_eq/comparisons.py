"""Tolerance-based classification of pairs of floats.

Each function answers whether ``actual`` is exactly equal to, approximately
equal to, or unequal to ``expected`` under one tolerance strategy:

- margin: ``actual`` must lie within ``expected +/- margin_factor``;
- multiplier: ``actual`` must lie within ``expected * (1 +/- multiplier_factor)``;
- zero margin or multiplier: the margin rule when either comparand is zero,
  otherwise the multiplier rule.

All interval bounds are inclusive. Exact equality uses IEEE semantics, so
``-0.0`` equals ``0.0`` and NaN equals nothing unless ``nan_equality`` is set.
None of these functions raise for any float input; a negative tolerance factor
is a caller error caught by an assertion.
"""

from __future__ import annotations

import math

from approx_eq.results import ComparisonResult


def compare_by_margin(
    expected: float,
    actual: float,
    margin_factor: float,
    *,
    nan_equality: bool = False,
) -> ComparisonResult:
    """Classify ``actual`` against ``expected`` using an absolute margin."""

    _check_factor("margin_factor", margin_factor)

    exact = _exact_result(expected, actual, nan_equality=nan_equality)
    if exact is not None:
        return exact

    return _result_from_margin(expected, actual, margin_factor)


def compare_by_multiplier(
    expected: float,
    actual: float,
    multiplier_factor: float,
    *,
    nan_equality: bool = False,
) -> ComparisonResult:
    """Classify ``actual`` against ``expected`` using a relative multiplier.

    The interval is centred on ``expected``, so the classification is not
    symmetric in its arguments.
    """

    _check_factor("multiplier_factor", multiplier_factor)

    exact = _exact_result(expected, actual, nan_equality=nan_equality)
    if exact is not None:
        return exact

    return _result_from_multiplier(expected, actual, multiplier_factor)


def compare_by_zero_margin_or_multiplier(
    expected: float,
    actual: float,
    multiplier_factor: float,
    margin_factor: float,
    *,
    nan_equality: bool = False,
) -> ComparisonResult:
    """Classify using ``margin_factor`` around zero and ``multiplier_factor`` elsewhere.

    A relative tolerance cannot accept any non-zero value when one side is
    zero, so zero-adjacent pairs fall back to the absolute margin.
    """

    _check_factor("multiplier_factor", multiplier_factor)
    _check_factor("margin_factor", margin_factor)

    exact = _exact_result(expected, actual, nan_equality=nan_equality)
    if exact is not None:
        return exact

    if expected == 0.0 or actual == 0.0:
        return _result_from_margin(expected, actual, margin_factor)
    return _result_from_multiplier(expected, actual, multiplier_factor)


def _check_factor(name: str, factor: float) -> None:
    assert factor >= 0.0, f"`{name}` must not be negative, but {factor} given"


def _exact_result(
    expected: float, actual: float, *, nan_equality: bool
) -> ComparisonResult | None:
    if expected == actual:
        return ComparisonResult.EXACTLY_EQUAL
    if nan_equality and math.isnan(expected) and math.isnan(actual):
        return ComparisonResult.EXACTLY_EQUAL
    return None


def _result_from_margin(expected: float, actual: float, margin_factor: float) -> ComparisonResult:
    # A zero-width interval would only admit values already handled as exact.
    if margin_factor == 0.0:
        return ComparisonResult.UNEQUAL

    return _result_from_range(expected - margin_factor, expected + margin_factor, actual)


def _result_from_multiplier(
    expected: float, actual: float, multiplier_factor: float
) -> ComparisonResult:
    if multiplier_factor == 0.0:
        return ComparisonResult.UNEQUAL

    return _result_from_range(
        expected * (1.0 - multiplier_factor),
        expected * (1.0 + multiplier_factor),
        actual,
    )


def _result_from_range(lo: float, hi: float, actual: float) -> ComparisonResult:
    # Bounds arrive swapped when expected is negative.
    low, high = (lo, hi) if lo <= hi else (hi, lo)
    if low <= actual <= high:
        return ComparisonResult.APPROXIMATELY_EQUAL
    return ComparisonResult.UNEQUAL
