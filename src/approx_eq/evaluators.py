"""Evaluator interface and the stock tolerance strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from approx_eq.comparisons import (
    compare_by_margin,
    compare_by_multiplier,
    compare_by_zero_margin_or_multiplier,
)
from approx_eq.constants import DEFAULT_MARGIN, DEFAULT_MULTIPLIER
from approx_eq.results import ScalarEvaluation


@runtime_checkable
class ApproximateEqualityEvaluator(Protocol):
    """Interface for pluggable approximate-equality strategies."""

    def evaluate(self, expected: float, actual: float) -> ScalarEvaluation:
        """Return the classification and the margin/multiplier factors applied."""


@dataclass(frozen=True)
class MarginEvaluator:
    """Accepts values within an absolute distance of the expected value."""

    factor: float
    nan_equality: bool = False

    def evaluate(self, expected: float, actual: float) -> ScalarEvaluation:
        result = compare_by_margin(expected, actual, self.factor, nan_equality=self.nan_equality)
        return ScalarEvaluation(result, self.factor, None)


@dataclass(frozen=True)
class MultiplierEvaluator:
    """Accepts values within a fraction of the expected value."""

    factor: float
    nan_equality: bool = False

    def evaluate(self, expected: float, actual: float) -> ScalarEvaluation:
        result = compare_by_multiplier(
            expected, actual, self.factor, nan_equality=self.nan_equality
        )
        return ScalarEvaluation(result, None, self.factor)


@dataclass(frozen=True)
class ZeroMarginOrMultiplierEvaluator:
    """Applies a margin when either comparand is zero and a multiplier otherwise."""

    multiplier_factor: float
    zero_margin_factor: float
    nan_equality: bool = False

    def evaluate(self, expected: float, actual: float) -> ScalarEvaluation:
        result = compare_by_zero_margin_or_multiplier(
            expected,
            actual,
            self.multiplier_factor,
            self.zero_margin_factor,
            nan_equality=self.nan_equality,
        )
        return ScalarEvaluation(result, self.zero_margin_factor, self.multiplier_factor)


def margin(factor: float, *, nan_equality: bool = False) -> MarginEvaluator:
    """Create an evaluator that applies ``factor`` as an absolute margin."""

    return MarginEvaluator(factor, nan_equality=nan_equality)


def multiplier(factor: float, *, nan_equality: bool = False) -> MultiplierEvaluator:
    """Create an evaluator that applies ``factor`` as a relative multiplier."""

    return MultiplierEvaluator(factor, nan_equality=nan_equality)


def zero_margin_or_multiplier(
    multiplier_factor: float,
    zero_margin_factor: float,
    *,
    nan_equality: bool = False,
) -> ZeroMarginOrMultiplierEvaluator:
    """Create an evaluator that uses ``multiplier_factor`` unless a comparand is zero.

    When either comparand is zero, ``zero_margin_factor`` is applied as an
    absolute margin instead.
    """

    return ZeroMarginOrMultiplierEvaluator(
        multiplier_factor, zero_margin_factor, nan_equality=nan_equality
    )


def default_evaluator(*, nan_equality: bool = False) -> ZeroMarginOrMultiplierEvaluator:
    """Evaluator applied when a caller does not supply one."""

    return zero_margin_or_multiplier(
        DEFAULT_MULTIPLIER, DEFAULT_MARGIN, nan_equality=nan_equality
    )
