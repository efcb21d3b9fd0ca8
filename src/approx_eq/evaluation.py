"""Scalar and sequence entry points for approximate-equality evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from approx_eq.evaluators import ApproximateEqualityEvaluator, default_evaluator
from approx_eq.results import (
    ComparisonResult,
    DifferentLengths,
    ScalarEvaluation,
    SequenceEvaluation,
    SequencesApproximatelyEqual,
    SequencesExactlyEqual,
    UnequalElements,
)
from approx_eq.testable import testable_as_float

LOGGER = logging.getLogger(__name__)


def evaluate_scalar(
    expected: Any,
    actual: Any,
    evaluator: ApproximateEqualityEvaluator | None = None,
) -> ScalarEvaluation:
    """Project both comparands to floats and delegate to ``evaluator``.

    ``evaluator`` defaults to :func:`approx_eq.evaluators.default_evaluator`.
    """

    if evaluator is None:
        evaluator = default_evaluator()
    return evaluator.evaluate(testable_as_float(expected), testable_as_float(actual))


def evaluate_sequence(
    expected: Any,
    actual: Any,
    evaluator: ApproximateEqualityEvaluator | None = None,
) -> SequenceEvaluation:
    """Evaluate two sequences element by element.

    Sequences of different lengths are reported without inspecting any
    element. Otherwise the first unequal element stops the evaluation and is
    reported with its own tolerance factors. If none is unequal, the factors
    reported are those of the first approximately equal element, or ``None``
    when every element is exactly equal.
    """

    if evaluator is None:
        evaluator = default_evaluator()

    expected_length = _sequence_length(expected, arg_name="expected")
    actual_length = _sequence_length(actual, arg_name="actual")

    if expected_length != actual_length:
        LOGGER.debug(
            "sequence_length_mismatch expected_length=%s actual_length=%s",
            expected_length,
            actual_length,
        )
        return SequenceEvaluation(
            DifferentLengths(expected_length, actual_length),
            None,
            None,
        )

    any_inexact = False
    margin_factor: float | None = None
    multiplier_factor: float | None = None

    for index in range(expected_length):
        expected_value = testable_as_float(expected[index])
        actual_value = testable_as_float(actual[index])
        result, element_margin, element_multiplier = evaluator.evaluate(
            expected_value, actual_value
        )

        if result == ComparisonResult.EXACTLY_EQUAL:
            continue
        if result == ComparisonResult.APPROXIMATELY_EQUAL:
            if not any_inexact:
                any_inexact = True
                margin_factor = element_margin
                multiplier_factor = element_multiplier
            continue

        LOGGER.debug(
            "sequence_element_unequal index=%s expected=%r actual=%r",
            index,
            expected_value,
            actual_value,
        )
        return SequenceEvaluation(
            UnequalElements(index, expected_value, actual_value),
            element_margin,
            element_multiplier,
        )

    if any_inexact:
        return SequenceEvaluation(SequencesApproximatelyEqual(), margin_factor, multiplier_factor)
    return SequenceEvaluation(SequencesExactlyEqual(), margin_factor, multiplier_factor)


def _sequence_length(value: Any, *, arg_name: str) -> int:
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        raise TypeError(f"{arg_name} must be a sequence of numbers, not {type(value).__name__}")
    if not (hasattr(value, "__len__") and hasattr(value, "__getitem__")):
        raise TypeError(
            f"{arg_name} must be a sized, indexable sequence; got {type(value).__name__}"
        )
    return len(value)
