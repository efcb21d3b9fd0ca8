"""Result types produced by scalar and sequence evaluations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class ComparisonResult(IntEnum):
    """Three-way classification of a pair of scalars.

    Members are ordered so results can be sorted or compared in tests; the
    ordering carries no further meaning.
    """

    EXACTLY_EQUAL = 0
    APPROXIMATELY_EQUAL = 1
    UNEQUAL = 2

    @property
    def is_equal(self) -> bool:
        return self is not ComparisonResult.UNEQUAL


@dataclass(frozen=True)
class SequencesExactlyEqual:
    """Same length, and every element pair compared exactly equal."""

    @property
    def is_equal(self) -> bool:
        return True


@dataclass(frozen=True)
class SequencesApproximatelyEqual:
    """Same length, no unequal element, and at least one inexact element."""

    @property
    def is_equal(self) -> bool:
        return True


@dataclass(frozen=True)
class DifferentLengths:
    """The sequences could not be compared element-wise."""

    expected_length: int
    actual_length: int

    @property
    def is_equal(self) -> bool:
        return False


@dataclass(frozen=True)
class UnequalElements:
    """The first element pair that fell outside the tolerance."""

    index: int
    expected_value: float
    actual_value: float

    @property
    def is_equal(self) -> bool:
        return False


SequenceComparisonResult = (
    SequencesExactlyEqual | SequencesApproximatelyEqual | DifferentLengths | UnequalElements
)


class ScalarEvaluation(NamedTuple):
    """Outcome of a scalar evaluation and the tolerance factors behind it.

    A factor of ``None`` means the evaluator did not apply that kind of
    tolerance, which is distinct from a factor of ``0.0``.
    """

    result: ComparisonResult
    margin_factor: float | None
    multiplier_factor: float | None


class SequenceEvaluation(NamedTuple):
    """Outcome of a sequence evaluation and the tolerance factors behind it."""

    result: SequenceComparisonResult
    margin_factor: float | None
    multiplier_factor: float | None
