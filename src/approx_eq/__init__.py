"""Approximate-equality evaluation of floats and float sequences."""

from approx_eq.config import ToleranceConfig, apply_overrides, load_config
from approx_eq.constants import DEFAULT_MARGIN, DEFAULT_MULTIPLIER
from approx_eq.evaluation import evaluate_scalar, evaluate_sequence
from approx_eq.evaluators import (
    ApproximateEqualityEvaluator,
    MarginEvaluator,
    MultiplierEvaluator,
    ZeroMarginOrMultiplierEvaluator,
    default_evaluator,
    margin,
    multiplier,
    zero_margin_or_multiplier,
)
from approx_eq.logging import configure_logging
from approx_eq.results import (
    ComparisonResult,
    DifferentLengths,
    ScalarEvaluation,
    SequenceComparisonResult,
    SequenceEvaluation,
    SequencesApproximatelyEqual,
    SequencesExactlyEqual,
    UnequalElements,
)
from approx_eq.testable import SupportsTestableAsFloat, testable_as_float

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MARGIN",
    "DEFAULT_MULTIPLIER",
    "ApproximateEqualityEvaluator",
    "ComparisonResult",
    "DifferentLengths",
    "MarginEvaluator",
    "MultiplierEvaluator",
    "ScalarEvaluation",
    "SequenceComparisonResult",
    "SequenceEvaluation",
    "SequencesApproximatelyEqual",
    "SequencesExactlyEqual",
    "SupportsTestableAsFloat",
    "ToleranceConfig",
    "UnequalElements",
    "ZeroMarginOrMultiplierEvaluator",
    "__version__",
    "apply_overrides",
    "configure_logging",
    "default_evaluator",
    "evaluate_scalar",
    "evaluate_sequence",
    "load_config",
    "margin",
    "multiplier",
    "testable_as_float",
    "zero_margin_or_multiplier",
]
