"""Command-line interface for ad-hoc approximate-equality evaluations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, cast

from approx_eq.config import ToleranceConfig, apply_overrides, load_config
from approx_eq.evaluation import evaluate_scalar, evaluate_sequence
from approx_eq.logging import configure_logging
from approx_eq.results import DifferentLengths, SequencesExactlyEqual, UnequalElements

EXIT_EQUAL = 0
EXIT_UNEQUAL = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser."""

    parser = argparse.ArgumentParser(prog="approx-eq")
    subparsers = parser.add_subparsers(dest="command")

    scalar_parser = subparsers.add_parser("scalar", help="Compare two numbers")
    scalar_parser.add_argument("expected", type=float)
    scalar_parser.add_argument("actual", type=float)
    _add_tolerance_arguments(scalar_parser)
    scalar_parser.set_defaults(handler=_scalar_command)

    sequence_parser = subparsers.add_parser("sequence", help="Compare two sequences of numbers")
    sequence_parser.add_argument(
        "--expected",
        type=_parse_float_list,
        required=True,
        help="Comma-separated expected values, e.g. 1.0,2.5,-3",
    )
    sequence_parser.add_argument(
        "--actual",
        type=_parse_float_list,
        required=True,
        help="Comma-separated actual values.",
    )
    _add_tolerance_arguments(sequence_parser)
    sequence_parser.set_defaults(handler=_sequence_command)
    return parser


def _add_tolerance_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML tolerance configuration; explicit options below override it.",
    )
    parser.add_argument(
        "--strategy",
        choices=("margin", "multiplier", "zero_margin_or_multiplier"),
        default=None,
    )
    parser.add_argument("--margin", type=float, default=None, help="Absolute margin factor.")
    parser.add_argument(
        "--multiplier", type=float, default=None, help="Relative multiplier factor."
    )
    parser.add_argument(
        "--nan-equality",
        action="store_true",
        default=None,
        help="Treat two NaN values as exactly equal.",
    )
    parser.add_argument("--log-level", default="WARNING")


def _parse_float_list(text: str) -> list[float]:
    items = [item.strip() for item in text.split(",")]
    if items == [""]:
        return []
    try:
        return [float(item) for item in items]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number list: {text!r}") from exc


def _resolve_config(args: argparse.Namespace) -> ToleranceConfig:
    config = load_config(args.config) if args.config is not None else ToleranceConfig()
    overrides: dict[str, Any] = {
        key: value
        for key, value in (
            ("strategy", args.strategy),
            ("margin", args.margin),
            ("multiplier", args.multiplier),
            ("nan_equality", args.nan_equality),
        )
        if value is not None
    }
    return apply_overrides(config, overrides)


def _format_factors(margin_factor: float | None, multiplier_factor: float | None) -> str:
    parts = []
    if margin_factor is not None:
        parts.append(f"margin_factor={margin_factor}")
    if multiplier_factor is not None:
        parts.append(f"multiplier_factor={multiplier_factor}")
    return " ".join(parts)


def _scalar_command(args: argparse.Namespace, config: ToleranceConfig) -> int:
    result, margin_factor, multiplier_factor = evaluate_scalar(
        args.expected, args.actual, config.build_evaluator()
    )
    line = f"result={result.name.lower()}"
    factors = _format_factors(margin_factor, multiplier_factor)
    print(f"{line} {factors}".rstrip())
    return EXIT_EQUAL if result.is_equal else EXIT_UNEQUAL


def _sequence_command(args: argparse.Namespace, config: ToleranceConfig) -> int:
    result, margin_factor, multiplier_factor = evaluate_sequence(
        args.expected, args.actual, config.build_evaluator()
    )
    if isinstance(result, DifferentLengths):
        line = (
            "result=different_lengths "
            f"expected_length={result.expected_length} actual_length={result.actual_length}"
        )
    elif isinstance(result, UnequalElements):
        line = (
            f"result=unequal_elements index={result.index} "
            f"expected={result.expected_value!r} actual={result.actual_value!r}"
        )
    elif isinstance(result, SequencesExactlyEqual):
        line = "result=exactly_equal"
    else:
        line = "result=approximately_equal"
    factors = _format_factors(margin_factor, multiplier_factor)
    print(f"{line} {factors}".rstrip())
    return EXIT_EQUAL if result.is_equal else EXIT_UNEQUAL


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0

    try:
        configure_logging(log_level=args.log_level)
        config = _resolve_config(args)
    except (ValueError, TypeError) as exc:
        print(f"approx-eq: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    command_handler = cast(Callable[[argparse.Namespace, ToleranceConfig], int], handler)
    return command_handler(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
