"""Tolerance configuration models and loaders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from approx_eq.constants import DEFAULT_MARGIN, DEFAULT_MULTIPLIER
from approx_eq.evaluators import (
    ApproximateEqualityEvaluator,
    margin,
    multiplier,
    zero_margin_or_multiplier,
)

LOGGER = logging.getLogger(__name__)

Strategy = Literal["margin", "multiplier", "zero_margin_or_multiplier"]


class ToleranceConfig(BaseModel):
    """Tolerance policy applied by callers that do not build an evaluator themselves.

    ``margin`` is only used by the ``margin`` and ``zero_margin_or_multiplier``
    strategies, ``multiplier`` only by ``multiplier`` and
    ``zero_margin_or_multiplier``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strategy: Strategy = "zero_margin_or_multiplier"
    margin: float = Field(default=DEFAULT_MARGIN, ge=0.0, allow_inf_nan=False)
    multiplier: float = Field(default=DEFAULT_MULTIPLIER, ge=0.0, allow_inf_nan=False)
    nan_equality: bool = False

    def build_evaluator(self) -> ApproximateEqualityEvaluator:
        """Return the stock evaluator described by this configuration."""

        if self.strategy == "margin":
            return margin(self.margin, nan_equality=self.nan_equality)
        if self.strategy == "multiplier":
            return multiplier(self.multiplier, nan_equality=self.nan_equality)
        return zero_margin_or_multiplier(
            self.multiplier, self.margin, nan_equality=self.nan_equality
        )


def _format_validation_error(error: ValidationError) -> str:
    lines = ["Configuration validation failed:"]
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        lines.append(f"- {location}: {message}")
    return "\n".join(lines)


def load_config(path: str | Path) -> ToleranceConfig:
    """Load a YAML tolerance configuration file from disk.

    An empty file yields the default policy.
    """

    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Unable to read config file '{config_path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in config file '{config_path}': {exc}") from exc

    data: Any = raw if raw is not None else {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file '{config_path}' must contain a top-level mapping/object."
        )

    try:
        config = ToleranceConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(_format_validation_error(exc)) from exc

    LOGGER.info(
        "config_loaded path=%s strategy=%s margin=%s multiplier=%s nan_equality=%s",
        config_path,
        config.strategy,
        config.margin,
        config.multiplier,
        config.nan_equality,
    )
    return config


def apply_overrides(config: ToleranceConfig, overrides: Mapping[str, Any]) -> ToleranceConfig:
    """Return ``config`` with ``overrides`` applied and validated again."""

    if not overrides:
        return config
    try:
        return ToleranceConfig.model_validate({**config.model_dump(), **overrides})
    except ValidationError as exc:
        raise ValueError(_format_validation_error(exc)) from exc
