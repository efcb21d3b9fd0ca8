"""Unit tests for tolerance configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from approx_eq.config import ToleranceConfig, apply_overrides, load_config
from approx_eq.constants import DEFAULT_MARGIN, DEFAULT_MULTIPLIER
from approx_eq.evaluators import (
    MarginEvaluator,
    MultiplierEvaluator,
    ZeroMarginOrMultiplierEvaluator,
)


def test_tolerance_config_defaults() -> None:
    config = ToleranceConfig()

    assert config.strategy == "zero_margin_or_multiplier"
    assert config.margin == DEFAULT_MARGIN
    assert config.multiplier == DEFAULT_MULTIPLIER
    assert config.nan_equality is False
    assert config.build_evaluator() == ZeroMarginOrMultiplierEvaluator(
        DEFAULT_MULTIPLIER, DEFAULT_MARGIN
    )


@pytest.mark.parametrize(
    ("strategy", "expected"),
    [
        ("margin", MarginEvaluator(0.5)),
        ("multiplier", MultiplierEvaluator(0.25)),
        ("zero_margin_or_multiplier", ZeroMarginOrMultiplierEvaluator(0.25, 0.5)),
    ],
)
def test_build_evaluator_matches_strategy(strategy: str, expected: object) -> None:
    config = ToleranceConfig.model_validate(
        {"strategy": strategy, "margin": 0.5, "multiplier": 0.25}
    )

    assert config.build_evaluator() == expected


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "tolerance.yml"
    config_path.write_text(
        "\n".join(
            [
                "strategy: margin",
                "margin: 0.01",
                "nan_equality: true",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.strategy == "margin"
    assert config.margin == 0.01
    assert config.multiplier == DEFAULT_MULTIPLIER
    assert config.build_evaluator() == MarginEvaluator(0.01, nan_equality=True)


def test_load_config_logs_loaded_policy(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config_path = tmp_path / "tolerance.yml"
    config_path.write_text("strategy: multiplier\n", encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="approx_eq.config"):
        load_config(config_path)

    assert "config_loaded" in caplog.text
    assert "strategy=multiplier" in caplog.text


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path) == ToleranceConfig()


def test_load_config_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unable to read config file"):
        load_config(tmp_path / "missing.yml")


def test_load_config_raises_for_invalid_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.yml"
    config_path.write_text("strategy: [margin\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(config_path)


def test_load_config_raises_for_non_mapping_document(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yml"
    config_path.write_text("- margin\n- 0.1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        load_config(config_path)


@pytest.mark.parametrize(
    "line",
    [
        "margin: -0.1",
        "multiplier: -1",
        "margin: .nan",
        "strategy: absolute",
        "tolerance: 0.1",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, line: str) -> None:
    config_path = tmp_path / "invalid.yml"
    config_path.write_text(line + "\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Configuration validation failed"):
        load_config(config_path)


def test_validation_error_names_offending_field(tmp_path: Path) -> None:
    config_path = tmp_path / "invalid.yml"
    config_path.write_text("margin: -0.5\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"- margin: "):
        load_config(config_path)


def test_apply_overrides_replaces_selected_fields() -> None:
    config = ToleranceConfig(strategy="margin", margin=0.5)

    updated = apply_overrides(config, {"margin": 0.25, "nan_equality": True})

    assert updated == ToleranceConfig(strategy="margin", margin=0.25, nan_equality=True)
    assert apply_overrides(config, {}) is config


def test_apply_overrides_reports_invalid_values() -> None:
    with pytest.raises(ValueError) as exc_info:
        apply_overrides(ToleranceConfig(), {"margin": -0.5})

    message = str(exc_info.value)
    assert message.startswith("Configuration validation failed:")
    assert "- margin: " in message
