"""Unit tests for the file risk scorer."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from riskscan.config import AppConfig
from riskscan.scoring.extensions import ExtensionRiskTable
from riskscan.scoring.file_risk import assess_file_risk

OLD = timedelta(days=30)


def _risk(
    path: str,
    size: int,
    modified: datetime,
    table: ExtensionRiskTable,
    config: AppConfig,
    now: datetime,
) -> float:
    return assess_file_risk(path, size, modified, table=table, config=config, now=now)


def test_plain_old_small_file_scores_zero(
    extension_table: ExtensionRiskTable, default_config: AppConfig, now: datetime
) -> None:
    assert _risk("/x/notes.txt", 5000, now - OLD, extension_table, default_config, now) == 0.0


def test_large_file_adds_size_delta(
    extension_table: ExtensionRiskTable, default_config: AppConfig, now: datetime
) -> None:
    risk = _risk("/x/blob.bin", 1_000_001, now - OLD, extension_table, default_config, now)
    assert risk == pytest.approx(0.25)


def test_size_threshold_is_exclusive(
    extension_table: ExtensionRiskTable, default_config: AppConfig, now: datetime
) -> None:
    assert _risk("/x/blob.bin", 1_000_000, now - OLD, extension_table, default_config, now) == 0.0


def test_image_extension_is_negative(
    extension_table: ExtensionRiskTable, default_config: AppConfig, now: datetime
) -> None:
    risk = _risk("/x/photo.png", 5000, now - OLD, extension_table, default_config, now)
    assert risk == pytest.approx(-0.20)


def test_recent_modification_adds_delta(
    extension_table: ExtensionRiskTable, default_config: AppConfig, now: datetime
) -> None:
    risk = _risk("/x/notes.txt", 5000, now - timedelta(hours=1), extension_table, default_config, now)
    assert risk == pytest.approx(0.20)


def test_modification_exactly_at_cutoff_is_not_recent(
    extension_table: ExtensionRiskTable, default_config: AppConfig, now: datetime
) -> None:
    cutoff = now - timedelta(hours=168)
    assert _risk("/x/notes.txt", 5000, cutoff, extension_table, default_config, now) == 0.0
    just_after = cutoff + timedelta(seconds=1)
    assert _risk("/x/notes.txt", 5000, just_after, extension_table, default_config, now) == pytest.approx(0.20)


def test_rules_are_additive(
    extension_table: ExtensionRiskTable, default_config: AppConfig, now: datetime
) -> None:
    risk = _risk("/x/big.csv", 2_000_000, now - timedelta(hours=1), extension_table, default_config, now)
    assert risk == pytest.approx(0.25 + 0.75 + 0.20)


def test_custom_table_is_used(default_config: AppConfig, now: datetime) -> None:
    table = ExtensionRiskTable.from_mapping({".log": 0.4})
    assert _risk("/x/app.log", 5000, now - OLD, table, default_config, now) == pytest.approx(0.4)
    assert _risk("/x/data.csv", 5000, now - OLD, table, default_config, now) == 0.0
