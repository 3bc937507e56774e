"""Shared pytest fixtures for the riskscan test suite."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable

import pytest

from riskscan.config import AppConfig, DirNameRuleConfig
from riskscan.models.events import ObserveFile
from riskscan.scoring.extensions import ExtensionRiskTable

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def dir_name_config() -> DirNameRuleConfig:
    return DirNameRuleConfig()


@pytest.fixture
def extension_table() -> ExtensionRiskTable:
    return ExtensionRiskTable.default()


# ---------------------------------------------------------------------------
# Event factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_observe() -> Callable[..., ObserveFile]:
    """Factory: create an ObserveFile event with sensible defaults, override via kwargs."""

    def _factory(**kwargs: Any) -> ObserveFile:
        defaults: dict[str, Any] = {
            "path": "/srv/data/report.bin",
            "size": 5000,
            "modified": NOW - timedelta(days=30),
        }
        defaults.update(kwargs)
        return ObserveFile(**defaults)

    return _factory


# ---------------------------------------------------------------------------
# Filesystem factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory: create a file of ``size`` bytes whose mtime is ``age_hours`` before NOW."""

    def _factory(path: Path, size: int = 2000, age_hours: float = 24 * 30) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            f.truncate(size)
        ts = (NOW - timedelta(hours=age_hours)).timestamp()
        os.utime(path, (ts, ts))
        return path

    return _factory
