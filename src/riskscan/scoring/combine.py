"""Combine the scorers into a single clamped FileResult."""

from __future__ import annotations

import os
from datetime import datetime

from riskscan.config import AppConfig
from riskscan.models.results import MAX_RISK, MIN_RISK, FileResult
from riskscan.scoring.dir_name import assess_dir_name_length
from riskscan.scoring.extensions import ExtensionRiskTable
from riskscan.scoring.file_risk import assess_file_risk


def clamp(v: float, lo: float = MIN_RISK, hi: float = MAX_RISK) -> float:
    return lo if v < lo else hi if v > hi else v


def score_file(
    path: str,
    size: int,
    modified: datetime,
    *,
    table: ExtensionRiskTable,
    config: AppConfig,
    now: datetime,
) -> FileResult | None:
    """Return the file's FileResult, or None if it is too small to consider."""
    if size <= config.filter.min_size_bytes:
        return None

    raw = assess_file_risk(
        path, size, modified, table=table, config=config, now=now
    ) + assess_dir_name_length(path, config.dir_name)

    return FileResult(path=os.path.abspath(path), risk=clamp(raw))
