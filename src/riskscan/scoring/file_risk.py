"""File risk scorer.

Three independent, additive rules computed from a file's own metadata:
size above the large-file threshold, the extension delta, and a modification
time inside the recency window. The result is unclamped; combine.score_file
adds the directory-name delta and bounds the total.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from riskscan.config import AppConfig
from riskscan.scoring.extensions import ExtensionRiskTable, file_extension


def assess_file_risk(
    path: str,
    size: int,
    modified: datetime,
    *,
    table: ExtensionRiskTable,
    config: AppConfig,
    now: datetime,
) -> float:
    risk = 0.0

    if size > config.size_rule.threshold_bytes:
        risk += config.size_rule.delta

    risk += table.delta_for(file_extension(path))

    cutoff = now - timedelta(hours=config.recency_rule.window_hours)
    if modified > cutoff:
        risk += config.recency_rule.delta

    return risk
