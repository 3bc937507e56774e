"""Directory-name-length scorer: a hard three-bucket step function."""

from __future__ import annotations

import os

from riskscan.config import DirNameRuleConfig


def measured_name(path: str, config: DirNameRuleConfig) -> str:
    """Return the string whose length is bucketed.

    mode="path" measures the walk path exactly as it was reached, which is the
    historical behaviour. mode="parent" measures the immediate parent folder.
    """
    if config.mode == "parent":
        return os.path.basename(os.path.dirname(path))
    return path


def assess_dir_name_length(path: str, config: DirNameRuleConfig) -> float:
    # Byte length, not code points: "é" counts as two.
    size = len(os.fsencode(measured_name(path, config)))
    if size < config.short_below:
        return config.short_delta
    if size > config.long_above:
        return config.long_delta
    return config.default_delta
