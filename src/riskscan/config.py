"""PyYAML loader → typed config dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

from riskscan.errors import ConfigError

DirNameMode = Literal["path", "parent"]

DEFAULT_EXTENSION_RISK: dict[str, float] = {
    ".zip": 0.15,
    ".tar": 0.15,
    ".png": -0.20,
    ".jpg": -0.20,
    ".jpeg": -0.20,
    ".csv": 0.75,
    ".json": 0.75,
}


@dataclass
class FilterConfig:
    min_size_bytes: int = 1000  # files at or below this size are never scored


@dataclass
class SizeRuleConfig:
    threshold_bytes: int = 1_000_000
    delta: float = 0.25


@dataclass
class RecencyRuleConfig:
    window_hours: int = 24 * 7
    delta: float = 0.20


@dataclass
class DirNameRuleConfig:
    mode: DirNameMode = "path"
    short_below: int = 5
    short_delta: float = 0.25
    long_above: int = 15
    long_delta: float = -0.10
    default_delta: float = 0.50


@dataclass
class SelectionConfig:
    max_results_per_dir: int = 10


@dataclass
class OutputConfig:
    nested: bool = False
    indent: int = 4


@dataclass
class AppConfig:
    filter: FilterConfig = field(default_factory=FilterConfig)
    size_rule: SizeRuleConfig = field(default_factory=SizeRuleConfig)
    recency_rule: RecencyRuleConfig = field(default_factory=RecencyRuleConfig)
    dir_name: DirNameRuleConfig = field(default_factory=DirNameRuleConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    extension_risk: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_EXTENSION_RISK))


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load riskscan.yaml and return a typed AppConfig.

    Falls back to defaults if the bundled file is absent or a section is missing.
    An explicitly given path that does not exist is a ConfigError.
    Raises ConfigError when a present value cannot be used.
    """
    raw: Any = {}
    explicit = path is not None
    if path is None:
        path = Path(__file__).parent.parent.parent / "config" / "riskscan.yaml"

    resolved = Path(path)
    if explicit and not resolved.exists():
        raise ConfigError(f"Config file not found: {resolved}")
    if resolved.exists():
        try:
            with resolved.open() as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config {resolved}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {resolved} must be a mapping, got {type(raw).__name__}")

    filter_raw = _section(raw, "filter")
    size_raw = _section(raw, "size_rule")
    recency_raw = _section(raw, "recency_rule")
    dir_raw = _section(raw, "dir_name")
    selection_raw = _section(raw, "selection")
    output_raw = _section(raw, "output")

    mode = dir_raw.get("mode", "path")
    if mode not in ("path", "parent"):
        raise ConfigError(f"dir_name.mode must be 'path' or 'parent', got {mode!r}")

    try:
        config = _build(
            filter_raw, size_raw, recency_raw, dir_raw, selection_raw, output_raw, mode
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value in config {resolved}: {exc}") from exc

    if config.selection.max_results_per_dir < 1:
        raise ConfigError(
            "selection.max_results_per_dir must be >= 1, "
            f"got {config.selection.max_results_per_dir}"
        )
    config.extension_risk = _extension_risk(raw.get("extension_risk"))
    return config


def _build(
    filter_raw: dict,
    size_raw: dict,
    recency_raw: dict,
    dir_raw: dict,
    selection_raw: dict,
    output_raw: dict,
    mode: DirNameMode,
) -> AppConfig:
    return AppConfig(
        filter=FilterConfig(
            min_size_bytes=int(filter_raw.get("min_size_bytes", 1000)),
        ),
        size_rule=SizeRuleConfig(
            threshold_bytes=int(size_raw.get("threshold_bytes", 1_000_000)),
            delta=float(size_raw.get("delta", 0.25)),
        ),
        recency_rule=RecencyRuleConfig(
            window_hours=int(recency_raw.get("window_hours", 24 * 7)),
            delta=float(recency_raw.get("delta", 0.20)),
        ),
        dir_name=DirNameRuleConfig(
            mode=mode,
            short_below=int(dir_raw.get("short_below", 5)),
            short_delta=float(dir_raw.get("short_delta", 0.25)),
            long_above=int(dir_raw.get("long_above", 15)),
            long_delta=float(dir_raw.get("long_delta", -0.10)),
            default_delta=float(dir_raw.get("default_delta", 0.50)),
        ),
        selection=SelectionConfig(
            max_results_per_dir=int(selection_raw.get("max_results_per_dir", 10)),
        ),
        output=OutputConfig(
            nested=bool(output_raw.get("nested", False)),
            indent=int(output_raw.get("indent", 4)),
        ),
    )


def _section(raw: dict, name: str) -> dict:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section {name!r} must be a mapping")
    return section


def _extension_risk(raw: Any) -> dict[str, float]:
    if raw is None:
        return dict(DEFAULT_EXTENSION_RISK)
    if not isinstance(raw, dict):
        raise ConfigError("extension_risk must map extensions to deltas")
    table: dict[str, float] = {}
    for ext, delta in raw.items():
        if isinstance(delta, bool) or not isinstance(delta, (int, float)):
            raise ConfigError(f"extension_risk[{ext!r}] must be a number, got {delta!r}")
        table[str(ext)] = float(delta)
    return table
