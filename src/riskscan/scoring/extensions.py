"""Extension risk table mapping a file extension to a signed risk delta."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from riskscan.config import DEFAULT_EXTENSION_RISK


@dataclass(frozen=True)
class ExtensionRiskTable:
    """Immutable lookup built once per run and passed to the scorer."""

    deltas: Mapping[str, float]

    def delta_for(self, extension: str) -> float:
        # Exact match only: ".CSV" and ".csv" are different keys.
        return self.deltas.get(extension, 0.0)

    @staticmethod
    def from_mapping(raw: Mapping[str, float]) -> ExtensionRiskTable:
        return ExtensionRiskTable(deltas=MappingProxyType(dict(raw)))

    @staticmethod
    def default() -> ExtensionRiskTable:
        return ExtensionRiskTable.from_mapping(DEFAULT_EXTENSION_RISK)


def file_extension(path: str) -> str:
    """Return the suffix of the last path element starting at its final dot.

    Unlike os.path.splitext, a leading dot counts: ".csv" → ".csv".
    """
    name = os.path.basename(path)
    idx = name.rfind(".")
    return name[idx:] if idx >= 0 else ""
