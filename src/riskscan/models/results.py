"""Result models: per-file risk, per-directory groups and the serialized run output.

Field names are snake_case in Python; serialization aliases produce the
PascalCase keys of the JSON report (``Dir``, ``Results``, ``Path``, ``Risk``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

MIN_RISK = 0.0
MAX_RISK = 1.0


def json_safe_path(path: str) -> str:
    """Replace undecodable filename bytes (surrogate escapes from os.scandir) with U+FFFD."""
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


ReportPath = Annotated[str, AfterValidator(json_safe_path)]


class FileResult(BaseModel):
    """A scored file. Risk must already be clamped; out-of-range values are rejected."""

    model_config = ConfigDict(frozen=True)

    path: ReportPath = Field(serialization_alias="Path")  # absolute at scoring time
    risk: float = Field(ge=MIN_RISK, le=MAX_RISK, serialization_alias="Risk")


class DirResult(BaseModel):
    """The top-K results retained for one directory, in selector slot order."""

    model_config = ConfigDict(frozen=True)

    directory: ReportPath = Field(serialization_alias="Dir")
    results: list[FileResult] = Field(default_factory=list, serialization_alias="Results")


class RunOutput(BaseModel):
    """Flat report: every directory's results concatenated in flush order."""

    directory: ReportPath = Field(serialization_alias="Dir")
    results: list[FileResult] = Field(default_factory=list, serialization_alias="Results")


class NestedRunOutput(BaseModel):
    """Grouped report: one DirResult per scanned directory."""

    directory: ReportPath = Field(serialization_alias="Dir")
    directories: list[DirResult] = Field(default_factory=list, serialization_alias="Directories")


@dataclass
class ScanStats:
    directories: int = 0
    files_observed: int = 0
    files_scored: int = 0   # survived the minimum-size filter
    files_retained: int = 0  # made it into some directory's top-K


@dataclass
class ScanReport:
    root_directory: str
    groups: list[DirResult] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)

    def flattened(self) -> list[FileResult]:
        return [r for group in self.groups for r in group.results]
