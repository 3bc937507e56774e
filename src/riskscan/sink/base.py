"""Abstract base class for result sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from riskscan.models.results import ScanReport


class ResultSink(ABC):
    @abstractmethod
    def write(self, report: ScanReport) -> None:
        """Persist a finished report. Raises OutputError on I/O failure."""
        ...
