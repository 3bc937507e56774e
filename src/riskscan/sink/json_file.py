"""JSON file sink.

Flat layout (default):
    {"Dir": "/abs/root", "Results": [{"Path": ..., "Risk": ...}, ...]}

Nested layout (--nested):
    {"Dir": "/abs/root", "Directories": [{"Dir": ..., "Results": [...]}, ...]}
"""

from __future__ import annotations

import logging
from pathlib import Path

from riskscan.errors import OutputError
from riskscan.models.results import NestedRunOutput, RunOutput, ScanReport
from riskscan.sink.base import ResultSink

logger = logging.getLogger(__name__)


def render_json(report: ScanReport, nested: bool = False, indent: int = 4) -> str:
    if nested:
        doc: RunOutput | NestedRunOutput = NestedRunOutput(
            directory=report.root_directory, directories=report.groups
        )
    else:
        doc = RunOutput(directory=report.root_directory, results=report.flattened())
    return doc.model_dump_json(by_alias=True, indent=indent) + "\n"


class JsonFileSink(ResultSink):
    def __init__(self, out_path: str | Path, nested: bool = False, indent: int = 4) -> None:
        self._out_path = Path(out_path)
        self._nested = nested
        self._indent = indent

    def write(self, report: ScanReport) -> None:
        payload = render_json(report, nested=self._nested, indent=self._indent)
        try:
            with self._out_path.open("w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as exc:
            raise OutputError(str(self._out_path), exc) from exc
        logger.info("Wrote %d bytes to %s", len(payload), self._out_path)
