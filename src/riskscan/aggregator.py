"""DirectoryAggregator: turns the traversal event stream into per-directory top-K groups.

State machine:
    EnterDirectory(d)  → drain the selector into a DirResult for the previous
                         directory (if any), then start accumulating for d
    ObserveFile(...)   → score the file; offer the result to the selector
    ExitTraversal()    → final drain for the last directory

Scoring is pure (combine.score_file has no I/O). The aggregator owns the only
mutable state of a run: the active selector and the growing group list.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from riskscan.config import AppConfig
from riskscan.models.events import EnterDirectory, ExitTraversal, ObserveFile, TraversalEvent
from riskscan.models.results import DirResult, ScanReport
from riskscan.scoring.combine import score_file
from riskscan.scoring.extensions import ExtensionRiskTable
from riskscan.selection.base import Selector
from riskscan.selection.top_k import TopKSelector
from riskscan.walk.tree import walk_tree

logger = logging.getLogger(__name__)


class DirectoryAggregator:
    def __init__(
        self,
        root: str,
        config: AppConfig,
        table: ExtensionRiskTable,
        now: datetime,
        selector_factory: Callable[[int], Selector] = TopKSelector,
    ) -> None:
        self._config = config
        self._table = table
        self._now = now
        self._selector = selector_factory(config.selection.max_results_per_dir)
        self._current: str | None = None
        self._report = ScanReport(root_directory=os.path.abspath(root))
        self._finished = False

    def feed(self, event: TraversalEvent) -> None:
        if self._finished:
            raise RuntimeError("DirectoryAggregator already received ExitTraversal")

        if isinstance(event, EnterDirectory):
            self._flush()
            self._current = event.path
            self._report.stats.directories += 1
        elif isinstance(event, ObserveFile):
            self._observe(event)
        elif isinstance(event, ExitTraversal):
            self._flush()
            self._finished = True

    def feed_all(self, events: Iterable[TraversalEvent]) -> None:
        for event in events:
            self.feed(event)

    def finish(self) -> ScanReport:
        """Return the report, draining any directory still open."""
        if not self._finished:
            self.feed(ExitTraversal())
        return self._report

    def _observe(self, event: ObserveFile) -> None:
        stats = self._report.stats
        stats.files_observed += 1
        if self._current is None:
            # Single-file root: there was no directory event to attribute to.
            self._current = os.path.dirname(event.path) or os.curdir

        result = score_file(
            event.path,
            event.size,
            event.modified,
            table=self._table,
            config=self._config,
            now=self._now,
        )
        if result is None:
            return
        stats.files_scored += 1
        self._selector.offer(result)

    def _flush(self) -> None:
        if self._current is None:
            return
        results = self._selector.drain()
        self._report.stats.files_retained += len(results)
        self._report.groups.append(
            DirResult(directory=os.path.abspath(self._current), results=results)
        )
        self._current = None


def scan_tree(
    root: str,
    config: AppConfig,
    now: datetime | None = None,
) -> ScanReport:
    """Walk ``root`` and return its per-directory top-K report.

    ``now`` is captured once so every file is judged against the same
    recency cutoff. Raises RootTraversalError if the root is unreadable.
    """
    if now is None:
        now = datetime.now(tz=timezone.utc)

    table = ExtensionRiskTable.from_mapping(config.extension_risk)
    aggregator = DirectoryAggregator(root, config, table, now)
    aggregator.feed_all(walk_tree(root))
    report = aggregator.finish()

    stats = report.stats
    logger.info(
        "Scanned %s: %d directories, %d files observed, %d scored, %d retained",
        report.root_directory,
        stats.directories,
        stats.files_observed,
        stats.files_scored,
        stats.files_retained,
    )
    return report
