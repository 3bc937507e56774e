"""Error taxonomy.

Per-entry traversal failures are not represented here: the walker absorbs
them and moves on. Everything below is fatal to a run.
"""

from __future__ import annotations


class RiskScanError(Exception):
    """Base class for every error a run can surface."""


class ConfigError(RiskScanError):
    """Missing command-line flags or an unusable config file."""


class RootTraversalError(RiskScanError):
    """The scan root could not be stat'ed or listed."""

    def __init__(self, root: str, cause: OSError) -> None:
        super().__init__(f"Cannot traverse root {root!r}: {cause}")
        self.root = root
        self.cause = cause


class OutputError(RiskScanError):
    """The output file could not be created or written."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Error while opening the output file {path!r}: {cause}")
        self.path = path
        self.cause = cause
