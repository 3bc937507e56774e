"""Abstract base class for per-directory bounded selectors."""

from __future__ import annotations

from abc import ABC, abstractmethod

from riskscan.models.results import FileResult


class Selector(ABC):
    @abstractmethod
    def offer(self, candidate: FileResult) -> bool:
        """Consider a candidate; return True if it is now retained."""
        ...

    @abstractmethod
    def drain(self) -> list[FileResult]:
        """Return the retained results and reset to empty for the next directory."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
