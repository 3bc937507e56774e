"""Traversal events: the typed stream between the walker and the aggregator.

A walk always produces, in order:
    EnterDirectory(root)
    ObserveFile(...)*        files of the current directory, contiguously
    EnterDirectory(child)    then the same pattern for each subdirectory
    ...
    ExitTraversal()

The aggregator only relies on this shape, not on how the walk is performed.
Use the TraversalEvent union type for code that handles any event.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EnterDirectory(BaseModel):
    """Directory boundary: files observed after this belong to ``path``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["enter_directory"] = "enter_directory"
    path: str


class ObserveFile(BaseModel):
    """A non-directory entry whose metadata was resolved successfully."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["observe_file"] = "observe_file"
    path: str            # walk path as reached, not yet made absolute
    size: int = Field(ge=0)
    modified: datetime   # timezone-aware


class ExitTraversal(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["exit_traversal"] = "exit_traversal"


# Discriminated union; use it for any code that handles every event type.
TraversalEvent = Annotated[
    Union[EnterDirectory, ObserveFile, ExitTraversal],
    Field(discriminator="kind"),
]
