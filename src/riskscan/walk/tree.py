"""Depth-first tree walker producing the traversal event stream.

Each directory is listed once, its files are emitted in name order, and only
then are its subdirectories visited (also in name order). That keeps every
directory's files contiguous and ahead of anything deeper, which is what the
aggregator's drain-on-enter logic needs.

An explicit stack replaces recursion so deep trees cannot hit the recursion
limit. Symlinks are never followed; they are reported with their own lstat
metadata like any other non-directory entry.
"""

from __future__ import annotations

import logging
import os
import stat as statmod
from collections.abc import Iterator
from datetime import datetime, timezone

from riskscan.errors import RootTraversalError
from riskscan.models.events import EnterDirectory, ExitTraversal, ObserveFile, TraversalEvent

logger = logging.getLogger(__name__)


def walk_tree(root: str) -> Iterator[TraversalEvent]:
    """Yield EnterDirectory / ObserveFile events for ``root`` and end with ExitTraversal.

    Raises RootTraversalError if the root itself cannot be stat'ed or listed.
    Failures below the root only drop the affected entry.
    """
    try:
        st = os.stat(root)
    except OSError as exc:
        raise RootTraversalError(root, exc) from exc

    if not statmod.S_ISDIR(st.st_mode):
        yield _observe(root, st)
        yield ExitTraversal()
        return

    try:
        files, subdirs = _read_directory(root)
    except OSError as exc:
        raise RootTraversalError(root, exc) from exc

    yield EnterDirectory(path=root)
    yield from files

    stack = list(reversed(subdirs))
    while stack:
        dir_path = stack.pop()
        yield EnterDirectory(path=dir_path)
        try:
            files, subdirs = _read_directory(dir_path)
        except OSError as exc:
            logger.debug("Cannot list %s, skipping its contents: %s", dir_path, exc)
            continue
        yield from files
        stack.extend(reversed(subdirs))

    yield ExitTraversal()


def _read_directory(dir_path: str) -> tuple[list[ObserveFile], list[str]]:
    """List one directory, returning (file events, subdirectory paths) in name order."""
    with os.scandir(dir_path) as it:
        entries = sorted(it, key=lambda e: e.name)

    files: list[ObserveFile] = []
    subdirs: list[str] = []
    for entry in entries:
        child = os.path.normpath(os.path.join(dir_path, entry.name))
        try:
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(child)
                continue
            st = entry.stat(follow_symlinks=False)
        except OSError as exc:
            logger.debug("Skipping %s: %s", child, exc)
            continue
        files.append(_observe(child, st))
    return files, subdirs


def _observe(path: str, st: os.stat_result) -> ObserveFile:
    return ObserveFile(
        path=path,
        size=int(st.st_size),
        modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
    )
