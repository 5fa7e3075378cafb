# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/walker.py

"""
Lazy directory tree traversal.

Entries are yielded deepest-first: a directory comes out only after all of
its own descendants. Renaming each entry as it is yielded therefore never
invalidates a path that the walk still has to visit.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, Optional

from loguru import logger


ErrorHandler = Callable[[Path, OSError], None]


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One filesystem object found below the walk root."""
    path: Path
    kind: EntryKind
    depth: int

    @property
    def parent(self) -> Path:
        return self.path.parent

    @property
    def name(self) -> str:
        return self.path.name


def _log_error(path: Path, error: OSError) -> None:
    logger.warning(f"Cannot read {path}: {error}")


def _classify(dir_entry: os.DirEntry) -> EntryKind:
    if dir_entry.is_symlink():
        return EntryKind.SYMLINK
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def _list_children(directory: Path, on_error: ErrorHandler) -> Optional[list]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda d: d.name)
    except OSError as e:
        on_error(directory, e)
        return None


def walk_entries(root: Path, depth_limit: Optional[int] = None,
                 on_error: Optional[ErrorHandler] = None) -> Iterator[Entry]:
    """Yield every entry below root, deepest first.

    The root itself is not yielded. Children of each directory come out in
    name order, and each directory follows its own descendants. Symlinks
    are reported as SYMLINK and never followed. Traversal uses an explicit
    stack, so tree depth is bounded only by the filesystem.

    Args:
        root: Directory to walk
        depth_limit: Deepest level to visit (1 = direct children only),
            None for unlimited
        on_error: Called with (path, exception) for each unreadable
            directory or entry; the walk continues afterwards. Defaults
            to logging a warning.

    Yields:
        Entry values, lazily
    """
    handler = on_error if on_error is not None else _log_error
    root = Path(root)

    children = _list_children(root, handler)
    if children is None:
        return

    # Frames: (directory, depth of its children, remaining children,
    # entry for the directory itself, yielded once the frame is exhausted)
    stack = [(root, 1, iter(children), None)]
    while stack:
        directory, depth, remaining, pending = stack[-1]
        child = next(remaining, None)
        if child is None:
            stack.pop()
            if pending is not None:
                yield pending
            continue

        child_path = directory / child.name
        try:
            kind = _classify(child)
        except OSError as e:
            # Entry vanished or became unreadable between listing and stat
            handler(child_path, e)
            continue

        entry = Entry(path=child_path, kind=kind, depth=depth)
        if kind is EntryKind.DIRECTORY and (depth_limit is None or depth < depth_limit):
            grandchildren = _list_children(child_path, handler)
            if grandchildren is not None:
                stack.append((child_path, depth + 1, iter(grandchildren), entry))
                continue

        yield entry
