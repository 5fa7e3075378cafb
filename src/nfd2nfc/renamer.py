# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/renamer.py

"""
NFD to NFC renaming of walked entries.

Every entry is handled on its own: a failure on one entry is reported
through the Reporter and the run moves on to the next.
"""

import os
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from nfd2nfc.config import RunConfig
from nfd2nfc.exceptions import RenameError
from nfd2nfc.reporting import Reporter
from nfd2nfc.walker import Entry, EntryKind, walk_entries


@dataclass
class RunSummary:
    """Counters for one run.

    total_converted counts every entry whose name needed converting,
    including those whose rename then failed (also counted in
    total_failed). It never exceeds total_processed.
    """
    total_processed: int = 0
    total_converted: int = 0
    total_failed: int = 0
    total_skipped: int = 0


def nfc_name(name: str) -> Optional[str]:
    """Return the NFC form of a name, or None if it is not valid Unicode.

    Names the OS could not decode arrive with lone surrogates
    (surrogateescape); those have no normal form.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return unicodedata.normalize("NFC", name)


def _rename(source: Path, target: Path) -> None:
    """Rename source to target without clobbering a different object."""
    # Normalization-insensitive filesystems (APFS, HFS+) resolve both
    # spellings to the same inode, which is fine to rename over
    if os.path.lexists(target) and not _same_entry(source, target):
        raise RenameError(
            f"Cannot rename {source} to {target}: destination already exists",
            source=source, target=target,
        )
    try:
        os.rename(source, target)
    except OSError as e:
        raise RenameError(f"Cannot rename {source} to {target}: {e}",
                          source=source, target=target) from e


def _same_entry(source: Path, target: Path) -> bool:
    try:
        return os.path.samestat(os.lstat(source), os.lstat(target))
    except OSError:
        return False


def process_entry(entry: Entry, config: RunConfig, reporter: Reporter,
                  summary: RunSummary) -> Optional[Path]:
    """Normalize one entry's name and rename it unless in dry-run mode.

    Args:
        entry: Entry from the walker
        config: Run settings (only dry_run is consulted)
        reporter: Receives the rename line and any error
        summary: Counters, updated in place

    Returns:
        The new path if the entry was (or in dry-run, would be) renamed,
        None otherwise
    """
    if entry.kind not in (EntryKind.FILE, EntryKind.DIRECTORY):
        logger.debug(f"Skipping {entry.kind.value}: {entry.path}")
        return None

    summary.total_processed += 1

    normalized = nfc_name(entry.name)
    if normalized is None:
        summary.total_skipped += 1
        logger.debug(f"Skipping undecodable name: {entry.path!r}")
        return None

    if normalized == entry.name:
        return None

    summary.total_converted += 1
    new_path = entry.parent / normalized
    reporter.report_rename(entry.path, new_path, config.dry_run)

    if config.dry_run:
        return new_path

    try:
        _rename(entry.path, new_path)
    except RenameError as e:
        summary.total_failed += 1
        logger.debug(f"Rename failed: {e}")
        reporter.report_error(entry.path, e)
        return None

    logger.info(f"Renamed {entry.path} -> {new_path}")
    return new_path


def convert_tree(config: RunConfig, reporter: Reporter) -> RunSummary:
    """Walk config.directory and convert every NFD name found.

    Traversal errors and rename errors are reported and do not stop the
    run. Entries are renamed as they are yielded; the walker's deepest-first
    order keeps the remaining paths valid.

    Returns:
        RunSummary for the whole run
    """
    summary = RunSummary()
    reporter.report_start(config)
    logger.debug(f"Starting conversion: {config!r}")

    for entry in walk_entries(config.directory, config.depth_limit,
                              on_error=reporter.report_error):
        process_entry(entry, config, reporter, summary)

    reporter.report_summary(summary, config.dry_run)
    logger.debug(f"Finished conversion: {summary}")
    return summary
