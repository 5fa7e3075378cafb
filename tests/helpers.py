# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/helpers.py

from pathlib import Path

CAFE_NFD = "cafe\u0301"
CAFE_NFC = "caf\u00e9"


class RecordingReporter:
    """Reporter that keeps every call for later assertions."""

    def __init__(self):
        self.started = []
        self.renames = []
        self.errors = []
        self.summaries = []

    def report_start(self, config):
        self.started.append(config)

    def report_rename(self, source, target, dry_run):
        self.renames.append((source, target, dry_run))

    def report_error(self, path, error):
        self.errors.append((path, error))

    def report_summary(self, summary, dry_run):
        self.summaries.append((summary, dry_run))


def listing(root: Path) -> set[str]:
    """All relative paths under root, as exact (unnormalized) strings."""
    return {str(p.relative_to(root)) for p in root.rglob("*")}

# Names used by the nested_nfd_tree fixture
ANO_NFD, ANO_NFC = "an\u0303o", "a\u00f1o"
VERSION_NFD, VERSION_NFC = "versio\u0301n", "versi\u00f3n"
UBER_NFD, UBER_NFC = "u\u0308ber.csv", "\u00fcber.csv"
ZURICH_NFD = "Zu\u0308rich.txt"
RESUME_NFD, RESUME_NFC = "re\u0301sume\u0301.pdf", "r\u00e9sum\u00e9.pdf"
