# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/exceptions.py

"""
nfd2nfc-specific exception classes.

Startup problems are ConfigError and abort the run. Per-entry problems are
RenameError and are always recovered by the caller.
"""

from pathlib import Path
from typing import Optional


class Nfd2NfcError(Exception):
    """Base exception for all nfd2nfc errors."""
    pass


class ConfigError(Nfd2NfcError):
    """Raised when the run configuration is invalid or cannot be loaded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class RenameError(Nfd2NfcError):
    """Raised when a single entry cannot be renamed to its NFC name."""

    def __init__(self, message: str, source: Path, target: Path):
        self.source = source
        self.target = target
        super().__init__(message)
