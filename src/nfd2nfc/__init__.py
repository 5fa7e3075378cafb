# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/__init__.py

"""nfd2nfc - rename NFD-encoded file and directory names to NFC."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("nfd2nfc")
except PackageNotFoundError:
    __version__ = "0.0.0"
