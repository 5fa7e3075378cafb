# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/__main__.py

from nfd2nfc.cli import app

if __name__ == "__main__":
    app(prog_name="nfd2nfc")
