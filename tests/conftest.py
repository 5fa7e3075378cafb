# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the nfd2nfc test suite.

All trees are built on the real filesystem under tmp_path so that the
byte-level spelling of each name is what the tool actually sees.
"""

import pytest
from loguru import logger

from tests.helpers import (
    ANO_NFD,
    CAFE_NFD,
    RESUME_NFD,
    UBER_NFD,
    VERSION_NFD,
    ZURICH_NFD,
    RecordingReporter,
)


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    """Keep the developer's own nfd2nfc.yml out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("NFD2NFC_CONFIG_HOME", raising=False)
    yield
    # setup_logging may have bound a sink to a stream that no longer exists
    logger.remove()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def cafe_dir(tmp_path):
    """Directory with an NFD-named 'café' and an ASCII 'plain.txt'."""
    root = tmp_path / "cafe"
    root.mkdir()
    (root / CAFE_NFD).write_text("coffee")
    (root / "plain.txt").write_text("plain")
    return root


@pytest.fixture
def nested_nfd_tree(tmp_path):
    """
    Three-level tree with decomposed names at every level:

        tree/
          año/                  (NFD)
            versión/            (NFD)
              über.csv          (NFD)
            notes.txt
          Zürich.txt            (NFD)
          ascii/
            deep/
              résumé.pdf        (NFD)
    """
    root = tmp_path / "tree"
    root.mkdir()
    ano = root / ANO_NFD
    ano.mkdir()
    version = ano / VERSION_NFD
    version.mkdir()
    (version / UBER_NFD).write_text("a,b")
    (ano / "notes.txt").write_text("notes")
    (root / ZURICH_NFD).write_text("zh")
    deep = root / "ascii" / "deep"
    deep.mkdir(parents=True)
    (deep / RESUME_NFD).write_text("cv")
    return root
