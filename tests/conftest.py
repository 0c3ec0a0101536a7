# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def catalog() -> list:
    from movieapp.models.movie import Movie

    return [
        Movie(id="a", title="Alpha", year="2001", genre="Drama"),
        Movie(id="b", title="Bravo", year="2002", genre="Comedy"),
        Movie(id="c", title="Charlie", year="2003", genre="Sci-Fi"),
    ]


@pytest.fixture
def default_config() -> dict:
    from movieapp.config import get_default_config

    return get_default_config()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    from movieapp.config import ENV_OVERRIDES

    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
