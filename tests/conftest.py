"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color, GameMode
from checkie.game.state import GameState

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Build a GameState from a text diagram (row 0 first)."""

    def _make(
        *rows: str,
        turn: Color = Color.RED,
        mode: GameMode = GameMode.STANDARD,
    ) -> GameState:
        return GameState.from_board(Board.from_rows(rows), turn=turn, mode=mode)

    return _make
