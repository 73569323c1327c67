"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from atomchess.core.board import Board
from atomchess.core.enums import Color
from atomchess.game.config import GameConfig
from atomchess.game.controller import AtomicGame

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
    """Provide a singleton QApplication for Qt tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from atomchess.game.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def game() -> AtomicGame:
    """A fresh game from the standard starting position."""
    return AtomicGame()


@pytest.fixture
def make_game() -> Callable[..., AtomicGame]:
    """Factory: game loaded from a board diagram (rank 8 first)."""

    def _make(
        diagram: str,
        to_move: Color = Color.WHITE,
        config: GameConfig | None = None,
    ) -> AtomicGame:
        ctrl = AtomicGame(config)
        ctrl.load_position(Board.from_diagram(diagram), to_move)
        return ctrl

    return _make
