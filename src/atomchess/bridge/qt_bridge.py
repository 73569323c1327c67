"""Qt bridge exposing an AtomicGame to a Qt presentation layer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from atomchess.core.enums import GameResult
from atomchess.core.types import Square
from atomchess.game.controller import AtomicGame

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Main-thread adapter turning engine events into Qt signals.

    Widgets connect their click handlers to :meth:`submit_move` and redraw
    from the signals; they never touch the board directly.
    """

    move_applied = pyqtSignal(object)  # MoveResult
    move_rejected = pyqtSignal(str, str, object)  # origin, destination, MoveResult
    explosion = pyqtSignal(object, object)  # center Square, cleared tuple[Square]
    game_over = pyqtSignal(int)  # GameResult
    game_reset = pyqtSignal()

    def __init__(self, game: AtomicGame | None = None) -> None:
        super().__init__()
        self._game = game if game is not None else AtomicGame()
        events = self._game.events
        events.on_move.append(self.move_applied.emit)
        events.on_explosion.append(self._on_explosion)
        events.on_game_over.append(self._on_game_over)
        events.on_new_game.append(self.game_reset.emit)

    @property
    def game(self) -> AtomicGame:
        return self._game

    @pyqtSlot(str, str)
    def submit_move(self, origin: str, destination: str) -> None:
        """Forward a move request; rejections are reported via a signal."""
        result = self._game.submit_move(origin, destination)
        if not result.success:
            self.move_rejected.emit(origin, destination, result)

    @pyqtSlot()
    def new_game(self) -> None:
        self._game.new_game()

    # ── Engine callbacks ─────────────────────────────────────────────────

    def _on_explosion(self, center: Square, cleared: tuple[Square, ...]) -> None:
        self.explosion.emit(center, cleared)

    def _on_game_over(self, result: GameResult) -> None:
        _LOGGER.debug("Forwarding game over: %s", result.name)
        self.game_over.emit(int(result))
