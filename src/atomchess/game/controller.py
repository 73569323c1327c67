"""AtomicGame: the rule engine behind a game of atomic chess.

Coordinates: GameState, MoveValidator, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from atomchess.core.board import Board
from atomchess.core.enums import Color, GameResult, MoveError
from atomchess.core.piece import Piece
from atomchess.core.rules import Rules
from atomchess.core.types import Square, parse_square
from atomchess.core.validator import MoveValidator
from atomchess.game.config import GameConfig
from atomchess.game.i18n import Strings, strings_for, t
from atomchess.game.interfaces import IAtomicGame, MoveResult
from atomchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult], None]
ExplosionCallback = Callable[[Square, tuple[Square, ...]], None]  # center, cleared
GameOverCallback = Callable[[GameResult], None]
NewGameCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_explosion: list[ExplosionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class AtomicGame(IAtomicGame):
    """Validates move requests, applies them, and tracks turn and result.

    Each instance owns its own board; nothing is shared between games.
    Calls are synchronous and expected from a single thread.
    """

    __slots__ = ("_config", "_state", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def active_player(self) -> Color:
        return self._state.side_to_move

    @property
    def result(self) -> GameResult:
        return self._state.result

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def winner(self) -> Color | None:
        return self._state.winner

    @property
    def board(self) -> Board:
        """Snapshot of the board; mutating it does not affect the game."""
        return self._state.board.copy()

    def piece_at(self, square: Square | str) -> Piece | None:
        if isinstance(square, str):
            square = parse_square(square)
        return self._state.board[square]

    def status_text(self) -> str:
        """Localized one-line status, e.g. "White to move"."""
        return self._strings().result_text(self.result, self.active_player)

    # ── IAtomicGame impl ─────────────────────────────────────────────────

    def new_game(self) -> None:
        self._state = GameState()
        self._state.setup()
        _LOGGER.info("New game started")
        self._emit_new_game()

    def load_position(self, board: Board, active_player: Color = Color.WHITE) -> None:
        """Start from a custom arrangement. *board* is copied."""
        if not board.has_king(Color.WHITE) or not board.has_king(Color.BLACK):
            raise ValueError("Position must contain a king of each color")
        self._state = GameState()
        self._state.setup(board, active_player)
        _LOGGER.info("Position loaded, %s to move", active_player)
        self._emit_new_game()

    def submit_move(self, origin: str, destination: str) -> MoveResult:
        s = self._strings()

        if self._state.is_game_over:
            return self._reject(MoveError.GAME_ALREADY_FINISHED, origin, destination)

        try:
            from_sq = parse_square(origin)
        except ValueError:
            return self._reject(
                MoveError.MALFORMED_NOTATION, origin, destination, name=repr(origin)
            )
        try:
            to_sq = parse_square(destination)
        except ValueError:
            return self._reject(
                MoveError.MALFORMED_NOTATION,
                origin,
                destination,
                name=repr(destination),
            )

        board = self._state.board
        piece = board[from_sq]
        side = self._state.side_to_move

        if piece is None or not MoveValidator.owns_piece(piece, side):
            return self._reject(MoveError.NOT_YOUR_PIECE, origin, destination)

        if not MoveValidator.is_legal(piece, from_sq, to_sq, board, side):
            return self._reject(MoveError.ILLEGAL_MOVE, origin, destination)

        if not Rules.is_allowed_by_policy(
            board, from_sq, to_sq, self._config.double_king_policy
        ):
            _LOGGER.debug("Rejected %s%s: would destroy both kings", origin, destination)
            return self._reject(MoveError.ILLEGAL_MOVE, origin, destination)

        # Apply
        applied = self._state.apply_move(from_sq, to_sq)
        if applied.captured:
            message = s.move_capture.format(count=len(applied.destroyed))
        else:
            message = s.move_ok
        result = MoveResult(
            success=True,
            message=message,
            origin=from_sq,
            destination=to_sq,
            captured=applied.captured,
            destroyed=applied.destroyed,
        )
        _LOGGER.debug("%s played %s%s", side, origin, destination)

        # Notify listeners
        if applied.captured:
            self._emit_explosion(to_sq, applied.destroyed)
        self._emit_move(result)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)

        return result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _strings(self) -> Strings:
        if self._config.language is not None:
            return strings_for(self._config.language)
        return t()

    def _reject(
        self, error: MoveError, origin: str, destination: str, **fields: str
    ) -> MoveResult:
        _LOGGER.debug("Rejected %s -> %s: %s", origin, destination, error.name)
        return MoveResult(
            success=False,
            message=self._strings().error_text(error, **fields),
            error=error,
        )

    def _emit_move(self, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(result)

    def _emit_explosion(self, center: Square, cleared: tuple[Square, ...]) -> None:
        for cb in self.events.on_explosion:
            cb(center, cleared)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_new_game(self) -> None:
        for cb in self.events.on_new_game:
            cb()
