"""Abstract interface and result types for the game layer.

Presentation code depends on :class:`IAtomicGame` and :class:`MoveResult`
only, never on the board internals.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from atomchess.core.enums import Color, GameResult, MoveError

if TYPE_CHECKING:
    from atomchess.core.piece import Piece
    from atomchess.core.types import Square


# ── Move result ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a single move request.

    ``error`` is ``None`` exactly when ``success`` is true. ``destroyed``
    lists the squares cleared by an explosion, empty for quiet moves.
    """

    success: bool
    message: str
    error: MoveError | None = None
    origin: Square | None = None
    destination: Square | None = None
    captured: bool = False
    destroyed: tuple[Square, ...] = ()

    def __bool__(self) -> bool:
        return self.success


# ── Abstract interface ───────────────────────────────────────────────────────


class IAtomicGame(ABC):
    """Interface for the rule engine as seen by a presentation layer."""

    @abstractmethod
    def new_game(self) -> None:
        """Reset to the starting position with White to move."""

    @abstractmethod
    def submit_move(self, origin: str, destination: str) -> MoveResult:
        """Attempt a move between two algebraic square names."""

    @abstractmethod
    def piece_at(self, square: Square | str) -> Piece | None:
        """Piece on *square*, or ``None`` when it is empty."""

    @property
    @abstractmethod
    def active_player(self) -> Color:
        """Side whose turn it is."""

    @property
    @abstractmethod
    def result(self) -> GameResult:
        """Current game result; ``IN_PROGRESS`` until a king falls."""
