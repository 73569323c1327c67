"""Game management layer: rule engine, state, configuration, messages.

Quick start::

    from atomchess.game import AtomicGame

    game = AtomicGame()
    result = game.submit_move("e2", "e4")
    print(result.message, game.active_player)
"""

from atomchess.game.config import GameConfig
from atomchess.game.controller import AtomicGame, GameEvents
from atomchess.game.i18n import LANGUAGES, Strings, set_language, t
from atomchess.game.interfaces import IAtomicGame, MoveResult
from atomchess.game.state import AppliedMove, GameState

__all__ = [
    # Interfaces
    "IAtomicGame",
    "MoveResult",
    # Concrete
    "AppliedMove",
    "AtomicGame",
    "GameConfig",
    "GameEvents",
    "GameState",
    # Messages
    "LANGUAGES",
    "Strings",
    "set_language",
    "t",
]
