"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass

from atomchess.core.enums import DoubleKingPolicy


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable settings for an :class:`~atomchess.game.engine.AtomicGame`.

    Args:
        double_king_policy: ``REJECT`` refuses a capture that would destroy
            both kings; ``DRAW`` plays it and ends the game drawn.
        language: Locale for result messages. ``None`` follows the global
            locale set with :func:`atomchess.game.i18n.set_language`.
    """

    double_king_policy: DoubleKingPolicy = DoubleKingPolicy.REJECT
    language: str | None = None
