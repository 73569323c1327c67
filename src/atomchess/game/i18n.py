"""Internationalisation strings for move results and game status.

Usage::

    from atomchess.game.i18n import t, set_language

    set_language("Russian")
    print(t().move_ok)          # "Ход выполнен."
    print(t().wins.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass

from atomchess.core.enums import Color, GameResult, MoveError


@dataclass(frozen=True)
class Strings:
    # ── Move results ─────────────────────────────────────────────────────
    move_ok: str
    move_capture: str  # "Capture! {count} piece(s) destroyed."
    err_not_your_piece: str
    err_illegal_move: str
    err_game_finished: str
    err_malformed: str  # "Not a valid square: {name}"

    # ── Status ───────────────────────────────────────────────────────────
    color_white: str
    color_black: str
    to_move: str  # "{color} to move"
    wins: str  # "{color} wins: the king was destroyed."
    draw_both_kings: str

    def error_text(self, error: MoveError, **fields: str) -> str:
        """Message for a rejected move."""
        template = {
            MoveError.NOT_YOUR_PIECE: self.err_not_your_piece,
            MoveError.ILLEGAL_MOVE: self.err_illegal_move,
            MoveError.GAME_ALREADY_FINISHED: self.err_game_finished,
            MoveError.MALFORMED_NOTATION: self.err_malformed,
        }[error]
        return template.format(**fields)

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black

    def result_text(self, result: GameResult, side_to_move: Color) -> str:
        """One-line status for a result."""
        if result == GameResult.WHITE_WINS:
            return self.wins.format(color=self.color_white)
        if result == GameResult.BLACK_WINS:
            return self.wins.format(color=self.color_black)
        if result == GameResult.DRAW:
            return self.draw_both_kings
        return self.to_move.format(color=self.color_name(side_to_move))


_EN = Strings(
    move_ok="Move completed successfully.",
    move_capture="Capture! {count} piece(s) destroyed in the explosion.",
    err_not_your_piece="Please select one of your own pieces.",
    err_illegal_move="Invalid move according to chess rules.",
    err_game_finished="Game is already finished.",
    err_malformed="Not a valid square: {name}",
    color_white="White",
    color_black="Black",
    to_move="{color} to move",
    wins="{color} wins: the enemy king was destroyed.",
    draw_both_kings="Draw: both kings were destroyed.",
)

_RU = Strings(
    move_ok="Ход выполнен.",
    move_capture="Взятие! Взрывом уничтожено фигур: {count}.",
    err_not_your_piece="Выберите одну из своих фигур.",
    err_illegal_move="Ход противоречит правилам.",
    err_game_finished="Партия уже окончена.",
    err_malformed="Некорректное поле: {name}",
    color_white="Белые",
    color_black="Чёрные",
    to_move="Ход: {color}",
    wins="{color} победили: вражеский король уничтожен.",
    draw_both_kings="Ничья: оба короля уничтожены.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def strings_for(language: str) -> Strings:
    """Locale strings for *language*; unknown names fall back to English."""
    return _LOCALES.get(language, _EN)


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = strings_for(language)
