"""Result codes, rule settings and the abstract game interface.

The transport collaborator works against :class:`IGame` and the string
codes of :class:`MoveOutcome` / :class:`GameResult`; it never needs the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING

from kingside.core.enums import Color

if TYPE_CHECKING:
    from kingside.core.square import Square


# ── Outcome / result codes ───────────────────────────────────────────────────


class MoveOutcome(StrEnum):
    """Answer to a single move request."""

    OK = "ok"
    NO_PIECE = "no_piece"
    NOT_YOUR_PIECE = "not_your_piece"
    ILLEGAL_MOVE = "illegal_move"
    SELF_CHECK = "self_check"
    GAME_ENDED = "game_ended"


class GameResult(StrEnum):
    """Game status. Everything except ``ONGOING`` is final."""

    ONGOING = "ongoing"
    WHITE_MATED = "white_mated"
    BLACK_MATED = "black_mated"
    WHITE_RESIGNED = "white_resigned"
    BLACK_RESIGNED = "black_resigned"
    WHITE_FLAGGED = "white_flagged"
    BLACK_FLAGGED = "black_flagged"
    STALEMATED = "stalemated"
    INSUFFICIENT_MATERIAL = "insufficient_material"
    THREEFOLD_REPETITION = "threefold_repetition"
    FIFTY_MOVES = "fifty_moves"
    DRAW_AGREED = "draw_agreed"

    @property
    def winner(self) -> Color | None:
        return _WINNERS.get(self)

    @property
    def is_final(self) -> bool:
        return self != GameResult.ONGOING

    @property
    def is_draw(self) -> bool:
        return self.is_final and self.winner is None

    @classmethod
    def mated(cls, color: Color) -> GameResult:
        return cls.WHITE_MATED if color == Color.WHITE else cls.BLACK_MATED

    @classmethod
    def resigned(cls, color: Color) -> GameResult:
        return cls.WHITE_RESIGNED if color == Color.WHITE else cls.BLACK_RESIGNED

    @classmethod
    def flagged(cls, color: Color) -> GameResult:
        return cls.WHITE_FLAGGED if color == Color.WHITE else cls.BLACK_FLAGGED


_WINNERS: dict[GameResult, Color] = {
    GameResult.WHITE_MATED: Color.BLACK,
    GameResult.WHITE_RESIGNED: Color.BLACK,
    GameResult.WHITE_FLAGGED: Color.BLACK,
    GameResult.BLACK_MATED: Color.WHITE,
    GameResult.BLACK_RESIGNED: Color.WHITE,
    GameResult.BLACK_FLAGGED: Color.WHITE,
}


# ── Draw rule settings ───────────────────────────────────────────────────────


class DrawRules:
    """Immutable draw-adjudication thresholds.

    Args:
        fifty_move_plies: Plies without capture or pawn move that end the
            game. The clock grows by one per accepted move.
        repetition_count: Occurrences of one position that end the game.
    """

    __slots__ = ("fifty_move_plies", "repetition_count")

    def __init__(self, fifty_move_plies: int = 50, repetition_count: int = 3) -> None:
        if fifty_move_plies < 1 or repetition_count < 2:
            raise ValueError(
                f"Invalid draw thresholds: {fifty_move_plies=}, {repetition_count=}"
            )
        self.fifty_move_plies = fifty_move_plies
        self.repetition_count = repetition_count

    @classmethod
    def standard(cls) -> DrawRules:
        """Fifty plies, threefold repetition."""
        return cls(50, 3)

    @classmethod
    def fide(cls) -> DrawRules:
        """Fifty full moves (100 plies), threefold repetition."""
        return cls(100, 3)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrawRules):
            return NotImplemented
        return (self.fifty_move_plies, self.repetition_count) == (
            other.fifty_move_plies,
            other.repetition_count,
        )

    def __hash__(self) -> int:
        return hash((self.fifty_move_plies, self.repetition_count))

    def __repr__(self) -> str:
        return f"DrawRules({self.fifty_move_plies} plies, {self.repetition_count}-fold)"


# ── Abstract interface ───────────────────────────────────────────────────────


class IGame(ABC):
    """Interface for a single chess game."""

    @abstractmethod
    def reset(self) -> None:
        """Start over from the standard position."""

    @abstractmethod
    def make_move(
        self, from_sq: Square, to_sq: Square, extra: str | None = None
    ) -> MoveOutcome:
        """Attempt a move for the side to move."""

    @abstractmethod
    def takeback_move(self) -> bool:
        """Undo the last move. Returns True on success."""

    @abstractmethod
    def resign(self, color: Color) -> bool:
        """Player of *color* resigns."""

    @abstractmethod
    def offer_draw(self, color: Color) -> bool:
        """Player of *color* offers (or accepts) a draw."""

    @abstractmethod
    def winner_color(self) -> Color | None:
        """Winning side, or ``None`` while ongoing or drawn."""
