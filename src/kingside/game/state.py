"""GameState — one snapshot of a game between moves."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.board import Board
from kingside.core.enums import Color


@dataclass(frozen=True, slots=True)
class GameState:
    """Board, side to move and half-move clock.

    Snapshots are pushed onto the game history before every accepted move.
    The board inside a snapshot is never mutated afterwards; the game always
    works on a clone.
    """

    board: Board
    turn: Color = Color.WHITE
    halfmove_clock: int = 0

    @classmethod
    def initial(cls) -> GameState:
        return cls(Board.initial())
