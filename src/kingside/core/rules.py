"""High-level chess rules: mate/stalemate status and draw detection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType

if TYPE_CHECKING:
    from kingside.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        """*color* is to move, in check, and has no legal move."""
        return board.is_in_check(color) and not board.legal_moves_for(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return not board.is_in_check(color) and not board.legal_moves_for(color)

    @staticmethod
    def has_sufficient_material(board: Board, color: Color) -> bool:
        """Whether *color* keeps enough force to mate.

        Any rook, queen or pawn is enough; among minor pieces two bishops,
        three knights, or a bishop with a knight.
        """
        counts = board.piece_counts(color)
        if counts[PieceType.ROOK] or counts[PieceType.QUEEN] or counts[PieceType.PAWN]:
            return True
        bishops = counts[PieceType.BISHOP]
        knights = counts[PieceType.KNIGHT]
        return bishops >= 2 or knights >= 3 or (bishops >= 1 and knights >= 1)

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """Drawn only when neither side can mate."""
        return not (
            Rules.has_sufficient_material(board, Color.WHITE)
            or Rules.has_sufficient_material(board, Color.BLACK)
        )

    @staticmethod
    def repetition_count(board: Board, history: Iterable[Board]) -> int:
        """Occurrences of *board* in *history*, counting *board* itself."""
        key = board.position_hash()
        count = 1
        for previous in history:
            if previous.position_hash() != key:
                continue
            if board.equals(previous):
                count += 1
        return count

    @staticmethod
    def is_repetition(board: Board, history: Iterable[Board], times: int = 3) -> bool:
        return Rules.repetition_count(board, history) >= times

    @staticmethod
    def is_fifty_move_rule(halfmove_clock: int, limit: int = 50) -> bool:
        """Whether *halfmove_clock* plies without capture or pawn move hit *limit*."""
        return halfmove_clock >= limit
