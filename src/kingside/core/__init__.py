"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from kingside.core import Board, Color, Square

    board = Board.initial()
    board.try_move(Square.parse("e2"), Square.parse("e4"))
    for move in board.legal_moves_for(Color.BLACK):
        print(move)
"""

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.rules import Rules
from kingside.core.square import ALL_SQUARES, Ray, Square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Geometry
    "ALL_SQUARES",
    "Ray",
    "Square",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Rules",
]
