"""Piece — a tagged variant over :class:`PieceType` bound to one board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.movement import AFTER_MOVE, ATTACKS, CANDIDATES, VALIDATORS
from kingside.core.square import Square

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.move import Move

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


class Piece:
    """A piece standing on a square of *board*.

    The board owns its pieces; ``board`` here is only used for read queries
    (occupancy, rights, attacks) and for the side effects of a committed move.
    Candidate moves are cached and rebuilt on :meth:`relocate` and whenever
    the board calls :meth:`recalculate`.
    """

    __slots__ = ("kind", "color", "board", "location", "_candidates")

    def __init__(self, kind: PieceType, color: Color, board: Board, location: Square) -> None:
        self.kind = kind
        self.color = color
        self.board = board
        self.location = location
        self._candidates: tuple[Square, ...] = ()
        self.recalculate()

    @classmethod
    def from_char(cls, char: str, board: Board, location: Square) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color, board, location)

    # ── Candidate moves ──────────────────────────────────────────────────

    @property
    def candidate_moves(self) -> tuple[Square, ...]:
        """Pattern-legal destinations (occupancy and check not applied)."""
        return self._candidates

    def recalculate(self) -> None:
        self._candidates = tuple(
            sq for sq in CANDIDATES[self.kind](self) if sq.is_valid()
        )

    def relocate(self, square: Square) -> None:
        self.location = square
        self.recalculate()

    # ── Rules ────────────────────────────────────────────────────────────

    def is_move_legal(self, to: Square, extra: str | None = None) -> bool:
        """Whether moving to *to* obeys this piece's rules on its board.

        Does not consider whether the mover's own king is left in check.
        """
        if not to.is_valid() or to not in self._candidates:
            return False
        occupant = self.board.piece_at(to)
        if occupant is not None and occupant.color == self.color:
            return False
        return VALIDATORS[self.kind](self, to, extra)

    def attacks(self, square: Square) -> bool:
        """Whether this piece controls *square* (ignoring pins and checks)."""
        return ATTACKS[self.kind](self, square)

    def after_move(self, move: Move) -> None:
        """Apply side effects once the board has relocated this piece."""
        AFTER_MOVE[self.kind](self, move)

    # ── Copying ──────────────────────────────────────────────────────────

    def clone_onto(self, board: Board) -> Piece:
        return Piece(self.kind, self.color, board, self.location)

    def transformed(self, kind: PieceType) -> Piece:
        """Same colour, board and square, different kind (promotion)."""
        return Piece(kind, self.color, self.board, self.location)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def fen_char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.kind)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    def __str__(self) -> str:
        return self.fen_char

    def __repr__(self) -> str:
        return f"Piece({self.color.name} {self.kind.name} @ {self.location})"
