"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank (1–8) holding this side's king and rooks at the start."""
        return 1 if self == Color.WHITE else 8

    @property
    def forward(self) -> int:
        """Rank direction in which this side's pawns advance."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Upper-case letter used in notation, e.g. ``N`` for knight."""
        return _LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType | None:
        return _FROM_LETTER.get(letter.upper())


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_FROM_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_SHORT = auto()
    WHITE_LONG = auto()
    BLACK_SHORT = auto()
    BLACK_LONG = auto()

    WHITE_BOTH = WHITE_SHORT | WHITE_LONG
    BLACK_BOTH = BLACK_SHORT | BLACK_LONG
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def short(cls, color: Color) -> CastlingRights:
        return cls.WHITE_SHORT if color == Color.WHITE else cls.BLACK_SHORT

    @classmethod
    def long(cls, color: Color) -> CastlingRights:
        return cls.WHITE_LONG if color == Color.WHITE else cls.BLACK_LONG

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH
