"""Square value object and geometric helpers.

Squares use 1-based file/rank numbers, matching algebraic notation:
    A1 = Square(1, 1), H1 = Square(8, 1), ..., H8 = Square(8, 8)

Off-board squares can be created (e.g. by :meth:`Square.relative`); they are
reported by :meth:`Square.is_valid` and never clamped.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_FILES = "ABCDEFGH"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable file/rank pair."""

    file: int
    rank: int

    # ── Geometry ─────────────────────────────────────────────────────────

    def relative(self, file_offset: int, rank_offset: int) -> Square:
        """Square shifted by the given offsets (may be off the board)."""
        return Square(self.file + file_offset, self.rank + rank_offset)

    def is_valid(self) -> bool:
        return 1 <= self.file <= 8 and 1 <= self.rank <= 8

    def is_light(self) -> bool:
        return (self.file + self.rank) % 2 == 1

    def ray(self, file_step: int, rank_step: int) -> Ray:
        """Squares reached by repeatedly stepping away from this one."""
        return Ray(self, file_step, rank_step)

    def path_to(self, other: Square) -> list[Square]:
        """Squares strictly between *self* and *other*.

        Only rank, file and diagonal alignments have a path; anything else
        (including equal or adjacent squares) yields an empty list.
        """
        df = other.file - self.file
        dr = other.rank - self.rank
        if (df, dr) == (0, 0):
            return []
        if df != 0 and dr != 0 and abs(df) != abs(dr):
            return []

        step_f = (df > 0) - (df < 0)
        step_r = (dr > 0) - (dr < 0)
        path: list[Square] = []
        for sq in self.ray(step_f, step_r):
            if sq == other:
                return path
            path.append(sq)
        # *other* was off the board
        return []

    # ── Notation ─────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``E4``."""
        if not self.is_valid():
            return f"?{self.file},{self.rank}"
        return _FILES[self.file - 1] + _RANKS[self.rank - 1]

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> Square | None:
        """Parse ``e4`` / ``E4``; anything malformed yields ``None``."""
        if len(text) != 2:
            return None
        file_char, rank_char = text[0].upper(), text[1]
        if file_char not in _FILES or rank_char not in _RANKS:
            return None
        return cls(_FILES.index(file_char) + 1, _RANKS.index(rank_char) + 1)


@dataclass(frozen=True, slots=True)
class Ray:
    """Lazy sequence of on-board squares in one direction from *origin*.

    The origin itself is not included. Iterating again restarts the walk.
    """

    origin: Square
    file_step: int
    rank_step: int

    def __post_init__(self) -> None:
        if self.file_step == 0 and self.rank_step == 0:
            raise ValueError("Ray direction must not be (0, 0)")

    def __iter__(self) -> Iterator[Square]:
        current = self.origin.relative(self.file_step, self.rank_step)
        while current.is_valid():
            yield current
            current = current.relative(self.file_step, self.rank_step)


# ── Named square constants ──────────────────────────────────────────────────

ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(f, r) for r in range(1, 9) for f in range(1, 9)
)

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
