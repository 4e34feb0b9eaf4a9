"""Move record (what was played, and whether it captured)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kingside.core.square import Square

if TYPE_CHECKING:
    from kingside.core.piece import Piece


@dataclass(slots=True)
class Move:
    """A committed (or trial) move.

    ``capture`` is filled in while the move is applied, since en passant
    only reveals itself once the pawn has landed.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    capture: bool = False
    promotion: str | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.uci

    @property
    def uci(self) -> str:
        """Long-algebraic notation, e.g. ``e2e4`` or ``e7e8q``."""
        base = f"{self.from_sq.name}{self.to_sq.name}".lower()
        if self.promotion is not None:
            base += self.promotion.lower()
        return base
