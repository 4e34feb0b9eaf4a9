"""Board — pieces by square plus castling rights and en passant target."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.square import Square
from kingside.core.zobrist import castling_key, en_passant_key, piece_key

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_MATERIAL_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}

# A piece landing on a rook's home corner removes that castling option.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square(1, 1): CastlingRights.WHITE_LONG,
    Square(8, 1): CastlingRights.WHITE_SHORT,
    Square(1, 8): CastlingRights.BLACK_LONG,
    Square(8, 8): CastlingRights.BLACK_SHORT,
}


class Board:
    """Mutable chess board.

    Only occupied squares are stored. :meth:`try_move` applies piece rules
    but never checks whether the mover's king is left in check; that is done
    by :meth:`legal_moves_for` and by the game layer, which try moves on a
    :meth:`clone` first.
    """

    __slots__ = (
        "_pieces",
        "_castling",
        "_en_passant",
        "_hash",
        "last_move",
        "highlighted_squares",
    )

    def __init__(self) -> None:
        self._pieces: dict[Square, Piece] = {}
        self._castling = CastlingRights.NONE
        self._en_passant: Square | None = None
        self._hash: int | None = None
        self.last_move: Move | None = None
        # Render hint: [to, from] of the last committed move.
        self.highlighted_squares: list[Square] = []

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position with all castling rights."""
        b = cls()
        b.castling = CastlingRights.ALL
        for color in Color:
            home = color.home_rank
            pawn_rank = home + color.forward
            for file, kind in enumerate(_BACK_RANK, start=1):
                b.set_piece(Piece(kind, color, b, Square(file, home)))
                b.set_piece(Piece(PieceType.PAWN, color, b, Square(file, pawn_rank)))
        b.recalculate_all()
        return b

    @classmethod
    def from_placement(
        cls,
        placement: Mapping[str, str],
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: str | None = None,
    ) -> Board:
        """Custom position from ``{"E1": "K", "E8": "k", ...}``.

        The caller is responsible for the position making sense (one king
        per side, rights matching the rook and king squares).
        """
        b = cls()
        b.castling = castling
        if en_passant is not None:
            b.en_passant = _parse_or_raise(en_passant)
        for name, char in placement.items():
            b.set_piece(Piece.from_char(char, b, _parse_or_raise(name)))
        b.recalculate_all()
        return b

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._pieces.get(sq)

    def piece_at(self, sq: Square) -> Piece | None:
        return self._pieces.get(sq)

    def set_piece(self, piece: Piece) -> None:
        """Place *piece* on its own ``location``, replacing any occupant."""
        if piece.board is not self:
            raise ValueError(f"{piece!r} belongs to another board")
        self._pieces[piece.location] = piece
        self._hash = None

    def remove_at(self, sq: Square) -> None:
        self._pieces.pop(sq, None)
        self._hash = None

    @property
    def castling(self) -> CastlingRights:
        return self._castling

    @castling.setter
    def castling(self, rights: CastlingRights) -> None:
        self._castling = CastlingRights(rights)
        self._hash = None

    @property
    def en_passant(self) -> Square | None:
        """Square a pawn may capture onto en passant (next ply only)."""
        return self._en_passant

    @en_passant.setter
    def en_passant(self, sq: Square | None) -> None:
        self._en_passant = sq
        self._hash = None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces on the board, optionally only those of *color*."""
        return [p for p in self._pieces.values() if color is None or p.color == color]

    def king_square(self, color: Color) -> Square | None:
        for piece in self._pieces.values():
            if piece.kind == PieceType.KING and piece.color == color:
                return piece.location
        return None

    def is_path_clear(self, path: Iterable[Square]) -> bool:
        return all(sq not in self._pieces for sq in path)

    def is_attacked(self, sq: Square, by_color: Color | None = None) -> bool:
        """Is *sq* controlled by any piece (of *by_color*, if given)?"""
        return any(
            piece.attacks(sq)
            for piece in self._pieces.values()
            if by_color is None or piece.color == by_color
        )

    def is_in_check(self, color: Color) -> bool:
        king_sq = self.king_square(color)
        if king_sq is None:
            return False
        return self.is_attacked(king_sq, color.opposite)

    def piece_counts(self, color: Color) -> dict[PieceType, int]:
        counts = dict.fromkeys(PieceType, 0)
        for piece in self.pieces(color):
            counts[piece.kind] += 1
        return counts

    def material_count(self, color: Color) -> int:
        """Conventional material sum (Q=9, R=5, B=N=3, P=1)."""
        return sum(_MATERIAL_VALUES[p.kind] for p in self.pieces(color))

    # -- Moves --------------------------------------------------------------

    def try_move(self, from_sq: Square, to_sq: Square, extra: str | None = None) -> bool:
        """Apply the move if the piece's rules allow it.

        Returns ``False`` without touching the board when there is no piece
        on *from_sq* or the move is not allowed for it.
        """
        piece = self._pieces.get(from_sq)
        if piece is None or not piece.is_move_legal(to_sq, extra):
            return False

        target = self._pieces.get(to_sq)
        if target is not None and target.color == piece.color:
            return False

        move = Move(
            piece,
            from_sq,
            to_sq,
            promotion=extra if piece.kind == PieceType.PAWN else None,
        )
        if target is not None:
            move.capture = True
            self.remove_at(to_sq)
        if to_sq in _ROOK_CORNERS:
            self.castling &= ~_ROOK_CORNERS[to_sq]

        self.remove_at(from_sq)
        piece.relocate(to_sq)
        self.set_piece(piece)
        piece.after_move(move)

        self.recalculate_all()
        self.last_move = move
        self.highlighted_squares = [to_sq, from_sq]
        return True

    def legal_moves_for(self, color: Color) -> list[Move]:
        """Every move *color* can make without leaving its king in check.

        Each candidate is tried on a throw-away clone. Promotions are tried
        with the default choice only.
        """
        legal: list[Move] = []
        for piece in self.pieces(color):
            origin = piece.location
            for to_sq in piece.candidate_moves:
                if not piece.is_move_legal(to_sq):
                    continue
                trial = self.clone()
                if not trial.try_move(origin, to_sq):
                    continue
                if trial.is_in_check(color):
                    continue
                assert trial.last_move is not None
                legal.append(trial.last_move)
        return legal

    def recalculate_all(self) -> None:
        """Rebuild every piece's candidate moves."""
        for piece in self._pieces.values():
            piece.recalculate()

    # -- Identity / copying -------------------------------------------------

    def position_hash(self) -> int:
        """Cheap order-independent digest; equal boards hash equal."""
        if self._hash is None:
            key = castling_key(self._castling)
            if self._en_passant is not None:
                key ^= en_passant_key(self._en_passant)
            for sq, piece in self._pieces.items():
                key ^= piece_key(piece.color, piece.kind, sq)
            self._hash = key
        return self._hash

    def equals(self, other: Board) -> bool:
        """Same occupancy, castling rights and en passant target."""
        if self._castling != other._castling or self._en_passant != other._en_passant:
            return False
        if self._pieces.keys() != other._pieces.keys():
            return False
        return all(
            (p.color, p.kind) == (other._pieces[sq].color, other._pieces[sq].kind)
            for sq, p in self._pieces.items()
        )

    def clone(self) -> Board:
        """Deep copy; the clone's pieces belong to the clone."""
        b = Board()
        b._castling = self._castling
        b._en_passant = self._en_passant
        for sq, piece in self._pieces.items():
            b._pieces[sq] = piece.clone_onto(b)
        b._hash = self._hash
        b.highlighted_squares = list(self.highlighted_squares)
        if self.last_move is not None:
            last = self.last_move
            mover = b._pieces.get(last.to_sq) or last.piece.clone_onto(b)
            b.last_move = Move(mover, last.from_sq, last.to_sq, last.capture, last.promotion)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for file in range(1, 9):
                p = self._pieces.get(Square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _parse_or_raise(name: str) -> Square:
    sq = Square.parse(name)
    if sq is None:
        raise ValueError(f"Invalid square name: {name!r}")
    return sq

