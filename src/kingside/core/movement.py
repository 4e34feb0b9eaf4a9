"""Per-kind movement rules.

Every piece kind is described by four functions collected into dispatch
tables keyed by :class:`PieceType`:

* candidates  — pattern-legal destinations, ignoring occupancy (blocking
  is applied later through path checks);
* validate    — board-dependent conditions for one candidate;
* attacks     — whether the piece controls a square (used for check and
  castling tests, never recurses into check-avoidance);
* after_move  — side effects once the piece has been relocated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import chain
from typing import TYPE_CHECKING

from kingside.core.enums import CastlingRights, PieceType
from kingside.core.square import Square

if TYPE_CHECKING:
    from kingside.core.move import Move
    from kingside.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_CHOICES: dict[str, PieceType] = {
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}
DEFAULT_PROMOTION = "Q"

# Rook corner files and the king's destination / rook destination files.
_SHORT_ROOK_FILE = 8
_LONG_ROOK_FILE = 1
_KING_HOME_FILE = 5

CandidateFn = Callable[["Piece"], Iterable[Square]]
ValidateFn = Callable[["Piece", Square, "str | None"], bool]
AttackFn = Callable[["Piece", Square], bool]
AfterMoveFn = Callable[["Piece", "Move"], None]


def resolve_promotion(extra: str | None) -> str | None:
    """Normalise a promotion choice; ``None`` means the choice is invalid."""
    if not extra:
        return DEFAULT_PROMOTION
    choice = extra.upper()
    return choice if choice in PROMOTION_CHOICES else None


# -- Candidate generation ---------------------------------------------------


def _leaps(piece: Piece, offsets: tuple[tuple[int, int], ...]) -> list[Square]:
    loc = piece.location
    return [loc.relative(df, dr) for df, dr in offsets]


def _rays(piece: Piece, directions: tuple[tuple[int, int], ...]) -> Iterable[Square]:
    loc = piece.location
    return chain.from_iterable(loc.ray(df, dr) for df, dr in directions)


def _pawn_candidates(pawn: Piece) -> list[Square]:
    loc = pawn.location
    forward = pawn.color.forward
    moves = [loc.relative(0, forward), loc.relative(1, forward), loc.relative(-1, forward)]
    if loc.rank == _pawn_start_rank(pawn):
        moves.append(loc.relative(0, 2 * forward))
    return moves


def _king_candidates(king: Piece) -> list[Square]:
    moves = _leaps(king, KING_OFFSETS)
    castling = king.board.castling
    if castling & CastlingRights.long(king.color):
        moves.append(king.location.relative(-2, 0))
    if castling & CastlingRights.short(king.color):
        moves.append(king.location.relative(2, 0))
    return moves


CANDIDATES: dict[PieceType, CandidateFn] = {
    PieceType.PAWN: _pawn_candidates,
    PieceType.KNIGHT: lambda p: _leaps(p, KNIGHT_OFFSETS),
    PieceType.BISHOP: lambda p: _rays(p, BISHOP_DIRS),
    PieceType.ROOK: lambda p: _rays(p, ROOK_DIRS),
    PieceType.QUEEN: lambda p: _rays(p, QUEEN_DIRS),
    PieceType.KING: _king_candidates,
}


# -- Validation -------------------------------------------------------------


def _pawn_start_rank(pawn: Piece) -> int:
    return 2 if pawn.color.forward > 0 else 7


def _pawn_last_rank(pawn: Piece) -> int:
    return 8 if pawn.color.forward > 0 else 1


def _validate_pawn(pawn: Piece, to: Square, extra: str | None) -> bool:
    board = pawn.board
    loc = pawn.location
    forward = pawn.color.forward

    if to.file == loc.file:
        if not board.is_path_clear(loc.path_to(to)) or board.piece_at(to) is not None:
            return False
    elif to.rank - loc.rank == forward and abs(to.file - loc.file) == 1:
        target = board.piece_at(to)
        if to == board.en_passant:
            target = board.piece_at(Square(to.file, loc.rank))
            if target is None or target.kind != PieceType.PAWN:
                return False
        if target is None or target.color == pawn.color:
            return False
    else:
        return False

    if to.rank == _pawn_last_rank(pawn):
        return resolve_promotion(extra) is not None
    return True


def _validate_slider(piece: Piece, to: Square, extra: str | None) -> bool:
    return piece.board.is_path_clear(piece.location.path_to(to))


def _validate_king(king: Piece, to: Square, extra: str | None) -> bool:
    file_delta = to.file - king.location.file
    if file_delta == 2:
        return _can_castle(king, _SHORT_ROOK_FILE, CastlingRights.short(king.color))
    if file_delta == -2:
        return _can_castle(king, _LONG_ROOK_FILE, CastlingRights.long(king.color))
    return True


def _can_castle(king: Piece, rook_file: int, right: CastlingRights) -> bool:
    board = king.board
    home = Square(_KING_HOME_FILE, king.color.home_rank)
    if not board.castling & right or king.location != home:
        return False

    rook = board.piece_at(Square(rook_file, home.rank))
    if rook is None or rook.kind != PieceType.ROOK or rook.color != king.color:
        return False

    if not board.is_path_clear(home.path_to(rook.location)):
        return False

    if board.is_in_check(king.color):
        return False

    step = 1 if rook_file > home.file else -1
    enemy = king.color.opposite
    crossed = (home.relative(step, 0), home.relative(2 * step, 0))
    return not any(board.is_attacked(sq, enemy) for sq in crossed)


def _always(piece: Piece, to: Square, extra: str | None) -> bool:
    return True


VALIDATORS: dict[PieceType, ValidateFn] = {
    PieceType.PAWN: _validate_pawn,
    PieceType.KNIGHT: _always,
    PieceType.BISHOP: _validate_slider,
    PieceType.ROOK: _validate_slider,
    PieceType.QUEEN: _validate_slider,
    PieceType.KING: _validate_king,
}


# -- Attack reach -------------------------------------------------------------


def _pawn_attacks(pawn: Piece, sq: Square) -> bool:
    loc = pawn.location
    return sq.rank - loc.rank == pawn.color.forward and abs(sq.file - loc.file) == 1


def _king_attacks(king: Piece, sq: Square) -> bool:
    loc = king.location
    return max(abs(sq.file - loc.file), abs(sq.rank - loc.rank)) == 1


def _leaper_attacks(piece: Piece, sq: Square) -> bool:
    return sq in piece.candidate_moves


def _slider_attacks(piece: Piece, sq: Square) -> bool:
    return sq in piece.candidate_moves and _validate_slider(piece, sq, None)


ATTACKS: dict[PieceType, AttackFn] = {
    PieceType.PAWN: _pawn_attacks,
    PieceType.KNIGHT: _leaper_attacks,
    PieceType.BISHOP: _slider_attacks,
    PieceType.ROOK: _slider_attacks,
    PieceType.QUEEN: _slider_attacks,
    PieceType.KING: _king_attacks,
}


# -- After-move side effects --------------------------------------------------


def _pawn_after_move(pawn: Piece, move: Move) -> None:
    board = pawn.board
    forward = pawn.color.forward
    ep_square = board.en_passant
    board.en_passant = None

    if move.to_sq == ep_square and move.to_sq.file != move.from_sq.file:
        board.remove_at(Square(move.to_sq.file, move.from_sq.rank))
        move.capture = True

    if move.to_sq.rank - move.from_sq.rank == 2 * forward:
        board.en_passant = move.from_sq.relative(0, forward)

    if move.to_sq.rank != _pawn_last_rank(pawn):
        move.promotion = None
        return

    choice = resolve_promotion(move.promotion) or DEFAULT_PROMOTION
    move.promotion = choice
    board.remove_at(move.to_sq)
    board.set_piece(pawn.transformed(PROMOTION_CHOICES[choice]))


def _rook_after_move(rook: Piece, move: Move) -> None:
    board = rook.board
    board.en_passant = None
    if move.from_sq.rank != rook.color.home_rank:
        return
    if move.from_sq.file == _SHORT_ROOK_FILE:
        board.castling &= ~CastlingRights.short(rook.color)
    elif move.from_sq.file == _LONG_ROOK_FILE:
        board.castling &= ~CastlingRights.long(rook.color)


def _king_after_move(king: Piece, move: Move) -> None:
    board = king.board
    board.en_passant = None
    board.castling &= ~CastlingRights.both(king.color)

    file_delta = move.to_sq.file - move.from_sq.file
    if abs(file_delta) != 2:
        return

    rank = move.to_sq.rank
    if file_delta > 0:
        rook_from, rook_to = Square(_SHORT_ROOK_FILE, rank), Square(6, rank)
    else:
        rook_from, rook_to = Square(_LONG_ROOK_FILE, rank), Square(4, rank)
    rook = board.piece_at(rook_from)
    if rook is None:
        return
    board.remove_at(rook_from)
    rook.relocate(rook_to)
    board.set_piece(rook)


def _default_after_move(piece: Piece, move: Move) -> None:
    piece.board.en_passant = None


AFTER_MOVE: dict[PieceType, AfterMoveFn] = {
    PieceType.PAWN: _pawn_after_move,
    PieceType.KNIGHT: _default_after_move,
    PieceType.BISHOP: _default_after_move,
    PieceType.ROOK: _rook_after_move,
    PieceType.QUEEN: _default_after_move,
    PieceType.KING: _king_after_move,
}
