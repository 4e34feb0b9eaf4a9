"""Tests for per-kind candidate generation, validation and side effects."""

import pytest

from kingside.core.board import Board
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.piece import Piece
from kingside.core.square import (
    A1, A2, A3, A7, A8, B1, B3, C2, C3, D2, D3, D4, E1, E2, E3, E4, E8, F3, H1,
    ALL_SQUARES,
    Square,
)


def _lone(char: str, square: str) -> Piece:
    board = Board.from_placement({square: char})
    piece = board.piece_at(Square.parse(square))
    assert piece is not None
    return piece


def _rotate(sq: Square) -> Square:
    return Square(9 - sq.file, 9 - sq.rank)


class TestCandidates:
    def test_knight_in_corner(self) -> None:
        assert set(_lone("N", "A1").candidate_moves) == {B3, C2}

    def test_knight_in_centre(self) -> None:
        assert len(_lone("N", "D4").candidate_moves) == 8

    @pytest.mark.parametrize(
        ("char", "count"),
        [("R", 14), ("B", 13), ("Q", 27), ("K", 8)],
    )
    def test_centre_counts(self, char: str, count: int) -> None:
        assert len(_lone(char, "D4").candidate_moves) == count

    def test_sliders_ignore_blockers(self) -> None:
        board = Board.from_placement({"A1": "R", "A2": "P"})
        rook = board.piece_at(A1)
        assert rook is not None
        assert A8 in rook.candidate_moves

    @pytest.mark.parametrize("char", ["N", "B", "R", "Q", "K"])
    def test_symmetric_under_rotation(self, char: str) -> None:
        for sq in (A1, C2, D4, Square(8, 3)):
            here = _lone(char, sq.name).candidate_moves
            there = _lone(char, _rotate(sq).name).candidate_moves
            assert {_rotate(s) for s in here} == set(there)

    def test_candidates_stay_on_board(self) -> None:
        for sq in ALL_SQUARES:
            assert all(c.is_valid() for c in _lone("Q", sq.name).candidate_moves)

    def test_white_pawn_on_start_rank(self) -> None:
        assert set(_lone("P", "E2").candidate_moves) == {E3, E4, D3, F3}

    def test_white_pawn_off_start_rank(self) -> None:
        assert set(_lone("P", "E3").candidate_moves) == {E4, D4, Square(6, 4)}

    def test_black_pawn_moves_down(self) -> None:
        assert set(_lone("p", "A7").candidate_moves) == {Square(1, 6), Square(1, 5), Square(2, 6)}

    def test_king_castle_candidates_follow_rights(self) -> None:
        board = Board.from_placement({"E1": "K", "H1": "R"}, CastlingRights.WHITE_SHORT)
        king = board.piece_at(E1)
        assert king is not None
        assert Square(7, 1) in king.candidate_moves
        assert Square(3, 1) not in king.candidate_moves


class TestPawnRules:
    def test_forward_needs_empty_square(self) -> None:
        board = Board.from_placement({"E2": "P", "E3": "n"})
        pawn = board.piece_at(E2)
        assert pawn is not None
        assert not pawn.is_move_legal(E3)
        assert not pawn.is_move_legal(E4)  # cannot jump over

    def test_double_step_from_start(self) -> None:
        pawn = _lone("P", "E2")
        assert pawn.is_move_legal(E4)

    def test_diagonal_needs_enemy(self) -> None:
        board = Board.from_placement({"E2": "P", "D3": "p", "F3": "P"})
        pawn = board.piece_at(E2)
        assert pawn is not None
        assert pawn.is_move_legal(D3)
        assert not pawn.is_move_legal(F3)

    def test_diagonal_to_empty_square_is_illegal(self) -> None:
        assert not _lone("P", "E2").is_move_legal(D3)

    def test_promotion_choices(self) -> None:
        board = Board.from_placement({"A7": "P"})
        pawn = board.piece_at(A7)
        assert pawn is not None
        assert pawn.is_move_legal(A8)
        assert pawn.is_move_legal(A8, "n")
        assert pawn.is_move_legal(A8, "Q")
        assert not pawn.is_move_legal(A8, "K")
        assert not pawn.is_move_legal(A8, "X")

    def test_promotion_replaces_pawn(self) -> None:
        board = Board.from_placement({"A7": "P"})
        assert board.try_move(A7, A8, "N")
        promoted = board.piece_at(A8)
        assert promoted is not None
        assert promoted.kind == PieceType.KNIGHT
        assert promoted.color == Color.WHITE
        assert board.last_move is not None
        assert board.last_move.promotion == "N"

    def test_promotion_defaults_to_queen(self) -> None:
        board = Board.from_placement({"B2": "p"})
        assert board.try_move(Square(2, 2), B1)
        promoted = board.piece_at(B1)
        assert promoted is not None
        assert promoted.kind == PieceType.QUEEN
        assert promoted.color == Color.BLACK

    def test_double_step_sets_en_passant(self) -> None:
        board = Board.from_placement({"E2": "P"})
        assert board.try_move(E2, E4)
        assert board.en_passant == E3

    def test_en_passant_capture_removes_pawn(self) -> None:
        board = Board.from_placement({"E5": "P", "D5": "p"}, en_passant="D6")
        assert board.try_move(Square(5, 5), Square(4, 6))
        assert board.piece_at(Square(4, 5)) is None
        assert board.last_move is not None
        assert board.last_move.capture
        assert board.en_passant is None


class TestSliderRules:
    def test_blocked_by_own_piece(self) -> None:
        board = Board.from_placement({"A1": "R", "A2": "P"})
        rook = board.piece_at(A1)
        assert rook is not None
        assert not rook.is_move_legal(A2)
        assert not rook.is_move_legal(A3)

    def test_capture_but_not_beyond(self) -> None:
        board = Board.from_placement({"A1": "R", "A2": "p"})
        rook = board.piece_at(A1)
        assert rook is not None
        assert rook.is_move_legal(A2)
        assert not rook.is_move_legal(A3)

    def test_bishop_blocked(self) -> None:
        board = Board.from_placement({"A1": "B", "C3": "p"})
        bishop = board.piece_at(A1)
        assert bishop is not None
        assert bishop.is_move_legal(C3)
        assert not bishop.is_move_legal(D4)


class TestKnightRules:
    def test_jumps_over_pieces(self) -> None:
        board = Board.initial()
        knight = board.piece_at(B1)
        assert knight is not None
        assert knight.is_move_legal(C3)
        assert knight.is_move_legal(A3)

    def test_cannot_land_on_own_piece(self) -> None:
        board = Board.initial()
        knight = board.piece_at(B1)
        assert knight is not None
        assert not knight.is_move_legal(D2)


class TestCastlingRights:
    def test_rook_from_h_file_revokes_short(self) -> None:
        board = Board.from_placement({"E1": "K", "A1": "R", "H1": "R"}, CastlingRights.WHITE_BOTH)
        assert board.try_move(H1, Square(8, 4))
        assert board.castling == CastlingRights.WHITE_LONG

    def test_rook_from_a_file_revokes_long(self) -> None:
        board = Board.from_placement({"E1": "K", "A1": "R", "H1": "R"}, CastlingRights.WHITE_BOTH)
        assert board.try_move(A1, A3)
        assert board.castling == CastlingRights.WHITE_SHORT

    def test_king_move_revokes_both(self) -> None:
        board = Board.from_placement({"E1": "K", "A1": "R", "H1": "R"}, CastlingRights.ALL)
        assert board.try_move(E1, E2)
        assert board.castling == CastlingRights.BLACK_BOTH


class TestCloneOnto:
    def test_clone_is_bound_to_new_board(self) -> None:
        piece = _lone("Q", "D4")
        other = Board()
        copy = piece.clone_onto(other)
        assert copy.board is other
        assert copy.location == D4
        assert copy.kind == PieceType.QUEEN
        assert copy.candidate_moves == piece.candidate_moves

    def test_from_char_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x", Board(), D4)

    def test_display(self) -> None:
        piece = _lone("n", "E8")
        assert str(piece) == "n"
        assert piece.symbol == "♞"
        assert piece.location == E8
