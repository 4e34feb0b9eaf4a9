"""Game — turn order, history and termination for one chess game.

Emits events via simple callbacks so a renderer or chat transport can
subscribe without polling.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.move import Move
from kingside.core.rules import Rules
from kingside.core.square import Square
from kingside.game.interfaces import DrawRules, GameResult, IGame, MoveOutcome
from kingside.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "Game"], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class Game(IGame):
    """A single game of chess between two sides sharing one object.

    Moves are tried on a clone of the current board, so a rejected move
    leaves the game untouched. Every accepted move pushes the previous
    :class:`GameState` onto ``history``; take-back pops it again and
    repetition counting compares against it.

    Once ``result`` leaves ``ONGOING`` it never changes: moves, offers,
    resignations and take-backs are all refused.
    """

    __slots__ = (
        "_state",
        "_history",
        "_result",
        "_rules",
        "white_offers_draw",
        "black_offers_draw",
        "events",
    )

    def __init__(self, rules: DrawRules | None = None) -> None:
        self._rules = rules if rules is not None else DrawRules.standard()
        self.events = GameEvents()
        self._history: list[GameState] = []
        self.reset()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_turn(self) -> Color:
        return self._state.turn

    @property
    def halfmove_clock(self) -> int:
        return self._state.halfmove_clock

    @property
    def history(self) -> tuple[GameState, ...]:
        """Past states, oldest first."""
        return tuple(self._history)

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def rules(self) -> DrawRules:
        return self._rules

    @property
    def is_concluded(self) -> bool:
        return self._result.is_final

    def winner_color(self) -> Color | None:
        return self._result.winner

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return self.legal_moves_for(self._state.turn)

    def legal_moves_for(self, color: Color) -> list[Move]:
        return self._state.board.legal_moves_for(color)

    # ── IGame impl ───────────────────────────────────────────────────────

    def reset(self) -> None:
        self._state = GameState.initial()
        self._history.clear()
        self._result = GameResult.ONGOING
        self._clear_offers()
        _LOGGER.debug("Game reset to the starting position")

    def setup(
        self, board: Board, turn: Color = Color.WHITE, halfmove_clock: int = 0
    ) -> None:
        """Start from a custom position.

        The caller is responsible for the position being reachable (one
        king per side, castling rights matching the pieces).
        """
        board.recalculate_all()
        self._state = GameState(board, turn, halfmove_clock)
        self._history.clear()
        self._result = GameResult.ONGOING
        self._clear_offers()

    def make_move(
        self, from_sq: Square, to_sq: Square, extra: str | None = None
    ) -> MoveOutcome:
        if self.is_concluded:
            return MoveOutcome.GAME_ENDED

        turn = self._state.turn
        piece = self._state.board.piece_at(from_sq)
        if piece is None:
            return self._reject(MoveOutcome.NO_PIECE, from_sq, to_sq)
        if piece.color != turn:
            return self._reject(MoveOutcome.NOT_YOUR_PIECE, from_sq, to_sq)

        trial = self._state.board.clone()
        if not trial.try_move(from_sq, to_sq, extra):
            return self._reject(MoveOutcome.ILLEGAL_MOVE, from_sq, to_sq)
        if trial.is_in_check(turn):
            return self._reject(MoveOutcome.SELF_CHECK, from_sq, to_sq)

        move = trial.last_move
        assert move is not None
        if move.capture or move.piece.kind == PieceType.PAWN:
            clock = 0
        else:
            clock = self._state.halfmove_clock + 1

        self._history.append(self._state)
        self._state = GameState(trial, turn.opposite, clock)
        self._clear_offers()  # any move cancels pending offers
        _LOGGER.debug("%s played %s (clock %d)", turn, move.uci, clock)

        self._result = self._evaluate_termination()
        self._emit_move(move)
        if self.is_concluded:
            self._finish()
        return MoveOutcome.OK

    def takeback_move(self) -> bool:
        if self.is_concluded or not self._history:
            return False
        self._state = self._history.pop()
        self._state.board.recalculate_all()
        self._clear_offers()
        _LOGGER.debug("Move taken back; %s to move", self._state.turn)
        return True

    def resign(self, color: Color) -> bool:
        return self._conclude(GameResult.resigned(color))

    def flag(self, color: Color) -> bool:
        """Record that *color* ran out of time (no clock is kept here)."""
        return self._conclude(GameResult.flagged(color))

    def offer_draw(self, color: Color) -> bool:
        """Offer a draw; the second side offering accepts it.

        Offers only live until the next move or take-back.
        """
        if self.is_concluded:
            return False
        if color == Color.WHITE:
            self.white_offers_draw = True
        else:
            self.black_offers_draw = True
        _LOGGER.debug("%s offers a draw", color)
        if self.white_offers_draw and self.black_offers_draw:
            self._conclude(GameResult.DRAW_AGREED)
        return True

    # ── Termination checks ───────────────────────────────────────────────

    def check_for_insufficient_material(self) -> bool:
        return Rules.is_insufficient_material(self._state.board)

    def check_for_threefold_repetition(self) -> bool:
        return Rules.is_repetition(
            self._state.board,
            (past.board for past in self._history),
            self._rules.repetition_count,
        )

    def check_for_fifty_move_rule(self) -> bool:
        return Rules.is_fifty_move_rule(
            self._state.halfmove_clock, self._rules.fifty_move_plies
        )

    def _evaluate_termination(self) -> GameResult:
        board = self._state.board
        to_move = self._state.turn
        if not board.legal_moves_for(to_move):
            if board.is_in_check(to_move):
                return GameResult.mated(to_move)
            return GameResult.STALEMATED
        if self.check_for_insufficient_material():
            return GameResult.INSUFFICIENT_MATERIAL
        if self.check_for_threefold_repetition():
            return GameResult.THREEFOLD_REPETITION
        if self.check_for_fifty_move_rule():
            return GameResult.FIFTY_MOVES
        return GameResult.ONGOING

    # ── Internal helpers ─────────────────────────────────────────────────

    def _conclude(self, result: GameResult) -> bool:
        if self.is_concluded:
            return False
        self._result = result
        self._finish()
        return True

    def _finish(self) -> None:
        _LOGGER.info("Game over after %d plies: %s", self.ply_count, self._result)
        for cb in self.events.on_game_over:
            cb(self._result)

    def _clear_offers(self) -> None:
        self.white_offers_draw = False
        self.black_offers_draw = False

    def _reject(self, outcome: MoveOutcome, from_sq: Square, to_sq: Square) -> MoveOutcome:
        _LOGGER.debug("Rejected %s%s: %s", from_sq, to_sq, outcome)
        return outcome

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self)
