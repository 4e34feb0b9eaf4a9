"""Text commands for chat-style front ends.

Parses what a player types into either a move request or a control
command, and turns engine answers back into short sentences. Sending and
receiving the text is up to the caller.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from kingside.core.square import Square
from kingside.game.interfaces import GameResult, MoveOutcome

# "$e2e4", "E7 E8 Q", "e2-e4", "e7e8=n"
_MOVE_RE = re.compile(
    r"^\$?\s*([a-z]\w)\s*[-\s]?\s*([a-z]\w)\s*=?\s*([a-z])?$",
    re.IGNORECASE,
)


class ControlCommand(StrEnum):
    """Non-move requests."""

    RESET = "reset"
    UNDO = "undo"
    SHOW_BOARD = "show-board"
    RESIGN = "resign"
    OFFER_DRAW = "offer-draw"


_CONTROL_WORDS: dict[str, ControlCommand] = {
    "reset": ControlCommand.RESET,
    "new": ControlCommand.RESET,
    "undo": ControlCommand.UNDO,
    "takeback": ControlCommand.UNDO,
    "board": ControlCommand.SHOW_BOARD,
    "show-board": ControlCommand.SHOW_BOARD,
    "resign": ControlCommand.RESIGN,
    "draw": ControlCommand.OFFER_DRAW,
    "offer-draw": ControlCommand.OFFER_DRAW,
}


@dataclass(frozen=True, slots=True)
class MoveCommand:
    """A parsed move request; ``extra`` is the promotion letter, if any."""

    from_sq: Square
    to_sq: Square
    extra: str | None = None


def parse_command(text: str) -> MoveCommand | ControlCommand | None:
    """Parse one message; unrecognised text yields ``None``."""
    cleaned = text.strip()
    word = cleaned.lstrip("$").strip().lower()
    if word in _CONTROL_WORDS:
        return _CONTROL_WORDS[word]

    match = _MOVE_RE.match(cleaned)
    if match is None:
        return None
    from_sq = Square.parse(match.group(1))
    to_sq = Square.parse(match.group(2))
    if from_sq is None or to_sq is None:
        return None
    extra = match.group(3)
    return MoveCommand(from_sq, to_sq, extra.upper() if extra else None)


_OUTCOME_TEXT: dict[MoveOutcome, str] = {
    MoveOutcome.OK: "Move played.",
    MoveOutcome.NO_PIECE: "There is no piece on that square.",
    MoveOutcome.NOT_YOUR_PIECE: "That piece is not yours to move.",
    MoveOutcome.ILLEGAL_MOVE: "That piece cannot move there.",
    MoveOutcome.SELF_CHECK: "That move would leave your king in check.",
    MoveOutcome.GAME_ENDED: "The game is over. Start a new one with 'reset'.",
}

_RESULT_TEXT: dict[GameResult, str] = {
    GameResult.ONGOING: "The game is in progress.",
    GameResult.WHITE_MATED: "Checkmate. Black wins.",
    GameResult.BLACK_MATED: "Checkmate. White wins.",
    GameResult.WHITE_RESIGNED: "White resigned. Black wins.",
    GameResult.BLACK_RESIGNED: "Black resigned. White wins.",
    GameResult.WHITE_FLAGGED: "White ran out of time. Black wins.",
    GameResult.BLACK_FLAGGED: "Black ran out of time. White wins.",
    GameResult.STALEMATED: "Stalemate. The game is drawn.",
    GameResult.INSUFFICIENT_MATERIAL: "Draw by insufficient material.",
    GameResult.THREEFOLD_REPETITION: "Draw by threefold repetition.",
    GameResult.FIFTY_MOVES: "Draw by the fifty-move rule.",
    GameResult.DRAW_AGREED: "Draw agreed.",
}


def describe_outcome(outcome: MoveOutcome) -> str:
    return _OUTCOME_TEXT[outcome]


def describe_result(result: GameResult) -> str:
    return _RESULT_TEXT[result]
