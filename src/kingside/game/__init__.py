"""Game management layer — state machine, result codes and text commands.

Quick start::

    from kingside.core import Square
    from kingside.game import Game, MoveOutcome

    game = Game()
    outcome = game.make_move(Square.parse("e2"), Square.parse("e4"))
    assert outcome == MoveOutcome.OK
"""

from kingside.game.commands import (
    ControlCommand,
    MoveCommand,
    describe_outcome,
    describe_result,
    parse_command,
)
from kingside.game.controller import Game, GameEvents
from kingside.game.interfaces import DrawRules, GameResult, IGame, MoveOutcome
from kingside.game.state import GameState

__all__ = [
    # Interfaces / codes
    "DrawRules",
    "GameResult",
    "IGame",
    "MoveOutcome",
    # Concrete
    "Game",
    "GameEvents",
    "GameState",
    # Text commands
    "ControlCommand",
    "MoveCommand",
    "describe_outcome",
    "describe_result",
    "parse_command",
]
