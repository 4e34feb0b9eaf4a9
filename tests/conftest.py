"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from kingside.core.square import Square
from kingside.game.controller import Game
from kingside.game.interfaces import MoveOutcome

PlayFn = Callable[..., list[MoveOutcome]]


def _play(game: Game, *moves: str) -> list[MoveOutcome]:
    """Play moves written as ``"e2e4"`` / ``"e7e8n"`` and collect outcomes."""
    outcomes: list[MoveOutcome] = []
    for text in moves:
        from_sq = Square.parse(text[0:2])
        to_sq = Square.parse(text[2:4])
        assert from_sq is not None and to_sq is not None, text
        extra = text[4:] or None
        outcomes.append(game.make_move(from_sq, to_sq, extra))
    return outcomes


@pytest.fixture
def game() -> Game:
    """A fresh game at the standard starting position."""
    return Game()


@pytest.fixture
def play() -> PlayFn:
    """Helper that plays a sequence of long-algebraic moves on a game."""
    return _play
