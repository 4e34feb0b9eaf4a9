"""kingside — a rules engine for standard chess.

The package has two layers:

* :mod:`kingside.core` — squares, pieces, the board and draw helpers.
* :mod:`kingside.game` — the game state machine and transport helpers.
"""

__version__ = "0.1.0"
