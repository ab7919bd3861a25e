"""Game layer: state machine, snapshots, configuration and event derivation.

Quick start::

    from chessrules.core import Move, parse_square
    from chessrules.game import GameController

    game = GameController()
    game.move(Move(parse_square("e2"), parse_square("e4")))
    state = game.game_state()
"""

from chessrules.game.config import GameConfig
from chessrules.game.controller import GameController
from chessrules.game.events import (
    GameEvent,
    GameEventType,
    events_for_move,
    status_event,
)
from chessrules.game.state import GameState

__all__ = [
    "GameConfig",
    "GameController",
    "GameEvent",
    "GameEventType",
    "GameState",
    "events_for_move",
    "status_event",
]
