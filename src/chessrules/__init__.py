"""Chess rules engine: legal move generation and game-state tracking."""

from chessrules.core import (
    Board,
    CastlingRights,
    CastlingSide,
    Color,
    DrawReason,
    GameResult,
    Move,
    Piece,
    PieceType,
    Square,
    parse_square,
    square_name,
)
from chessrules.game import GameConfig, GameController, GameState

__all__ = [
    "Board",
    "CastlingRights",
    "CastlingSide",
    "Color",
    "DrawReason",
    "GameConfig",
    "GameController",
    "GameResult",
    "GameState",
    "Move",
    "Piece",
    "PieceType",
    "Square",
    "parse_square",
    "square_name",
]

__version__ = "0.1.0"
