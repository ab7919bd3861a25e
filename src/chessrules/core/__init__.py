"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, CheckValidator, MoveGenerator, parse_square

    board = Board.initial()
    moves = MoveGenerator(board).pseudo_legal_moves(parse_square("g1"))
    legal = CheckValidator(board).filter_legal(moves, board[parse_square("g1")].color)
"""

from chessrules.core.board import Board
from chessrules.core.check_validator import CheckValidator, apply_move_to_board
from chessrules.core.enums import (
    CastlingRights,
    CastlingSide,
    Color,
    DrawReason,
    GameResult,
    PieceType,
)
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, is_valid_square, parse_square, square_name
from chessrules.core.zobrist import position_key

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "DrawReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "PROMOTION_TYPES",
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CheckValidator",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "apply_move_to_board",
    "position_key",
]
