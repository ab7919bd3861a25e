"""High-level draw rules: fifty-move, insufficient material, repetition."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType

_MINOR_PIECES = (PieceType.BISHOP, PieceType.KNIGHT)


class Rules:
    """Static rule-checker for the draw conditions the game controller applies."""

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K."""
        white = board.all_pieces(Color.WHITE)
        black = board.all_pieces(Color.BLACK)

        # K vs K
        if len(white) == 1 and len(black) == 1:
            return True

        # K+minor vs K (either side)
        for side, other in ((white, black), (black, white)):
            if len(side) == 2 and len(other) == 1:
                extra = [p for p, _ in side if p.piece_type != PieceType.KING]
                if len(extra) == 1 and extra[0].piece_type in _MINOR_PIECES:
                    return True

        return False

    @staticmethod
    def is_fifty_move_rule(halfmove_clock: int, limit: int = 100) -> bool:
        return halfmove_clock >= limit  # 100 half-moves = 50 full moves

    @staticmethod
    def is_threefold_repetition(occurrences: int, limit: int = 3) -> bool:
        return occurrences >= limit
