"""Core enumerations and flags for the chess rules domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step (+1 for white, -1 for black)."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_row(self) -> int:
        """Row holding this side's back rank at the start of the game."""
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class CastlingSide(Enum):
    """Wing on which a castling move is played."""

    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"

    def __str__(self) -> str:
        return self.value


class CastlingRights(IntFlag):
    """Bitmask for castling availability.

    Rights only ever shrink during a game; clear bits with ``&= ~flag``.
    """

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, side: CastlingSide) -> CastlingRights:
        """Single-bit flag for *color* castling on *side*."""
        if color == Color.WHITE:
            return (
                cls.WHITE_KINGSIDE
                if side == CastlingSide.KINGSIDE
                else cls.WHITE_QUEENSIDE
            )
        return (
            cls.BLACK_KINGSIDE if side == CastlingSide.KINGSIDE else cls.BLACK_QUEENSIDE
        )

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        """Both flags belonging to *color*."""
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH

    def allows(self, color: Color, side: CastlingSide) -> bool:
        return bool(self & CastlingRights.for_side(color, side))


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class DrawReason(Enum):
    """Why a game ended drawn, in order of reporting precedence."""

    STALEMATE = "stalemate"
    FIFTY_MOVE_RULE = "fifty-move rule"
    INSUFFICIENT_MATERIAL = "insufficient material"
    THREEFOLD_REPETITION = "threefold repetition"

    def __str__(self) -> str:
        return self.value
