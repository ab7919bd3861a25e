"""Rule configuration for a game."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.move import PROMOTION_TYPES


@dataclass(frozen=True)
class GameConfig:
    """Tunable rule settings. The defaults reproduce standard play."""

    # Half-move clock value that forces a draw (100 = fifty full moves)
    halfmove_draw_limit: int = 100

    # Repetition draw is opt-in
    detect_repetition: bool = False
    repetition_limit: int = 3

    # Piece chosen when a promotion request names none
    default_promotion: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.halfmove_draw_limit <= 0:
            raise ValueError(
                f"halfmove_draw_limit must be positive, got {self.halfmove_draw_limit}"
            )
        if self.repetition_limit <= 1:
            raise ValueError(
                f"repetition_limit must be at least 2, got {self.repetition_limit}"
            )
        if self.default_promotion not in PROMOTION_TYPES:
            raise ValueError(
                f"default_promotion must be one of {PROMOTION_TYPES}, "
                f"got {self.default_promotion!r}"
            )
