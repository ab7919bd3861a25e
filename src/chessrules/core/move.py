"""Move value object.

A bare ``Move(from_sq, to_sq)`` is a request; the game controller returns and
records fully annotated copies (capture, castling, en passant, promotion).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import CastlingSide, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_capture: bool = False
    captured_piece: Piece | None = None
    is_en_passant: bool = False
    is_castling: bool = False
    castling_side: CastlingSide | None = None

    # ── Derivation ───────────────────────────────────────────────────────

    def with_promotion(self, piece_type: PieceType) -> Move:
        return replace(self, promotion=piece_type)

    def with_capture(self, captured: Piece) -> Move:
        return replace(self, is_capture=True, captured_piece=captured)

    def matches(self, request: Move) -> bool:
        """Same origin, destination and (if requested) promotion piece."""
        if self.from_sq != request.from_sq or self.to_sq != request.to_sq:
            return False
        return request.promotion is None or request.promotion == self.promotion

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
