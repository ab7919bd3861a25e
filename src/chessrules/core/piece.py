"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# White glyphs; black glyphs sit six code points later.
_WHITE_GLYPH_BASE = {
    PieceType.KING: 0x2654,
    PieceType.QUEEN: 0x2655,
    PieceType.ROOK: 0x2656,
    PieceType.BISHOP: 0x2657,
    PieceType.KNIGHT: 0x2658,
    PieceType.PAWN: 0x2659,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Promotion replaces the piece on the board; a piece is never mutated.
    """

    color: Color
    piece_type: PieceType

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter code (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter code, e.g. 'N' → white knight."""
        try:
            piece_type = _TYPES_BY_LETTER[char.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        code = _WHITE_GLYPH_BASE[self.piece_type]
        if self.color == Color.BLACK:
            code += 6
        return chr(code)

    def promoted_to(self, piece_type: PieceType) -> Piece:
        """Same-colored piece of *piece_type*."""
        return Piece(self.color, piece_type)
