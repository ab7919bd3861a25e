"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square, is_valid_square

BoardRows = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    Pure storage: knows nothing about chess rules beyond the board edges.
    Reads outside the board return ``None`` and writes there are ignored.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_valid_square(sq: Square) -> bool:
        return is_valid_square(sq)

    def get(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            return None
        return self._squares[sq.index]

    def set(self, sq: Square, piece: Piece | None) -> None:
        if is_valid_square(sq):
            self._squares[sq.index] = piece

    __getitem__ = get
    __setitem__ = set

    def is_empty(self, sq: Square) -> bool:
        return self.get(sq) is None

    def move(self, from_sq: Square, to_sq: Square) -> None:
        """Relocate whatever stands on *from_sq*; the occupant of *to_sq* is lost."""
        piece = self.get(from_sq)
        self.set(from_sq, None)
        self.set(to_sq, piece)

    # -- Query helpers ------------------------------------------------------

    def find_king(self, color: Color) -> Square | None:
        for sq in ALL_SQUARES:
            piece = self._squares[sq.index]
            if (
                piece is not None
                and piece.color == color
                and piece.piece_type == PieceType.KING
            ):
                return sq
        return None

    def all_pieces(self, color: Color) -> list[tuple[Piece, Square]]:
        """Every piece of *color* with its square, in a1..h8 order."""
        return [
            (piece, sq)
            for sq in ALL_SQUARES
            if (piece := self._squares[sq.index]) is not None and piece.color == color
        ]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq for piece, sq in self.all_pieces(color) if piece.piece_type == piece_type
        ]

    def occupied(self) -> Iterator[tuple[Piece, Square]]:
        for sq in ALL_SQUARES:
            piece = self._squares[sq.index]
            if piece is not None:
                yield piece, sq

    def rows(self) -> BoardRows:
        """Immutable row-major snapshot (``rows()[row][col]``)."""
        return tuple(tuple(self._squares[r * 8 : r * 8 + 8]) for r in range(8))

    # -- Mutation / copying -------------------------------------------------

    def clone(self) -> Board:
        """Independent copy; pieces are immutable so a list copy suffices."""
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, piece_type in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.WHITE, piece_type)
            b[Square(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.BLACK, piece_type)
        return b

    @classmethod
    def from_placement(cls, placement: dict[Square, Piece]) -> Board:
        b = cls()
        for sq, piece in placement.items():
            b[sq] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for col in range(8):
                p = self._squares[row * 8 + col]
                cells.append(str(p) if p else ".")
            lines.append(f"{row + 1} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
