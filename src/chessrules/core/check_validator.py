"""Attack detection and check-safe legality filtering."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_DIRS,
)
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square

# (rook from col, rook to col) per castling side
ROOK_CASTLING_COLS: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (7, 5),
    CastlingSide.QUEENSIDE: (0, 3),
}

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


def en_passant_victim_square(move: Move) -> Square:
    """The captured pawn stands beside the mover, not on the destination."""
    return Square(move.from_sq.row, move.to_sq.col)


def apply_move_to_board(board: Board, move: Move) -> Piece | None:
    """Play *move* on *board* with full special-move semantics.

    Handles the en passant victim, the paired rook of a castling move and the
    promotion swap. Returns the piece removed from the board, if any.
    """
    piece = board.get(move.from_sq)

    if move.is_en_passant:
        victim_sq = en_passant_victim_square(move)
        captured = board.get(victim_sq)
        board.set(victim_sq, None)
        board.move(move.from_sq, move.to_sq)
        return captured

    captured = board.get(move.to_sq)
    board.move(move.from_sq, move.to_sq)

    if move.is_castling and move.castling_side is not None:
        row = move.from_sq.row
        rook_from, rook_to = ROOK_CASTLING_COLS[move.castling_side]
        board.move(Square(row, rook_from), Square(row, rook_to))
    elif move.promotion is not None and piece is not None:
        board.set(move.to_sq, piece.promoted_to(move.promotion))

    return captured


class CheckValidator:
    """Answers attack and check questions about a :class:`Board`.

    Speculative moves are tested on a clone; the wrapped board is never
    modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Pawns attack diagonally whether or not the target is occupied; sliding
        pieces need every square strictly between them and *sq* empty.
        """
        board = self._board

        # A pawn of by_color attacks sq from one row "behind" it.
        pawn_row = -by_color.pawn_direction
        for d_col in (-1, 1):
            if self._holds(sq.offset(pawn_row, d_col), by_color, (PieceType.PAWN,)):
                return True

        for d_row, d_col in KNIGHT_OFFSETS:
            if self._holds(sq.offset(d_row, d_col), by_color, (PieceType.KNIGHT,)):
                return True

        for d_row, d_col in KING_OFFSETS:
            if self._holds(sq.offset(d_row, d_col), by_color, (PieceType.KING,)):
                return True

        for directions, sliders in (
            (BISHOP_DIRS, _DIAGONAL_SLIDERS),
            (ROOK_DIRS, _ORTHOGONAL_SLIDERS),
        ):
            for d_row, d_col in directions:
                cur = sq.offset(d_row, d_col)
                while is_valid_square(cur):
                    piece = board.get(cur)
                    if piece is None:
                        cur = cur.offset(d_row, d_col)
                        continue
                    if piece.color == by_color and piece.piece_type in sliders:
                        return True
                    break

        return False

    def is_king_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent? False if it has no king."""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Legality -----------------------------------------------------------

    def would_leave_king_in_check(self, move: Move, color: Color) -> bool:
        """Would playing *move* leave *color*'s king attacked?"""
        scratch = self._board.clone()
        apply_move_to_board(scratch, move)
        return CheckValidator(scratch).is_king_in_check(color)

    def filter_legal(self, moves: list[Move], color: Color) -> list[Move]:
        """Keep only the moves that do not expose *color*'s king."""
        return [m for m in moves if not self.would_leave_king_in_check(m, color)]

    # -- Internal -----------------------------------------------------------

    def _holds(
        self, sq: Square, color: Color, piece_types: tuple[PieceType, ...]
    ) -> bool:
        piece = self._board.get(sq)
        return (
            piece is not None
            and piece.color == color
            and piece.piece_type in piece_types
        )
