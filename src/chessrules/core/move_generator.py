"""Pseudo-legal move generation per piece type.

Moves produced here obey movement geometry and blocking only: they may leave
the mover's own king in check, and castling / en passant are not produced
because they depend on game state the board does not hold.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import Square, is_valid_square

Offsets = tuple[tuple[int, int], ...]

KNIGHT_OFFSETS: Offsets = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: Offsets = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: Offsets = BISHOP_DIRS + ROOK_DIRS

SLIDING_DIRS: dict[PieceType, Offsets] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


class MoveGenerator:
    """Generates pseudo-legal moves on a :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Unannotated moves for the piece on *sq* (empty if none)."""
        piece = self._board.get(sq)
        if piece is None:
            return []

        moves: list[Move] = []
        if piece.piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif piece.piece_type == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif piece.piece_type == PieceType.KING:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
        else:
            self._gen_sliding(sq, piece.color, SLIDING_DIRS[piece.piece_type], moves)
        return moves

    def pseudo_legal_moves_for(self, color: Color) -> list[Move]:
        """All pseudo-legal moves of every *color* piece."""
        moves: list[Move] = []
        for _, sq in self._board.all_pieces(color):
            moves.extend(self.pseudo_legal_moves(sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        direction = color.pawn_direction

        one_step = sq.offset(direction, 0)
        if is_valid_square(one_step) and board.is_empty(one_step):
            moves.append(Move(sq, one_step))
            if sq.row == _PAWN_START_ROW[color]:
                two_step = sq.offset(2 * direction, 0)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for d_col in (-1, 1):
            cap_sq = sq.offset(direction, d_col)
            target = board.get(cap_sq)
            if target is not None and target.color != color:
                moves.append(Move(sq, cap_sq))

    def _gen_steps(
        self, sq: Square, color: Color, offsets: Offsets, moves: list[Move]
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if not is_valid_square(to_sq):
                continue
            target = board.get(to_sq)
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self, sq: Square, color: Color, directions: Offsets, moves: list[Move]
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while is_valid_square(to_sq):
                target = board.get(to_sq)
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break
