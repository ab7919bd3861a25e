"""Zobrist keys used to recognise repeated positions.

A position key XORs one random 64-bit value per occupied (piece, square)
pair with keys for the side to move, each castling right still held and the
file of the en passant target.
"""

from __future__ import annotations

from typing import Final

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.types import Square

_SEED: Final = 0x3C6EF372FE94F82B
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF

# Key table layout: 12 pieces x 64 squares, side to move, 4 rights, 8 files.
_PIECE_SLOTS: Final = 12 * 64
_SIDE_SLOT: Final = _PIECE_SLOTS
_CASTLING_SLOT: Final = _SIDE_SLOT + 1
_FILE_SLOT: Final = _CASTLING_SLOT + 4
_TABLE_SIZE: Final = _FILE_SLOT + 8

_SINGLE_RIGHTS: Final = (
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)


def _splitmix64(state: int) -> int:
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


_KEYS: Final = tuple(_splitmix64(_SEED + slot) for slot in range(_TABLE_SIZE))


def piece_key(piece: Piece, sq: Square) -> int:
    """Key for *piece* standing on *sq*."""
    slot = (int(piece.color) * 6 + int(piece.piece_type) - 1) * 64 + sq.index
    return _KEYS[slot]


def side_to_move_key() -> int:
    """Toggled in when Black is to move."""
    return _KEYS[_SIDE_SLOT]


def castling_key(castling: CastlingRights) -> int:
    key = 0
    for offset, right in enumerate(_SINGLE_RIGHTS):
        if castling & right:
            key ^= _KEYS[_CASTLING_SLOT + offset]
    return key


def en_passant_key(target: Square) -> int:
    # Only the file matters: the rank follows from the side to move.
    return _KEYS[_FILE_SLOT + target.col]


def position_key(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights,
    en_passant: Square | None,
) -> int:
    """Key identifying a position for repetition counting."""
    key = castling_key(castling)
    if side_to_move == Color.BLACK:
        key ^= side_to_move_key()
    if en_passant is not None:
        key ^= en_passant_key(en_passant)
    for piece, sq in board.occupied():
        key ^= piece_key(piece, sq)
    return key
