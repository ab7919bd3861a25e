"""Immutable game-state snapshot."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from chessrules.core.board import BoardRows
from chessrules.core.enums import CastlingRights, Color, DrawReason, GameResult
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square


@dataclass(frozen=True, slots=True)
class GameState:
    """Point-in-time copy of everything the controller tracks.

    Nothing here aliases the live game: the board is a tuple of rows, history
    and captured pieces are tuples, so later moves never show through.
    """

    board: BoardRows
    turn: Color
    castling_rights: CastlingRights
    en_passant_target: Square | None
    halfmove_clock: int
    fullmove_number: int
    move_history: tuple[Move, ...]
    captured_pieces: Mapping[Color, tuple[Piece, ...]]
    is_check: bool
    is_checkmate: bool
    is_stalemate: bool
    is_draw: bool
    draw_reason: DrawReason | None = None

    # captured_pieces is a read-only mapping, so snapshots compare but never hash
    __hash__ = None  # type: ignore[assignment]

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            return None
        return self.board[sq.row][sq.col]

    @property
    def is_game_over(self) -> bool:
        return self.is_checkmate or self.is_draw

    @property
    def result(self) -> GameResult:
        if self.is_checkmate:
            # The side to move is the one that got mated
            return (
                GameResult.BLACK_WINS
                if self.turn == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if self.is_draw:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1] if self.move_history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)
