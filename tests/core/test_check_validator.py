"""Tests for attack detection and check-safe filtering."""

from collections.abc import Callable

from chessrules.core.board import Board
from chessrules.core.check_validator import CheckValidator, apply_move_to_board
from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square as sq


class TestIsSquareAttacked:
    def test_pawn_attacks_diagonally_even_when_empty(
        self, board_from: Callable[..., Board]
    ) -> None:
        v = CheckValidator(board_from({"e4": "P", "a1": "K", "h8": "k"}))
        assert v.is_square_attacked(sq("d5"), Color.WHITE)
        assert v.is_square_attacked(sq("f5"), Color.WHITE)
        assert not v.is_square_attacked(sq("e5"), Color.WHITE)

    def test_black_pawn_attacks_downward(
        self, board_from: Callable[..., Board]
    ) -> None:
        v = CheckValidator(board_from({"e5": "p", "a1": "K", "h8": "k"}))
        assert v.is_square_attacked(sq("d4"), Color.BLACK)
        assert not v.is_square_attacked(sq("d6"), Color.BLACK)

    def test_knight_attack(self, board_from: Callable[..., Board]) -> None:
        v = CheckValidator(board_from({"g1": "N", "a1": "K", "h8": "k"}))
        assert v.is_square_attacked(sq("f3"), Color.WHITE)
        assert not v.is_square_attacked(sq("g3"), Color.WHITE)

    def test_slider_blocked(self, board_from: Callable[..., Board]) -> None:
        board = board_from({"a1": "R", "a4": "p", "h1": "K", "h8": "k"})
        v = CheckValidator(board)
        assert v.is_square_attacked(sq("a4"), Color.WHITE)
        assert not v.is_square_attacked(sq("a5"), Color.WHITE)

    def test_diagonal_slider(self, board_from: Callable[..., Board]) -> None:
        v = CheckValidator(board_from({"c1": "b", "h1": "K", "a8": "k"}))
        assert v.is_square_attacked(sq("h6"), Color.BLACK)
        assert not v.is_square_attacked(sq("c2"), Color.BLACK)

    def test_queen_and_king(self, board_from: Callable[..., Board]) -> None:
        v = CheckValidator(board_from({"d1": "Q", "a1": "K", "h8": "k"}))
        assert v.is_square_attacked(sq("d8"), Color.WHITE)
        assert v.is_square_attacked(sq("h5"), Color.WHITE)
        assert v.is_square_attacked(sq("b2"), Color.WHITE)  # king

    def test_initial_position(self) -> None:
        v = CheckValidator(Board.initial())
        assert v.is_square_attacked(sq("f3"), Color.WHITE)
        assert not v.is_square_attacked(sq("e4"), Color.WHITE)
        assert v.is_square_attacked(sq("f6"), Color.BLACK)


class TestIsKingInCheck:
    def test_not_in_check_at_start(self) -> None:
        v = CheckValidator(Board.initial())
        assert not v.is_king_in_check(Color.WHITE)
        assert not v.is_king_in_check(Color.BLACK)

    def test_rook_check(self, board_from: Callable[..., Board]) -> None:
        v = CheckValidator(board_from({"e1": "K", "e7": "r", "a8": "k"}))
        assert v.is_king_in_check(Color.WHITE)
        assert not v.is_king_in_check(Color.BLACK)

    def test_missing_king_is_not_check(self, board_from: Callable[..., Board]) -> None:
        v = CheckValidator(board_from({"e8": "k", "e1": "R"}))
        assert not v.is_king_in_check(Color.WHITE)
        assert v.is_king_in_check(Color.BLACK)


class TestWouldLeaveKingInCheck:
    def test_pinned_piece_cannot_move(self, board_from: Callable[..., Board]) -> None:
        board = board_from({"e1": "K", "e2": "N", "e8": "r", "a8": "k"})
        v = CheckValidator(board)
        assert v.would_leave_king_in_check(Move(sq("e2"), sq("c3")), Color.WHITE)

    def test_king_cannot_step_into_attack(
        self, board_from: Callable[..., Board]
    ) -> None:
        board = board_from({"e1": "K", "d8": "r", "a8": "k"})
        v = CheckValidator(board)
        assert v.would_leave_king_in_check(Move(sq("e1"), sq("d1")), Color.WHITE)
        assert not v.would_leave_king_in_check(Move(sq("e1"), sq("f1")), Color.WHITE)

    def test_capture_of_checker_resolves(
        self, board_from: Callable[..., Board]
    ) -> None:
        board = board_from({"e1": "K", "e5": "r", "b5": "R", "a8": "k"})
        v = CheckValidator(board)
        assert not v.would_leave_king_in_check(Move(sq("b5"), sq("e5")), Color.WHITE)

    def test_en_passant_removes_pawn_beside(
        self, board_from: Callable[..., Board]
    ) -> None:
        # Both pawns leave rank 5, exposing the white king to the rook.
        board = board_from({"a5": "K", "b5": "P", "c5": "p", "h5": "r", "h8": "k"})
        v = CheckValidator(board)
        ep = Move(sq("b5"), sq("c6"), is_capture=True, is_en_passant=True)
        assert v.would_leave_king_in_check(ep, Color.WHITE)
        plain = Move(sq("b5"), sq("b6"))
        assert not v.would_leave_king_in_check(plain, Color.WHITE)

    def test_original_board_untouched(self) -> None:
        board = Board.initial()
        before = board.clone()
        CheckValidator(board).would_leave_king_in_check(
            Move(sq("e2"), sq("e4")), Color.WHITE
        )
        assert board == before

    def test_filter_legal(self, board_from: Callable[..., Board]) -> None:
        board = board_from({"e1": "K", "e2": "R", "e8": "r", "a8": "k"})
        moves = MoveGenerator(board).pseudo_legal_moves(sq("e2"))
        legal = CheckValidator(board).filter_legal(moves, Color.WHITE)
        assert {str(m.to_sq) for m in legal} == {"e3", "e4", "e5", "e6", "e7", "e8"}


class TestApplyMoveToBoard:
    def test_castling_moves_rook(self, board_from: Callable[..., Board]) -> None:
        board = board_from({"e1": "K", "h1": "R", "e8": "k"})
        castle = Move(
            sq("e1"), sq("g1"), is_castling=True, castling_side=CastlingSide.KINGSIDE
        )
        assert apply_move_to_board(board, castle) is None
        assert board[sq("g1")] == Piece(Color.WHITE, PieceType.KING)
        assert board[sq("f1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[sq("h1")] is None

    def test_queenside_castling(self, board_from: Callable[..., Board]) -> None:
        board = board_from({"e8": "k", "a8": "r", "e1": "K"})
        castle = Move(
            sq("e8"), sq("c8"), is_castling=True, castling_side=CastlingSide.QUEENSIDE
        )
        apply_move_to_board(board, castle)
        assert board[sq("c8")] == Piece(Color.BLACK, PieceType.KING)
        assert board[sq("d8")] == Piece(Color.BLACK, PieceType.ROOK)
        assert board[sq("a8")] is None

    def test_promotion_swaps_piece(self, board_from: Callable[..., Board]) -> None:
        board = board_from({"b7": "P", "a8": "r", "e1": "K", "h8": "k"})
        captured = apply_move_to_board(
            board, Move(sq("b7"), sq("a8"), promotion=PieceType.KNIGHT)
        )
        assert captured == Piece(Color.BLACK, PieceType.ROOK)
        assert board[sq("a8")] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_en_passant_returns_victim(
        self, board_from: Callable[..., Board]
    ) -> None:
        board = board_from({"e5": "P", "d5": "p", "e1": "K", "e8": "k"})
        captured = apply_move_to_board(
            board, Move(sq("e5"), sq("d6"), is_en_passant=True)
        )
        assert captured == Piece(Color.BLACK, PieceType.PAWN)
        assert board[sq("d5")] is None
        assert board[sq("d6")] == Piece(Color.WHITE, PieceType.PAWN)
