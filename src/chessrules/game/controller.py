"""GameController: the chess rules state machine.

Composes :class:`MoveGenerator` and :class:`CheckValidator` to answer legal
move queries, applies moves transactionally and recomputes game status after
every ply. It never calls back into listeners; consumers inspect the boolean
result of :meth:`GameController.move` and the :class:`GameState` snapshot.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from chessrules.core.board import Board
from chessrules.core.check_validator import CheckValidator, apply_move_to_board
from chessrules.core.enums import (
    CastlingRights,
    CastlingSide,
    Color,
    DrawReason,
    GameResult,
    PieceType,
)
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square
from chessrules.core.zobrist import position_key
from chessrules.game.config import GameConfig
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# Home square of each castling rook -> the right it carries
_ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    Square(0, 0): (Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    Square(0, 7): (Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    Square(7, 0): (Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    Square(7, 7): (Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}

# Per side: rook home col, squares that must be empty, squares the king crosses
_CastlingPath = tuple[int, tuple[int, ...], tuple[int, ...], int]

_CASTLING_PATHS: dict[CastlingSide, _CastlingPath] = {
    CastlingSide.KINGSIDE: (7, (5, 6), (5, 6), 6),
    CastlingSide.QUEENSIDE: (0, (1, 2, 3), (2, 3), 2),
}

_KING_HOME_COL = 4


class GameController:
    """Owns one game: board, turn, castling rights, clocks, history, status.

    A new controller starts from the standard initial position. Starting a new
    game means building a new controller; an instance is never reset in place.
    """

    __slots__ = (
        "_config",
        "_board",
        "_turn",
        "_castling",
        "_en_passant",
        "_halfmove_clock",
        "_fullmove_number",
        "_history",
        "_captured",
        "_key_counts",
        "_is_check",
        "_is_checkmate",
        "_is_stalemate",
        "_draw_reason",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._setup(
            Board.initial(),
            turn=Color.WHITE,
            castling=CastlingRights.ALL,
            en_passant=None,
            halfmove_clock=0,
            fullmove_number=1,
        )

    @classmethod
    def from_position(
        cls,
        board: Board,
        *,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        config: GameConfig | None = None,
    ) -> GameController:
        """Start from an arbitrary position.

        *board* is cloned. Castling rights default to none: a custom position
        must grant them explicitly. Status is computed immediately, so a
        position that is already mate or stalemate is reported as over.
        """
        for color in Color:
            if board.find_king(color) is None:
                _LOGGER.warning("Position has no %s king", color)
        game = cls.__new__(cls)
        game._config = config if config is not None else GameConfig()
        game._setup(
            board.clone(),
            turn=turn,
            castling=castling,
            en_passant=en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
        )
        return game

    def _setup(
        self,
        board: Board,
        *,
        turn: Color,
        castling: CastlingRights,
        en_passant: Square | None,
        halfmove_clock: int,
        fullmove_number: int,
    ) -> None:
        self._board = board
        self._turn = turn
        self._castling = castling
        self._en_passant = en_passant
        self._halfmove_clock = halfmove_clock
        self._fullmove_number = fullmove_number
        self._history: list[Move] = []
        self._captured: dict[Color, list[Piece]] = {Color.WHITE: [], Color.BLACK: []}
        self._key_counts: dict[int, int] = {}
        self._record_position()
        self._update_status()

    def copy(self) -> GameController:
        """Independent deep copy of the whole game."""
        game = GameController.__new__(GameController)
        game._config = self._config
        game._board = self._board.clone()
        game._turn = self._turn
        game._castling = self._castling
        game._en_passant = self._en_passant
        game._halfmove_clock = self._halfmove_clock
        game._fullmove_number = self._fullmove_number
        game._history = self._history.copy()
        game._captured = {c: pieces.copy() for c, pieces in self._captured.items()}
        game._key_counts = self._key_counts.copy()
        game._is_check = self._is_check
        game._is_checkmate = self._is_checkmate
        game._is_stalemate = self._is_stalemate
        game._draw_reason = self._draw_reason
        return game

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def castling_rights(self) -> CastlingRights:
        return self._castling

    @property
    def en_passant_target(self) -> Square | None:
        return self._en_passant

    @property
    def halfmove_clock(self) -> int:
        return self._halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._fullmove_number

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    def piece(self, sq: Square) -> Piece | None:
        return self._board.get(sq)

    def board(self) -> Board:
        """A clone of the current board."""
        return self._board.clone()

    def is_in_check(self) -> bool:
        return self._is_check

    def is_checkmate(self) -> bool:
        return self._is_checkmate

    def is_stalemate(self) -> bool:
        return self._is_stalemate

    def is_draw(self) -> bool:
        return self._draw_reason is not None

    def is_game_over(self) -> bool:
        return self._is_checkmate or self.is_draw()

    def draw_reason(self) -> DrawReason | None:
        return self._draw_reason

    def result(self) -> GameResult:
        if self._is_checkmate:
            return (
                GameResult.BLACK_WINS
                if self._turn == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if self.is_draw():
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def captured_pieces(self) -> dict[Color, list[Piece]]:
        """Captured pieces keyed by the color of the captured piece."""
        return {color: pieces.copy() for color, pieces in self._captured.items()}

    def move_history(self) -> list[Move]:
        return self._history.copy()

    def repetition_count(self) -> int:
        """How many times the current position has occurred in this game."""
        return self._key_counts.get(self._current_key(), 0)

    def game_state(self) -> GameState:
        """Immutable snapshot; unaffected by later moves."""
        return GameState(
            board=self._board.rows(),
            turn=self._turn,
            castling_rights=self._castling,
            en_passant_target=self._en_passant,
            halfmove_clock=self._halfmove_clock,
            fullmove_number=self._fullmove_number,
            move_history=tuple(self._history),
            captured_pieces=MappingProxyType(
                {color: tuple(pieces) for color, pieces in self._captured.items()}
            ),
            is_check=self._is_check,
            is_checkmate=self._is_checkmate,
            is_stalemate=self._is_stalemate,
            is_draw=self.is_draw(),
            draw_reason=self._draw_reason,
        )

    # ── Legal move generation ────────────────────────────────────────────

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves for the piece on *sq*.

        Empty when the square is empty or holds a piece of the side not to
        move. Captures are annotated; pawn moves onto the last rank come
        expanded into one move per promotion piece.
        """
        piece = self._board.get(sq)
        if piece is None or piece.color != self._turn:
            return []

        board = self._board
        moves: list[Move] = []
        for move in MoveGenerator(board).pseudo_legal_moves(sq):
            target = board.get(move.to_sq)
            moves.append(move.with_capture(target) if target is not None else move)

        if piece.piece_type == PieceType.KING:
            moves.extend(self._castling_moves(sq, piece.color))
        elif piece.piece_type == PieceType.PAWN:
            moves.extend(self._en_passant_moves(sq, piece.color))

        moves = CheckValidator(board).filter_legal(moves, piece.color)

        if piece.piece_type == PieceType.PAWN:
            moves = self._expand_promotions(moves, piece.color)
        return moves

    def all_legal_moves(self) -> list[Move]:
        """Every legal move of the side to move."""
        moves: list[Move] = []
        for _, sq in self._board.all_pieces(self._turn):
            moves.extend(self.legal_moves(sq))
        return moves

    def _castling_moves(self, king_sq: Square, color: Color) -> list[Move]:
        row = color.home_row
        if king_sq != Square(row, _KING_HOME_COL):
            return []

        validator = CheckValidator(self._board)
        if validator.is_king_in_check(color):
            return []

        board = self._board
        opponent = color.opposite
        moves: list[Move] = []
        for side, path in _CASTLING_PATHS.items():
            rook_col, empty_cols, safe_cols, king_to = path
            if not self._castling.allows(color, side):
                continue
            rook = board.get(Square(row, rook_col))
            if rook != Piece(color, PieceType.ROOK):
                continue
            if any(not board.is_empty(Square(row, c)) for c in empty_cols):
                continue
            if any(
                validator.is_square_attacked(Square(row, c), opponent)
                for c in safe_cols
            ):
                continue
            moves.append(
                Move(
                    king_sq,
                    Square(row, king_to),
                    is_castling=True,
                    castling_side=side,
                )
            )
        return moves

    def _en_passant_moves(self, pawn_sq: Square, color: Color) -> list[Move]:
        target = self._en_passant
        if target is None:
            return []

        # A pawn can only take en passant from its fifth rank.
        capture_row = 4 if color == Color.WHITE else 3
        if pawn_sq.row != capture_row:
            return []
        if abs(pawn_sq.col - target.col) != 1:
            return []
        if target.row != pawn_sq.row + color.pawn_direction:
            return []

        victim = self._board.get(Square(pawn_sq.row, target.col))
        if victim != Piece(color.opposite, PieceType.PAWN):
            return []
        return [
            Move(
                pawn_sq,
                target,
                is_capture=True,
                captured_piece=victim,
                is_en_passant=True,
            )
        ]

    @staticmethod
    def _expand_promotions(moves: list[Move], color: Color) -> list[Move]:
        last_row = color.opposite.home_row
        expanded: list[Move] = []
        for move in moves:
            if move.to_sq.row == last_row:
                expanded.extend(move.with_promotion(pt) for pt in PROMOTION_TYPES)
            else:
                expanded.append(move)
        return expanded

    # ── Commands ─────────────────────────────────────────────────────────

    def move(self, request: Move) -> bool:
        """Apply *request* if legal. Returns False and changes nothing otherwise.

        Only ``from_sq``, ``to_sq`` and ``promotion`` of the request are read.
        A promotion request without a piece promotes to the configured
        default piece.
        """
        if self.is_game_over():
            _LOGGER.debug("Rejected %s: game is over", request)
            return False

        piece = self._board.get(request.from_sq)
        if piece is None:
            _LOGGER.debug("Rejected %s: no piece on origin square", request)
            return False
        if piece.color != self._turn:
            _LOGGER.debug("Rejected %s: %s is not to move", request, piece.color)
            return False

        candidates = [
            m for m in self.legal_moves(request.from_sq) if m.matches(request)
        ]
        if not candidates:
            _LOGGER.debug("Rejected %s: not a legal move", request)
            return False

        move = candidates[0]
        if len(candidates) > 1:
            default = self._config.default_promotion
            move = next(m for m in candidates if m.promotion == default)

        self._apply(move, piece)
        return True

    def _apply(self, move: Move, piece: Piece) -> None:
        captured = apply_move_to_board(self._board, move)
        if captured is not None:
            move = move.with_capture(captured)
            self._captured[captured.color].append(captured)

        self._update_castling(move, piece, captured)

        # En passant target for the opponent
        next_en_passant: Square | None = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.row - move.from_sq.row) == 2
        ):
            # The square the pawn skipped over
            next_en_passant = move.from_sq.offset(piece.color.pawn_direction, 0)
        self._en_passant = next_en_passant

        # Clocks
        if piece.piece_type == PieceType.PAWN or captured is not None:
            self._halfmove_clock = 0
        else:
            self._halfmove_clock += 1
        if self._turn == Color.BLACK:
            self._fullmove_number += 1

        self._history.append(move)
        self._turn = self._turn.opposite
        _LOGGER.debug("Applied %s", move)

        self._record_position()
        self._update_status()

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(
        self, move: Move, piece: Piece, captured: Piece | None
    ) -> None:
        castling = self._castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.for_color(piece.color)

        if piece.piece_type == PieceType.ROOK and move.from_sq in _ROOK_CORNERS:
            owner, right = _ROOK_CORNERS[move.from_sq]
            if owner == piece.color:
                castling &= ~right

        # Taking a rook on its home square removes its owner's right
        if (
            captured is not None
            and captured.piece_type == PieceType.ROOK
            and move.to_sq in _ROOK_CORNERS
        ):
            owner, right = _ROOK_CORNERS[move.to_sq]
            if owner == captured.color:
                castling &= ~right

        self._castling = castling

    # ── Status ───────────────────────────────────────────────────────────

    def _current_key(self) -> int:
        return position_key(self._board, self._turn, self._castling, self._en_passant)

    def _record_position(self) -> None:
        key = self._current_key()
        self._key_counts[key] = self._key_counts.get(key, 0) + 1

    def _update_status(self) -> None:
        self._is_check = CheckValidator(self._board).is_king_in_check(self._turn)
        has_moves = self._has_any_legal_moves()
        self._is_checkmate = not has_moves and self._is_check
        self._is_stalemate = not has_moves and not self._is_check
        # Clock and material draws still flag a mated position; result() favours mate
        self._draw_reason = self._find_draw_reason()

        if self._is_checkmate:
            _LOGGER.info("Checkmate: %s wins", self._turn.opposite)
        elif self._draw_reason is not None:
            _LOGGER.info("Draw by %s", self._draw_reason)

    def _find_draw_reason(self) -> DrawReason | None:
        config = self._config
        if self._is_stalemate:
            return DrawReason.STALEMATE
        if Rules.is_fifty_move_rule(self._halfmove_clock, config.halfmove_draw_limit):
            return DrawReason.FIFTY_MOVE_RULE
        if Rules.is_insufficient_material(self._board):
            return DrawReason.INSUFFICIENT_MATERIAL
        if config.detect_repetition and Rules.is_threefold_repetition(
            self.repetition_count(), config.repetition_limit
        ):
            return DrawReason.THREEFOLD_REPETITION
        return None

    def _has_any_legal_moves(self) -> bool:
        return any(self.legal_moves(sq) for _, sq in self._board.all_pieces(self._turn))

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"{self._board!r}\n{self._turn} to move"

