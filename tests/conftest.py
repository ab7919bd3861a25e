"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.types import Square, parse_square
from chessrules.game.config import GameConfig
from chessrules.game.controller import GameController

Placement = dict[str, str]


def build_board(placement: Placement) -> Board:
    """Board from ``{"e1": "K", "e8": "k"}`` (uppercase = white)."""
    return Board.from_placement(
        {parse_square(name): Piece.from_char(char) for name, char in placement.items()}
    )


@pytest.fixture
def board_from() -> Callable[[Placement], Board]:
    return build_board


@pytest.fixture
def game_from() -> Callable[..., GameController]:
    """Factory for a controller on a custom position."""

    def _make(
        placement: Placement,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: str | None = None,
        halfmove_clock: int = 0,
        config: GameConfig | None = None,
    ) -> GameController:
        ep: Square | None = parse_square(en_passant) if en_passant else None
        return GameController.from_position(
            build_board(placement),
            turn=turn,
            castling=castling,
            en_passant=ep,
            halfmove_clock=halfmove_clock,
            config=config,
        )

    return _make
