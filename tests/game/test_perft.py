"""Perft tests, the gold standard for move-generator correctness.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

from collections.abc import Callable

import pytest

from chessrules.core.enums import CastlingRights, Color
from chessrules.game.controller import GameController


def perft(game: GameController, depth: int) -> int:
    """Count leaf nodes at *depth* by playing moves on copies."""
    moves = game.all_legal_moves()
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        child = game.copy()
        assert child.move(move)
        nodes += perft(child, depth - 1)
    return nodes


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(GameController(), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(GameController(), 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(GameController(), 3) == 8_902


# ── Kiwipete (rich in tactics: castling, ep, promotions) ─────────────────────

KIWIPETE = {
    "a8": "r", "e8": "k", "h8": "r",
    "a7": "p", "c7": "p", "d7": "p", "e7": "q", "f7": "p", "g7": "b",
    "a6": "b", "b6": "n", "e6": "p", "f6": "n", "g6": "p",
    "d5": "P", "e5": "N",
    "b4": "p", "e4": "P",
    "c3": "N", "f3": "Q", "h3": "p",
    "a2": "P", "b2": "P", "c2": "P", "d2": "B", "e2": "B", "f2": "P", "g2": "P",
    "h2": "P",
    "a1": "R", "e1": "K", "h1": "R",
}


class TestPerftKiwipete:
    def _game(self, game_from: Callable[..., GameController]) -> GameController:
        return game_from(KIWIPETE, castling=CastlingRights.ALL)

    def test_depth_1(self, game_from: Callable[..., GameController]) -> None:
        assert perft(self._game(game_from), 1) == 48

    @pytest.mark.slow
    def test_depth_2(self, game_from: Callable[..., GameController]) -> None:
        assert perft(self._game(game_from), 2) == 2_039


# ── Position 3: en-passant + promotion edge cases ───────────────────────────

POS3 = {
    "c7": "p",
    "d6": "p",
    "a5": "K", "b5": "P", "h5": "r",
    "b4": "R", "f4": "p", "h4": "k",
    "e2": "P", "g2": "P",
}


class TestPerftPos3:
    def test_depth_1(self, game_from: Callable[..., GameController]) -> None:
        assert perft(game_from(POS3, turn=Color.WHITE), 1) == 14

    def test_depth_2(self, game_from: Callable[..., GameController]) -> None:
        assert perft(game_from(POS3, turn=Color.WHITE), 2) == 191
