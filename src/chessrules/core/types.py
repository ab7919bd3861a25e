"""Square value type and coordinate helpers.

Board layout: ``row`` is the rank index (0 = rank 1, white's back rank) and
``col`` is the file index (0 = file a)::

    a1 = Square(0, 0), h1 = Square(0, 7), a8 = Square(7, 0), h8 = Square(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (row, col) board coordinate.

    Coordinates outside ``[0, 7]`` are representable so that move geometry can
    step off the board; :func:`is_valid_square` tells them apart.
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    @property
    def index(self) -> int:
        """Flat 0-63 index (``row * 8 + col``)."""
        return self.row * 8 + self.col

    @property
    def is_light(self) -> bool:
        return (self.row + self.col) % 2 == 1

    def __str__(self) -> str:
        return square_name(self)


def is_valid_square(sq: Square) -> bool:
    """Both coordinates within ``[0, 7]``."""
    return 0 <= sq.row < 8 and 0 <= sq.col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(0, 4) → 'e1'."""
    if not is_valid_square(sq):
        return f"({sq.row},{sq.col})"
    return _FILES[sq.col] + _RANKS[sq.row]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(3, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_RANKS.index(name[1]), _FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
