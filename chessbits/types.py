"""Basic board types: colors, piece types, squares and two-phase scores."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SQUARE_NB = 64
FILE_NB = 8
RANK_NB = 8

FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H = range(8)
RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8 = range(8)

SQ_A1 = 0
SQ_H1 = 7
SQ_A8 = 56
SQ_H8 = 63

NORTH = 8
EAST = 1
SOUTH = -8
WEST = -1
NORTH_EAST = NORTH + EAST
SOUTH_EAST = SOUTH + EAST
SOUTH_WEST = SOUTH + WEST
NORTH_WEST = NORTH + WEST

_FILE_NAMES = "abcdefgh"
_RANK_NAMES = "12345678"


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Color(IntEnum):
    """Side of the board."""

    WHITE = 0
    BLACK = 1

    def __invert__(self) -> Color:
        return Color(self ^ 1)


class PieceType(IntEnum):
    """Kind of chess piece, independent of color."""

    NO_PIECE_TYPE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
    ALL_PIECES = 0


PIECE_TYPE_NB = 8


@dataclass(frozen=True)
class Score:
    """A pair of middlegame and endgame values."""

    mg: int = 0
    eg: int = 0

    def __add__(self, other: Score) -> Score:
        if not isinstance(other, Score):
            return NotImplemented
        return Score(self.mg + other.mg, self.eg + other.eg)

    def __sub__(self, other: Score) -> Score:
        if not isinstance(other, Score):
            return NotImplemented
        return Score(self.mg - other.mg, self.eg - other.eg)

    def __mul__(self, factor: int) -> Score:
        if isinstance(factor, Score) or not isinstance(factor, int):
            return NotImplemented
        return Score(self.mg * factor, self.eg * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Score:
        return Score(-self.mg, -self.eg)

    def divide(self, divisor: int) -> Score:
        """Divide both parts by an integer, rounding toward zero."""
        return Score(_trunc_div(self.mg, divisor), _trunc_div(self.eg, divisor))


SCORE_ZERO = Score(0, 0)


def make_square(f: int, r: int) -> int:
    return (r << 3) + f


def file_of(s: int) -> int:
    return s & 7


def rank_of(s: int) -> int:
    return s >> 3


def is_ok(s: int) -> bool:
    return 0 <= s < SQUARE_NB


def flip_rank(s: int) -> int:
    return s ^ SQ_A8


def flip_file(s: int) -> int:
    return s ^ SQ_H1


def relative_rank(c: Color, s: int) -> int:
    """Rank of a square as seen from the given side."""
    return rank_of(s) ^ (int(c) * 7)


def relative_square(c: Color, s: int) -> int:
    """Square as seen from the given side."""
    return s ^ (int(c) * 56)


def pawn_push(c: Color) -> int:
    return NORTH if c == Color.WHITE else SOUTH


def square_name(s: int) -> str:
    """Algebraic name of a square, such as 'e4'."""
    if not is_ok(s):
        raise ValueError(f"invalid square: {s}")
    return _FILE_NAMES[file_of(s)] + _RANK_NAMES[rank_of(s)]


def parse_square(name: str) -> int:
    """Square index from an algebraic name such as 'e4'."""
    if len(name) != 2:
        raise ValueError(f"invalid square name: {name!r}")
    f = _FILE_NAMES.find(name[0].lower())
    r = _RANK_NAMES.find(name[1])
    if f < 0 or r < 0:
        raise ValueError(f"invalid square name: {name!r}")
    return make_square(f, r)