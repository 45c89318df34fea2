"""Bitboards: 64-bit sets of squares, attack tables and helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator

from .types import (
    EAST,
    FILE_A,
    FILE_H,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    RANK_1,
    RANK_8,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    SQUARE_NB,
    WEST,
    Color,
    PieceType,
    file_of,
    is_ok,
    make_square,
    rank_of,
    relative_rank,
)

MASK64 = (1 << 64) - 1

ALL_SQUARES = MASK64
DARK_SQUARES = 0xAA55AA55AA55AA55

FILE_A_BB = 0x0101010101010101
FILE_B_BB = FILE_A_BB << 1
FILE_C_BB = FILE_A_BB << 2
FILE_D_BB = FILE_A_BB << 3
FILE_E_BB = FILE_A_BB << 4
FILE_F_BB = FILE_A_BB << 5
FILE_G_BB = FILE_A_BB << 6
FILE_H_BB = FILE_A_BB << 7

RANK_1_BB = 0xFF
RANK_2_BB = RANK_1_BB << (8 * 1)
RANK_3_BB = RANK_1_BB << (8 * 2)
RANK_4_BB = RANK_1_BB << (8 * 3)
RANK_5_BB = RANK_1_BB << (8 * 4)
RANK_6_BB = RANK_1_BB << (8 * 5)
RANK_7_BB = RANK_1_BB << (8 * 6)
RANK_8_BB = RANK_1_BB << (8 * 7)

QUEEN_SIDE = FILE_A_BB | FILE_B_BB | FILE_C_BB | FILE_D_BB
CENTER_FILES = FILE_C_BB | FILE_D_BB | FILE_E_BB | FILE_F_BB
KING_SIDE = FILE_E_BB | FILE_F_BB | FILE_G_BB | FILE_H_BB
CENTER = (FILE_D_BB | FILE_E_BB) & (RANK_4_BB | RANK_5_BB)

KING_FLANK = (
    QUEEN_SIDE ^ FILE_D_BB,
    QUEEN_SIDE,
    QUEEN_SIDE,
    CENTER_FILES,
    CENTER_FILES,
    KING_SIDE,
    KING_SIDE,
    KING_SIDE ^ FILE_E_BB,
)

_ROOK_DIRECTIONS = (NORTH, SOUTH, EAST, WEST)
_BISHOP_DIRECTIONS = (NORTH_EAST, SOUTH_EAST, SOUTH_WEST, NORTH_WEST)
_KING_STEPS = (-9, -8, -7, -1, 1, 7, 8, 9)
_KNIGHT_STEPS = (-17, -15, -10, -6, 6, 10, 15, 17)


def square_bb(s: int) -> int:
    """Bitboard holding the single square s."""
    if not is_ok(s):
        raise ValueError(f"invalid square: {s}")
    return 1 << s


def more_than_one(b: int) -> bool:
    return bool(b & (b - 1))


def opposite_colors(s1: int, s2: int) -> bool:
    """Whether two squares have different colors."""
    return bool((s1 + rank_of(s1) + s2 + rank_of(s2)) & 1)


def rank_bb(r: int) -> int:
    """All squares on rank r."""
    return RANK_1_BB << (8 * r)


def file_bb(f: int) -> int:
    """All squares on file f."""
    return FILE_A_BB << f


def shift(b: int, d: int) -> int:
    """Move every square of b one or two steps in direction d."""
    if d == NORTH:
        return (b << 8) & MASK64
    if d == SOUTH:
        return b >> 8
    if d == NORTH + NORTH:
        return (b << 16) & MASK64
    if d == SOUTH + SOUTH:
        return b >> 16
    if d == EAST:
        return ((b & ~FILE_H_BB) << 1) & MASK64
    if d == WEST:
        return (b & ~FILE_A_BB) >> 1
    if d == NORTH_EAST:
        return ((b & ~FILE_H_BB) << 9) & MASK64
    if d == NORTH_WEST:
        return ((b & ~FILE_A_BB) << 7) & MASK64
    if d == SOUTH_EAST:
        return (b & ~FILE_H_BB) >> 7
    if d == SOUTH_WEST:
        return (b & ~FILE_A_BB) >> 9
    return 0


def pawn_attacks_bb(c: Color, b: int) -> int:
    """Squares attacked by pawns of color c standing on the squares of b."""
    if c == Color.WHITE:
        return shift(b, NORTH_WEST) | shift(b, NORTH_EAST)
    return shift(b, SOUTH_WEST) | shift(b, SOUTH_EAST)


def pawn_double_attacks_bb(c: Color, b: int) -> int:
    """Squares attacked twice by pawns of color c standing on the squares of b."""
    if c == Color.WHITE:
        return shift(b, NORTH_WEST) & shift(b, NORTH_EAST)
    return shift(b, SOUTH_WEST) & shift(b, SOUTH_EAST)


def adjacent_files_bb(s: int) -> int:
    """All squares on the files next to the file of s."""
    fb = file_bb(file_of(s))
    return shift(fb, EAST) | shift(fb, WEST)


def forward_ranks_bb(c: Color, s: int) -> int:
    """Squares on the ranks in front of s from the point of view of c."""
    if c == Color.WHITE:
        return ((MASK64 ^ RANK_1_BB) << (8 * relative_rank(Color.WHITE, s))) & MASK64
    return (MASK64 ^ RANK_8_BB) >> (8 * relative_rank(Color.BLACK, s))


def forward_file_bb(c: Color, s: int) -> int:
    """Squares on the file of s in front of it from the point of view of c."""
    return forward_ranks_bb(c, s) & file_bb(file_of(s))


def pawn_attack_span(c: Color, s: int) -> int:
    """Squares a pawn of color c on s may attack as it advances."""
    return forward_ranks_bb(c, s) & adjacent_files_bb(s)


def passed_pawn_span(c: Color, s: int) -> int:
    """Squares that must be free of enemy pawns for a pawn on s to be passed."""
    return pawn_attack_span(c, s) | forward_file_bb(c, s)


def file_distance(x: int, y: int) -> int:
    return abs(file_of(x) - file_of(y))


def rank_distance(x: int, y: int) -> int:
    return abs(rank_of(x) - rank_of(y))


def distance(x: int, y: int) -> int:
    """Number of king steps between two squares."""
    return max(file_distance(x, y), rank_distance(x, y))


def edge_distance(x: int) -> int:
    """Distance of a file or rank from the nearest board edge."""
    return min(x, 7 - x)


def _safe_destination(s: int, step: int) -> int:
    to = s + step
    return 1 << to if is_ok(to) and distance(s, to) <= 2 else 0


def sliding_attack(pt: PieceType, sq: int, occupied: int) -> int:
    """Attacks of a slider on sq, computed ray by ray."""
    if pt == PieceType.QUEEN:
        return sliding_attack(PieceType.ROOK, sq, occupied) | sliding_attack(
            PieceType.BISHOP, sq, occupied
        )
    if pt == PieceType.ROOK:
        directions = _ROOK_DIRECTIONS
    elif pt == PieceType.BISHOP:
        directions = _BISHOP_DIRECTIONS
    else:
        raise ValueError(f"not a sliding piece: {pt!r}")
    attacks = 0
    for d in directions:
        s = sq
        while _safe_destination(s, d) and not (occupied >> s) & 1:
            s += d
            attacks |= 1 << s
    return attacks


class Magic:
    """Attack table of one slider on one square, indexed by relevant occupancy."""

    def __init__(self, pt: PieceType, s: int) -> None:
        if pt not in (PieceType.ROOK, PieceType.BISHOP):
            raise ValueError(f"magics exist only for rooks and bishops: {pt!r}")
        if not is_ok(s):
            raise ValueError(f"invalid square: {s}")
        # Board edges are not part of the relevant occupancy.
        edges = ((RANK_1_BB | RANK_8_BB) & ~rank_bb(rank_of(s))) | (
            (FILE_A_BB | FILE_H_BB) & ~file_bb(file_of(s))
        )
        self.mask = sliding_attack(pt, s, 0) & ~edges & MASK64
        self._bits = tuple(squares(self.mask))
        self.shift = 64 - len(self._bits)
        table = [0] * (1 << len(self._bits))
        # Carry-rippler enumeration of every subset of the mask.
        b = 0
        while True:
            table[self.index(b)] = sliding_attack(pt, s, b)
            b = (b - self.mask) & self.mask
            if not b:
                break
        self.attacks = tuple(table)

    def index(self, occupied: int) -> int:
        """Table index made by gathering the occupied mask bits."""
        idx = 0
        for i, bit in enumerate(self._bits):
            if (occupied >> bit) & 1:
                idx |= 1 << i
        return idx


@lru_cache(maxsize=None)
def _magic(pt: PieceType, s: int) -> Magic:
    return Magic(pt, s)


def _build_pseudo_attacks() -> dict[PieceType, tuple[int, ...]]:
    king = []
    knight = []
    bishop = []
    rook = []
    for s in range(SQUARE_NB):
        k = 0
        for step in _KING_STEPS:
            k |= _safe_destination(s, step)
        n = 0
        for step in _KNIGHT_STEPS:
            n |= _safe_destination(s, step)
        king.append(k)
        knight.append(n)
        bishop.append(sliding_attack(PieceType.BISHOP, s, 0))
        rook.append(sliding_attack(PieceType.ROOK, s, 0))
    return {
        PieceType.KING: tuple(king),
        PieceType.KNIGHT: tuple(knight),
        PieceType.BISHOP: tuple(bishop),
        PieceType.ROOK: tuple(rook),
        PieceType.QUEEN: tuple(b | r for b, r in zip(bishop, rook)),
    }


_PSEUDO_ATTACKS = _build_pseudo_attacks()

_PAWN_ATTACKS = {
    c: tuple(pawn_attacks_bb(c, 1 << s) for s in range(SQUARE_NB)) for c in Color
}


def _build_lines() -> tuple[list[list[int]], list[list[int]]]:
    line = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
    between = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
    for s1 in range(SQUARE_NB):
        for pt in (PieceType.BISHOP, PieceType.ROOK):
            pseudo = _PSEUDO_ATTACKS[pt][s1]
            for s2 in range(SQUARE_NB):
                if (pseudo >> s2) & 1:
                    line[s1][s2] = (
                        _PSEUDO_ATTACKS[pt][s1] & _PSEUDO_ATTACKS[pt][s2]
                    ) | (1 << s1) | (1 << s2)
                    between[s1][s2] = sliding_attack(pt, s1, 1 << s2) & sliding_attack(
                        pt, s2, 1 << s1
                    )
                between[s1][s2] |= 1 << s2
    return line, between


_LINE_BB, _BETWEEN_BB = _build_lines()


def _check_square(s: int) -> None:
    if not is_ok(s):
        raise ValueError(f"invalid square: {s}")


def pawn_attacks_from(c: Color, s: int) -> int:
    """Squares attacked by a pawn of color c on s."""
    _check_square(s)
    return _PAWN_ATTACKS[Color(c)][s]


def line_bb(s1: int, s2: int) -> int:
    """The whole line through two squares, or 0 if they are not aligned."""
    _check_square(s1)
    _check_square(s2)
    return _LINE_BB[s1][s2]


def between_bb(s1: int, s2: int) -> int:
    """Squares from s1 (excluded) to s2 (included); just s2 if not aligned."""
    _check_square(s1)
    _check_square(s2)
    return _BETWEEN_BB[s1][s2]


def aligned(s1: int, s2: int, s3: int) -> bool:
    """Whether three squares lie on one straight or diagonal line."""
    return bool(line_bb(s1, s2) & square_bb(s3))


def pseudo_attacks(pt: PieceType, s: int) -> int:
    """Attacks of a non-pawn piece on s on an empty board."""
    _check_square(s)
    try:
        return _PSEUDO_ATTACKS[PieceType(pt)][s]
    except KeyError:
        raise ValueError(f"no pseudo attacks for piece type {pt!r}") from None


def attacks_bb(pt: PieceType, s: int, occupied: int = 0) -> int:
    """Attacks of a non-pawn piece on s given the occupied squares."""
    _check_square(s)
    if pt == PieceType.BISHOP or pt == PieceType.ROOK:
        m = _magic(PieceType(pt), s)
        return m.attacks[m.index(occupied)]
    if pt == PieceType.QUEEN:
        return attacks_bb(PieceType.BISHOP, s, occupied) | attacks_bb(
            PieceType.ROOK, s, occupied
        )
    return pseudo_attacks(pt, s)


def popcount(b: int) -> int:
    return (b & MASK64).bit_count()


def lsb(b: int) -> int:
    """Least significant square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard")
    return (b & -b).bit_length() - 1


def msb(b: int) -> int:
    """Most significant square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard")
    return b.bit_length() - 1


def least_significant_square_bb(b: int) -> int:
    if not b:
        raise ValueError("empty bitboard")
    return b & -b


def pop_lsb(b: int) -> tuple[int, int]:
    """The least significant square and the bitboard without it."""
    return lsb(b), b & (b - 1)


def squares(b: int) -> Iterator[int]:
    """Squares of a bitboard in ascending order."""
    while b:
        low = b & -b
        yield low.bit_length() - 1
        b ^= low


def frontmost_sq(c: Color, b: int) -> int:
    """Most advanced square of b from the point of view of c."""
    return msb(b) if c == Color.WHITE else lsb(b)


def pretty(b: int) -> str:
    """ASCII drawing of a bitboard."""
    border = "+---+---+---+---+---+---+---+---+\n"
    parts = [border]
    for r in range(RANK_8, RANK_1 - 1, -1):
        for f in range(FILE_A, FILE_H + 1):
            parts.append("| X " if (b >> make_square(f, r)) & 1 else "|   ")
        parts.append(f"| {r + 1}\n")
        parts.append(border)
    parts.append("  a   b   c   d   e   f   g   h\n")
    return "".join(parts)