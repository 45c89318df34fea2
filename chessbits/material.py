"""Second-degree polynomial material imbalance."""

from __future__ import annotations

from typing import Sequence

from .types import SCORE_ZERO, Color, Score

S = Score

# Index 0 stands for the bishop pair, then pawn, knight, bishop, rook, queen.
_PIECE_SLOTS = 6

QUADRATIC_OURS: tuple[tuple[Score, ...], ...] = (
    (S(1419, 1455), S(0, 0), S(0, 0), S(0, 0), S(0, 0), S(0, 0)),
    (S(101, 28), S(37, 39), S(0, 0), S(0, 0), S(0, 0), S(0, 0)),
    (S(57, 64), S(249, 187), S(-49, -62), S(0, 0), S(0, 0), S(0, 0)),
    (S(0, 0), S(118, 137), S(10, 27), S(0, 0), S(0, 0), S(0, 0)),
    (S(-63, -68), S(-5, 3), S(100, 81), S(132, 118), S(-246, -244), S(0, 0)),
    (S(-210, -211), S(37, 14), S(147, 141), S(161, 105), S(-158, -174), S(-9, -31)),
)

QUADRATIC_THEIRS: tuple[tuple[Score, ...], ...] = (
    (S(0, 0), S(0, 0), S(0, 0), S(0, 0), S(0, 0), S(0, 0)),
    (S(33, 30), S(0, 0), S(0, 0), S(0, 0), S(0, 0), S(0, 0)),
    (S(46, 18), S(106, 84), S(0, 0), S(0, 0), S(0, 0), S(0, 0)),
    (S(75, 35), S(59, 44), S(60, 15), S(0, 0), S(0, 0), S(0, 0)),
    (S(26, 35), S(6, 22), S(38, 39), S(-12, -2), S(0, 0), S(0, 0)),
    (S(97, 93), S(100, 163), S(-58, -91), S(112, 192), S(276, 225), S(0, 0)),
)

del S


def _counts(piece_count: Sequence[Sequence[int]]) -> tuple[tuple[int, ...], ...]:
    if len(piece_count) != 2:
        raise ValueError("piece counts must be given for both colors")
    rows = tuple(tuple(int(n) for n in row) for row in piece_count)
    for row in rows:
        if len(row) != _PIECE_SLOTS:
            raise ValueError(f"each color needs {_PIECE_SLOTS} piece counts")
        if any(n < 0 for n in row):
            raise ValueError("piece counts must not be negative")
    return rows


def imbalance(us: Color, piece_count: Sequence[Sequence[int]]) -> Score:
    """Imbalance bonus of one side.

    piece_count[color] holds: bishop pair flag, pawns, knights, bishops,
    rooks and queens.
    """
    counts = _counts(piece_count)
    us = Color(us)
    ours = counts[us]
    theirs = counts[~us]

    bonus = SCORE_ZERO
    for pt1, n in enumerate(ours):
        if not n:
            continue
        v = QUADRATIC_OURS[pt1][pt1] * n
        for pt2 in range(pt1):
            v = (
                v
                + QUADRATIC_OURS[pt1][pt2] * ours[pt2]
                + QUADRATIC_THEIRS[pt1][pt2] * theirs[pt2]
            )
        bonus = bonus + v * n
    return bonus


def material_imbalance(piece_count: Sequence[Sequence[int]]) -> Score:
    """Imbalance from white's point of view, scaled down by 16."""
    return (
        imbalance(Color.WHITE, piece_count) - imbalance(Color.BLACK, piece_count)
    ).divide(16)