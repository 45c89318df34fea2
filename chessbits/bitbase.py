"""King and pawn versus king bitbase built by retrograde classification."""

from __future__ import annotations

from enum import IntEnum
from functools import lru_cache

from .bitboard import distance, pawn_attacks_from, pseudo_attacks, squares
from .types import (
    FILE_D,
    NORTH,
    RANK_2,
    RANK_7,
    SQUARE_NB,
    Color,
    PieceType,
    file_of,
    is_ok,
    make_square,
    rank_of,
)

# stm * pawn squares (files A-D, ranks 2-7) * white king * black king
MAX_INDEX = 2 * 24 * 64 * 64

_PAWN_BITS_MASK = ~0x1FFF


class Result(IntEnum):
    """Classification of a bitbase position; values combine as bit flags."""

    INVALID = 0
    UNKNOWN = 1
    DRAW = 2
    WIN = 4


def kpk_index(stm: Color, bksq: int, wksq: int, psq: int) -> int:
    """Pack a position into a bitbase index.

    Bits 0-5 hold the white king, 6-11 the black king, 12 the side to move,
    13-14 the pawn file and 15-17 the distance of the pawn from rank 7.
    """
    return (
        wksq
        | (bksq << 6)
        | (int(stm) << 12)
        | (file_of(psq) << 13)
        | ((RANK_7 - rank_of(psq)) << 15)
    )


_KING_BB = tuple(pseudo_attacks(PieceType.KING, s) for s in range(SQUARE_NB))
_KING_TARGETS = tuple(tuple(squares(b)) for b in _KING_BB)
_KING_TARGETS_HIGH = tuple(tuple(to << 6 for to in t) for t in _KING_TARGETS)
_WHITE_PAWN_ATTACKS = tuple(
    pawn_attacks_from(Color.WHITE, s) for s in range(SQUARE_NB)
)

_INVALID = int(Result.INVALID)
_UNKNOWN = int(Result.UNKNOWN)
_DRAW = int(Result.DRAW)
_WIN = int(Result.WIN)


def _decode(idx: int) -> tuple[int, int, int, int]:
    wk = idx & 0x3F
    bk = (idx >> 6) & 0x3F
    stm = (idx >> 12) & 0x01
    psq = make_square((idx >> 13) & 0x3, RANK_7 - ((idx >> 15) & 0x7))
    return wk, bk, stm, psq


def _initial(idx: int) -> int:
    wk, bk, stm, psq = _decode(idx)

    # Two pieces on one square, or a king that can be captured.
    if (
        distance(wk, bk) <= 1
        or wk == psq
        or bk == psq
        or (stm == 0 and (_WHITE_PAWN_ATTACKS[psq] >> bk) & 1)
    ):
        return _INVALID

    # The pawn promotes without being captured.
    promotion = psq + NORTH
    if (
        stm == 0
        and rank_of(psq) == RANK_7
        and wk != promotion
        and (distance(bk, promotion) > 1 or distance(wk, promotion) == 1)
    ):
        return _WIN

    # Stalemate, or the black king takes the pawn.
    if stm == 1:
        bk_att = _KING_BB[bk]
        wk_att = _KING_BB[wk]
        if not (bk_att & ~(wk_att | _WHITE_PAWN_ATTACKS[psq])) or (
            (bk_att & ~wk_att) >> psq
        ) & 1:
            return _DRAW

    return _UNKNOWN


def _classify(idx: int, db: bytearray) -> int:
    wk, bk, stm, psq = _decode(idx)
    pawn_bits = idx & _PAWN_BITS_MASK
    r = _INVALID

    if stm == 0:
        good, bad = _WIN, _DRAW
        base = pawn_bits | (1 << 12) | (bk << 6)
        for to in _KING_TARGETS[wk]:
            r |= db[base | to]
        rank = rank_of(psq)
        if rank < RANK_7:
            r |= db[kpk_index(Color.BLACK, bk, wk, psq + NORTH)]
        if rank == RANK_2 and psq + NORTH != wk and psq + NORTH != bk:
            r |= db[kpk_index(Color.BLACK, bk, wk, psq + 2 * NORTH)]
    else:
        good, bad = _DRAW, _WIN
        base = pawn_bits | wk
        for to in _KING_TARGETS_HIGH[bk]:
            r |= db[base | to]

    if r & good:
        return good
    if r & _UNKNOWN:
        return _UNKNOWN
    return bad


@lru_cache(maxsize=1)
def _win_table() -> bytes:
    db = bytearray(MAX_INDEX)
    unknown = []
    for idx in range(MAX_INDEX):
        result = _initial(idx)
        db[idx] = result
        if result == _UNKNOWN:
            unknown.append(idx)

    # Repeat until no unknown position can be resolved any further.
    changed = True
    while changed:
        changed = False
        remaining = []
        for idx in unknown:
            result = _classify(idx, db)
            db[idx] = result
            if result == _UNKNOWN:
                remaining.append(idx)
            else:
                changed = True
        unknown = remaining

    return bytes(1 if v == _WIN else 0 for v in db)


class KPKBitbase:
    """Win/draw knowledge for white king and pawn against black king."""

    def __init__(self) -> None:
        self._wins = _win_table()

    def probe(self, wksq: int, wpsq: int, bksq: int, stm: Color) -> bool:
        """Whether white wins; the pawn must be on files A to D, ranks 2 to 7."""
        for s in (wksq, wpsq, bksq):
            if not is_ok(s):
                raise ValueError(f"invalid square: {s}")
        if file_of(wpsq) > FILE_D:
            raise ValueError("pawn must be on files A to D")
        if not RANK_2 <= rank_of(wpsq) <= RANK_7:
            raise ValueError("pawn must be on ranks 2 to 7")
        return bool(self._wins[kpk_index(Color(stm), bksq, wksq, wpsq)])


@lru_cache(maxsize=1)
def _default() -> KPKBitbase:
    return KPKBitbase()


def probe(wksq: int, wpsq: int, bksq: int, stm: Color) -> bool:
    """Probe the shared bitbase, building it on first use."""
    return _default().probe(wksq, wpsq, bksq, stm)