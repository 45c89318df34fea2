import pytest

from chessbits.bitbase import MAX_INDEX, KPKBitbase, kpk_index, probe
from chessbits.types import Color, make_square, parse_square


def sq(name):
    return parse_square(name)


def test_index_of_origin_is_zero():
    assert kpk_index(Color.WHITE, 0, 0, sq("a7")) == 0


@pytest.mark.parametrize("stm", list(Color))
@pytest.mark.parametrize("wk,bk,p", [(0, 63, "d2"), (12, 40, "b5"), (63, 63, "c7")])
def test_index_fields_roundtrip(stm, wk, bk, p):
    psq = sq(p)
    idx = kpk_index(stm, bk, wk, psq)
    assert 0 <= idx < MAX_INDEX
    assert idx & 0x3F == wk
    assert (idx >> 6) & 0x3F == bk
    assert (idx >> 12) & 1 == int(stm)
    assert make_square((idx >> 13) & 3, 6 - ((idx >> 15) & 7)) == psq


def test_pawn_about_to_promote_wins():
    assert probe(sq("e1"), sq("d7"), sq("h1"), Color.WHITE) is True


def test_black_king_captures_undefended_pawn():
    assert probe(sq("h1"), sq("d4"), sq("e5"), Color.BLACK) is False


def test_rook_pawn_with_king_in_corner_is_draw():
    assert probe(sq("h1"), sq("a2"), sq("a8"), Color.WHITE) is False


@pytest.mark.parametrize("stm", list(Color))
def test_king_on_sixth_in_front_of_pawn_wins(stm):
    assert probe(sq("d6"), sq("d5"), sq("d8"), stm) is True


@pytest.mark.parametrize("stm", list(Color))
def test_adjacent_kings_are_never_wins(stm):
    assert probe(sq("d4"), sq("b2"), sq("d5"), stm) is False


def test_instance_agrees_with_module_probe():
    bb = KPKBitbase()
    cases = [
        (sq("d6"), sq("d5"), sq("d8"), Color.BLACK),
        (sq("h1"), sq("a2"), sq("a8"), Color.WHITE),
        (sq("e1"), sq("d7"), sq("h1"), Color.WHITE),
    ]
    for case in cases:
        assert bb.probe(*case) == probe(*case)


@pytest.mark.parametrize("wk", ["c8", "e8", "c7", "e7", "c6"])
def test_supported_promotion_wins(wk):
    # White king next to the queening square guards it.
    assert probe(sq(wk), sq("d7"), sq("a1"), Color.WHITE) is True


def test_pawn_on_right_half_is_rejected():
    with pytest.raises(ValueError):
        probe(sq("a1"), sq("e4"), sq("h8"), Color.WHITE)


@pytest.mark.parametrize("p", ["b1", "b8"])
def test_pawn_on_back_ranks_is_rejected(p):
    with pytest.raises(ValueError):
        probe(sq("h1"), sq(p), sq("h8"), Color.WHITE)


def test_invalid_square_is_rejected():
    with pytest.raises(ValueError):
        probe(64, sq("b4"), sq("h8"), Color.WHITE)