import pytest

from chessbits.types import (
    NORTH,
    SOUTH,
    SQ_A1,
    SQ_A8,
    SQ_H1,
    SQ_H8,
    Color,
    Score,
    file_of,
    flip_file,
    flip_rank,
    is_ok,
    make_square,
    parse_square,
    pawn_push,
    rank_of,
    relative_rank,
    relative_square,
    square_name,
)


def test_color_invert():
    assert relative_square(~Color.WHITE, SQ_A1) == SQ_A8
    assert relative_square(~Color.BLACK, SQ_A1) == SQ_A1
    assert pawn_push(~Color.BLACK) == NORTH
    assert pawn_push(~Color.WHITE) == SOUTH


def test_square_roundtrip():
    for s in range(64):
        assert make_square(file_of(s), rank_of(s)) == s
        assert is_ok(s)
    assert not is_ok(64)
    assert not is_ok(-1)


def test_flips_are_involutions():
    for s in range(64):
        assert flip_rank(flip_rank(s)) == s
        assert flip_file(flip_file(s)) == s
        assert file_of(flip_rank(s)) == file_of(s)
        assert rank_of(flip_file(s)) == rank_of(s)
    assert flip_rank(SQ_A1) == SQ_A8
    assert flip_file(SQ_A1) == SQ_H1


def test_relative_square_and_rank():
    assert relative_square(Color.BLACK, SQ_A1) == SQ_A8
    assert relative_square(Color.WHITE, SQ_H8) == SQ_H8
    for s in range(64):
        assert relative_rank(Color.WHITE, s) == rank_of(s)
        assert relative_rank(Color.BLACK, s) == rank_of(flip_rank(s))


def test_pawn_push():
    assert pawn_push(Color.WHITE) == NORTH
    assert pawn_push(Color.BLACK) == SOUTH


def test_square_names():
    assert square_name(SQ_A1) == "a1"
    assert square_name(SQ_H8) == "h8"
    for s in range(64):
        assert parse_square(square_name(s)) == s


@pytest.mark.parametrize("bad", ["", "i1", "a9", "e44", "zz"])
def test_parse_square_rejects(bad):
    with pytest.raises(ValueError):
        parse_square(bad)


def test_square_name_rejects_out_of_range():
    with pytest.raises(ValueError):
        square_name(64)


def test_score_arithmetic():
    a = Score(3, 4)
    b = Score(1, 2)
    assert a + b == Score(4, 6)
    assert a - b == Score(2, 2)
    assert a * 3 == Score(9, 12)
    assert 3 * a == Score(9, 12)
    assert -a == Score(-3, -4)
    assert (a + b) - b == a


def test_score_divide_truncates_toward_zero():
    assert Score(-7, 7).divide(2) == Score(-3, 3)
    assert Score(10, -20).divide(5) == Score(2, -4)
    with pytest.raises(ZeroDivisionError):
        Score(1, 1).divide(0)