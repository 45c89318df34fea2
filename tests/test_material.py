import pytest

from chessbits.material import (
    QUADRATIC_OURS,
    QUADRATIC_THEIRS,
    imbalance,
    material_imbalance,
)
from chessbits.types import SCORE_ZERO, Color, Score

START = [1, 8, 2, 2, 2, 1]
EMPTY = [0, 0, 0, 0, 0, 0]


def test_empty_board_has_no_imbalance():
    assert imbalance(Color.WHITE, [EMPTY, EMPTY]) == SCORE_ZERO
    assert material_imbalance([EMPTY, EMPTY]) == SCORE_ZERO


def test_bishop_pair_alone_gives_its_coefficient():
    counts = [[1, 0, 0, 0, 0, 0], EMPTY]
    assert imbalance(Color.WHITE, counts) == Score(1419, 1455)


def test_single_pawn_gives_its_coefficient():
    counts = [[0, 1, 0, 0, 0, 0], EMPTY]
    assert imbalance(Color.WHITE, counts) == Score(37, 39)


def test_side_without_pieces_gets_nothing():
    counts = [START, EMPTY]
    assert imbalance(Color.BLACK, counts) == SCORE_ZERO


def test_equal_material_is_balanced():
    assert material_imbalance([START, START]) == SCORE_ZERO


@pytest.mark.parametrize(
    "white,black",
    [
        ([0, 5, 1, 1, 2, 0], [1, 4, 0, 2, 1, 1]),
        ([1, 8, 2, 2, 2, 1], [0, 6, 1, 1, 2, 1]),
        ([0, 0, 0, 0, 0, 1], [0, 3, 0, 0, 1, 0]),
    ],
)
def test_swapping_colors_negates(white, black):
    assert material_imbalance([black, white]) == -material_imbalance([white, black])
    assert imbalance(Color.WHITE, [white, black]) == imbalance(
        Color.BLACK, [black, white]
    )


def test_imbalance_is_linear_in_their_pieces_through_theirs_table():
    # A lone white queen facing one black pawn: only the queen-pawn cross term changes.
    alone = imbalance(Color.WHITE, [[0, 0, 0, 0, 0, 1], EMPTY])
    with_pawn = imbalance(Color.WHITE, [[0, 0, 0, 0, 0, 1], [0, 1, 0, 0, 0, 0]])
    assert with_pawn - alone == QUADRATIC_THEIRS[5][1]
    assert alone == QUADRATIC_OURS[5][5]


def test_wrong_number_of_colors_is_rejected():
    with pytest.raises(ValueError):
        imbalance(Color.WHITE, [START])


def test_wrong_row_length_is_rejected():
    with pytest.raises(ValueError):
        material_imbalance([[0, 1, 2], START])


def test_negative_counts_are_rejected():
    with pytest.raises(ValueError):
        imbalance(Color.WHITE, [[0, -1, 0, 0, 0, 0], EMPTY])