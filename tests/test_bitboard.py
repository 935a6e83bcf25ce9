import pytest

from xqcore.bitboard import (
    ALL_SQUARES,
    FILE_A_BB,
    FILE_I_BB,
    HALF_BB,
    PALACE,
    PAWN_BB,
    RANK_0_BB,
    RANK_9_BB,
    distance,
    file_bb,
    file_distance,
    file_edge_distance,
    iter_squares,
    least_significant_square_bb,
    lsb,
    more_than_one,
    pawn_attacks_bb,
    pawn_attacks_to_bb,
    pop_lsb,
    popcount,
    rank_bb,
    rank_distance,
    rank_edge_distance,
    shift,
    square_bb,
)
from xqcore.types import (
    EAST,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    WEST,
    Color,
    make_square,
)

ALL = range(90)


def test_square_bb_single_bit():
    for s in ALL:
        assert square_bb(s) == 1 << s
        assert popcount(square_bb(s)) == 1


@pytest.mark.parametrize("s", [-1, 90])
def test_square_bb_rejects_off_board(s):
    with pytest.raises(ValueError):
        square_bb(s)


def test_ranks_and_files_tile_the_board():
    union_r = 0
    for r in range(10):
        union_r |= rank_bb(r)
    union_f = 0
    for f in range(9):
        union_f |= file_bb(f)
    assert union_r == ALL_SQUARES
    assert union_f == ALL_SQUARES
    for r in range(10):
        for f in range(9):
            assert rank_bb(r) & file_bb(f) == square_bb(make_square(f, r))


def test_named_constants_match_builders():
    assert file_bb(0) == FILE_A_BB
    assert file_bb(8) == FILE_I_BB
    assert rank_bb(0) == RANK_0_BB
    assert rank_bb(9) == RANK_9_BB
    assert HALF_BB[0] | HALF_BB[1] == ALL_SQUARES
    assert HALF_BB[0] & HALF_BB[1] == 0


def test_palace_squares():
    expected = {make_square(f, r) for f in (3, 4, 5) for r in (0, 1, 2, 7, 8, 9)}
    assert set(iter_squares(PALACE)) == expected


def test_pawn_bb_contains_own_starting_rows():
    assert PAWN_BB[Color.WHITE] & HALF_BB[Color.BLACK] == HALF_BB[Color.BLACK]
    assert PAWN_BB[Color.WHITE] & rank_bb(3) == rank_bb(3) & PAWN_BB[Color.WHITE]
    assert not PAWN_BB[Color.WHITE] & rank_bb(0)
    assert not PAWN_BB[Color.BLACK] & rank_bb(9)


def test_more_than_one():
    assert not more_than_one(0)
    assert not more_than_one(square_bb(40))
    assert more_than_one(square_bb(3) | square_bb(70))


def test_shift_drops_edges():
    assert shift(RANK_9_BB, NORTH) == 0
    assert shift(RANK_0_BB, SOUTH) == 0
    assert shift(FILE_I_BB, EAST) == 0
    assert shift(FILE_A_BB, WEST) == 0
    assert shift(FILE_A_BB, SOUTH_WEST) == 0
    assert shift(FILE_I_BB, SOUTH_EAST) == 0


def test_shift_moves_single_square():
    s = make_square(4, 4)
    assert shift(square_bb(s), NORTH) == square_bb(s + NORTH)
    assert shift(square_bb(s), SOUTH) == square_bb(s + SOUTH)
    assert shift(square_bb(s), EAST) == square_bb(s + EAST)
    assert shift(square_bb(s), WEST) == square_bb(s + WEST)
    assert shift(square_bb(s), NORTH_EAST) == square_bb(s + NORTH_EAST)
    assert shift(square_bb(s), NORTH_WEST) == square_bb(s + NORTH_WEST)
    assert shift(square_bb(s), SOUTH_EAST) == square_bb(s + SOUTH_EAST)
    assert shift(square_bb(s), SOUTH_WEST) == square_bb(s + SOUTH_WEST)
    assert shift(square_bb(s), 2 * NORTH) == square_bb(s + 2 * NORTH)
    assert shift(square_bb(s), 2 * SOUTH) == square_bb(s + 2 * SOUTH)


def test_shift_unknown_direction_is_empty():
    assert shift(square_bb(40), 3) == 0


def test_white_pawn_before_river_only_forward():
    s = make_square(4, 3)
    assert pawn_attacks_bb(Color.WHITE, s) == square_bb(s + NORTH)


def test_white_pawn_after_river_sideways():
    s = make_square(4, 5)
    expected = square_bb(s + NORTH) | square_bb(s + EAST) | square_bb(s + WEST)
    assert pawn_attacks_bb(Color.WHITE, s) == expected


def test_black_pawn_mirror():
    s = make_square(4, 6)
    assert pawn_attacks_bb(Color.BLACK, s) == square_bb(s + SOUTH)
    t = make_square(0, 4)
    assert pawn_attacks_bb(Color.BLACK, t) == square_bb(t + SOUTH) | square_bb(t + EAST)


@pytest.mark.parametrize("c", [Color.WHITE, Color.BLACK])
def test_pawn_attacks_to_is_inverse(c):
    for s in ALL:
        for t in ALL:
            forward = bool(pawn_attacks_bb(c, s) & square_bb(t))
            backward = bool(pawn_attacks_to_bb(c, t) & square_bb(s))
            assert forward == backward


def test_distances():
    for x in range(0, 90, 7):
        for y in range(0, 90, 5):
            assert distance(x, y) == distance(y, x)
            assert distance(x, y) == max(file_distance(x, y), rank_distance(x, y))
        assert distance(x, x) == 0
    assert distance(make_square(0, 0), make_square(8, 9)) == 9


def test_edge_distances_symmetric():
    for f in range(9):
        assert file_edge_distance(f) == file_edge_distance(8 - f)
    for r in range(10):
        assert rank_edge_distance(r) == rank_edge_distance(9 - r)
    assert file_edge_distance(0) == 0
    assert rank_edge_distance(9) == 0


def test_lsb_and_pop_lsb():
    b = square_bb(17) | square_bb(64) | square_bb(89)
    assert lsb(b) == 17
    assert least_significant_square_bb(b) == square_bb(17)
    s, rest = pop_lsb(b)
    assert s == 17
    assert rest == square_bb(64) | square_bb(89)
    assert lsb(square_bb(89)) == 89


def test_lsb_empty_raises():
    with pytest.raises(ValueError):
        lsb(0)
    with pytest.raises(ValueError):
        pop_lsb(0)
    with pytest.raises(ValueError):
        least_significant_square_bb(0)


def test_iter_squares_round_trip():
    squares = [2, 11, 45, 66, 88]
    b = 0
    for s in squares:
        b |= square_bb(s)
    assert list(iter_squares(b)) == squares
    assert popcount(b) == len(squares)
    assert list(iter_squares(0)) == []