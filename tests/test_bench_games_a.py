import pytest

from xqcore.bench_games_a import games_a


def _rank_width(rank):
    return sum(int(ch) if ch.isdigit() else 1 for ch in rank)


def test_two_games():
    games = games_a()
    assert len(games) == 2
    assert len(games[0]) == 57
    assert len(games[1]) == 52


def test_first_position_pinned():
    assert games_a()[0][0] == (
        "2bakab2/9/c3c1n2/p3p1p1p/1npr5/2P2NP2/P3P3P/2CCB4/4A4/1NBAKR3 b - - 1 1"
    )
    assert games_a()[1][-1] == (
        "5k3/1N2a4/5a3/8C/4c1b1P/2B6/6n1P/5A3/4K4/3A5 w - - 3 52"
    )


def test_halfmove_clock_pinned():
    assert games_a()[0][15].split()[4] == "1"
    assert games_a()[1][40].split()[4] == "29"


@pytest.mark.parametrize("index", [0, 1])
def test_board_shape(index):
    game = games_a()[index]
    for fen in game:
        fields = fen.split()
        assert len(fields) == 6
        ranks = fields[0].split("/")
        assert len(ranks) == 10
        assert [_rank_width(r) for r in ranks] == [9] * 10
        assert fields[0].count("k") == 1
        assert fields[0].count("K") == 1
        assert fields[2:4] == ["-", "-"]


def test_side_to_move_constant_per_game():
    first, second = games_a()
    assert {fen.split()[1] for fen in first} == {"b"}
    assert {fen.split()[1] for fen in second} == {"w"}


def test_move_numbers_consecutive():
    for game in games_a():
        numbers = [int(fen.split()[5]) for fen in game]
        assert numbers == list(range(1, len(game) + 1))


def test_positions_unique_within_each_game():
    for game in games_a():
        boards = [fen.split()[0] for fen in game]
        assert len(set(boards)) == len(boards)