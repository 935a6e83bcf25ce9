from xqcore.bench_defaults import default_fens

START_FEN = "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w"


def _rank_width(rank):
    return sum(int(ch) if ch.isdigit() else 1 for ch in rank)


def test_first_is_start_position():
    assert default_fens()[0] == START_FEN


def test_last_position():
    assert default_fens()[-1] == "CnN1k1b2/c3a4/4ba3/9/2nr5/9/9/4C4/4A4/4KA3 w"


def test_count_and_uniqueness():
    fens = default_fens()
    assert len(fens) == 49
    assert len(set(fens)) == 49


def test_each_fen_is_well_formed():
    for fen in default_fens():
        board, side = fen.split(" ")
        ranks = board.split("/")
        assert len(ranks) == 10
        assert [_rank_width(r) for r in ranks] == [9] * 10
        assert side in ("w", "b")
        assert board.count("k") == 1
        assert board.count("K") == 1
        assert set(board) <= set("rnbakcpRNBAKCP/123456789")


def test_no_option_lines():
    assert not any("setoption" in fen for fen in default_fens())


def test_both_sides_to_move_present():
    sides = {fen.split(" ")[1] for fen in default_fens()}
    assert sides == {"w", "b"}