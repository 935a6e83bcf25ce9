# xqcore

Core building blocks for Xiangqi (Chinese chess) engines, in plain Python.

The board is 9 files (`a`–`i`) by 10 ranks (`0`–`9`), giving 90 squares
numbered from 0 (a0) to 89 (i9), with `square = rank * 9 + file`. Sets of
squares are held as Python integers used as 128-bit bitboards.

## What is inside

- `xqcore.types` – `Color`, `PieceType`, `Piece`, `Bound`; square helpers
  (`make_square`, `file_of`, `rank_of`, `is_ok`, `flip_rank`, `flip_file`);
  piece helpers (`make_piece`, `type_of`, `color_of`, `swap_piece_color`,
  `opposite_color`); score helpers (`mate_in`, `mated_in`, `is_valid`,
  `is_win`, `is_loss`, `is_decisive`); `make_key`; the 16-bit `Move`; a
  `BloomFilter` byte table for repetition checks; and the `DirtyPiece`
  dataclass.
- `xqcore.bitboard` – rank, file, palace and half-board masks; `square_bb`,
  `rank_bb`, `file_bb`, `shift`, `pawn_attacks_bb`, `pawn_attacks_to_bb`,
  `distance`, `file_distance`, `rank_distance`, edge distances, `popcount`,
  `lsb`, `least_significant_square_bb`, `pop_lsb` (returns the square and the
  remaining bitboard) and `iter_squares`.
- `xqcore.attacks` – `sliding_attack` for rooks and cannons (a cannon
  captures over one hurdle), `lame_leaper_path` and `lame_leaper_attack` for
  horses and elephants with their blocking "legs", `pseudo_attacks` on an
  empty board for every piece type, `attacks_bb` for an occupied board,
  `line_bb`, `between_bb`, `aligned`, and `pretty` for an ASCII picture of a
  bitboard. Results are memoised.
- `xqcore.misc` – `engine_version_info`, `engine_info`, `now` (monotonic
  milliseconds), string helpers (`split`, `remove_whitespace`,
  `is_whitespace`, `str_to_size_t`), file helpers (`read_file_to_string`,
  which returns bytes or `None`; `read_compressed_nnue`, which decompresses a
  zstd file into an `io.BytesIO`), `get_working_directory`,
  `get_binary_directory`, the xorshift64* `PRNG`, `mul_hi64`,
  `move_to_front` and `start_logger`, which copies standard input and output
  to a file.
- `xqcore.debug` – `DebugStats`, thread-safe counters for hit rates, means,
  standard deviations, extremes and correlations in 32 numbered slots.
- `xqcore.bench_defaults` – `default_fens()`, the positions of a fixed-depth
  benchmark, the initial position first.
- `xqcore.bench_games_a` – `games_a()`, two recorded games, each a tuple of
  full FEN strings.

## Examples

Squares and moves:

```python
from xqcore.types import Move, make_square, file_of, rank_of

frm = make_square(1, 2)   # b2
to = make_square(4, 2)    # e2
move = Move.make(frm, to)
assert move.from_sq() == frm and move.to_sq() == to
assert file_of(to) == 4 and rank_of(to) == 2
assert not Move.none()
```

Attacks on a board:

```python
from xqcore.attacks import attacks_bb, pretty
from xqcore.bitboard import popcount, iter_squares, square_bb
from xqcore.types import PieceType, make_square

rook = make_square(0, 0)
blocker = make_square(0, 3)
targets = attacks_bb(PieceType.ROOK, rook, square_bb(blocker))
print(pretty(targets))
print(popcount(targets), list(iter_squares(targets)))
```

Benchmark positions:

```python
from xqcore.bench_defaults import default_fens
from xqcore.bench_games_a import games_a

print(default_fens()[0])
print(len(games_a()), len(games_a()[0]))
```

Debug statistics:

```python
from xqcore.debug import DebugStats

stats = DebugStats()
for value in (3, 5, 7):
    stats.mean_of(value, 0)
    stats.extremes_of(value, 0)
print("\n".join(stats.report()))
```

## What it does not do

This is a library of parts, not an engine. It holds no board position,
generates no moves, does not search or evaluate, and has no command or
protocol loop to run. It supplies benchmark positions but does not turn them
into command lists for a bench run.

## Requirements

Python 3.10 or newer; `zstandard` is used for reading compressed network files.
Install the `test` extra to run the tests with pytest.