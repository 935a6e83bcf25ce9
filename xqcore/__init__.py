"""Core building blocks for Xiangqi engines: types, bitboards, attacks, helpers and bench positions."""

__version__ = "0.1.0"

__all__ = [
    "attacks",
    "bench_defaults",
    "bench_games_a",
    "bitboard",
    "debug",
    "misc",
    "types",
]