"""Bitboards for the 9x10 xiangqi board, held in plain integers.

Bit ``s`` stands for square ``s`` (``rank * 9 + file``); the board uses bits 0-89.
Shifts keep at most 128 bits, as a 128-bit board word would.
"""

from __future__ import annotations

from collections.abc import Iterator

from .types import (
    EAST,
    FILE_I,
    FILE_NB,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    RANK_4,
    RANK_5,
    RANK_9,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    SQUARE_NB,
    WEST,
    Color,
    file_of,
    is_ok,
    rank_of,
)

_MASK128 = (1 << 128) - 1

ALL_SQUARES = (1 << SQUARE_NB) - 1

PALACE = (0x70381C << 64) | 0xE07038

FILE_A_BB = (0x20100 << 64) | 0x8040201008040201
FILE_B_BB = FILE_A_BB << 1
FILE_C_BB = FILE_A_BB << 2
FILE_D_BB = FILE_A_BB << 3
FILE_E_BB = FILE_A_BB << 4
FILE_F_BB = FILE_A_BB << 5
FILE_G_BB = FILE_A_BB << 6
FILE_H_BB = FILE_A_BB << 7
FILE_I_BB = FILE_A_BB << 8

RANK_0_BB = 0x1FF
RANK_1_BB = RANK_0_BB << (FILE_NB * 1)
RANK_2_BB = RANK_0_BB << (FILE_NB * 2)
RANK_3_BB = RANK_0_BB << (FILE_NB * 3)
RANK_4_BB = RANK_0_BB << (FILE_NB * 4)
RANK_5_BB = RANK_0_BB << (FILE_NB * 5)
RANK_6_BB = RANK_0_BB << (FILE_NB * 6)
RANK_7_BB = RANK_0_BB << (FILE_NB * 7)
RANK_8_BB = RANK_0_BB << (FILE_NB * 8)
RANK_9_BB = RANK_0_BB << (FILE_NB * 9)

PAWN_FILE_BB = FILE_A_BB | FILE_C_BB | FILE_E_BB | FILE_G_BB | FILE_I_BB

# Index 0: ranks 0-4 (white's half); index 1: ranks 5-9 (black's half).
HALF_BB = (
    RANK_0_BB | RANK_1_BB | RANK_2_BB | RANK_3_BB | RANK_4_BB,
    RANK_5_BB | RANK_6_BB | RANK_7_BB | RANK_8_BB | RANK_9_BB,
)

# Squares a pawn of each colour may ever stand on.
PAWN_BB = (
    HALF_BB[Color.BLACK] | ((RANK_3_BB | RANK_4_BB) & PAWN_FILE_BB),
    HALF_BB[Color.WHITE] | ((RANK_6_BB | RANK_5_BB) & PAWN_FILE_BB),
)


def square_bb(s: int) -> int:
    """The bitboard holding square ``s`` alone."""
    if not is_ok(s):
        raise ValueError(f"square out of range: {s}")
    return 1 << s


def rank_bb(r: int) -> int:
    """All squares on rank ``r``."""
    return RANK_0_BB << (FILE_NB * r)


def file_bb(f: int) -> int:
    """All squares on file ``f``."""
    return FILE_A_BB << f


def more_than_one(b: int) -> bool:
    return bool(b & (b - 1))


def shift(b: int, d: int) -> int:
    """Move every square of ``b`` one or two steps in direction ``d``.

    Squares that would leave the board sideways or past rank 9 are dropped.
    An unsupported direction gives the empty bitboard.
    """
    if d == NORTH:
        return ((b & ~RANK_9_BB) << NORTH) & _MASK128
    if d == SOUTH:
        return b >> NORTH
    if d == NORTH + NORTH:
        return ((b & ~RANK_9_BB & ~RANK_8_BB) << (NORTH + NORTH)) & _MASK128
    if d == SOUTH + SOUTH:
        return b >> (NORTH + NORTH)
    if d == EAST:
        return ((b & ~FILE_I_BB) << EAST) & _MASK128
    if d == WEST:
        return (b & ~FILE_A_BB) >> EAST
    if d == NORTH_EAST:
        return ((b & ~FILE_I_BB) << NORTH_EAST) & _MASK128
    if d == NORTH_WEST:
        return ((b & ~FILE_A_BB) << NORTH_WEST) & _MASK128
    if d == SOUTH_EAST:
        return (b & ~FILE_I_BB) >> NORTH_WEST
    if d == SOUTH_WEST:
        return (b & ~FILE_A_BB) >> NORTH_EAST
    return 0


def _pawn_crossed(c: Color, s: int) -> bool:
    return (c == Color.WHITE and rank_of(s) > RANK_4) or (
        c == Color.BLACK and rank_of(s) < RANK_5
    )


def pawn_attacks_bb(c: Color, s: int) -> int:
    """Squares a pawn of colour ``c`` on ``s`` attacks."""
    b = square_bb(s)
    attack = shift(b, NORTH if c == Color.WHITE else SOUTH)
    if _pawn_crossed(c, s):
        attack |= shift(b, WEST) | shift(b, EAST)
    return attack


def pawn_attacks_to_bb(c: Color, s: int) -> int:
    """Squares from which a pawn of colour ``c`` would attack ``s``."""
    b = square_bb(s)
    attack = shift(b, SOUTH if c == Color.WHITE else NORTH)
    if _pawn_crossed(c, s):
        attack |= shift(b, WEST) | shift(b, EAST)
    return attack


def file_distance(x: int, y: int) -> int:
    return abs(file_of(x) - file_of(y))


def rank_distance(x: int, y: int) -> int:
    return abs(rank_of(x) - rank_of(y))


def distance(x: int, y: int) -> int:
    """Number of king steps from ``x`` to ``y`` on an open board."""
    return max(file_distance(x, y), rank_distance(x, y))


def file_edge_distance(f: int) -> int:
    return min(f, FILE_I - f)


def rank_edge_distance(r: int) -> int:
    return min(r, RANK_9 - r)


def popcount(b: int) -> int:
    return b.bit_count()


def lsb(b: int) -> int:
    """The lowest square in a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard has no least significant square")
    return (b & -b).bit_length() - 1


def least_significant_square_bb(b: int) -> int:
    if not b:
        raise ValueError("empty bitboard has no least significant square")
    return b & -b


def pop_lsb(b: int) -> tuple[int, int]:
    """Return the lowest square of ``b`` and ``b`` without it."""
    s = lsb(b)
    return s, b & (b - 1)


def iter_squares(b: int) -> Iterator[int]:
    """Yield the squares of ``b`` from lowest to highest."""
    while b:
        yield lsb(b)
        b &= b - 1