"""Core value types for the xiangqi engine: colours, pieces, squares, moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MASK64 = (1 << 64) - 1

MAX_MOVES = 128
MAX_PLY = 246

COLOR_NB = 2
PIECE_TYPE_NB = 8
PIECE_NB = 16

FILE_NB = 9
RANK_NB = 10
SQUARE_NB = 90
SQ_NONE = 90

FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H, FILE_I = range(9)
RANK_0, RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8, RANK_9 = range(10)

SQ_A0 = 0
SQ_I9 = 89

NORTH = 9
EAST = 1
SOUTH = -NORTH
WEST = -EAST
NORTH_EAST = NORTH + EAST
SOUTH_EAST = SOUTH + EAST
SOUTH_WEST = SOUTH + WEST
NORTH_WEST = NORTH + WEST

VALUE_ZERO = 0
VALUE_DRAW = 0
VALUE_NONE = 32002
VALUE_INFINITE = 32001
VALUE_MATE = 32000
VALUE_MATE_IN_MAX_PLY = VALUE_MATE - MAX_PLY
VALUE_MATED_IN_MAX_PLY = -VALUE_MATE_IN_MAX_PLY

ROOK_VALUE = 1305
ADVISOR_VALUE = 219
CANNON_VALUE = 773
PAWN_VALUE = 144
KNIGHT_VALUE = 720
BISHOP_VALUE = 187

DEPTH_QS = 0
DEPTH_UNSEARCHED = -2
DEPTH_ENTRY_OFFSET = -3


class Color(IntEnum):
    WHITE = 0
    BLACK = 1


class Bound(IntEnum):
    NONE = 0
    UPPER = 1
    LOWER = 2
    EXACT = 3


class PieceType(IntEnum):
    NO_PIECE_TYPE = 0
    ALL_PIECES = 0
    ROOK = 1
    ADVISOR = 2
    CANNON = 3
    PAWN = 4
    KNIGHT = 5
    BISHOP = 6
    KING = 7
    KNIGHT_TO = 8
    PAWN_TO = 9


class Piece(IntEnum):
    NO_PIECE = 0
    W_ROOK = 1
    W_ADVISOR = 2
    W_CANNON = 3
    W_PAWN = 4
    W_KNIGHT = 5
    W_BISHOP = 6
    W_KING = 7
    B_ROOK = 9
    B_ADVISOR = 10
    B_CANNON = 11
    B_PAWN = 12
    B_KNIGHT = 13
    B_BISHOP = 14
    B_KING = 15


_TYPE_VALUES = (
    VALUE_ZERO,
    ROOK_VALUE,
    ADVISOR_VALUE,
    CANNON_VALUE,
    PAWN_VALUE,
    KNIGHT_VALUE,
    BISHOP_VALUE,
    VALUE_ZERO,
)

# Indexed by Piece value (0..15).
PIECE_VALUE = _TYPE_VALUES + _TYPE_VALUES


def is_valid(value: int) -> bool:
    return value != VALUE_NONE


def _require_valid(value: int) -> None:
    if not is_valid(value):
        raise ValueError("VALUE_NONE is not a search value")


def is_win(value: int) -> bool:
    _require_valid(value)
    return value >= VALUE_MATE_IN_MAX_PLY


def is_loss(value: int) -> bool:
    _require_valid(value)
    return value <= VALUE_MATED_IN_MAX_PLY


def is_decisive(value: int) -> bool:
    return is_win(value) or is_loss(value)


def mate_in(ply: int) -> int:
    return VALUE_MATE - ply


def mated_in(ply: int) -> int:
    return -VALUE_MATE + ply


def make_square(f: int, r: int) -> int:
    return r * FILE_NB + f


def make_piece(c: Color, pt: PieceType) -> Piece:
    return Piece((int(c) << 3) + int(pt))


def type_of(pc: int) -> PieceType:
    return PieceType(int(pc) & 7)


def color_of(pc: int) -> Color:
    if pc == Piece.NO_PIECE:
        raise ValueError("NO_PIECE has no colour")
    return Color(int(pc) >> 3)


def swap_piece_color(pc: Piece) -> Piece:
    """Return the same piece type in the other colour."""
    if pc == Piece.NO_PIECE:
        raise ValueError("NO_PIECE has no colour")
    return Piece(int(pc) ^ 8)


def opposite_color(c: Color) -> Color:
    return Color(int(c) ^ Color.BLACK)


def is_ok(s: int) -> bool:
    return SQ_A0 <= s <= SQ_I9


def file_of(s: int) -> int:
    return s % FILE_NB


def rank_of(s: int) -> int:
    return s // FILE_NB


def flip_rank(s: int) -> int:
    """Mirror a square vertically (A0 <-> A9)."""
    return make_square(file_of(s), RANK_9 - rank_of(s))


def flip_file(s: int) -> int:
    """Mirror a square horizontally (A0 <-> I0)."""
    return make_square(FILE_I - file_of(s), rank_of(s))


def make_key(seed: int) -> int:
    """A 64-bit key from a linear congruential step."""
    return (seed * 6364136223846793005 + 1442695040888963407) & MASK64


class Move:
    """A move packed in 16 bits: destination in bits 0-6, origin in bits 7-13."""

    __slots__ = ("_data",)

    def __init__(self, data: int = 0) -> None:
        if not 0 <= data <= 0xFFFF:
            raise ValueError(f"move data out of range: {data}")
        self._data = data

    @classmethod
    def make(cls, from_sq: int, to_sq: int) -> Move:
        return cls((from_sq << 7) + to_sq)

    @classmethod
    def none(cls) -> Move:
        return cls(0)

    @classmethod
    def null(cls) -> Move:
        return cls(129)

    @property
    def raw(self) -> int:
        return self._data

    def from_sq(self) -> int:
        if not self.is_ok():
            raise ValueError("none or null move has no origin square")
        return (self._data >> 7) & 0x7F

    def to_sq(self) -> int:
        if not self.is_ok():
            raise ValueError("none or null move has no destination square")
        return self._data & 0x7F

    def from_to(self) -> int:
        return self._data & 0x3FFF

    def is_ok(self) -> bool:
        return self._data not in (0, 129)

    def __bool__(self) -> bool:
        return self._data != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return make_key(self._data)

    def __repr__(self) -> str:
        return f"Move({self._data})"


class BloomFilter:
    """A byte table indexed by the low bits of a key, for quick repetition checks."""

    FILTER_SIZE = 1 << 14

    def __init__(self) -> None:
        self._table = bytearray(self.FILTER_SIZE)

    def __getitem__(self, key: int) -> int:
        return self._table[key & (self.FILTER_SIZE - 1)]

    def __setitem__(self, key: int, value: int) -> None:
        self._table[key & (self.FILTER_SIZE - 1)] = value


@dataclass
class DirtyPiece:
    """What a move changes on the board."""

    pc: Piece
    from_sq: int
    to_sq: int
    remove_sq: int = SQ_NONE
    remove_pc: Piece = Piece.NO_PIECE
    requires_refresh: list[bool] = field(default_factory=lambda: [False, False])