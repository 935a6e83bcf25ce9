"""Attack sets for every xiangqi piece, plus line and between tables.

Sliding pieces (rook, cannon) and lame leapers (knight, bishop) are computed
from the occupancy that can block them; results are memoised on that relevant
occupancy only, so repeated queries stay cheap.
"""

from __future__ import annotations

from functools import lru_cache

from .bitboard import (
    HALF_BB,
    PALACE,
    distance,
    pawn_attacks_bb,
    pawn_attacks_to_bb,
    square_bb,
)
from .types import (
    EAST,
    FILE_I,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    RANK_0,
    RANK_4,
    RANK_9,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    WEST,
    Color,
    PieceType,
    file_of,
    is_ok,
    make_square,
    rank_of,
)

KNIGHT_DIRECTIONS = (
    2 * SOUTH + WEST,
    2 * SOUTH + EAST,
    SOUTH + 2 * WEST,
    SOUTH + 2 * EAST,
    NORTH + 2 * WEST,
    NORTH + 2 * EAST,
    2 * NORTH + WEST,
    2 * NORTH + EAST,
)
BISHOP_DIRECTIONS = (2 * NORTH_EAST, 2 * SOUTH_EAST, 2 * SOUTH_WEST, 2 * NORTH_WEST)

_SLIDERS = (PieceType.ROOK, PieceType.CANNON)
_LEAPERS = (PieceType.BISHOP, PieceType.KNIGHT, PieceType.KNIGHT_TO)

_BORDER = "+---+---+---+---+---+---+---+---+---+\n"


def _check_square(s: int) -> None:
    if not is_ok(s):
        raise ValueError(f"square out of range: {s}")


def _trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def sliding_attack(pt: PieceType, sq: int, occupied: int) -> int:
    """Rook or cannon attacks from ``sq`` given the occupied squares."""
    if pt not in _SLIDERS:
        raise ValueError(f"not a sliding piece type: {pt!r}")
    _check_square(sq)
    attack = 0
    for d in (NORTH, SOUTH, EAST, WEST):
        hurdle = False
        s = sq + d
        while is_ok(s) and distance(s - d, s) == 1:
            if pt == PieceType.ROOK or hurdle:
                attack |= 1 << s
            if occupied & (1 << s):
                if pt == PieceType.CANNON and not hurdle:
                    hurdle = True
                else:
                    break
            s += d
    return attack


def lame_leaper_path(pt: PieceType, d: int, s: int) -> int:
    """The blocking square of a knight or bishop jump in direction ``d`` from ``s``.

    For ``KNIGHT_TO`` the jump is seen from its destination, so the blocking
    square is the one next to the piece that would land on ``s``.
    Returns the empty bitboard when the jump leaves the board.
    """
    to = s + d
    if not is_ok(to) or distance(s, to) >= 4:
        return 0
    if pt == PieceType.KNIGHT_TO:
        s, to = to, s
        d = -d

    dr = NORTH if d > 0 else SOUTH
    m = _trunc_mod(d, NORTH)
    df = WEST if (m if abs(m) < NORTH // 2 else -m) < 0 else EAST

    diff = abs(file_of(to) - file_of(s)) - abs(rank_of(to) - rank_of(s))
    if diff > 0:
        s += df
    elif diff < 0:
        s += dr
    else:
        s += df + dr
    return 1 << s


def _directions(pt: PieceType) -> tuple[int, ...]:
    return BISHOP_DIRECTIONS if pt == PieceType.BISHOP else KNIGHT_DIRECTIONS


def lame_leaper_attack(pt: PieceType, s: int, occupied: int) -> int:
    """Knight, bishop or by-knight attacks from ``s`` given the occupied squares."""
    if pt not in _LEAPERS:
        raise ValueError(f"not a leaping piece type: {pt!r}")
    _check_square(s)
    b = 0
    for d in _directions(pt):
        to = s + d
        if is_ok(to) and distance(s, to) < 4 and not (lame_leaper_path(pt, d, s) & occupied):
            b |= 1 << to
    if pt == PieceType.BISHOP:
        b &= HALF_BB[rank_of(s) > RANK_4]
    return b


@lru_cache(maxsize=None)
def _relevant(pt: PieceType, s: int) -> int:
    if pt in _SLIDERS:
        return sliding_attack(PieceType.ROOK, s, 0)
    mask = 0
    for d in _directions(pt):
        mask |= lame_leaper_path(pt, d, s)
    return mask


@lru_cache(maxsize=1 << 16)
def _cached_attack(pt: PieceType, s: int, occupied: int) -> int:
    if pt in _SLIDERS:
        return sliding_attack(pt, s, occupied)
    return lame_leaper_attack(pt, s, occupied)


def _safe_destination(s: int, step: int) -> int:
    to = s + step
    return 1 << to if is_ok(to) and distance(s, to) <= 2 else 0


@lru_cache(maxsize=None)
def _pseudo(pt: PieceType, s: int, c: Color | None) -> int:
    if pt in (PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT):
        return _cached_attack(pt, s, 0)
    if pt == PieceType.CANNON:
        return 0
    if pt in (PieceType.KING, PieceType.ADVISOR):
        if not PALACE & (1 << s):
            return 0
        steps = (
            (NORTH, SOUTH, WEST, EAST)
            if pt == PieceType.KING
            else (NORTH_WEST, NORTH_EAST, SOUTH_WEST, SOUTH_EAST)
        )
        b = 0
        for step in steps:
            b |= _safe_destination(s, step)
        return b & PALACE
    if pt in (PieceType.PAWN, PieceType.PAWN_TO):
        if c is None:
            raise ValueError("pawn attacks need a colour")
        if pt == PieceType.PAWN:
            return pawn_attacks_bb(c, s)
        return pawn_attacks_to_bb(c, s)
    raise ValueError(f"no pseudo attacks for piece type {pt!r}")


def pseudo_attacks(pt: PieceType, s: int, c: Color | None = None) -> int:
    """Attacks of piece type ``pt`` from ``s`` on an empty board.

    Pawn attacks (and the reverse ``PAWN_TO`` set) need the colour ``c``.
    A cannon attacks nothing on an empty board.
    """
    _check_square(s)
    return _pseudo(PieceType(pt), s, None if c is None else Color(c))


def attacks_bb(pt: PieceType, s: int, occupied: int) -> int:
    """Attacks of piece type ``pt`` from ``s`` with the board occupied as given."""
    _check_square(s)
    pt = PieceType(pt)
    if pt in (PieceType.PAWN, PieceType.PAWN_TO):
        raise ValueError("pawn attacks depend on colour; use pseudo_attacks")
    if pt in _SLIDERS or pt in _LEAPERS:
        return _cached_attack(pt, s, occupied & _relevant(pt, s))
    return pseudo_attacks(pt, s)


@lru_cache(maxsize=None)
def _line(s1: int, s2: int) -> int:
    if pseudo_attacks(PieceType.ROOK, s1) & (1 << s2):
        return (
            attacks_bb(PieceType.ROOK, s1, 0) & attacks_bb(PieceType.ROOK, s2, 0)
        ) | (1 << s1) | (1 << s2)
    return 0


@lru_cache(maxsize=None)
def _between(s1: int, s2: int) -> int:
    b = 0
    if pseudo_attacks(PieceType.ROOK, s1) & (1 << s2):
        b = attacks_bb(PieceType.ROOK, s1, 1 << s2) & attacks_bb(PieceType.ROOK, s2, 1 << s1)
    if pseudo_attacks(PieceType.KNIGHT, s1) & (1 << s2):
        b |= lame_leaper_path(PieceType.KNIGHT_TO, s2 - s1, s1)
    return b | (1 << s2)


def line_bb(s1: int, s2: int) -> int:
    """The whole rank or file through two squares, or 0 if they share neither."""
    _check_square(s1)
    _check_square(s2)
    return _line(s1, s2)


def between_bb(s1: int, s2: int) -> int:
    """Squares strictly between ``s1`` and ``s2`` plus ``s2`` itself.

    For a knight jump the knight's blocking square stands in for the segment;
    for squares neither aligned nor a knight jump apart, only ``s2`` is set.
    """
    _check_square(s1)
    _check_square(s2)
    return _between(s1, s2)


def aligned(s1: int, s2: int, s3: int) -> bool:
    """True if the three squares share a rank or a file."""
    return bool(line_bb(s1, s2) & square_bb(s3))


def pretty(b: int) -> str:
    """An ASCII drawing of a bitboard, rank 9 at the top."""
    parts = [_BORDER]
    for r in range(RANK_9, RANK_0 - 1, -1):
        for f in range(FILE_I + 1):
            parts.append("| X " if b & (1 << make_square(f, r)) else "|   ")
        parts.append(f"| {r}\n{_BORDER}")
    parts.append("  a   b   c   d   e   f   g   h   i\n")
    return "".join(parts)