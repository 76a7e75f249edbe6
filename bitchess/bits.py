"""Helpers for 64-bit bitboards stored as Python integers."""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Iterator

from bitchess.square import ALL_SQUARES, Square

UNIVERSE = (1 << 64) - 1
EMPTY = 0


def all_squares() -> tuple[Square, ...]:
    """Every square of the board, from A1 to H8."""
    return ALL_SQUARES


def squares_of(bitboard: int) -> Iterator[Square]:
    """Yield the squares set in ``bitboard``, lowest index first."""
    remaining = bitboard & UNIVERSE
    while remaining:
        lowest = remaining & -remaining
        yield Square(lowest.bit_length() - 1)
        remaining ^= lowest


def bitboard_of(squares: Iterable[Square]) -> int:
    """The bitboard with exactly the given squares set."""
    return reduce(lambda board, sq: board | sq.bitboard(), squares, EMPTY)


def popcount(bitboard: int) -> int:
    """How many squares are set in ``bitboard``."""
    return (bitboard & UNIVERSE).bit_count()