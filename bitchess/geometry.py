"""Lines, rays and pawn tables derived from the board's geometry."""

from __future__ import annotations

from functools import cache
from typing import Iterator, Optional

from bitchess.bits import EMPTY, bitboard_of
from bitchess.coords import ALL_COLORS, ALL_FILES, Piece, Rank
from bitchess.square import ALL_SQUARES, Square


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _direction(src: Square, dest: Square) -> Optional[tuple[int, int]]:
    """The unit step from ``src`` towards ``dest``, or None if they do not line up."""
    if src == dest:
        return None
    d_rank = dest.rank() - src.rank()
    d_file = dest.file() - src.file()
    if d_rank == 0 or d_file == 0 or abs(d_rank) == abs(d_file):
        return _sign(d_rank), _sign(d_file)
    return None


def _walk(src: Square, step: tuple[int, int]) -> Iterator[Square]:
    """Squares reached from ``src`` by repeating ``step``, up to the edge."""
    rank, file = int(src.rank()), int(src.file())
    while True:
        rank += step[0]
        file += step[1]
        if not (0 <= rank < 8 and 0 <= file < 8):
            return
        yield Square((rank << 3) | file)


def _line(src: Square, dest: Square) -> int:
    step = _direction(src, dest)
    if step is None:
        return EMPTY
    back = (-step[0], -step[1])
    return src.bitboard() | bitboard_of(_walk(src, step)) | bitboard_of(_walk(src, back))


def _between(src: Square, dest: Square) -> int:
    step = _direction(src, dest)
    if step is None:
        return EMPTY
    inner = []
    for sq in _walk(src, step):
        if sq == dest:
            break
        inner.append(sq)
    return bitboard_of(inner)


@cache
def build_lines() -> tuple[tuple[int, ...], ...]:
    """For each pair of squares, the full line through both, or 0 if they do not align."""
    return tuple(tuple(_line(src, dest) for dest in ALL_SQUARES) for src in ALL_SQUARES)


@cache
def build_between() -> tuple[tuple[int, ...], ...]:
    """For each pair of squares, the squares strictly between them on a line, or 0."""
    return tuple(
        tuple(_between(src, dest) for dest in ALL_SQUARES) for src in ALL_SQUARES
    )


_ROOK_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_BISHOP_STEPS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


@cache
def build_rays(piece: Piece) -> tuple[int, ...]:
    """Squares a rook or bishop attacks from each square on an empty board."""
    if piece is Piece.ROOK:
        steps = _ROOK_STEPS
    elif piece is Piece.BISHOP:
        steps = _BISHOP_STEPS
    else:
        raise ValueError(f"rays exist only for rooks and bishops, not {piece!r}")
    return tuple(
        bitboard_of(sq for step in steps for sq in _walk(src, step))
        for src in ALL_SQUARES
    )


def _pawn_pushes(src: Square, color) -> int:
    if src.rank() == color.second_rank():
        one = src.uforward(color)
        return one.bitboard() ^ one.uforward(color).bitboard()
    ahead = src.forward(color)
    return EMPTY if ahead is None else ahead.bitboard()


def _pawn_captures(src: Square, color) -> int:
    ahead = src.forward(color)
    if ahead is None:
        return EMPTY
    return bitboard_of(sq for sq in (ahead.left(), ahead.right()) if sq is not None)


@cache
def build_pawn_moves() -> tuple[tuple[int, ...], ...]:
    """Quiet pawn pushes, indexed by colour and then by square."""
    return tuple(
        tuple(_pawn_pushes(src, color) for src in ALL_SQUARES) for color in ALL_COLORS
    )


@cache
def build_pawn_attacks() -> tuple[tuple[int, ...], ...]:
    """Pawn capture squares, indexed by colour and then by square."""
    return tuple(
        tuple(_pawn_captures(src, color) for src in ALL_SQUARES) for color in ALL_COLORS
    )


def pawn_source_double_moves() -> int:
    """The squares a pawn may start a double push from: the second and seventh ranks."""
    return bitboard_of(
        Square.make(rank, f) for rank in (Rank.SECOND, Rank.SEVENTH) for f in ALL_FILES
    )


def pawn_dest_double_moves() -> int:
    """The squares a pawn lands on after a double push: the fourth and fifth ranks."""
    return bitboard_of(
        Square.make(rank, f) for rank in (Rank.FOURTH, Rank.FIFTH) for f in ALL_FILES
    )