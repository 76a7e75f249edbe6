"""Precomputed move and region bitboards for knights, kings, ranks and files."""

from __future__ import annotations

from functools import cache

from bitchess.bits import bitboard_of
from bitchess.coords import ALL_COLORS, Color, File, Rank
from bitchess.square import ALL_SQUARES, Square


def _deltas(src: Square, dest: Square) -> tuple[int, int]:
    return abs(src.rank() - dest.rank()), abs(src.file() - dest.file())


def _knight_targets(src: Square) -> int:
    return bitboard_of(
        dest for dest in ALL_SQUARES if _deltas(src, dest) in ((2, 1), (1, 2))
    )


def _king_targets(src: Square) -> int:
    return bitboard_of(
        dest
        for dest in ALL_SQUARES
        if dest != src and max(_deltas(src, dest)) <= 1
    )


@cache
def build_knight_moves() -> tuple[int, ...]:
    """Knight destinations for each of the 64 squares."""
    return tuple(_knight_targets(src) for src in ALL_SQUARES)


@cache
def build_king_moves() -> tuple[int, ...]:
    """King destinations (without castling) for each of the 64 squares."""
    return tuple(_king_targets(src) for src in ALL_SQUARES)


def kingside_castle_squares(color: Color) -> int:
    """The squares between king and rook that must be empty to castle kingside."""
    rank = color.backrank()
    return Square.make(rank, File.F).bitboard() ^ Square.make(rank, File.G).bitboard()


def queenside_castle_squares(color: Color) -> int:
    """The squares between king and rook that must be empty to castle queenside."""
    rank = color.backrank()
    return bitboard_of(Square.make(rank, f) for f in (File.B, File.C, File.D))


def castle_moves() -> int:
    """Every square a king may start from or land on when castling, for both sides."""
    return bitboard_of(
        Square.make(color.backrank(), f)
        for color in ALL_COLORS
        for f in (File.C, File.E, File.G)
    )


@cache
def rank_masks() -> tuple[int, ...]:
    """The squares of each rank, indexed by rank."""
    return tuple(
        bitboard_of(sq for sq in ALL_SQUARES if sq.rank() == rank) for rank in Rank
    )


@cache
def file_masks() -> tuple[int, ...]:
    """The squares of each file, indexed by file."""
    return tuple(
        bitboard_of(sq for sq in ALL_SQUARES if sq.file() == f) for f in File
    )


@cache
def adjacent_file_masks() -> tuple[int, ...]:
    """The squares on the one or two files beside each file, indexed by file."""
    return tuple(
        bitboard_of(sq for sq in ALL_SQUARES if abs(sq.file() - f) == 1) for f in File
    )


@cache
def edges() -> int:
    """The squares on the outer ring of the board."""
    return bitboard_of(
        sq
        for sq in ALL_SQUARES
        if sq.rank() in (Rank.FIRST, Rank.EIGHTH) or sq.file() in (File.A, File.H)
    )