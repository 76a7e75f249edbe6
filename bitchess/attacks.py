"""Move and region lookups used by move generation."""

from __future__ import annotations

from functools import cache

from bitchess import geometry, tables
from bitchess.bits import EMPTY, UNIVERSE
from bitchess.coords import Color, File, Piece, Rank
from bitchess.sliders import SlidingTable
from bitchess.square import Square

EDGES: int = tables.edges()


@cache
def _rook_table() -> SlidingTable:
    return SlidingTable(Piece.ROOK)


@cache
def _bishop_table() -> SlidingTable:
    return SlidingTable(Piece.BISHOP)


def bishop_rays(sq: Square) -> int:
    """Squares a bishop on ``sq`` attacks on an empty board."""
    return geometry.build_rays(Piece.BISHOP)[sq.index]


def rook_rays(sq: Square) -> int:
    """Squares a rook on ``sq`` attacks on an empty board."""
    return geometry.build_rays(Piece.ROOK)[sq.index]


def rook_moves(sq: Square, blockers: int) -> int:
    """Rook moves from ``sq`` given the occupied squares ``blockers``."""
    return _rook_table().moves(sq, blockers)


def bishop_moves(sq: Square, blockers: int) -> int:
    """Bishop moves from ``sq`` given the occupied squares ``blockers``."""
    return _bishop_table().moves(sq, blockers)


def king_moves(sq: Square) -> int:
    """King moves from ``sq``, castling aside."""
    return tables.build_king_moves()[sq.index]


def knight_moves(sq: Square) -> int:
    """Knight moves from ``sq``."""
    return tables.build_knight_moves()[sq.index]


def pawn_attacks(sq: Square, color: Color, blockers: int) -> int:
    """Squares a ``color`` pawn on ``sq`` captures on, among ``blockers``."""
    return geometry.build_pawn_attacks()[color][sq.index] & blockers


def castle_moves() -> int:
    """King source and destination squares of castling, for both sides."""
    return tables.castle_moves()


def pawn_quiets(sq: Square, color: Color, blockers: int) -> int:
    """Non-capturing pawn pushes from ``sq`` given the occupied squares ``blockers``."""
    if sq.uforward(color).bitboard() & blockers:
        return EMPTY
    return geometry.build_pawn_moves()[color][sq.index] & ~blockers & UNIVERSE


def pawn_moves(sq: Square, color: Color, blockers: int) -> int:
    """All pawn moves from ``sq``: captures among ``blockers`` and free pushes."""
    return pawn_attacks(sq, color, blockers) ^ pawn_quiets(sq, color, blockers)


def line(sq1: Square, sq2: Square) -> int:
    """The whole line through both squares, edge to edge, or 0 if they do not align."""
    return geometry.build_lines()[sq1.index][sq2.index]


def between(sq1: Square, sq2: Square) -> int:
    """The squares strictly between the two squares on a line, or 0."""
    return geometry.build_between()[sq1.index][sq2.index]


def rank_mask(rank: Rank) -> int:
    """All squares on ``rank``."""
    return tables.rank_masks()[rank]


def file_mask(file: File) -> int:
    """All squares on ``file``."""
    return tables.file_masks()[file]


def adjacent_files(file: File) -> int:
    """All squares on the files beside ``file``."""
    return tables.adjacent_file_masks()[file]


def pawn_source_double_moves() -> int:
    """Squares from which a pawn may push two squares."""
    return geometry.pawn_source_double_moves()


def pawn_dest_double_moves() -> int:
    """Squares a pawn lands on after pushing two squares."""
    return geometry.pawn_dest_double_moves()