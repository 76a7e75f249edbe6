"""Bitboard primitives for chess: squares, attack tables, sliding-piece lookups and Zobrist keys."""

__version__ = "0.1.0"