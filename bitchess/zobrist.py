"""Zobrist hashing keys for chess positions."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from typing import Sequence

from bitchess.coords import ALL_COLORS, ALL_FILES, ALL_PIECES, Color, File, Piece
from bitchess.square import NUM_SQUARES, Square

_MASK32 = 0xFFFFFFFF
NUM_CASTLE_RIGHTS = 4
DEFAULT_SEED: tuple[int, int, int, int] = (0xDEADBEEF, 0xBEEFDEAD, 0xABCDEFAB, 0x12345678)


class XorShiftRng:
    """Marsaglia's xorshift generator with 128 bits of state in four 32-bit words."""

    def __init__(self, seed: Sequence[int] = DEFAULT_SEED) -> None:
        words = tuple(int(word) & _MASK32 for word in seed)
        if len(words) != 4:
            raise ValueError(f"seed needs four 32-bit words, got {len(words)}")
        if not any(words):
            raise ValueError("seed must not be all zero")
        self.x, self.y, self.z, self.w = words

    def next_u32(self) -> int:
        """The next 32-bit output."""
        t = (self.x ^ (self.x << 11)) & _MASK32
        self.x, self.y, self.z = self.y, self.z, self.w
        self.w = (self.w ^ (self.w >> 19) ^ (t ^ (t >> 8))) & _MASK32
        return self.w

    def next_u64(self) -> int:
        """The next 64-bit output: two 32-bit outputs, the first one high."""
        high = self.next_u32()
        low = self.next_u32()
        return (high << 32) | low


@dataclass(frozen=True)
class ZobristKeys:
    """Random keys hashed into a position for each feature it has."""

    side_to_move: int
    piece_keys: tuple[tuple[tuple[int, ...], ...], ...]
    castle_keys: tuple[tuple[int, ...], ...]
    en_passant_keys: tuple[tuple[int, ...], ...]

    @classmethod
    def generate(cls, rng: XorShiftRng) -> ZobristKeys:
        """Draw all keys from ``rng``: side to move, pieces, castling, en passant."""
        side_to_move = rng.next_u64()
        piece_keys = tuple(
            tuple(tuple(rng.next_u64() for _ in range(NUM_SQUARES)) for _ in ALL_PIECES)
            for _ in ALL_COLORS
        )
        castle_keys = tuple(
            tuple(rng.next_u64() for _ in range(NUM_CASTLE_RIGHTS)) for _ in ALL_COLORS
        )
        en_passant_keys = tuple(
            tuple(rng.next_u64() for _ in ALL_FILES) for _ in ALL_COLORS
        )
        return cls(side_to_move, piece_keys, castle_keys, en_passant_keys)

    def piece(self, piece: Piece, square: Square, color: Color) -> int:
        """The key for a ``color`` ``piece`` standing on ``square``."""
        return self.piece_keys[color][piece][square.index]

    def castles(self, rights: int, color: Color) -> int:
        """The key for ``color`` holding castle rights ``rights`` (0 to 3)."""
        index = int(rights)
        if not 0 <= index < NUM_CASTLE_RIGHTS:
            raise ValueError(f"castle rights index out of range: {index}")
        return self.castle_keys[color][index]

    def en_passant(self, file: File, color: Color) -> int:
        """The key for an en passant capture on ``file`` available to ``color``."""
        return self.en_passant_keys[color][file]


@cache
def default_keys() -> ZobristKeys:
    """The keys drawn from the fixed default seed."""
    return ZobristKeys.generate(XorShiftRng(DEFAULT_SEED))