"""Blocker-indexed move tables for rooks and bishops."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence

from bitchess.bits import EMPTY, UNIVERSE, popcount, squares_of
from bitchess.coords import File, Piece, Rank
from bitchess.geometry import build_rays
from bitchess.square import ALL_SQUARES, Square
from bitchess.tables import edges, file_masks, rank_masks

_Step = Callable[[Square], Optional[Square]]


def _nw(sq: Square) -> Optional[Square]:
    left = sq.left()
    return None if left is None else left.up()


def _ne(sq: Square) -> Optional[Square]:
    right = sq.right()
    return None if right is None else right.up()


def _sw(sq: Square) -> Optional[Square]:
    left = sq.left()
    return None if left is None else left.down()


def _se(sq: Square) -> Optional[Square]:
    right = sq.right()
    return None if right is None else right.down()


_ROOK_DIRECTIONS: tuple[_Step, ...] = (Square.left, Square.right, Square.up, Square.down)
_BISHOP_DIRECTIONS: tuple[_Step, ...] = (_nw, _ne, _sw, _se)


def _check_slider(piece: Piece) -> None:
    if piece not in (Piece.ROOK, Piece.BISHOP):
        raise ValueError(f"sliding tables exist only for rooks and bishops, not {piece!r}")


def magic_mask(sq: Square, piece: Piece) -> int:
    """The squares whose occupancy can change a slider's moves from ``sq``."""
    _check_slider(piece)
    rays = build_rays(piece)[sq.index]
    if piece is Piece.BISHOP:
        return rays & ~edges() & UNIVERSE
    files, ranks = file_masks(), rank_masks()
    ends = (ranks[sq.rank()] & (files[File.A] | files[File.H])) | (
        files[sq.file()] & (ranks[Rank.FIRST] | ranks[Rank.EIGHTH])
    )
    return rays & ~ends & UNIVERSE


def blocker_subsets(mask: int) -> list[int]:
    """Every subset of ``mask``; subset k holds the mask's squares picked by the bits of k."""
    mask &= UNIVERSE
    subsets = []
    subset = EMPTY
    while True:
        subsets.append(subset)
        subset = (subset - mask) & mask
        if subset == EMPTY:
            return subsets


def _paths(sq: Square, piece: Piece) -> list[list[int]]:
    directions = _BISHOP_DIRECTIONS if piece is Piece.BISHOP else _ROOK_DIRECTIONS
    paths = []
    for step in directions:
        path = []
        nxt = step(sq)
        while nxt is not None:
            path.append(nxt.bitboard())
            nxt = step(nxt)
        paths.append(path)
    return paths


def _answer(paths: Sequence[Sequence[int]], blockers: int) -> int:
    answer = EMPTY
    for path in paths:
        for bit in path:
            answer |= bit
            if bit & blockers:
                break
    return answer


def questions_and_answers(sq: Square, piece: Piece) -> tuple[list[int], list[int]]:
    """Every blocker arrangement for ``sq`` and the moves each one allows."""
    questions = blocker_subsets(magic_mask(sq, piece))
    paths = _paths(sq, piece)
    return questions, [_answer(paths, question) for question in questions]


def random_sparse(rng: random.Random) -> int:
    """A random 64-bit number with few bits set."""
    return rng.getrandbits(64) & rng.getrandbits(64) & rng.getrandbits(64)


@dataclass(frozen=True)
class Magic:
    """A multiply-and-shift hash from blocker sets to table slots."""

    magic_number: int
    mask: int
    offset: int
    rightshift: int

    def index(self, blockers: int) -> int:
        """The table slot holding the moves for ``blockers``."""
        product = (self.magic_number * (blockers & self.mask)) & UNIVERSE
        return self.offset + (product >> self.rightshift)


def _search(
    questions: Sequence[int], answers: Sequence[int], mask: int, rng: random.Random
) -> tuple[Magic, list[int]]:
    shift = 64 - (len(questions).bit_length() - 1)
    while True:
        candidate = random_sparse(rng)
        if popcount((mask * candidate) & UNIVERSE) < 6:
            continue
        slots = [EMPTY] * len(questions)
        for question, answer in zip(questions, answers):
            j = ((candidate * question) & UNIVERSE) >> shift
            if slots[j] == EMPTY or slots[j] == answer:
                slots[j] = answer
            else:
                break
        else:
            return Magic(candidate, mask, 0, shift), slots


def find_magic(sq: Square, piece: Piece, rng: random.Random) -> Magic:
    """Search for a collision-free magic for ``piece`` on ``sq``; its offset is 0."""
    questions, answers = questions_and_answers(sq, piece)
    magic, _ = _search(questions, answers, magic_mask(sq, piece), rng)
    return magic


class SlidingTable:
    """Moves of a rook or bishop for every square and blocker set.

    Without ``rng`` the slot of a blocker set is its mask bits gathered in order;
    with ``rng`` magic numbers are searched for and used instead.
    """

    def __init__(self, piece: Piece, rng: Optional[random.Random] = None) -> None:
        _check_slider(piece)
        self.piece = piece
        self._rays = build_rays(piece)
        self._moves: list[int] = []
        self._magics: Optional[list[Magic]] = [] if rng is not None else None
        self._bits: list[tuple[int, ...]] = []
        self._offsets: list[int] = []
        for sq in ALL_SQUARES:
            questions, answers = questions_and_answers(sq, piece)
            mask = magic_mask(sq, piece)
            offset = len(self._moves)
            if self._magics is not None:
                magic, slots = _search(questions, answers, mask, rng)
                self._magics.append(replace(magic, offset=offset))
                self._moves.extend(slots)
            else:
                self._bits.append(tuple(s.index for s in squares_of(mask)))
                self._offsets.append(offset)
                self._moves.extend(answers)

    def moves(self, sq: Square, blockers: int) -> int:
        """Squares the piece on ``sq`` reaches, stopping at the first blocker each way."""
        if self._magics is not None:
            slot = self._magics[sq.index].index(blockers)
        else:
            gathered = 0
            for k, position in enumerate(self._bits[sq.index]):
                if (blockers >> position) & 1:
                    gathered |= 1 << k
            slot = self._offsets[sq.index] + gathered
        return self._moves[slot] & self._rays[sq.index]