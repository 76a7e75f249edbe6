import random

import pytest

from bitchess.bits import EMPTY, UNIVERSE, bitboard_of, popcount
from bitchess.coords import Piece
from bitchess.geometry import build_rays
from bitchess.sliders import (
    Magic,
    SlidingTable,
    blocker_subsets,
    find_magic,
    magic_mask,
    questions_and_answers,
    random_sparse,
)
from bitchess.square import ALL_SQUARES, Square
from bitchess.tables import edges


def _fold(boards):
    result = EMPTY
    for board in boards:
        result |= board
    return result


@pytest.fixture(scope="module")
def rook_table():
    return SlidingTable(Piece.ROOK)


@pytest.fixture(scope="module")
def bishop_table():
    return SlidingTable(Piece.BISHOP)


def test_rook_mask_in_corner_has_twelve_squares():
    assert popcount(magic_mask(Square.A1, Piece.ROOK)) == 12


def test_bishop_mask_in_centre_has_nine_squares():
    assert popcount(magic_mask(Square.D4, Piece.BISHOP)) == 9


@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
def test_masks_are_inside_rays(piece):
    rays = build_rays(piece)
    for sq in ALL_SQUARES:
        mask = magic_mask(sq, piece)
        assert mask & ~rays[sq.index] & UNIVERSE == EMPTY


def test_bishop_mask_avoids_edges():
    for sq in ALL_SQUARES:
        assert magic_mask(sq, Piece.BISHOP) & edges() == EMPTY


def test_rook_mask_excludes_ray_ends_only():
    mask = magic_mask(Square.D4, Piece.ROOK)
    assert mask & bitboard_of([Square.A4, Square.H4, Square.D1, Square.D8]) == EMPTY
    assert mask & Square.D7.bitboard()


def test_mask_rejects_other_pieces():
    with pytest.raises(ValueError):
        magic_mask(Square.A1, Piece.KNIGHT)


def test_blocker_subsets_order():
    assert blocker_subsets(0b101) == [0, 1, 4, 5]


def test_blocker_subsets_cover_mask():
    mask = magic_mask(Square.C3, Piece.BISHOP)
    subsets = blocker_subsets(mask)
    assert len(subsets) == 1 << popcount(mask)
    assert len(set(subsets)) == len(subsets)
    assert subsets[0] == EMPTY
    assert _fold(subsets) == mask
    assert all(s & ~mask == 0 for s in subsets)


@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
@pytest.mark.parametrize("sq", [Square.A1, Square.E4, Square.H8, Square.B7])
def test_questions_and_answers_invariants(piece, sq):
    questions, answers = questions_and_answers(sq, piece)
    assert len(questions) == len(answers)
    assert popcount(len(questions)) == 1
    assert _fold(questions) == magic_mask(sq, piece)
    assert _fold(answers) == build_rays(piece)[sq.index]


def test_answer_stops_at_blocker():
    questions, answers = questions_and_answers(Square.A1, Piece.ROOK)
    blockers = Square.A3.bitboard()
    answer = answers[questions.index(blockers)]
    assert answer & Square.A3.bitboard()
    assert answer & Square.A2.bitboard()
    assert answer & Square.A4.bitboard() == EMPTY
    assert answer & Square.H1.bitboard()


def test_random_sparse_is_deterministic_and_bounded():
    first = random_sparse(random.Random(5))
    second = random_sparse(random.Random(5))
    assert first == second
    assert 0 <= first <= UNIVERSE


def test_random_sparse_is_sparse_on_average():
    rng = random.Random(11)
    total = sum(popcount(random_sparse(rng)) for _ in range(200))
    assert total / 200 < 16


def test_magic_index_uses_offset_and_shift():
    magic = Magic(magic_number=1 << 56, mask=0xFF, offset=3, rightshift=56)
    assert magic.index(0x1FF) == magic.index(0xFF)
    assert magic.index(0) == 3


@pytest.mark.parametrize("sq", [Square.A1, Square.D4, Square.G2])
def test_find_magic_is_collision_free(sq):
    magic = find_magic(sq, Piece.BISHOP, random.Random(7))
    questions, answers = questions_and_answers(sq, Piece.BISHOP)
    assert magic.offset == 0
    assert magic.mask == magic_mask(sq, Piece.BISHOP)
    assert magic.rightshift == 64 - popcount(magic.mask)
    seen = {}
    for question, answer in zip(questions, answers):
        slot = magic.index(question)
        assert 0 <= slot < len(questions)
        assert seen.setdefault(slot, answer) == answer


@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
def test_empty_board_gives_full_rays(piece, rook_table, bishop_table):
    table = rook_table if piece is Piece.ROOK else bishop_table
    rays = build_rays(piece)
    for sq in ALL_SQUARES:
        assert table.moves(sq, EMPTY) == rays[sq.index]


def test_table_matches_answers_ignoring_outside_blockers(rook_table):
    questions, answers = questions_and_answers(Square.E4, Piece.ROOK)
    outside = Square.A1.bitboard() | Square.H8.bitboard() | Square.E8.bitboard()
    for question, answer in zip(questions[::37], answers[::37]):
        assert rook_table.moves(Square.E4, question | outside) == answer


def test_magic_table_agrees_with_gathered_table(bishop_table):
    magic_table = SlidingTable(Piece.BISHOP, rng=random.Random(3))
    rng = random.Random(99)
    for _ in range(300):
        sq = Square(rng.randrange(64))
        blockers = rng.getrandbits(64)
        assert magic_table.moves(sq, blockers) == bishop_table.moves(sq, blockers)


def test_table_rejects_other_pieces():
    with pytest.raises(ValueError):
        SlidingTable(Piece.QUEEN)