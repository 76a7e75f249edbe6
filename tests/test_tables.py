from bitchess.bits import bitboard_of, popcount, squares_of
from bitchess.coords import Color, File, Rank
from bitchess.square import ALL_SQUARES, Square
from bitchess.tables import (
    adjacent_file_masks,
    build_king_moves,
    build_knight_moves,
    castle_moves,
    edges,
    file_masks,
    kingside_castle_squares,
    queenside_castle_squares,
    rank_masks,
)


def test_knight_moves_are_symmetric():
    moves = build_knight_moves()
    for src in ALL_SQUARES:
        for dest in squares_of(moves[src.index]):
            assert moves[dest.index] & src.bitboard() == src.bitboard()


def test_king_moves_are_symmetric_and_exclude_source():
    moves = build_king_moves()
    for src in ALL_SQUARES:
        assert moves[src.index] & src.bitboard() == 0
        for dest in squares_of(moves[src.index]):
            assert moves[dest.index] & src.bitboard() == src.bitboard()


def test_knight_from_corner():
    a1 = Square.make(Rank.FIRST, File.A)
    expected = bitboard_of([Square.make(Rank.THIRD, File.B), Square.make(Rank.SECOND, File.C)])
    assert build_knight_moves()[a1.index] == expected


def test_king_from_corner():
    a1 = Square.make(Rank.FIRST, File.A)
    expected = bitboard_of(
        [
            Square.make(Rank.FIRST, File.B),
            Square.make(Rank.SECOND, File.A),
            Square.make(Rank.SECOND, File.B),
        ]
    )
    assert build_king_moves()[a1.index] == expected


def test_king_moves_never_exceed_eight():
    assert max(popcount(b) for b in build_king_moves()) == len(
        list(squares_of(build_king_moves()[Square.make(Rank.FOURTH, File.D).index]))
    )


def test_castle_squares():
    assert kingside_castle_squares(Color.WHITE) == bitboard_of(
        [Square.make(Rank.FIRST, File.F), Square.make(Rank.FIRST, File.G)]
    )
    assert queenside_castle_squares(Color.BLACK) == bitboard_of(
        [Square.make(Rank.EIGHTH, f) for f in (File.B, File.C, File.D)]
    )


def test_castle_moves():
    names = ["c1", "c8", "e1", "e8", "g1", "g8"]
    assert castle_moves() == bitboard_of(Square.from_string(n) for n in names)


def test_ranks_and_files_partition_board():
    union_ranks = 0
    union_files = 0
    for r_mask, f_mask in zip(rank_masks(), file_masks()):
        assert not union_ranks & r_mask
        assert not union_files & f_mask
        union_ranks |= r_mask
        union_files |= f_mask
    assert union_ranks == union_files == bitboard_of(ALL_SQUARES)


def test_rank_and_file_contain_their_squares():
    ranks = rank_masks()
    files = file_masks()
    for sq in ALL_SQUARES:
        assert ranks[sq.rank()] & sq.bitboard() == sq.bitboard()
        assert files[sq.file()] & sq.bitboard() == sq.bitboard()


def test_adjacent_files():
    files = file_masks()
    adjacent = adjacent_file_masks()
    assert adjacent[File.A] == files[File.B]
    assert adjacent[File.H] == files[File.G]
    assert adjacent[File.D] == files[File.C] | files[File.E]


def test_edges():
    ranks = rank_masks()
    files = file_masks()
    assert edges() == ranks[Rank.FIRST] | ranks[Rank.EIGHTH] | files[File.A] | files[File.H]
    assert not edges() & Square.make(Rank.FOURTH, File.D).bitboard()