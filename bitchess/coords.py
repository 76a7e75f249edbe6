"""Ranks, files, colours and piece kinds of a chess board."""

from __future__ import annotations

from enum import IntEnum


class Rank(IntEnum):
    """A row of the board, from White's first rank to the eighth."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6
    EIGHTH = 7

    @classmethod
    def from_index(cls, i: int) -> Rank:
        """Return the rank with index ``i``, wrapping values outside 0..7."""
        return cls(i & 7)

    def up(self) -> Rank:
        """The next rank up, wrapping from the eighth to the first."""
        return Rank.from_index(self + 1)

    def down(self) -> Rank:
        """The next rank down, wrapping from the first to the eighth."""
        return Rank.from_index(self - 1)


class File(IntEnum):
    """A column of the board, from the a-file to the h-file."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, i: int) -> File:
        """Return the file with index ``i``, wrapping values outside 0..7."""
        return cls(i & 7)

    def left(self) -> File:
        """The file to the left, wrapping from a to h."""
        return File.from_index(self - 1)

    def right(self) -> File:
        """The file to the right, wrapping from h to a."""
        return File.from_index(self + 1)


class Color(IntEnum):
    """The side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    def opponent(self) -> Color:
        """The other side."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def second_rank(self) -> Rank:
        """The rank this side's pawns start on."""
        return Rank.SECOND if self is Color.WHITE else Rank.SEVENTH

    def seventh_rank(self) -> Rank:
        """The rank from which this side's pawns promote."""
        return Rank.SEVENTH if self is Color.WHITE else Rank.SECOND

    def backrank(self) -> Rank:
        """The rank this side's king starts on."""
        return Rank.FIRST if self is Color.WHITE else Rank.EIGHTH


_PIECE_LETTERS = "pnbrqk"


class Piece(IntEnum):
    """A kind of chess piece, in ascending order of value."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def symbol(self, color: Color) -> str:
        """The piece letter: upper case for White, lower case for Black."""
        letter = str(self)
        return letter.upper() if color is Color.WHITE else letter

    def __str__(self) -> str:
        return _PIECE_LETTERS[self]


ALL_RANKS: tuple[Rank, ...] = tuple(Rank)
ALL_FILES: tuple[File, ...] = tuple(File)
ALL_COLORS: tuple[Color, ...] = tuple(Color)
ALL_PIECES: tuple[Piece, ...] = tuple(Piece)
PROMOTION_PIECES: tuple[Piece, ...] = (Piece.QUEEN, Piece.KNIGHT, Piece.ROOK, Piece.BISHOP)