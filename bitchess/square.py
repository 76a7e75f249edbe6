"""Squares of the chess board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bitchess.coords import Color, File, Rank

NUM_SQUARES = 64

_FILE_LETTERS = "abcdefgh"
_RANK_DIGITS = "12345678"


@dataclass(frozen=True, order=True)
class Square:
    """A square identified by its index: rank * 8 + file, A1 is 0 and H8 is 63."""

    index: int = 0

    @classmethod
    def make(cls, rank: Rank, file: File) -> Square:
        """Build the square on ``rank`` and ``file``."""
        return cls((int(rank) << 3) ^ int(file))

    @classmethod
    def from_string(cls, s: str) -> Square:
        """Parse a square name such as ``"e4"``; raise ValueError if it is not one."""
        if len(s) != 2 or s[0] not in _FILE_LETTERS or s[1] not in _RANK_DIGITS:
            raise ValueError(f"not a square name: {s!r}")
        return cls.make(
            Rank.from_index(_RANK_DIGITS.index(s[1])),
            File.from_index(_FILE_LETTERS.index(s[0])),
        )

    def rank(self) -> Rank:
        """The rank this square is on."""
        return Rank.from_index(self.index >> 3)

    def file(self) -> File:
        """The file this square is on."""
        return File.from_index(self.index & 7)

    def up(self) -> Optional[Square]:
        """The square above, or None on the eighth rank."""
        if self.rank() is Rank.EIGHTH:
            return None
        return self.uup()

    def down(self) -> Optional[Square]:
        """The square below, or None on the first rank."""
        if self.rank() is Rank.FIRST:
            return None
        return self.udown()

    def left(self) -> Optional[Square]:
        """The square to the left, or None on the a-file."""
        if self.file() is File.A:
            return None
        return self.uleft()

    def right(self) -> Optional[Square]:
        """The square to the right, or None on the h-file."""
        if self.file() is File.H:
            return None
        return self.uright()

    def forward(self, color: Color) -> Optional[Square]:
        """The square ahead from ``color``'s point of view, or None at the edge."""
        return self.up() if color is Color.WHITE else self.down()

    def backward(self, color: Color) -> Optional[Square]:
        """The square behind from ``color``'s point of view, or None at the edge."""
        return self.down() if color is Color.WHITE else self.up()

    def uup(self) -> Square:
        """The square above, wrapping to the first rank."""
        return Square.make(self.rank().up(), self.file())

    def udown(self) -> Square:
        """The square below, wrapping to the eighth rank."""
        return Square.make(self.rank().down(), self.file())

    def uleft(self) -> Square:
        """The square to the left, wrapping to the h-file."""
        return Square.make(self.rank(), self.file().left())

    def uright(self) -> Square:
        """The square to the right, wrapping to the a-file."""
        return Square.make(self.rank(), self.file().right())

    def uforward(self, color: Color) -> Square:
        """The square ahead from ``color``'s point of view, wrapping around."""
        return self.uup() if color is Color.WHITE else self.udown()

    def ubackward(self, color: Color) -> Square:
        """The square behind from ``color``'s point of view, wrapping around."""
        return self.udown() if color is Color.WHITE else self.uup()

    def bitboard(self) -> int:
        """A 64-bit board with only this square set."""
        return 1 << self.index

    def __str__(self) -> str:
        return _FILE_LETTERS[self.index & 7] + _RANK_DIGITS[(self.index >> 3) & 7]


def _install_named_squares() -> None:
    for index in range(NUM_SQUARES):
        square = Square(index)
        setattr(Square, str(square).upper(), square)


_install_named_squares()

ALL_SQUARES: tuple[Square, ...] = tuple(Square(i) for i in range(NUM_SQUARES))