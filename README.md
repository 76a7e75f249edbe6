# bitchess

Bitboard building blocks for chess programs. A bitboard is a plain Python
`int` whose 64 bits stand for the squares A1 (bit 0) through H8 (bit 63).
The package has no dependencies beyond the standard library.

## Modules

- `bitchess.coords`: the `Rank`, `File`, `Color` and `Piece` enums
  (`IntEnum`s). `Rank.up`/`down` and `File.left`/`right` wrap around the
  board. `Color` gives `opponent()`, `second_rank()`, `seventh_rank()` and
  `backrank()`. `Piece.symbol(color)` gives the piece letter, upper case for
  White. Tuples `ALL_RANKS`, `ALL_FILES`, `ALL_COLORS`, `ALL_PIECES` and
  `PROMOTION_PIECES` list the members.
- `bitchess.square`: `Square`, a frozen, ordered value holding an index
  0..63. `Square.make(rank, file)` builds one, `Square.from_string("e4")`
  parses one (raising `ValueError` on a bad name), and named constants such
  as `Square.E4` exist for every square. Neighbour methods `up`, `down`,
  `left`, `right`, `forward(color)` and `backward(color)` return `None` at
  the board edge; `uup`, `udown`, `uleft`, `uright`, `uforward(color)` and
  `ubackward(color)` wrap around instead. `bitboard()` gives the square's
  single-bit board.
- `bitchess.bits`: `all_squares()`, `squares_of(bitboard)` (lowest square
  first), `bitboard_of(squares)` and `popcount(bitboard)`, plus the
  constants `EMPTY` and `UNIVERSE`.
- `bitchess.tables`: knight and king move tables (`build_knight_moves`,
  `build_king_moves`), castling squares (`kingside_castle_squares`,
  `queenside_castle_squares`, `castle_moves`), and rank, file,
  adjacent-file and edge masks.
- `bitchess.geometry`: `build_lines`, `build_between`, `build_rays(piece)`
  for rooks and bishops, pawn push and capture tables
  (`build_pawn_moves`, `build_pawn_attacks`) and the double-push source and
  destination masks.
- `bitchess.sliders`: blocker-indexed tables for rooks and bishops.
  `magic_mask`, `blocker_subsets` and `questions_and_answers` enumerate
  every blocker arrangement and the moves it allows. `find_magic(sq, piece,
  rng)` searches for a collision-free multiply-and-shift `Magic`.
  `SlidingTable(piece)` indexes moves by the mask bits of the blockers;
  `SlidingTable(piece, rng)` searches for magic numbers and indexes by them.
- `bitchess.attacks`: ready-made lookups: `rook_moves`, `bishop_moves`,
  `rook_rays`, `bishop_rays`, `king_moves`, `knight_moves`,
  `pawn_attacks`, `pawn_quiets`, `pawn_moves`, `castle_moves`, `line`,
  `between`, `rank_mask`, `file_mask`, `adjacent_files`,
  `pawn_source_double_moves`, `pawn_dest_double_moves`, and the `EDGES`
  mask. Tables are built on first use and then cached.
- `bitchess.zobrist`: `XorShiftRng`, a seeded xorshift generator, and
  `ZobristKeys` with `piece`, `castles` and `en_passant` lookups and a
  `side_to_move` key. `default_keys()` returns the keys drawn from the
  fixed `DEFAULT_SEED`, so they are the same on every run.

## Install

```
pip install .
```

## Example

```python
from bitchess import attacks
from bitchess.bits import squares_of
from bitchess.coords import Color
from bitchess.square import Square

e4 = Square.from_string("e4")
blockers = Square.E6.bitboard() | Square.C4.bitboard()

print(sorted(str(s) for s in squares_of(attacks.rook_moves(e4, blockers))))
print([str(s) for s in squares_of(attacks.knight_moves(Square.G1))])
print([str(s) for s in squares_of(attacks.pawn_quiets(Square.E2, Color.WHITE, 0))])
```

Zobrist keys:

```python
from bitchess.coords import Color, Piece
from bitchess.square import Square
from bitchess.zobrist import default_keys

keys = default_keys()
h = keys.piece(Piece.KING, Square.E1, Color.WHITE) ^ keys.side_to_move
```

## What it does not do

The package supplies the lookups a move generator is built from, not a
move generator itself. It has no board or position type, no FEN parsing,
no legal-move generation, no check or pin detection, no game state and no
command-line program.

## Tests

```
pip install ".[test]"
pytest
```