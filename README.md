# bitchess

A small chess core built on 64-bit bitboards: colour and piece definitions,
precomputed knight, king and pawn attack tables, sliding-piece attacks, a
board with occupancy tracking, and a pseudo-legal move generator.

Squares are numbered 0–63 with a1 = 0, h1 = 7 and h8 = 63. Bitboards are
plain Python integers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
chess-cli
```

prints the pseudo-legal moves for White in the starting position, then the
moves of a lone white knight on d4. Each move is printed as
`From: <sq>, To: <sq>, Piece: <n>, Captured: <n>, Double Push: <0|1>`.
The command takes no options besides `--help`.

## Modules

- `bitchess.piece` — `Color` (`WHITE`, `BLACK`, `BOTH`) and `PieceType`
  (`NO_PIECE`, `PAWN` … `KING`) enums, `piece_index` (signed piece code) and
  `board_index` (slot 0–11 in a board's bitboard list).
- `bitchess.bitboard` — `set_bit`, `clear_bit`, `test_bit`, `lsb`,
  `iter_bits`, `sq_index` and `format_bitboard`. These return new values
  rather than changing anything in place; out-of-range squares raise
  `ValueError`, as does `lsb` on an empty bitboard.
- `bitchess.attacks` — `knight_attacks`, `king_attacks`, `pawn_attacks`,
  `rook_attacks`, `bishop_attacks` and `queen_attacks`. Sliding attacks stop at,
  and include, the first occupied square in each direction.
- `bitchess.board` — `Board`, with `Board.empty()`, `Board.startpos()`,
  `init_startpos`, `place`, `pieces` and `recompute_occupancy`, and the
  `white_occupancy`, `black_occupancy` and `both_occupancy` fields.
- `bitchess.movegen` — the frozen `Move` dataclass (`from_sq`, `to_sq`,
  `piece`, `captured`, `is_double_push`) and `generate_pseudo_legal_moves`,
  which lists pawn moves, then knight, bishop, rook and queen moves, then king
  moves.
- `bitchess.cli` — `format_move` and `main`, the entry point of `chess-cli`.

## Library use

```python
from bitchess.board import Board
from bitchess.piece import Color, PieceType
from bitchess.bitboard import sq_index, format_bitboard
from bitchess.attacks import knight_attacks, rook_attacks
from bitchess.movegen import generate_pseudo_legal_moves
from bitchess.cli import format_move

board = Board.startpos()
for move in generate_pseudo_legal_moves(board, Color.WHITE):
    print(format_move(move))

lone = Board.empty()
lone.place(Color.WHITE, PieceType.KNIGHT, sq_index("d", "4"))
print(len(generate_pseudo_legal_moves(lone, Color.WHITE)))

print(format_bitboard(knight_attacks(sq_index("d", "4"))))
print(format_bitboard(rook_attacks(sq_index("a", "1"), board.both_occupancy)))
```

## What it does not do

- Moves are pseudo-legal only: checks, castling, en passant and promotion are
  not taken into account, and no move is ever made on the board.
- `Move.captured` is always `PieceType.NO_PIECE`.
- A pawn's attack table holds a single diagonal, the one toward the a-file,
  and black pawns are given no double pushes.
- There is no position input or output (such as FEN), no search and no
  evaluation; positions are built with `Board.startpos()` or `Board.place`.