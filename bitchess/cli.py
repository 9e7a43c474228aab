"""Command that lists pseudo-legal moves for two sample positions."""

import argparse
from typing import Iterable, Optional, Sequence

from .bitboard import sq_index
from .board import Board
from .movegen import Move, generate_pseudo_legal_moves
from .piece import Color, PieceType


def format_move(move: Move) -> str:
    """One-line description of a move."""
    return (
        f"From: {move.from_sq}, To: {move.to_sq}, "
        f"Piece: {int(move.piece)}, Captured: {int(move.captured)}, "
        f"Double Push: {int(move.is_double_push)}"
    )


def _report(title: str, moves: Iterable[Move]) -> None:
    moves = list(moves)
    print(f"{title} Pseudo-Legal Moves: {len(moves)}")
    for move in moves:
        print(format_move(move))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the moves of the start position and of a lone knight on d4."""
    parser = argparse.ArgumentParser(
        prog="bitchess",
        description="List pseudo-legal moves for sample positions.",
    )
    parser.parse_args(argv)

    _report("White", generate_pseudo_legal_moves(Board.startpos(), Color.WHITE))

    board = Board.empty()
    board.place(Color.WHITE, PieceType.KNIGHT, sq_index("d", "4"))
    _report("Knight", generate_pseudo_legal_moves(board, Color.WHITE))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())