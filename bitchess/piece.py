"""Colours, piece types and the index schemes built on them."""

from enum import IntEnum


class Color(IntEnum):
    """Side of a piece; ``BOTH`` stands for either side."""

    WHITE = 1
    BLACK = -1
    BOTH = 0


class PieceType(IntEnum):
    """Kind of a piece; ``NO_PIECE`` marks the absence of one."""

    NO_PIECE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


def piece_index(color: Color, piece_type: PieceType) -> int:
    """Signed piece code: positive for white, negative for black."""
    return int(piece_type) * int(color)


def board_index(color: Color, piece_type: PieceType) -> int:
    """Slot of a piece's bitboard: 0-5 for white, 6-11 for anything else."""
    offset = int(piece_type) - 1
    return offset if color == Color.WHITE else offset + 6