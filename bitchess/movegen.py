"""Pseudo-legal move generation over a bitboard position."""

from dataclasses import dataclass

from .attacks import (
    bishop_attacks,
    king_attacks,
    knight_attacks,
    pawn_attacks,
    queen_attacks,
    rook_attacks,
)
from .bitboard import MASK64, iter_bits, lsb
from .board import Board
from .piece import Color, PieceType

_RANK_2 = 0x000000000000FF00
_RANK_7 = 0x00FF000000000000

_SLIDERS = (
    (PieceType.BISHOP, bishop_attacks),
    (PieceType.ROOK, rook_attacks),
    (PieceType.QUEEN, queen_attacks),
)


@dataclass(frozen=True)
class Move:
    """A move of ``piece`` from one square to another."""

    from_sq: int
    to_sq: int
    piece: PieceType
    captured: PieceType = PieceType.NO_PIECE
    is_double_push: bool = False


def _pawn_moves(board: Board, side: Color, opp: int, empty: int) -> list[Move]:
    pawns = board.pieces(side, PieceType.PAWN)
    if side == Color.WHITE:
        step = 8
        single = (pawns << 8) & empty
        double = ((((pawns & _RANK_2) << 8) & empty) << 8) & empty
    else:
        step = -8
        single = (pawns >> 8) & empty
        double = ((((pawns & _RANK_7) >> 8) & empty) << 8) & empty

    moves = [Move(to - step, to, PieceType.PAWN) for to in iter_bits(single)]
    moves.extend(
        Move(to - 2 * step, to, PieceType.PAWN, is_double_push=True)
        for to in iter_bits(double)
    )
    moves.extend(
        Move(frm, to, PieceType.PAWN)
        for frm in iter_bits(pawns)
        for to in iter_bits(pawn_attacks(side, frm) & opp)
    )
    return moves


def generate_pseudo_legal_moves(board: Board, side: Color) -> list[Move]:
    """All pseudo-legal moves for ``side``: pawns, knights, sliders, then the king."""
    if side == Color.WHITE:
        own, opp = board.white_occupancy, board.black_occupancy
    else:
        own, opp = board.black_occupancy, board.white_occupancy
    both = board.both_occupancy
    empty = ~both & MASK64
    not_own = ~own & MASK64

    moves = _pawn_moves(board, side, opp, empty)

    moves.extend(
        Move(frm, to, PieceType.KNIGHT)
        for frm in iter_bits(board.pieces(side, PieceType.KNIGHT))
        for to in iter_bits(knight_attacks(frm) & not_own)
    )

    for piece_type, attack_fn in _SLIDERS:
        moves.extend(
            Move(frm, to, piece_type)
            for frm in iter_bits(board.pieces(side, piece_type))
            for to in iter_bits(attack_fn(frm, both) & not_own)
        )

    kings = board.pieces(side, PieceType.KING)
    if kings:
        frm = lsb(kings)
        moves.extend(
            Move(frm, to, PieceType.KING) for to in iter_bits(king_attacks(frm) & not_own)
        )
    return moves