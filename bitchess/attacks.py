"""Attack sets of every piece kind, as bitboards."""

from typing import Iterable

from .bitboard import MASK64
from .piece import Color

_NOT_FILE_A = 0xFEFEFEFEFEFEFEFE
_NOT_FILE_H = 0x7F7F7F7F7F7F7F7F

_ROOK_DIRECTIONS = (8, 1, -8, -1)
_BISHOP_DIRECTIONS = (9, -7, -9, 7)


def _shl(b: int, n: int) -> int:
    return (b << n) & MASK64


def _knight_from(sq: int) -> int:
    b = 1 << sq
    return (
        (_shl(b, 17) & _NOT_FILE_A)
        | (_shl(b, 15) & _NOT_FILE_H)
        | (_shl(b, 10) & _NOT_FILE_A)
        | (_shl(b, 6) & _NOT_FILE_H)
        | ((b >> 6) & _NOT_FILE_A)
        | ((b >> 10) & _NOT_FILE_H)
        | ((b >> 15) & _NOT_FILE_A)
        | ((b >> 17) & _NOT_FILE_H)
    )


def _king_from(sq: int) -> int:
    b = 1 << sq
    return (
        _shl(b, 8)
        | (b >> 8)
        | (_shl(b, 1) & _NOT_FILE_H)
        | ((b >> 1) & _NOT_FILE_A)
        | (_shl(b, 9) & _NOT_FILE_H)
        | (_shl(b, 7) & _NOT_FILE_A)
        | ((b >> 7) & _NOT_FILE_H)
        | ((b >> 9) & _NOT_FILE_A)
    )


# Each pawn attacks a single diagonal, toward the a-file.
def _white_pawn_from(sq: int) -> int:
    return _shl(1 << sq, 7) & _NOT_FILE_H


def _black_pawn_from(sq: int) -> int:
    return ((1 << sq) >> 9) & _NOT_FILE_H


_KNIGHT = tuple(_knight_from(sq) for sq in range(64))
_KING = tuple(_king_from(sq) for sq in range(64))
_PAWN = (
    tuple(_white_pawn_from(sq) for sq in range(64)),
    tuple(_black_pawn_from(sq) for sq in range(64)),
)


def _check_square(sq: int) -> None:
    if not 0 <= sq < 64:
        raise ValueError(f"square out of range: {sq}")


def knight_attacks(sq: int) -> int:
    """Squares a knight on ``sq`` attacks."""
    _check_square(sq)
    return _KNIGHT[sq]


def king_attacks(sq: int) -> int:
    """Squares a king on ``sq`` attacks."""
    _check_square(sq)
    return _KING[sq]


def pawn_attacks(color: Color, sq: int) -> int:
    """Squares a pawn of ``color`` on ``sq`` attacks."""
    _check_square(sq)
    return _PAWN[0 if color == Color.WHITE else 1][sq]


def _step(d: int) -> tuple[int, int]:
    # Rank and file components with division truncated toward zero.
    q = abs(d) // 8 * (1 if d >= 0 else -1)
    return q, d - 8 * q


def _sliding(sq: int, occ: int, directions: Iterable[int]) -> int:
    _check_square(sq)
    attacks = 0
    for d in directions:
        dr, df = _step(d)
        t = sq
        while True:
            r, f = divmod(t, 8)
            if not (0 <= r + dr < 8 and 0 <= f + df < 8):
                break
            t += d
            bit = 1 << t
            attacks |= bit
            if occ & bit:
                break
    return attacks


def rook_attacks(sq: int, occ: int) -> int:
    """Rook attacks from ``sq``, stopping at (and including) blockers in ``occ``."""
    return _sliding(sq, occ, _ROOK_DIRECTIONS)


def bishop_attacks(sq: int, occ: int) -> int:
    """Bishop attacks from ``sq``, stopping at (and including) blockers in ``occ``."""
    return _sliding(sq, occ, _BISHOP_DIRECTIONS)


def queen_attacks(sq: int, occ: int) -> int:
    """Union of rook and bishop attacks from ``sq``."""
    return rook_attacks(sq, occ) | bishop_attacks(sq, occ)