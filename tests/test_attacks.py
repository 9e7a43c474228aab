import pytest

from bitchess.attacks import (
    bishop_attacks,
    king_attacks,
    knight_attacks,
    pawn_attacks,
    queen_attacks,
    rook_attacks,
)
from bitchess.bitboard import iter_bits, set_bit, sq_index
from bitchess.bitboard import test_bit as bit_is_set
from bitchess.piece import Color


def _squares(*names):
    bb = 0
    for name in names:
        bb = set_bit(bb, sq_index(name[0], name[1]))
    return bb


def test_knight_in_centre():
    assert knight_attacks(sq_index("d", "4")) == _squares(
        "b3", "b5", "c2", "c6", "e2", "e6", "f3", "f5"
    )


def test_king_in_centre():
    assert king_attacks(sq_index("e", "4")) == _squares(
        "d3", "d4", "d5", "e3", "e5", "f3", "f4", "f5"
    )


def test_white_pawn_attacks_toward_a_file():
    assert pawn_attacks(Color.WHITE, sq_index("d", "4")) == _squares("c5")


@pytest.mark.parametrize("sq", range(64))
def test_leapers_never_attack_own_square(sq):
    assert not bit_is_set(knight_attacks(sq), sq)
    assert not bit_is_set(king_attacks(sq), sq)


@pytest.mark.parametrize("sq", range(64))
def test_rook_on_empty_board_covers_rank_and_file(sq):
    r, f = divmod(sq, 8)
    expected = {s for s in range(64) if s != sq and (s // 8 == r or s % 8 == f)}
    assert set(iter_bits(rook_attacks(sq, 0))) == expected


def test_rook_stops_at_blocker_inclusive():
    d4 = sq_index("d", "4")
    occ = _squares("d6")
    att = rook_attacks(d4, occ)
    assert bit_is_set(att, sq_index("d", "6"))
    assert not bit_is_set(att, sq_index("d", "7"))
    assert bit_is_set(att, sq_index("d", "1"))


@pytest.mark.parametrize("sq", range(0, 64, 5))
def test_queen_is_rook_plus_bishop(sq):
    occ = _squares("c3", "e5", "b7", "g2")
    assert queen_attacks(sq, occ) == rook_attacks(sq, occ) | bishop_attacks(sq, occ)


@pytest.mark.parametrize("fn", [knight_attacks, king_attacks])
def test_invalid_square_rejected(fn):
    with pytest.raises(ValueError):
        fn(64)
    with pytest.raises(ValueError):
        rook_attacks(-1, 0)