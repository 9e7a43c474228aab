import pytest

from bitchess.bitboard import (
    clear_bit,
    format_bitboard,
    iter_bits,
    lsb,
    set_bit,
    sq_index,
)
from bitchess.bitboard import test_bit as bit_is_set


@pytest.mark.parametrize("sq", [0, 7, 27, 56, 63])
def test_set_then_clear_round_trip(sq):
    bb = set_bit(0, sq)
    assert bit_is_set(bb, sq)
    assert clear_bit(bb, sq) == 0


def test_set_bit_leaves_other_bits():
    bb = set_bit(set_bit(0, 3), 40)
    assert list(iter_bits(bb)) == [3, 40]
    assert list(iter_bits(clear_bit(bb, 3))) == [40]


def test_out_of_range_square_rejected():
    with pytest.raises(ValueError):
        set_bit(0, 64)
    with pytest.raises(ValueError):
        bit_is_set(0, -1)


def test_lsb_finds_lowest():
    bb = set_bit(set_bit(0, 63), 12)
    assert lsb(bb) == 12


def test_lsb_of_empty_raises():
    with pytest.raises(ValueError):
        lsb(0)


def test_iter_bits_ascending_and_complete():
    squares = [60, 1, 33, 17]
    bb = 0
    for sq in squares:
        bb = set_bit(bb, sq)
    assert list(iter_bits(bb)) == sorted(squares)


def test_sq_index_corners():
    assert sq_index("a", "1") == 0
    assert sq_index("h", "8") == 63


@pytest.mark.parametrize("file", range(8))
@pytest.mark.parametrize("rank", range(8))
def test_sq_index_chars_match_ints(file, rank):
    assert sq_index(chr(ord("a") + file), str(rank + 1)) == sq_index(file, rank)


def test_sq_index_invalid():
    with pytest.raises(ValueError):
        sq_index("i", "1")
    with pytest.raises(ValueError):
        sq_index(0, 8)


def test_format_empty():
    lines = format_bitboard(0).splitlines()
    assert lines[-1] == "-----------------"
    assert lines[:8] == ["0 " * 8] * 8


def test_format_top_left_is_a8():
    lines = format_bitboard(set_bit(0, sq_index("a", "8"))).splitlines()
    assert lines[0].startswith("1 ")
    assert all(set(line) <= {"0", " "} for line in lines[1:8])