"""Basic operations on 64-bit bitboards held as Python ints."""

from typing import Iterator, Union

MASK64 = (1 << 64) - 1

FileOrRank = Union[int, str]


def _check_square(sq: int) -> None:
    if not 0 <= sq < 64:
        raise ValueError(f"square out of range: {sq}")


def set_bit(bb: int, sq: int) -> int:
    """Return ``bb`` with square ``sq`` set."""
    _check_square(sq)
    return bb | (1 << sq)


def clear_bit(bb: int, sq: int) -> int:
    """Return ``bb`` with square ``sq`` cleared."""
    _check_square(sq)
    return bb & ~(1 << sq) & MASK64


def test_bit(bb: int, sq: int) -> bool:
    """Whether square ``sq`` is set in ``bb``."""
    _check_square(sq)
    return bool((bb >> sq) & 1)


test_bit.__test__ = False  # keep pytest from collecting it


def lsb(bb: int) -> int:
    """Index of the least significant set bit."""
    if bb == 0:
        raise ValueError("empty bitboard has no set bit")
    return (bb & -bb).bit_length() - 1


def iter_bits(bb: int) -> Iterator[int]:
    """Yield the indices of the set bits, lowest first."""
    while bb:
        low = bb & -bb
        yield low.bit_length() - 1
        bb ^= low


def sq_index(file: FileOrRank, rank: FileOrRank) -> int:
    """Square index of a file and rank, given as 0-7 or as 'a'-'h' and '1'-'8'."""
    f = ord(file) - ord("a") if isinstance(file, str) else file
    r = ord(rank) - ord("1") if isinstance(rank, str) else rank
    if not (0 <= f < 8 and 0 <= r < 8):
        raise ValueError(f"invalid square: file={file!r} rank={rank!r}")
    return r * 8 + f


def format_bitboard(bb: int) -> str:
    """Render ``bb`` as an 8x8 grid of 0/1, rank 8 at the top."""
    rows = [
        "".join(("1" if (bb >> (rank * 8 + file)) & 1 else "0") + " " for file in range(8))
        for rank in range(7, -1, -1)
    ]
    return "\n".join(rows) + "\n-----------------\n"