from __future__ import annotations

from typing import Iterator


MASK64 = 0xFFFFFFFFFFFFFFFF

FILE_A = 0x0101010101010101
FILE_H = FILE_A << 7
NOT_FILE_A = ~FILE_A & MASK64
NOT_FILE_H = ~FILE_H & MASK64
RANK_1 = 0xFF


def set_bit(bb: int, sq: int) -> int:
    return bb | (1 << sq)


def get_bit(bb: int, sq: int) -> bool:
    return (bb >> sq) & 1 == 1


def lsb(bb: int) -> int:
    """Return the index of the lowest set bit of ``bb`` (``bb`` must be non-zero)."""
    return (bb & -bb).bit_length() - 1


def iter_squares(bb: int) -> Iterator[int]:
    """Yield the square index of every set bit, lowest first."""
    while bb:
        yield lsb(bb)
        bb &= bb - 1


def popcount(bb: int) -> int:
    return bin(bb).count("1")


def bit_reverse64(x: int) -> int:
    """Reverse the bit order of a 64-bit word (bit 0 <-> bit 63).

    Fixed sequence of swap steps: halves of every 2-, 4-, 8-, 16-, 32- and
    64-bit group are exchanged in turn.
    """
    x &= MASK64
    x = ((x >> 1) & 0x5555555555555555) | ((x & 0x5555555555555555) << 1)
    x = ((x >> 2) & 0x3333333333333333) | ((x & 0x3333333333333333) << 2)
    x = ((x >> 4) & 0x0F0F0F0F0F0F0F0F) | ((x & 0x0F0F0F0F0F0F0F0F) << 4)
    x = ((x >> 8) & 0x00FF00FF00FF00FF) | ((x & 0x00FF00FF00FF00FF) << 8)
    x = ((x >> 16) & 0x0000FFFF0000FFFF) | ((x & 0x0000FFFF0000FFFF) << 16)
    x = ((x >> 32) & 0x00000000FFFFFFFF) | ((x & 0x00000000FFFFFFFF) << 32)
    return x & MASK64


def str_to_square(s: str) -> int:
    """Convert algebraic notation into a 0-based square index.

    Args:
        s (str): Square name such as ``"e4"``.

    Returns:
        int: Zero-based square index.

    Raises:
        ValueError: If ``s`` is not a valid square.
    """
    if len(s) != 2 or s[0] < "a" or s[0] > "h" or s[1] < "1" or s[1] > "8":
        raise ValueError(f"invalid square: {s!r}")
    file = ord(s[0]) - ord("a")
    rank = int(s[1]) - 1
    return rank * 8 + file


def square_to_str(idx: int) -> str:
    """Convert a 0-based square index into algebraic notation.

    Args:
        idx (int): Square index in range 0..63.

    Returns:
        str: Algebraic notation for ``idx``.

    Raises:
        ValueError: If ``idx`` is outside the valid square range.
    """
    if idx < 0 or idx > 63:
        raise ValueError(f"invalid square index: {idx}")
    file = idx % 8
    rank = idx // 8
    return chr(ord("a") + file) + str(rank + 1)
