from __future__ import annotations

from .bitboard import MASK64, bit_reverse64
from .tables import anti_diag_mask, diag_mask, file_mask, rank_mask


def line_attacks(occ: int, mask: int, sq: int) -> int:
    """Return slider attacks from ``sq`` along the line ``mask`` (Hyperbola Quintessence).

    Args:
        occ (int): Occupancy of both colors.
        mask (int): Rank, file, diagonal or anti-diagonal through ``sq``,
            including ``sq`` itself.
        sq (int): Origin square.

    Returns:
        int: Squares reached in both directions up to and including the first
        occupied square on each side. Never includes ``sq``; always a subset
        of ``mask``.

    Notes:
        ``o - 2s`` borrows through the empty squares above ``s`` and stops at
        the first blocker; the same on the reversed board covers the squares
        below. Arithmetic is modulo 2**64.
    """
    r = occ & mask
    s = 1 << sq
    forward = (r - (s << 1)) & MASK64
    reverse = bit_reverse64((bit_reverse64(r) - (bit_reverse64(s) << 1)) & MASK64)
    return (forward ^ reverse) & mask


def bishop_attacks(sq: int, occ: int) -> int:
    return line_attacks(occ, diag_mask(sq), sq) | line_attacks(occ, anti_diag_mask(sq), sq)


def rook_attacks(sq: int, occ: int) -> int:
    return line_attacks(occ, rank_mask(sq), sq) | line_attacks(occ, file_mask(sq), sq)


def queen_attacks(sq: int, occ: int) -> int:
    return bishop_attacks(sq, occ) | rook_attacks(sq, occ)
