from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .bitboard import FILE_A, MASK64, NOT_FILE_A, NOT_FILE_H, RANK_1
from .position import Color


KNIGHT_DELTAS = ((-1, 2), (1, 2), (-2, 1), (2, 1), (-2, -1), (2, -1), (-1, -2), (1, -2))
KING_DELTAS = ((-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1))


@dataclass(frozen=True)
class AttackTables:
    """Per-square lookup tables, indexed by square 0..63.

    Knight and king sets are reciprocal: ``sq2 in knight[sq1]`` iff
    ``sq1 in knight[sq2]``, so they also answer "which squares could a
    knight attack ``sq`` from".
    """

    knight: Tuple[int, ...]
    king: Tuple[int, ...]
    rank: Tuple[int, ...]
    file: Tuple[int, ...]
    diag: Tuple[int, ...]
    anti_diag: Tuple[int, ...]


def _offset_set(sq: int, deltas: Iterable[Tuple[int, int]]) -> int:
    f = sq % 8
    r = sq // 8
    m = 0
    for df, dr in deltas:
        tf = f + df
        tr = r + dr
        if 0 <= tf < 8 and 0 <= tr < 8:
            m |= 1 << (tr * 8 + tf)
    return m


def _walk_mask(sq: int, df: int, dr: int) -> int:
    """Origin bit plus every square from ``sq`` toward both edges along (df, dr)."""
    m = 1 << sq
    for sign in (1, -1):
        tf, tr = sq % 8, sq // 8
        while True:
            tf += df * sign
            tr += dr * sign
            if not (0 <= tf < 8 and 0 <= tr < 8):
                break
            m |= 1 << (tr * 8 + tf)
    return m


def compute_rank_mask(sq: int) -> int:
    return RANK_1 << (8 * (sq // 8))


def compute_file_mask(sq: int) -> int:
    return FILE_A << (sq % 8)


def compute_diag_mask(sq: int) -> int:
    # a1-h8 direction
    return _walk_mask(sq, 1, 1)


def compute_anti_diag_mask(sq: int) -> int:
    # h1-a8 direction
    return _walk_mask(sq, -1, 1)


def build_tables() -> AttackTables:
    squares = range(64)
    return AttackTables(
        knight=tuple(_offset_set(sq, KNIGHT_DELTAS) for sq in squares),
        king=tuple(_offset_set(sq, KING_DELTAS) for sq in squares),
        rank=tuple(compute_rank_mask(sq) for sq in squares),
        file=tuple(compute_file_mask(sq) for sq in squares),
        diag=tuple(compute_diag_mask(sq) for sq in squares),
        anti_diag=tuple(compute_anti_diag_mask(sq) for sq in squares),
    )


# Built once at import; read-only afterwards
_TABLES = build_tables()


def get_tables() -> AttackTables:
    return _TABLES


def knight_attacks(sq: int) -> int:
    return _TABLES.knight[sq]


def king_attacks(sq: int) -> int:
    return _TABLES.king[sq]


def rank_mask(sq: int) -> int:
    return _TABLES.rank[sq]


def file_mask(sq: int) -> int:
    return _TABLES.file[sq]


def diag_mask(sq: int) -> int:
    return _TABLES.diag[sq]


def anti_diag_mask(sq: int) -> int:
    return _TABLES.anti_diag[sq]


# --- Pawn captures (batch, not reciprocal) ---
def white_pawn_attacks(pawns: int) -> int:
    # +9 (NE) cannot start on file H, +7 (NW) cannot start on file A
    return (((pawns & NOT_FILE_H) << 9) | ((pawns & NOT_FILE_A) << 7)) & MASK64


def black_pawn_attacks(pawns: int) -> int:
    # -7 (SE) cannot start on file H, -9 (SW) cannot start on file A
    return ((pawns & NOT_FILE_H) >> 7) | ((pawns & NOT_FILE_A) >> 9)


def pawn_attacks(pawns: int, color: Color) -> int:
    """Return every square attacked by the pawns in ``pawns`` moving as ``color``."""
    if color is Color.WHITE:
        return white_pawn_attacks(pawns)
    return black_pawn_attacks(pawns)
