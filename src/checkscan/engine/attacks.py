from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .position import BISHOP, KING, KNIGHT, PAWN, QUEEN, ROOK, Color, Position
from .sliders import bishop_attacks, rook_attacks
from .tables import king_attacks, knight_attacks, pawn_attacks


def is_attacked(position: Position, sq: int, by_color: Color) -> bool:
    """Return True if square ``sq`` is attacked by ``by_color`` in ``position``.

    Covers pawns, knights, king, and slider rays for bishops/rooks/queens.
    Rays are cast outward from ``sq`` itself; the first piece met on each line
    ends the ray whatever its color.
    """
    if pawn_attacks(position.pieces(PAWN, by_color), by_color) >> sq & 1:
        return True
    if knight_attacks(sq) & position.pieces(KNIGHT, by_color):
        return True
    if king_attacks(sq) & position.pieces(KING, by_color):
        return True

    queens = position.pieces(QUEEN, by_color)
    occ = position.occupancy()
    if bishop_attacks(sq, occ) & (position.pieces(BISHOP, by_color) | queens):
        return True
    if rook_attacks(sq, occ) & (position.pieces(ROOK, by_color) | queens):
        return True
    return False


def attackers(position: Position, sq: int, by_color: Color) -> int:
    """Return the bitboard of every ``by_color`` piece attacking ``sq``.

    Unlike :func:`is_attacked` this evaluates every contact test, so the
    population count tells single from double check.
    """
    # A pawn on P attacks sq iff a pawn of the other color on sq would attack P
    pawns = pawn_attacks(1 << sq, by_color.other) & position.pieces(PAWN, by_color)
    knights = knight_attacks(sq) & position.pieces(KNIGHT, by_color)
    kings = king_attacks(sq) & position.pieces(KING, by_color)

    queens = position.pieces(QUEEN, by_color)
    occ = position.occupancy()
    diagonal = bishop_attacks(sq, occ) & (position.pieces(BISHOP, by_color) | queens)
    orthogonal = rook_attacks(sq, occ) & (position.pieces(ROOK, by_color) | queens)
    return pawns | knights | kings | diagonal | orthogonal


def in_check(position: Position, color: Color) -> bool:
    """Return True if any king of ``color`` stands on a square the opponent attacks.

    A side without a king is never in check.
    """
    return any(is_attacked(position, ksq, color.other) for ksq in position.king_squares(color))


@dataclass(frozen=True)
class CheckStatus:
    white_in_check: bool
    black_in_check: bool
    white_king: Optional[int]
    black_king: Optional[int]

    @property
    def kings_present(self) -> bool:
        return self.white_king is not None and self.black_king is not None


def check_status(position: Position) -> CheckStatus:
    return CheckStatus(
        white_in_check=in_check(position, Color.WHITE),
        black_in_check=in_check(position, Color.BLACK),
        white_king=position.king_square(Color.WHITE),
        black_king=position.king_square(Color.BLACK),
    )
