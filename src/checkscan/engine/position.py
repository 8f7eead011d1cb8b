from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .bitboard import MASK64, get_bit, iter_squares, lsb


class Color(str, Enum):
    WHITE = "w"
    BLACK = "b"

    @property
    def other(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @classmethod
    def parse(cls, s: str) -> "Color":
        """Parse ``"w"``, ``"white"``, ``"b"`` or ``"black"`` (any case).

        Raises:
            ValueError: If ``s`` names no color.
        """
        key = s.strip().lower()
        if key in ("w", "white"):
            return cls.WHITE
        if key in ("b", "black"):
            return cls.BLACK
        raise ValueError(f"invalid color: {s!r}")


# Piece kinds
PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(6)

# Piece indices for bitboards
WP, WN, WB, WR, WQ, WK, BP, BN, BB, BR, BQ, BK = range(12)
PIECE_ORDER = [WP, WN, WB, WR, WQ, WK, BP, BN, BB, BR, BQ, BK]
PIECE_TO_CHAR = {
    WP: "P",
    WN: "N",
    WB: "B",
    WR: "R",
    WQ: "Q",
    WK: "K",
    BP: "p",
    BN: "n",
    BB: "b",
    BR: "r",
    BQ: "q",
    BK: "k",
}
CHAR_TO_PIECE = {v: k for k, v in PIECE_TO_CHAR.items()}


def piece_index(kind: int, color: Color) -> int:
    return kind if color is Color.WHITE else kind + 6


@dataclass(frozen=True)
class Position:
    """Immutable piece placement held as twelve bitboards.

    Notes:
    - Squares are 0..63 (a1=0 .. h8=63), rank-major from white's perspective.
    - ``bb`` is indexed by the WP..BK constants above; the sets are disjoint.
    - Color aggregates are derived on every call, never stored.
    """

    bb: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.bb) != 12:
            raise ValueError("position needs exactly 12 bitboards")
        seen = 0
        for b in self.bb:
            if b < 0 or b > MASK64:
                raise ValueError("bitboard out of 64-bit range")
            if seen & b:
                raise ValueError("piece bitboards overlap")
            seen |= b

    @classmethod
    def empty(cls) -> "Position":
        return cls(bb=(0,) * 12)

    @classmethod
    def from_bitboards(cls, bb: List[int]) -> "Position":
        return cls(bb=tuple(bb))

    # --- Aggregates ---
    def white(self) -> int:
        return self.bb[WP] | self.bb[WN] | self.bb[WB] | self.bb[WR] | self.bb[WQ] | self.bb[WK]

    def black(self) -> int:
        return self.bb[BP] | self.bb[BN] | self.bb[BB] | self.bb[BR] | self.bb[BQ] | self.bb[BK]

    def occupancy(self) -> int:
        return self.white() | self.black()

    def by_color(self, color: Color) -> int:
        return self.white() if color is Color.WHITE else self.black()

    def pieces(self, kind: int, color: Color) -> int:
        return self.bb[piece_index(kind, color)]

    # --- Lookups ---
    def piece_at(self, sq: int) -> Optional[str]:
        """Return the FEN character of the piece on ``sq``, or None if empty."""
        for p in PIECE_ORDER:
            if get_bit(self.bb[p], sq):
                return PIECE_TO_CHAR[p]
        return None

    def king_squares(self, color: Color) -> List[int]:
        return list(iter_squares(self.pieces(KING, color)))

    def king_square(self, color: Color) -> Optional[int]:
        """Return the lowest-index square holding ``color``'s king, if any."""
        kings = self.pieces(KING, color)
        if kings == 0:
            return None
        return lsb(kings)

    def to_placement(self) -> str:
        """Serialize the piece placement (first FEN field) in normalized form."""
        ranks_str: List[str] = []
        for rank_idx in range(7, -1, -1):  # 7..0 maps to ranks 8..1
            run = 0
            row = []
            for file_idx in range(8):
                ch = self.piece_at(rank_idx * 8 + file_idx)
                if ch is None:
                    run += 1
                else:
                    if run > 0:
                        row.append(str(run))
                        run = 0
                    row.append(ch)
            if run > 0:
                row.append(str(run))
            ranks_str.append("".join(row))
        return "/".join(ranks_str)
