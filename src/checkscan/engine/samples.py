from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Sample:
    """Named demonstration position with its expected check flags."""

    id: int
    name: str
    fen: str
    white_in_check: bool
    black_in_check: bool


SAMPLES: List[Sample] = [
    Sample(1, "Empty kings only (no checks)", "4k3/8/8/8/8/8/8/4K3 w - - 0 1", False, False),
    Sample(2, "Rook e2 checks black king e8", "4k3/8/8/8/8/8/4R3/4K3 w - - 0 1", False, True),
    Sample(3, "Rook e2 blocked by e4 (no check)", "4k3/8/8/8/4p3/8/4R3/4K3 w - - 0 1", False, False),
    Sample(4, "Black rook a3 checks white king a1", "4k3/8/8/8/8/r7/8/K7 w - - 0 1", True, False),
    Sample(5, "Bishop b5 checks black king e8", "4k3/8/8/1B6/8/8/8/4K3 w - - 0 1", False, True),
    Sample(6, "Bishop b5 blocked by d7 (no check)", "4k3/3p4/8/1B6/8/8/8/4K3 w - - 0 1", False, False),
    Sample(7, "Queen h5 checks black king e8", "4k3/8/8/7Q/8/8/8/4K3 w - - 0 1", False, True),
    Sample(8, "Queen e2 checks black king e8", "4k3/8/8/8/8/8/4Q3/4K3 w - - 0 1", False, True),
    Sample(9, "Knight d6 checks black king e8", "4k3/8/3N4/8/8/8/8/4K3 w - - 0 1", False, True),
    Sample(10, "Black knight f4 checks white king e2", "4k3/8/8/8/5n2/8/4K3/8 w - - 0 1", True, False),
    Sample(11, "White pawn d6 checks black king e7 (NE)", "8/4k3/3P4/8/8/8/8/4K3 w - - 0 1", False, True),
    Sample(12, "White pawn e6 checks black king d7 (NW)", "8/3k4/4P3/8/8/8/8/4K3 w - - 0 1", False, True),
    Sample(13, "Black pawn d3 checks white king e2 (SE)", "4k3/8/8/8/8/3p4/4K3/8 w - - 0 1", True, False),
    Sample(14, "Black pawn e3 checks white king d2 (SW)", "4k3/8/8/8/8/4p3/3K4/8 w - - 0 1", True, False),
    Sample(15, "White pawn a2 edge (b3 only)", "4k3/8/8/8/8/8/P7/4K3 w - - 0 1", False, False),
    Sample(16, "White pawn h2 edge (g3 only)", "4k3/8/8/8/8/8/7P/4K3 w - - 0 1", False, False),
    Sample(17, "Rook c1 and bishop b7 check black king c8", "2k5/1B6/8/8/8/8/8/2R1K3 w - - 0 1", False, True),
    Sample(18, "Black queen e5 checks white king e1", "4k3/8/8/4q3/8/8/8/4K3 w - - 0 1", True, False),
    Sample(19, "Double check: bishop b5 and rook e2 on e8", "4k3/8/8/1B6/8/8/4R3/4K3 w - - 0 1", False, True),
    Sample(20, "Adjacent kings both in check", "8/8/8/8/8/8/4kK2/8 w - - 0 1", True, True),
    Sample(21, "Bishop a3 checks king d6", "8/8/3k4/8/8/B7/8/4K3 w - - 0 1", False, True),
    Sample(22, "Queen d4 checks h8 past nearby pawns", "7k/3p4/2p5/8/3Q4/2p5/8/4K3 w - - 0 1", False, True),
    Sample(23, "Queen d4 blocked by e5 (no check)", "7k/8/8/4p3/3Q4/8/8/4K3 w - - 0 1", False, False),
]


def get_sample(sample_id: int) -> Optional[Sample]:
    for s in SAMPLES:
        if s.id == sample_id:
            return s
    return None
