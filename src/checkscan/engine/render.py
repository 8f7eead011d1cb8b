from __future__ import annotations

from typing import List

from .position import Position


def render_board(position: Position, *, empty: str = ".") -> str:
    """Return a text diagram of ``position``, rank 8 on top, with file labels."""
    lines: List[str] = ["Board:"]
    for rank_idx in range(7, -1, -1):
        cells = [position.piece_at(rank_idx * 8 + f) or empty for f in range(8)]
        lines.append(f"{rank_idx + 1}  " + " ".join(cells))
    lines.append("   a b c d e f g h")
    return "\n".join(lines)
