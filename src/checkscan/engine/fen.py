from __future__ import annotations

import logging
from typing import List, Union

from .bitboard import set_bit
from .position import CHAR_TO_PIECE, Position


logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Base class for placement decoding failures."""


class WrongRankCount(DecodeError):
    def __init__(self, count: int) -> None:
        super().__init__(f"invalid FEN: expected 8 ranks, got {count}")
        self.count = count


class RankOverflow(DecodeError):
    def __init__(self, rank: int) -> None:
        super().__init__(f"too many squares on rank {rank}")
        self.rank = rank


class IncompleteRank(DecodeError):
    def __init__(self, rank: int) -> None:
        super().__init__(f"incomplete rank at rank {rank}")
        self.rank = rank


class UnknownPiece(DecodeError):
    def __init__(self, ch: str, rank: int) -> None:
        super().__init__(f"invalid piece in FEN: {ch!r} on rank {rank}")
        self.ch = ch
        self.rank = rank


def decode(fen: str, *, strict: bool = False) -> Position:
    """Decode the piece placement of a FEN string into a :class:`Position`.

    Args:
        fen (str): Placement field alone, or a full FEN; only the first
            whitespace-separated field is read.
        strict (bool): Reject unrecognized characters instead of skipping them.

    Returns:
        Position: Decoded position.

    Raises:
        WrongRankCount: If the placement does not have exactly 8 ranks.
        RankOverflow: If a rank describes more than 8 files.
        IncompleteRank: If a rank describes fewer than 8 files.
        UnknownPiece: If ``strict`` and a character is neither a digit 1-8
            nor a piece letter.

    Notes:
        In lenient mode an unrecognized character still takes up one file,
        sets no bit and is logged.
    """
    parts = fen.split()
    if not parts:
        raise WrongRankCount(0)
    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise WrongRankCount(len(ranks))

    bb: List[int] = [0] * 12
    for idx, rank in enumerate(ranks):
        rank_idx = 7 - idx  # first field is rank 8
        file_idx = 0
        for ch in rank:
            if "1" <= ch <= "8":
                file_idx += int(ch)
                if file_idx > 8:
                    raise RankOverflow(rank_idx + 1)
                continue
            if file_idx >= 8:
                raise RankOverflow(rank_idx + 1)
            p = CHAR_TO_PIECE.get(ch)
            if p is None:
                if strict:
                    raise UnknownPiece(ch, rank_idx + 1)
                logger.warning("skipping unrecognized placement character %r on rank %d", ch, rank_idx + 1)
            else:
                bb[p] = set_bit(bb[p], rank_idx * 8 + file_idx)
            file_idx += 1
        if file_idx != 8:
            raise IncompleteRank(rank_idx + 1)

    position = Position.from_bitboards(bb)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("decoded placement %s", position.to_placement())
    return position


def try_decode(fen: str, *, strict: bool = False) -> Union[Position, DecodeError]:
    """Like :func:`decode` but return the error instead of raising it."""
    try:
        return decode(fen, strict=strict)
    except DecodeError as e:
        return e
