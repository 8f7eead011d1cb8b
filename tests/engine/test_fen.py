from __future__ import annotations

import logging

import pytest

from checkscan.engine.bitboard import str_to_square
from checkscan.engine.fen import (
    DecodeError,
    IncompleteRank,
    RankOverflow,
    UnknownPiece,
    WrongRankCount,
    decode,
    try_decode,
)
from checkscan.engine.position import KING, PAWN, Color, Position


STARTPOS = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def test_startpos_round_trip() -> None:
    assert decode(STARTPOS).to_placement() == STARTPOS


@pytest.mark.parametrize(
    "placement",
    [
        "r1bqkbnr/pppp1ppp/2n5/4p3/3P4/5N2/PPP1PPPP/RNBQKB1R",
        "r3k2r/8/8/8/8/8/8/R3K2R",
        "8/8/8/8/8/8/4kK2/8",
    ],
)
def test_round_trip_various_positions(placement: str) -> None:
    assert decode(placement).to_placement() == placement


def test_first_field_is_rank_eight() -> None:
    p = decode("4k3/8/8/8/8/8/P7/4K3")
    assert p.pieces(KING, Color.BLACK) == 1 << str_to_square("e8")
    assert p.pieces(KING, Color.WHITE) == 1 << str_to_square("e1")
    assert p.pieces(PAWN, Color.WHITE) == 1 << str_to_square("a2")


def test_full_fen_fields_are_ignored() -> None:
    assert decode("4k3/8/8/8/8/8/4R3/4K3 w - - 0 1") == decode("4k3/8/8/8/8/8/4R3/4K3")


def test_empty_board() -> None:
    assert decode("8/8/8/8/8/8/8/8") == Position.empty()


@pytest.mark.parametrize(
    "placement,count",
    [
        ("8/8/8/8/8/8/8", 7),
        ("8/8/8/8/8/8/8/8/8", 9),
        ("", 0),
        ("   ", 0),
    ],
)
def test_wrong_rank_count(placement: str, count: int) -> None:
    with pytest.raises(WrongRankCount) as exc:
        decode(placement)
    assert exc.value.count == count


@pytest.mark.parametrize(
    "placement,rank",
    [
        ("8/8/8/8/8/8/8/K7k", 1),  # piece on a ninth file
        ("ppppppppp/8/8/8/8/8/8/8", 8),
        ("8/8/8/8/8/8/8/45", 1),  # digit run past the h-file
        ("8/8/8/8/K8/8/8/8", 4),
    ],
)
def test_rank_overflow(placement: str, rank: int) -> None:
    with pytest.raises(RankOverflow) as exc:
        decode(placement)
    assert exc.value.rank == rank


@pytest.mark.parametrize(
    "placement,rank",
    [
        ("7/8/8/8/8/8/8/8", 8),
        ("8/8/8/8/8/8/8/4K2", 1),
        ("8/8/8//8/8/8/8", 5),
    ],
)
def test_incomplete_rank(placement: str, rank: int) -> None:
    with pytest.raises(IncompleteRank) as exc:
        decode(placement)
    assert exc.value.rank == rank


def test_decode_errors_are_value_errors() -> None:
    for cls in (WrongRankCount, RankOverflow, IncompleteRank, UnknownPiece):
        assert issubclass(cls, DecodeError)
        assert issubclass(cls, ValueError)


def test_unknown_character_is_skipped_but_takes_a_file(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="checkscan.engine.fen"):
        p = decode("4k3/8/8/8/8/8/X7/4K3")
    assert p == decode("4k3/8/8/8/8/8/8/4K3")
    assert any("'X'" in r.getMessage() for r in caplog.records)


def test_strict_mode_rejects_unknown_character() -> None:
    with pytest.raises(UnknownPiece) as exc:
        decode("4k3/8/8/8/8/8/X7/4K3", strict=True)
    assert exc.value.ch == "X"
    assert exc.value.rank == 2


@pytest.mark.parametrize("digit", ["0", "9"])
def test_out_of_range_digits_are_unknown_characters(digit: str) -> None:
    with pytest.raises(IncompleteRank):
        decode(f"{digit}/8/8/8/8/8/8/8")
    with pytest.raises(UnknownPiece):
        decode(f"{digit}7/8/8/8/8/8/8/8", strict=True)


def test_try_decode_returns_error_value() -> None:
    result = try_decode("8/8/8/8/8/8/8")
    assert isinstance(result, WrongRankCount)
    ok = try_decode("8/8/8/8/8/8/8/8")
    assert isinstance(ok, Position)
