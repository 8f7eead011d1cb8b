from __future__ import annotations

import pytest

from checkscan.engine.attacks import attackers, check_status, in_check, is_attacked
from checkscan.engine.bitboard import iter_squares, popcount, str_to_square
from checkscan.engine.fen import decode
from checkscan.engine.position import BK, BN, WK, WN, Color, Position
from checkscan.engine.tables import knight_attacks


def sq(name: str) -> int:
    return str_to_square(name)


@pytest.mark.parametrize(
    "placement,white_check,black_check",
    [
        ("4k3/8/8/8/8/8/4R3/4K3", False, True),  # open-file rook
        ("4k3/8/8/8/4p3/8/4R3/4K3", False, False),  # ray blocked on e4
        ("4k3/8/8/8/8/8/P7/4K3", False, False),  # a-file pawn must not wrap
        ("4k3/8/8/8/8/8/7P/4K3", False, False),  # h-file pawn must not wrap
        ("4k3/8/8/1B6/8/8/4R3/4K3", False, True),  # bishop and rook together
    ],
)
def test_check_scenarios(placement: str, white_check: bool, black_check: bool) -> None:
    status = check_status(decode(placement))
    assert status.white_in_check is white_check
    assert status.black_in_check is black_check


def test_double_check_counts_two_attackers() -> None:
    p = decode("4k3/8/8/1B6/8/8/4R3/4K3")
    att = attackers(p, sq("e8"), Color.WHITE)
    assert popcount(att) == 2
    assert set(iter_squares(att)) == {sq("b5"), sq("e2")}
    assert is_attacked(p, sq("e8"), Color.WHITE)


def test_wrapped_pawn_square_not_attacked() -> None:
    # unmasked +9 from h2 would land on a4
    p = decode("4k3/8/8/8/8/8/7P/4K3")
    assert not is_attacked(p, sq("a4"), Color.WHITE)
    assert is_attacked(p, sq("g3"), Color.WHITE)
    q = decode("4k3/8/8/8/8/8/P7/4K3")
    # unmasked +7 from a2 would land on h2
    assert not is_attacked(q, sq("h2"), Color.WHITE)
    assert is_attacked(q, sq("b3"), Color.WHITE)


@pytest.mark.parametrize(
    "placement,target,by",
    [
        ("8/4k3/3P4/8/8/8/8/4K3", "e7", Color.WHITE),  # white pawn NE
        ("8/3k4/4P3/8/8/8/8/4K3", "d7", Color.WHITE),  # white pawn NW
        ("4k3/8/8/8/8/3p4/4K3/8", "e2", Color.BLACK),  # black pawn SE
        ("4k3/8/8/8/8/4p3/3K4/8", "d2", Color.BLACK),  # black pawn SW
        ("4k3/8/3N4/8/8/8/8/4K3", "e8", Color.WHITE),  # knight
        ("8/8/8/8/8/8/4kK2/8", "f2", Color.BLACK),  # king contact
        ("4k3/8/8/4q3/8/8/8/4K3", "e1", Color.BLACK),  # queen on file
        ("7k/8/8/8/3Q4/8/8/4K3", "h8", Color.WHITE),  # queen on diagonal
    ],
)
def test_each_contact_kind(placement: str, target: str, by: Color) -> None:
    p = decode(placement)
    assert is_attacked(p, sq(target), by)
    assert attackers(p, sq(target), by) != 0


def test_pawns_do_not_attack_backwards() -> None:
    p = decode("4k3/8/8/8/8/8/8/4K3")
    bb = list(p.bb)
    bb[0] = 1 << sq("e4")  # white pawn
    p = Position.from_bitboards(bb)
    assert is_attacked(p, sq("d5"), Color.WHITE)
    assert not is_attacked(p, sq("d3"), Color.WHITE)
    assert not is_attacked(p, sq("e5"), Color.WHITE)


def test_friendly_piece_also_blocks() -> None:
    # Black rook e2 sits between white rook e1 and black king e8
    p = decode("4k3/8/8/8/8/8/4r3/4RK2")
    assert not is_attacked(p, sq("e8"), Color.WHITE)
    assert is_attacked(p, sq("e2"), Color.WHITE)


def test_knight_reciprocity_every_square() -> None:
    for a in range(64):
        bb = [0] * 12
        bb[WN] = 1 << a
        p = Position.from_bitboards(bb)
        for b in iter_squares(knight_attacks(a)):
            assert is_attacked(p, b, Color.WHITE)
        bb = [0] * 12
        bb[BN] = 1 << a
        p = Position.from_bitboards(bb)
        for b in iter_squares(knight_attacks(a)):
            assert is_attacked(p, b, Color.BLACK)


def test_empty_board_attacks_nothing() -> None:
    p = Position.empty()
    for s in range(64):
        assert not is_attacked(p, s, Color.WHITE)
        assert not is_attacked(p, s, Color.BLACK)


def test_missing_king_is_never_in_check() -> None:
    # Black rook on the e-file, no white king
    p = decode("4k3/4r3/8/8/8/8/8/8")
    status = check_status(p)
    assert status.white_king is None
    assert status.white_in_check is False
    assert not status.kings_present
    assert not in_check(p, Color.WHITE)


def test_multiple_kings_any_attacked_counts() -> None:
    bb = [0] * 12
    bb[WK] = (1 << sq("a1")) | (1 << sq("h1"))
    bb[BK] = 1 << sq("h8")  # attacks nothing near the white kings
    p = Position.from_bitboards(bb)
    assert not in_check(p, Color.WHITE)
    # Black rook on the h-file hits only the h1 king
    p = decode("7k/8/8/8/8/8/7r/K6K")
    assert in_check(p, Color.WHITE)
    assert check_status(p).white_king == sq("a1")


def test_attackers_of_unattacked_square_is_empty() -> None:
    p = decode("4k3/8/8/8/8/8/4R3/4K3")
    assert attackers(p, sq("a8"), Color.WHITE) == 0
    assert attackers(p, sq("b6"), Color.WHITE) == 0
