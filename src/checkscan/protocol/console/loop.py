from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Iterator, List, Optional

from ...engine.attacks import check_status
from ...engine.fen import DecodeError, decode
from ...engine.render import render_board
from ...engine.samples import SAMPLES, Sample


logger = logging.getLogger(__name__)

Writer = Callable[[str], None]


class ConsoleSession:
    """Interactive check-detection prompt.

    Notes:
    - Input is any iterable of lines; output goes through ``write`` so tests
      can capture it.
    - Each round: read a FEN (or ``menu``), report both sides' check status,
      then ask whether to continue.
    """

    def __init__(self, write: Writer, *, strict: bool = False, samples: Optional[List[Sample]] = None) -> None:
        self.write = write
        self.strict = strict
        self.samples = samples if samples is not None else SAMPLES

    def run(self, lines: Iterable[str]) -> None:
        it = iter(lines)
        while True:
            self.write("Enter FEN (or type 'menu' to choose a predefined):")
            fen = _next_line(it)
            if fen is None:
                return
            if fen.lower() == "menu":
                selected = self.cmd_menu(it)
                if selected is None:
                    self.write("No selection made.")
                else:
                    self.cmd_check(selected)
            elif not fen:
                self.write("No FEN provided.")
            else:
                self.cmd_check(fen)

            self.write("Check another FEN? (y/n):")
            resp = _next_line(it)
            if not resp or resp.lower()[0] != "y":
                return

    # ---- Command handlers ----
    def cmd_menu(self, it: Iterator[str]) -> Optional[str]:
        """List the samples and return the chosen FEN, or None on cancel."""
        self.write("Predefined FENs:")
        for s in self.samples:
            self.write(f"  {s.id:2d}) {s.name}")
        self.write("   0) Cancel")
        self.write("Select a number:")
        line = _next_line(it)
        if not line or line == "0":
            return None
        if not (line.isascii() and line.isdigit()):
            self.write("Invalid selection.")
            return None
        n = int(line)
        for s in self.samples:
            if s.id == n:
                return s.fen
        self.write("Invalid selection.")
        return None

    def cmd_check(self, fen: str) -> None:
        try:
            position = decode(fen, strict=self.strict)
        except DecodeError as e:
            logger.info("rejected FEN %r: %s", fen, e)
            self.write(f"FEN parse error: {e}")
            return
        self.write(render_board(position))
        status = check_status(position)
        if not status.kings_present:
            self.write(
                "Note: Missing king(s): "
                f"whitePresent={status.white_king is not None}, "
                f"blackPresent={status.black_king is not None}"
            )
        self.write(f"White in check? {status.white_in_check}")
        self.write(f"Black in check? {status.black_in_check}")


def _next_line(it: Iterator[str]) -> Optional[str]:
    try:
        return next(it).strip()
    except StopIteration:
        return None


def _default_writer(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def run_console(*, strict: bool = False) -> None:
    ConsoleSession(_default_writer, strict=strict).run(sys.stdin)
