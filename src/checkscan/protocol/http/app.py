from __future__ import annotations

import logging
from typing import Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from .error import (
    decode_error_handler,
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from ...engine.attacks import attackers, check_status, is_attacked
from ...engine.bitboard import iter_squares, square_to_str, str_to_square
from ...engine.fen import DecodeError, decode
from ...engine.position import Color, Position
from ...engine.render import render_board
from ...engine.samples import SAMPLES, get_sample


logger = logging.getLogger(__name__)


class CheckRequest(BaseModel):
    fen: str = Field(..., description="Placement field or full FEN string")
    strict: bool = Field(default=False, description="Reject unknown placement characters")


class AttackedRequest(BaseModel):
    fen: str = Field(..., description="Placement field or full FEN string")
    square: str = Field(..., pattern=r"^[a-h][1-8]$", description="Target square, e.g. e8")
    by: Literal["w", "b", "white", "black"] = Field(..., description="Attacking side")
    strict: bool = False


class CheckResponse(BaseModel):
    placement: str
    white_in_check: bool
    black_in_check: bool
    white_king: Optional[str]
    black_king: Optional[str]
    white_attackers: List[str]
    black_attackers: List[str]
    board: str


class AttackedResponse(BaseModel):
    square: str
    by: str
    attacked: bool
    attackers: List[str]


class SampleInfo(BaseModel):
    id: int
    name: str
    fen: str


def create_app() -> FastAPI:
    app = FastAPI(title="checkscan", version="0.1.0")

    # Basic logging setup
    logging.basicConfig(level=logging.INFO)

    # Middleware & error handling
    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(DecodeError, decode_error_handler)
    app.add_exception_handler(Exception, exception_handler)

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/check", response_model=CheckResponse)
    async def check(req: CheckRequest) -> CheckResponse:
        return _check_response(decode(req.fen, strict=req.strict))

    @app.post("/api/attacked", response_model=AttackedResponse)
    async def attacked(req: AttackedRequest) -> AttackedResponse:
        position = decode(req.fen, strict=req.strict)
        sq = str_to_square(req.square)
        color = Color.parse(req.by)
        return AttackedResponse(
            square=req.square,
            by=color.value,
            attacked=is_attacked(position, sq, color),
            attackers=_square_names(attackers(position, sq, color)),
        )

    @app.get("/api/samples", response_model=List[SampleInfo])
    async def samples() -> List[SampleInfo]:
        return [SampleInfo(id=s.id, name=s.name, fen=s.fen) for s in SAMPLES]

    @app.get("/api/samples/{sample_id}/check", response_model=CheckResponse)
    async def sample_check(sample_id: int) -> CheckResponse:
        sample = get_sample(sample_id)
        if sample is None:
            raise HTTPException(status_code=404, detail="sample not found")
        return _check_response(decode(sample.fen))

    return app


def _check_response(position: Position) -> CheckResponse:
    status = check_status(position)
    white_attackers = _king_attackers(position, Color.WHITE)
    black_attackers = _king_attackers(position, Color.BLACK)
    return CheckResponse(
        placement=position.to_placement(),
        white_in_check=status.white_in_check,
        black_in_check=status.black_in_check,
        white_king=_square_name(status.white_king),
        black_king=_square_name(status.black_king),
        white_attackers=_square_names(white_attackers),
        black_attackers=_square_names(black_attackers),
        board=render_board(position),
    )


def _king_attackers(position: Position, color: Color) -> int:
    # Union over every king of the side, matching in_check
    bb = 0
    for ksq in position.king_squares(color):
        bb |= attackers(position, ksq, color.other)
    return bb


def _square_name(sq: Optional[int]) -> Optional[str]:
    return square_to_str(sq) if sq is not None else None


def _square_names(bb: int) -> List[str]:
    return [square_to_str(sq) for sq in iter_squares(bb)]


# Default app for non-factory servers
app = create_app()
