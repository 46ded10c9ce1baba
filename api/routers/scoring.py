"""Scoring endpoints. Stateless: nothing about a round is kept between calls."""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_settings
from api.schemas import (
    HandicapsRequest,
    HandicapsResponse,
    HoleScoreRequest,
    RoundRequest,
    StatusResponse,
)
from models import HoleScore, Settlement
from scoring.config import ScoringSettings
from scoring.exceptions import UnknownFormatError
from scoring.formats import compute_format
from scoring.handicap import playing_handicaps
from scoring.settlement import build_settlement
from scoring.stableford import score_hole
from scoring.status import summarize

router = APIRouter()


@router.post("/hole-score", response_model=HoleScore)
async def post_hole_score(
    req: HoleScoreRequest, settings: ScoringSettings = Depends(get_settings)
):
    """Net score and Stableford points for one gross entry."""
    return score_hole(
        req.gross,
        req.handicap_index,
        req.par,
        req.stroke_index,
        course_rating=req.course_rating or settings.default_course_rating,
        slope_rating=req.slope_rating or settings.default_slope_rating,
        reference_par=req.reference_par or settings.fixed_reference_par,
        hole_count=req.hole_count,
    )


@router.post("/handicaps", response_model=HandicapsResponse)
async def post_handicaps(req: HandicapsRequest):
    return HandicapsResponse(
        course_handicaps=playing_handicaps(req.players, req.course, req.reference_par)
    )


@router.post("/formats/{format_name}")
async def post_format(format_name: str, req: RoundRequest):
    """Replay one format; null when it does not apply to the group."""
    try:
        return compute_format(format_name, req.players, req.state, req.teams)
    except UnknownFormatError as e:
        raise HTTPException(404, str(e))


@router.post("/status", response_model=StatusResponse)
async def post_status(req: RoundRequest):
    try:
        lines = summarize(req.formats, req.state, req.players, req.teams)
    except UnknownFormatError as e:
        raise HTTPException(400, str(e))
    return StatusResponse(current_hole=req.state.current_hole, lines=lines)


@router.post("/settlement", response_model=Settlement)
async def post_settlement(req: RoundRequest):
    try:
        return build_settlement(req.players, req.state, req.formats, req.teams)
    except UnknownFormatError as e:
        raise HTTPException(400, str(e))
