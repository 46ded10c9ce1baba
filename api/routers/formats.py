"""Format catalogue endpoints."""

from fastapi import APIRouter, Query

from api.schemas import FormatsResponse
from scoring.formats import available_formats

router = APIRouter()


@router.get("", response_model=FormatsResponse)
async def list_formats(players: int = Query(..., ge=1, le=4)):
    return FormatsResponse(
        player_count=players,
        formats=[f.value for f in available_formats(players)],
    )
