"""
Public voting endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core.ids import RowIdPath

from . import schemas, service

router = APIRouter()


@router.get("/voter-votes/{voter_id}")
async def voter_votes(voter_id: RowIdPath) -> list[dict]:
    """
    Votes already cast by a voter, so the page can lock those categories.
    """
    return await service.votes_for_voter(voter_id)


@router.post("/vote", status_code=status.HTTP_201_CREATED)
async def vote(request: schemas.VoteRequest) -> schemas.VoteResponse:
    return await service.cast_vote(request)
