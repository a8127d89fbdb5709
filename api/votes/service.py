"""
Vote business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from . import integrity, repository, schemas

logger = logging.getLogger(__name__)


async def cast_vote(payload: schemas.VoteRequest) -> schemas.VoteResponse:
    try:
        row = await integrity.record_vote(
            voter_id=payload.voter_id,
            category_id=payload.category_id,
            nominee_id=payload.nominee_id,
        )
    except integrity.DuplicateVote as exc:
        logger.info(
            "vote_rejected reason=duplicate voter_id=%s category_id=%s",
            payload.voter_id,
            payload.category_id,
        )
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except integrity.VoteRejected as exc:
        logger.info(
            "vote_rejected reason=%s voter_id=%s category_id=%s nominee_id=%s",
            type(exc).__name__,
            payload.voter_id,
            payload.category_id,
            payload.nominee_id,
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info(
        "vote_recorded vote_id=%s voter_id=%s category_id=%s nominee_id=%s",
        row["id"],
        payload.voter_id,
        payload.category_id,
        payload.nominee_id,
    )
    return schemas.VoteResponse(vote_id=int(row["id"]))


async def votes_for_voter(voter_id: int) -> list[dict[str, Any]]:
    rows = await repository.list_votes_for_voter(voter_id)
    return [
        {"category_id": int(row["category_id"]), "nominee_id": int(row["nominee_id"])}
        for row in rows
    ]
