"""
Nomination business logic.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from . import repository

logger = logging.getLogger(__name__)

_DUPLICATE_DETAIL = "This nominee is already nominated in this category."


def _to_nomination(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": int(row["id"]),
        "category": {"id": int(row["category_id"]), "name": row["category_name"]},
        "nominee": {"id": int(row["nominee_id"]), "name": row["nominee_name"]},
        "created_at": row.get("created_at"),
    }


async def list_nominations() -> list[dict[str, Any]]:
    rows = await repository.list_nominations()
    return [_to_nomination(row) for row in rows]


async def create_nomination(*, category_id: int, nominee_id: int) -> dict[str, Any]:
    # Fast-path check; the unique index is what actually guarantees this.
    if await repository.nomination_exists(category_id=category_id, nominee_id=nominee_id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=_DUPLICATE_DETAIL)

    try:
        row = await repository.create_nomination(category_id=category_id, nominee_id=nominee_id)
    except asyncpg.UniqueViolationError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=_DUPLICATE_DETAIL) from exc
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unknown category or nominee.",
        ) from exc

    logger.info(
        "nomination_created id=%s category_id=%s nominee_id=%s",
        row["id"],
        category_id,
        nominee_id,
    )
    return row


async def delete_nomination(nomination_id: int) -> dict[str, Any]:
    counts = await repository.delete_nomination(nomination_id)
    if counts is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nomination not found.")

    logger.info("nomination_deleted id=%s votes_deleted=%s", nomination_id, counts["votes_deleted"])
    return {"message": "Nomination deleted successfully.", "nomination_id": nomination_id, **counts}
