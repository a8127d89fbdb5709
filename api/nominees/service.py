"""
Nominee business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from . import repository

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Nominee name is required.")
    return cleaned


async def list_nominees() -> list[dict[str, Any]]:
    return await repository.list_nominees()


async def create_nominee(name: str) -> dict[str, Any]:
    row = await repository.create_nominee(name=_clean_name(name))
    logger.info("nominee_created id=%s", row["id"])
    return row


async def rename_nominee(nominee_id: int, name: str) -> dict[str, Any]:
    row = await repository.update_nominee(nominee_id, name=_clean_name(name))
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nominee not found.")
    return row


async def delete_nominee(nominee_id: int) -> dict[str, Any]:
    counts = await repository.delete_nominee_cascade(nominee_id)
    if counts is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nominee not found.")

    logger.info(
        "nominee_deleted id=%s votes_deleted=%s nominations_deleted=%s",
        nominee_id,
        counts["votes_deleted"],
        counts["nominations_deleted"],
    )
    return {
        "message": "Nominee, all associated nominations, and votes deleted successfully.",
        "nominee_id": nominee_id,
        **counts,
    }
