"""
Nomination (category-nominee link) endpoints (admin).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core.ids import RowIdPath

from . import schemas, service

router = APIRouter()


@router.get("/nominations")
async def list_nominations() -> list[dict]:
    """
    All links, with category and nominee names joined in for display.
    """
    return await service.list_nominations()


@router.post("/nominations", status_code=status.HTTP_201_CREATED)
async def create_nomination(request: schemas.CreateNominationRequest) -> dict:
    return await service.create_nomination(
        category_id=request.category_id,
        nominee_id=request.nominee_id,
    )


@router.delete("/nominations/{nomination_id}")
async def delete_nomination(nomination_id: RowIdPath) -> dict:
    return await service.delete_nomination(nomination_id)
