"""
Results endpoint (admin).
"""

from __future__ import annotations

from fastapi import APIRouter

from core.ids import RowIdQuery

from . import service

router = APIRouter()


@router.get("/winners")
async def winners(category_id: RowIdQuery = None) -> list[dict]:
    return await service.winners(category_id=category_id)
