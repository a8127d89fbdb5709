"""
Nominee management endpoints (admin).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core.ids import RowIdPath

from . import schemas, service

router = APIRouter()


@router.get("/nominees")
async def list_nominees() -> list[dict]:
    return await service.list_nominees()


@router.post("/nominees", status_code=status.HTTP_201_CREATED)
async def create_nominee(request: schemas.NomineeRequest) -> dict:
    return await service.create_nominee(request.name)


@router.patch("/nominees/{nominee_id}")
async def update_nominee(nominee_id: RowIdPath, request: schemas.NomineeRequest) -> dict:
    return await service.rename_nominee(nominee_id, request.name)


@router.delete("/nominees/{nominee_id}")
async def delete_nominee(nominee_id: RowIdPath) -> dict:
    return await service.delete_nominee(nominee_id)
