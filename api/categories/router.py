"""
Category endpoints.

`public_router` serves the voting page; `admin_router` is mounted behind the
admin key.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core.ids import RowIdPath

from . import schemas, service

public_router = APIRouter()
admin_router = APIRouter()


@public_router.get("/categories-nominees")
async def categories_nominees() -> list[dict]:
    """
    Active categories, each with only the nominees linked to it.
    """
    return await service.active_categories_with_nominees()


@admin_router.get("/categories")
async def list_categories() -> list[dict]:
    return await service.list_categories()


@admin_router.post("/categories", status_code=status.HTTP_201_CREATED)
async def create_category(request: schemas.CreateCategoryRequest) -> dict:
    return await service.create_category(request)


@admin_router.patch("/categories/{category_id}")
async def update_category(category_id: RowIdPath, request: schemas.UpdateCategoryRequest) -> dict:
    return await service.update_category(category_id, request)


@admin_router.delete("/categories/{category_id}")
async def delete_category(category_id: RowIdPath) -> dict:
    """
    Delete a category together with its votes and nominations.
    """
    return await service.delete_category(category_id)
