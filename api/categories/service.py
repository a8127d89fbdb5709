"""
Category business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


def group_category_nominees(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Fold flat (category, nominee) rows into one entry per category.

    Row order is preserved; rows with a NULL nominee only register the
    category.
    """
    grouped: dict[int, dict[str, Any]] = {}
    for row in rows:
        category_id = int(row["category_id"])
        entry = grouped.get(category_id)
        if entry is None:
            entry = {
                "id": category_id,
                "name": row["category_name"],
                "description": row["category_description"],
                "nominees": [],
            }
            grouped[category_id] = entry

        if row.get("nominee_id") is not None:
            entry["nominees"].append({"id": int(row["nominee_id"]), "name": row["nominee_name"]})

    return list(grouped.values())


async def active_categories_with_nominees() -> list[dict[str, Any]]:
    rows = await repository.list_active_category_nominees()
    return group_category_nominees(rows)


async def list_categories() -> list[dict[str, Any]]:
    return await repository.list_categories()


async def create_category(payload: schemas.CreateCategoryRequest) -> dict[str, Any]:
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Category name is required.")

    row = await repository.create_category(
        name=name,
        description=payload.description,
        is_active=payload.is_active,
    )
    logger.info("category_created id=%s", row["id"])
    return row


async def update_category(category_id: int, payload: schemas.UpdateCategoryRequest) -> dict[str, Any]:
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("is_active", False) is None:
        changes.pop("is_active")
    if "name" in changes:
        if changes["name"] is None or not changes["name"].strip():
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Category name cannot be empty.")
        changes["name"] = changes["name"].strip()

    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one field (name, description or is_active) is required to update.",
        )

    row = await repository.update_category(category_id, changes)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found.")
    return row


async def delete_category(category_id: int) -> dict[str, Any]:
    counts = await repository.delete_category_cascade(category_id)
    if counts is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found.")

    logger.info(
        "category_deleted id=%s votes_deleted=%s nominations_deleted=%s",
        category_id,
        counts["votes_deleted"],
        counts["nominations_deleted"],
    )
    return {
        "message": "Category, associated nominations, and votes deleted successfully.",
        "category_id": category_id,
        **counts,
    }
