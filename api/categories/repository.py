"""
Category persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

_CATEGORY_COLUMNS = "id, name, description, is_active, created_at"

# Columns an admin may change through PATCH.
UPDATABLE_COLUMNS = ("name", "description", "is_active")


async def list_categories() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_CATEGORY_COLUMNS}
        FROM categories
        ORDER BY created_at ASC, id ASC
        """
    )


async def list_active_category_nominees() -> list[dict[str, Any]]:
    """
    One row per (active category, nominee) link, plus one row with NULL
    nominee columns for each active category that has no nominations.
    """
    return await db.fetch_all(
        """
        SELECT
          c.id AS category_id,
          c.name AS category_name,
          c.description AS category_description,
          ne.id AS nominee_id,
          ne.name AS nominee_name
        FROM categories c
        LEFT JOIN nominations n ON n.category_id = c.id
        LEFT JOIN nominees ne ON ne.id = n.nominee_id
        WHERE c.is_active = true
        ORDER BY c.name ASC, c.id ASC, n.id ASC
        """
    )


async def create_category(*, name: str, description: str | None, is_active: bool) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO categories (name, description, is_active)
        VALUES ($1, $2, $3)
        RETURNING {_CATEGORY_COLUMNS}
        """,
        name,
        description,
        is_active,
    )
    if row is None:
        raise RuntimeError("Failed to create category.")
    return row


async def update_category(category_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply `changes` (subset of UPDATABLE_COLUMNS) and return the updated row,
    or None when the category does not exist.
    """
    columns = [c for c in UPDATABLE_COLUMNS if c in changes]
    if not columns:
        raise RuntimeError("update_category called without changes.")

    assignments = ", ".join(f"{col} = ${i}" for i, col in enumerate(columns, start=2))
    return await db.fetch_one(
        f"""
        UPDATE categories
        SET {assignments}
        WHERE id = $1
        RETURNING {_CATEGORY_COLUMNS}
        """,
        category_id,
        *[changes[col] for col in columns],
    )


async def delete_category_cascade(category_id: int) -> dict[str, int] | None:
    """
    Delete a category with its votes and nominations in one transaction.

    Returns per-table delete counts, or None (and nothing deleted) when the
    category does not exist.
    """
    async with db.transaction() as conn:
        exists = await conn.fetchval("SELECT 1 FROM categories WHERE id = $1 FOR UPDATE", category_id)
        if exists is None:
            return None

        votes = await conn.execute("DELETE FROM votes WHERE category_id = $1", category_id)
        nominations = await conn.execute("DELETE FROM nominations WHERE category_id = $1", category_id)
        await conn.execute("DELETE FROM categories WHERE id = $1", category_id)

    return {
        "votes_deleted": db.affected_rows(votes),
        "nominations_deleted": db.affected_rows(nominations),
    }
