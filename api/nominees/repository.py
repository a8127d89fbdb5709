"""
Nominee persistence (raw SQL).

Nominees are category-independent; the link to categories lives in
`nominations`.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_nominees() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, created_at
        FROM nominees
        ORDER BY name ASC, id ASC
        """
    )


async def create_nominee(*, name: str) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO nominees (name)
        VALUES ($1)
        RETURNING id, name, created_at
        """,
        name,
    )
    if row is None:
        raise RuntimeError("Failed to create nominee.")
    return row


async def update_nominee(nominee_id: int, *, name: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE nominees
        SET name = $2
        WHERE id = $1
        RETURNING id, name, created_at
        """,
        nominee_id,
        name,
    )


async def delete_nominee_cascade(nominee_id: int) -> dict[str, int] | None:
    """
    Delete a nominee with its votes and nominations (across all categories)
    in one transaction. None when the nominee does not exist.
    """
    async with db.transaction() as conn:
        exists = await conn.fetchval("SELECT 1 FROM nominees WHERE id = $1 FOR UPDATE", nominee_id)
        if exists is None:
            return None

        votes = await conn.execute("DELETE FROM votes WHERE nominee_id = $1", nominee_id)
        nominations = await conn.execute("DELETE FROM nominations WHERE nominee_id = $1", nominee_id)
        await conn.execute("DELETE FROM nominees WHERE id = $1", nominee_id)

    return {
        "votes_deleted": db.affected_rows(votes),
        "nominations_deleted": db.affected_rows(nominations),
    }
