"""
Nomination persistence (raw SQL).

A nomination is the (category, nominee) link that makes a nominee eligible for
votes in that category. `(category_id, nominee_id)` is unique.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_nominations() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT
          n.id,
          n.category_id,
          c.name AS category_name,
          n.nominee_id,
          ne.name AS nominee_name,
          n.created_at
        FROM nominations n
        JOIN categories c ON c.id = n.category_id
        JOIN nominees ne ON ne.id = n.nominee_id
        ORDER BY c.name ASC, n.id ASC
        """
    )


async def nomination_exists(*, category_id: int, nominee_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM nominations
        WHERE category_id = $1
          AND nominee_id = $2
        LIMIT 1
        """,
        category_id,
        nominee_id,
    )
    return row is not None


async def create_nomination(*, category_id: int, nominee_id: int) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO nominations (category_id, nominee_id)
        VALUES ($1, $2)
        RETURNING id, category_id, nominee_id, created_at
        """,
        category_id,
        nominee_id,
    )
    if row is None:
        raise RuntimeError("Failed to create nomination.")
    return row


async def delete_nomination(nomination_id: int) -> dict[str, int] | None:
    """
    Delete a nomination and the votes cast for that (category, nominee) pair
    in one transaction. None when the nomination does not exist.
    """
    async with db.transaction() as conn:
        row = await conn.fetchrow(
            "SELECT category_id, nominee_id FROM nominations WHERE id = $1 FOR UPDATE",
            nomination_id,
        )
        if row is None:
            return None

        votes = await conn.execute(
            "DELETE FROM votes WHERE category_id = $1 AND nominee_id = $2",
            row["category_id"],
            row["nominee_id"],
        )
        await conn.execute("DELETE FROM nominations WHERE id = $1", nomination_id)

    return {"votes_deleted": db.affected_rows(votes)}
