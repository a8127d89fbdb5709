"""
Results persistence: one aggregated query for every category's tally.

A single statement runs against a single snapshot, so a vote inserted while
results are computed either shows up in its category or not at all.
"""

from __future__ import annotations

from typing import Any

from core import db


async def fetch_tally_rows(*, category_id: int | None = None) -> list[dict[str, Any]]:
    """
    One row per (active category, nomination) with its vote count, plus one
    row with NULL nomination columns for each active category that has no
    nominations.

    Ordered by category (name, id), then nomination id.
    """
    return await db.fetch_all(
        """
        SELECT
          c.id AS category_id,
          c.name AS category_name,
          n.id AS nomination_id,
          ne.id AS nominee_id,
          ne.name AS nominee_name,
          count(v.id) AS vote_count
        FROM categories c
        LEFT JOIN nominations n ON n.category_id = c.id
        LEFT JOIN nominees ne ON ne.id = n.nominee_id
        LEFT JOIN votes v
          ON v.category_id = n.category_id
         AND v.nominee_id = n.nominee_id
        WHERE c.is_active = true
          AND ($1::bigint IS NULL OR c.id = $1::bigint)
        GROUP BY c.id, c.name, n.id, ne.id, ne.name
        ORDER BY c.name ASC, c.id ASC, n.id ASC NULLS FIRST
        """,
        category_id,
    )
