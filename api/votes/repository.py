"""
Vote persistence (raw SQL).

Constraints the database enforces on `votes`:
- `votes_voter_category_key`: one vote per (voter, category)
- `votes_nomination_fkey`: (category_id, nominee_id) must be a nomination
- `votes_voter_id_fkey`: voter must exist
"""

from __future__ import annotations

from typing import Any

from core import db

VOTER_FOREIGN_KEY = "votes_voter_id_fkey"
NOMINATION_FOREIGN_KEY = "votes_nomination_fkey"


async def vote_exists(*, voter_id: int, category_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM votes
        WHERE voter_id = $1
          AND category_id = $2
        LIMIT 1
        """,
        voter_id,
        category_id,
    )
    return row is not None


async def insert_vote(*, voter_id: int, category_id: int, nominee_id: int) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO votes (voter_id, category_id, nominee_id)
        VALUES ($1, $2, $3)
        RETURNING id, voter_id, category_id, nominee_id, created_at
        """,
        voter_id,
        category_id,
        nominee_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert vote.")
    return row


async def list_votes_for_voter(voter_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT category_id, nominee_id
        FROM votes
        WHERE voter_id = $1
        ORDER BY id ASC
        """,
        voter_id,
    )
