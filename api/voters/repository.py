"""
Voter persistence helpers.
"""

from __future__ import annotations

from typing import Any

from core import db


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def get_voter_by_email(email: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name, email, phone, last_signin_ip, last_signin_at, created_at
        FROM voters
        WHERE email = $1
        """,
        normalize_email(email),
    )


async def record_signin(voter_id: int, *, ip_address: str | None) -> None:
    await db.execute(
        """
        UPDATE voters
        SET last_signin_ip = $2,
            last_signin_at = now()
        WHERE id = $1
        """,
        voter_id,
        ip_address,
    )


async def insert_voter(
    *,
    name: str,
    email: str,
    phone: str | None,
    ip_address: str | None = None,
) -> dict[str, Any]:
    """
    Insert a voter, or return the existing row when the email is already
    registered (a concurrent sign-in won). Name and phone of an existing voter
    are left untouched.
    """
    row = await db.fetch_one(
        """
        INSERT INTO voters (name, email, phone, last_signin_ip, last_signin_at)
        VALUES ($1, $2, $3, $4, now())
        ON CONFLICT (email) DO UPDATE
        SET last_signin_ip = EXCLUDED.last_signin_ip,
            last_signin_at = EXCLUDED.last_signin_at
        RETURNING id, (xmax = 0) AS created
        """,
        name,
        normalize_email(email),
        phone,
        ip_address,
    )
    if row is None:
        raise RuntimeError("Failed to register voter.")
    return row


async def list_voters() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, email, phone, last_signin_ip, created_at
        FROM voters
        ORDER BY created_at DESC, id DESC
        """
    )
