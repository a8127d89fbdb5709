"""
Voter sign-in (get-or-create by email).
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


async def sign_in(payload: schemas.SigninRequest, *, ip_address: str | None = None) -> schemas.SigninResponse:
    email = repository.normalize_email(payload.email)
    if "@" not in email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="A valid email is required.")

    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required.")

    existing = await repository.get_voter_by_email(email)
    if existing is not None:
        voter_id = int(existing["id"])
        await repository.record_signin(voter_id, ip_address=ip_address)
        logger.info("voter_signin voter_id=%s created=False", voter_id)
        return schemas.SigninResponse(voter_id=voter_id)

    # The email unique index settles concurrent first sign-ins: the loser of
    # the race gets the winner's row back.
    row = await repository.insert_voter(
        name=name,
        email=email,
        phone=(payload.phone or "").strip() or None,
        ip_address=ip_address,
    )
    voter_id = int(row["id"])
    logger.info("voter_signin voter_id=%s created=%s", voter_id, bool(row.get("created", True)))
    return schemas.SigninResponse(voter_id=voter_id)


async def list_voters() -> list[dict[str, Any]]:
    return await repository.list_voters()
