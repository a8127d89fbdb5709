"""
Vote integrity checks.

A vote is accepted only when:
1. the nominee is nominated in the category, and
2. the voter has not voted in that category yet.

Both are checked up front so the caller gets a precise error, but the
database constraints on `votes` are the real guard. Constraint violations on
insert are translated to the same errors, so a vote that races past the
pre-checks is still rejected the same way.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from nominations import repository as nominations_repository

from . import repository


class VoteRejected(RuntimeError):
    pass


class InvalidNomination(VoteRejected):
    pass


class DuplicateVote(VoteRejected):
    pass


class UnknownVoter(VoteRejected):
    pass


async def record_vote(*, voter_id: int, category_id: int, nominee_id: int) -> dict[str, Any]:
    """
    Validate and persist one vote. Inserts exactly one row or raises.
    """
    is_nominated = await nominations_repository.nomination_exists(
        category_id=category_id,
        nominee_id=nominee_id,
    )
    if not is_nominated:
        raise InvalidNomination("Invalid vote: Nominee is not nominated in this category.")

    if await repository.vote_exists(voter_id=voter_id, category_id=category_id):
        raise DuplicateVote("You have already voted in this category.")

    try:
        return await repository.insert_vote(
            voter_id=voter_id,
            category_id=category_id,
            nominee_id=nominee_id,
        )
    except asyncpg.UniqueViolationError as exc:
        raise DuplicateVote("You have already voted in this category.") from exc
    except asyncpg.ForeignKeyViolationError as exc:
        if getattr(exc, "constraint_name", None) == repository.VOTER_FOREIGN_KEY:
            raise UnknownVoter("Unknown voter. Sign in before voting.") from exc
        # The nomination was removed between the check and the insert.
        raise InvalidNomination("Invalid vote: Nominee is not nominated in this category.") from exc
