"""
Vote API schemas.

Request bodies use the camelCase keys the voting frontend sends.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.ids import RowId


class VoteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voter_id: RowId = Field(..., alias="voterId")
    category_id: RowId = Field(..., alias="categoryId")
    nominee_id: RowId = Field(..., alias="nomineeId")


class VoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Vote recorded successfully!"
    vote_id: int = Field(..., alias="voteId")
