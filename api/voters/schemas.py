"""
Voter API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SigninRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320)
    phone: str | None = Field(default=None, max_length=40)


class SigninResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voter_id: int = Field(..., alias="voterId")
    message: str = "Sign-in successful."
