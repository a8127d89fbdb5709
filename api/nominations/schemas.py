"""
Nomination API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel

from core.ids import RowId


class CreateNominationRequest(BaseModel):
    category_id: RowId
    nominee_id: RowId
