"""
Row id types shared by request bodies, path and query parameters.

Every table uses a Postgres `bigint` identity; anything outside
1..2**63-1 is rejected as a bad request before it reaches asyncpg.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path, Query
from pydantic import Field

BIGINT_MAX = 2**63 - 1

RowId = Annotated[int, Field(ge=1, le=BIGINT_MAX)]
RowIdPath = Annotated[int, Path(ge=1, le=BIGINT_MAX)]
RowIdQuery = Annotated[int | None, Query(ge=1, le=BIGINT_MAX)]
