"""Pytest fixtures for repository tests against a real PostgreSQL database.

These tests run the raw SQL in the repository modules, so they need a
disposable database. Point `TEST_DATABASE_URL` at one; every test truncates
all tables. Without it (or when the server is unreachable) the tests skip.

Deselect them with `-m "not postgres"`.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import AsyncGenerator, Awaitable, Callable

import asyncpg
import pytest

from core import db
from core.config import Settings

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "db" / "schema.sql"

RESET_SQL = """
DROP TRIGGER IF EXISTS block_deletes ON categories;
DROP TRIGGER IF EXISTS block_deletes ON nominees;
TRUNCATE votes, nominations, voters, nominees, categories RESTART IDENTITY CASCADE;
"""

BLOCK_DELETES_SQL = """
CREATE OR REPLACE FUNCTION reject_delete() RETURNS trigger AS $$
BEGIN
  RAISE EXCEPTION 'deletes from % are blocked', TG_TABLE_NAME;
END;
$$ LANGUAGE plpgsql;
"""


@pytest.fixture(scope="session")
def database_url() -> str:
    url = os.getenv("TEST_DATABASE_URL", "").strip()
    if not url:
        pytest.skip("TEST_DATABASE_URL is not set")
    return url


@pytest.fixture
async def database(database_url: str) -> AsyncGenerator[asyncpg.Pool, None]:
    """Initialised `core.db` pool on a freshly reset schema.

    Repository functions go through the module-level pool, exactly as they do
    under the running app.
    """
    settings = Settings(
        database_url=database_url,
        admin_secret_key="integration",
        db_pool_min_size=1,
        db_pool_max_size=4,
        _env_file=None,
    )
    try:
        await db.init_pool(settings)
    except (OSError, asyncio.TimeoutError, asyncpg.PostgresError) as exc:
        pytest.skip(f"PostgreSQL not reachable: {exc}")

    pool = db.pool()
    async with pool.acquire() as conn:
        await conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
        await conn.execute(RESET_SQL)

    yield pool

    async with pool.acquire() as conn:
        await conn.execute(RESET_SQL)
    await db.close_pool()


@pytest.fixture
async def block_deletes(database: asyncpg.Pool) -> Callable[[str], Awaitable[None]]:
    """Make every DELETE on a table fail, to force a rollback mid-cascade.

    The trigger is dropped again when `database` resets the schema.
    """

    async def install(table: str) -> None:
        async with database.acquire() as conn:
            await conn.execute(BLOCK_DELETES_SQL)
            await conn.execute(
                f"CREATE TRIGGER block_deletes BEFORE DELETE ON {table} "
                "FOR EACH ROW EXECUTE FUNCTION reject_delete()"
            )

    return install


@pytest.fixture
async def ballot(database: asyncpg.Pool) -> dict[str, int]:
    """Category "Best Film" with nominees A and B nominated, nominee C not, and one voter."""
    async with database.acquire() as conn:
        category_id = await conn.fetchval("INSERT INTO categories (name) VALUES ('Best Film') RETURNING id")
        a = await conn.fetchval("INSERT INTO nominees (name) VALUES ('Nominee A') RETURNING id")
        b = await conn.fetchval("INSERT INTO nominees (name) VALUES ('Nominee B') RETURNING id")
        c = await conn.fetchval("INSERT INTO nominees (name) VALUES ('Nominee C') RETURNING id")
        await conn.execute(
            "INSERT INTO nominations (category_id, nominee_id) VALUES ($1, $2), ($1, $3)",
            category_id,
            a,
            b,
        )
        voter_id = await conn.fetchval(
            "INSERT INTO voters (name, email) VALUES ('Voter', 'voter@example.com') RETURNING id"
        )
    return {"category": category_id, "a": a, "b": b, "c": c, "voter": voter_id}
