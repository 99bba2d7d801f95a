from collections.abc import AsyncGenerator
from typing import Any

import psycopg
import psycopg.rows
import psycopg_pool


pool: psycopg_pool.AsyncConnectionPool | None = None


async def init_pool(conninfo: str) -> None:
    """Initialize the async connection pool."""
    global pool
    pool = psycopg_pool.AsyncConnectionPool(
        conninfo=conninfo,
        min_size=2,
        max_size=10,
        open=False,
    )
    await pool.open()
    await pool.wait()


async def close_pool() -> None:
    """Close the connection pool."""
    global pool
    if pool:
        await pool.close()
        pool = None


async def provide_connection() -> AsyncGenerator[psycopg.AsyncConnection, None]:
    """Litestar dependency provider for database connections.

    The connection is committed when the request finishes cleanly, rolled back
    otherwise, and returned to the pool in both cases.
    """
    if not pool:
        raise RuntimeError("Database pool not initialized")
    async with pool.connection() as conn:
        yield conn


async def fetch_one(
    conn: psycopg.AsyncConnection,
    query: str,
    params: dict[str, Any] | None = None,
) -> dict[str, Any] | None:
    """Execute a query and return one row as dict, or None."""
    async with conn.cursor(row_factory=psycopg.rows.dict_row) as cur:
        await cur.execute(query, params or {})
        return await cur.fetchone()


async def fetch_all(
    conn: psycopg.AsyncConnection,
    query: str,
    params: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Execute a query and return all rows as dicts."""
    async with conn.cursor(row_factory=psycopg.rows.dict_row) as cur:
        await cur.execute(query, params or {})
        return await cur.fetchall()


async def execute_returning(
    conn: psycopg.AsyncConnection,
    query: str,
    params: tuple[Any, ...] | dict[str, Any] | None = None,
) -> dict[str, Any] | None:
    """Execute a query with RETURNING and return the row as dict."""
    async with conn.cursor(row_factory=psycopg.rows.dict_row) as cur:
        await cur.execute(query, params)
        return await cur.fetchone()


async def execute(
    conn: psycopg.AsyncConnection,
    query: str,
    params: tuple[Any, ...] | dict[str, Any] | None = None,
) -> int:
    """Execute a query and return the row count."""
    async with conn.cursor() as cur:
        await cur.execute(query, params)
        return cur.rowcount
