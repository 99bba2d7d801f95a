"""Middleware for session and authentication handling."""

import logging
import uuid
from datetime import datetime, timezone

import psycopg
from litestar.middleware import AbstractMiddleware
from litestar.types import Receive, Scope, Send

from core.auth import AuthenticatedUser
import core.db as db
from core.queries import sql_select_session_user, sql_select_user_capabilities


logger = logging.getLogger(__name__)

SESSION_COOKIE = "session_id"


def parse_session_id(value: str | None) -> str | None:
    """Normalize a session cookie value; anything that is not a UUID means no session."""
    if not value:
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None


def get_session_cookie(scope: Scope) -> str | None:
    """Extract a well-formed session_id from request cookies."""
    headers = dict(scope.get("headers", []))
    cookie_header = headers.get(b"cookie", b"").decode()

    if not cookie_header:
        return None

    for cookie in cookie_header.split(";"):
        cookie = cookie.strip()
        if cookie.startswith(f"{SESSION_COOKIE}="):
            return parse_session_id(cookie.split("=", 1)[1])

    return None


async def load_session_user(
    conn: psycopg.AsyncConnection, session_id: str
) -> AuthenticatedUser | None:
    """Return the session's user with capabilities, or None if the session is not valid."""
    row = await db.fetch_one(conn, sql_select_session_user(), {"session_id": session_id})
    if not row:
        return None

    if row["inactive"] or row["user_inactive"]:
        return None

    # Compare with UTC now (column is timestamp without time zone but stores UTC)
    expires = row["expires"]
    if expires and expires < datetime.now(timezone.utc).replace(tzinfo=None):
        return None

    cap_rows = await db.fetch_all(conn, sql_select_user_capabilities(), {"user_id": row["id"]})

    return AuthenticatedUser(
        id=str(row["id"]),
        username=row["username"],
        full_name=row["full_name"],
        capabilities={cap["cap_name"] for cap in cap_rows},
    )


class SessionMiddleware(AbstractMiddleware):
    """Middleware to validate session cookies and populate user in scope."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        session_id = get_session_cookie(scope)

        if session_id and db.pool:
            async with db.pool.connection() as conn:
                user = await load_session_user(conn, session_id)
            if user:
                scope["user"] = user
            else:
                logger.debug("Ignoring invalid or expired session")

        await self.app(scope, receive, send)
