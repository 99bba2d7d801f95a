"""Authentication controller for login, logout, and session management."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import psycopg
from litestar import Controller, Request, Response, get, post
from litestar.exceptions import NotAuthorizedException

from core.auth import AuthenticatedUser, ChallengeException
import core.db as db
from core.middleware import SESSION_COOKIE, parse_session_id
from core.password import hash_password, needs_rehash, verify_password
from core.queries import (
    sql_deactivate_session,
    sql_insert_session,
    sql_select_login_user,
    sql_select_user_capabilities,
    sql_update_user_pwhash,
)


logger = logging.getLogger(__name__)


@dataclass
class LoginRequest:
    username: str
    password: str


@dataclass
class UserResponse:
    id: str
    username: str
    full_name: str | None
    capabilities: list[str]


def _get_config():
    """Get app config from module-level variable in app.py."""
    import app

    return app.config


class AuthController(Controller):
    path = "/api/auth"
    tags = ["auth"]

    @post("/login")
    async def login(
        self,
        conn: psycopg.AsyncConnection,
        data: LoginRequest,
    ) -> Response[UserResponse]:
        """Authenticate user and create session."""
        config = _get_config()

        row = await db.fetch_one(conn, sql_select_login_user(), {"username": data.username})

        if not row:
            raise NotAuthorizedException(detail="Invalid username or password")

        if row["inactive"]:
            raise NotAuthorizedException(detail="Account is inactive")

        if not row["pwhash"]:
            raise NotAuthorizedException(detail="Password not set")

        if not verify_password(data.password, row["pwhash"]):
            logger.info("Failed login for %s", data.username)
            raise NotAuthorizedException(detail="Invalid username or password")

        user_id = row["id"]
        if needs_rehash(row["pwhash"]):
            await db.execute(
                conn,
                sql_update_user_pwhash(),
                {"id": user_id, "pwhash": hash_password(data.password)},
            )

        cap_rows = await db.fetch_all(conn, sql_select_user_capabilities(), {"user_id": user_id})

        # Create session
        session_id = str(uuid4())
        now = datetime.now(timezone.utc)
        expires = now + timedelta(minutes=config.session.expire_minutes)

        await db.execute(
            conn,
            sql_insert_session(),
            {
                "id": session_id,
                "userid": user_id,
                "issued": now,
                "expires": expires,
            },
        )
        logger.info("User %s logged in", row["username"])

        response = Response(
            UserResponse(
                id=str(user_id),
                username=row["username"],
                full_name=row["full_name"],
                capabilities=sorted(cap["cap_name"] for cap in cap_rows),
            )
        )
        response.set_cookie(
            key=SESSION_COOKIE,
            value=session_id,
            httponly=True,
            secure=config.session.secure_cookie,
            samesite="strict",
            path="/",
            max_age=config.session.expire_minutes * 60,
        )

        return response

    @post("/logout")
    async def logout(
        self,
        conn: psycopg.AsyncConnection,
        request: Request,
    ) -> Response[dict]:
        """Invalidate session and clear cookie."""
        session_id = parse_session_id(request.cookies.get(SESSION_COOKIE))

        if session_id:
            await db.execute(conn, sql_deactivate_session(), {"id": session_id})

        response = Response({"ok": True})
        response.delete_cookie(key=SESSION_COOKIE, path="/")

        return response

    @get("/me")
    async def get_current_user(self, request: Request) -> UserResponse:
        """Get current authenticated user."""
        user: AuthenticatedUser | None = request.scope.get("user")

        if not user:
            raise ChallengeException(detail="Not authenticated")

        return UserResponse(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            capabilities=sorted(user.capabilities),
        )
