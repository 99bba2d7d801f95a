import logging
from dataclasses import dataclass

import psycopg
from litestar import Controller, get

import core.db as db


logger = logging.getLogger(__name__)


@dataclass
class HealthResponse:
    status: str
    config_loaded: bool
    database_host: str | None = None
    database_connected: bool = False


class HealthController(Controller):
    path = "/api/health"
    tags = ["health"]

    @get()
    async def health_check(self) -> HealthResponse:
        from app import config

        db_connected = False
        if db.pool:
            try:
                async with db.pool.connection() as conn:
                    await db.execute(conn, "SELECT 1")
                    db_connected = True
            except psycopg.Error as exc:
                logger.warning("Health check could not reach the database: %s", exc)

        return HealthResponse(
            status="ok",
            config_loaded=config is not None,
            database_host=config.database.host if config else None,
            database_connected=db_connected,
        )


class PingController(Controller):
    path = "/api/ping"
    tags = ["health"]

    @get()
    async def ping(self) -> dict:
        return {"message": "pong"}
