import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from litestar import Litestar
from litestar.di import Provide
from litestar.logging.config import LoggingConfig

from core.config import AppConfig
from core.auth import provide_current_user
from core.db import init_pool, close_pool, provide_connection
from core.repository import provide_contact_repository
from api.auth import AuthController
from api.health import HealthController, PingController
from api.contacts import ContactsController
from core.middleware import SessionMiddleware


logger = logging.getLogger(__name__)

config: AppConfig | None = None


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:
    global config
    config = AppConfig.load()
    logging.getLogger().setLevel(config.log_level.upper())
    logger.info("Config loaded: database=%s", config.database.host)

    if config.database.host:
        await init_pool(config.database.conninfo)
        logger.info("Database pool initialized")

    yield

    await close_pool()
    logger.info("Database pool closed")


app = Litestar(
    route_handlers=[
        AuthController,
        HealthController,
        PingController,
        ContactsController,
    ],
    dependencies={
        "conn": Provide(provide_connection),
        "contacts": Provide(provide_contact_repository),
        "current_user": Provide(provide_current_user),
    },
    middleware=[SessionMiddleware],
    lifespan=[lifespan],
    logging_config=LoggingConfig(
        root={"level": "INFO", "handlers": ["queue_listener"]},
        log_exceptions="always",
    ),
)
