import json
import logging
import os
import pathlib
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)


@dataclass
class DatabaseConfig:
    host: str = "localhost"
    port: int = 5432
    name: str = "contacts"
    user: str = "contacts"
    password: str = ""

    @property
    def conninfo(self) -> str:
        return (
            f"host={self.host} port={self.port} "
            f"dbname={self.name} user={self.user} password={self.password}"
        )


@dataclass
class SessionConfig:
    expire_minutes: int = 480
    secure_cookie: bool = True


@dataclass
class AppConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "AppConfig":
        config_path = os.environ.get("CONFIG_FILE", "/run/secrets/config.json")
        path = pathlib.Path(config_path)

        if path.exists():
            with open(path) as f:
                data = json.load(f)
            return cls(
                database=DatabaseConfig(**data.get("database", {})),
                session=SessionConfig(**data.get("session", {})),
                log_level=data.get("log_level", "INFO"),
            )

        logger.warning("Config file not found at %s", config_path)
        return cls()
