from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE

    @classmethod
    def from_dict(cls, db_config: dict, *, pool_size: int = DEFAULT_POOL_SIZE) -> "DBConfig":
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
            pool_size=int(pool_size),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Process-wide pooled connection factory.

    Created once by the application factory: ``open()`` builds the pool at
    startup and ``close()`` drains it at shutdown. ``connect()`` borrows a
    pooled connection; closing that connection returns it to the pool.
    """

    def __init__(self, config: DBConfig, *, pool_name: str = "offboarding"):
        self._config = config
        self._pool_name = pool_name
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> "DatabaseConnection":
        if self._pool is not None:
            return self
        self._pool = pooling.MySQLConnectionPool(
            pool_name=self._pool_name,
            pool_size=self._config.pool_size,
            pool_reset_session=True,
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )
        logger.info("Opened connection pool (size=%d) to %s", self._config.pool_size, self._config.describe())
        return self

    def connect(self):
        if self._pool is None:
            raise RuntimeError("Connection pool is not open")
        return self._pool.get_connection()

    def close(self) -> None:
        if self._pool is None:
            return
        pool, self._pool = self._pool, None
        # Only idle connections are closed; call once the server stopped taking requests.
        pool._remove_connections()
        logger.info("Closed connection pool to %s", self._config.describe())
