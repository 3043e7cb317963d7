from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import mysql.connector
from mysql.connector import pooling
from mysql.connector.constants import ClientFlag

from ..common.logger import get_logger
from ..core.constants import (
    DEFAULT_DB_PORT,
    DEFAULT_POOL_NAME,
    DEFAULT_POOL_SIZE,
    DEFAULT_POOL_TIMEOUT_SECONDS,
    POOL_POLL_INTERVAL_SECONDS,
)
from ..core.exceptions import UnavailableError

logger = get_logger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_mapping(cls, db_config: Mapping[str, Any]) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", DEFAULT_DB_PORT)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config["database"]),
        )

    def connect_kwargs(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": int(self.port),
            "user": self.user,
            "password": self.password,
            "database": self.database,
            # UPDATE reports matched rows, so an unchanged row is not "not found".
            "client_flags": [ClientFlag.FOUND_ROWS],
        }


class ConnectionPool:
    """Bounded set of MySQL connections, created once at startup.

    If `initialize()` fails the pool stays degraded: the failure is logged
    once and every `acquire()` raises UnavailableError. There is no automatic
    reconnection.
    """

    def __init__(
        self,
        config: DBConfig,
        *,
        pool_name: str = DEFAULT_POOL_NAME,
        pool_size: int = DEFAULT_POOL_SIZE,
        acquire_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS,
    ):
        self._config = config
        self._pool_name = pool_name
        self._pool_size = int(pool_size)
        self._acquire_timeout = float(acquire_timeout)
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._error: Optional[Exception] = None

    @property
    def ready(self) -> bool:
        return self._pool is not None

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    def initialize(self) -> bool:
        try:
            pool = pooling.MySQLConnectionPool(
                pool_name=self._pool_name,
                pool_size=self._pool_size,
                **self._config.connect_kwargs(),
            )
            # Verify credentials with one round trip.
            conn = pool.get_connection()
            conn.close()
        except mysql.connector.Error as e:
            self._error = e
            logger.error(
                "Could not create the connection pool for %s@%s:%s/%s: %s",
                self._config.user,
                self._config.host,
                self._config.port,
                self._config.database,
                e,
            )
            logger.error("Routes that need the database will answer 503 until the process is restarted.")
            return False

        self._pool = pool
        self._error = None
        logger.info("Database connection pool '%s' ready (size=%s).", self._pool_name, self._pool_size)
        return True

    def acquire(self):
        """Return a pooled connection; `connection.close()` hands it back.

        Waits up to `acquire_timeout` seconds when every connection is in use.
        """
        if self._pool is None:
            raise UnavailableError()

        deadline = time.monotonic() + self._acquire_timeout
        while True:
            try:
                return self._pool.get_connection()
            except mysql.connector.errors.PoolError as e:
                if time.monotonic() >= deadline:
                    raise UnavailableError(detail=str(e)) from e
                time.sleep(POOL_POLL_INTERVAL_SECONDS)

    def close(self) -> None:
        if self._pool is None:
            return
        # Closes idle connections only.
        self._pool._remove_connections()
        self._pool = None
        logger.info("Database connection pool '%s' closed.", self._pool_name)
