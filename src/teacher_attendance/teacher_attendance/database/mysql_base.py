from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import mysql.connector

from .connection import ConnectionPool
from .errors import translate_db_error

Params = Sequence[Any]


@contextmanager
def db_cursor(pool: ConnectionPool, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Scoped acquisition: the connection goes back to the pool on every exit path."""
    conn = pool.acquire()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


class QueryExecutor:
    """Runs one parameterized statement per call on a pooled connection.

    Values always travel as bound `%s` parameters. Driver errors leave this
    class already translated to a DomainError.
    """

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    def fetch_all(self, sql: str, params: Params = (), *, label: str) -> List[Dict[str, Any]]:
        try:
            with db_cursor(self._pool) as (_, cur):
                cur.execute(sql, tuple(params))
                return fetchall(cur)
        except mysql.connector.Error as e:
            raise translate_db_error(e, label=label) from e

    def fetch_one(self, sql: str, params: Params = (), *, label: str) -> Optional[Dict[str, Any]]:
        try:
            with db_cursor(self._pool) as (_, cur):
                cur.execute(sql, tuple(params))
                return fetchone(cur)
        except mysql.connector.Error as e:
            raise translate_db_error(e, label=label) from e

    def execute(self, sql: str, params: Params = (), *, label: str) -> int:
        """Run a write statement and return the affected row count."""
        try:
            with db_cursor(self._pool) as (_, cur):
                cur.execute(sql, tuple(params))
                return int(cur.rowcount)
        except mysql.connector.Error as e:
            raise translate_db_error(e, label=label) from e
