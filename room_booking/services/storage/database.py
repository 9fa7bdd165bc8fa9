"""
SQLite database access with an atomic, write-locked unit of work.
"""

import asyncio
import sqlite3
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from ...config import DatabaseConfig
from ...utils.logging import get_logger
from .schema import SCHEMA

T = TypeVar("T")

logger = get_logger("booking.storage")


class Database:
    """
    Thin wrapper over a SQLite file.

    Every unit of work opens its own connection, so the same file can be
    shared by several threads, event loops or processes. Write transactions
    start with ``BEGIN IMMEDIATE``: the database write lock is taken before
    the first read, which makes read-check-write sequences serializable
    against every other writer.
    """

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.path = config.path
        self.timeout = config.timeout

    def connect(self) -> sqlite3.Connection:
        """Open a connection in autocommit mode; transactions are explicit."""
        conn = sqlite3.connect(self.path, timeout=self.timeout, isolation_level=None)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def create_schema(self) -> None:
        """Create tables, indexes and triggers if missing."""
        conn = self.connect()
        try:
            conn.execute("PRAGMA journal_mode = WAL")
            conn.executescript(SCHEMA)
        finally:
            conn.close()
        logger.info(f"schema ready at {self.path}")

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        All-or-nothing unit of work holding the write lock.

        Commits when the block exits normally and rolls back on any
        exception, which is re-raised.
        """
        conn = self.connect()
        try:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            else:
                conn.execute("COMMIT")
        finally:
            conn.close()

    @contextmanager
    def reader(self) -> Iterator[sqlite3.Connection]:
        """Connection for read-only queries."""
        conn = self.connect()
        try:
            yield conn
        finally:
            conn.close()

    async def run(self, fn: Callable[..., T], *args: Any) -> T:
        """Run blocking database work off the event loop."""
        return await asyncio.to_thread(fn, *args)
