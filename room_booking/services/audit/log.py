"""
Append-only audit log.
"""

import sqlite3
from typing import List, Optional

from ...core.enums import AuditAction
from ...core.models import AuditEvent
from ...utils.date import from_storage, to_storage
from ..storage import Database


def _row_to_event(row: sqlite3.Row) -> AuditEvent:
    return AuditEvent(
        id=row["id"],
        actor_email=row["actor_email"],
        action=AuditAction(row["action"]),
        entity_type=row["entity_type"],
        entity_id=row["entity_id"],
        at=from_storage(row["at"]),
    )


class AuditLog:
    """
    Write sink for audit events.

    ``append`` only accepts a connection that belongs to an open
    transaction, so the event commits or rolls back together with the
    change it describes. There is no update or delete.
    """

    def __init__(self, database: Database):
        self.database = database

    def append(
        self,
        conn: sqlite3.Connection,
        actor_email: str,
        action: AuditAction,
        entity_type: str,
        entity_id: str,
    ) -> AuditEvent:
        """Record one event inside the caller's transaction."""
        if not conn.in_transaction:
            raise RuntimeError("audit events must be appended inside a transaction")

        event = AuditEvent(
            actor_email=actor_email,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
        )
        conn.execute(
            """
            INSERT INTO audit_events (id, actor_email, action, entity_type, entity_id, at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                event.id,
                event.actor_email,
                event.action.value,
                event.entity_type,
                event.entity_id,
                to_storage(event.at),
            ),
        )
        return event

    async def list_events(self, entity_id: Optional[str] = None) -> List[AuditEvent]:
        """Return events in the order they were written."""

        def _fetch() -> List[AuditEvent]:
            with self.database.reader() as conn:
                if entity_id is None:
                    rows = conn.execute("SELECT * FROM audit_events ORDER BY rowid").fetchall()
                else:
                    rows = conn.execute(
                        "SELECT * FROM audit_events WHERE entity_id = ? ORDER BY rowid",
                        (entity_id,),
                    ).fetchall()
            return [_row_to_event(row) for row in rows]

        return await self.database.run(_fetch)
