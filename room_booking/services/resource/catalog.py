"""
Resource catalog: which resources exist and can be booked.
"""

import sqlite3
from typing import List, Optional

from ...core.models import Resource
from ..storage import Database


def _row_to_resource(row: sqlite3.Row) -> Resource:
    return Resource(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        is_active=bool(row["is_active"]),
    )


class ResourceCatalog:
    """Read contract for resources plus the few writes seeding needs."""

    def __init__(self, database: Database):
        self.database = database

    def is_bookable_in(self, conn: sqlite3.Connection, resource_id: str) -> bool:
        """Exists and is active, evaluated on the given connection."""
        row = conn.execute(
            "SELECT 1 FROM resources WHERE id = ? AND is_active = 1", (resource_id,)
        ).fetchone()
        return row is not None

    async def is_bookable(self, resource_id: str) -> bool:
        def _check() -> bool:
            with self.database.reader() as conn:
                return self.is_bookable_in(conn, resource_id)

        return await self.database.run(_check)

    async def list_active(self) -> List[Resource]:
        """Active resources ordered by name."""

        def _fetch() -> List[Resource]:
            with self.database.reader() as conn:
                rows = conn.execute(
                    "SELECT * FROM resources WHERE is_active = 1 ORDER BY name, id"
                ).fetchall()
            return [_row_to_resource(row) for row in rows]

        return await self.database.run(_fetch)

    async def get(self, resource_id: str) -> Optional[Resource]:
        def _fetch() -> Optional[Resource]:
            with self.database.reader() as conn:
                row = conn.execute(
                    "SELECT * FROM resources WHERE id = ?", (resource_id,)
                ).fetchone()
            return _row_to_resource(row) if row else None

        return await self.database.run(_fetch)

    async def find_by_name(self, name: str) -> Optional[Resource]:
        def _fetch() -> Optional[Resource]:
            with self.database.reader() as conn:
                row = conn.execute(
                    "SELECT * FROM resources WHERE name = ? ORDER BY id LIMIT 1", (name,)
                ).fetchone()
            return _row_to_resource(row) if row else None

        return await self.database.run(_fetch)

    async def add_resource(
        self, name: str, description: str = "", is_active: bool = True
    ) -> Resource:
        resource = Resource(name=name, description=description, is_active=is_active)

        def _insert() -> None:
            with self.database.transaction() as conn:
                conn.execute(
                    "INSERT INTO resources (id, name, description, is_active) VALUES (?, ?, ?, ?)",
                    (resource.id, resource.name, resource.description, int(resource.is_active)),
                )

        await self.database.run(_insert)
        return resource

    async def set_active(self, resource_id: str, is_active: bool) -> bool:
        """Toggle bookability. Returns False if the resource does not exist."""

        def _update() -> bool:
            with self.database.transaction() as conn:
                cur = conn.execute(
                    "UPDATE resources SET is_active = ? WHERE id = ?",
                    (int(is_active), resource_id),
                )
                return cur.rowcount > 0

        return await self.database.run(_update)
