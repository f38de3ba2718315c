"""Repositories for resources, resource types and reservations."""

from __future__ import annotations

import sqlite3
from typing import Any

from .models import Reservation, Resource, ResourceStatus, ResourceType
from .repository import SqlRepository

_RESOURCE_WITH_TYPE = """
SELECT res.resource_id, res.description, res.status, res.characteristics, res.resource_type_id,
       rt.resource_type_id, rt.name
FROM resources res
LEFT JOIN resource_types rt ON res.resource_type_id = rt.resource_type_id
"""

_RESERVATION_RESOURCES = """
SELECT res.resource_id, res.description, res.status, res.characteristics, res.resource_type_id
FROM resources res
JOIN reservation_resources rr ON rr.resource_id = res.resource_id
WHERE rr.reservation_id = ?
ORDER BY res.resource_id
"""


class ResourceTypeRepository(SqlRepository[ResourceType]):
    model = ResourceType
    table = "resource_types"
    id_column = "resource_type_id"
    id_attr = "resource_type_id"
    columns = ("name",)
    entity_name = "resource type"


class ResourceRepository(SqlRepository[Resource]):
    """Resources, read back together with their resource type."""

    model = Resource
    table = "resources"
    id_column = "resource_id"
    id_attr = "resource_id"
    columns = ("description", "status", "characteristics", "resource_type_id")
    list_columns = frozenset({"characteristics"})
    entity_name = "resource"

    def _select(self) -> str:
        return _RESOURCE_WITH_TYPE.strip()

    def _from_db(self, name: str, value: Any) -> Any:
        if name == "status" and value is not None:
            try:
                return ResourceStatus(value)
            except ValueError:
                return value
        return super()._from_db(name, value)

    def _build_resource(self, row: tuple[Any, ...]) -> Resource:
        return super()._build(row)

    def _build(self, row: tuple[Any, ...]) -> Resource:
        resource = self._build_resource(row[:5])
        type_id, type_name = row[5:]
        if type_id is not None:
            resource.resource_type = ResourceType(resource_type_id=type_id, name=type_name or "")
        return resource


class ReservationRepository(SqlRepository[Reservation]):
    """Reservations, each read back together with its linked resources."""

    model = Reservation
    table = "reservations"
    id_column = "reservation_id"
    id_attr = "reservation_id"
    columns = ("lecture_id", "observation")
    entity_name = "reservation"

    def __init__(self, conn: sqlite3.Connection) -> None:
        super().__init__(conn)
        self._resources = ResourceRepository(conn)

    def find_all(self) -> list[Reservation]:
        return [self._with_resources(reservation) for reservation in super().find_all()]

    def find_by_id(self, entity_id: int) -> Reservation:
        return self._with_resources(super().find_by_id(entity_id))

    def add_resource(self, reservation_id: int, resource_id: int) -> None:
        """Link a resource to a reservation."""
        self.conn.execute(
            "INSERT INTO reservation_resources (reservation_id, resource_id) VALUES (?, ?)",
            (reservation_id, resource_id),
        )

    def _with_resources(self, reservation: Reservation) -> Reservation:
        rows = self.conn.execute(_RESERVATION_RESOURCES, (reservation.reservation_id,)).fetchall()
        reservation.resources = [self._resources._build_resource(row) for row in rows]
        return reservation