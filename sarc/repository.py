"""Generic table-backed repository and the building repository."""

from __future__ import annotations

import json
import sqlite3
from enum import Enum
from typing import Any, Generic, TypeVar

from .models import Building, NotFoundError

T = TypeVar("T")


class SqlRepository(Generic[T]):
    """CRUD access to one table whose columns map one-to-one onto model attributes."""

    model: type
    table: str
    id_column: str
    id_attr: str
    columns: tuple[str, ...] = ()
    list_columns: frozenset[str] = frozenset()
    entity_name: str = "entity"

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def create(self, entity: T) -> T:
        """Insert the entity and store the generated id on it."""
        names = ", ".join(self.columns)
        placeholders = ", ".join("?" for _ in self.columns)
        cursor = self.conn.execute(
            f"INSERT INTO {self.table} ({names}) VALUES ({placeholders})",
            self._values(entity),
        )
        setattr(entity, self.id_attr, cursor.lastrowid)
        return entity

    def find_all(self) -> list[T]:
        rows = self.conn.execute(f"{self._select()} ORDER BY {self.id_column}").fetchall()
        return [self._build(row) for row in rows]

    def find_by_id(self, entity_id: int) -> T:
        row = self.conn.execute(
            f"{self._select()} WHERE {self.id_column} = ?", (entity_id,)
        ).fetchone()
        if row is None:
            raise NotFoundError(f"{self.entity_name} {entity_id} not found")
        return self._build(row)

    def update(self, entity_id: int, entity: T) -> None:
        assignments = ", ".join(f"{name} = ?" for name in self.columns)
        self.conn.execute(
            f"UPDATE {self.table} SET {assignments} WHERE {self.id_column} = ?",
            (*self._values(entity), entity_id),
        )

    def delete(self, entity_id: int) -> None:
        self.conn.execute(f"DELETE FROM {self.table} WHERE {self.id_column} = ?", (entity_id,))

    def _select(self) -> str:
        names = ", ".join((self.id_column, *self.columns))
        return f"SELECT {names} FROM {self.table}"

    def _values(self, entity: T) -> tuple[Any, ...]:
        return tuple(self._to_db(name, getattr(entity, name)) for name in self.columns)

    def _to_db(self, name: str, value: Any) -> Any:
        if name in self.list_columns:
            return json.dumps([item.value if isinstance(item, Enum) else item for item in value])
        if isinstance(value, Enum):
            return value.value
        return value

    def _from_db(self, name: str, value: Any) -> Any:
        if name in self.list_columns:
            return json.loads(value) if value else []
        return value

    def _build(self, row: tuple[Any, ...]) -> T:
        entity_id, *values = row
        fields = {name: self._from_db(name, value) for name, value in zip(self.columns, values)}
        return self.model(**{self.id_attr: entity_id}, **fields)


class BuildingRepository(SqlRepository[Building]):
    model = Building
    table = "buildings"
    id_column = "building_id"
    id_attr = "building_id"
    columns = ("building_name", "address")
    entity_name = "building"