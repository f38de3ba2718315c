"""SQLite storage: opening the database and managing its schema."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from os import PathLike


@dataclass(frozen=True)
class _Table:
    name: str
    columns: tuple[tuple[str, str], ...]
    composite_key: tuple[str, ...] = ()

    def ddl(self) -> str:
        parts = [f"{column} {kind}" for column, kind in self.columns]
        if self.composite_key:
            parts.append(f"PRIMARY KEY ({', '.join(self.composite_key)})")
        body = ",\n    ".join(parts)
        return f"CREATE TABLE IF NOT EXISTS {self.name} (\n    {body}\n)"


def _key(column: str) -> tuple[str, str]:
    return column, "INTEGER PRIMARY KEY AUTOINCREMENT"


def _ref(column: str, table: str) -> tuple[str, str]:
    return column, f"INTEGER REFERENCES {table}({column})"


def _text(*columns: str) -> tuple[tuple[str, str], ...]:
    return tuple((column, "TEXT") for column in columns)


def _int(*columns: str) -> tuple[tuple[str, str], ...]:
    return tuple((column, "INTEGER") for column in columns)


# Parents before children, so every reference points at an existing table.
_SCHEMA = (
    _Table("profiles", (_key("profile_id"), ("role", "TEXT NOT NULL"))),
    _Table(
        "users",
        (
            _key("user_id"),
            *_text("email", "nome", "birth_date", "sex", "telephone"),
            _ref("profile_id", "profiles"),
        ),
    ),
    _Table("buildings", (_key("building_id"), *_text("building_name", "address"))),
    _Table(
        "rooms",
        (
            _key("room_id"),
            *_text("room_number"),
            _ref("building_id", "buildings"),
            *_int("room_capacity", "floor"),
        ),
    ),
    _Table(
        "disciplines",
        (
            _key("discipline_id"),
            *_text("name"),
            *_int("credits"),
            *_text("program", "bibliography"),
        ),
    ),
    _Table(
        "curriculums",
        (_key("curriculum_id"), *_text("course_name", "data_inicio", "data_fim")),
    ),
    _Table(
        "curriculum_disciplines",
        (_ref("curriculum_id", "curriculums"), _ref("discipline_id", "disciplines")),
        ("curriculum_id", "discipline_id"),
    ),
    _Table(
        "classes",
        (
            _key("class_id"),
            *_text("name", "description"),
            _ref("discipline_id", "disciplines"),
        ),
    ),
    _Table(
        "lectures",
        (
            _key("lecture_id"),
            _ref("class_id", "classes"),
            _ref("room_id", "rooms"),
            *_text("date", "content"),
        ),
    ),
    _Table("resource_types", (_key("resource_type_id"), *_text("name"))),
    _Table(
        "resources",
        (
            _key("resource_id"),
            *_text("description", "status", "characteristics"),
            _ref("resource_type_id", "resource_types"),
        ),
    ),
    _Table(
        "reservations",
        (
            _key("reservation_id"),
            _ref("lecture_id", "lectures"),
            *_text("observation"),
        ),
    ),
    _Table(
        "reservation_resources",
        (_ref("reservation_id", "reservations"), _ref("resource_id", "resources")),
        ("reservation_id", "resource_id"),
    ),
)

# Children before parents, so rows can be removed without breaking references.
TABLES = tuple(table.name for table in reversed(_SCHEMA))


def connect(path: str | PathLike[str]) -> sqlite3.Connection:
    """Open the database in autocommit mode with foreign keys enforced."""
    conn = sqlite3.connect(path, isolation_level=None, check_same_thread=False)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def migrate(conn: sqlite3.Connection) -> None:
    """Create every table that does not exist yet."""
    for table in _SCHEMA:
        conn.execute(table.ddl())


def clear_tables(conn: sqlite3.Connection) -> None:
    """Remove all rows and restart every id sequence."""
    for name in TABLES:
        conn.execute(f"DELETE FROM {name}")
    placeholders = ", ".join("?" for _ in TABLES)
    conn.execute(f"DELETE FROM sqlite_sequence WHERE name IN ({placeholders})", TABLES)