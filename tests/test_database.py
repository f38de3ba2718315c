import sqlite3

import pytest

from sarc.database import TABLES, clear_tables, connect, migrate


@pytest.fixture
def conn():
    connection = connect(":memory:")
    migrate(connection)
    yield connection
    connection.close()


def _table_names(connection):
    rows = connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {name for (name,) in rows}


def test_migrate_creates_all_tables(conn):
    assert set(TABLES) <= _table_names(conn)


def test_migrate_is_idempotent(conn):
    conn.execute("INSERT INTO profiles (role) VALUES ('admin')")
    migrate(conn)
    assert conn.execute("SELECT role FROM profiles").fetchall() == [("admin",)]


def test_clear_tables_removes_rows_and_restarts_ids(conn):
    conn.execute("INSERT INTO profiles (role) VALUES ('admin')")
    conn.execute("INSERT INTO profiles (role) VALUES ('teacher')")
    clear_tables(conn)
    assert conn.execute("SELECT COUNT(*) FROM profiles").fetchone() == (0,)
    cursor = conn.execute("INSERT INTO profiles (role) VALUES ('admin')")
    assert cursor.lastrowid == 1


def test_clear_tables_handles_references(conn):
    building = conn.execute(
        "INSERT INTO buildings (building_name, address) VALUES ('Main Building', '123 Main St')"
    ).lastrowid
    conn.execute(
        "INSERT INTO rooms (room_number, building_id, room_capacity, floor) VALUES ('101', ?, 30, 1)",
        (building,),
    )
    clear_tables(conn)
    assert conn.execute("SELECT COUNT(*) FROM rooms").fetchone() == (0,)
    assert conn.execute("SELECT COUNT(*) FROM buildings").fetchone() == (0,)


def test_foreign_keys_are_enforced(conn):
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute(
            "INSERT INTO rooms (room_number, building_id, room_capacity, floor) VALUES ('101', 99, 30, 1)"
        )


def test_profile_role_is_required(conn):
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute("INSERT INTO profiles (role) VALUES (NULL)")