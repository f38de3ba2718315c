import sqlite3

import pytest

from sarc.catalog_repositories import ProfileRepository, RoomRepository, UserRepository
from sarc.database import connect, migrate
from sarc.models import Building, NotFoundError, Profile, Room, User
from sarc.repository import BuildingRepository


@pytest.fixture
def conn():
    connection = connect(":memory:")
    migrate(connection)
    yield connection
    connection.close()


def _user(profile_id):
    return User(
        email="admin@example.com",
        nome="Admin",
        birth_date="2000-01-01",
        sex="M",
        telephone="placeholder",
        profile_id=profile_id,
    )


def test_room_round_trip(conn):
    building = BuildingRepository(conn).create(Building(building_name="Main Building", address="123 Main St"))
    rooms = RoomRepository(conn)
    room = rooms.create(
        Room(room_number="101", building_id=building.building_id, room_capacity=30, floor=1)
    )
    assert rooms.find_by_id(room.room_id) == room
    assert rooms.find_all() == [room]


def test_room_requires_existing_building(conn):
    with pytest.raises(sqlite3.IntegrityError):
        RoomRepository(conn).create(Room(room_number="101", building_id=5))


def test_room_update(conn):
    building = BuildingRepository(conn).create(Building(building_name="Main Building", address="123 Main St"))
    rooms = RoomRepository(conn)
    room = rooms.create(Room(room_number="101", building_id=building.building_id, room_capacity=30, floor=1))
    rooms.update(room.room_id, Room(room_number="102", building_id=building.building_id, room_capacity=40, floor=2))
    stored = rooms.find_by_id(room.room_id)
    assert (stored.room_number, stored.room_capacity, stored.floor) == ("102", 40, 2)


def test_profile_crud(conn):
    profiles = ProfileRepository(conn)
    profile = profiles.create(Profile(role="admin"))
    assert profiles.find_by_id(profile.id) == Profile(id=profile.id, role="admin")
    profiles.update(profile.id, Profile(role="teacher"))
    assert profiles.find_by_id(profile.id).role == "teacher"
    profiles.delete(profile.id)
    with pytest.raises(NotFoundError):
        profiles.find_by_id(profile.id)


def test_user_round_trip(conn):
    profile = ProfileRepository(conn).create(Profile(role="admin"))
    users = UserRepository(conn)
    user = users.create(_user(profile.id))
    assert users.find_by_id(user.id) == user
    assert users.find_all() == [user]


def test_user_update(conn):
    profile = ProfileRepository(conn).create(Profile(role="admin"))
    users = UserRepository(conn)
    user = users.create(_user(profile.id))
    changed = _user(profile.id)
    changed.nome = "Someone Else"
    users.update(user.id, changed)
    assert users.find_by_id(user.id).nome == "Someone Else"


def test_deleting_referenced_profile_fails(conn):
    profiles = ProfileRepository(conn)
    profile = profiles.create(Profile(role="admin"))
    UserRepository(conn).create(_user(profile.id))
    with pytest.raises(sqlite3.IntegrityError):
        profiles.delete(profile.id)


def test_missing_user_raises(conn):
    with pytest.raises(NotFoundError, match="user"):
        UserRepository(conn).find_by_id(3)