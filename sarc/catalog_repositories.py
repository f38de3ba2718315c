"""Repositories for rooms, profiles and users."""

from __future__ import annotations

from .models import Profile, Room, User
from .repository import SqlRepository


class RoomRepository(SqlRepository[Room]):
    model = Room
    table = "rooms"
    id_column = "room_id"
    id_attr = "room_id"
    columns = ("room_number", "building_id", "room_capacity", "floor")
    entity_name = "room"


class ProfileRepository(SqlRepository[Profile]):
    model = Profile
    table = "profiles"
    id_column = "profile_id"
    id_attr = "id"
    columns = ("role",)
    entity_name = "profile"


class UserRepository(SqlRepository[User]):
    model = User
    table = "users"
    id_column = "user_id"
    id_attr = "id"
    columns = ("email", "nome", "birth_date", "sex", "telephone", "profile_id")
    entity_name = "user"