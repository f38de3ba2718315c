"""Initial data loaded into a freshly prepared database."""

from __future__ import annotations

import sqlite3

from .academic_repositories import (
    ClassRepository,
    CurriculumRepository,
    DisciplineRepository,
    LectureRepository,
)
from .catalog_repositories import ProfileRepository, RoomRepository, UserRepository
from .database import clear_tables, migrate
from .models import (
    Building,
    Class,
    Curriculum,
    Discipline,
    Lecture,
    Profile,
    Reservation,
    Resource,
    ResourceStatus,
    ResourceType,
    Room,
    User,
)
from .repository import BuildingRepository
from .reservation_repositories import (
    ReservationRepository,
    ResourceRepository,
    ResourceTypeRepository,
)
from .services import CrudService, CurriculumService, ReservationService


def seed(conn: sqlite3.Connection) -> None:
    """Insert one record of every kind, linked to one another by id."""
    profiles = CrudService(ProfileRepository(conn), "profile")
    users = CrudService(UserRepository(conn), "user")
    buildings = CrudService(BuildingRepository(conn), "building")
    rooms = CrudService(RoomRepository(conn), "room")
    disciplines = CrudService(DisciplineRepository(conn), "discipline")
    curriculums = CurriculumService(CurriculumRepository(conn))
    classes = CrudService(ClassRepository(conn), "class")
    lectures = CrudService(LectureRepository(conn), "lecture")
    resource_types = ResourceTypeRepository(conn)
    resources = CrudService(ResourceRepository(conn), "resource")
    reservations = ReservationService(ReservationRepository(conn))

    profiles.create(Profile(role="admin"))
    users.create(
        User(
            email="admin@example.com",
            nome="Admin",
            birth_date="[date-of-birth]",
            sex="M",
            telephone="[phone]",
            profile_id=1,
        )
    )
    buildings.create(Building(building_name="Main Building", address="123 Main St"))
    rooms.create(Room(room_number="101", building_id=1, room_capacity=30, floor=1))
    disciplines.create(
        Discipline(
            name="Mathematics",
            credits=4,
            program="Basic Math Program",
            bibliography=["Book 1", "Book 2"],
        )
    )
    curriculums.create(
        Curriculum(
            course_name="Engineering",
            data_inicio="2025-01-01",
            data_fim="2029-01-01",
            disciplines=[Discipline(id=1)],
        )
    )
    classes.create(Class(name="Math 101", description="Intro to Math", discipline_id=1))
    lectures.create(
        Lecture(class_id=1, room_id=1, date="2025-09-01", content=["Introduction", "Numbers"])
    )
    resource_types.create(ResourceType(name="Projector"))
    resources.create(
        Resource(
            description="Epson Projector",
            status=ResourceStatus.AVAILABLE,
            characteristics=["HD", "HDMI"],
            resource_type_id=1,
        )
    )
    reservations.create(
        Reservation(
            lecture_id=1,
            observation="First class reservation",
            resources=[Resource(resource_id=1)],
        )
    )


def initialize(conn: sqlite3.Connection) -> None:
    """Create the schema, empty every table and load the initial data."""
    migrate(conn)
    clear_tables(conn)
    seed(conn)