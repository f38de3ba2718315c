import sqlite3

import pytest

from sarc.academic_repositories import CurriculumRepository, DisciplineRepository
from sarc.catalog_repositories import ProfileRepository
from sarc.database import connect, migrate
from sarc.models import (
    Building,
    Curriculum,
    Discipline,
    NotFoundError,
    Profile,
    Reservation,
    Resource,
)
from sarc.repository import BuildingRepository
from sarc.services import CrudService, CurriculumService, ReservationService


@pytest.fixture
def conn():
    connection = connect(":memory:")
    migrate(connection)
    yield connection
    connection.close()


class FakeReservationRepository:
    def __init__(self):
        self.rows = {}
        self.links = []
        self.next_id = 1

    def create(self, entity):
        entity.reservation_id = self.next_id
        self.rows[self.next_id] = entity
        self.next_id += 1

    def find_all(self):
        return list(self.rows.values())

    def find_by_id(self, entity_id):
        return self.rows.get(entity_id)

    def update(self, entity_id, entity):
        entity.reservation_id = entity_id
        self.rows[entity_id] = entity

    def delete(self, entity_id):
        self.rows.pop(entity_id, None)

    def add_resource(self, reservation_id, resource_id):
        self.links.append((reservation_id, resource_id))


def test_create_sets_generated_id_and_returns_entity(conn):
    service = CrudService(BuildingRepository(conn), "building")
    building = Building(building_name="Main Building", address="123 Main St")
    created = service.create(building)
    assert created is building
    assert created.building_id == 1


def test_get_returns_stored_values(conn):
    service = CrudService(BuildingRepository(conn), "building")
    created = service.create(Building(building_name="Main Building", address="123 Main St"))
    fetched = service.get(created.building_id)
    assert fetched == created


def test_list_returns_all_in_creation_order(conn):
    service = CrudService(ProfileRepository(conn), "profile")
    service.create(Profile(role="admin"))
    service.create(Profile(role="teacher"))
    assert [p.role for p in service.list()] == ["admin", "teacher"]


def test_get_missing_raises_not_found(conn):
    service = CrudService(BuildingRepository(conn), "building")
    with pytest.raises(NotFoundError):
        service.get(42)


def test_get_none_from_repository_raises_with_entity_name():
    service = ReservationService(FakeReservationRepository())
    with pytest.raises(NotFoundError, match="reservation not found"):
        service.get(7)


def test_update_returns_record_as_read_back(conn):
    service = CrudService(BuildingRepository(conn), "building")
    created = service.create(Building(building_name="Old", address="Somewhere"))
    updated = service.update(created.building_id, Building(building_name="New", address="Elsewhere"))
    assert updated.building_id == created.building_id
    assert updated.building_name == "New"
    assert service.get(created.building_id).address == "Elsewhere"


def test_delete_removes_record(conn):
    service = CrudService(BuildingRepository(conn), "building")
    created = service.create(Building(building_name="Main Building", address="123 Main St"))
    service.delete(created.building_id)
    assert service.list() == []
    with pytest.raises(NotFoundError):
        service.get(created.building_id)


def test_curriculum_create_links_disciplines(conn):
    disciplines = CrudService(DisciplineRepository(conn), "discipline")
    math = disciplines.create(
        Discipline(name="Mathematics", credits=4, program="Basic Math Program", bibliography=["Book 1", "Book 2"])
    )
    service = CurriculumService(CurriculumRepository(conn))
    created = service.create(
        Curriculum(
            course_name="Engineering",
            data_inicio="2025-01-01",
            data_fim="2029-01-01",
            disciplines=[Discipline(id=math.id)],
        )
    )
    fetched = service.get(created.id)
    assert fetched.course_name == "Engineering"
    assert [d.name for d in fetched.disciplines] == ["Mathematics"]
    assert fetched.disciplines[0].bibliography == ["Book 1", "Book 2"]


def test_curriculum_add_discipline_later(conn):
    disciplines = CrudService(DisciplineRepository(conn), "discipline")
    first = disciplines.create(Discipline(name="Mathematics"))
    second = disciplines.create(Discipline(name="Physics"))
    service = CurriculumService(CurriculumRepository(conn))
    created = service.create(Curriculum(course_name="Engineering"))
    assert service.get(created.id).disciplines == []
    service.add_discipline(created.id, second.id)
    service.add_discipline(created.id, first.id)
    assert [d.id for d in service.get(created.id).disciplines] == [first.id, second.id]


def test_curriculum_linking_unknown_discipline_fails(conn):
    service = CurriculumService(CurriculumRepository(conn))
    created = service.create(Curriculum(course_name="Engineering"))
    with pytest.raises(sqlite3.IntegrityError):
        service.add_discipline(created.id, 999)


def test_reservation_create_links_each_resource():
    repo = FakeReservationRepository()
    service = ReservationService(repo)
    reservation = Reservation(
        lecture_id=1,
        observation="First class reservation",
        resources=[Resource(resource_id=3), Resource(resource_id=5)],
    )
    created = service.create(reservation)
    assert created.reservation_id == 1
    assert repo.links == [(1, 3), (1, 5)]


def test_reservation_add_resource_delegates():
    repo = FakeReservationRepository()
    service = ReservationService(repo)
    created = service.create(Reservation(lecture_id=1))
    service.add_resource(created.reservation_id, 4)
    assert repo.links == [(created.reservation_id, 4)]


def test_reservation_update_and_delete():
    repo = FakeReservationRepository()
    service = ReservationService(repo)
    created = service.create(Reservation(lecture_id=1, observation="before"))
    updated = service.update(created.reservation_id, Reservation(lecture_id=1, observation="after"))
    assert updated.observation == "after"
    service.delete(created.reservation_id)
    assert service.list() == []