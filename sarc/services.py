"""Application services that sit between the HTTP handlers and the repositories."""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

from .models import Curriculum, NotFoundError, Reservation

T = TypeVar("T")


class Repository(Protocol[T]):
    """What a service needs from the storage layer."""

    def create(self, entity: T) -> Any: ...

    def find_all(self) -> list[T]: ...

    def find_by_id(self, entity_id: int) -> T | None: ...

    def update(self, entity_id: int, entity: T) -> None: ...

    def delete(self, entity_id: int) -> None: ...


class CrudService(Generic[T]):
    """Create, read, update and delete records of one kind."""

    def __init__(self, repository: Repository[T], entity_name: str) -> None:
        self.repository = repository
        self.entity_name = entity_name

    def create(self, entity: T) -> T:
        """Store the entity; its generated id is set on it."""
        self.repository.create(entity)
        return entity

    def list(self) -> list[T]:
        return self.repository.find_all()

    def get(self, entity_id: int) -> T:
        """Return the entity with the given id or raise NotFoundError."""
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.entity_name} not found")
        return entity

    def update(self, entity_id: int, entity: T) -> T:
        """Overwrite the stored entity and return it as read back."""
        self.repository.update(entity_id, entity)
        return self.get(entity_id)

    def delete(self, entity_id: int) -> None:
        self.repository.delete(entity_id)


class CurriculumService(CrudService[Curriculum]):
    """Curriculums together with their many-to-many link to disciplines."""

    def __init__(self, repository: Any) -> None:
        super().__init__(repository, "curriculum")

    def create(self, entity: Curriculum) -> Curriculum:
        """Store the curriculum, then link every discipline it lists."""
        super().create(entity)
        for discipline in entity.disciplines:
            self.repository.add_discipline(entity.id, discipline.id)
        return entity

    def add_discipline(self, curriculum_id: int, discipline_id: int) -> None:
        self.repository.add_discipline(curriculum_id, discipline_id)


class ReservationService(CrudService[Reservation]):
    """Reservations together with their many-to-many link to resources."""

    def __init__(self, repository: Any) -> None:
        super().__init__(repository, "reservation")

    def create(self, entity: Reservation) -> Reservation:
        """Store the reservation, then link every resource it lists."""
        super().create(entity)
        for resource in entity.resources:
            self.repository.add_resource(entity.reservation_id, resource.resource_id)
        return entity

    def add_resource(self, reservation_id: int, resource_id: int) -> None:
        self.repository.add_resource(reservation_id, resource_id)