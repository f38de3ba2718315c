"""Domain records of the room-reservation system and their JSON form."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class NotFoundError(LookupError):
    """Raised when a record with the requested id does not exist."""


class ValidationError(ValueError):
    """Raised when a JSON payload cannot be bound to a record."""


class ResourceStatus(str, Enum):
    """Availability of a resource."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    RESERVED = "reserved"


def _identity(value: Any) -> Any:
    return value


def _integer(value: Any, key: str, *, unsigned: bool) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"field {key!r}: expected an integer, got {value!r}")
    if unsigned and value < 0:
        raise ValidationError(f"field {key!r}: expected a non-negative integer, got {value}")
    return value


def _uint(value: Any, key: str) -> int:
    return _integer(value, key, unsigned=True)


def _int(value: Any, key: str) -> int:
    return _integer(value, key, unsigned=False)


def _str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"field {key!r}: expected a string, got {value!r}")
    return value


def _str_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list):
        raise ValidationError(f"field {key!r}: expected an array of strings")
    return ["" if item is None else _str(item, key) for item in value]


def _status(value: Any, key: str) -> ResourceStatus | str:
    text = _str(value, key)
    try:
        return ResourceStatus(text)
    except ValueError:
        return text


def _encode_status(value: ResourceStatus | str) -> str:
    return value.value if isinstance(value, Enum) else value


def _model_list(model: Any) -> Callable[[Any, str], list]:
    def decode(value: Any, key: str) -> list:
        if not isinstance(value, list):
            raise ValidationError(f"field {key!r}: expected an array of objects")
        return [model.from_dict(item) for item in value]

    return decode


def _model(model: Any) -> Callable[[Any, str], Any]:
    def decode(value: Any, key: str) -> Any:
        return model.from_dict(value)

    return decode


def _encode_list(items: list) -> list:
    return [item.to_dict() for item in items]


def _encode_model(item: Any) -> Any:
    return item.to_dict()


@dataclass(frozen=True)
class _Field:
    attr: str
    key: str
    decode: Callable[[Any, str], Any]
    encode: Callable[[Any], Any] = _identity
    omit_empty: bool = False


def _encode(record: Any, fields: tuple[_Field, ...]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for spec in fields:
        value = getattr(record, spec.attr)
        if spec.omit_empty and not value:
            continue
        result[spec.key] = spec.encode(value)
    return result


def _decode(cls: Any, fields: tuple[_Field, ...], data: Any) -> Any:
    if not isinstance(data, Mapping):
        raise ValidationError(f"expected a JSON object for {cls.__name__}")
    kwargs = {
        spec.attr: spec.decode(data[spec.key], spec.key)
        for spec in fields
        if data.get(spec.key) is not None
    }
    return cls(**kwargs)


@dataclass
class Building:
    building_id: int = 0
    building_name: str = ""
    address: str = ""

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("building_id", "buildingId", _uint, omit_empty=True),
        _Field("building_name", "buildingName", _str),
        _Field("address", "address", _str),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Building:
        return _decode(cls, cls._fields, data)


@dataclass
class Room:
    room_id: int = 0
    room_capacity: int = 0
    floor: int = 0
    building_id: int = 0
    room_number: str = ""

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("room_id", "roomId", _uint, omit_empty=True),
        _Field("room_capacity", "roomCapacity", _int),
        _Field("floor", "floor", _int),
        _Field("building_id", "buildingId", _uint),
        _Field("room_number", "roomNumber", _str),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Room:
        return _decode(cls, cls._fields, data)


@dataclass
class Class:
    class_id: int = 0
    name: str = ""
    description: str = ""
    discipline_id: int = 0

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("class_id", "classId", _uint, omit_empty=True),
        _Field("name", "name", _str),
        _Field("description", "description", _str),
        _Field("discipline_id", "disciplineId", _uint),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Class:
        return _decode(cls, cls._fields, data)


@dataclass
class Discipline:
    id: int = 0
    name: str = ""
    credits: int = 0
    program: str = ""
    bibliography: list[str] = field(default_factory=list)

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("id", "id", _uint, omit_empty=True),
        _Field("name", "name", _str),
        _Field("credits", "credits", _int),
        _Field("program", "program", _str),
        _Field("bibliography", "bibliography", _str_list, list),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Discipline:
        return _decode(cls, cls._fields, data)


@dataclass
class Curriculum:
    id: int = 0
    course_name: str = ""
    data_inicio: str = ""
    data_fim: str = ""
    disciplines: list[Discipline] = field(default_factory=list)

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("id", "id", _uint, omit_empty=True),
        _Field("course_name", "courseName", _str),
        _Field("data_inicio", "dataInicio", _str),
        _Field("data_fim", "dataFim", _str),
        _Field("disciplines", "disciplines", _model_list(Discipline), _encode_list),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Curriculum:
        return _decode(cls, cls._fields, data)


@dataclass
class User:
    id: int = 0
    email: str = ""
    nome: str = ""
    birth_date: str = ""
    sex: str = ""
    telephone: str = ""
    profile_id: int = 0

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("id", "id", _uint, omit_empty=True),
        _Field("email", "email", _str),
        _Field("nome", "nome", _str),
        _Field("birth_date", "birthDate", _str),
        _Field("sex", "sex", _str),
        _Field("telephone", "telephone", _str),
        _Field("profile_id", "profileId", _uint),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> User:
        return _decode(cls, cls._fields, data)


@dataclass
class Profile:
    id: int = 0
    role: str = ""

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("id", "id", _uint, omit_empty=True),
        _Field("role", "role", _str),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Profile:
        return _decode(cls, cls._fields, data)


@dataclass
class Lecture:
    lecture_id: int = 0
    class_id: int = 0
    room_id: int = 0
    date: str = ""
    content: list[str] = field(default_factory=list)
    presence: list[User] = field(default_factory=list)

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("lecture_id", "lectureId", _uint, omit_empty=True),
        _Field("class_id", "classId", _uint),
        _Field("room_id", "roomId", _uint),
        _Field("date", "date", _str),
        _Field("content", "content", _str_list, list),
        _Field("presence", "presence", _model_list(User), _encode_list),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Lecture:
        return _decode(cls, cls._fields, data)


@dataclass
class ResourceType:
    resource_type_id: int = 0
    name: str = ""

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("resource_type_id", "id", _uint, omit_empty=True),
        _Field("name", "name", _str),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> ResourceType:
        return _decode(cls, cls._fields, data)


@dataclass
class Resource:
    resource_id: int = 0
    description: str = ""
    status: ResourceStatus | str = ""
    characteristics: list[str] = field(default_factory=list)
    resource_type_id: int = 0
    resource_type: ResourceType | None = None

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("resource_id", "resourceId", _uint, omit_empty=True),
        _Field("description", "description", _str),
        _Field("status", "status", _status, _encode_status),
        _Field("characteristics", "characteristics", _str_list, list),
        _Field("resource_type_id", "resourceTypeId", _uint),
        _Field(
            "resource_type",
            "resourceType",
            _model(ResourceType),
            _encode_model,
            omit_empty=True,
        ),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Resource:
        return _decode(cls, cls._fields, data)


@dataclass
class Reservation:
    reservation_id: int = 0
    lecture_id: int = 0
    observation: str = ""
    resources: list[Resource] = field(default_factory=list)

    _fields: ClassVar[tuple[_Field, ...]] = (
        _Field("reservation_id", "reservationId", _uint, omit_empty=True),
        _Field("lecture_id", "lectureId", _uint),
        _Field("observation", "observation", _str),
        _Field("resources", "resources", _model_list(Resource), _encode_list),
    )

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, self._fields)

    @classmethod
    def from_dict(cls, data: Any) -> Reservation:
        return _decode(cls, cls._fields, data)


@dataclass
class ErrorResponse:
    """Body returned alongside a failed request."""

    error: str

    def to_dict(self) -> dict[str, str]:
        return {"error": self.error}