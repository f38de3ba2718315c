"""Request handlers: bind JSON payloads, call services, map outcomes to HTTP statuses."""

from __future__ import annotations

import json
import re
import sqlite3
from collections.abc import Callable, Mapping
from typing import Any

from .models import ErrorResponse, ValidationError

Response = tuple[Any, int]

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_FAILURES = (LookupError, sqlite3.Error)


def parse_id(raw: str) -> int:
    """Parse a path id as a signed 64-bit decimal integer."""
    if not isinstance(raw, str) or not _ID_PATTERN.fullmatch(raw):
        raise ValidationError("Invalid ID")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValidationError("Invalid ID")
    return value


def _error(message: str, status: int) -> Response:
    return ErrorResponse(message).to_dict(), status


def _decode(payload: Any) -> Any:
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            return json.loads(payload)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
    return payload


class CrudHandler:
    """Create, list, get, update and delete for one kind of record."""

    def __init__(self, service: Any, model: type) -> None:
        self.service = service
        self.model = model

    def _bind(self, payload: Any) -> Any:
        return self.model.from_dict(_decode(payload))

    def create(self, payload: Any) -> Response:
        try:
            entity = self._bind(payload)
        except ValidationError as exc:
            return _error(str(exc), 400)
        try:
            created = self.service.create(entity)
        except _FAILURES as exc:
            return _error(str(exc), 500)
        return created.to_dict(), 201

    def list(self) -> Response:
        try:
            entities = self.service.list()
        except _FAILURES as exc:
            return _error(str(exc), 500)
        return [entity.to_dict() for entity in entities], 200

    def get(self, raw_id: str) -> Response:
        try:
            entity_id = parse_id(raw_id)
        except ValidationError:
            return _error("Invalid ID", 400)
        try:
            entity = self.service.get(entity_id)
        except _FAILURES as exc:
            return _error(str(exc), 404)
        return entity.to_dict(), 200

    def update(self, raw_id: str, payload: Any) -> Response:
        try:
            entity_id = parse_id(raw_id)
        except ValidationError:
            return _error("Invalid ID", 400)
        try:
            entity = self._bind(payload)
        except ValidationError as exc:
            return _error(str(exc), 400)
        try:
            updated = self.service.update(entity_id, entity)
        except _FAILURES as exc:
            return _error(str(exc), 500)
        return updated.to_dict(), 200

    def delete(self, raw_id: str) -> Response:
        try:
            entity_id = parse_id(raw_id)
        except ValidationError:
            return _error("Invalid ID", 400)
        try:
            self.service.delete(entity_id)
        except _FAILURES as exc:
            return _error(str(exc), 500)
        return "", 204


class LinkHandler(CrudHandler):
    """CRUD handler that can also link another record to the one addressed by id."""

    def __init__(
        self,
        service: Any,
        model: type,
        link: Callable[[int, int], None],
        field: str,
        label: str,
    ) -> None:
        super().__init__(service, model)
        self.link = link
        self.field = field
        self.label = label

    def _bind_link(self, payload: Any) -> int:
        data = _decode(payload)
        if not isinstance(data, Mapping):
            raise ValidationError("expected a JSON object")
        value = data.get(self.field)
        if value is None:
            return 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError(
                f"field {self.field!r}: expected a non-negative integer, got {value!r}"
            )
        return value

    def add_link(self, raw_id: str, payload: Any) -> Response:
        """Link the record named in the payload to the record with the given id."""
        try:
            entity_id = parse_id(raw_id)
        except ValidationError:
            return _error(f"Invalid {self.label} ID", 400)
        try:
            linked_id = self._bind_link(payload)
        except ValidationError as exc:
            return _error(str(exc), 400)
        try:
            self.link(entity_id, linked_id)
        except _FAILURES as exc:
            return _error(str(exc), 500)
        return "", 204