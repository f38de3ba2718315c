"""HTTP application: wires repositories, services and handlers into Flask routes."""

from __future__ import annotations

import argparse
import os
import sqlite3
from collections.abc import Callable, Sequence
from typing import Any

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from .academic_repositories import (
    ClassRepository,
    CurriculumRepository,
    DisciplineRepository,
    LectureRepository,
)
from .catalog_repositories import ProfileRepository, RoomRepository, UserRepository
from .database import connect
from .handlers import CrudHandler, LinkHandler
from .models import (
    Building,
    Class,
    Curriculum,
    Discipline,
    Lecture,
    Profile,
    Reservation,
    Resource,
    Room,
    User,
)
from .repository import BuildingRepository
from .reservation_repositories import ReservationRepository, ResourceRepository
from .seed import initialize
from .services import CrudService, CurriculumService, ReservationService

DEFAULT_PORT = 8080


def build_handlers(conn: sqlite3.Connection) -> dict[str, CrudHandler]:
    """Create one handler per collection, keyed by the collection's URL segment."""
    curriculums = CurriculumService(CurriculumRepository(conn))
    reservations = ReservationService(ReservationRepository(conn))
    return {
        "buildings": CrudHandler(CrudService(BuildingRepository(conn), "building"), Building),
        "rooms": CrudHandler(CrudService(RoomRepository(conn), "room"), Room),
        "classes": CrudHandler(CrudService(ClassRepository(conn), "class"), Class),
        "curriculums": LinkHandler(
            curriculums, Curriculum, curriculums.add_discipline, "disciplineId", "curriculum"
        ),
        "disciplines": CrudHandler(
            CrudService(DisciplineRepository(conn), "discipline"), Discipline
        ),
        "lectures": CrudHandler(CrudService(LectureRepository(conn), "lecture"), Lecture),
        "profiles": CrudHandler(CrudService(ProfileRepository(conn), "profile"), Profile),
        "resources": CrudHandler(CrudService(ResourceRepository(conn), "resource"), Resource),
        "users": CrudHandler(CrudService(UserRepository(conn), "user"), User),
        "reservations": LinkHandler(
            reservations, Reservation, reservations.add_resource, "resourceId", "reservation"
        ),
    }


# Sub-collection routes that link one record to another: collection -> segment.
_LINK_ROUTES = {"curriculums": "disciplines", "reservations": "resources"}


def _respond(result: tuple[Any, int]):
    body, status = result
    if status == 204:
        return "", 204
    return jsonify(body), status


def _register(app: Flask, name: str, handler: CrudHandler) -> None:
    def view(endpoint: str, func: Callable[..., tuple[Any, int]]) -> Callable[..., Any]:
        def wrapped(**kwargs: Any):
            return _respond(func(**kwargs))

        wrapped.__name__ = endpoint
        return wrapped

    base = f"/{name}"
    item = f"/{name}/<raw_id>"
    app.add_url_rule(
        base,
        f"{name}_create",
        view(f"{name}_create", lambda: handler.create(request.get_data())),
        methods=["POST"],
    )
    app.add_url_rule(base, f"{name}_list", view(f"{name}_list", handler.list), methods=["GET"])
    app.add_url_rule(item, f"{name}_get", view(f"{name}_get", handler.get), methods=["GET"])
    app.add_url_rule(
        item,
        f"{name}_update",
        view(f"{name}_update", lambda raw_id: handler.update(raw_id, request.get_data())),
        methods=["PUT"],
    )
    app.add_url_rule(
        item, f"{name}_delete", view(f"{name}_delete", handler.delete), methods=["DELETE"]
    )
    segment = _LINK_ROUTES.get(name)
    if segment is not None and isinstance(handler, LinkHandler):
        app.add_url_rule(
            f"{item}/{segment}",
            f"{name}_link",
            view(f"{name}_link", lambda raw_id: handler.add_link(raw_id, request.get_data())),
            methods=["POST"],
        )


def create_app(conn: sqlite3.Connection) -> Flask:
    """Build the Flask application serving every collection over the given database."""
    app = Flask(__name__)
    for name, handler in build_handlers(conn).items():
        _register(app, name, handler)
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Prepare the database, load the initial data and serve the API."""
    load_dotenv()
    parser = argparse.ArgumentParser(prog="sarc", description="Room and resource reservation API.")
    parser.add_argument(
        "--database",
        default=os.environ.get("DB_PATH", "sarc.db"),
        help="SQLite database file (default: $DB_PATH or sarc.db)",
    )
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    conn = connect(args.database)
    initialize(conn)
    print("Database connected and migrated!")
    app = create_app(conn)
    app.run(host=args.host, port=args.port)
    return 0