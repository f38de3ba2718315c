# sarc

`sarc` is a small JSON HTTP service for managing the spaces and schedule of an
academic institution. It keeps buildings and their rooms, disciplines and the
curriculums that group them, classes and their lectures, users and profiles,
resources such as projectors, and the reservations that attach resources to
a lecture.

Data is stored in an SQLite database. On start-up the schema is created if
needed, every table is emptied, and a small set of sample records is loaded
(one record of each kind, all with id 1).

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
sarc
```

Options:

| Option       | Default                     | Meaning                      |
|--------------|-----------------------------|------------------------------|
| `--database` | `$DB_PATH`, else `sarc.db`  | SQLite database file         |
| `--host`     | `0.0.0.0`                   | address to listen on         |
| `--port`     | `8080`                      | port to listen on            |

A `.env` file in the working directory is read at start-up, so `DB_PATH` may
be set there. The server is Flask's built-in development server.

## HTTP interface

Each kind of record has the same five routes, all exchanging JSON:

| Method | Path                | Result                                   |
|--------|---------------------|------------------------------------------|
| POST   | `/<kind>`           | `201` with the created record            |
| GET    | `/<kind>`           | `200` with every record, ordered by id   |
| GET    | `/<kind>/<id>`      | `200` with one record, `404` if missing  |
| PUT    | `/<kind>/<id>`      | `200` with the updated record            |
| DELETE | `/<kind>/<id>`      | `204` with no body                       |

where `<kind>` is one of `buildings`, `rooms`, `classes`, `curriculums`,
`disciplines`, `lectures`, `profiles`, `resources`, `users` and
`reservations`.

Two further routes manage many-to-many links:

- `POST /curriculums/<id>/disciplines` with `{"disciplineId": 1}` adds a
  discipline to a curriculum.
- `POST /reservations/<id>/resources` with `{"resourceId": 1}` adds a
  resource to a reservation.

Both answer `204` on success. Creating a curriculum or a reservation also
links every discipline or resource listed in its body, by id.

An identifier in the path that is not a whole number gives `400`; a body that
is not valid JSON for the record gives `400`; database failures while storing
data give `500`. Every error body has the form `{"error": "<message>"}`.

### Example

```
curl -X POST localhost:8080/buildings \
     -H 'Content-Type: application/json' \
     -d '{"buildingName": "Main Building", "address": "123 Main St"}'
```

answers `201` with the stored building, now carrying `"buildingId": 2`
(id 1 is taken by the sample building).

## Using it from Python

The application can be built around any SQLite connection, which is handy for
tests or for embedding:

```python
from sarc.database import connect
from sarc.seed import initialize
from sarc.app import create_app

conn = connect(":memory:")
initialize(conn)          # create tables, clear them, load sample data
app = create_app(conn)    # a Flask application

client = app.test_client()
print(client.get("/rooms").get_json())
```

The layers below the HTTP interface can be used on their own as well:

- `sarc.models` holds the record types (`Building`, `Room`, `Class`,
  `Discipline`, `Curriculum`, `Lecture`, `User`, `Profile`, `Resource`,
  `ResourceType`, `Reservation`), each with `to_dict()` and `from_dict()`
  using the JSON field names above, the `ResourceStatus` enumeration, the
  `ErrorResponse` body, and the `NotFoundError` and `ValidationError`
  exceptions.
- `sarc.database` offers `connect`, `migrate` and `clear_tables`;
  `sarc.seed` offers `seed` and `initialize`.
- `sarc.repository`, `sarc.catalog_repositories`,
  `sarc.academic_repositories` and `sarc.reservation_repositories` hold the
  SQL repositories, each offering `create`, `find_all`, `find_by_id`,
  `update` and `delete`; `find_by_id` raises `NotFoundError` for a missing
  id. `CurriculumRepository.add_discipline` and
  `ReservationRepository.add_resource` manage the links.
- `sarc.services` holds `CrudService`, `CurriculumService` and
  `ReservationService`.
- `sarc.handlers` holds `CrudHandler`, `LinkHandler` and `parse_id`, which
  return a `(body, status)` pair without needing Flask.

## What it does not do

- There is no authentication or authorisation; every route is open.
- No API description or documentation page is served.
- Dates are stored as the text given; they are not checked.
- Updating or deleting an id that does not exist is not an error.
- Each start-up empties the database before loading the sample data, so
  records do not survive a restart.