"""Repositories for classes, disciplines, curriculums and lectures."""

from __future__ import annotations

import sqlite3

from .models import Class, Curriculum, Discipline, Lecture
from .repository import SqlRepository

_CURRICULUM_DISCIPLINES = """
SELECT d.discipline_id, d.name, d.credits, d.program, d.bibliography
FROM disciplines d
JOIN curriculum_disciplines cd ON cd.discipline_id = d.discipline_id
WHERE cd.curriculum_id = ?
ORDER BY d.discipline_id
"""


class ClassRepository(SqlRepository[Class]):
    model = Class
    table = "classes"
    id_column = "class_id"
    id_attr = "class_id"
    columns = ("name", "description", "discipline_id")
    entity_name = "class"


class DisciplineRepository(SqlRepository[Discipline]):
    model = Discipline
    table = "disciplines"
    id_column = "discipline_id"
    id_attr = "id"
    columns = ("name", "credits", "program", "bibliography")
    list_columns = frozenset({"bibliography"})
    entity_name = "discipline"


class CurriculumRepository(SqlRepository[Curriculum]):
    """Curriculums, each read back together with its linked disciplines."""

    model = Curriculum
    table = "curriculums"
    id_column = "curriculum_id"
    id_attr = "id"
    columns = ("course_name", "data_inicio", "data_fim")
    entity_name = "curriculum"

    def __init__(self, conn: sqlite3.Connection) -> None:
        super().__init__(conn)
        self._disciplines = DisciplineRepository(conn)

    def find_all(self) -> list[Curriculum]:
        return [self._with_disciplines(curriculum) for curriculum in super().find_all()]

    def find_by_id(self, entity_id: int) -> Curriculum:
        return self._with_disciplines(super().find_by_id(entity_id))

    def add_discipline(self, curriculum_id: int, discipline_id: int) -> None:
        """Link a discipline to a curriculum."""
        self.conn.execute(
            "INSERT INTO curriculum_disciplines (curriculum_id, discipline_id) VALUES (?, ?)",
            (curriculum_id, discipline_id),
        )

    def _with_disciplines(self, curriculum: Curriculum) -> Curriculum:
        rows = self.conn.execute(_CURRICULUM_DISCIPLINES, (curriculum.id,)).fetchall()
        curriculum.disciplines = [self._disciplines._build(row) for row in rows]
        return curriculum


class LectureRepository(SqlRepository[Lecture]):
    model = Lecture
    table = "lectures"
    id_column = "lecture_id"
    id_attr = "lecture_id"
    columns = ("class_id", "room_id", "date", "content")
    list_columns = frozenset({"content"})
    entity_name = "lecture"