from __future__ import annotations

from pathlib import Path

from src.teacher_attendance.teacher_attendance.database.bootstrap import (
    _strip_create_db_and_use,
    iter_sql_statements,
)

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_split_ignores_semicolons_in_quotes_and_comments():
    sql = "-- header; comment\nINSERT INTO feriados VALUES ('F1', 'a;b');\nSELECT 1;"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO feriados VALUES ('F1', 'a;b')", "SELECT 1"]


def test_schema_creates_the_four_tables():
    sql = _strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))

    assert len(statements) == 4
    for table in ("profesor", "asistencia", "horario", "feriados"):
        assert any(f"CREATE TABLE IF NOT EXISTS {table} (" in s for s in statements)
