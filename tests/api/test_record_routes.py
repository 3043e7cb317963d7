from __future__ import annotations

import pytest


@pytest.fixture
def ana(client):
    client.post("/profesores", json={"id": "P1", "nombre": "Ana", "horas_segun_contrato": 20, "estado": "activo"})
    return "P1"


def test_attendance_roundtrip_includes_teacher_name(client, ana):
    payload = {
        "id": "A1",
        "id_profesor": ana,
        "fecha": "2026-03-01",
        "horas": 6,
        "tardanza": 0,
        "justificacion": None,
        "estado": "presente",
    }
    res = client.post("/asistencias", json=payload)
    assert res.status_code == 201
    assert res.get_json() == {"message": "Asistencia registrada con éxito", "id": "A1", "affectedRows": 1}

    got = client.get("/asistencias/A1").get_json()
    assert got == {**payload, "nombre_profesor": "Ana"}


def test_attendance_unknown_teacher_is_bad_request(client):
    res = client.post("/asistencias", json={"id": "A1", "id_profesor": "GHOST", "fecha": "2026-03-01", "horas": 4})

    assert res.status_code == 400
    assert "no existe" in res.get_json()["message"]


def test_attendance_missing_fields_lists_them(client, ana):
    res = client.post("/asistencias", json={"id": "A1", "id_profesor": ana})

    assert res.status_code == 400
    assert res.get_json()["fields"] == ["fecha", "horas"]


def test_attendance_listing_is_newest_first(client, ana):
    for i, day in enumerate(["2026-01-15", "2026-03-01", "2025-12-24", "2026-02-10"]):
        client.post("/asistencias", json={"id": f"A{i}", "id_profesor": ana, "fecha": day, "horas": 4})

    dates = [r["fecha"] for r in client.get("/asistencias").get_json()]

    assert dates == ["2026-03-01", "2026-02-10", "2026-01-15", "2025-12-24"]


def test_attendance_get_unknown_is_not_found(client):
    assert client.get("/asistencias/NOPE").status_code == 404


def test_schedule_unknown_teacher_is_bad_request(client):
    res = client.post(
        "/horarios", json={"id": "H1", "id_profesor": "GHOST", "hora_entrada": "08:00", "hora_salida": "12:00"}
    )

    assert res.status_code == 400


def test_schedules_for_teacher_ordered_by_entry_time(client, ana):
    client.post("/profesores", json={"id": "P2", "nombre": "Luis"})
    client.post("/horarios", json={"id": "H1", "id_profesor": ana, "hora_entrada": "14:00", "hora_salida": "18:00"})
    client.post("/horarios", json={"id": "H2", "id_profesor": ana, "hora_entrada": "08:00", "hora_salida": "12:00"})
    client.post("/horarios", json={"id": "H3", "id_profesor": "P2", "hora_entrada": "07:00", "hora_salida": "09:00"})

    rows = client.get(f"/horarios/profesor/{ana}").get_json()

    assert [r["id"] for r in rows] == ["H2", "H1"]
    assert rows[0]["hora_entrada"] == "08:00:00"
    assert [r["id"] for r in client.get("/horarios").get_json()] == ["H3", "H2", "H1"]


def test_schedules_for_teacher_without_rows_is_empty_list(client):
    res = client.get("/horarios/profesor/P9")

    assert res.status_code == 200
    assert res.get_json() == []


def test_schedule_get_by_id(client, ana, fixed_today):
    client.post(
        "/horarios",
        json={"id": "H1", "id_profesor": ana, "hora_entrada": "08:00:00", "hora_salida": "12:30:00", "estado": "activo"},
    )

    got = client.get("/horarios/H1").get_json()

    assert got == {
        "id": "H1",
        "id_profesor": ana,
        "hora_entrada": "08:00:00",
        "hora_salida": "12:30:00",
        "estado": "activo",
        "fecha_registro": fixed_today.isoformat(),
        "fecha_modificacion": fixed_today.isoformat(),
    }
    assert client.get("/horarios/NOPE").status_code == 404


def test_holidays_ordered_by_date_and_dates_set_server_side(client, fixed_today):
    client.post("/feriados", json={"id": "F2", "fecha": "2026-12-25", "descripcion": "Navidad"})
    client.post(
        "/feriados",
        json={"id": "F1", "fecha": "2026-05-01", "descripcion": "Día del Trabajo", "fecha_registro": "2000-01-01"},
    )

    rows = client.get("/feriados").get_json()

    assert [r["id"] for r in rows] == ["F1", "F2"]
    assert rows[0]["descripcion"] == "Día del Trabajo"
    assert rows[0]["fecha_registro"] == fixed_today.isoformat()


def test_holiday_duplicate_and_missing_fields(client):
    assert client.post("/feriados", json={"id": "F1", "fecha": "2026-05-01", "descripcion": "x"}).status_code == 201
    assert client.post("/feriados", json={"id": "F1", "fecha": "2026-05-02", "descripcion": "y"}).status_code == 409

    res = client.post("/feriados", json={"id": "F2"})
    assert res.status_code == 400
    assert res.get_json()["fields"] == ["fecha", "descripcion"]
    assert client.get("/feriados/F2").status_code == 404


def test_attendance_lateness_flag_is_stored_as_number(client, ana):
    client.post(
        "/asistencias", json={"id": "A1", "id_profesor": ana, "fecha": "2026-03-01", "horas": 4, "tardanza": True}
    )

    assert client.get("/asistencias/A1").get_json()["tardanza"] == 1
