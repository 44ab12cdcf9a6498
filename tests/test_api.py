from __future__ import annotations

from datetime import timedelta

from qr_attendance.common.datetime_utils import now_utc


def _register_teacher(client, email="ada@school.edu", password="pw"):
    resp = client.post("/register", json={"email": email, "password": password})
    assert resp.status_code == 201
    return resp.get_json()["token"]


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def _open_session(client, token, subject="Math"):
    resp = client.post("/attendance/session", json={"subject": subject}, headers=_auth(token))
    assert resp.status_code == 201
    return resp.get_json()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_teacher_register_login_logout_flow(client):
    first = _register_teacher(client)

    dup = client.post("/register", json={"email": "ADA@school.edu", "password": "x"})
    assert dup.status_code == 409

    bad = client.post("/login", json={"email": "ada@school.edu", "password": "nope"})
    assert bad.status_code == 401
    assert bad.get_json()["message"] == "Invalid email or password"

    second = client.post("/login", json={"email": "ada@school.edu", "password": "pw"}).get_json()["token"]

    assert client.post("/logout", headers=_auth(first)).status_code == 200
    assert client.get("/subjects", headers=_auth(first)).status_code == 401
    assert client.get("/subjects", headers=_auth(second)).status_code == 200


def test_register_requires_email_and_password(client):
    resp = client.post("/register", json={"email": "ada@school.edu"})
    assert resp.status_code == 400


def test_non_string_credentials_are_rejected(client):
    _register_teacher(client)
    client.post("/student/register", json={"regNumber": "21CS01", "password": "pw"})

    bodies = [
        ("/login", {"email": 123, "password": "pw"}),
        ("/login", {"email": "ada@school.edu", "password": ["pw"]}),
        ("/register", {"email": {"a": 1}, "password": "pw"}),
        ("/student/login", {"regNumber": 42, "password": "pw"}),
        ("/student/login", {"regNumber": "21CS01", "password": None}),
        ("/student/register", {"regNumber": 7, "password": "pw"}),
    ]
    for path, body in bodies:
        resp = client.post(path, json=body)
        assert resp.status_code == 400, path
        assert "message" in resp.get_json()


def test_password_with_surrounding_spaces_logs_in(client):
    _register_teacher(client, password=" pw ")
    client.post("/student/register", json={"regNumber": "21CS01", "password": " pw "})

    assert client.post("/login", json={"email": "ada@school.edu", "password": " pw "}).status_code == 200
    assert client.post("/login", json={"email": "ada@school.edu", "password": "pw"}).status_code == 401
    assert client.post("/student/login", json={"regNumber": "21CS01", "password": " pw "}).status_code == 200


def test_overlong_identifiers_are_validation_errors(client):
    token = _register_teacher(client)
    long_subject = "M" * 192
    session = _open_session(client, token)

    created = client.post("/subjects", json={"name": long_subject}, headers=_auth(token))
    opened = client.post("/attendance/session", json={"subject": long_subject}, headers=_auth(token))
    marked = client.post(
        "/attendance/mark", json={"regNumber": "21CS01", "subject": long_subject, "qrId": session["qrId"]}
    )
    decremented = client.post("/attendance/decrement", json={"regNumber": "R" * 65, "subject": "Math"})
    registered = client.post("/student/register", json={"regNumber": "R" * 65, "password": "pw"})

    for resp in (created, opened, marked, decremented, registered):
        assert resp.status_code == 400
    assert opened.get_json()["message"] == "Subject must be at most 191 characters"
    assert client.get("/attendance/21CS01").get_json() == {"records": []}
    assert client.post("/subjects", json={"name": "M" * 191}, headers=_auth(token)).status_code == 201


def test_protected_routes_need_bearer(client):
    assert client.post("/logout").status_code == 401
    assert client.get("/subjects").status_code == 401
    assert client.post("/attendance/session", json={"subject": "Math"}).status_code == 401
    resp = client.get("/subjects", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid or expired token"


def test_subjects_are_scoped_to_teacher(client):
    ada = _register_teacher(client, "ada@school.edu")
    bob = _register_teacher(client, "bob@school.edu")

    created = client.post("/subjects", json={"name": "Math"}, headers=_auth(ada))
    client.post("/subjects", json={"name": "Math"}, headers=_auth(bob))
    client.post("/subjects", json={"name": "Physics"}, headers=_auth(bob))

    assert created.status_code == 201
    assert created.get_json()["subject"]["name"] == "Math"
    assert [s["name"] for s in client.get("/subjects", headers=_auth(ada)).get_json()["subjects"]] == ["Math"]
    assert [s["name"] for s in client.get("/subjects", headers=_auth(bob)).get_json()["subjects"]] == ["Math", "Physics"]
    assert client.post("/subjects", json={}, headers=_auth(ada)).status_code == 400


def test_student_register_and_login(client):
    assert client.post("/student/register", json={"regNumber": "21CS01", "password": "pw"}).status_code == 201
    assert client.post("/student/register", json={"regNumber": "21CS01", "password": "pw"}).status_code == 409
    assert client.post("/student/register", json={"regNumber": "21CS02"}).status_code == 400

    ok = client.post("/student/login", json={"regNumber": "21CS01", "password": "pw"})
    assert ok.status_code == 200
    assert ok.get_json() == {"message": "Login successful", "student": {"regNumber": "21CS01"}}
    assert "token" not in ok.get_json()
    assert client.post("/student/login", json={"regNumber": "21CS01", "password": "x"}).status_code == 401


def test_session_mark_and_history(client):
    token = _register_teacher(client)
    session = _open_session(client, token)
    assert session["qrId"].startswith("Math-")
    assert "qrImage" not in session

    body = {"regNumber": "21CS01", "subject": "Math", "qrId": session["qrId"]}
    first = client.post("/attendance/mark", json=body).get_json()
    second = client.post("/attendance/mark", json=body).get_json()

    assert first["outcome"] == "MARKED"
    assert first["record"]["status"] == "present"
    assert first["record"]["scoreChange"] == 1
    assert second == {"message": "Already marked present today", "outcome": "ALREADY_MARKED"}

    records = client.get("/attendance/21CS01").get_json()["records"]
    assert len(records) == 1
    assert records[0]["subject"] == "Math"


def test_mark_rejects_bad_input_and_bad_qr(client):
    assert client.post("/attendance/mark", json={"regNumber": "21CS01"}).status_code == 400

    resp = client.post("/attendance/mark", json={"regNumber": "21CS01", "subject": "Math", "qrId": "nope"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid QR"


def test_mark_expired_qr(client, container):
    session = container.qr_session_service.create_session("Math", now=now_utc() - timedelta(minutes=6))

    resp = client.post(
        "/attendance/mark", json={"regNumber": "21CS01", "subject": "Math", "qrId": session.qr_id}
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "QR expired"
    assert client.get("/attendance/21CS01").get_json() == {"records": []}


def test_decrement_then_scan_upgrades(client):
    body = {"regNumber": "21CS01", "subject": "Math"}
    first = client.post("/attendance/decrement", json=body).get_json()
    again = client.post("/attendance/decrement", json=body).get_json()
    assert (first["outcome"], first["record"]["scoreChange"]) == ("RECORDED", -3)
    assert again["outcome"] == "ALREADY_ABSENT"

    token = _register_teacher(client)
    session = _open_session(client, token)
    client.post("/attendance/mark", json={**body, "qrId": session["qrId"]})

    after = client.post("/attendance/decrement", json=body).get_json()
    assert after == {
        "message": "Present, no penalty",
        "outcome": "NO_PENALTY",
        "record": after["record"],
    }
    records = client.get("/attendance/21CS01").get_json()["records"]
    assert [(r["status"], r["scoreChange"]) for r in records] == [("present", 1)]


def test_sweep_cli_command(app, client):
    client.post("/student/register", json={"regNumber": "21CS01", "password": "pw"})
    token = _register_teacher(client)
    client.post("/subjects", json={"name": "Math"}, headers=_auth(token))

    result = app.test_cli_runner().invoke(args=["sweep-absences", "--date", "2026-02-01"])

    assert result.exit_code == 0
    assert "date=2026-02-01" in result.output
    assert "recorded=1" in result.output
    records = client.get("/attendance/21CS01").get_json()["records"]
    assert records == [
        {"regNumber": "21CS01", "subject": "Math", "date": "2026-02-01", "status": "absent", "scoreChange": -3}
    ]


def test_unexpected_errors_become_500(app, client, container, monkeypatch):
    def boom(reg_number):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(container.attendance_ledger, "history", boom)

    resp = client.get("/attendance/21CS01")

    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Server error"}
