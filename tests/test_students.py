from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.core.errors import ValidationError
from app.models import Student, StudentEnrollment, StudentGuardian
from app.schemas.student import StudentPayload
from app.services.student_service import StudentRepository, StudentService, parse_registration_date


def count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def create(client, body):
    response = client.post("/students/create-student", json=body)
    assert response.status_code == 201, response.json()
    return client.get("/students").json()["data"]["docs"][0]["id"]


def test_create_student_writes_all_three_records(client, db, student_body):
    response = client.post("/students/create-student", json=student_body)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Student created successfully"
    assert "data" not in body

    assert count(db, Student) == 1
    assert count(db, StudentEnrollment) == 1
    assert count(db, StudentGuardian) == 1

    enrollment = db.execute(select(StudentEnrollment)).scalar_one()
    assert enrollment.academic_year == 2024
    assert float(enrollment.fee) == 1500.0
    assert enrollment.class_ == 3


def test_create_student_rolls_back_when_guardian_fails(client, db, student_body, monkeypatch):
    def fail(self, student_id, payload):
        raise IntegrityError("INSERT INTO student_guardians", {}, Exception("guardian insert failed"))

    monkeypatch.setattr(StudentRepository, "upsert_guardian", fail)

    response = client.post("/students/create-student", json=student_body)

    assert response.status_code == 409
    assert response.json()["success"] is False
    assert count(db, Student) == 0
    assert count(db, StudentEnrollment) == 0
    assert count(db, StudentGuardian) == 0


def test_service_rollback_reraises_original_error(db, super_admin, student_body, monkeypatch):
    def fail(self, student_id, payload):
        raise RuntimeError("disk full")

    monkeypatch.setattr(StudentRepository, "upsert_guardian", fail)
    payload = StudentPayload.model_validate(student_body)

    with pytest.raises(RuntimeError, match="disk full"):
        StudentService(db).create_student(payload, super_admin.id)

    assert count(db, Student) == 0
    assert count(db, StudentEnrollment) == 0


def test_non_residential_student_has_no_category_or_fee(client, db, student_body):
    student_body.update({"residential": False, "residential_category": "full", "residential_fee": 5000})

    client.post("/students/create-student", json=student_body)

    student = db.execute(select(Student)).scalar_one()
    assert student.is_residential is False
    assert student.residential_category is None
    assert float(student.residential_fee) == 0.0


def test_residential_category_is_required(client, db, student_body):
    student_body.update({"residential": True, "residential_category": None})

    response = client.post("/students/create-student", json=student_body)

    assert response.status_code == 400
    assert "Residential category is required" in response.json()["error"]
    assert count(db, Student) == 0


def test_invalid_registration_date_rejected(client, db, student_body):
    student_body["registration_date"] = "2024-13-45"

    response = client.post("/students/create-student", json=student_body)

    assert response.status_code == 400
    assert "Invalid registration date" in response.json()["error"]
    assert count(db, Student) == 0


def test_parse_registration_date_accepts_iso_datetimes():
    assert parse_registration_date("2024-03-10T08:30:00Z").year == 2024
    with pytest.raises(ValidationError):
        parse_registration_date("yesterday")


def test_list_and_get_student(client, student_body):
    student_id = create(client, student_body)

    listing = client.get("/students").json()["data"]
    assert listing["total"] == 1
    assert listing["page"] == 1
    assert listing["hasNext"] is False
    item = listing["docs"][0]
    assert item["fullname"] == "Abdullah Rahman"
    assert item["class"] == 3
    assert item["enrollment_years"] == [2024]
    assert item["guardian"] == {"name": "Karim Rahman", "phone": "01711223344"}

    details = client.get(f"/students/{student_id}").json()["data"]
    assert details["version"] == 1
    assert details["enrollment"]["roll"] == 12
    assert details["guardian"]["guardian_relation"] == "father"


def test_update_replaces_enrollment_and_guardian(client, db, student_body):
    student_id = create(client, student_body)

    student_body.update({
        "registration_date": "2025-01-05",
        "class": 4,
        "roll": 3,
        "guardian_name": "Amina Rahman",
        "guardian_relation": "mother",
    })
    response = client.put(f"/students/{student_id}", json=student_body)

    assert response.status_code == 200
    assert response.json()["message"] == "Student updated successfully"
    assert count(db, StudentEnrollment) == 1
    assert count(db, StudentGuardian) == 1

    details = client.get(f"/students/{student_id}").json()["data"]
    assert details["enrollment"]["class"] == 4
    assert details["enrollment"]["academic_year"] == 2025
    assert details["guardian"]["guardian_name"] == "Amina Rahman"


def test_update_with_stale_version_conflicts(client, student_body):
    student_id = create(client, student_body)

    student_body["full_name"] = "Abdullah Al Rahman"
    first = client.put(f"/students/{student_id}", json=student_body, headers={"If-Match": "1"})
    assert first.status_code == 200

    student_body["full_name"] = "Someone Else"
    second = client.put(f"/students/{student_id}", json=student_body, headers={"If-Match": '"1"'})
    assert second.status_code == 409

    details = client.get(f"/students/{student_id}").json()["data"]
    assert details["fullname"] == "Abdullah Al Rahman"
    assert details["version"] == 2


def test_enrollment_only_update_bumps_version(client, student_body):
    student_id = create(client, student_body)

    student_body["roll"] = 50
    first = client.put(f"/students/{student_id}", json=student_body, headers={"If-Match": "1"})
    assert first.status_code == 200
    assert client.get(f"/students/{student_id}").json()["data"]["version"] == 2

    student_body["roll"] = 77
    second = client.put(f"/students/{student_id}", json=student_body, headers={"If-Match": "1"})
    assert second.status_code == 409

    details = client.get(f"/students/{student_id}").json()["data"]
    assert details["enrollment"]["roll"] == 50


def test_guardian_only_update_bumps_version(client, student_body):
    student_id = create(client, student_body)

    student_body["guardian_name"] = "Amina Rahman"
    assert client.put(f"/students/{student_id}", json=student_body, headers={"If-Match": "1"}).status_code == 200

    student_body["guardian_name"] = "Someone Else"
    assert client.put(f"/students/{student_id}", json=student_body, headers={"If-Match": "1"}).status_code == 409
    assert client.put(f"/students/{student_id}", json=student_body, headers={"If-Match": "2"}).status_code == 200

    details = client.get(f"/students/{student_id}").json()["data"]
    assert details["guardian"]["guardian_name"] == "Someone Else"
    assert details["version"] == 3


def test_update_missing_student_is_404(client, student_body):
    response = client.put(f"/students/{uuid4()}", json=student_body)
    assert response.status_code == 404


def test_malformed_student_id_is_400(client):
    response = client.get("/students/not-a-uuid")
    assert response.status_code == 400


def test_disable_keeps_enrollment_and_guardian(client, db, student_body):
    student_id = create(client, student_body)

    response = client.delete(f"/students/{student_id}")

    assert response.status_code == 200
    assert client.get(f"/students/{student_id}").status_code == 404
    assert client.get("/students").json()["data"]["total"] == 0
    assert count(db, StudentEnrollment) == 1
    assert count(db, StudentGuardian) == 1


def test_update_applies_disable_only_when_boolean(client, db, student_body):
    student_id = create(client, student_body)

    client.put(f"/students/{student_id}", json=student_body)
    db.expire_all()
    assert db.execute(select(Student)).scalar_one().disable is False

    student_body["disable"] = True
    client.put(f"/students/{student_id}", json=student_body)
    db.expire_all()
    assert db.execute(select(Student)).scalar_one().disable is True


def test_student_list_without_limit_returns_up_to_max_page(client, student_body):
    for n in range(12):
        student_body["roll"] = n + 1
        assert client.post("/students/create-student", json=student_body).status_code == 201

    data = client.get("/students").json()["data"]

    assert data["total"] == 12
    assert len(data["docs"]) == 12
    assert data["limit"] == settings.PAGINATION_MAX_LIMIT
    assert client.get("/students", params={"limit": 5}).json()["data"]["pages"] == 3
