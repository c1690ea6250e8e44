from uuid import uuid4

from app.core.config import settings
from app.core.constants import UserRole
from app.core.security import verify_password
from app.models import Admin


def employee_body(**overrides):
    body = {
        "branch": 2,
        "employment_type": 2,
        "designation": 7,
        "fullname": "Yusuf Ali",
        "nid_no": "9876543210",
        "gender": "male",
        "phone_number": "01811000002",
        "join_date": "2024-01-15",
        "salary": 18000,
        "current_location": "Uttara, Dhaka",
        "permanent_location": "Bogura",
    }
    body.update(overrides)
    return body


def test_create_and_get_employee(client):
    response = client.post("/employees/create-employee", json=employee_body())
    assert response.status_code == 201
    employee_id = response.json()["data"]["id"]

    details = client.get(f"/employees/{employee_id}").json()["data"]
    assert details["fullname"] == "Yusuf Ali"
    assert details["salary"] == 18000.0
    assert details["bonus"] == 0.0


def test_duplicate_employee_phone_conflicts(client):
    client.post("/employees/create-employee", json=employee_body())

    response = client.post("/employees/create-employee", json=employee_body(nid_no="1111111111"))

    assert response.status_code == 409
    assert response.json()["success"] is False


def test_update_and_disable_employee(client):
    employee_id = client.post("/employees/create-employee", json=employee_body()).json()["data"]["id"]

    assert client.put(f"/employees/{employee_id}", json={"salary": 20000}).status_code == 200
    assert client.get(f"/employees/{employee_id}").json()["data"]["salary"] == 20000.0

    clash = client.put(f"/employees/{employee_id}", json={"phone_number": "01711000001"})
    assert clash.status_code == 409

    assert client.delete(f"/employees/{employee_id}").status_code == 200
    names = [e["fullname"] for e in client.get("/employees").json()["data"]["docs"]]
    assert "Yusuf Ali" not in names


def test_employee_list_hides_maintenance_phone(client, monkeypatch):
    client.post("/employees/create-employee", json=employee_body())
    monkeypatch.setattr(settings, "HIDDEN_ADMIN_PHONE", "01711000001")

    data = client.get("/employees").json()["data"]

    assert data["total"] == 1
    assert data["docs"][0]["phone_number"] == "01811000002"


def test_create_admin_returns_password_once(client, db):
    employee_id = client.post("/employees/create-employee", json=employee_body()).json()["data"]["id"]

    response = client.post(
        "/admins/create-admin",
        json={"employee_id": employee_id, "access_boys_section": True, "access_girls_section": False},
    )

    assert response.status_code == 201
    created = response.json()["data"]
    assert created["fullname"] == "Yusuf Ali"
    assert created["role"] == int(UserRole.ADMIN)
    password = created["password"]
    assert len(password) == 12
    assert any(c in "!@#$%^&*" for c in password)

    admin = db.query(Admin).filter(Admin.role == int(UserRole.ADMIN)).one()
    assert admin.password != password
    assert verify_password(password, admin.password)

    admins = client.get("/admins").json()["data"]["docs"]
    assert all("password" not in a for a in admins)


def test_create_admin_twice_conflicts(client):
    employee_id = client.post("/employees/create-employee", json=employee_body()).json()["data"]["id"]
    body = {"employee_id": employee_id, "access_boys_section": True, "access_girls_section": True}

    assert client.post("/admins/create-admin", json=body).status_code == 201
    assert client.post("/admins/create-admin", json=body).status_code == 409


def test_create_admin_for_missing_employee(client):
    response = client.post(
        "/admins/create-admin",
        json={"employee_id": str(uuid4()), "access_boys_section": True, "access_girls_section": True},
    )
    assert response.status_code == 404


def test_plain_admin_cannot_manage_admins(employee_factory, admin_client_factory):
    employee = employee_factory(phone_number="01911000003", nid_no="5555555555", fullname="Plain Admin")
    plain = admin_client_factory(employee, role=UserRole.ADMIN)

    assert plain.get("/admins").status_code == 403
    assert plain.get("/employees").status_code == 200


def test_disabled_admin_token_rejected(client, db, super_admin):
    super_admin.disable = True
    db.commit()

    response = client.get("/students")

    assert response.status_code == 401
    assert response.json()["message"] == "Account deactivated"


def test_health(anonymous_client):
    response = anonymous_client.get("/system/health")

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["status"] == "healthy"
    assert body["data"]["database"]["status"] == "connected"


def test_employee_list_defaults_to_fifteen_per_page(client, employee_factory):
    # The seeded super admin is the first employee
    for n in range(19):
        employee_factory(phone_number=f"0190000{n:04d}", nid_no=f"99000{n:05d}", fullname=f"Staff {n}")

    data = client.get("/employees").json()["data"]

    assert data["total"] == 20
    assert data["limit"] == 15
    assert len(data["docs"]) == 15
    assert data["hasNext"] is True
    assert len(client.get("/employees", params={"page": 2}).json()["data"]["docs"]) == 5
