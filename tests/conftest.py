import os

# Settings are read at import time
os.environ["ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-with-more-than-32-characters"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_PREFIX"] = ""

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.constants import UserRole
from app.core.db import db_manager, get_engine
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models import Admin, Base, Employee


@pytest.fixture
def engine():
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(engine):
    session = db_manager.SessionLocal()
    yield session
    session.rollback()
    session.close()


def make_employee(db, phone_number="01711000001", nid_no="1234567890", fullname="Mahmud Hasan"):
    employee = Employee(
        branch=1,
        employment_type=1,
        designation=3,
        fullname=fullname,
        nid_no=nid_no,
        gender="male",
        phone_number=phone_number,
        join_date=datetime(2023, 1, 1),
        salary=Decimal("20000"),
        bonus=Decimal("0"),
        current_location="Mirpur, Dhaka",
        permanent_location="Sylhet",
        disable=False,
    )
    db.add(employee)
    db.commit()
    return employee


def make_admin(db, employee, role=UserRole.SUPER_ADMIN):
    admin = Admin(
        employee_id=employee.id,
        password=hash_password("Secret#123"),
        role=int(role),
        access_boys_section=True,
        access_girls_section=True,
        disable=False,
    )
    db.add(admin)
    db.commit()
    return admin


@pytest.fixture
def super_admin(db):
    return make_admin(db, make_employee(db))


@pytest.fixture
def client(super_admin):
    """Client authenticated as the seeded super admin"""
    token = create_access_token(super_admin.id)
    with_auth = TestClient(app)
    with_auth.headers.update({"Authorization": f"Bearer {token}"})
    return with_auth


@pytest.fixture
def anonymous_client(engine):
    return TestClient(app)


@pytest.fixture
def student_body():
    return {
        "branch": 2,
        "full_name": "Abdullah Rahman",
        "blood_group": "A+",
        "birth_certificate_no": "20150123456789",
        "gender": "male",
        "registration_date": "2024-03-10",
        "section": 1,
        "group": 0,
        "class": 3,
        "roll": 12,
        "class_fee": 1500,
        "current_location": "Mirpur, Dhaka",
        "permanent_location": "Comilla",
        "day_care": False,
        "residential": True,
        "residential_category": "full",
        "residential_fee": 3000,
        "waiver_amount": 0,
        "guardian_name": "Karim Rahman",
        "guardian_relation": "father",
        "phone_number": "01711223344",
        "guardian_current_location": "Mirpur, Dhaka",
        "guardian_permanent_location": "Comilla",
    }


@pytest.fixture
def employee_factory(db):
    def factory(**kwargs):
        return make_employee(db, **kwargs)
    return factory


@pytest.fixture
def admin_client_factory(db):
    """Builds a client authenticated as a new admin of the given role"""
    def factory(employee, role=UserRole.ADMIN):
        admin = make_admin(db, employee, role=role)
        test_client = TestClient(app)
        test_client.headers.update({"Authorization": f"Bearer {create_access_token(admin.id)}"})
        return test_client
    return factory
