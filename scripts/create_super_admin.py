#!/usr/bin/env python3
# scripts/create_super_admin.py - Bootstrap the first super admin account
import argparse
import sys
import os
from datetime import datetime

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from app.core.constants import Branch, Designation, EmployeeType, UserRole
from app.core.db import db_manager
from app.core.security import create_access_token, generate_strong_password, hash_password
from app.models import Admin, Employee


def create_super_admin(fullname: str, phone_number: str, nid_no: str, gender: str, location: str) -> bool:
    """Create an employee and a super admin on top of it, printing the generated password"""
    password = generate_strong_password()

    with db_manager.transaction() as db:
        existing = db.execute(
            select(Employee).where(Employee.phone_number == phone_number)
        ).scalar_one_or_none()
        if existing:
            print(f"❌ An employee with phone number {phone_number} already exists")
            return False

        employee = Employee(
            branch=int(Branch.ALL),
            employment_type=int(EmployeeType.ADMINISTRATION),
            designation=int(Designation.OFFICE_ADMINISTRATOR),
            fullname=fullname,
            nid_no=nid_no,
            gender=gender,
            phone_number=phone_number,
            join_date=datetime.now(),
            salary=0,
            bonus=0,
            current_location=location,
            permanent_location=location,
            disable=False,
        )
        db.add(employee)
        db.flush()

        admin = Admin(
            employee_id=employee.id,
            password=hash_password(password),
            role=int(UserRole.SUPER_ADMIN),
            access_boys_section=True,
            access_girls_section=True,
            disable=False,
        )
        db.add(admin)
        db.flush()
        admin_id = admin.id

    print("✅ Super admin created")
    print(f"   Admin ID: {admin_id}")
    print(f"   Phone:    {phone_number}")
    print(f"   Password: {password}")
    print(f"   Token:    {create_access_token(admin_id)}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Create the first super admin")
    parser.add_argument("--name", required=True, help="Full name of the employee")
    parser.add_argument("--phone", required=True, help="11 digit phone number starting with 01")
    parser.add_argument("--nid", required=True, help="10 digit national id")
    parser.add_argument("--gender", default="male")
    parser.add_argument("--location", default="Head office")
    args = parser.parse_args()

    ok = create_super_admin(args.name, args.phone, args.nid, args.gender, args.location)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
