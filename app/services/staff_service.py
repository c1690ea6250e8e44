# app/services/staff_service.py - Employees and the admins created from them
from decimal import Decimal
from typing import Any, Dict
from uuid import UUID
import logging

from sqlalchemy import select, func, true
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.core.constants import EMPLOYEE_LIST_DEFAULT_LIMIT
from app.core.errors import NotFoundError, ConflictError, ValidationError
from app.core.security import hash_password, generate_strong_password
from app.models.admin import Admin
from app.models.employee import Employee
from app.schemas.staff import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeListItem,
    EmployeeDetails,
    AdminCreate,
    AdminUpdate,
    AdminCreated,
    AdminListItem,
)
from app.utils.dates import parse_date_string
from app.utils.pagination import normalize_page, build_page

logger = logging.getLogger(__name__)

DATE_FIELDS = ("join_date", "resign_date")
MONEY_FIELDS = ("salary", "bonus")


def _visible(column):
    """Excludes the maintenance account from listings"""
    if settings.HIDDEN_ADMIN_PHONE:
        return column != settings.HIDDEN_ADMIN_PHONE
    return true()


class EmployeeService:
    def __init__(self, db: Session):
        self.db = db

    def _phone_taken(self, phone_number: str, exclude_id: UUID = None) -> bool:
        stmt = select(Employee.id).where(Employee.phone_number == phone_number)
        if exclude_id is not None:
            stmt = stmt.where(Employee.id != exclude_id)
        return self.db.execute(stmt).first() is not None

    def _apply(self, employee: Employee, data: Dict[str, Any]) -> None:
        for field, value in data.items():
            if field in DATE_FIELDS and value is not None:
                try:
                    value = parse_date_string(value)
                except ValueError:
                    raise ValidationError(f"Invalid {field}")
            elif field in MONEY_FIELDS and value is not None:
                value = Decimal(str(value))
            setattr(employee, field, value)

    def _get_row(self, employee_id: UUID) -> Employee:
        employee = self.db.get(Employee, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, payload: EmployeeCreate) -> UUID:
        if self._phone_taken(payload.phone_number):
            raise ConflictError("An employee with this phone number already exists")

        employee = Employee(disable=False)
        self._apply(employee, payload.model_dump())
        self.db.add(employee)
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating employee: {e}")
            raise

        logger.info(f"Employee created: {employee.id} ({employee.fullname})")
        return employee.id

    def list(self, page: int = None, limit: int = None) -> Dict[str, Any]:
        page, limit = normalize_page(page, limit, default_limit=EMPLOYEE_LIST_DEFAULT_LIMIT)
        filters = [Employee.disable.is_(False), _visible(Employee.phone_number)]

        total = self.db.execute(select(func.count(Employee.id)).where(*filters)).scalar_one()
        employees = self.db.execute(
            select(Employee)
            .where(*filters)
            .order_by(Employee.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        ).scalars().all()

        docs = [EmployeeListItem.model_validate(e).model_dump(mode="json") for e in employees]
        return build_page(docs, total, page, limit)

    def get(self, employee_id: UUID) -> Dict[str, Any]:
        return EmployeeDetails.model_validate(self._get_row(employee_id)).model_dump(mode="json")

    def update(self, employee_id: UUID, payload: EmployeeUpdate) -> None:
        employee = self._get_row(employee_id)
        data = payload.model_dump(exclude_unset=True)

        if data.get("phone_number") and self._phone_taken(data["phone_number"], exclude_id=employee_id):
            raise ConflictError("An employee with this phone number already exists")

        self._apply(employee, data)
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating employee {employee_id}: {e}")
            raise

        logger.info(f"Employee updated: {employee_id}")

    def disable(self, employee_id: UUID) -> None:
        employee = self._get_row(employee_id)
        employee.disable = True
        self.db.commit()
        logger.info(f"Employee disabled: {employee_id}")


class AdminService:
    def __init__(self, db: Session):
        self.db = db

    def _get_row(self, admin_id: UUID) -> Admin:
        admin = self.db.execute(
            select(Admin).options(joinedload(Admin.employee)).where(Admin.id == admin_id)
        ).scalar_one_or_none()
        if admin is None:
            raise NotFoundError("Admin not found")
        return admin

    def create(self, payload: AdminCreate) -> Dict[str, Any]:
        """
        Grant dashboard access to an employee.

        Returns the generated plain-text password; it is not retrievable later.

        Raises:
            NotFoundError: if the employee does not exist
            ConflictError: if the employee already is an admin
        """
        employee = self.db.get(Employee, payload.employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")

        existing = self.db.execute(
            select(Admin.id).where(Admin.employee_id == payload.employee_id)
        ).first()
        if existing:
            raise ConflictError("This employee is already an admin")

        password = generate_strong_password()
        admin = Admin(
            employee_id=employee.id,
            password=hash_password(password),
            role=payload.role,
            access_boys_section=payload.access_boys_section,
            access_girls_section=payload.access_girls_section,
            disable=False,
        )
        self.db.add(admin)
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating admin for employee {employee.id}: {e}")
            raise

        logger.info(f"Admin created: {admin.id} for employee {employee.fullname}")
        return AdminCreated(
            fullname=employee.fullname,
            phone_number=employee.phone_number,
            role=admin.role,
            created_at=admin.created_at,
            password=password,
        ).model_dump(mode="json")

    def list(self, page: int = None, limit: int = None) -> Dict[str, Any]:
        page, limit = normalize_page(page, limit)
        filters = [_visible(Employee.phone_number)]

        total = self.db.execute(
            select(func.count(Admin.id)).select_from(Admin).join(Admin.employee).where(*filters)
        ).scalar_one()
        admins = self.db.execute(
            select(Admin)
            .join(Admin.employee)
            .options(joinedload(Admin.employee))
            .where(*filters)
            .order_by(Admin.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        ).scalars().all()

        docs = [
            AdminListItem(
                id=admin.id,
                fullname=admin.employee.fullname,
                phone_number=admin.employee.phone_number,
                role=admin.role,
                access_boys_section=admin.access_boys_section,
                access_girls_section=admin.access_girls_section,
                disable=admin.disable,
                created_at=admin.created_at,
            ).model_dump(mode="json")
            for admin in admins
        ]
        return build_page(docs, total, page, limit)

    def update(self, admin_id: UUID, payload: AdminUpdate) -> None:
        admin = self._get_row(admin_id)
        admin.access_boys_section = payload.access_boys_section
        admin.access_girls_section = payload.access_girls_section
        self.db.commit()
        logger.info(f"Admin access updated: {admin_id}")

    def disable(self, admin_id: UUID, acting_admin_id: UUID) -> None:
        if admin_id == acting_admin_id:
            raise ValidationError("You cannot disable your own account")
        admin = self._get_row(admin_id)
        admin.disable = True
        self.db.commit()
        logger.info(f"Admin disabled: {admin_id}")
