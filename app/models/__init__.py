# app/models/__init__.py - Import all models so SQLAlchemy can discover them

from app.models.base import Base

from app.models.employee import Employee
from app.models.admin import Admin
from app.models.ledger import Income, Donation, Expense
from app.models.student import Student, StudentEnrollment, StudentGuardian

__all__ = [
    "Base",
    "Employee",
    "Admin",
    "Income",
    "Donation",
    "Expense",
    "Student",
    "StudentEnrollment",
    "StudentGuardian",
]
