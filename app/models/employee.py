# app/models/employee.py
from __future__ import annotations
import uuid
from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, DateTime, Boolean, Uuid, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    branch: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    employment_type: Mapped[int] = mapped_column(Integer, nullable=False)
    designation: Mapped[int] = mapped_column(Integer, nullable=False)
    fullname: Mapped[str] = mapped_column(String(100), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(255))
    nid_no: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    join_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    resign_date: Mapped[datetime | None] = mapped_column(DateTime)
    salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    bonus: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    current_location: Mapped[str] = mapped_column(String(250), nullable=False)
    permanent_location: Mapped[str] = mapped_column(String(250), nullable=False)
    disable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    admin: Mapped["Admin"] = relationship("Admin", back_populates="employee", uselist=False)

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_employee_salary_positive"),
        CheckConstraint("bonus >= 0", name="ck_employee_bonus_positive"),
    )
