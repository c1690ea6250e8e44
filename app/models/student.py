# app/models/student.py - Student aggregate: student, enrollment and guardian rows
from __future__ import annotations
import uuid
from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, DateTime, Boolean, ForeignKey, Uuid, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    admin_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("admins.id"), nullable=False)
    branch: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    fullname: Mapped[str] = mapped_column(String(100), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(255))
    blood_group: Mapped[str] = mapped_column(String(10), nullable=False)
    gender: Mapped[str] = mapped_column(String(50), nullable=False)
    birth_certificate_no: Mapped[str] = mapped_column(String(17), nullable=False)
    registration_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    is_residential: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    residential_category: Mapped[str | None] = mapped_column(String(50))
    residential_fee: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    is_day_care: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    waiver_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    current_location: Mapped[str] = mapped_column(String(150), nullable=False)
    permanent_location: Mapped[str] = mapped_column(String(150), nullable=False)
    # Soft delete; enrollment and guardian rows are kept
    disable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    enrollments: Mapped[list["StudentEnrollment"]] = relationship(
        "StudentEnrollment",
        back_populates="student",
        order_by="StudentEnrollment.academic_year.desc()",
    )
    guardian: Mapped["StudentGuardian"] = relationship("StudentGuardian", back_populates="student", uselist=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("residential_fee >= 0", name="ck_student_residential_fee_positive"),
        CheckConstraint("waiver_amount >= 0", name="ck_student_waiver_positive"),
    )

    @property
    def current_enrollment(self) -> "StudentEnrollment | None":
        """Latest enrollment by academic year"""
        return self.enrollments[0] if self.enrollments else None


class StudentEnrollment(Base):
    """
    Class/section/roll assignment of a student for one academic year.
    The table keeps history; the student writer maintains a single current row.
    """
    __tablename__ = "student_enrollments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    student_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("students.id"), nullable=False, index=True)
    group: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    section: Mapped[int | None] = mapped_column(Integer)
    class_: Mapped[int | None] = mapped_column("class", Integer)
    roll: Mapped[int] = mapped_column(Integer, nullable=False)
    academic_year: Mapped[int] = mapped_column(Integer, nullable=False)
    fee: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    student: Mapped["Student"] = relationship("Student", back_populates="enrollments")

    __table_args__ = (
        CheckConstraint("fee >= 0", name="ck_enrollment_fee_positive"),
        Index("ix_student_enrollments_student_year", "student_id", "academic_year"),
    )


class StudentGuardian(Base):
    __tablename__ = "student_guardians"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    student_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("students.id"), unique=True, nullable=False)
    guardian_name: Mapped[str] = mapped_column(String(100), nullable=False)
    guardian_relation: Mapped[str] = mapped_column(String(50), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(11), nullable=False)
    alternative_phone_number: Mapped[str | None] = mapped_column(String(11))
    current_location: Mapped[str] = mapped_column(String(150), nullable=False)
    permanent_location: Mapped[str] = mapped_column(String(150), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    student: Mapped["Student"] = relationship("Student", back_populates="guardian")
