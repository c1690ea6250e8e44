# app/services/student_service.py - Student + enrollment + guardian writes as one unit
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID
import logging

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.orm.exc import StaleDataError

from app.core.constants import STUDENT_LIST_DEFAULT_LIMIT
from app.core.errors import ValidationError, NotFoundError, ConflictError
from app.models.student import Student, StudentEnrollment, StudentGuardian
from app.schemas.student import StudentPayload, StudentDetails, StudentListItem, EnrollmentOut, GuardianOut, GuardianSummary
from app.utils.dates import parse_date_string
from app.utils.pagination import normalize_page, build_page

logger = logging.getLogger(__name__)


def parse_registration_date(value: Any) -> datetime:
    try:
        return parse_date_string(value)
    except ValueError:
        raise ValidationError("Invalid registration date")


def _money(value) -> Decimal:
    return Decimal(str(value or 0))


class StudentRepository:
    """
    Persistence for the student aggregate.

    Enrollment and guardian rows are only ever written through this class,
    keyed by ``student_id``. Nothing here commits; the caller owns the
    transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, student_id: UUID, include_disabled: bool = True) -> Optional[Student]:
        stmt = (
            select(Student)
            .options(selectinload(Student.enrollments), selectinload(Student.guardian))
            .where(Student.id == student_id)
        )
        if not include_disabled:
            stmt = stmt.where(Student.disable.is_(False))
        return self.db.execute(stmt).scalar_one_or_none()

    def add_student(self, admin_id: UUID, payload: StudentPayload, registration_date: datetime) -> Student:
        student = Student(admin_id=admin_id, disable=False)
        self.apply_student_fields(student, payload, registration_date)
        self.db.add(student)
        self.db.flush()
        return student

    def apply_student_fields(self, student: Student, payload: StudentPayload, registration_date: datetime) -> None:
        student.branch = payload.branch
        student.profile_image = payload.profile_image
        student.fullname = payload.full_name
        student.blood_group = payload.blood_group
        student.gender = payload.gender
        student.birth_certificate_no = payload.birth_certificate_no
        student.registration_date = registration_date
        student.is_residential = payload.residential
        student.residential_category = payload.residential_category
        student.residential_fee = _money(payload.residential_fee)
        student.is_day_care = payload.day_care
        student.waiver_amount = _money(payload.waiver_amount)
        student.current_location = payload.current_location
        student.permanent_location = payload.permanent_location
        if isinstance(payload.disable, bool):
            student.disable = payload.disable

    def upsert_enrollment(self, student_id: UUID, payload: StudentPayload, academic_year: int) -> StudentEnrollment:
        """Replace the current enrollment of the student, creating it if missing"""
        enrollment = self.db.execute(
            select(StudentEnrollment)
            .where(StudentEnrollment.student_id == student_id)
            .order_by(StudentEnrollment.academic_year.desc())
        ).scalars().first()

        if enrollment is None:
            enrollment = StudentEnrollment(student_id=student_id)
            self.db.add(enrollment)

        enrollment.group = payload.group
        enrollment.section = payload.section
        enrollment.class_ = payload.class_
        enrollment.roll = payload.roll
        enrollment.academic_year = academic_year
        enrollment.fee = _money(payload.class_fee)
        self.db.flush()
        return enrollment

    def upsert_guardian(self, student_id: UUID, payload: StudentPayload) -> StudentGuardian:
        guardian = self.db.execute(
            select(StudentGuardian).where(StudentGuardian.student_id == student_id)
        ).scalar_one_or_none()

        if guardian is None:
            guardian = StudentGuardian(student_id=student_id)
            self.db.add(guardian)

        guardian.guardian_name = payload.guardian_name
        guardian.guardian_relation = payload.guardian_relation
        guardian.phone_number = payload.phone_number
        guardian.alternative_phone_number = payload.alternative_phone_number
        guardian.current_location = payload.guardian_current_location
        guardian.permanent_location = payload.guardian_permanent_location
        self.db.flush()
        return guardian


class StudentService:
    """Service class for student enrollment operations"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = StudentRepository(db)

    def create_student(self, payload: StudentPayload, admin_id: UUID) -> UUID:
        """
        Create a student together with its enrollment and guardian.

        Either all three rows are stored or none is.

        Raises:
            ValidationError: if the registration date does not parse
        """
        registration_date = parse_registration_date(payload.registration_date)

        try:
            student = self.repository.add_student(admin_id, payload, registration_date)
            self.repository.upsert_enrollment(student.id, payload, registration_date.year)
            self.repository.upsert_guardian(student.id, payload)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating student: {e}")
            raise

        logger.info(f"Student created: {student.id} ({student.fullname}) by admin {admin_id}")
        return student.id

    def update_student(self, student_id: UUID, payload: StudentPayload, expected_version: Optional[int] = None) -> Student:
        """
        Overwrite a student and upsert its enrollment and guardian in one transaction.

        Raises:
            ValidationError: if the registration date does not parse
            NotFoundError: if the student does not exist
            ConflictError: if ``expected_version`` no longer matches the stored row
        """
        registration_date = parse_registration_date(payload.registration_date)

        try:
            student = self.repository.get(student_id)
            if student is None:
                raise NotFoundError("Student not found")
            if expected_version is not None and student.version != expected_version:
                raise ConflictError("Student was modified by another request")

            self.repository.apply_student_fields(student, payload, registration_date)
            # Enrollment or guardian only changes must still bump the version
            student.updated_at = datetime.utcnow()
            flag_modified(student, "updated_at")
            self.db.flush()
            self.repository.upsert_enrollment(student.id, payload, registration_date.year)
            self.repository.upsert_guardian(student.id, payload)
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            logger.warning(f"Concurrent update detected on student {student_id}")
            raise ConflictError("Student was modified by another request")
        except Exception as e:
            self.db.rollback()
            if not isinstance(e, (NotFoundError, ConflictError)):
                logger.error(f"Error updating student {student_id}: {e}")
            raise

        logger.info(f"Student updated: {student_id} (version {student.version})")
        return student

    def get_student(self, student_id: UUID) -> Dict[str, Any]:
        student = self.repository.get(student_id, include_disabled=False)
        if student is None:
            raise NotFoundError("Student not found")

        details = StudentDetails.model_validate(student)
        if student.current_enrollment is not None:
            details.enrollment = EnrollmentOut.model_validate(student.current_enrollment)
        if student.guardian is not None:
            details.guardian = GuardianOut.model_validate(student.guardian)
        return details.model_dump(mode="json", by_alias=True)

    def list_students(self, page: int = None, limit: int = None) -> Dict[str, Any]:
        page, limit = normalize_page(page, limit, default_limit=STUDENT_LIST_DEFAULT_LIMIT)

        total = self.db.execute(
            select(func.count(Student.id)).where(Student.disable.is_(False))
        ).scalar_one()

        students = self.db.execute(
            select(Student)
            .options(selectinload(Student.enrollments), selectinload(Student.guardian))
            .where(Student.disable.is_(False))
            .order_by(Student.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        ).scalars().all()

        docs = []
        for student in students:
            enrollment = student.current_enrollment
            item = StudentListItem(
                id=student.id,
                fullname=student.fullname,
                profile_image=student.profile_image,
                branch=student.branch,
                is_residential=student.is_residential,
                section=enrollment.section if enrollment else None,
                class_=enrollment.class_ if enrollment else None,
                enrollment_years=[e.academic_year for e in student.enrollments],
                guardian=GuardianSummary(
                    name=student.guardian.guardian_name if student.guardian else None,
                    phone=student.guardian.phone_number if student.guardian else None,
                ),
                disable=student.disable,
            )
            docs.append(item.model_dump(mode="json", by_alias=True))

        return build_page(docs, total, page, limit)

    def disable_student(self, student_id: UUID) -> None:
        """Soft delete; enrollment and guardian history is kept"""
        student = self.repository.get(student_id, include_disabled=False)
        if student is None:
            raise NotFoundError("Student not found")

        student.disable = True
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error disabling student {student_id}: {e}")
            raise

        logger.info(f"Student disabled: {student_id}")
