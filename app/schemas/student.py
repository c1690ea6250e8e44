# app/schemas/student.py
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from app.utils.dates import parse_date_string

PHONE_PATTERN = r"^01\d{9}$"


class StudentPayload(BaseModel):
    """Flat create/update body: student, enrollment and guardian fields together"""

    model_config = ConfigDict(populate_by_name=True)

    branch: int = Field(..., gt=0)
    profile_image: Optional[str] = Field(None, min_length=1, max_length=255)
    full_name: str = Field(..., min_length=1, max_length=100)
    blood_group: str = Field(..., min_length=1, max_length=10)
    birth_certificate_no: str = Field(..., pattern=r"^[0-9]{10,17}$")
    gender: str = Field(..., min_length=1, max_length=20)
    registration_date: str

    # Enrollment
    section: Optional[int] = Field(None, ge=0)
    group: int = Field(0, ge=0)
    class_: Optional[int] = Field(None, ge=0, alias="class")
    roll: int = Field(..., ge=1)
    class_fee: float = Field(0, ge=0)

    current_location: str = Field(..., min_length=1, max_length=150)
    permanent_location: str = Field(..., min_length=1, max_length=150)
    day_care: bool
    residential: bool
    residential_category: Optional[str] = Field(None, max_length=50)
    residential_fee: float = Field(0, ge=0)
    waiver_amount: float = Field(0, ge=0)

    # Guardian
    guardian_name: str = Field(..., min_length=1, max_length=100)
    guardian_relation: str = Field(..., min_length=1, max_length=50)
    phone_number: str = Field(..., pattern=PHONE_PATTERN)
    alternative_phone_number: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    guardian_current_location: str = Field(..., min_length=1, max_length=150)
    guardian_permanent_location: str = Field(..., min_length=1, max_length=150)

    total: Optional[float] = Field(None, ge=0)
    disable: Optional[bool] = None

    @field_validator("registration_date")
    @classmethod
    def validate_registration_date(cls, v):
        try:
            parse_date_string(v)
        except ValueError:
            raise ValueError("Invalid registration date")
        return v.strip()

    @field_validator("full_name", "guardian_name")
    @classmethod
    def validate_names(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def normalize_residential(self):
        if self.residential and not self.residential_category:
            raise ValueError("Residential category is required when residential is selected")
        if not self.residential:
            self.residential_category = None
            self.residential_fee = 0
        return self


class EnrollmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    group: int
    section: Optional[int] = None
    class_: Optional[int] = Field(None, alias="class")
    roll: int
    academic_year: int
    fee: float


class GuardianOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    guardian_name: str
    guardian_relation: str
    phone_number: str
    alternative_phone_number: Optional[str] = None
    current_location: str
    permanent_location: str


class GuardianSummary(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None


class StudentListItem(BaseModel):
    id: UUID
    fullname: str
    profile_image: Optional[str] = None
    branch: int
    is_residential: bool
    section: Optional[int] = None
    class_: Optional[int] = Field(None, alias="class")
    enrollment_years: List[int]
    guardian: GuardianSummary
    disable: bool

    model_config = ConfigDict(populate_by_name=True)


class StudentDetails(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    branch: int
    fullname: str
    profile_image: Optional[str] = None
    blood_group: str
    gender: str
    birth_certificate_no: str
    registration_date: datetime
    is_residential: bool
    residential_category: Optional[str] = None
    residential_fee: float
    is_day_care: bool
    waiver_amount: float
    current_location: str
    permanent_location: str
    disable: bool
    version: int
    enrollment: Optional[EnrollmentOut] = None
    guardian: Optional[GuardianOut] = None
    created_at: datetime
    updated_at: datetime
