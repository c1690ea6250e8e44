# app/schemas/staff.py - Employee and admin payloads
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.core.constants import UserRole
from app.schemas.common import DateString

PHONE_PATTERN = r"^01\d{9}$"


class EmployeeCreate(BaseModel):
    branch: int = Field(..., ge=1)
    employment_type: int = Field(..., ge=1, le=4)
    designation: int = Field(..., ge=1, le=18)
    fullname: str = Field(..., min_length=1, max_length=100)
    profile_image: Optional[str] = Field(None, max_length=255)
    nid_no: str = Field(..., pattern=r"^\d{10}$")
    gender: str = Field(..., min_length=1, max_length=20)
    phone_number: str = Field(..., pattern=PHONE_PATTERN)
    join_date: DateString
    resign_date: Optional[DateString] = None
    salary: float = Field(..., ge=0, le=9999999999)
    bonus: float = Field(0, ge=0, le=9999999999)
    current_location: str = Field(..., min_length=1, max_length=250)
    permanent_location: str = Field(..., min_length=1, max_length=250)


class EmployeeUpdate(BaseModel):
    branch: Optional[int] = Field(None, ge=1)
    employment_type: Optional[int] = Field(None, ge=1, le=4)
    designation: Optional[int] = Field(None, ge=1, le=18)
    fullname: Optional[str] = Field(None, min_length=1, max_length=100)
    profile_image: Optional[str] = Field(None, max_length=255)
    nid_no: Optional[str] = Field(None, pattern=r"^\d{10}$")
    gender: Optional[str] = Field(None, min_length=1, max_length=20)
    phone_number: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    join_date: Optional[DateString] = None
    resign_date: Optional[DateString] = None
    salary: Optional[float] = Field(None, ge=0, le=9999999999)
    bonus: Optional[float] = Field(None, ge=0, le=9999999999)
    current_location: Optional[str] = Field(None, min_length=1, max_length=250)
    permanent_location: Optional[str] = Field(None, min_length=1, max_length=250)
    disable: Optional[bool] = None


class EmployeeListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    fullname: str
    employment_type: int
    designation: int
    branch: int
    join_date: datetime
    phone_number: str


class EmployeeDetails(EmployeeListItem):
    profile_image: Optional[str] = None
    nid_no: str
    gender: str
    resign_date: Optional[datetime] = None
    salary: float
    bonus: float
    current_location: str
    permanent_location: str
    disable: bool
    created_at: datetime
    updated_at: datetime


class AdminCreate(BaseModel):
    employee_id: UUID
    role: int = Field(int(UserRole.ADMIN), ge=1, le=3)
    access_boys_section: bool
    access_girls_section: bool


class AdminUpdate(BaseModel):
    access_boys_section: bool
    access_girls_section: bool


class AdminCreated(BaseModel):
    fullname: str
    phone_number: str
    role: int
    created_at: datetime
    password: str


class AdminListItem(BaseModel):
    id: UUID
    fullname: str
    phone_number: str
    role: int
    access_boys_section: bool
    access_girls_section: bool
    disable: bool
    created_at: datetime
