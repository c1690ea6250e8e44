# app/schemas/ledger.py - Income, donation and expense payloads
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.schemas.common import DateString


class IncomeCreate(BaseModel):
    branch: int = Field(..., ge=1)
    type: int = Field(..., ge=1, le=5)
    amount: float = Field(..., ge=0)
    income_date: DateString
    notes: Optional[str] = Field(None, max_length=255)


class DonationCreate(BaseModel):
    branch: int = Field(..., ge=1)
    donation_type: int = Field(..., ge=1, le=4)
    fullname: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=15)
    donation_amount: float = Field(..., ge=0)
    donation_date: DateString
    notes: Optional[str] = Field(None, max_length=255)


class ExpenseCreate(BaseModel):
    branch: int = Field(..., ge=1)
    type: int = Field(..., ge=1, le=10)
    amount: float = Field(..., ge=0)
    expense_date: DateString
    notes: Optional[str] = Field(None, max_length=255)


class LedgerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    branch: int
    notes: Optional[str] = None
    admin_id: UUID
    admin_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class IncomeOut(LedgerOut):
    type: int
    amount: float
    income_date: datetime


class DonationOut(LedgerOut):
    donation_type: int
    fullname: str
    phone_number: str
    donation_amount: float
    donation_date: datetime


class ExpenseOut(LedgerOut):
    type: int
    amount: float
    expense_date: datetime
