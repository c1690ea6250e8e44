# app/services/ledger_service.py - CRUD shared by the income, donation and expense ledgers
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
import calendar
from typing import Any, Dict, Optional, Type
from uuid import UUID
import logging

from pydantic import BaseModel
from sqlalchemy import select, func
from sqlalchemy.orm import Session, joinedload

from app.core.errors import ValidationError, NotFoundError
from app.models.admin import Admin
from app.models.ledger import Income, Donation, Expense
from app.schemas.ledger import IncomeOut, DonationOut, ExpenseOut, LedgerOut
from app.utils.dates import parse_date_string
from app.utils.pagination import build_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerConfig:
    label: str
    model: Any
    out_schema: Type[LedgerOut]
    date_field: str
    amount_field: str
    type_field: str


INCOME_LEDGER = LedgerConfig("Income", Income, IncomeOut, "income_date", "amount", "type")
DONATION_LEDGER = LedgerConfig("Donation", Donation, DonationOut, "donation_date", "donation_amount", "donation_type")
EXPENSE_LEDGER = LedgerConfig("Expense", Expense, ExpenseOut, "expense_date", "amount", "type")


def month_window(year: Optional[int], month: Optional[int], now: Optional[datetime] = None):
    """
    Date bounds for the year/month list filter.

    A month without a year refers to the current year. Returns None when
    neither is given.
    """
    if year is None and month is None:
        return None
    if month is not None and not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    if year is None:
        year = (now or datetime.now()).year

    # Inclusive end bound so year 9999 stays representable
    if month is None:
        return datetime(year, 1, 1), datetime.combine(date(year, 12, 31), time.max)
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime.combine(date(year, month, last_day), time.max)


class LedgerService:
    """Service class for one financial ledger"""

    def __init__(self, db: Session, config: LedgerConfig):
        self.db = db
        self.config = config
        self.model = config.model

    def _serialize(self, row) -> Dict[str, Any]:
        out = self.config.out_schema.model_validate(row)
        if row.admin is not None and row.admin.employee is not None:
            out.admin_name = row.admin.employee.fullname
        return out.model_dump(mode="json")

    def _get_row(self, entry_id: UUID):
        row = self.db.execute(
            select(self.model)
            .options(joinedload(self.model.admin).joinedload(Admin.employee))
            .where(self.model.id == entry_id)
        ).scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"{self.config.label} not found")
        return row

    def _apply(self, row, payload: BaseModel) -> None:
        data = payload.model_dump()
        try:
            data[self.config.date_field] = parse_date_string(data[self.config.date_field])
        except ValueError:
            raise ValidationError(f"Invalid {self.config.date_field}")
        data[self.config.amount_field] = Decimal(str(data[self.config.amount_field]))
        for field, value in data.items():
            setattr(row, field, value)

    def list(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        branch: Optional[int] = None,
        type: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Every matching entry, newest first, with the sum of their amounts"""
        date_column = getattr(self.model, self.config.date_field)
        amount_column = getattr(self.model, self.config.amount_field)

        filters = []
        window = month_window(year, month)
        if window:
            filters.extend([date_column >= window[0], date_column <= window[1]])
        if branch is not None:
            filters.append(self.model.branch == branch)
        if type is not None:
            filters.append(getattr(self.model, self.config.type_field) == type)

        rows = self.db.execute(
            select(self.model)
            .options(joinedload(self.model.admin).joinedload(Admin.employee))
            .where(*filters)
            .order_by(date_column.desc(), self.model.created_at.desc())
        ).scalars().all()

        total_amount = self.db.execute(
            select(func.coalesce(func.sum(amount_column), 0)).where(*filters)
        ).scalar_one()

        docs = [self._serialize(row) for row in rows]
        return build_page(docs, len(docs), 1, max(len(docs), 1), totalAmount=float(total_amount or 0))

    def get(self, entry_id: UUID) -> Dict[str, Any]:
        return self._serialize(self._get_row(entry_id))

    def create(self, payload: BaseModel, admin_id: UUID) -> UUID:
        row = self.model(admin_id=admin_id)
        self._apply(row, payload)
        self.db.add(row)
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating {self.config.label.lower()}: {e}")
            raise

        logger.info(f"{self.config.label} created: {row.id} by admin {admin_id}")
        return row.id

    def update(self, entry_id: UUID, payload: BaseModel) -> None:
        row = self._get_row(entry_id)
        self._apply(row, payload)
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating {self.config.label.lower()} {entry_id}: {e}")
            raise

        logger.info(f"{self.config.label} updated: {entry_id}")

    def delete(self, entry_id: UUID) -> None:
        row = self._get_row(entry_id)
        self.db.delete(row)
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error deleting {self.config.label.lower()} {entry_id}: {e}")
            raise

        logger.info(f"{self.config.label} deleted: {entry_id}")
