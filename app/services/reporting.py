# app/services/reporting.py - Financial overview and month/day bucketed reports
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
import logging
import math
import re

from sqlalchemy import select, func, extract
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import MONTH_NAMES, DONATION_FIELDS, INCOME_FIELDS, EXPENSE_FIELDS, MAX_CODE_VALUE
from app.core.errors import ValidationError
from app.models.ledger import Income, Donation, Expense
from app.utils.dates import parse_date_string, day_start, day_end

logger = logging.getLogger(__name__)

MONTHS = list(range(1, 13))

# (bucket, category, total) as returned by the grouped queries
AggregateRow = Tuple[Any, Any, Any]


@dataclass(frozen=True)
class Ledger:
    """Column mapping of one financial ledger table"""
    name: str
    model: Any
    date_column: Any
    amount_column: Any
    category_column: Any


INCOME = Ledger("income", Income, Income.income_date, Income.amount, Income.type)
DONATION = Ledger("donation", Donation, Donation.donation_date, Donation.donation_amount, Donation.donation_type)
EXPENSE = Ledger("expense", Expense, Expense.expense_date, Expense.amount, Expense.type)


@dataclass(frozen=True)
class DateWindow:
    start: datetime
    end: datetime


def parse_branch(value: Any) -> Optional[int]:
    """
    Interpret the ``branch`` query parameter.

    Returns the branch code for a positive integer (or a string starting with
    one), and None, meaning every branch, for a missing value, ``"all"`` in any
    case, zero, negatives and non-numeric input. Codes beyond MAX_CODE_VALUE
    are clamped to it and so match no branch.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        parsed = int(value)
    else:
        text = str(value).strip()
        if text.lower() == "all":
            return None
        match = re.match(r"[+-]?[0-9]+", text)
        if not match:
            return None
        parsed = int(match.group())

    if parsed <= 0:
        return None
    return min(parsed, MAX_CODE_VALUE)


def overview_window(now: datetime, clip_to_now: Optional[bool] = None) -> DateWindow:
    """Jan 1 of the current year through ``now`` (or Dec 31 when clipping is off)"""
    if clip_to_now is None:
        clip_to_now = settings.OVERVIEW_CLIP_TO_NOW
    if clip_to_now:
        return DateWindow(datetime(now.year, 1, 1), now)
    return full_year_window(now)


def full_year_window(now: datetime) -> DateWindow:
    return DateWindow(datetime(now.year, 1, 1), datetime(now.year, 12, 31, 23, 59, 59))


def range_window(start: date, end: date) -> DateWindow:
    return DateWindow(day_start(start), day_end(end))


def parse_report_range(start_value: Optional[str], end_value: Optional[str]) -> Tuple[date, date]:
    """Validate the ``startDate``/``endDate`` pair of the range reports"""
    if not start_value or not end_value:
        raise ValidationError("startDate and endDate are required")
    try:
        start = parse_date_string(start_value).date()
        end = parse_date_string(end_value).date()
    except ValueError:
        raise ValidationError("startDate and endDate must be valid dates (YYYY-MM-DD)")
    if end < start:
        raise ValidationError("endDate must not be before startDate")
    if (end - start).days >= settings.REPORT_MAX_RANGE_DAYS:
        raise ValidationError(f"Report range must not exceed {settings.REPORT_MAX_RANGE_DAYS} days")
    return start, end


def bucket_and_default(
    keys: Sequence[Any],
    rows: Iterable[AggregateRow],
    fields: Mapping[Any, str],
    label_field: str,
    label: Callable[[Any], Any] = lambda key: key,
) -> List[Dict[str, Any]]:
    """
    Reshape grouped aggregation rows into one dict per bucket key.

    Every output row carries ``label_field`` plus one entry per value of
    ``fields`` (category code -> output name), defaulting to 0. Rows whose
    category is not in ``fields`` are dropped.
    """
    totals: Dict[Tuple[Any, str], float] = defaultdict(float)
    for bucket, category, total in rows:
        field = fields.get(category)
        if field is None:
            continue
        totals[(bucket, field)] += float(total or 0)

    shaped = []
    for key in keys:
        row = {label_field: label(key)}
        for field in fields.values():
            row[field] = totals.get((key, field), 0.0)
        shaped.append(row)
    return shaped


def _as_date(value: Any) -> date:
    # SQLite returns DATE() as text, PostgreSQL as a date
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _days(start: date, end: date) -> List[date]:
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


class ReportingService:
    """Aggregates the income, donation and expense ledgers for the dashboard"""

    def __init__(self, db: Session):
        self.db = db

    def _filters(self, ledger: Ledger, window: DateWindow, branch: Optional[int]) -> list:
        filters = [ledger.date_column >= window.start, ledger.date_column <= window.end]
        if branch is not None:
            filters.append(ledger.model.branch == branch)
        return filters

    def _total(self, ledger: Ledger, window: DateWindow, branch: Optional[int]) -> float:
        stmt = select(func.coalesce(func.sum(ledger.amount_column), 0)).where(
            *self._filters(ledger, window, branch)
        )
        return float(self.db.execute(stmt).scalar_one() or 0)

    def _grouped(
        self,
        ledger: Ledger,
        window: DateWindow,
        branch: Optional[int],
        by: str,
        with_category: bool = False,
    ) -> List[AggregateRow]:
        """SUM(amount) grouped by month number or calendar day, optionally by category too"""
        if by == "month":
            bucket = extract("month", ledger.date_column).label("bucket")
        else:
            bucket = func.date(ledger.date_column).label("bucket")

        columns = [bucket]
        group_by = [bucket]
        if with_category:
            category = ledger.category_column.label("category")
            columns.append(category)
            group_by.append(category)
        columns.append(func.sum(ledger.amount_column).label("total"))

        stmt = select(*columns).where(*self._filters(ledger, window, branch)).group_by(*group_by)
        result = self.db.execute(stmt).all()

        normalize = int if by == "month" else _as_date
        if with_category:
            return [(normalize(b), c, t) for b, c, t in result]
        return [(normalize(b), ledger.name, t) for b, t in result]

    def overview_stats(self, branch: Optional[int] = None, now: Optional[datetime] = None) -> dict:
        """Year-to-date totals and the derived balance"""
        window = overview_window(now or datetime.now())
        logger.debug(f"Overview stats window={window} branch={branch}")

        total_income = self._total(INCOME, window, branch)
        total_donations = self._total(DONATION, window, branch)
        total_expense = self._total(EXPENSE, window, branch)

        return {
            "totalIncome": total_income,
            "totalDonations": total_donations,
            "totalExpense": total_expense,
            "currentBalance": total_income + total_donations - total_expense,
        }

    def income_expense_comparison(self, branch: Optional[int] = None, now: Optional[datetime] = None) -> List[dict]:
        """Income and expense per calendar month of the current year, January first"""
        window = full_year_window(now or datetime.now())
        rows = self._grouped(INCOME, window, branch, by="month") + self._grouped(EXPENSE, window, branch, by="month")
        return bucket_and_default(
            MONTHS,
            rows,
            {"income": "income", "expense": "expense"},
            label_field="month",
            label=lambda month: MONTH_NAMES[month - 1],
        )

    def donations_by_month(self, branch: Optional[int] = None, now: Optional[datetime] = None) -> List[dict]:
        """Donation totals per month and donation type for the current year"""
        window = full_year_window(now or datetime.now())
        rows = self._grouped(DONATION, window, branch, by="month", with_category=True)
        return bucket_and_default(
            MONTHS,
            rows,
            DONATION_FIELDS,
            label_field="month",
            label=lambda month: MONTH_NAMES[month - 1],
        )

    def report_overview(self, start: date, end: date, branch: Optional[int] = None) -> List[dict]:
        """One row per day in [start, end] with a running balance"""
        window = range_window(start, end)
        rows = (
            self._grouped(INCOME, window, branch, by="day")
            + self._grouped(DONATION, window, branch, by="day")
            + self._grouped(EXPENSE, window, branch, by="day")
        )
        days = bucket_and_default(
            _days(start, end),
            rows,
            {"income": "income", "donation": "donation", "expense": "expense"},
            label_field="date",
            label=lambda day: day.isoformat(),
        )

        balance = 0.0
        for day in days:
            balance += day["income"] + day["donation"] - day["expense"]
            day["balance"] = balance
        return days

    def _category_report(self, ledger: Ledger, fields: Mapping[Any, str], start: date, end: date, branch: Optional[int]) -> List[dict]:
        window = range_window(start, end)
        rows = [row for row in self._grouped(ledger, window, branch, by="day", with_category=True) if row[1] in fields]
        active_days = sorted({bucket for bucket, _, _ in rows})
        return bucket_and_default(active_days, rows, fields, label_field="date", label=lambda day: day.isoformat())

    def income_report(self, start: date, end: date, branch: Optional[int] = None) -> List[dict]:
        return self._category_report(INCOME, INCOME_FIELDS, start, end, branch)

    def expense_report(self, start: date, end: date, branch: Optional[int] = None) -> List[dict]:
        return self._category_report(EXPENSE, EXPENSE_FIELDS, start, end, branch)

    def donation_report(self, start: date, end: date, branch: Optional[int] = None) -> List[dict]:
        return self._category_report(DONATION, DONATION_FIELDS, start, end, branch)
