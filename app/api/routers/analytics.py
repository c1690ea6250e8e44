# app/api/routers/analytics.py - Dashboard statistics and date-range reports
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.core.db import get_db
from app.api.deps.auth import get_current_admin
from app.schemas.analytics import (
    OverviewStats,
    MonthlyIncomeExpense,
    MonthlyDonations,
    DailyOverview,
    IncomeReportRow,
    ExpenseReportRow,
    DonationReportRow,
)
from app.schemas.common import ApiResponse, ok
from app.services.reporting import ReportingService, parse_branch, parse_report_range

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/overview-stats", response_model=ApiResponse[OverviewStats])
async def overview_stats(
    branch: Optional[str] = Query(None, description="Branch code, or 'all'"),
    db: Session = Depends(get_db)
):
    """Totals of the current year up to now, and the resulting balance"""
    data = ReportingService(db).overview_stats(parse_branch(branch))
    return ok("Overview statistics retrieved successfully", data)


@router.get("/income-expense-comparison", response_model=ApiResponse[List[MonthlyIncomeExpense]])
async def income_expense_comparison(
    branch: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    data = ReportingService(db).income_expense_comparison(parse_branch(branch))
    return ok("Income and expense comparison retrieved successfully", data)


@router.get("/donations-by-month", response_model=ApiResponse[List[MonthlyDonations]])
async def donations_by_month(
    branch: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    data = ReportingService(db).donations_by_month(parse_branch(branch))
    return ok("Donations by month retrieved successfully", data)


@router.get("/report-overview", response_model=ApiResponse[List[DailyOverview]])
async def report_overview(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    branch: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Daily income, donation and expense with a running balance"""
    start, end = parse_report_range(start_date, end_date)
    data = ReportingService(db).report_overview(start, end, parse_branch(branch))
    return ok("Report overview retrieved successfully", data)


@router.get("/income-report", response_model=ApiResponse[List[IncomeReportRow]])
async def income_report(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    branch: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    start, end = parse_report_range(start_date, end_date)
    data = ReportingService(db).income_report(start, end, parse_branch(branch))
    return ok("Income report retrieved successfully", data)


@router.get("/expense-report", response_model=ApiResponse[List[ExpenseReportRow]])
async def expense_report(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    branch: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    start, end = parse_report_range(start_date, end_date)
    data = ReportingService(db).expense_report(start, end, parse_branch(branch))
    return ok("Expense report retrieved successfully", data)


@router.get("/donation-report", response_model=ApiResponse[List[DonationReportRow]])
async def donation_report(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    branch: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    start, end = parse_report_range(start_date, end_date)
    data = ReportingService(db).donation_report(start, end, parse_branch(branch))
    return ok("Donation report retrieved successfully", data)
