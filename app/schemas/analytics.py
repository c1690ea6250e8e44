# app/schemas/analytics.py - Shapes returned by the reporting endpoints
from pydantic import BaseModel


class OverviewStats(BaseModel):
    totalIncome: float
    totalDonations: float
    totalExpense: float
    currentBalance: float


class MonthlyIncomeExpense(BaseModel):
    month: str
    income: float
    expense: float


class MonthlyDonations(BaseModel):
    month: str
    sadaqah: float
    zakat: float
    membership: float
    others: float


class DailyOverview(BaseModel):
    date: str
    income: float
    donation: float
    expense: float
    balance: float


class IncomeReportRow(BaseModel):
    date: str
    admissionFee: float
    sessionFee: float
    monthlyFee: float
    canteen: float
    others: float


class ExpenseReportRow(BaseModel):
    date: str
    salary: float
    hostel: float
    electricBill: float
    mobileInternetBill: float
    office: float
    stationery: float
    utilities: float
    fare: float
    maintenance: float
    construction: float


class DonationReportRow(BaseModel):
    date: str
    sadaqah: float
    zakat: float
    membership: float
    others: float
