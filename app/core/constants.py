# app/core/constants.py - Closed code sets shared by models, schemas and reports
import enum


class UserRole(enum.IntEnum):
    SUPER_ADMIN = 1
    ADMIN = 2
    MODERATOR = 3


class EmployeeType(enum.IntEnum):
    ADMINISTRATION = 1
    TEACHER = 2
    MEDIA_IT = 3
    STAFF = 4


class Designation(enum.IntEnum):
    PRINCIPAL_HEAD_MUHTAMIM = 1
    VICE_PRINCIPAL_NAIB_MUHTAMIM = 2
    OFFICE_ADMINISTRATOR = 3
    ACCOUNTANT = 4
    SUBJECT_TEACHER = 5
    GENERAL_SUBJECTS_TEACHER = 6
    HIFZ_TEACHER = 7
    ASSISTANT_TEACHER = 8
    MUALLIM = 9
    MUALLIMA = 10
    DEVELOPER = 11
    MEDIA_MANAGER = 12
    COMPUTER_OPERATOR = 13
    PEON = 14
    LIBRARIAN = 15
    DRIVER = 16
    COOK = 17
    EDUCATION_SECRETARY = 18


class Branch(enum.IntEnum):
    ALL = 1
    BOYS = 2
    GIRLS = 3
    HOSTELS = 4


class DonationType(enum.IntEnum):
    SADAQAH = 1
    ZAKAT = 2
    MEMBERSHIP = 3
    OTHERS = 4


class IncomeType(enum.IntEnum):
    ADMISSION_FEE = 1
    SESSION_FEE = 2
    STUDENTS_MONTHLY_FEE = 3
    CANTEEN = 4
    OTHERS = 5


class ExpenseType(enum.IntEnum):
    SALARY = 1
    HOSTEL = 2
    ELECTRICITY_BILL = 3
    MOBILE_INTERNET_BILL = 4
    OFFICE = 5
    STATIONERY = 6
    UTILITIES = 7
    FARE = 8
    MAINTENANCE = 9
    CONSTRUCTION = 10


MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# Output field for each category code in the month/day report rows
DONATION_FIELDS = {
    DonationType.SADAQAH: "sadaqah",
    DonationType.ZAKAT: "zakat",
    DonationType.MEMBERSHIP: "membership",
    DonationType.OTHERS: "others",
}

INCOME_FIELDS = {
    IncomeType.ADMISSION_FEE: "admissionFee",
    IncomeType.SESSION_FEE: "sessionFee",
    IncomeType.STUDENTS_MONTHLY_FEE: "monthlyFee",
    IncomeType.CANTEEN: "canteen",
    IncomeType.OTHERS: "others",
}

EXPENSE_FIELDS = {
    ExpenseType.SALARY: "salary",
    ExpenseType.HOSTEL: "hostel",
    ExpenseType.ELECTRICITY_BILL: "electricBill",
    ExpenseType.MOBILE_INTERNET_BILL: "mobileInternetBill",
    ExpenseType.OFFICE: "office",
    ExpenseType.STATIONERY: "stationery",
    ExpenseType.UTILITIES: "utilities",
    ExpenseType.FARE: "fare",
    ExpenseType.MAINTENANCE: "maintenance",
    ExpenseType.CONSTRUCTION: "construction",
}

# Page sizes used when a listing request carries no limit
STUDENT_LIST_DEFAULT_LIMIT = 1000
EMPLOYEE_LIST_DEFAULT_LIMIT = 15

# Largest code an INTEGER column holds; larger query values match nothing
MAX_CODE_VALUE = 2**31 - 1
