# payroll/constants.py

from enum import Enum

# Employee defaults (used when a variant is constructed without arguments)
DEFAULT_FIRST_NAME = "Plony"
DEFAULT_LAST_NAME = "Almony"
DEFAULT_EMPLOYEE_ID = 0

MAX_COMMISSION_PERCENT = 100

# Report
SALARY_LABEL = "Weekly Salary"
SALARY_DECIMAL_PLACES = 2

class EmployeeType(Enum):
    HOURLY = "Hourly"
    COMMISSION = "Commission"
    BASE_PLUS_COMMISSION = "Base plus commission"
