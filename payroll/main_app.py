# payroll/main_app.py
import sys
import logging
import logging.config
from typing import List

# --- Configuration and Constants ---
from payroll.config import LOGGING_CONFIG, COMPANY_NAME, DEFAULT_CURRENCY

# --- Business Logic Layer (BLL) ---
from payroll.business_logic.entities import (
    EmployeeEntity, HourlyEmployeeEntity, CommissionEmployeeEntity, BasePlusCommissionEmployeeEntity
)
from payroll.business_logic.payroll_manager import PayrollManager

logger = logging.getLogger(__name__)

def build_sample_employees() -> List[EmployeeEntity]:
    return [
        HourlyEmployeeEntity("Shalom", "Leibovich", 123, 40, 20.5),
        CommissionEmployeeEntity("Nahum", "Hadad", 456, 5000, 10),
        BasePlusCommissionEmployeeEntity("Moshe", "Navon", 789, 7000, 5, 500),
    ]

def main() -> int:
    logging.config.dictConfig(LOGGING_CONFIG)
    logger.info(f"Starting {COMPANY_NAME} (amounts in {DEFAULT_CURRENCY})")

    try:
        employees = build_sample_employees()
    except ValueError as e:
        logger.error(f"FATAL: Could not build the employee roster: {e}", exc_info=True)
        raise

    payroll_manager = PayrollManager(employees)
    for line in payroll_manager.build_report_lines():
        print(line)

    # different variants, so never equal
    print(employees[0] == employees[1])
    return 0

if __name__ == "__main__":
    sys.exit(main())
