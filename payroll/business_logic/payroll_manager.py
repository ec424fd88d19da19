# payroll/business_logic/payroll_manager.py

from typing import List, Dict

from payroll.business_logic.entities.employee_entity import EmployeeEntity
from payroll.constants import EmployeeType, SALARY_LABEL, SALARY_DECIMAL_PLACES
import logging

logger = logging.getLogger(__name__)

class PayrollManager:
    def __init__(self, employees: List[EmployeeEntity]):
        """
        Initializes the PayrollManager.
        :param employees: Employees to pay, in report order.
        """
        if employees is None: raise ValueError("employees cannot be None")

        self.employees: List[EmployeeEntity] = list(employees)

    @staticmethod
    def format_salary_line(employee: EmployeeEntity, amount: float) -> str:
        """'<employee>, Weekly Salary: <amount>' with the amount to two decimals."""
        return f"{employee!r}, {SALARY_LABEL}: {amount:.{SALARY_DECIMAL_PLACES}f}"

    def build_report_lines(self) -> List[str]:
        lines: List[str] = []
        total = 0.0
        for employee in self.employees:
            amount = employee.earnings()
            total += amount
            logger.debug(f"Computed earnings {amount:.2f} for employee ID {employee.id}.")
            lines.append(self.format_salary_line(employee, amount))
        logger.info(f"Payroll report built: {len(lines)} employee(s), total {total:.2f}")
        return lines

    def total_earnings(self) -> float:
        return sum(employee.earnings() for employee in self.employees)

    def earnings_by_type(self) -> Dict[EmployeeType, float]:
        """Sums earnings per employee variant. Variants with nobody on the roster are omitted."""
        totals: Dict[EmployeeType, float] = {}
        for employee in self.employees:
            totals[employee.employee_type] = totals.get(employee.employee_type, 0.0) + employee.earnings()
        return totals
