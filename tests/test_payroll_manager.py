import pytest

from payroll.business_logic.entities import HourlyEmployeeEntity
from payroll.business_logic.payroll_manager import PayrollManager
from payroll.constants import EmployeeType
from payroll.main_app import build_sample_employees


class CountingHourlyEmployee(HourlyEmployeeEntity):
    calls = 0

    def earnings(self) -> float:
        CountingHourlyEmployee.calls += 1
        return super().earnings()


def test_report_lines_follow_roster_order():
    manager = PayrollManager(build_sample_employees())

    lines = manager.build_report_lines()

    assert lines == [
        "HourlyEmployeeEntity(first_name='Shalom', last_name='Leibovich', id=123, hours=40, wage=20.5)"
        ", Weekly Salary: 820.00",
        "CommissionEmployeeEntity(first_name='Nahum', last_name='Hadad', id=456, gross_sales=5000, commission=10)"
        ", Weekly Salary: 500.00",
        "BasePlusCommissionEmployeeEntity(first_name='Moshe', last_name='Navon', id=789, gross_sales=7000, "
        "commission=5, base_salary=500), Weekly Salary: 850.00",
    ]


def test_report_computes_each_employee_earnings_once():
    CountingHourlyEmployee.calls = 0
    manager = PayrollManager([CountingHourlyEmployee("A", "B", 1, 2, 3.0), CountingHourlyEmployee("C", "D", 2, 1, 1.0)])

    manager.build_report_lines()

    assert CountingHourlyEmployee.calls == 2


def test_salary_line_rounds_to_two_decimals():
    employee = HourlyEmployeeEntity("A", "B", 1, 1, 10.125)

    line = PayrollManager.format_salary_line(employee, employee.earnings())

    assert line.endswith(", Weekly Salary: 10.12")


def test_total_earnings_for_sample_roster():
    assert PayrollManager(build_sample_employees()).total_earnings() == pytest.approx(2170.0)


def test_total_earnings_of_empty_roster_is_zero():
    assert PayrollManager([]).total_earnings() == 0


def test_empty_roster_builds_no_lines():
    assert PayrollManager([]).build_report_lines() == []


def test_earnings_by_type():
    employees = build_sample_employees() + build_sample_employees()[:1]

    totals = PayrollManager(employees).earnings_by_type()

    assert totals == {
        EmployeeType.HOURLY: pytest.approx(1640.0),
        EmployeeType.COMMISSION: pytest.approx(500.0),
        EmployeeType.BASE_PLUS_COMMISSION: pytest.approx(850.0),
    }


def test_roster_is_copied():
    employees = build_sample_employees()
    manager = PayrollManager(employees)

    employees.clear()

    assert len(manager.build_report_lines()) == 3


def test_missing_roster_is_rejected():
    with pytest.raises(ValueError):
        PayrollManager(None)
