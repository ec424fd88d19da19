# payroll/business_logic/__init__.py
from .exceptions import InvalidArgumentError
from .payroll_manager import PayrollManager
