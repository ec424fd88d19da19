# payroll/business_logic/entities/__init__.py
from .base_entity import BaseEntity
from .employee_entity import EmployeeEntity
from .hourly_employee_entity import HourlyEmployeeEntity
from .commission_employee_entity import CommissionEmployeeEntity, BasePlusCommissionEmployeeEntity
__all__ = [
    "BaseEntity", "EmployeeEntity", "HourlyEmployeeEntity",
    "CommissionEmployeeEntity", "BasePlusCommissionEmployeeEntity",
]
