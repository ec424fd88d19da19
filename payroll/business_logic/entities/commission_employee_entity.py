# payroll/business_logic/entities/commission_employee_entity.py
from dataclasses import dataclass, field

from .employee_entity import EmployeeEntity
from payroll.business_logic.validators import ensure_non_negative, ensure_percentage
from payroll.constants import EmployeeType

@dataclass(eq=False)
class CommissionEmployeeEntity(EmployeeEntity):
    gross_sales: float = field(default=0.0)
    commission: int = field(default=0) # percent of gross_sales, 0-100; only the range is checked, so 12.5 is accepted

    employee_type = EmployeeType.COMMISSION
    field_validators = {
        **EmployeeEntity.field_validators,
        "gross_sales": ensure_non_negative,
        "commission": ensure_percentage,
    }

    def earnings(self) -> float:
        return self.gross_sales * self.commission / 100


@dataclass(eq=False)
class BasePlusCommissionEmployeeEntity(CommissionEmployeeEntity):
    base_salary: float = field(default=0.0)

    employee_type = EmployeeType.BASE_PLUS_COMMISSION
    field_validators = {
        **CommissionEmployeeEntity.field_validators,
        "base_salary": ensure_non_negative,
    }

    def earnings(self) -> float:
        return super().earnings() + self.base_salary
