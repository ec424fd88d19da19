# payroll/business_logic/entities/hourly_employee_entity.py
from dataclasses import dataclass, field

from .employee_entity import EmployeeEntity
from payroll.business_logic.validators import ensure_non_negative
from payroll.constants import EmployeeType

@dataclass(eq=False)
class HourlyEmployeeEntity(EmployeeEntity):
    hours: int = field(default=0)
    wage: float = field(default=0.0) # per hour

    employee_type = EmployeeType.HOURLY
    field_validators = {
        **EmployeeEntity.field_validators,
        "hours": ensure_non_negative,
        "wage": ensure_non_negative,
    }

    def earnings(self) -> float:
        return self.hours * self.wage
