# payroll/business_logic/entities/employee_entity.py
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from .base_entity import BaseEntity
from payroll.constants import (
    DEFAULT_FIRST_NAME, DEFAULT_LAST_NAME, DEFAULT_EMPLOYEE_ID, EmployeeType
)

@dataclass(eq=False)
class EmployeeEntity(BaseEntity, ABC):
    """
    Abstract employee record.
    Names and id are free-form; each variant adds its own guarded pay fields
    and supplies earnings().
    """
    first_name: str = field(default=DEFAULT_FIRST_NAME)
    last_name: str = field(default=DEFAULT_LAST_NAME)
    id: int = field(default=DEFAULT_EMPLOYEE_ID) # not unique across instances

    employee_type: ClassVar[EmployeeType]

    @abstractmethod
    def earnings(self) -> float:
        """Weekly earnings in the company currency."""

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, EmployeeEntity):
            return NotImplemented
        # exact type first: a commission and an hourly employee never match
        if type(self) is not type(other):
            return False
        return self.id == other.id
