# payroll/business_logic/exceptions.py

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a guarded entity field would be set to an invalid value."""

    def __init__(self, field_name: str, value: Any, message: str):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
