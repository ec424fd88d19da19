# payroll/business_logic/validators.py

from typing import Union

from payroll.business_logic.exceptions import InvalidArgumentError
from payroll.constants import MAX_COMMISSION_PERCENT
import logging

logger = logging.getLogger(__name__)

Number = Union[int, float]


def ensure_non_negative(field_name: str, value: Number) -> None:
    """Hours, wages, sales and salaries can never drop below zero. NaN is rejected too."""
    if not value >= 0:
        logger.debug(f"Rejected value {value!r} for '{field_name}'.")
        raise InvalidArgumentError(field_name, value, f"{field_name} must be non-negative, got {value!r}")


def ensure_percentage(field_name: str, value: Number) -> None:
    """Commission is a percentage between 0 and MAX_COMMISSION_PERCENT. Only the range is checked."""
    if not 0 <= value <= MAX_COMMISSION_PERCENT:
        logger.debug(f"Rejected out-of-range percentage {value!r} for '{field_name}'.")
        raise InvalidArgumentError(
            field_name, value,
            f"{field_name} must be between 0 and {MAX_COMMISSION_PERCENT}, got {value!r}"
        )
