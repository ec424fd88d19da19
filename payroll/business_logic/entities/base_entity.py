# payroll/business_logic/entities/base_entity.py
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict

FieldValidator = Callable[[str, Any], None]

@dataclass(eq=False)
class BaseEntity:
    # field name -> validator; subclasses extend the parent's mapping
    field_validators: ClassVar[Dict[str, FieldValidator]] = {}

    def __setattr__(self, name: str, value: Any) -> None:
        # dataclass __init__ assigns through here too, so construction and
        # later mutation share the same checks
        validator = self.field_validators.get(name)
        if validator is not None:
            validator(name, value)
        super().__setattr__(name, value)
