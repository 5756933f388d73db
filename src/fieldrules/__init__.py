"""fieldrules - declarative validation of record fields.

Fields of dataclasses and pydantic models carry a ``validate`` annotation such
as ``"len:5"``, ``"min:1"``, ``"max:10"`` or ``"in:a,b,c"``; ``validate``
checks every annotated field and reports all violations at once.
"""

__version__ = "0.1.0"
__author__ = "fieldrules contributors"
__description__ = "Declarative rule validation for record fields"

from fieldrules.config import FieldRulesConfig, load_config
from fieldrules.errors import (
    FieldRulesError,
    InvalidValidatorSyntaxError,
    NotStructError,
    RuleViolation,
    UnexportedFieldError,
    ValidationError,
    ValidationErrors,
)
from fieldrules.validator import Validator, check, validate

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "FieldRulesConfig",
    "load_config",
    "FieldRulesError",
    "InvalidValidatorSyntaxError",
    "NotStructError",
    "RuleViolation",
    "UnexportedFieldError",
    "ValidationError",
    "ValidationErrors",
    "Validator",
    "check",
    "validate",
]
