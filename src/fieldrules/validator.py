"""Validation of record fields against their rule annotations.

``validate`` walks the fields of a record in declaration order, evaluates the
rule attached to each annotated field and collects every failure into a
single ``ValidationErrors``. It returns ``None`` when nothing failed.

A rule annotation on a non-introspectable field stops validation at once:
the result then holds only that error, whatever was collected before.
"""

import logging
from typing import Any

from .annotations import parse_rule
from .config import FieldRulesConfig, create_default_config
from .errors import (
    FieldRulesError,
    InvalidValidatorSyntaxError,
    NotStructError,
    UnexportedFieldError,
    ValidationError,
    ValidationErrors,
)
from .fields import indirect, is_record, iter_fields
from .rules import evaluate

logger = logging.getLogger(__name__)


class Validator:
    """Validates records using the configured annotation key."""

    def __init__(self, config: FieldRulesConfig | None = None):
        self.config = config or create_default_config()

    @property
    def tag_key(self) -> str:
        return self.config.rules.tag_key

    def validate(self, value: Any) -> FieldRulesError | None:
        """Validate all annotated fields of a record.

        Args:
            value: Record instance, or a weak reference to one

        Returns:
            None if every rule holds, ``NotStructError`` if ``value`` is not a
            record, otherwise ``ValidationErrors`` in field order
        """
        record = indirect(value)
        if not is_record(record):
            logger.debug(f"Rejecting non-record value of type {type(record).__name__}")
            return NotStructError()

        record_name = type(record).__name__
        logger.debug(f"Validating {record_name} with tag key {self.tag_key!r}")

        errors: list[ValidationError] = []

        for descriptor in iter_fields(record, self.tag_key):
            if descriptor.tag is None:
                continue

            if not descriptor.exported:
                logger.info(f"Annotated unexported field {record_name}.{descriptor.name}")
                return ValidationErrors([
                    ValidationError(UnexportedFieldError(field_name=descriptor.name))
                ])

            try:
                rule = parse_rule(descriptor.tag)
                violation = evaluate(rule.kind, rule.argument, descriptor.value)
            except InvalidValidatorSyntaxError as e:
                logger.debug(f"Invalid rule {descriptor.tag!r} on {record_name}.{descriptor.name}")
                errors.append(ValidationError(e))
                continue

            if violation is not None:
                logger.debug(f"{record_name}.{descriptor.name} failed {rule}: {violation}")
                errors.append(ValidationError(violation, field=descriptor.name))

        if errors:
            logger.info(f"Validation of {record_name} found {len(errors)} errors")
            return ValidationErrors(errors)

        return None

    def check(self, value: Any) -> None:
        """Validate and raise the resulting error, if any."""
        error = self.validate(value)
        if error is not None:
            raise error


def validate(value: Any, config: FieldRulesConfig | None = None) -> FieldRulesError | None:
    """Validate a record with the default or given configuration."""
    return Validator(config).validate(value)


def check(value: Any, config: FieldRulesConfig | None = None) -> None:
    """Validate a record and raise on failure."""
    Validator(config).check(value)
