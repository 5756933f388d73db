"""Error hierarchy for field rule validation.

Three disjoint kinds of failure are reported:

- structural: the value handed to ``validate`` is not a record
- syntax: a rule annotation or its argument is malformed
- violation: a field value fails its rule

Only violations are attributed to a field name. Everything is an exception so
callers can either inspect the returned error or raise it.
"""

from collections.abc import Iterator, Sequence
from typing import Any

NOT_STRUCT_MESSAGE = "wrong argument given, should be a struct"
INVALID_SYNTAX_MESSAGE = "invalid validator syntax"
UNEXPORTED_FIELD_MESSAGE = "validation for unexported field is not allowed"


class FieldRulesError(Exception):
    """Base exception for all fieldrules errors."""


class NotStructError(FieldRulesError):
    """The validated value is not a record."""

    def __init__(self, message: str = NOT_STRUCT_MESSAGE):
        super().__init__(message)


class InvalidValidatorSyntaxError(FieldRulesError):
    """A rule annotation or rule argument could not be parsed."""

    def __init__(self, message: str = INVALID_SYNTAX_MESSAGE, tag: str | None = None):
        self.tag = tag
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (str(self), self.tag))


class UnexportedFieldError(FieldRulesError):
    """A rule annotation was found on a non-introspectable field."""

    def __init__(self, message: str = UNEXPORTED_FIELD_MESSAGE, field_name: str | None = None):
        self.field_name = field_name
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (str(self), self.field_name))


class RuleViolation(FieldRulesError):
    """A field value failed its rule."""

    def __init__(self, message: str, rule: str):
        self.rule = rule
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (str(self), self.rule))


class ValidationError(FieldRulesError):
    """Single validation failure wrapping its underlying cause."""

    def __init__(self, err: FieldRulesError, field: str | None = None):
        self.err = err
        self.field = field
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.field is None:
            return str(self.err)
        return f"validation error: field {self.field}: {self.err}"

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (
            type(self.err) is type(other.err)
            and str(self.err) == str(other.err)
            and self.field == other.field
        )

    def __reduce__(self):
        return (type(self), (self.err, self.field))

    def __hash__(self) -> int:
        return hash((type(self.err), str(self.err), self.field))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            # unexported-field errors are not field-wrapped but still name the field
            "field": self.field if self.field is not None else getattr(self.err, "field_name", None),
            "kind": type(self.err).__name__,
            "rule": getattr(self.err, "rule", None),
            "message": self.message,
        }


class ValidationErrors(FieldRulesError, Sequence):
    """Ordered collection of validation failures, one per offending field.

    With a single entry the message is that entry's message verbatim,
    otherwise every message is followed by a newline.
    """

    def __init__(self, errors: list[ValidationError] | None = None):
        self.errors: list[ValidationError] = list(errors or [])
        super().__init__(str(self))

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return self.errors[0].message
        return "".join(f"{e.message}\n" for e in self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, index):
        return self.errors[index]

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return self.errors == other.errors

    __hash__ = FieldRulesError.__hash__

    def __reduce__(self):
        return (type(self), (self.errors,))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": False,
            "total": len(self.errors),
            "errors": [error.to_dict() for error in self.errors],
        }
