"""Parsing of rule annotations of the form ``kind:argument``."""

import re
from dataclasses import dataclass
from typing import Any

from .constants import CANDIDATE_SEPARATOR, INT64_MAX, INT64_MIN, RULE_SEPARATOR
from .errors import InvalidValidatorSyntaxError

# Optional sign followed by ASCII digits, nothing else
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Rule:
    """A parsed rule annotation."""
    kind: str
    argument: str

    def __str__(self) -> str:
        return f"{self.kind}{RULE_SEPARATOR}{self.argument}"


def parse_rule(tag: Any) -> Rule:
    """Split a raw annotation on its first separator.

    Args:
        tag: Raw annotation such as ``"len:5"`` or ``"in:a,b"``

    Returns:
        Rule with kind and argument. The kind is not checked against the
        rule vocabulary.

    Raises:
        InvalidValidatorSyntaxError: If the annotation is not a string or
            has no separator
    """
    if not isinstance(tag, str):
        raise InvalidValidatorSyntaxError(tag=repr(tag))
    kind, separator, argument = tag.partition(RULE_SEPARATOR)
    if not separator:
        raise InvalidValidatorSyntaxError(tag=tag)
    return Rule(kind=kind, argument=argument)


def split_candidates(argument: str) -> list[str]:
    """Split an ``in`` argument into candidate literals, keeping their order."""
    if argument == "":
        raise InvalidValidatorSyntaxError(tag=argument)
    return argument.split(CANDIDATE_SEPARATOR)


def parse_int64(text: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Whitespace, underscores, non-ASCII digits and out-of-range values are all
    rejected, unlike ``int()``.
    """
    if not _INT_PATTERN.fullmatch(text):
        raise InvalidValidatorSyntaxError(tag=text)
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidValidatorSyntaxError(tag=text)
    return value


def parse_length(text: str) -> int:
    """Parse a non-negative length argument."""
    value = parse_int64(text)
    if value < 0:
        raise InvalidValidatorSyntaxError(tag=text)
    return value
