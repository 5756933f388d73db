"""Rule evaluators for the fixed rule vocabulary.

Each evaluator takes ``(value, kind, argument)`` and returns a
``RuleViolation`` or ``None``. A malformed argument raises
``InvalidValidatorSyntaxError`` before the value is looked at. Sequences are
evaluated element by element and the first failing element wins.
"""

import logging
from collections.abc import Callable
from typing import Any

from .annotations import parse_int64, parse_length, split_candidates
from .constants import RULE_IN, RULE_LEN, RULE_MAX, RULE_MIN
from .errors import RuleViolation
from .kinds import ValueKind, classify

logger = logging.getLogger(__name__)

RuleFunc = Callable[[Any, ValueKind, str], RuleViolation | None]


def _first_violation(items, rule: RuleFunc, argument: str) -> RuleViolation | None:
    for item in items:
        violation = rule(item, classify(item), argument)
        if violation is not None:
            return violation
    return None


def validate_len(value: Any, kind: ValueKind, argument: str) -> RuleViolation | None:
    """Text length (in code points) must equal the argument."""
    length = parse_length(argument)

    if kind is ValueKind.SEQUENCE:
        return _first_violation(value, validate_len, argument)

    if kind is ValueKind.TEXT and len(value) != length:
        return RuleViolation("length of string is not equal", rule=RULE_LEN)

    return None


def validate_min(value: Any, kind: ValueKind, argument: str) -> RuleViolation | None:
    """Integers must be at least the argument, text at least that long."""
    minimum = parse_int64(argument)

    if kind is ValueKind.SEQUENCE:
        return _first_violation(value, validate_min, argument)

    if kind is ValueKind.INTEGER:
        if value < minimum:
            return RuleViolation("value is less than allowed", rule=RULE_MIN)

    elif kind is ValueKind.TEXT:
        if len(value) == 0:
            return RuleViolation("empty text", rule=RULE_MIN)
        if len(value) < minimum:
            return RuleViolation("len of string is less than allowed", rule=RULE_MIN)

    return None


def validate_max(value: Any, kind: ValueKind, argument: str) -> RuleViolation | None:
    """Integers must be at most the argument, text at most that long."""
    maximum = parse_int64(argument)

    if kind is ValueKind.SEQUENCE:
        return _first_violation(value, validate_max, argument)

    if kind is ValueKind.INTEGER:
        if value > maximum:
            return RuleViolation("value is bigger than allowed", rule=RULE_MAX)

    elif kind is ValueKind.TEXT:
        if len(value) == 0:
            return RuleViolation("empty text", rule=RULE_MAX)
        if len(value) > maximum:
            return RuleViolation("len of string is bigger than allowed", rule=RULE_MAX)

    return None


def validate_in(value: Any, kind: ValueKind, argument: str) -> RuleViolation | None:
    """Value must equal one of the comma separated candidates.

    An empty sequence passes: there is no element to mismatch. Values that are
    neither integer, text nor sequence never match.
    """
    candidates = split_candidates(argument)

    if kind is ValueKind.SEQUENCE:
        return _first_violation(value, validate_in, argument)

    matched = False
    if kind is ValueKind.INTEGER:
        for candidate in candidates:
            # every candidate must parse, even after a match
            if parse_int64(candidate) == value:
                matched = True
    elif kind is ValueKind.TEXT:
        matched = value in candidates

    if not matched:
        return RuleViolation("value not in a valid set", rule=RULE_IN)
    return None


RULES: dict[str, RuleFunc] = {
    RULE_LEN: validate_len,
    RULE_MIN: validate_min,
    RULE_MAX: validate_max,
    RULE_IN: validate_in,
}


def evaluate(kind: str, argument: str, value: Any) -> RuleViolation | None:
    """Dispatch to the evaluator for ``kind``.

    An unrecognised kind performs no validation and reports nothing.
    """
    rule = RULES.get(kind)
    if rule is None:
        logger.debug(f"Ignoring unknown rule kind: {kind!r}")
        return None
    return rule(value, classify(value), argument)
