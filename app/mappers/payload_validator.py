"""Declarative payload validation.

Each resource describes its body as a tuple of ``FieldRule`` entries. A rule
names the field, the JSON type it must have, and a list of ``Check``
predicates with the message reported when the predicate fails. All rules are
evaluated by ``validate_payload`` the same way, so a resource only has to
declare data.
"""

import math
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from app.schemas.responses import FieldError

REQUIRED_MESSAGE = "Required"
NOT_FINITE_MESSAGE = "Number must be finite"


class FieldKind(StrEnum):
    string = "string"
    number = "number"


class Check(BaseModel):
    model_config = {"frozen": True}

    predicate: Callable[[Any], bool]
    message: str


class FieldRule(BaseModel):
    model_config = {"frozen": True}

    field: str
    kind: FieldKind
    checks: tuple[Check, ...] = ()
    required: bool = True


def _text_length(value: str) -> int:
    # Counted in UTF-16 code units, the way JSON clients measure strings
    return len(value.encode("utf-16-le")) // 2


def min_length(length: int, message: str) -> Check:
    return Check(predicate=lambda v: _text_length(v) >= length, message=message)


def min_value(minimum: float, message: str) -> Check:
    return Check(predicate=lambda v: v >= minimum, message=message)


def max_value(maximum: float, message: str) -> Check:
    return Check(predicate=lambda v: v <= maximum, message=message)


def positive(message: str) -> Check:
    return Check(predicate=lambda v: v > 0, message=message)


def optional(rules: tuple[FieldRule, ...]) -> tuple[FieldRule, ...]:
    """Same checks, but every field may be left out."""
    return tuple(rule.model_copy(update={"required": False}) for rule in rules)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _matches_kind(value: Any, kind: FieldKind) -> bool:
    if kind is FieldKind.string:
        return isinstance(value, str)
    # bool is a subclass of int but never a valid number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_float(value: int | float) -> float | None:
    """``None`` for values with no finite double representation."""
    try:
        converted = float(value)
    except OverflowError:
        return None
    return converted if math.isfinite(converted) else None


def validate_payload(
    payload: dict[str, Any],
    rules: tuple[FieldRule, ...],
) -> list[FieldError]:
    """Evaluate every rule against ``payload``.

    Returns one ``FieldError`` per violation; an empty list means the payload
    is valid. Keys without a rule are ignored.
    """
    errors: list[FieldError] = []

    for rule in rules:
        if rule.field not in payload:
            if rule.required:
                errors.append(FieldError(path=[rule.field], message=REQUIRED_MESSAGE))
            continue

        value = payload[rule.field]
        if not _matches_kind(value, rule.kind):
            errors.append(
                FieldError(
                    path=[rule.field],
                    message=f"Expected {rule.kind}, received {_type_name(value)}",
                )
            )
            continue

        if rule.kind is FieldKind.number:
            value = _as_float(value)
            if value is None:
                errors.append(FieldError(path=[rule.field], message=NOT_FINITE_MESSAGE))
                continue

        for check in rule.checks:
            if not check.predicate(value):
                errors.append(FieldError(path=[rule.field], message=check.message))

    return errors


def normalize_payload(
    payload: dict[str, Any],
    rules: tuple[FieldRule, ...],
) -> dict[str, Any]:
    """Copy of a validated payload with every number field as a float.

    The store keeps numbers as REAL; arbitrary-size JSON integers cannot be
    bound as SQLite INTEGER.
    """
    normalized = dict(payload)
    for rule in rules:
        if rule.kind is FieldKind.number and rule.field in normalized:
            normalized[rule.field] = float(normalized[rule.field])
    return normalized
