"""Field Validation — declarative rule descriptors evaluated by one pure function.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - validate() runs EVERY rule; failures never short-circuit each other,
      so one field may collect several FieldErrors
    - Checks operate on the stringified value (missing/None → "")
    - Numbers that do not fit a finite float (overflow, inf, nan) are not
      numeric and not positive

Design Decisions:
    - Checks mirror express-validator semantics so the error counts seen by
      existing clients stay identical (POST {} → 4 errors, PUT {} → 5)
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Location(str, Enum):
    """Where a field is read from."""
    PARAMS = "params"
    BODY = "body"


class Check(str, Enum):
    """Available field checks."""
    NOT_EMPTY = "not_empty"
    IS_NUMERIC = "is_numeric"
    IS_BOOLEAN = "is_boolean"
    IS_INT = "is_int"
    POSITIVE = "positive"


@dataclass(frozen=True)
class FieldRule:
    """One check on one field, with the message reported when it fails."""
    location: Location
    field: str
    check: Check
    message: str


@dataclass(frozen=True)
class FieldError:
    """One failed FieldRule."""
    field: str
    message: str
    location: Location
    value: Any = None

    def to_dict(self) -> dict:
        value = self.value
        if isinstance(value, float) and not math.isfinite(value):
            value = None
        return {
            "type": "field",
            "field": self.field,
            "location": self.location.value,
            "value": value,
            "msg": self.message,
            "message": self.message,
        }


# ─── Coercion ────────────────────────────────────────────────────

_NUMERIC = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_INT = re.compile(r"[-+]?(?:0|[1-9][0-9]*)")
_BOOLEAN_STRINGS = {"true": True, "false": False, "1": True, "0": False}


def stringify(value: Any) -> str:
    """String form of a JSON value as the checks see it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> float | None:
    """Finite numeric value of a JSON scalar, or None when it has none."""
    if value is None or isinstance(value, str) and not value.strip():
        return None
    if not isinstance(value, (bool, int, float, str)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def to_boolean(value: Any) -> bool:
    """Boolean value of something that already passed IS_BOOLEAN."""
    return _BOOLEAN_STRINGS[stringify(value)]


# ─── Checks ──────────────────────────────────────────────────────

def _passes(check: Check, value: Any) -> bool:
    text = stringify(value)
    if check is Check.NOT_EMPTY:
        return text != ""
    if check is Check.IS_NUMERIC:
        return bool(_NUMERIC.fullmatch(text)) and to_number(value) is not None
    if check is Check.IS_BOOLEAN:
        return text in _BOOLEAN_STRINGS
    if check is Check.IS_INT:
        return bool(_INT.fullmatch(text))
    if check is Check.POSITIVE:
        number = to_number(value)
        return number is not None and number > 0
    raise ValueError(f"Unknown check: {check}")


def validate(
    rules: tuple[FieldRule, ...] | list[FieldRule],
    params: dict[str, Any],
    body: dict[str, Any],
) -> list[FieldError]:
    """Evaluate every rule in declaration order and collect the failures."""
    sources = {Location.PARAMS: params, Location.BODY: body}
    errors: list[FieldError] = []
    for rule in rules:
        value = sources[rule.location].get(rule.field)
        if not _passes(rule.check, value):
            errors.append(FieldError(
                field=rule.field, message=rule.message,
                location=rule.location, value=value,
            ))
    return errors
