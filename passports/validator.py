from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from .models import Passport, ValidationMode
from .rules import (
    EYE_COLORS,
    FIELD_NAMES,
    HAIR_COLOR_PATTERN,
    HEIGHT_PATTERN,
    HEIGHT_RANGES,
    PASSPORT_ID_PATTERN,
    REQUIRED_FIELDS,
    YEAR_PATTERN,
    YEAR_RANGES,
)


def _year_in_range(field: str) -> Callable[[str], bool]:
    low, high = YEAR_RANGES[field]

    def check(value: str) -> bool:
        if not YEAR_PATTERN.fullmatch(value):
            return False
        return low <= int(value) <= high

    return check


def _valid_height(value: str) -> bool:
    match = HEIGHT_PATTERN.fullmatch(value)
    if match is None:
        return False
    low, high = HEIGHT_RANGES[match.group(2)]
    return low <= int(match.group(1)) <= high


def _valid_hair_color(value: str) -> bool:
    return HAIR_COLOR_PATTERN.fullmatch(value) is not None


def _valid_eye_color(value: str) -> bool:
    return value in EYE_COLORS


def _valid_passport_id(value: str) -> bool:
    return PASSPORT_ID_PATTERN.fullmatch(value) is not None


STRICT_CHECKS: Dict[str, Callable[[str], bool]] = {
    "byr": _year_in_range("byr"),
    "iyr": _year_in_range("iyr"),
    "eyr": _year_in_range("eyr"),
    "hgt": _valid_height,
    "hcl": _valid_hair_color,
    "ecl": _valid_eye_color,
    "pid": _valid_passport_id,
}


def failed_fields(passport: Passport, mode: ValidationMode) -> List[str]:
    """
    Return the fields that fail under `mode`, in record field order.

    A missing required field always fails. In strict mode a present field
    also has to pass its format/range check; bad numbers are failures, not
    errors.
    """
    failures: List[str] = []
    for name in FIELD_NAMES:
        if name not in REQUIRED_FIELDS:
            continue
        value: Optional[str] = getattr(passport, name)
        if value is None:
            failures.append(name)
        elif mode is ValidationMode.STRICT and not STRICT_CHECKS[name](value):
            failures.append(name)
    return failures


def is_valid_basic(passport: Passport) -> bool:
    return all(getattr(passport, name) is not None for name in REQUIRED_FIELDS)


def is_valid_strict(passport: Passport) -> bool:
    return not failed_fields(passport, ValidationMode.STRICT)


def is_valid(passport: Passport, mode: ValidationMode) -> bool:
    if mode is ValidationMode.BASIC:
        return is_valid_basic(passport)
    return is_valid_strict(passport)


def count_valid(passports: Iterable[Passport], mode: ValidationMode) -> int:
    return sum(1 for passport in passports if is_valid(passport, mode))
