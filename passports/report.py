from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .models import Passport, ValidationMode
from .rules import RESULT_TEMPLATE
from .validator import failed_fields


def format_result(count: int) -> str:
    return RESULT_TEMPLATE.format(count=count)


def build_report(passports: Sequence[Passport], mode: ValidationMode) -> Dict[str, Any]:
    """
    Returns a dict matching the API's report envelope.

    Records are numbered from 1 in input order.
    """
    failures: List[Dict[str, Any]] = []
    invalid = 0

    for index, passport in enumerate(passports, start=1):
        fields = failed_fields(passport, mode)
        if not fields:
            continue
        invalid += 1
        for name in fields:
            value = getattr(passport, name)
            failures.append({
                "record": index,
                "field": name,
                "value": value,
                "issue": "missing" if value is None else "invalid",
            })

    valid = len(passports) - invalid
    return {
        "summary": {
            "mode": mode.value,
            "records": len(passports),
            "valid": valid,
            "invalid": invalid,
            "message": format_result(valid),
        },
        "failures": failures,
    }
