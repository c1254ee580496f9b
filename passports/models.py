from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Passport(BaseModel):
    """One parsed record. Every field is absent or a raw, unvalidated string."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ecl: Optional[str] = None
    eyr: Optional[str] = None
    pid: Optional[str] = None
    hcl: Optional[str] = None
    byr: Optional[str] = None
    iyr: Optional[str] = None
    cid: Optional[str] = None
    hgt: Optional[str] = None


class ValidationMode(str, Enum):
    BASIC = "basic"
    STRICT = "strict"

    @classmethod
    def from_selector(cls, selector: int) -> "ValidationMode":
        # 1 selects the presence rules, anything else the strict rules
        return cls.BASIC if selector == 1 else cls.STRICT


class ReportSummary(BaseModel):
    mode: ValidationMode
    records: int = 0
    valid: int = 0
    invalid: int = 0
    message: str = Field(examples=["There were 2 valid passports"])


class ReportItem(BaseModel):
    record: int
    field: str
    value: Optional[str] = None
    issue: str


class ValidationReport(BaseModel):
    summary: ReportSummary
    failures: List[ReportItem] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    report: ValidationReport


class HealthResponse(BaseModel):
    ok: bool = True
