"""
Passport record schema and strict-mode limits.

Holds the eight field names, the presence-required subset, the year and
height ranges, and the compiled patterns the validator matches against.
"""

import re

INPUT_ENCODING = "utf-8"

FIELD_NAMES = ("ecl", "eyr", "pid", "hcl", "byr", "iyr", "cid", "hgt")

# cid is ignored, missing or not
REQUIRED_FIELDS = ("ecl", "eyr", "pid", "hcl", "byr", "iyr", "hgt")

TOKEN_PATTERN = re.compile(r"(\S+):(\S+)")

YEAR_PATTERN = re.compile(r"\+?[0-9]+")
YEAR_RANGES = {
    "byr": (1920, 2002),
    "iyr": (2010, 2020),
    "eyr": (2020, 2030),
}

HEIGHT_PATTERN = re.compile(r"([0-9]+)(cm|in)")
HEIGHT_RANGES = {
    "cm": (150, 193),
    "in": (59, 76),
}

# The class admits a literal "|"; kept as published.
HAIR_COLOR_PATTERN = re.compile(r"#[a-f|0-9]{6}")

EYE_COLORS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})

PASSPORT_ID_PATTERN = re.compile(r"[0-9]{9}")

RESULT_TEMPLATE = "There were {count} valid passports"
