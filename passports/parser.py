"""
Record parsing.

Responsibilities:
- split raw input into record blocks (blank-line separated)
- parse each block of key:value tokens into a Passport
- reject malformed tokens and unknown keys
- decode uploaded bytes for the HTTP service
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from charset_normalizer import from_bytes

from .models import Passport
from .rules import INPUT_ENCODING, TOKEN_PATTERN

logger = logging.getLogger(__name__)


class PassportParseError(ValueError):
    """Input does not follow the key:value record grammar."""

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.token = token


def parse_passport(block: str) -> Passport:
    """
    Parse one whitespace-separated block of key:value tokens.

    Rules:
    - each token must be <non-whitespace>:<non-whitespace>
    - the key must be one of the eight passport fields
    - a repeated key overwrites the earlier value
    - an empty block gives a Passport with every field absent
    """
    fields: Dict[str, str] = {}

    for token in block.split():
        match = TOKEN_PATTERN.fullmatch(token)
        if match is None:
            raise PassportParseError(f"Malformed token {token!r}", token=token)

        key, value = match.group(1), match.group(2)
        if key == "ecl":
            fields["ecl"] = value
        elif key == "eyr":
            fields["eyr"] = value
        elif key == "pid":
            fields["pid"] = value
        elif key == "hcl":
            fields["hcl"] = value
        elif key == "byr":
            fields["byr"] = value
        elif key == "iyr":
            fields["iyr"] = value
        elif key == "cid":
            fields["cid"] = value
        elif key == "hgt":
            fields["hgt"] = value
        else:
            raise PassportParseError(f"Invalid key {key!r}", token=token)

    return Passport(**fields)


def split_blocks(lines: Iterable[str]) -> List[str]:
    """Group lines into record blocks; lines of one record are joined with a space."""
    blocks: List[str] = []
    current: List[str] = []

    for line in lines:
        line = line.rstrip("\r\n")
        # only an exactly empty line separates records
        if line == "":
            if current:
                blocks.append(" ".join(current))
                current = []
            continue
        current.append(line)

    # last record may not be followed by a blank line
    if current:
        blocks.append(" ".join(current))

    return blocks


def parse_passports(text: str) -> List[Passport]:
    passports = [parse_passport(block) for block in split_blocks(text.splitlines())]
    logger.debug("parsed %d passport records", len(passports))
    return passports


def read_passports(path: str | Path) -> List[Passport]:
    with Path(path).open("r", encoding=INPUT_ENCODING) as handle:
        blocks = split_blocks(handle)

    passports = [parse_passport(block) for block in blocks]
    logger.debug("parsed %d passport records from %s", len(passports), path)
    return passports


def decode_upload(raw: bytes) -> str:
    """
    Decode uploaded bytes to text.

    UTF-8 (BOM tolerated) is tried first; anything else falls back to the
    charset-normalizer best guess.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        raise PassportParseError("Upload is not decodable text")

    logger.debug("upload decoded as %s", match.encoding)
    return str(match)
