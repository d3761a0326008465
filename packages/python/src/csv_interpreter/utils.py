import re
from typing import Iterable

from rapidfuzz import fuzz, process

# Constants
HEADER_NAME_REGEX = re.compile(r"[A-Za-z]+")
ADDRESS_REGEX = re.compile(r"([A-Za-z]+)([0-9]+)")


def split_line(line: str, delimiter: str = ",") -> list[str]:
    """Split a line on the delimiter, trimming whitespace around every token.

    A blank line has no tokens at all.
    """
    if not line.strip():
        return []
    return [token.strip() for token in line.split(delimiter)]


def is_header_name(name: str) -> bool:
    return HEADER_NAME_REGEX.fullmatch(name) is not None


def split_address(token: str) -> tuple[str, int] | None:
    """Split an address like "Cost12" into ("Cost", 12), returning None if invalid."""
    match = ADDRESS_REGEX.fullmatch(token)
    if match is None:
        return None
    name, row_id = match.groups()
    return name, int(row_id)


def format_address(name: str, row_id: int) -> str:
    return f"{name}{row_id}"


def suggest_name(
    name: str, candidates: Iterable[str], similarity: float = 0.6
) -> str | None:
    """Return the candidate closest to `name`, if it is similar enough."""
    match = process.extractOne(name, list(candidates), scorer=fuzz.ratio)
    if match is None or match[1] < similarity * 100:
        return None
    return match[0]
