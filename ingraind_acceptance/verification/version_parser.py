# ingraind_acceptance/verification/version_parser.py
# VersionParser -- kernel release string to comparable integer version code.
#
# Grammar of a significant field: one or more ASCII digits; the first
# non-digit character ends the field and everything after it is discarded.
#   "5.4.0-42-generic" -> fields "5", "4", "0-42-generic" -> 5, 4, 0
#
# Version code = major * 10000 + minor * 100 + patch.
# minor and patch are not range checked. A value >= 100 overflows into the
# neighbouring weight (5.100.0 == 6.0.0).

from typing import Tuple

from ingraind_acceptance.utils.constants import (
    VERSION_MAJOR_WEIGHT,
    VERSION_MINOR_WEIGHT,
)
from ingraind_acceptance.verification.exceptions import ParseError

_DIGITS = frozenset("0123456789")
_FIELD_NAMES = ("major", "minor", "patch")


def _strip_prefix(text: str) -> str:
    """Drop everything before the first ASCII digit."""
    for index, char in enumerate(text):
        if char in _DIGITS:
            return text[index:]
    return ""


def _leading_number(field: str) -> Tuple[int, bool]:
    """
    Read the run of ASCII digits at the start of field.
    Returns (value, found). found is False when field starts with a non-digit.
    """
    end = 0
    while end < len(field) and field[end] in _DIGITS:
        end += 1
    if end == 0:
        return 0, False
    return int(field[:end]), True


def compose_version_code(major: int, minor: int, patch: int) -> int:
    return major * VERSION_MAJOR_WEIGHT + minor * VERSION_MINOR_WEIGHT + patch


def parse_kernel_version(raw: str) -> int:
    """
    Convert a kernel release string (as printed by ``uname -r``) into a
    version code.

    Surrounding whitespace and any leading non-numeric prefix are ignored.
    The first three dot-separated fields are significant.

    Raises:
        ParseError if raw is not a string, has fewer than three dot-separated
        fields, or one of the first three fields does not start with a digit.
    """
    if not isinstance(raw, str):
        raise ParseError(raw, "expected a string, got " + type(raw).__name__)

    text = _strip_prefix(raw.strip())
    if not text:
        raise ParseError(raw, "no numeric field found")

    fields = text.split(".")
    if len(fields) < 3:
        raise ParseError(
            raw, "expected at least 3 dot-separated fields, found " + str(len(fields))
        )

    numbers = []
    for name, field in zip(_FIELD_NAMES, fields[:3]):
        value, found = _leading_number(field)
        if not found:
            raise ParseError(raw, name + " field " + repr(field) + " does not start with a digit")
        numbers.append(value)

    major, minor, patch = numbers
    return compose_version_code(major, minor, patch)
