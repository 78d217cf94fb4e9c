"""Field validators for the booking configuration"""

import re
from datetime import date

LICENCE_PATTERN = re.compile(r"^[A-Za-z0-9]{16}$")
POSTCODE_PATTERN = re.compile(r"^[A-Za-z]{1,2}[0-9][A-Za-z0-9]? ?[0-9][A-Za-z]{2}$", re.IGNORECASE | re.ASCII)
INSTRUCTOR_PATTERN = re.compile(r"^[0-9]+$")
DATE_PATTERN = re.compile(r"^([0-9]{2})/([0-9]{2})/([0-9]{4})$")


def is_valid_licence(value):
    """16 letters or digits, nothing else"""
    return isinstance(value, str) and LICENCE_PATTERN.fullmatch(value) is not None


def is_valid_postcode(value):
    """UK postcode, case-insensitive, optional single space before the inward code"""
    return isinstance(value, str) and POSTCODE_PATTERN.fullmatch(value) is not None


def is_valid_instructor(value):
    """Non-empty, digits only. Callers decide whether empty means 'not provided'."""
    return isinstance(value, str) and INSTRUCTOR_PATTERN.fullmatch(value) is not None


def is_valid_date(value):
    """DD/MM/YYYY that is also a real calendar date (31/02 and 29/02/2023 fail)"""
    if not isinstance(value, str):
        return False
    match = DATE_PATTERN.fullmatch(value)
    if match is None:
        return False
    day, month, year = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True
