"""
Checksum validation for the 12-digit national identification number.

The number encodes the holder's birth date (YYMMDD), a century/gender digit at
position 7 and a check digit at position 12. The check digit is the weighted
digit sum of the first eleven digits modulo 11; when that yields 10 the sum is
recomputed with a shifted weight vector.
"""

from __future__ import annotations

import re

from passport_autofill.models.document_models import FEMALE, MALE, BirthInfo

NATIONAL_ID_LENGTH = 12

FIRST_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)
SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 10, 11, 1, 2)

CENTURY_PREFIXES = {1: "18", 2: "18", 3: "19", 4: "19", 5: "20", 6: "20"}

_NATIONAL_ID_RE = re.compile(r"[0-9]{12}")


def is_well_formed(value: str | None) -> bool:
    """True when value is exactly 12 ASCII digits."""
    return bool(value) and _NATIONAL_ID_RE.fullmatch(value) is not None


def _weighted_sum(digits: list[int], weights: tuple[int, ...]) -> int:
    return sum(digit * weight for digit, weight in zip(digits, weights))


def compute_check_digit(value: str) -> int:
    """
    Compute the check digit over the first eleven digits of value.

    May return 10 when both weight vectors yield 10; such numbers are never
    valid because no single digit can match.
    """
    digits = [int(char) for char in value[:11]]
    check_digit = _weighted_sum(digits, FIRST_WEIGHTS) % 11
    if check_digit == 10:
        check_digit = _weighted_sum(digits, SECOND_WEIGHTS) % 11
    return check_digit


def validate_national_id(value: str | None) -> bool:
    """
    Validate a national ID against its check digit.

    Args:
        value: Candidate national ID

    Returns:
        True if value is 12 digits and the check digit matches, False otherwise
    """
    if not is_well_formed(value):
        return False
    return compute_check_digit(value) == int(value[11])


def derive_birth_info(value: str | None) -> BirthInfo | None:
    """
    Derive birth date and gender from the digits of a valid national ID.

    Returns:
        BirthInfo with a DD.MM.YYYY birth date, or None when value fails
        validation or the century digit is outside 1-6
    """
    if not validate_national_id(value):
        return None

    century = int(value[6])
    prefix = CENTURY_PREFIXES.get(century)
    if prefix is None:
        return None

    year = prefix + value[0:2]
    month = value[2:4]
    day = value[4:6]
    return BirthInfo(
        birth_date=f"{day}.{month}.{year}",
        gender_code=MALE if century % 2 == 1 else FEMALE,
    )


__all__ = [
    "NATIONAL_ID_LENGTH",
    "compute_check_digit",
    "derive_birth_info",
    "is_well_formed",
    "validate_national_id",
]
