"""
Standalone document tools: national ID inspection, expiry and age checks,
Cyrillic transliteration and fill readiness of a parsed record.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime

from passport_autofill.core.errors import InvalidInputError
from passport_autofill.models.document_models import (
    AgeCategory,
    AgeReport,
    DocumentRecord,
    ExpiryReport,
    ExpiryStatus,
    FillCheck,
    NationalIdReport,
)
from passport_autofill.services.national_id import (
    derive_birth_info,
    is_well_formed,
    validate_national_id,
)

logger = logging.getLogger(__name__)

DISPLAY_DATE_FORMAT = "%d.%m.%Y"
DAYS_PER_MONTH = 30
MIN_NAME_LENGTH = 2

NATIONAL_ID_FORMAT_ERROR = "National ID must be 12 digits"
NATIONAL_ID_CHECKSUM_ERROR = "Invalid checksum"

CYRILLIC_TO_LATIN = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
}  # fmt: skip


def parse_display_date(value: str, label: str = "date") -> date:
    """
    Parse a DD.MM.YYYY date.

    Raises:
        InvalidInputError: If value is not a real calendar date in that format
    """
    try:
        return datetime.strptime((value or "").strip(), DISPLAY_DATE_FORMAT).date()
    except ValueError as exc:
        msg = f"Invalid {label}: use DD.MM.YYYY format"
        raise InvalidInputError(msg) from exc


def inspect_national_id(value: str) -> NationalIdReport:
    """Validate a national ID and, when valid, report the birth date and gender it encodes."""
    value = (value or "").strip()
    if not is_well_formed(value):
        return NationalIdReport(national_id=value, valid=False, error=NATIONAL_ID_FORMAT_ERROR)
    if not validate_national_id(value):
        return NationalIdReport(national_id=value, valid=False, error=NATIONAL_ID_CHECKSUM_ERROR)

    birth_info = derive_birth_info(value)
    return NationalIdReport(
        national_id=value,
        valid=True,
        birth_date=birth_info.birth_date if birth_info else None,
        gender_code=birth_info.gender_code if birth_info else None,
    )


def check_expiry(expiry_date: str, today: date | None = None, warning_months: int = 6) -> ExpiryReport:
    """
    Classify how long a document remains valid.

    Months are counted as 30-day blocks. Documents with fewer than
    ``warning_months`` left get a warning status.
    """
    expiry = parse_display_date(expiry_date, "expiry date")
    today = today or date.today()
    days = (expiry - today).days

    if days < 0:
        status = ExpiryStatus.EXPIRED
    elif days / DAYS_PER_MONTH < warning_months:
        status = ExpiryStatus.WARNING
    else:
        status = ExpiryStatus.VALID

    return ExpiryReport(
        expiry_date=expiry_date.strip(),
        status=status,
        days_remaining=days,
        months_remaining=days // DAYS_PER_MONTH,
    )


def calculate_age(
    birth_date: str, today: date | None = None, adult_age: int = 18, child_age: int = 2
) -> AgeReport:
    """Compute age in years, months and days and classify the traveller."""
    born = parse_display_date(birth_date, "birth date")
    today = today or date.today()

    years = today.year - born.year
    months = today.month - born.month
    days = today.day - born.day

    if days < 0:
        months -= 1
        previous_month = today.month - 1 or 12
        previous_year = today.year if today.month > 1 else today.year - 1
        days += calendar.monthrange(previous_year, previous_month)[1]
    if months < 0:
        years -= 1
        months += 12

    if years >= adult_age:
        category = AgeCategory.ADULT
    elif years >= child_age:
        category = AgeCategory.CHILD
    else:
        category = AgeCategory.INFANT

    return AgeReport(
        birth_date=birth_date.strip(), years=years, months=months, days=days, category=category
    )


def transliterate(text: str) -> str:
    """Transliterate Cyrillic text to uppercase Latin."""
    text = (text or "").strip()
    if not text:
        msg = "Enter text to transliterate"
        raise InvalidInputError(msg)

    result = []
    for char in text:
        latin = CYRILLIC_TO_LATIN.get(char.lower())
        if latin is None:
            result.append(char)
        elif char.isupper():
            result.append(latin.upper())
        else:
            result.append(latin)
    return "".join(result).upper()


def check_fill_readiness(
    record: DocumentRecord, today: date | None = None, warning_months: int = 6
) -> FillCheck:
    """
    Decide whether a parsed record is complete enough to fill a booking form.

    A missing document number or birth date, or an expired document, blocks
    filling. Everything else is reported as a warning.
    """
    warnings: list[str] = []
    ready = True

    if len(record.surname) < MIN_NAME_LENGTH:
        warnings.append("Surname is too short or missing")
    if len(record.given_name) < MIN_NAME_LENGTH:
        warnings.append("Given name is too short or missing")
    if not record.document_number:
        warnings.append("Document number is missing")
        ready = False
    if not record.birth_date:
        warnings.append("Birth date is missing")
        ready = False

    if record.expiry_date:
        try:
            expiry = check_expiry(record.expiry_date, today, warning_months)
        except InvalidInputError:
            logger.debug("Unreadable expiry date on record: %s", record.expiry_date)
            warnings.append("Document expiry date is unreadable")
        else:
            if expiry.status is ExpiryStatus.EXPIRED:
                warnings.append("Document expired")
                ready = False
            elif expiry.status is ExpiryStatus.WARNING:
                warnings.append(f"Document expires in less than {warning_months} months")
    else:
        warnings.append("Document expiry date is missing")

    if is_well_formed(record.national_id) and not validate_national_id(record.national_id):
        warnings.append("National ID checksum validation failed")

    return FillCheck(ready=ready, warnings=tuple(warnings))


__all__ = [
    "calculate_age",
    "check_expiry",
    "check_fill_readiness",
    "inspect_national_id",
    "parse_display_date",
    "transliterate",
]
