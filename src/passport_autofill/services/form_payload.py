"""
Booking form payloads.

Maps a parsed DocumentRecord onto the tourist form field names used by the
supported booking sites. Site specific values (nationality select id, forced
passport series) come from an immutable SiteTable.
"""

from __future__ import annotations

import logging
import re

from passport_autofill.core.profile import DEFAULT_SITE_TABLE, SiteTable
from passport_autofill.models.document_models import DocumentRecord, FormPayload

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

INVALID_EMAIL = "Invalid email format"


def build_form_payload(
    record: DocumentRecord,
    host: str = "",
    email: str = "",
    phone: str = "",
    sites: SiteTable = DEFAULT_SITE_TABLE,
) -> FormPayload:
    """
    Build the form field values for one tourist.

    Args:
        record: Parsed document
        host: Host name of the booking site, used to pick the site profile
        email: Contact email to fill in
        phone: Contact phone to fill in
        sites: Site profile table

    Returns:
        FormPayload keyed by form field name. A malformed email is still
        filled in and reported in the payload warnings.
    """
    site = sites.lookup(host)
    email = (email or "").strip()
    warnings = [] if not email or is_valid_email(email) else [INVALID_EMAIL]
    series = site.forced_series_code if site.force_series else record.series_code

    fields = {
        "IDENTITY_DOCUMENT": site.identity_document_id,
        "NATIONALITY": site.nationality_id,
        "LASTNAME_LNAME": record.surname,
        "FIRSTNAME_LNAME": record.given_name,
        "BORN": record.birth_date,
        "PNUMBER": record.document_number,
        "PGIVEN": record.issue_date,
        "PVALID": record.expiry_date,
        "PGIVENORG": record.issuing_authority,
        "INN": record.national_id,
        "EMAIL": email,
        "PHONE": normalize_phone(phone),
        "PSERIE": series,
        "MALE": record.gender_code,
    }
    logger.debug("Built form payload for host=%s", host or "<default>")
    return FormPayload(host=host, fields=fields, warnings=tuple(warnings))


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email or "") is not None


def normalize_phone(phone: str) -> str:
    """Strip non-digits and a leading 7 country code from 11-digit numbers."""
    digits = "".join(char for char in phone or "" if char.isdigit())
    if len(digits) == 11 and digits.startswith("7"):
        return digits[1:]
    return digits


__all__ = ["INVALID_EMAIL", "build_form_payload", "is_valid_email", "normalize_phone"]
