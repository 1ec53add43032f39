"""
Heuristic field extraction from free document text.

Fallback scanners used when the MRZ is missing or incomplete. Each function
is total: no match produces an empty result rather than an exception.
"""

from __future__ import annotations

import re

from passport_autofill.core.profile import DEFAULT_PROFILE, ParserProfile
from passport_autofill.models.document_models import FEMALE, MALE, DateTriple

_NAME_TOKEN_RE = re.compile(r"\b[A-Z]{3,}\b", re.ASCII)
_DOCUMENT_NUMBER_RE = re.compile(r"N([0-9]{8,9})")
_NATIONAL_ID_RE = re.compile(r"\b([0-9]{12})\b", re.ASCII)
_DATE_RE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")
_FEMALE_TOKEN_RE = re.compile(r"\bF\b", re.ASCII)
_MALE_TOKEN_RE = re.compile(r"\bM\b", re.ASCII)

MIN_NAME_LENGTH = 3


def scan_name_tokens(
    text: str, denylist: frozenset[str] = DEFAULT_PROFILE.denylist
) -> tuple[str, str]:
    """Return (surname, given name) from the first two non-boilerplate uppercase tokens."""
    tokens = [
        token
        for token in _NAME_TOKEN_RE.findall(text or "")
        if token not in denylist and len(token) >= MIN_NAME_LENGTH
    ]
    surname = tokens[0] if tokens else ""
    given_name = tokens[1] if len(tokens) > 1 else ""
    return surname, given_name


def scan_document_number(text: str) -> str:
    match = _DOCUMENT_NUMBER_RE.search(text or "")
    return "N" + match.group(1) if match else ""


def scan_national_id(text: str) -> str:
    match = _NATIONAL_ID_RE.search(text or "")
    return match.group(1) if match else ""


def _year(date: str) -> int:
    return int(date[6:10])


def scan_date_triple(text: str) -> DateTriple:
    """
    Assign birth, issue and expiry dates from printed DD.MM.YYYY dates.

    Needs at least three dates. They are ordered by year (ties keep text
    order) and assumed to read birth < issue < expiry, which does not hold
    for every document.
    """
    dates = _DATE_RE.findall(text or "")
    if len(dates) < 3:
        return DateTriple()
    ordered = sorted(dates, key=_year)
    return DateTriple(birth_date=ordered[0], issue_date=ordered[1], expiry_date=ordered[2])


def scan_gender(text: str, profile: ParserProfile = DEFAULT_PROFILE) -> str:
    text = text or ""
    if _FEMALE_TOKEN_RE.search(text) or any(marker in text for marker in profile.female_markers):
        return FEMALE
    if _MALE_TOKEN_RE.search(text) or any(marker in text for marker in profile.male_markers):
        return MALE
    return ""


def scan_authority(text: str, profile: ParserProfile = DEFAULT_PROFILE) -> str:
    text = text or ""
    for authority in profile.known_authorities:
        if authority in text:
            return authority
    return profile.default_authority


__all__ = [
    "scan_authority",
    "scan_date_triple",
    "scan_document_number",
    "scan_gender",
    "scan_name_tokens",
    "scan_national_id",
]
