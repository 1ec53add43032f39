"""
Machine Readable Zone (MRZ) decoding for document page text.

Decodes the two-line zone printed on national ID cards and passports
(ICAO Doc 9303 field positions). Only field layout is decoded; MRZ check
digits are not verified.

Name line (both layouts):
    type (2) + issuing state (3) + SURNAME<<GIVEN<NAMES
Data line:
    document number (9) + check (1) + nationality (3) + birth YYMMDD (6) +
    check (1) + sex (1) + expiry YYMMDD (6) + ...
"""

from __future__ import annotations

import logging
import re

from passport_autofill.core.profile import DEFAULT_PROFILE, ParserProfile
from passport_autofill.models.document_models import FEMALE, MALE, MRZFields, MRZLayout

logger = logging.getLogger(__name__)

FILLER = "<"
MIN_LINE_LENGTH = 30
DOCUMENT_NUMBER_PREFIX = "N"
CENTURY_PIVOT = 50

_ID_CARD_PREFIX_RE = re.compile(r"^(?:I<[A-Z]{3}|ID)")
_NAME_RE = re.compile(r"([A-Z]+)<<(.+)")
_LOOSE_NAME_RE = re.compile(r"([A-Z]+)<<([A-Z]+(?:<[A-Z]+)*)")
_FILLER_RUN_RE = re.compile(r"<+")
_COUNTRY_CODE_RE = re.compile(r"[A-Z]{3}")
_MRZ_DATE_RE = re.compile(r"[0-9]{6}")


def format_mrz_date(raw: str | None) -> str:
    """
    Convert a YYMMDD MRZ date to DD.MM.YYYY.

    Two-digit years below 50 are read as 20YY, the rest as 19YY. Anything
    other than six digits yields an empty string.
    """
    if not raw or _MRZ_DATE_RE.fullmatch(raw) is None:
        return ""
    year = int(raw[0:2])
    full_year = 2000 + year if year < CENTURY_PIVOT else 1900 + year
    return f"{raw[4:6]}.{raw[2:4]}.{full_year}"


def _candidate_lines(text: str) -> list[str]:
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if len(line) >= MIN_LINE_LENGTH]


def _classify(line: str) -> MRZLayout | None:
    if _ID_CARD_PREFIX_RE.match(line):
        return MRZLayout.ID_CARD
    if line.startswith("P<"):
        return MRZLayout.PASSPORT
    return None


def _clean_given_name(raw: str) -> str:
    return _FILLER_RUN_RE.sub(" ", raw).strip()


def _decode_name_line(line: str) -> tuple[str, str]:
    match = _NAME_RE.search(line[5:])
    if match is None:
        return "", ""
    return match.group(1).replace(FILLER, ""), _clean_given_name(match.group(2))


def _decode_document_number(data_line: str) -> str:
    number = data_line[0:9].rstrip(FILLER)
    return DOCUMENT_NUMBER_PREFIX + number if number else ""


def _decode_pair(
    name_line: str, data_line: str, layout: MRZLayout, profile: ParserProfile
) -> MRZFields:
    surname, given_name = _decode_name_line(name_line)

    if layout is MRZLayout.PASSPORT:
        nationality = data_line[10:13]
    else:
        issuing_state = name_line[2:5]
        if _COUNTRY_CODE_RE.fullmatch(issuing_state):
            nationality = issuing_state
        else:
            nationality = profile.default_nationality

    return MRZFields(
        layout=layout,
        surname=surname,
        given_name=given_name,
        document_number=_decode_document_number(data_line),
        nationality_code=nationality,
        birth_date=format_mrz_date(data_line[13:19]),
        expiry_date=format_mrz_date(data_line[21:27]),
        gender_code=MALE if data_line[20:21] == "M" else FEMALE,
    )


def decode_mrz(text: str, profile: ParserProfile = DEFAULT_PROFILE) -> MRZFields | None:
    """
    Locate and decode a two-line MRZ in document text.

    Adjacent candidate lines are scanned in order and the first pair whose
    first line carries an ID-card (``I<XXX`` / ``ID``) or passport (``P<``)
    prefix is decoded. When no pair matches, a bare ``SURNAME<<GIVEN<NAMES``
    group anywhere in the text yields name-only fields.

    Args:
        text: Full document text, newline-delimited
        profile: Parser profile supplying the default nationality

    Returns:
        MRZFields with empty strings for anything not decoded, or None when no
        MRZ content was found
    """
    if not text:
        return None

    lines = _candidate_lines(text)
    for name_line, data_line in zip(lines, lines[1:]):
        layout = _classify(name_line)
        if layout is None:
            continue
        logger.debug(
            "MRZ %s layout found", layout.value, extra={"stage": "mrz", "layout": layout.value}
        )
        return _decode_pair(name_line, data_line, layout, profile)

    match = _LOOSE_NAME_RE.search(text)
    if match:
        logger.debug(
            "MRZ name group found outside a fixed layout",
            extra={"stage": "mrz", "layout": MRZLayout.NAME_ONLY.value},
        )
        return MRZFields(
            layout=MRZLayout.NAME_ONLY,
            surname=match.group(1),
            given_name=_clean_given_name(match.group(2)),
        )

    return None


__all__ = ["CENTURY_PIVOT", "MIN_LINE_LENGTH", "decode_mrz", "format_mrz_date"]
