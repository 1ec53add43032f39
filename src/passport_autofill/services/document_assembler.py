"""
Document assembly: runs the extraction stages over document text and builds
the final DocumentRecord.

Stage order is fixed: MRZ decode, name fallback, document number fallback,
national ID check and derivation, printed date fallback, gender fallback,
issuing authority, required field checks. A field set by an earlier stage is
never overwritten by a later one.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field

from passport_autofill.core.profile import DEFAULT_PROFILE, ParserProfile
from passport_autofill.models.document_models import DocumentRecord
from passport_autofill.services import field_scanner
from passport_autofill.services.mrz_decoder import decode_mrz
from passport_autofill.services.national_id import derive_birth_info, validate_national_id

logger = logging.getLogger(__name__)

# Hard errors
DOCUMENT_NUMBER_NOT_FOUND = "Document number not found"
BIRTH_DATE_NOT_FOUND = "Birth date not found"

# Warnings
SURNAME_NOT_FOUND = "Surname not found"
GIVEN_NAME_NOT_FOUND = "Given name not found"
NATIONAL_ID_NOT_FOUND = "National ID not found"
NATIONAL_ID_CHECKSUM_FAILED = "National ID checksum validation failed"


@dataclass
class _WorkingRecord:
    document_number: str = ""
    surname: str = ""
    given_name: str = ""
    birth_date: str = ""
    issue_date: str = ""
    expiry_date: str = ""
    national_id: str = ""
    issuing_authority: str = ""
    gender_code: str = ""
    series_code: str = ""
    nationality_code: str = ""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def fill(self, name: str, value: str | None) -> None:
        """Set a field only if it is still empty and value is non-empty."""
        if value and not getattr(self, name):
            setattr(self, name, value)

    def freeze(self) -> DocumentRecord:
        data = asdict(self)
        data["errors"] = tuple(self.errors)
        data["warnings"] = tuple(self.warnings)
        return DocumentRecord(is_valid=not self.errors, **data)


class DocumentAssembler:
    """Builds a DocumentRecord from document text using a fixed parser profile."""

    def __init__(self, profile: ParserProfile = DEFAULT_PROFILE) -> None:
        self.profile = profile

    def parse(self, text: str | None) -> DocumentRecord:
        """
        Extract and validate identity document fields.

        Never raises: missing fields are reported through the record's
        ``errors`` (document number, birth date) and ``warnings``.
        """
        text = text or ""
        record = _WorkingRecord()

        self._merge_mrz(record, text)
        self._resolve_names(record, text)
        self._resolve_document_number(record, text)
        self._resolve_national_id(record, text)
        self._resolve_dates(record, text)

        if not record.gender_code:
            record.fill("gender_code", field_scanner.scan_gender(text, self.profile))

        # Authority always comes from the text scan; it has a non-empty default
        record.issuing_authority = field_scanner.scan_authority(text, self.profile)
        record.fill("nationality_code", self.profile.default_nationality)

        if not record.birth_date:
            record.errors.append(BIRTH_DATE_NOT_FOUND)

        result = record.freeze()
        logger.debug(
            "Parsed document: valid=%s errors=%d warnings=%d",
            result.is_valid,
            len(result.errors),
            len(result.warnings),
            extra={"stage": "assemble"},
        )
        return result

    def _merge_mrz(self, record: _WorkingRecord, text: str) -> None:
        mrz = decode_mrz(text, self.profile)
        if mrz is None:
            logger.debug("No MRZ content found", extra={"stage": "mrz"})
            return
        record.fill("surname", mrz.surname)
        record.fill("given_name", mrz.given_name)
        record.fill("document_number", mrz.document_number)
        record.fill("nationality_code", mrz.nationality_code)
        record.fill("birth_date", mrz.birth_date)
        record.fill("expiry_date", mrz.expiry_date)
        record.fill("gender_code", mrz.gender_code)

    def _resolve_names(self, record: _WorkingRecord, text: str) -> None:
        if record.surname and record.given_name:
            return
        surname, given_name = field_scanner.scan_name_tokens(text, self.profile.denylist)
        record.fill("surname", surname)
        record.fill("given_name", given_name)
        if not record.surname:
            record.warnings.append(SURNAME_NOT_FOUND)
        if not record.given_name:
            record.warnings.append(GIVEN_NAME_NOT_FOUND)

    def _resolve_document_number(self, record: _WorkingRecord, text: str) -> None:
        record.fill("document_number", field_scanner.scan_document_number(text))
        if not record.document_number:
            record.errors.append(DOCUMENT_NUMBER_NOT_FOUND)

    def _resolve_national_id(self, record: _WorkingRecord, text: str) -> None:
        national_id = field_scanner.scan_national_id(text)
        if not national_id:
            record.warnings.append(NATIONAL_ID_NOT_FOUND)
            return

        record.fill("national_id", national_id)
        if not validate_national_id(national_id):
            logger.debug("National ID checksum mismatch", extra={"stage": "national_id"})
            record.warnings.append(NATIONAL_ID_CHECKSUM_FAILED)
            return

        birth_info = derive_birth_info(national_id)
        if birth_info is not None:
            record.fill("birth_date", birth_info.birth_date)
            record.fill("gender_code", birth_info.gender_code)

    def _resolve_dates(self, record: _WorkingRecord, text: str) -> None:
        if record.birth_date and record.issue_date and record.expiry_date:
            return
        dates = field_scanner.scan_date_triple(text)
        record.fill("birth_date", dates.birth_date)
        record.fill("issue_date", dates.issue_date)
        record.fill("expiry_date", dates.expiry_date)


_default_assembler = DocumentAssembler()


def parse(text: str | None) -> DocumentRecord:
    """Parse document text with the default parser profile."""
    return _default_assembler.parse(text)


__all__ = [
    "BIRTH_DATE_NOT_FOUND",
    "DOCUMENT_NUMBER_NOT_FOUND",
    "GIVEN_NAME_NOT_FOUND",
    "NATIONAL_ID_CHECKSUM_FAILED",
    "NATIONAL_ID_NOT_FOUND",
    "SURNAME_NOT_FOUND",
    "DocumentAssembler",
    "parse",
]
