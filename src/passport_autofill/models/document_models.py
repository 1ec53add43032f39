"""Pydantic models for parsed identity documents and the Passport AutoFill API.

Attributes are snake_case; JSON uses the camelCase aliases consumed by the
browser extension (``documentNumber``, ``birthDate`` ...).
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MALE = "1"
FEMALE = "0"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _FrozenCamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DocumentRecord(_FrozenCamelModel):
    """Result of a single parse call."""

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
    is_valid: bool = True
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


class BirthInfo(_FrozenCamelModel):
    birth_date: str
    gender_code: str


class MRZLayout(str, Enum):
    ID_CARD = "id_card"
    PASSPORT = "passport"
    NAME_ONLY = "name_only"


class MRZFields(_FrozenCamelModel):
    """Fields decoded from a machine-readable zone; unmatched fields are empty."""

    layout: MRZLayout
    surname: str = ""
    given_name: str = ""
    document_number: str = ""
    nationality_code: str = ""
    birth_date: str = ""
    expiry_date: str = ""
    gender_code: str = ""


class DateTriple(_FrozenCamelModel):
    birth_date: str = ""
    issue_date: str = ""
    expiry_date: str = ""


class ExpiryStatus(str, Enum):
    VALID = "valid"
    WARNING = "warning"
    EXPIRED = "expired"


class AgeCategory(str, Enum):
    ADULT = "adult"
    CHILD = "child"
    INFANT = "infant"


class NationalIdReport(_FrozenCamelModel):
    national_id: str
    valid: bool
    error: str | None = None
    birth_date: str | None = None
    gender_code: str | None = None


class ExpiryReport(_FrozenCamelModel):
    expiry_date: str
    status: ExpiryStatus
    days_remaining: int
    months_remaining: int


class AgeReport(_FrozenCamelModel):
    birth_date: str
    years: int
    months: int
    days: int
    category: AgeCategory


class FillCheck(_FrozenCamelModel):
    ready: bool
    warnings: tuple[str, ...] = ()


class FormPayload(_FrozenCamelModel):
    host: str
    fields: dict[str, str]
    warnings: tuple[str, ...] = ()


# Request / response bodies


class ParseRequest(_CamelModel):
    text: str = Field(..., description="Rendered text of the document page")


class NationalIdRequest(_CamelModel):
    national_id: str


class ExpiryRequest(_CamelModel):
    expiry_date: str


class AgeRequest(_CamelModel):
    birth_date: str


class TransliterateRequest(_CamelModel):
    text: str


class TransliterateResponse(_CamelModel):
    result: str


class FormPayloadRequest(_CamelModel):
    record: DocumentRecord
    host: str = ""
    email: str = ""
    phone: str = ""


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class HealthResponse(BaseModel):
    status: str = "ready"
    version: str
    uptimeSec: int


__all__ = [
    "FEMALE",
    "MALE",
    "AgeCategory",
    "AgeReport",
    "AgeRequest",
    "BirthInfo",
    "DateTriple",
    "DocumentRecord",
    "ErrorResponse",
    "ExpiryReport",
    "ExpiryRequest",
    "ExpiryStatus",
    "FillCheck",
    "FormPayload",
    "FormPayloadRequest",
    "HealthResponse",
    "MRZFields",
    "MRZLayout",
    "NationalIdReport",
    "NationalIdRequest",
    "ParseRequest",
    "TransliterateRequest",
    "TransliterateResponse",
]
