"""
API endpoints for the Passport AutoFill service
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from passport_autofill.api.deps import get_document_assembler, verify_api_key
from passport_autofill.core.config import settings
from passport_autofill.models.document_models import (
    AgeReport,
    AgeRequest,
    DocumentRecord,
    ExpiryReport,
    ExpiryRequest,
    FillCheck,
    FormPayload,
    FormPayloadRequest,
    HealthResponse,
    NationalIdReport,
    NationalIdRequest,
    ParseRequest,
    TransliterateRequest,
    TransliterateResponse,
)
from passport_autofill.services import document_tools
from passport_autofill.services.document_assembler import DocumentAssembler
from passport_autofill.services.form_payload import build_form_payload

logger = logging.getLogger(__name__)

router = APIRouter()

# Store server start time for uptime calculation
START_TIME = time.time()


@router.get("/api/ping", response_class=PlainTextResponse, tags=["Health"])
async def ping() -> str:
    """
    Liveness ping endpoint
    Returns 'OK' if the service is running.
    """
    return "OK"


@router.get("/api/health", response_model=HealthResponse, tags=["Health"])
async def health() -> HealthResponse:
    """
    Readiness/health details endpoint
    """
    uptime_sec = int(time.time() - START_TIME)
    return HealthResponse(status="ready", version=settings.VERSION, uptimeSec=uptime_sec)


@router.post("/api/parse", response_model=DocumentRecord, tags=["Parse"])
async def parse_document(
    request: ParseRequest,
    assembler: DocumentAssembler = Depends(get_document_assembler),
    _: bool = Depends(verify_api_key),
) -> DocumentRecord:
    """
    Parse the rendered text of a passport or ID card page

    The response always has status 200; missing document number or birth
    date are reported in ``errors`` with ``isValid`` set to false.
    """
    logger.info("Parsing document text (%d chars)", len(request.text))
    record = assembler.parse(request.text)
    if not record.is_valid:
        logger.info("Document incomplete: %s", ", ".join(record.errors))
    return record


@router.post("/api/national-id/validate", response_model=NationalIdReport, tags=["Tools"])
async def validate_national_id(
    request: NationalIdRequest,
    _: bool = Depends(verify_api_key),
) -> NationalIdReport:
    """
    Validate a 12-digit national ID and decode its birth date and gender
    """
    return document_tools.inspect_national_id(request.national_id)


@router.post("/api/tools/expiry", response_model=ExpiryReport, tags=["Tools"])
async def check_expiry(
    request: ExpiryRequest,
    _: bool = Depends(verify_api_key),
) -> ExpiryReport:
    """
    Report days and months left before a document expires
    """
    return document_tools.check_expiry(
        request.expiry_date, warning_months=settings.EXPIRY_WARNING_MONTHS
    )


@router.post("/api/tools/age", response_model=AgeReport, tags=["Tools"])
async def calculate_age(
    request: AgeRequest,
    _: bool = Depends(verify_api_key),
) -> AgeReport:
    """
    Calculate the traveller's age and category from a birth date
    """
    return document_tools.calculate_age(
        request.birth_date, adult_age=settings.ADULT_AGE, child_age=settings.CHILD_AGE
    )


@router.post("/api/tools/transliterate", response_model=TransliterateResponse, tags=["Tools"])
async def transliterate(
    request: TransliterateRequest,
    _: bool = Depends(verify_api_key),
) -> TransliterateResponse:
    """
    Transliterate Cyrillic text to uppercase Latin
    """
    return TransliterateResponse(result=document_tools.transliterate(request.text))


@router.post("/api/fill-check", response_model=FillCheck, tags=["Fill"])
async def fill_check(
    record: DocumentRecord,
    _: bool = Depends(verify_api_key),
) -> FillCheck:
    """
    Check whether a parsed record can be used to fill a booking form
    """
    return document_tools.check_fill_readiness(
        record, warning_months=settings.EXPIRY_WARNING_MONTHS
    )


@router.post("/api/form-payload", response_model=FormPayload, tags=["Fill"])
async def form_payload(
    request: FormPayloadRequest,
    _: bool = Depends(verify_api_key),
) -> FormPayload:
    """
    Map a parsed record to booking form field values for the given site
    """
    return build_form_payload(
        request.record, host=request.host, email=request.email, phone=request.phone
    )
