"""
Passport AutoFill: identity document parsing and validation.

Extracts document number, names, dates, national ID, gender and issuing
authority from the rendered text of a passport or ID card page.
"""

from __future__ import annotations

from passport_autofill.models.document_models import DocumentRecord
from passport_autofill.services.document_assembler import DocumentAssembler, parse
from passport_autofill.services.national_id import validate_national_id

__version__ = "0.1.0"

__all__ = ["DocumentAssembler", "DocumentRecord", "parse", "validate_national_id"]
