"""
Test configuration for the Passport AutoFill test suite.
"""

from __future__ import annotations

import os
from datetime import date

import pytest

# Settings are read at import time; pin the environment before the app loads
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("USE_API_KEY", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from passport_autofill.main import app  # noqa: E402


# Test markers
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "api: mark test as exercising the HTTP API")
    config.addinivalue_line("markers", "mrz: mark test as MRZ related")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location and name."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
        if "api" in str(item.path):
            item.add_marker(pytest.mark.api)
        if "mrz" in item.name.lower():
            item.add_marker(pytest.mark.mrz)


PASSPORT_TEXT = "\n".join(
    [
        "REPUBLIC OF KAZAKHSTAN",
        "PASSPORT",
        "Type P Code of State KAZ",
        "Surname / IVANOV",
        "Given names / IVAN",
        "Date of birth 14.03.1984",
        "SEX M",
        "Date of issue 01.02.2020",
        "Date of expiry 01.02.2030",
        "IIN 850315300128",
        "Authority MINISTRY OF INTERNAL AFFAIRS",
        "P<KAZIVANOV<<IVAN<<<<<<<<<<<<<<<<<<<<<<<<<<<",
        "1234567890KAZ8503151M3002010<<<<<<<<<<<<<<02",
    ]
)

ID_CARD_TEXT = "\n".join(
    [
        "IDENTITY CARD",
        "I<KAZPETROVA<<ANNA<MARIA<<<<<<<<",
        "9876543210KAZ9207045F2707043<<<<",
    ]
)

# No MRZ: every field has to come from the printed text
PRINTED_ONLY_TEXT = "\n".join(
    [
        "PASSPORT",
        "SURNAME SMIRNOVA",
        "GIVEN NAMES OLGA",
        "No N01234567",
        "900515400004",
        "Issued 10.06.2015  Valid until 10.06.2025",
    ]
)


@pytest.fixture
def passport_text() -> str:
    return PASSPORT_TEXT


@pytest.fixture
def id_card_text() -> str:
    return ID_CARD_TEXT


@pytest.fixture
def printed_only_text() -> str:
    return PRINTED_ONLY_TEXT


@pytest.fixture
def today() -> date:
    """Fixed reference date for expiry and age checks."""
    return date(2026, 10, 16)


@pytest.fixture
def client():
    """
    Create a test client for the FastAPI app
    """
    with TestClient(app) as test_client:
        test_client.headers.update({"X-API-Key": "test_api_key"})
        yield test_client
