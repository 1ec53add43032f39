import pytest

from passport_autofill.core.profile import ParserProfile
from passport_autofill.services import field_scanner


def test_scan_name_tokens_skips_boilerplate(printed_only_text):
    assert field_scanner.scan_name_tokens(printed_only_text) == ("SMIRNOVA", "OLGA")


def test_scan_name_tokens_ignores_short_and_mixed_case_tokens():
    text = "REPUBLIC OF KAZAKHSTAN Passport AB NURLANOV Temir ERLAN"
    assert field_scanner.scan_name_tokens(text) == ("NURLANOV", "ERLAN")


def test_scan_name_tokens_partial_and_empty():
    assert field_scanner.scan_name_tokens("PASSPORT NURLANOV") == ("NURLANOV", "")
    assert field_scanner.scan_name_tokens("") == ("", "")


def test_scan_name_tokens_custom_denylist():
    assert field_scanner.scan_name_tokens("CARD HOLDER SMITH JOHN", frozenset({"CARD", "HOLDER"})) == (
        "SMITH",
        "JOHN",
    )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Passport No N01234567", "N01234567"),
        ("No. N123456789 issued", "N123456789"),
        ("N1234567", ""),
        ("no number here", ""),
    ],
)
def test_scan_document_number(text, expected):
    assert field_scanner.scan_document_number(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("IIN 900515400004", "900515400004"),
        ("ids 111111111111 then 900515400004", "111111111111"),
        ("9005154000041 too long", ""),
        ("A900515400004 glued to a letter", ""),
        ("", ""),
    ],
)
def test_scan_national_id(text, expected):
    assert field_scanner.scan_national_id(text) == expected


def test_scan_date_triple_orders_by_year():
    text = "Valid until 10.06.2035 issued 10.06.2025 born 01.12.1990"
    dates = field_scanner.scan_date_triple(text)
    assert dates.birth_date == "01.12.1990"
    assert dates.issue_date == "10.06.2025"
    assert dates.expiry_date == "10.06.2035"


def test_scan_date_triple_needs_three_dates():
    dates = field_scanner.scan_date_triple("10.06.2015 10.06.2025")
    assert (dates.birth_date, dates.issue_date, dates.expiry_date) == ("", "", "")


def test_scan_date_triple_year_heuristic_limitation():
    """Known limitation: same-year dates keep text order, so birth can come out wrong."""
    text = "issued 10.05.2015 born 01.01.2015 expires 10.05.2025"
    dates = field_scanner.scan_date_triple(text)
    assert dates.birth_date == "10.05.2015"
    assert dates.issue_date == "01.01.2015"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("SEX F", "0"),
        ("Жынысы/Пол Ж/F", "0"),
        ("ЖЕН", "0"),
        ("SEX M", "1"),
        ("Пол МУЖ", "1"),
        ("FM", ""),
        ("", ""),
    ],
)
def test_scan_gender(text, expected):
    assert field_scanner.scan_gender(text) == expected


def test_scan_gender_prefers_female_marker():
    assert field_scanner.scan_gender("M ... F") == "0"


def test_scan_authority():
    assert field_scanner.scan_authority("MINISTRY OF INTERNAL AFFAIRS") == "MINISTRY OF INTERNAL AFFAIRS"
    assert field_scanner.scan_authority("issued by MIA OF KAZAKHSTAN") == "MIA OF KAZAKHSTAN"
    assert field_scanner.scan_authority("nothing") == "MIA OF KAZAKHSTAN"
    assert field_scanner.scan_authority("", ParserProfile(default_authority="MOJ")) == "MOJ"
