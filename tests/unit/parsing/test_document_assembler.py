import pytest
from pydantic import ValidationError

from passport_autofill import parse, validate_national_id
from passport_autofill.core.profile import ParserProfile
from passport_autofill.services.document_assembler import (
    BIRTH_DATE_NOT_FOUND,
    DOCUMENT_NUMBER_NOT_FOUND,
    GIVEN_NAME_NOT_FOUND,
    NATIONAL_ID_CHECKSUM_FAILED,
    NATIONAL_ID_NOT_FOUND,
    SURNAME_NOT_FOUND,
    DocumentAssembler,
)


def test_parse_passport_page(passport_text):
    record = parse(passport_text)

    assert record.is_valid is True
    assert record.errors == ()
    assert record.warnings == ()
    assert record.document_number == "N123456789"
    assert record.surname == "IVANOV"
    assert record.given_name == "IVAN"
    assert record.birth_date == "15.03.1985"
    assert record.issue_date == "01.02.2020"
    assert record.expiry_date == "01.02.2030"
    assert record.national_id == "850315300128"
    assert record.gender_code == "1"
    assert record.nationality_code == "KAZ"
    assert record.issuing_authority == "MINISTRY OF INTERNAL AFFAIRS"
    assert record.series_code == ""


def test_mrz_birth_date_wins_over_printed_dates(passport_text):
    # Printed birth date on the page is 14.03.1984, MRZ says 15.03.1985
    assert "14.03.1984" in passport_text
    assert parse(passport_text).birth_date == "15.03.1985"


def test_parse_id_card(id_card_text):
    record = parse(id_card_text)

    assert record.is_valid is True
    assert record.surname == "PETROVA"
    assert record.given_name == "ANNA MARIA"
    assert record.document_number == "N987654321"
    assert record.birth_date == "04.07.1992"
    assert record.expiry_date == "04.07.2027"
    assert record.issue_date == ""
    assert record.gender_code == "0"
    assert record.issuing_authority == "MIA OF KAZAKHSTAN"
    assert record.warnings == (NATIONAL_ID_NOT_FOUND,)


def test_national_id_does_not_override_mrz_fields(id_card_text):
    record = parse(id_card_text + "\nIIN 850315300128")

    assert record.national_id == "850315300128"
    assert record.birth_date == "04.07.1992"
    assert record.gender_code == "0"
    assert record.warnings == ()


def test_parse_printed_page_without_mrz(printed_only_text):
    record = parse(printed_only_text)

    assert record.is_valid is True
    assert record.surname == "SMIRNOVA"
    assert record.given_name == "OLGA"
    assert record.document_number == "N01234567"
    assert record.national_id == "900515400004"
    # Derived from the national ID
    assert record.birth_date == "15.05.1990"
    assert record.gender_code == "0"
    # Only two printed dates, so no date triple
    assert record.issue_date == ""
    assert record.expiry_date == ""
    assert record.warnings == ()


def test_checksum_failure_is_a_warning(printed_only_text):
    text = printed_only_text.replace("900515400004", "900515400005")
    record = parse(text)

    assert validate_national_id(record.national_id) is False
    assert record.warnings == (NATIONAL_ID_CHECKSUM_FAILED,)


def test_bad_checksum_id_does_not_supply_birth_date():
    record = parse("PASSPORT\nSMIRNOVA OLGA\nN01234567\n900515400005")

    assert record.national_id == "900515400005"
    assert record.birth_date == ""
    assert record.gender_code == ""
    assert record.errors == (BIRTH_DATE_NOT_FOUND,)
    assert record.is_valid is False
    assert record.warnings == (NATIONAL_ID_CHECKSUM_FAILED,)


def test_bad_checksum_id_keeps_mrz_birth_date(passport_text):
    record = parse(passport_text.replace("850315300128", "850315300129"))

    assert record.birth_date == "15.03.1985"
    assert record.is_valid is True
    assert NATIONAL_ID_CHECKSUM_FAILED in record.warnings


def test_gender_and_dates_from_printed_text():
    text = "\n".join(
        [
            "PASSPORT",
            "SURNAME ABAYEV",
            "GIVEN NAMES DAULET",
            "N11223344",
            "SEX M",
            "01.01.2025 01.01.2015 01.01.1980",
        ]
    )
    record = parse(text)

    assert record.birth_date == "01.01.1980"
    assert record.issue_date == "01.01.2015"
    assert record.expiry_date == "01.01.2025"
    assert record.gender_code == "1"
    assert record.warnings == (NATIONAL_ID_NOT_FOUND,)


@pytest.mark.parametrize("text", ["", None, "lorem ipsum dolor sit amet"])
def test_parse_non_document_text(text):
    record = parse(text)

    assert record.is_valid is False
    assert record.errors == (DOCUMENT_NUMBER_NOT_FOUND, BIRTH_DATE_NOT_FOUND)
    assert record.warnings == (SURNAME_NOT_FOUND, GIVEN_NAME_NOT_FOUND, NATIONAL_ID_NOT_FOUND)
    for value in (
        record.document_number,
        record.surname,
        record.given_name,
        record.birth_date,
        record.issue_date,
        record.expiry_date,
        record.national_id,
        record.gender_code,
        record.series_code,
    ):
        assert value == ""
    assert record.issuing_authority == "MIA OF KAZAKHSTAN"
    assert record.nationality_code == "KAZ"


def test_name_only_mrz_keeps_names_without_warnings():
    record = parse("IVANOV<<IVAN")

    assert record.surname == "IVANOV"
    assert record.given_name == "IVAN"
    assert SURNAME_NOT_FOUND not in record.warnings
    assert record.errors == (DOCUMENT_NUMBER_NOT_FOUND, BIRTH_DATE_NOT_FOUND)


def test_missing_given_name_warns_only_for_given_name():
    record = parse("PASSPORT NURLANOV N01234567 01.01.1980 01.01.2015 01.01.2025")

    assert record.surname == "NURLANOV"
    assert record.given_name == ""
    assert record.warnings == (GIVEN_NAME_NOT_FOUND, NATIONAL_ID_NOT_FOUND)
    assert record.is_valid is True


def test_is_valid_matches_errors(passport_text, id_card_text, printed_only_text):
    for text in (passport_text, id_card_text, printed_only_text, "", "N01234567"):
        record = parse(text)
        assert record.is_valid == (not record.errors)


def test_parse_is_idempotent(passport_text):
    assert parse(passport_text) == parse(passport_text)
    assert parse("") == parse("")


def test_custom_profile_defaults():
    assembler = DocumentAssembler(ParserProfile(default_authority="MOJ", default_nationality="UZB"))
    record = assembler.parse("")

    assert record.issuing_authority == "MOJ"
    assert record.nationality_code == "UZB"


def test_record_is_frozen(passport_text):
    record = parse(passport_text)
    with pytest.raises(ValidationError):
        record.surname = "OTHER"


def test_record_serializes_with_camel_case_aliases(passport_text):
    data = parse(passport_text).model_dump(by_alias=True)

    assert data["documentNumber"] == "N123456789"
    assert data["givenName"] == "IVAN"
    assert data["isValid"] is True
    assert data["nationalId"] == "850315300128"
