"""Unit tests for CSV import/export of cases"""
from datetime import date

import pytest

from case.domain.domain import Case
from case.services.csv_import import (
    CSV_COLUMNS,
    export_cases_csv,
    parse_age,
    parse_cases_csv,
    parse_gender,
    parse_status,
    template_csv,
)

TODAY = date(2024, 2, 1)


def test_header_row_is_skipped():
    text = ",".join(CSV_COLUMNS) + "\nRahul Verma,34,Male,12/B Gandhi Nagar,Central District,Confirmed,+1 555 0101,2024-01-15\n"

    rows = parse_cases_csv(text, today=TODAY)

    assert len(rows) == 1
    assert rows[0].patient_name == "Rahul Verma"
    assert rows[0].age == 34
    assert rows[0].status == "Confirmed"
    assert rows[0].diagnosis_date == date(2024, 1, 15)


def test_rows_with_fewer_than_five_fields_are_dropped():
    text = "a,b,c,d\n\nName,1,Male,Addr,Loc\n"

    rows = parse_cases_csv(text, today=TODAY)

    assert [r.patient_name for r in rows] == ["Name"]


def test_missing_trailing_fields_take_defaults():
    [row] = parse_cases_csv("Sita Devi,62,Female,Old Market,Rural Block A", today=TODAY)

    assert row.status == "Suspected"
    assert row.contact_number == ""
    assert row.diagnosis_date == TODAY


def test_quoted_fields_may_contain_commas():
    [row] = parse_cases_csv('Amit Singh,45,Male,"Rural Road, Sector 4",North Sector Block 4', today=TODAY)

    assert row.address == "Rural Road, Sector 4"
    assert row.location == "North Sector Block 4"


def test_unparseable_date_falls_back_to_today():
    [row] = parse_cases_csv("A,1,Male,Addr,Loc,Confirmed,123,15/01/2024", today=TODAY)

    assert row.diagnosis_date == TODAY


@pytest.mark.parametrize("value,expected", [("34", 34), (" 7 years", 7), ("abc", 0), ("", 0)])
def test_parse_age(value, expected):
    assert parse_age(value) == expected


@pytest.mark.parametrize("value,expected", [
    ("critical", "Critical"),
    ("RECOVERED", "Recovered"),
    ("dead", "Suspected"),
    ("", "Suspected"),
])
def test_parse_status(value, expected):
    assert parse_status(value) == expected


@pytest.mark.parametrize("value,expected", [("female", "Female"), ("M", "Other"), ("", "Other")])
def test_parse_gender(value, expected):
    assert parse_gender(value) == expected


def test_template_has_header_and_example_row():
    lines = template_csv().splitlines()

    assert lines[0] == ",".join(CSV_COLUMNS)
    assert len(lines) == 2
    assert len(parse_cases_csv(template_csv(), today=TODAY)) == 1


def test_export_writes_cases_in_template_column_order():
    case = Case(
        id="101", patient_name="Rahul Verma", age=34, gender="Male",
        address="12/B Gandhi Nagar", location="Central District",
        diagnosis_date=date(2024, 1, 15), status="Confirmed", contact_number="+1 555 0101",
    )

    lines = export_cases_csv([case]).splitlines()

    assert lines == [
        ",".join(CSV_COLUMNS),
        "Rahul Verma,34,Male,12/B Gandhi Nagar,Central District,Confirmed,+1 555 0101,2024-01-15",
    ]


@pytest.mark.parametrize("preamble", ["\n", "notes,only\n", "\n\n"])
def test_header_after_blank_or_short_lines_is_skipped(preamble):
    text = preamble + ",".join(CSV_COLUMNS) + "\nA,1,Male,Addr,Loc\n"

    rows = parse_cases_csv(text, today=TODAY)

    assert [r.patient_name for r in rows] == ["A"]


def test_header_text_in_a_later_row_is_kept():
    text = "A,1,Male,Addr,Loc\n" + ",".join(CSV_COLUMNS) + "\n"

    rows = parse_cases_csv(text, today=TODAY)

    assert [r.patient_name for r in rows] == ["A", "Patient Name"]
