"""
CSV template, import and export for case reports.

Rows are mapped by position onto the 8 template columns. Import is lenient:
short rows are dropped, unknown values fall back to defaults.
"""

import csv
import io
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from case.domain.domain import Case, CASE_STATUSES, GENDERS, DEFAULT_CASE_STATUS

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "Patient Name",
    "Age",
    "Gender",
    "Address",
    "Location",
    "Status",
    "Contact Number",
    "Diagnosis Date",
]

MIN_FIELDS = 5

TEMPLATE_EXAMPLE_ROW = [
    "Rahul Verma", "34", "Male", "12/B Gandhi Nagar", "Central District",
    "Confirmed", "+1 555 0101", "2024-01-15",
]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class CaseRow:
    """One parsed CSV row, ready to become a case."""
    patient_name: str
    age: int
    gender: str
    address: str
    location: str
    status: str
    contact_number: str
    diagnosis_date: date


def parse_age(value: str) -> int:
    """Leading integer of the value, 0 when there is none."""
    match = _LEADING_INT_RE.match(value or "")
    return int(match.group(1)) if match else 0


def parse_status(value: str) -> str:
    for status in CASE_STATUSES:
        if status.lower() == (value or "").strip().lower():
            return status
    return DEFAULT_CASE_STATUS


def parse_gender(value: str) -> str:
    for gender in GENDERS:
        if gender.lower() == (value or "").strip().lower():
            return gender
    return "Other"


def parse_date(value: str, default: date) -> date:
    try:
        return date.fromisoformat((value or "").strip())
    except ValueError:
        return default


def _is_header(fields: List[str]) -> bool:
    return fields[0].strip().lower() == CSV_COLUMNS[0].lower()


def parse_cases_csv(text: str, today: Optional[date] = None) -> List[CaseRow]:
    """
    Parse newline/comma separated case rows.

    Args:
        text: CSV content, with or without the template header
        today: Diagnosis date used when a row has none (defaults to date.today())

    Returns:
        Parsed rows in file order; rows with fewer than 5 fields are left out
    """
    today = today or date.today()
    rows = []
    skipped = 0
    seen_data_row = False

    for fields in csv.reader(io.StringIO(text)):
        if len(fields) < MIN_FIELDS:
            skipped += 1
            continue
        # only the first usable row can be the header
        first_row, seen_data_row = not seen_data_row, True
        if first_row and _is_header(fields):
            continue

        fields = [f.strip() for f in fields] + [""] * (len(CSV_COLUMNS) - len(fields))
        rows.append(
            CaseRow(
                patient_name=fields[0],
                age=parse_age(fields[1]),
                gender=parse_gender(fields[2]),
                address=fields[3],
                location=fields[4],
                status=parse_status(fields[5]),
                contact_number=fields[6],
                diagnosis_date=parse_date(fields[7], today),
            )
        )

    logger.debug(f"Parsed {len(rows)} case rows, skipped {skipped} short rows")
    return rows


def _write_rows(rows: Iterable[List[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    writer.writerows(rows)
    return buffer.getvalue()


def template_csv() -> str:
    """Header plus one example row."""
    return _write_rows([TEMPLATE_EXAMPLE_ROW])


def export_cases_csv(cases: Iterable[Case]) -> str:
    return _write_rows(
        [
            c.patient_name,
            str(c.age),
            c.gender,
            c.address,
            c.location,
            c.status,
            c.contact_number,
            c.diagnosis_date.isoformat() if c.diagnosis_date else "",
        ]
        for c in cases
    )
