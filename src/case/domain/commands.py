"""Commands for case mgmt service."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from shared.domain.commands import Command


@dataclass
class CreateCase(Command):
    """Command to report a new case."""
    patient_name: str
    age: int
    gender: str
    address: str
    location: str
    diagnosis_date: date
    status: str = "Suspected"
    contact_number: str = ""


@dataclass
class LogFollowUp(Command):
    """Command to add an entry to a case's follow-up history."""
    case_id: str
    status: str
    remarks: str
    date: date
    added_by: Optional[str] = None  # name of the logged-in staff member


@dataclass
class ImportCases(Command):
    """Command to create cases from the rows of a CSV upload."""
    csv_text: str
