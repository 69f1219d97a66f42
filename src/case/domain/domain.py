from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional
from uuid import uuid4

from case.domain.events import CaseCreated, FollowUpLogged

CASE_STATUSES = ["Suspected", "Confirmed", "Recovered", "Critical"]
FOLLOW_UP_STATUSES = ["Pending", "In Progress", "Completed"]
GENDERS = ["Male", "Female", "Other"]

DEFAULT_CASE_STATUS = "Suspected"
DEFAULT_FOLLOW_UP_STATUS = "Pending"


class CaseNotFound(Exception):
    pass


@dataclass(eq=False)
class FollowUpRecord:
    """One entry of a case's follow-up log. Never changed once logged."""
    id: str
    date: date
    status: str               # one of FOLLOW_UP_STATUSES
    remarks: str
    added_by: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "status": self.status,
            "remarks": self.remarks,
            "added_by": self.added_by,
        }


@dataclass(eq=False)
class Case:
    id: str
    patient_name: str
    age: int
    gender: str               # one of GENDERS
    address: str
    location: str
    diagnosis_date: date
    status: str               # one of CASE_STATUSES
    contact_number: str
    follow_up_status: str = DEFAULT_FOLLOW_UP_STATUS
    follow_up_note: Optional[str] = None
    last_follow_up_date: Optional[date] = None
    history: List[FollowUpRecord] = field(default_factory=list)  # newest first
    events: List = field(default_factory=list)

    def __eq__(self, other):
        if not isinstance(other, Case):
            return False
        return other.id == self.id

    def __hash__(self):
        return hash(self.id)

    @classmethod
    def report(cls, patient_name: str, age: int, gender: str, address: str, location: str,
               diagnosis_date: date, status: str, contact_number: str) -> "Case":
        """New case report: pending follow-up and an empty history."""
        if status not in CASE_STATUSES:
            raise ValueError(f"Unknown case status: {status}")
        if gender not in GENDERS:
            raise ValueError(f"Unknown gender: {gender}")
        new_case = cls(
            id=str(uuid4()),
            patient_name=patient_name,
            age=age,
            gender=gender,
            address=address,
            location=location,
            diagnosis_date=diagnosis_date,
            status=status,
            contact_number=contact_number,
        )
        new_case.events.append(CaseCreated(case_id=new_case.id, status=new_case.status))
        return new_case

    def log_follow_up(self, status: str, remarks: str, on: date, added_by: Optional[str] = None) -> FollowUpRecord:
        """
        Append a follow-up to the front of the history.

        The case's current follow-up fields are taken from the new entry.
        """
        if status not in FOLLOW_UP_STATUSES:
            raise ValueError(f"Unknown follow-up status: {status}")
        if not remarks or not remarks.strip():
            raise ValueError("Remarks are required")

        record = FollowUpRecord(
            id=str(uuid4()),
            date=on,
            status=status,
            remarks=remarks,
            added_by=added_by,
        )
        self.history.insert(0, record)
        self.follow_up_status = record.status
        self.follow_up_note = record.remarks
        self.last_follow_up_date = record.date

        self.events.append(FollowUpLogged(case_id=self.id, record_id=record.id, status=record.status))
        return record

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "patient_name": self.patient_name,
            "age": self.age,
            "gender": self.gender,
            "address": self.address,
            "location": self.location,
            "diagnosis_date": self.diagnosis_date,
            "status": self.status,
            "contact_number": self.contact_number,
            "follow_up_status": self.follow_up_status,
            "follow_up_note": self.follow_up_note,
            "last_follow_up_date": self.last_follow_up_date,
            "history": [record.to_dict() for record in self.history],
        }
