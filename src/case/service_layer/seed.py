"""Sample cases loaded into an empty database."""

import logging
from datetime import date, timedelta

from case.domain.domain import Case, FollowUpRecord
from case.service_layer.unit_of_work import AbstractCaseUnitOfWork

logger = logging.getLogger(__name__)


def sample_cases(today: date = None):
    today = today or date.today()
    yesterday = today - timedelta(days=1)

    return [
        Case(
            id="101",
            patient_name="Rahul Verma",
            age=34,
            gender="Male",
            address="12/B Gandhi Nagar",
            location="Central District",
            diagnosis_date=today - timedelta(days=2),
            status="Confirmed",
            contact_number="+1 555 0101",
            follow_up_status="Pending",
            follow_up_note="Initial home visit scheduled.",
            last_follow_up_date=yesterday,
            history=[
                FollowUpRecord(
                    id="h1",
                    date=yesterday,
                    status="Pending",
                    remarks="Initial home visit scheduled.",
                ),
            ],
        ),
        Case(
            id="102",
            patient_name="Priya Sharma",
            age=28,
            gender="Female",
            address="Sector 4, Housing Board",
            location="West Hills PHC",
            diagnosis_date=today - timedelta(days=5),
            status="Recovered",
            contact_number="+1 555 0202",
            follow_up_status="Completed",
            follow_up_note="Platelet count normal, case closed.",
            last_follow_up_date=today,
            history=[
                FollowUpRecord(
                    id="h2",
                    date=today,
                    status="Completed",
                    remarks="Platelet count normal, case closed.",
                ),
            ],
        ),
        Case(
            id="103",
            patient_name="Amit Singh",
            age=45,
            gender="Male",
            address="Near Old Market",
            location="North Sector Block 4",
            diagnosis_date=yesterday,
            status="Suspected",
            contact_number="+1 555 0303",
            follow_up_status="In Progress",
            follow_up_note="Awaiting NS1 test result.",
            last_follow_up_date=yesterday,
            history=[
                FollowUpRecord(
                    id="h3",
                    date=yesterday,
                    status="In Progress",
                    remarks="Awaiting NS1 test result.",
                ),
            ],
        ),
        Case(
            id="104",
            patient_name="Sita Devi",
            age=62,
            gender="Female",
            address="Village Kherki",
            location="Rural Block A",
            diagnosis_date=today,
            status="Critical",
            contact_number="+1 555 0404",
            follow_up_status="Pending",
        ),
    ]


def seed_cases(uow: AbstractCaseUnitOfWork) -> int:
    """Add the sample cases when there are none. Returns the number added."""
    with uow:
        if uow.cases.list():
            return 0
        # listing is newest first, so insert in reverse to keep the sample order
        cases = sample_cases()
        for case in reversed(cases):
            uow.cases.add(case)
        uow.commit()

    logger.info(f"Seeded {len(cases)} sample cases")
    return len(cases)
