import logging
from typing import List

from case.domain import commands, events
from case.domain.domain import Case, CaseNotFound
from case.service_layer.unit_of_work import AbstractCaseUnitOfWork
from case.services.csv_import import parse_cases_csv

logger = logging.getLogger(__name__)


def create_case(command: commands.CreateCase, uow: AbstractCaseUnitOfWork) -> str:
    """
    Report a new case. It starts with a pending follow-up and no history.

    Returns:
        case_id: The ID of the created case
    """
    logger.info(f"Processing CreateCase command for patient {command.patient_name}")

    with uow:
        new_case = Case.report(
            patient_name=command.patient_name,
            age=command.age,
            gender=command.gender,
            address=command.address,
            location=command.location,
            diagnosis_date=command.diagnosis_date,
            status=command.status,
            contact_number=command.contact_number,
        )
        case_id = uow.cases.add(new_case)
        uow.commit()

    logger.info(f"Committed case {case_id} to database")
    return case_id


def log_follow_up(command: commands.LogFollowUp, uow: AbstractCaseUnitOfWork) -> str:
    """
    Append a follow-up entry to a case's history.

    Returns:
        record_id of the new entry

    Raises:
        CaseNotFound: If the case does not exist
        ValueError: If the remarks are blank or the status is unknown
    """
    with uow:
        case = uow.cases.get(command.case_id)
        if not case:
            raise CaseNotFound(f"Case with ID {command.case_id} not found")

        record = case.log_follow_up(
            status=command.status,
            remarks=command.remarks,
            on=command.date,
            added_by=command.added_by,
        )
        record_id = record.id
        uow.commit()

    logger.info(f"Logged follow-up {record_id} on case {command.case_id}")
    return record_id


def import_cases(command: commands.ImportCases, uow: AbstractCaseUnitOfWork) -> List[str]:
    """
    Create one case per usable CSV row. Short rows are skipped silently.

    Returns:
        IDs of the created cases, in file order
    """
    rows = parse_cases_csv(command.csv_text)

    case_ids = []
    with uow:
        for row in rows:
            new_case = Case.report(
                patient_name=row.patient_name,
                age=row.age,
                gender=row.gender,
                address=row.address,
                location=row.location,
                diagnosis_date=row.diagnosis_date,
                status=row.status,
                contact_number=row.contact_number,
            )
            case_ids.append(uow.cases.add(new_case))
        uow.commit()

    logger.info(f"Imported {len(case_ids)} cases from CSV")
    return case_ids


def log_case_created(event: events.CaseCreated, uow: AbstractCaseUnitOfWork):
    logger.info(f"Case {event.case_id} reported as {event.status}")


def log_follow_up_logged(event: events.FollowUpLogged, uow: AbstractCaseUnitOfWork):
    logger.info(f"Case {event.case_id} follow-up now {event.status} (record {event.record_id})")
