"""Unit tests for the case domain model"""
from datetime import date

import pytest

from case.domain.domain import Case, FollowUpRecord
from case.domain.events import CaseCreated, FollowUpLogged
from case.service_layer.seed import sample_cases


def make_case(**kwargs):
    defaults = dict(
        id="101",
        patient_name="Rahul Verma",
        age=34,
        gender="Male",
        address="12/B Gandhi Nagar",
        location="Central District",
        diagnosis_date=date(2024, 1, 15),
        status="Confirmed",
        contact_number="+1 555 0101",
    )
    defaults.update(kwargs)
    return Case(**defaults)


def test_reported_case_starts_pending_with_empty_history():
    case = Case.report(
        patient_name="Priya Sharma",
        age=28,
        gender="Female",
        address="Flat 402, Housing Board",
        location="West Hills PHC",
        diagnosis_date=date(2024, 1, 16),
        status="Suspected",
        contact_number="+1 555 0102",
    )

    assert case.follow_up_status == "Pending"
    assert case.follow_up_note is None
    assert case.last_follow_up_date is None
    assert case.history == []
    assert case.events == [CaseCreated(case_id=case.id, status="Suspected")]


@pytest.mark.parametrize("field,value", [("status", "Dead"), ("gender", "Unknown")])
def test_report_rejects_values_outside_the_enumerations(field, value):
    kwargs = dict(
        patient_name="X", age=1, gender="Male", address="", location="",
        diagnosis_date=date(2024, 1, 1), status="Suspected", contact_number="",
    )
    kwargs[field] = value

    with pytest.raises(ValueError):
        Case.report(**kwargs)


def test_follow_up_is_prepended_and_becomes_current():
    case = make_case(history=[FollowUpRecord(id="h1", date=date(2024, 1, 16), status="In Progress", remarks="Visited")])

    record = case.log_follow_up("Completed", "Platelets normal", date(2024, 1, 20), added_by="Demo User")

    assert [r.id for r in case.history] == [record.id, "h1"]
    assert case.follow_up_status == "Completed"
    assert case.follow_up_note == "Platelets normal"
    assert case.last_follow_up_date == date(2024, 1, 20)
    assert record.added_by == "Demo User"
    assert case.events == [FollowUpLogged(case_id="101", record_id=record.id, status="Completed")]


def test_follow_up_keeps_earlier_entries_untouched():
    earlier = FollowUpRecord(id="h1", date=date(2024, 1, 16), status="In Progress", remarks="Visited")
    case = make_case(history=[earlier])

    case.log_follow_up("Completed", "Done", date(2024, 1, 20))

    assert case.history[1] is earlier
    assert earlier.remarks == "Visited"


@pytest.mark.parametrize("remarks", ["", "   "])
def test_follow_up_requires_remarks(remarks):
    case = make_case()

    with pytest.raises(ValueError):
        case.log_follow_up("Pending", remarks, date(2024, 1, 20))

    assert case.history == []
    assert case.follow_up_status == "Pending"


def test_follow_up_rejects_unknown_status():
    with pytest.raises(ValueError):
        make_case().log_follow_up("Closed", "note", date(2024, 1, 20))


def test_to_dict_includes_history_newest_first():
    case = make_case()
    case.log_follow_up("In Progress", "first", date(2024, 1, 17))
    case.log_follow_up("Completed", "second", date(2024, 1, 18))

    data = case.to_dict()

    assert [h["remarks"] for h in data["history"]] == ["second", "first"]
    assert data["follow_up_note"] == "second"


def test_sample_cases_take_current_follow_up_from_newest_entry():
    for case in sample_cases(today=date(2024, 1, 20)):
        if case.history:
            newest = case.history[0]
            assert (case.follow_up_status, case.follow_up_note, case.last_follow_up_date) == (
                newest.status, newest.remarks, newest.date,
            )
        else:
            assert case.follow_up_status == "Pending"
            assert case.last_follow_up_date is None
