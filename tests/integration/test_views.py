"""
Integration tests for the case views - following Cosmic Python pattern.

Tests verify that:
1. Commands create cases through the message bus
2. The dashboard view aggregates status counts in SQL
3. Follow-ups reach the cases table and the follow-up log
"""
from datetime import date

from sqlalchemy import text

from case.domain.commands import CreateCase, LogFollowUp
from case.service_layer import messagebus
from case import views


def create_case(uow, name, status):
    [case_id] = messagebus.handle(
        CreateCase(
            patient_name=name,
            age=30,
            gender="Female",
            address="Old Market",
            location="Rural Block A",
            diagnosis_date=date(2024, 1, 15),
            status=status,
        ),
        uow,
    )
    return case_id


def test_dashboard_counts_cases_per_status(case_uow):
    """
    Following Cosmic Python pattern:
    1. Execute commands via messagebus
    2. Call view function
    3. Assert expected results
    """
    create_case(case_uow, "A", "Confirmed")
    create_case(case_uow, "B", "Confirmed")
    create_case(case_uow, "C", "Critical")

    dashboard = views.get_dashboard(case_uow)

    assert dashboard["total"] == 3
    by_status = {kpi["status"]: kpi for kpi in dashboard["kpis"]}
    assert by_status["Confirmed"]["value"] == 2
    assert by_status["Confirmed"]["percent"] == 67
    assert by_status["Critical"]["percent"] == 33
    assert by_status["Suspected"]["value"] == 0
    assert dashboard["queried_at"] is not None


def test_dashboard_of_empty_table(case_uow):
    dashboard = views.get_dashboard(case_uow)

    assert dashboard["total"] == 0
    assert [kpi["percent"] for kpi in dashboard["kpis"]] == [0, 0, 0, 0]


def test_follow_up_is_written_to_both_tables(case_uow):
    case_id = create_case(case_uow, "A", "Suspected")

    messagebus.handle(
        LogFollowUp(case_id=case_id, status="In Progress", remarks="Fever subsiding", date=date(2024, 1, 17)),
        case_uow,
    )

    with case_uow:
        row = case_uow.session.execute(
            text("SELECT follow_up_status, follow_up_note, last_follow_up_date FROM cases WHERE id = :id"),
            {"id": case_id},
        ).fetchone()
        assert row[0] == "In Progress"
        assert row[1] == "Fever subsiding"

        count = case_uow.session.execute(
            text("SELECT COUNT(*) FROM follow_up_records WHERE case_id = :id"),
            {"id": case_id},
        ).scalar()
        assert count == 1
